"""Full-board overlays for the terminal and paused states"""
import pygame
from tetris_layout import Dims


def _banner(screen: pygame.Surface, font: pygame.font.Font, dims: Dims, text: str, color):
    band = pygame.Surface((dims.board_w, 60), pygame.SRCALPHA)
    band.fill((0, 0, 0, 180))
    cy = dims.board_y + dims.board_h // 2
    screen.blit(band, (dims.board_x, cy - 30))
    msg = font.render(text, True, color)
    screen.blit(msg, msg.get_rect(center=(dims.board_x + dims.board_w // 2, cy)))


def draw_game_over(screen, font, dims):
    _banner(screen, font, dims, "GAME OVER (R to Restart)", (255, 0, 0))


def draw_paused(screen, font, dims):
    _banner(screen, font, dims, "PAUSED (P to Resume)", (220, 240, 255))
