"""
Rendering helpers: draw an engine Snapshot to a pygame surface.

- Pre-render block cell Surfaces per piece token (solid + ghost outline).
- Pre-render the static background (grid + panel frame) once per Dims.
- Cache the locked-board surface; rebuild only when the board cells change.
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional
from tetris_layout import Dims
from tetris_piece import COLORS, SHAPES
from tetris_session import Snapshot


@dataclass
class HudCache:
    score: int = -1
    lines: int = -1
    next_type: str = ""
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    next_preview: Optional[pygame.Surface] = None
    controls: Optional[list] = None


class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, cols: int, rows: int):
        self.dims = dims
        self.font = font
        self.cols = cols
        self.rows = rows
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board_cells = None

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((0, 0, 0))
        grid_col = (17, 17, 17)
        for x in range(self.cols + 1):
            X = d.board_x + x * d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(self.rows + 1):
            Y = d.board_y + y * d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21, 25, 53), panel_rect)
        pygame.draw.rect(self.bg, (50, 60, 100), panel_rect, 1)
        self.pv_cell = max(14, int(d.cell * 0.75))
        self.pv_x = d.panel_x + 12
        self.pv_y = d.panel_y + 130

    # ---------- Cell sprites (solid + ghost outline) ----------
    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.ghost_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for t, hex_col in COLORS.items():
            col = pygame.Color(hex_col)
            s = pygame.Surface((c - 2, c - 2))
            s.fill(col)
            self.cell_surf[t] = s
            g = pygame.Surface((c - 8, c - 8), pygame.SRCALPHA)
            pygame.draw.rect(g, col, (0, 0, c - 8, c - 8), 2)
            self.ghost_surf[t] = g

    def cell_pos(self, bx: int, by: int, inset: int = 1):
        return (self.dims.board_x + bx * self.dims.cell + inset,
                self.dims.board_y + by * self.dims.cell + inset)

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, cells):
        """Rebuilds the "locked blocks" surface from board contents."""
        self.board_surface.fill((0, 0, 0, 0))
        c = self.dims.cell
        for y, row in enumerate(cells):
            for x, t in enumerate(row):
                if t:
                    self.board_surface.blit(self.cell_surf[t], (x * c + 1, y * c + 1))
        self._board_cells = cells

    # ---------- Whole frame ----------
    def draw(self, screen: pygame.Surface, snap: Snapshot):
        if snap.board != self._board_cells:
            self.rebuild_board_surface(snap.board)
        screen.blit(self.bg, (0, 0))
        screen.blit(self.board_surface, (self.dims.board_x, self.dims.board_y))
        if not snap.game_over:
            for bx, by in snap.ghost_blocks:
                if by >= 0:
                    screen.blit(self.ghost_surf[snap.token], self.cell_pos(bx, by, 4))
        for bx, by in snap.blocks:
            if 0 <= by < self.rows:
                screen.blit(self.cell_surf[snap.token], self.cell_pos(bx, by))
        self.draw_panel_hud(screen, snap.score, snap.lines, snap.next_type)

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, score: int, lines: int, next_type: str):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("LANKEN TETRIS", True, (197, 202, 233))
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"SCORE: {score}", True, (200, 210, 240))
        if lines != self.hud.lines:
            self.hud.lines = lines
            self.hud.lines_s = f.render(f"LINES: {lines}", True, (200, 210, 240))
        if next_type != self.hud.next_type:
            self.hud.next_type = next_type
            self.hud.next_preview = self._preview(next_type)
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 68))
        screen.blit(f.render("NEXT:", True, (200, 210, 240)), (d.panel_x + 12, d.panel_y + 104))
        screen.blit(self.hud.next_preview, (self.pv_x, self.pv_y))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, (200, 210, 240)),
                f.render("←/→ Move", True, (165, 175, 215)),
                f.render("↓ Soft drop", True, (165, 175, 215)),
                f.render("↑ Rotate", True, (165, 175, 215)),
                f.render("Space Hard drop", True, (165, 175, 215)),
                f.render("P Pause • R Restart", True, (165, 175, 215)),
            ]
        y = d.panel_y + 240
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20

    def _preview(self, t: str) -> pygame.Surface:
        s = pygame.Surface((self.pv_cell * 4, self.pv_cell * 4), pygame.SRCALPHA)
        shape = SHAPES[t]
        offx = (4 - len(shape[0])) // 2
        offy = (4 - len(shape)) // 2
        block = pygame.Surface((self.pv_cell - 2, self.pv_cell - 2))
        block.fill(pygame.Color(COLORS[t]))
        for y, row in enumerate(shape):
            for x, v in enumerate(row):
                if v:
                    s.blit(block, ((x + offx) * self.pv_cell + 1, (y + offy) * self.pv_cell + 1))
        return s
