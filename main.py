import argparse
import logging
import sys

import pygame
from tetris_config import CONFIG, Settings
from tetris_engine import Engine
from tetris_input import dispatch
from tetris_layout import compute_dims
from tetris_overlay import draw_game_over, draw_paused
from tetris_render import RenderAssets

log = logging.getLogger("tetris")


def get_args(argv=None):
    parser = argparse.ArgumentParser("""Falling-block puzzle (pygame)""")
    parser.add_argument("--cols", type=int, default=None)
    parser.add_argument("--rows", type=int, default=None)
    parser.add_argument("--fall-ms", dest="fall_interval_ms", type=float, default=None,
                        help="gravity interval in milliseconds")
    parser.add_argument("--cell-size", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None,
                        help="seed the piece randomizer for a reproducible game")
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main(argv=None):
    args = get_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s [%(levelname)s] %(message)s")
    settings = Settings.from_config(
        CONFIG, cols=args.cols, rows=args.rows, fall_interval_ms=args.fall_interval_ms,
        cell_size=args.cell_size, seed=args.seed)
    log.info("settings: %s", settings)

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    dims = compute_dims(settings)
    screen = recreate_window(dims)
    pygame.display.set_caption("Lanken Tetris")
    font = pygame.font.SysFont(None, 24)
    big_font = pygame.font.SysFont(None, 36)
    render = RenderAssets(dims, font, settings.cols, settings.rows)
    clock = pygame.time.Clock()

    engine = Engine(settings)

    def on_frame(snap):
        render.draw(screen, snap)
        if snap.game_over:
            draw_game_over(screen, big_font, dims)
        elif snap.paused:
            draw_paused(screen, big_font, dims)
        pygame.display.flip()

    engine.subscribe(on_frame)

    while True:
        dt = clock.tick(settings.fps)
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                dispatch(engine, e.key)
        engine.tick(dt)


if __name__ == '__main__':
    main()
