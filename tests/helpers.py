from __future__ import annotations

from typing import Iterable, Sequence

from tetris_config import Settings
from tetris_engine import Engine


class FixedRandomizer:
    """Deals piece types from a list, repeating the last one when exhausted."""

    def __init__(self, types: Sequence[str]):
        self.types = list(types)
        self.dealt = 0

    def next_piece(self) -> str:
        t = self.types[min(self.dealt, len(self.types) - 1)]
        self.dealt += 1
        return t


def make_engine(types: Sequence[str] = ("O",), **settings) -> Engine:
    return Engine(Settings(**settings), FixedRandomizer(types))


def fill_row(board, row: int, token: str = "X", skip: Iterable[int] = ()):
    skip = set(skip)
    for col in range(board.cols):
        if col not in skip:
            board.grid[row][col] = token
