"""Uniform piece randomizer"""
import random
from typing import Optional, Sequence
from tetris_piece import PIECES


class Randomizer:
    def __init__(self, types: Sequence[str] = PIECES, seed: Optional[int] = None):
        if not types:
            raise ValueError("piece catalog must not be empty")
        self.types = list(types)
        self.seed = seed
        self._random = random.Random(seed)

    def next_piece(self) -> str:
        return self._random.choice(self.types)
