"""Piece model, shape catalog and clockwise rotation"""
from dataclasses import dataclass
from typing import Dict, List, Set, Tuple

Shape = List[List[int]]

# Minimal bounding boxes, 1s are blocks
SHAPES: Dict[str, Shape] = {
    "I": [[1,1,1,1]],
    "Z": [[1,1,0],[0,1,1]],
    "S": [[0,1,1],[1,1,0]],
    "O": [[1,1],[1,1]],
    "J": [[1,0,0],[1,1,1]],
    "L": [[0,0,1],[1,1,1]],
    "T": [[0,1,0],[1,1,1]],
}

PIECES = list(SHAPES)

COLORS: Dict[str, str] = {
    "I": "#00FFFF",
    "Z": "#FF6464",
    "S": "#64FF64",
    "O": "#FFFF64",
    "J": "#FFA500",
    "L": "#A020F0",
    "T": "#6464FF",
}


def rotate_cw(m: Shape) -> Shape:
    return [list(r) for r in zip(*m[::-1])]


@dataclass
class Piece:
    t: str
    shape: Shape
    x: int
    y: int

    @staticmethod
    def spawn(t: str, x: int, y: int) -> "Piece":
        if t not in SHAPES:
            raise ValueError(f"unknown piece type {t!r}")
        return Piece(t, [r[:] for r in SHAPES[t]], x, y)

    @property
    def token(self) -> str:
        return self.t

    def blocks(self) -> Set[Tuple[int, int]]:
        """Board cells (col, row) covered by this piece at its current anchor."""
        return {(self.x + c, self.y + r)
                for r, row in enumerate(self.shape)
                for c, v in enumerate(row) if v}

    def rotate(self):
        # a fresh matrix, so a caller holding the old one can restore it by assignment
        self.shape = rotate_cw(self.shape)
