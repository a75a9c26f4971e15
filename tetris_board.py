"""Board grid plus collision helpers: is_valid_move, ghost_y"""
from typing import List, Optional, Sequence, Tuple
from tetris_piece import Piece

Cell = Optional[str]


class Board:
    """Fixed rows x cols grid; None marks an empty cell, otherwise the piece token."""

    def __init__(self, cols: int, rows: int):
        if cols <= 0 or rows <= 0:
            raise ValueError(f"board must be at least 1x1, got {cols}x{rows}")
        self.cols = cols
        self.rows = rows
        self.grid: List[List[Cell]] = [[None] * cols for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]]) -> "Board":
        if not rows or not rows[0]:
            raise ValueError("board rows must not be empty")
        width = len(rows[0])
        if any(len(r) != width for r in rows):
            raise ValueError("board rows must all have the same length")
        b = cls(width, len(rows))
        b.grid = [list(r) for r in rows]
        return b

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.cols and 0 <= row < self.rows

    def is_empty(self, col: int, row: int) -> bool:
        return self.in_bounds(col, row) and self.grid[row][col] is None

    def merge(self, piece: Piece):
        """Write the piece token into the board.

        Blocks still above row 0 are dropped, they never become part of the board.
        """
        for x, y in piece.blocks():
            if y >= 0:
                self.grid[y][x] = piece.token

    def clear_full_rows(self) -> int:
        """Remove every full row at once and refill from the top; return the count."""
        kept = [row for row in self.grid if any(c is None for c in row)]
        cleared = self.rows - len(kept)
        if cleared:
            self.grid = [[None] * self.cols for _ in range(cleared)] + kept
        return cleared

    def reset(self):
        self.grid = [[None] * self.cols for _ in range(self.rows)]

    def cells(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(row) for row in self.grid)


def is_valid_move(piece: Piece, board: Board) -> bool:
    """True if every block is inside the walls, above the floor and on an empty cell.

    Rows above the board (y < 0) are allowed so pieces can spawn partly hidden.
    """
    for x, y in piece.blocks():
        if x < 0 or x >= board.cols or y >= board.rows:
            return False
        if y >= 0 and board.grid[y][x] is not None:
            return False
    return True


def ghost_y(board: Board, piece: Piece) -> int:
    """Anchor row the piece would come to rest at if dropped straight down."""
    t = Piece(piece.t, piece.shape, piece.x, piece.y)
    while True:
        t.y += 1
        if not is_valid_move(t, board):
            return t.y - 1
