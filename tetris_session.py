"""Session aggregate mutated by the engine, and the read-only snapshot it hands out"""
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional, Tuple

from tetris_board import Board
from tetris_piece import Piece


class Phase(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass
class Session:
    board: Board
    current: Piece
    next: Piece
    score: int = 0
    lines: int = 0
    accumulator_ms: float = 0.0
    phase: Phase = Phase.RUNNING
    paused: bool = False

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER


@dataclass(frozen=True)
class Snapshot:
    """Game state for rendering"""
    board: Tuple[Tuple[Optional[str], ...], ...]
    blocks: FrozenSet[Tuple[int, int]]
    token: str
    ghost_blocks: FrozenSet[Tuple[int, int]]
    next_type: str
    score: int
    lines: int
    game_over: bool
    paused: bool
