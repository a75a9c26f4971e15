"""Default tuning values and the validated Settings built from them"""
from dataclasses import dataclass, fields
from typing import Optional
from tetris_piece import SHAPES

MAX_PIECE_W = max(len(row) for shape in SHAPES.values() for row in shape)
MAX_PIECE_H = max(len(shape) for shape in SHAPES.values())

CONFIG = {
    "COLS": 10,
    "ROWS": 20,
    "FALL_INTERVAL_MS": 500,
    "ROW_BONUS": 10,
    "SPAWN_X": 3,
    "SPAWN_Y": 0,
    "CELL_SIZE": 30,
    "FPS": 60,
    "SEED": None,
}


@dataclass(frozen=True)
class Settings:
    cols: int = 10
    rows: int = 20
    fall_interval_ms: float = 500
    row_bonus: int = 10
    spawn_x: int = 3
    spawn_y: int = 0
    cell_size: int = 30
    fps: int = 60
    seed: Optional[int] = None

    def __post_init__(self):
        if self.cols <= 0 or self.rows <= 0:
            raise ValueError(f"board must be at least 1x1, got {self.cols}x{self.rows}")
        if self.fall_interval_ms <= 0:
            raise ValueError(f"fall interval must be positive, got {self.fall_interval_ms}")
        if self.row_bonus < 0:
            raise ValueError(f"row bonus must not be negative, got {self.row_bonus}")
        if not 0 <= self.spawn_x < self.cols:
            raise ValueError(f"spawn column {self.spawn_x} outside board of width {self.cols}")
        if self.spawn_y >= self.rows:
            raise ValueError(f"spawn row {self.spawn_y} below board of height {self.rows}")
        if self.spawn_x + MAX_PIECE_W > self.cols:
            raise ValueError(f"pieces {MAX_PIECE_W} wide do not fit at spawn column {self.spawn_x} on a board {self.cols} wide")
        if self.spawn_y + MAX_PIECE_H > self.rows:
            raise ValueError(f"pieces {MAX_PIECE_H} tall do not fit at spawn row {self.spawn_y} on a board {self.rows} high")
        if self.cell_size <= 0 or self.fps <= 0:
            raise ValueError("cell size and fps must be positive")

    @classmethod
    def from_config(cls, config=None, **overrides) -> "Settings":
        """Build settings from an upper-case CONFIG style dict plus keyword overrides.

        Overrides set to None are ignored so argparse defaults can be passed through.
        """
        config = CONFIG if config is None else config
        values = {}
        for f in fields(cls):
            key = f.name.upper()
            if key in config:
                values[f.name] = config[key]
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
