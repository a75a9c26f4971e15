"""
Game loop / clock for the falling-block engine.

The engine owns a single Session and advances it through two kinds of events:

  • tick(dt_ms): wall-clock time since the previous frame. Time accumulates
    until it exceeds the fall interval, then one gravity step runs: the
    piece either moves down a row, or locks (merge, clear, score, promote
    next, spawn check) and possibly ends the game.
  • commands (move_left, move_right, soft_drop, rotate, hard_drop): applied
    immediately with try-then-revert against the board.

Once the phase is GAME_OVER nothing mutates any more; ticks still notify
render listeners so the host can keep drawing the terminal overlay.
"""
import logging
from enum import Enum
from typing import Callable, List, Optional

from tetris_board import Board, ghost_y, is_valid_move
from tetris_config import Settings
from tetris_piece import Piece
from tetris_rng import Randomizer
from tetris_session import Phase, Session, Snapshot

log = logging.getLogger(__name__)

RenderListener = Callable[[Snapshot], None]


class Outcome(Enum):
    IDLE = "idle"
    MOVED = "moved"
    LOCKED = "locked"
    GAME_OVER = "game_over"


class Engine:
    def __init__(self, settings: Optional[Settings] = None, rng: Optional[Randomizer] = None):
        self.settings = settings or Settings()
        self.rng = rng or Randomizer(seed=self.settings.seed)
        self.listeners: List[RenderListener] = []
        board = Board(self.settings.cols, self.settings.rows)
        self.session = Session(board, self._new_piece(), self._new_piece())

    def _new_piece(self) -> Piece:
        return Piece.spawn(self.rng.next_piece(), self.settings.spawn_x, self.settings.spawn_y)

    @property
    def active(self) -> bool:
        return not self.session.game_over and not self.session.paused

    # ---------- render hooks ----------
    def subscribe(self, listener: RenderListener):
        self.listeners.append(listener)

    def snapshot(self) -> Snapshot:
        s = self.session
        gy = ghost_y(s.board, s.current)
        return Snapshot(
            board=s.board.cells(),
            blocks=frozenset(s.current.blocks()),
            token=s.current.token,
            ghost_blocks=frozenset((x, y + gy - s.current.y) for x, y in s.current.blocks()),
            next_type=s.next.t,
            score=s.score,
            lines=s.lines,
            game_over=s.game_over,
            paused=s.paused,
        )

    def _notify(self):
        if not self.listeners:
            return
        snap = self.snapshot()
        for listener in self.listeners:
            listener(snap)

    # ---------- clock ----------
    def tick(self, dt_ms: float) -> Outcome:
        if dt_ms < 0:
            raise ValueError(f"elapsed time must not be negative, got {dt_ms}")
        s = self.session
        outcome = Outcome.GAME_OVER if s.game_over else Outcome.IDLE
        if self.active:
            s.accumulator_ms += dt_ms
            if s.accumulator_ms > self.settings.fall_interval_ms:
                outcome = self._gravity_step()
                s.accumulator_ms = 0.0
        self._notify()
        return outcome

    def _gravity_step(self) -> Outcome:
        if self._shift(0, 1):
            return Outcome.MOVED
        return self._lock()

    def _lock(self) -> Outcome:
        """Merge the active piece, clear rows, promote next and check the spawn."""
        s = self.session
        s.board.merge(s.current)
        log.debug("locked %s at (%d, %d)", s.current.t, s.current.x, s.current.y)
        cleared = s.board.clear_full_rows()
        if cleared:
            s.score += self.settings.row_bonus * cleared
            s.lines += cleared
            log.info("cleared %d row(s), score %d", cleared, s.score)
        s.current = s.next
        s.next = self._new_piece()
        log.debug("spawned %s, next %s", s.current.t, s.next.t)
        if not is_valid_move(s.current, s.board):
            s.phase = Phase.GAME_OVER
            log.info("game over: score %d, lines %d", s.score, s.lines)
            return Outcome.GAME_OVER
        return Outcome.LOCKED

    # ---------- commands ----------
    def _shift(self, dx: int, dy: int) -> bool:
        p = self.session.current
        p.x += dx
        p.y += dy
        if is_valid_move(p, self.session.board):
            return True
        p.x -= dx
        p.y -= dy
        return False

    def move_left(self) -> bool:
        return self.active and self._shift(-1, 0)

    def move_right(self) -> bool:
        return self.active and self._shift(1, 0)

    def soft_drop(self) -> bool:
        return self.active and self._shift(0, 1)

    def rotate(self) -> bool:
        if not self.active:
            return False
        p = self.session.current
        prev = p.shape
        p.rotate()
        if is_valid_move(p, self.session.board):
            return True
        p.shape = prev
        return False

    def hard_drop(self) -> Outcome:
        """Drop straight to the landing row and lock immediately."""
        if not self.active:
            return Outcome.GAME_OVER if self.session.game_over else Outcome.IDLE
        s = self.session
        s.current.y = ghost_y(s.board, s.current)
        s.accumulator_ms = 0.0
        return self._lock()

    def toggle_pause(self) -> bool:
        s = self.session
        if not s.game_over:
            s.paused = not s.paused
        return s.paused

    def restart(self):
        s = self.session
        s.board.reset()
        s.current = self._new_piece()
        s.next = self._new_piece()
        s.score = s.lines = 0
        s.accumulator_ms = 0.0
        s.phase = Phase.RUNNING
        s.paused = False
        log.info("restarted")
