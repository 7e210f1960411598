"""
Game loop controller.

Owns the GameState (board, active piece, clock baselines) and drives it:
gravity on a fixed interval, lock/merge/sweep/respawn, silent restart when a
new piece cannot spawn, and start/stop/restart of the two tick sources
(frame scheduling and the once-a-second clock display refresh).

States: uninitialized -> running <-> paused. Game over is not a state of its
own: the run is reset on the spot and keeps running.
"""
from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

import pygame

from tetris_board import Board, collide, merge, new_board, sweep
from tetris_config import CONFIG, COLS, ROWS
from tetris_piece import Piece, try_move, try_rotate
from tetris_scheduler import FrameScheduler, IntervalTimer
from tetris_shapes import Shape, random_shape, shape_name

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Frame:
    """Read-only view handed to the renderer."""
    board: Tuple[Tuple[int, ...], ...]
    shape: Shape
    x: int
    y: int


@dataclass
class GameState:
    board: Board
    piece: Piece
    last_drop: int
    started_at: int
    paused: bool = False


class Game:
    def __init__(self, renderer=None, timer_display=None,
                 frames: Optional[FrameScheduler] = None,
                 clock_timer: Optional[IntervalTimer] = None,
                 clock: Optional[Callable[[], int]] = None,
                 rng: Optional[random.Random] = None,
                 cols: int = COLS, rows: int = ROWS,
                 gravity_ms: int = CONFIG["GRAVITY_INTERVAL_MS"]):
        self.renderer = renderer
        self.timer_display = timer_display
        self.frames = frames or FrameScheduler()
        self.clock_timer = clock_timer or IntervalTimer(CONFIG["TIMER_REFRESH_MS"], self.refresh_timer)
        self.clock = clock or pygame.time.get_ticks
        self.rng = rng
        self.cols, self.rows = cols, rows
        self.gravity_ms = gravity_ms
        self.state: Optional[GameState] = None

    @property
    def status(self) -> str:
        if self.state is None:
            return "uninitialized"
        return "paused" if self.state.paused else "running"

    # ---------- Lifecycle ----------
    def initialize(self):
        """Fresh board and piece, clocks reset, running. Destroys the current run."""
        now = self.clock()
        board = new_board(self.cols, self.rows)
        self.state = GameState(board, self._spawn(), last_drop=now, started_at=now)
        self.refresh_timer()
        self.clock_timer.start()
        log.info("new game on a %dx%d board", self.cols, self.rows)

    def start(self):
        if self.state is None:
            self.initialize()
            self._frame(self.clock())
        else:
            self.resume()

    def pause(self):
        self.frames.cancel()
        self.clock_timer.cancel()
        if self.state is not None and not self.state.paused:
            self.state.paused = True
            log.info("paused")

    stop = pause

    def resume(self):
        st = self.state
        if st is None or not st.paused:
            return
        st.paused = False
        now = self.clock()
        # Same expression as the browser version: evaluates to last_drop, paused time is not credited.
        st.last_drop = now - (now - st.last_drop)
        self.clock_timer.start()
        log.info("resumed")
        self._frame(now)

    def restart(self):
        self.pause()
        self.initialize()
        self._frame(self.clock())

    # ---------- Loop ----------
    def tick(self, now: int):
        st = self.state
        if st is None or st.paused:
            return
        if now - st.last_drop > self.gravity_ms:
            st.last_drop = now
            self.gravity_step()
        if self.renderer is not None:
            self.renderer.draw(self.snapshot())

    def _frame(self, now: int):
        self.tick(now)
        if self.status == "running":
            self.frames.request(self._frame)

    def gravity_step(self) -> bool:
        """Drop one row; lock, sweep and respawn when blocked. True if the piece moved."""
        st = self.state
        if st is None:
            return False
        if try_move(st.board, st.piece, 0, 1):
            return True
        merge(st.board, st.piece.x, st.piece.y, st.piece.shape)
        cleared = sweep(st.board)
        log.debug("locked %s at (%d, %d), cleared %d", shape_name(st.piece.shape), st.piece.x, st.piece.y, cleared)
        st.piece = self._spawn()
        if collide(st.board, st.piece.x, st.piece.y, st.piece.shape):
            log.info("spawn blocked, restarting")
            was_paused = st.paused
            self.initialize()
            if was_paused:
                self.pause()
        return False

    def _spawn(self) -> Piece:
        return Piece.spawn(random_shape(self.rng), self.cols)

    # ---------- Input actions ----------
    def try_move(self, dx: int, dy: int) -> bool:
        if self.state is None:
            return False
        return try_move(self.state.board, self.state.piece, dx, dy)

    def try_rotate(self) -> bool:
        if self.state is None:
            return False
        return try_rotate(self.state.board, self.state.piece)

    def move_left(self) -> bool:
        return self.try_move(-1, 0)

    def move_right(self) -> bool:
        return self.try_move(1, 0)

    def soft_drop(self) -> bool:
        return self.gravity_step()

    def rotate(self) -> bool:
        return self.try_rotate()

    # ---------- Views ----------
    def elapsed_seconds(self, now: int) -> int:
        if self.state is None:
            return 0
        return (now - self.state.started_at) // 1000

    def refresh_timer(self):
        if self.timer_display is not None:
            self.timer_display.update(self.elapsed_seconds(self.clock()))

    def snapshot(self) -> Optional[Frame]:
        st = self.state
        if st is None:
            return None
        return Frame(tuple(tuple(r) for r in st.board), st.piece.shape, st.piece.x, st.piece.y)
