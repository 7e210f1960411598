"""
Tick sources for the game loop.

- FrameScheduler: a requestAnimationFrame-style slot holding at most one
  pending frame callback. The main loop drains it once per display frame.
- IntervalTimer: a fixed-interval pygame timer event (used for the clock
  display). pygame keeps one timer per event type, and the timer tracks
  whether it is armed, so there is never more than one live handle.
"""
from __future__ import annotations
import logging
from typing import Callable, Optional

import pygame

log = logging.getLogger(__name__)

TIMER_EVENT = pygame.USEREVENT + 1


class FrameScheduler:
    def __init__(self):
        self._pending: Optional[Callable[[int], None]] = None

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def request(self, callback: Callable[[int], None]):
        # replaces, never queues a second frame
        self._pending = callback

    def cancel(self):
        self._pending = None

    def run_pending(self, now: int) -> bool:
        cb, self._pending = self._pending, None
        if cb is None:
            return False
        cb(now)
        return True


class IntervalTimer:
    def __init__(self, interval_ms: int, callback: Callable[[], None], event_type: int = TIMER_EVENT):
        self.interval_ms = interval_ms
        self.callback = callback
        self.event_type = event_type
        self.active = False

    def start(self):
        if self.active:
            self.cancel()
        pygame.time.set_timer(self.event_type, self.interval_ms)
        self.active = True
        log.debug("timer %s armed every %d ms", self.event_type, self.interval_ms)

    def cancel(self):
        if not self.active:
            return
        pygame.time.set_timer(self.event_type, 0)
        self.active = False
        log.debug("timer %s cancelled", self.event_type)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Run the callback for our timer event. Stale events after cancel are dropped."""
        if event.type != self.event_type:
            return False
        if self.active:
            self.callback()
        return True
