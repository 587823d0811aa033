"""
game_loop.py: Frame scheduling and the cancellable loop around the state machine.
"""

import logging
from typing import Callable, Dict, Optional, Protocol

from .data_models import GameSnapshot
from .game_state import GameStateMachine

logger = logging.getLogger(__name__)

FrameCallback = Callable[[float], None]


class FrameScheduler(Protocol):
    def request_frame(self, callback: FrameCallback) -> int: ...

    def cancel_frame(self, handle: int) -> None: ...


class FrameQueue:
    """One-shot frame callbacks keyed by handle, like requestAnimationFrame."""

    def __init__(self):
        self._next_handle = 0
        self._pending: Dict[int, FrameCallback] = {}

    @property
    def pending(self) -> int:
        return len(self._pending)

    def request_frame(self, callback: FrameCallback) -> int:
        self._next_handle += 1
        self._pending[self._next_handle] = callback
        return self._next_handle

    def cancel_frame(self, handle: int):
        self._pending.pop(handle, None)

    def fire(self, timestamp_ms: float):
        # Callbacks requested while firing wait for the following frame
        due, self._pending = self._pending, {}
        for callback in due.values():
            callback(timestamp_ms)


class ManualFrameScheduler(FrameQueue):
    """Frames fire only when advance() is called."""

    def advance(self, timestamp_ms: float):
        self.fire(timestamp_ms)


class GameLoop:
    """
    Drives one state machine tick per scheduled frame.
    The next frame is requested only after the current tick has completed.
    """

    def __init__(self, machine: GameStateMachine, scheduler: FrameScheduler,
                 before_frame: Optional[Callable[[], None]] = None,
                 after_frame: Optional[Callable[[GameSnapshot], None]] = None):
        self.machine = machine
        self.scheduler = scheduler
        self.before_frame = before_frame
        self.after_frame = after_frame
        self._handle: Optional[int] = None
        self._stopped = True

    @property
    def running(self) -> bool:
        return not self._stopped

    def start(self):
        if not self._stopped:
            return
        self._stopped = False
        self.machine.clock.reset()
        self._handle = self.scheduler.request_frame(self._on_frame)
        logger.info("Game loop started")

    def stop(self):
        """Stops scheduling and cancels any frame still waiting to fire."""
        if self._stopped:
            return
        self._stopped = True
        if self._handle is not None:
            self.scheduler.cancel_frame(self._handle)
            self._handle = None
        logger.info("Game loop stopped")

    def _on_frame(self, timestamp_ms: float):
        self._handle = None
        if self._stopped:
            return

        if self.before_frame:
            self.before_frame()
            if self._stopped:
                return

        snapshot = self.machine.frame(timestamp_ms)
        if self.after_frame:
            self.after_frame(snapshot)

        if not self._stopped:
            self._handle = self.scheduler.request_frame(self._on_frame)
