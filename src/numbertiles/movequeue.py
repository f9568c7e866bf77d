# movequeue.py
# FIFO of pending moves, drained one mutating move at a time.
#
# After a move changes the board, draining pauses for a settle delay so that
# observers (animation, display) can catch up. The delay is handed to an
# injected Scheduler instead of a global timer.

import asyncio
import logging
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Deque, List, Optional

from .core import Direction

logger = logging.getLogger(__name__)

Completion = Callable[[bool], None]


@dataclass(frozen=True)
class MoveCommand:
    """A requested direction plus the callback told whether it changed the board."""
    direction: Direction
    completion: Completion


# --- Schedulers ---

class Scheduler(ABC):
    """Runs a callback once after a delay. Returned handles expose `cancel()`."""

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> Any:
        pass


class _ManualCall:
    def __init__(self, due: float, callback: Callable[[], None]):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler(Scheduler):
    """
    Scheduler driven by an explicit virtual clock.
    Nothing runs until `advance` is called, which makes timing deterministic.
    """

    def __init__(self):
        self.now = 0.0
        self._calls: List[_ManualCall] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> _ManualCall:
        call = _ManualCall(self.now + delay, callback)
        self._calls.append(call)
        return call

    @property
    def pending(self) -> int:
        return sum(1 for c in self._calls if not c.cancelled)

    def advance(self, seconds: float) -> int:
        """
        Moves the clock forward and runs every call that has come due, in order.
        Calls scheduled while advancing run too if they fall inside the window.
        Args:
            seconds (float): How far to move the clock.
        Returns:
            int: The number of callbacks run.
        """
        target = self.now + seconds
        ran = 0
        while True:
            due = [c for c in self._calls if not c.cancelled and c.due <= target]
            if not due:
                break
            call = min(due, key=lambda c: c.due)
            self._calls.remove(call)
            self.now = max(self.now, call.due)
            call.callback()
            ran += 1
        self.now = target
        self._calls = [c for c in self._calls if not c.cancelled]
        return ran


class AsyncioScheduler(Scheduler):
    """Schedules on a (single-threaded) asyncio event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)


# --- Queue ---

class MoveQueue:
    """
    Bounded FIFO of MoveCommands.

    Once `capacity` commands are waiting, new ones are dropped. A drain runs
    commands in order until one of them changes the board, then schedules the
    next drain `settle_delay` seconds later.
    """

    def __init__(
        self,
        perform: Callable[[Direction], bool],
        scheduler: Scheduler,
        capacity: int = 100,
        settle_delay: float = 0.3,
    ):
        self._perform = perform
        self._scheduler = scheduler
        self.capacity = capacity
        self.settle_delay = settle_delay
        self._commands: Deque[MoveCommand] = deque()
        self._timer: Any = None
        self._draining = False

    def __len__(self) -> int:
        return len(self._commands)

    @property
    def pending(self) -> bool:
        """True while a drain is scheduled but has not run yet."""
        return self._timer is not None

    def submit(self, command: MoveCommand) -> bool:
        if len(self._commands) >= self.capacity:
            logger.debug("Move queue full (%d), dropping %s", self.capacity, command.direction.name)
            return False

        self._commands.append(command)
        # Moves submitted from a completion wait for the current drain to finish
        if not self.pending and not self._draining:
            self.drain()
        return True

    def drain(self) -> None:
        self._timer = None
        self._draining = True
        changed = False

        try:
            while self._commands:
                command = self._commands.popleft()
                changed = self._perform(command.direction)
                command.completion(changed)
                if changed:
                    break
        finally:
            self._draining = False

        if changed:
            logger.debug("Board changed; next drain in %.3fs (%d queued)", self.settle_delay, len(self._commands))
            self._timer = self._scheduler.call_later(self.settle_delay, self.drain)

    def clear(self) -> None:
        self._commands.clear()
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
