# SPDX-License-Identifier: MIT

import asyncio
import heapq
import logging
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)


class TimerHandle:
    """Cancellation handle returned for every scheduled task."""

    def __init__(
        self,
        name: str,
        deadline: int,
        callback: Callable[[], None],
    ) -> None:
        self.name = name
        self.deadline = deadline
        self._callback = callback
        self._cancelled = False
        self._fired = False
        self.cancel_hook: Optional[Callable[[], None]] = None

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def active(self) -> bool:
        return not self._cancelled and not self._fired

    def cancel(self) -> None:
        if not self.active:
            return
        self._cancelled = True
        if self.cancel_hook is not None:
            self.cancel_hook()
        logger.debug("cancelled timer %s", self.name)

    def fire(self) -> None:
        if not self.active:
            return
        self._fired = True
        self._callback()


class Scheduler(Protocol):
    def now(self) -> int:
        """Current scheduler time in milliseconds."""
        ...

    def call_later(
        self, delay_ms: int, callback: Callable[[], None], name: str = ""
    ) -> TimerHandle: ...


class ManualScheduler:
    """
    Virtual clock scheduler. Time only moves when advance() is called.

    Due tasks fire in deadline order (ties in scheduling order) and the clock
    reads the task's deadline while its callback runs, so tasks scheduled
    from a callback are timed relative to the moment it fired.
    """

    def __init__(self, start: int = 0) -> None:
        self._time = start
        self._sequence = 0
        self._queue: list[tuple[int, int, TimerHandle]] = []

    def now(self) -> int:
        return self._time

    def call_later(
        self, delay_ms: int, callback: Callable[[], None], name: str = ""
    ) -> TimerHandle:
        handle = TimerHandle(name, self._time + max(delay_ms, 0), callback)
        heapq.heappush(self._queue, (handle.deadline, self._sequence, handle))
        self._sequence += 1
        return handle

    def advance(self, ms: int) -> None:
        target = self._time + max(ms, 0)
        while self._queue and self._queue[0][0] <= target:
            deadline, _, handle = heapq.heappop(self._queue)
            if not handle.active:
                continue
            self._time = deadline
            handle.fire()
        self._time = target

    def run_until_idle(self) -> None:
        while self.pending():
            self.advance(self._queue[0][0] - self._time)

    def pending(self) -> list[str]:
        return [
            handle.name
            for _, _, handle in sorted(self._queue, key=lambda item: item[:2])
            if handle.active
        ]


class AsyncioScheduler:
    """Schedules tasks on a running asyncio event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def now(self) -> int:
        return int(self.loop.time() * 1000)

    def call_later(
        self, delay_ms: int, callback: Callable[[], None], name: str = ""
    ) -> TimerHandle:
        handle = TimerHandle(name, self.now() + max(delay_ms, 0), callback)
        loop_handle = self.loop.call_later(max(delay_ms, 0) / 1000, handle.fire)
        handle.cancel_hook = loop_handle.cancel
        return handle
