"""
Scheduler Module - Host event loop abstraction for timed UI behaviour

Everything the page animates (typewriter ticks, the modal close delay, the
"focus after render" step) is a one-shot callback on a scheduler. Two
implementations are provided:

- ManualScheduler: virtual clock, advanced explicitly. Deterministic, used by
  the tests and to precompute the typewriter timeline served to the browser.
- AsyncioScheduler: real timers on an asyncio event loop.
"""

import asyncio
import heapq
import itertools
from typing import Callable, List, Optional, Tuple


class TimerHandle:
    """
    A scheduled one-shot callback that can be cancelled.

    `when` is the due time in milliseconds on the owning scheduler's clock,
    so `handle.when - scheduler.now` is the remaining delay on every host.
    """

    def __init__(self, callback: Callable[[], None], when: float = 0.0):
        self._callback = callback
        self.when = when
        self._cancelled = False
        self._fired = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def active(self) -> bool:
        return not (self._cancelled or self._fired)

    def cancel(self) -> None:
        self._cancelled = True

    def _run(self) -> None:
        if not self.active:
            return
        self._fired = True
        self._callback()


class Scheduler:
    """Base interface for the host event loop"""

    @property
    def now(self) -> float:
        """Current time in milliseconds"""
        raise NotImplementedError

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        raise NotImplementedError

    def call_soon(self, callback: Callable[[], None]) -> TimerHandle:
        raise NotImplementedError


class ManualScheduler(Scheduler):
    """
    Virtual-clock scheduler.

    Time only moves when advance() is called. Due timers run in due-time
    order; timers sharing a due time run in the order they were scheduled.
    call_soon() callbacks model the next render pass and run on run_soon(),
    or at the start of every advance().
    """

    def __init__(self):
        self._now = 0.0
        self._queue: List[Tuple[float, int, TimerHandle]] = []
        self._soon: List[TimerHandle] = []
        self._counter = itertools.count()

    @property
    def now(self) -> float:
        return self._now

    def call_later(self, delay_ms, callback):
        if delay_ms < 0:
            delay_ms = 0
        handle = TimerHandle(callback, when=self.now + delay_ms)
        heapq.heappush(self._queue, (handle.when, next(self._counter), handle))
        return handle

    def call_soon(self, callback):
        handle = TimerHandle(callback, when=self.now)
        self._soon.append(handle)
        return handle

    @property
    def pending(self) -> int:
        """Number of timers that are still going to fire"""
        live = [h for _, _, h in self._queue if h.active]
        return len(live) + len([h for h in self._soon if h.active])

    def next_due(self) -> Optional[float]:
        """Due time of the earliest live timer, or None"""
        while self._queue and not self._queue[0][2].active:
            heapq.heappop(self._queue)
        if not self._queue:
            return None
        return self._queue[0][0]

    def run_soon(self) -> int:
        """Flush call_soon callbacks. Returns how many ran."""
        ran = 0
        while self._soon:
            batch, self._soon = self._soon, []
            for handle in batch:
                if handle.active:
                    handle._run()
                    ran += 1
        return ran

    def advance(self, ms: float) -> int:
        """
        Move the clock forward by `ms`, running every timer that becomes due.

        Returns:
            int: number of callbacks run (timers and render-pass callbacks)
        """
        if ms < 0:
            raise ValueError(f"Cannot advance the clock by a negative amount: {ms}")

        target = self.now + ms
        ran = self.run_soon()
        while True:
            due = self.next_due()
            if due is None or due > target:
                break
            _, _, handle = heapq.heappop(self._queue)
            self._now = due
            handle._run()
            ran += 1
            ran += self.run_soon()
        self._now = target
        return ran

    def advance_to_next(self) -> bool:
        """Jump straight to the next due timer and run it. False if idle."""
        due = self.next_due()
        if due is None:
            return self.run_soon() > 0
        self.advance(due - self.now)
        return True


class AsyncioScheduler(Scheduler):
    """Scheduler backed by an asyncio event loop (delays in milliseconds)"""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop or asyncio.get_running_loop()

    @property
    def now(self) -> float:
        return self._loop.time() * 1000.0

    def call_later(self, delay_ms, callback):
        handle = TimerHandle(callback, when=self.now + delay_ms)
        loop_handle = self._loop.call_later(max(delay_ms, 0) / 1000.0, handle._run)
        return _LoopTimerHandle(handle, loop_handle)

    def call_soon(self, callback):
        handle = TimerHandle(callback, when=self.now)
        loop_handle = self._loop.call_soon(handle._run)
        return _LoopTimerHandle(handle, loop_handle)


class _LoopTimerHandle(TimerHandle):
    """TimerHandle that also cancels the underlying asyncio handle"""

    def __init__(self, inner: TimerHandle, loop_handle):
        super().__init__(inner._run, when=inner.when)
        self._inner = inner
        self._loop_handle = loop_handle

    @property
    def cancelled(self):
        return self._inner.cancelled

    @property
    def active(self):
        return self._inner.active

    def cancel(self):
        self._inner.cancel()
        self._loop_handle.cancel()


__all__ = ['TimerHandle', 'Scheduler', 'ManualScheduler', 'AsyncioScheduler']
