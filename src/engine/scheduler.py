"""
Schedulers

Timer abstraction used by the item change animator:

    handle = scheduler.after(duration_ms, callback)
    scheduler.cancel(handle)

- AsyncioScheduler: real time, backed by loop.call_later()
- ManualScheduler: virtual clock advanced by hand (headless replay, tests)
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Protocol

from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SCHEDULER)


class IScheduler(Protocol):
    """Single-shot timer service"""

    def after(self, delay_ms: int, callback: Callable[[], None]) -> Any:
        ...

    def cancel(self, handle: Any) -> None:
        ...


class AsyncioScheduler(IScheduler):
    """
    Scheduler backed by the running asyncio event loop.

    Callbacks run on the loop thread, so the animator never sees two
    callbacks at once.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        return self._loop or asyncio.get_running_loop()

    def after(self, delay_ms: int, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self._get_loop().call_later(delay_ms / 1000, callback)

    def cancel(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()


@dataclass(order=True)
class ScheduledCall:
    """Pending callback of the ManualScheduler"""
    due_ms: int
    seq: int
    callback: Callable[[], None] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)


class ManualScheduler(IScheduler):
    """
    Deterministic scheduler with a virtual millisecond clock.

    Nothing fires until advance() is called. Callbacks scheduled from inside a
    callback fire in the same advance() call when they fall due before its end.

    Example:
        scheduler = ManualScheduler()
        animator = ItemChangeAnimator(scheduler=scheduler)
        animator.set_turn_changes(batch)
        scheduler.advance(600)   # APPEARING → VISIBLE
    """

    def __init__(self):
        self.now_ms = 0
        self._heap: List[ScheduledCall] = []
        self._seq = itertools.count()
        self.fired = 0

    def after(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(due_ms=self.now_ms + delay_ms, seq=next(self._seq), callback=callback)
        heapq.heappush(self._heap, call)
        return call

    def cancel(self, handle: ScheduledCall) -> None:
        handle.cancelled = True

    @property
    def pending_count(self) -> int:
        return sum(1 for call in self._heap if not call.cancelled)

    def next_due_ms(self) -> Optional[int]:
        self._drop_cancelled()
        return self._heap[0].due_ms if self._heap else None

    def _drop_cancelled(self) -> None:
        while self._heap and self._heap[0].cancelled:
            heapq.heappop(self._heap)

    def advance(self, delta_ms: int) -> int:
        """Move the clock forward, firing due callbacks in order. Returns fired count."""
        if delta_ms < 0:
            raise ValueError("Cannot move the clock backwards")

        target = self.now_ms + delta_ms
        fired = 0
        while True:
            self._drop_cancelled()
            if not self._heap or self._heap[0].due_ms > target:
                break
            call = heapq.heappop(self._heap)
            self.now_ms = call.due_ms
            call.callback()
            fired += 1

        self.now_ms = target
        self.fired += fired
        return fired

    def run_until_idle(self, limit_ms: int = 10 * 60 * 1000) -> int:
        """Fire everything pending (including follow-ups) up to a safety limit"""
        start = self.now_ms
        fired = 0
        while True:
            due = self.next_due_ms()
            if due is None:
                return fired
            if due - start > limit_ms:
                log.warn("run_until_idle hit its limit", limit_ms=limit_ms, pending=self.pending_count)
                return fired
            fired += self.advance(due - self.now_ms)
