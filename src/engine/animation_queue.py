"""
Animation Queue

Ordered list of pending animation entries. Filled once per batch (wholesale
replace while playback is idle), drained strictly from the front.
"""

from collections import deque
from typing import Callable, Deque, Iterable, List, Optional

from models.domain.animation import AnimationQueueEntry
from models.exceptions import QueueBusyError
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.QUEUE)


class AnimationQueue:
    """
    FIFO of AnimationQueueEntry

    Ordering is decided by the classifier before insertion; the queue never
    reorders. `is_idle` is supplied by the owner so the queue can refuse to be
    rebuilt in the middle of a playback.

    Example:
        queue = AnimationQueue(is_idle=lambda: animator.is_idle)
        queue.replace_all(entries)
        entry = queue.pop_next()
    """

    def __init__(self, is_idle: Optional[Callable[[], bool]] = None):
        self._entries: Deque[AnimationQueueEntry] = deque()
        self._is_idle = is_idle or (lambda: True)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __iter__(self):
        return iter(list(self._entries))

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def replace_all(self, entries: Iterable[AnimationQueueEntry]) -> None:
        """Replace queue contents with a freshly classified batch"""
        if not self._is_idle():
            raise QueueBusyError("Animation queue can only be rebuilt while playback is idle")

        self._entries = deque(entries)
        log.debug("Queue rebuilt", size=len(self._entries))

    def pop_next(self) -> Optional[AnimationQueueEntry]:
        """Remove and return the front entry (None if empty)"""
        if not self._entries:
            return None
        entry = self._entries.popleft()
        log.debug("Entry dequeued", kind=entry.kind.name, item=entry.display_name, remaining=len(self._entries))
        return entry

    def peek(self) -> Optional[AnimationQueueEntry]:
        return self._entries[0] if self._entries else None

    def clear(self) -> int:
        """Drop all pending entries, return how many were dropped"""
        dropped = len(self._entries)
        self._entries.clear()
        if dropped:
            log.debug("Queue cleared", dropped=dropped)
        return dropped

    def snapshot(self) -> List[AnimationQueueEntry]:
        return list(self._entries)
