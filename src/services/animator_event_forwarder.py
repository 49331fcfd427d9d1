from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Optional, Set

from models.domain.turn_changes import TurnChanges
from models.dto.animator_snapshot_dto import AnimatorSnapshotDTO
from models.events import AnimationStateChangedEvent, BatchProcessedEvent, Event
from services.event_bus import EventBus
from utils.logger import get_logger, LogCategory

if TYPE_CHECKING:
    from engine.item_change_animator import ItemChangeAnimator

log = get_logger().for_category(LogCategory.EVENT)


class AnimatorEventForwarder:
    """
    Republishes animator output on the EventBus.

    The animator is synchronous (timer callbacks), the bus is async: each
    event is published from its own task on the running loop.

    Example:
        forwarder = AnimatorEventForwarder(animator, event_bus)
        ...
        await forwarder.drain()
    """

    def __init__(
        self,
        animator: "ItemChangeAnimator",
        event_bus: EventBus,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        self.event_bus = event_bus
        self._loop = loop
        self._pending: Set[asyncio.Task] = set()

        animator.add_snapshot_listener(self._on_snapshot)
        animator.add_batch_listener(self._on_batch_processed)

    def _on_snapshot(self, snapshot: AnimatorSnapshotDTO) -> None:
        self._schedule(AnimationStateChangedEvent(snapshot))

    def _on_batch_processed(self, batch: TurnChanges) -> None:
        self._schedule(BatchProcessedEvent(batch))

    def _schedule(self, event: Event) -> None:
        loop = self._loop or asyncio.get_running_loop()
        task = loop.create_task(self.event_bus.publish(event))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    async def drain(self) -> None:
        """Wait until every scheduled publish has finished"""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
