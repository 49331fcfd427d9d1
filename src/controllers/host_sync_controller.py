from engine.item_change_animator import ItemChangeAnimator
from models.events import EventType, GameBusyChangedEvent, TurnChangesUpdatedEvent
from services.event_bus import EventBus
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.EVENT)


class HostSyncController:
    """
    Feeds host events into the animator.

    Busy handlers run before batch handlers so a busy pulse published
    together with a new batch never lets the batch start playing.
    """

    def __init__(self, animator: ItemChangeAnimator, event_bus: EventBus):
        self.animator = animator
        self.event_bus = event_bus

        event_bus.subscribe(EventType.GAME_BUSY_CHANGED, self._on_busy_changed, priority=20)
        event_bus.subscribe(EventType.TURN_CHANGES_UPDATED, self._on_turn_changes, priority=10)

    def _on_busy_changed(self, event: GameBusyChangedEvent) -> None:
        self.animator.set_busy(event.busy)

    def _on_turn_changes(self, event: TurnChangesUpdatedEvent) -> None:
        self.animator.set_turn_changes(event.turn_changes)
