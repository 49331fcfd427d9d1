"""Events republished from the item change animator"""

from dataclasses import dataclass

from models.domain.turn_changes import TurnChanges
from models.dto.animator_snapshot_dto import AnimatorSnapshotDTO
from models.events.base import Event
from models.events.sources import EventSource
from models.events.types import EventType


@dataclass(init=False)
class AnimationStateChangedEvent(Event):
    snapshot: AnimatorSnapshotDTO

    def __init__(self, snapshot: AnimatorSnapshotDTO):
        super().__init__(
            type=EventType.ANIMATION_STATE_CHANGED,
            source=EventSource.ANIMATOR,
        )
        self.snapshot = snapshot


@dataclass(init=False)
class BatchProcessedEvent(Event):
    turn_changes: TurnChanges

    def __init__(self, turn_changes: TurnChanges):
        super().__init__(
            type=EventType.BATCH_PROCESSED,
            source=EventSource.ANIMATOR,
        )
        self.turn_changes = turn_changes
