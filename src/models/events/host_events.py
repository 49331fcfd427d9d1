"""Events emitted by the game engine"""

from dataclasses import dataclass
from typing import Optional

from models.domain.turn_changes import TurnChanges
from models.events.base import Event
from models.events.sources import EventSource
from models.events.types import EventType


@dataclass(init=False)
class TurnChangesUpdatedEvent(Event):
    """Host published a new (or cleared) turn change batch"""
    turn_changes: Optional[TurnChanges]

    def __init__(self, turn_changes: Optional[TurnChanges], source: EventSource = EventSource.HOST):
        super().__init__(
            type=EventType.TURN_CHANGES_UPDATED,
            source=source,
        )
        self.turn_changes = turn_changes


@dataclass(init=False)
class GameBusyChangedEvent(Event):
    """Host started or finished computing a turn"""
    busy: bool

    def __init__(self, busy: bool, source: EventSource = EventSource.HOST):
        super().__init__(
            type=EventType.GAME_BUSY_CHANGED,
            source=source,
        )
        self.busy = busy
