"""
Event system for the item change animator

Host events drive the animator, input events skip it, animator events report
what is on screen.
"""

from models.events.types import EventType
from models.events.base import Event
from models.events.sources import EventSource

from models.events.input_events import KeyboardKeyPressEvent, OverlayClickEvent
from models.events.host_events import TurnChangesUpdatedEvent, GameBusyChangedEvent
from models.events.animator_events import AnimationStateChangedEvent, BatchProcessedEvent

__all__ = [
    "EventType",
    "Event",
    "EventSource",

    "KeyboardKeyPressEvent",
    "OverlayClickEvent",

    "TurnChangesUpdatedEvent",
    "GameBusyChangedEvent",

    "AnimationStateChangedEvent",
    "BatchProcessedEvent",
]
