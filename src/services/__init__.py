"""Services layer"""

from .event_bus import EventBus
from .change_classifier import ChangeClassifier
from .animator_event_forwarder import AnimatorEventForwarder
from .replay_service import ReplayService

__all__ = [
    "EventBus",
    "ChangeClassifier",
    "AnimatorEventForwarder",
    "ReplayService",
]
