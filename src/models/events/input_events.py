"""User input events (keyboard, overlay)"""

from dataclasses import dataclass
from typing import List, Optional

from models.enums import KeyboardSource
from models.events.base import Event
from models.events.sources import EventSource
from models.events.types import EventType


@dataclass(init=False)
class KeyboardKeyPressEvent(Event):
    """Keyboard key press event"""
    key: str
    modifiers: List[str]
    keyboard: KeyboardSource

    def __init__(self, key: str, modifiers: Optional[List[str]] = None, keyboard: KeyboardSource = KeyboardSource.STDIN):
        """
        Args:
            key: Normalized key name (e.g. 'ENTER', 'SPACE', 'A')
            modifiers: Modifier keys (e.g. ['CTRL'])
            keyboard: Which adapter produced the key
        """
        super().__init__(
            type=EventType.KEYBOARD_KEYPRESS,
            source=EventSource.INPUT,
        )
        self.key = key
        self.modifiers = modifiers or []
        self.keyboard = keyboard


@dataclass(init=False)
class OverlayClickEvent(Event):
    """Click / tap on the animation overlay"""

    def __init__(self):
        super().__init__(
            type=EventType.OVERLAY_CLICK,
            source=EventSource.INPUT,
        )
