"""
Dummy keyboard adapter for platforms without terminal keyboard support
(Windows, non-interactive runs). Publishes nothing.
"""

import asyncio
from typing import TYPE_CHECKING

from .keyboard_adapter_interface import IKeyboardAdapter

if TYPE_CHECKING:
    from services.event_bus import EventBus


class DummyKeyboardAdapter(IKeyboardAdapter):
    """Keyboard adapter that only waits to be cancelled"""

    def __init__(self, event_bus: "EventBus"):
        self.event_bus = event_bus

    async def run(self) -> None:
        while True:
            await asyncio.sleep(1.0)
