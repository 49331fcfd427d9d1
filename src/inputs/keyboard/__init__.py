"""Keyboard adapters (stdin on Unix terminals, dummy elsewhere)"""

from .keyboard_adapter_interface import IKeyboardAdapter
from .keyboard_adapter_factory import create_keyboard_adapter
from .dummy_keyboard_adapter import DummyKeyboardAdapter

__all__ = [
    "IKeyboardAdapter",
    "DummyKeyboardAdapter",
    "create_keyboard_adapter",
]
