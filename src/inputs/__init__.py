"""User input adapters"""

from .keyboard import IKeyboardAdapter, DummyKeyboardAdapter, create_keyboard_adapter

__all__ = [
    "IKeyboardAdapter",
    "DummyKeyboardAdapter",
    "create_keyboard_adapter",
]
