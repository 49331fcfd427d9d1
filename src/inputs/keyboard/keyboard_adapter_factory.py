import importlib.util
import sys

from services.event_bus import EventBus
from utils.logger import get_logger, LogCategory
from .keyboard_adapter_interface import IKeyboardAdapter

log = get_logger().for_category(LogCategory.INPUT)


def create_keyboard_adapter(event_bus: EventBus, enabled: bool = True) -> IKeyboardAdapter:
    """
    Keyboard adapter factory.

    Priority:
    1. Stdin (interactive Unix terminal, requires termios)
    2. Dummy (Windows, piped stdin, or keyboard disabled)
    """
    if enabled and importlib.util.find_spec("termios") is not None and sys.stdin.isatty():
        from .stdin_keyboard_adapter import StdinKeyboardAdapter
        log.debug("Using stdin keyboard adapter")
        return StdinKeyboardAdapter(event_bus)

    log.info("Using dummy keyboard adapter (no keyboard input)")
    from .dummy_keyboard_adapter import DummyKeyboardAdapter
    return DummyKeyboardAdapter(event_bus)
