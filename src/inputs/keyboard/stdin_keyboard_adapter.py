import asyncio
import select
import sys
import termios
import tty
from typing import List, Optional

from models.enums import KeyboardSource
from models.events import KeyboardKeyPressEvent
from services.event_bus import EventBus
from utils.logger import get_logger, LogCategory
from .keyboard_adapter_interface import IKeyboardAdapter

log = get_logger().for_category(LogCategory.INPUT)


class StdinKeyboardAdapter(IKeyboardAdapter):
    """
    Terminal keyboard adapter

    Intended for local Unix terminals and SSH sessions. Puts the terminal in
    cbreak mode while running and restores it on exit.

    Publishes KeyboardKeyPressEvent with normalized key names:
    ENTER, SPACE, TAB, BACKSPACE, ESCAPE, or the upper-cased character.
    """

    def __init__(self, event_bus: EventBus):
        self.event_bus = event_bus
        self._old_settings = None
        self._buffer = ""

    async def run(self) -> None:
        """
        Read stdin until cancelled.

        Raises:
            RuntimeError: stdin is not a TTY or cannot be read
        """
        if not sys.stdin.isatty():
            raise RuntimeError("STDIN is not a TTY")

        self._old_settings = termios.tcgetattr(sys.stdin)
        tty.setcbreak(sys.stdin.fileno())
        log.info("STDIN keyboard adapter active (press ENTER or SPACE to skip)")

        try:
            while True:
                ready, _, _ = select.select([sys.stdin], [], [], 0)
                if not ready:
                    await asyncio.sleep(0.02)
                    continue

                try:
                    char = sys.stdin.read(1)
                except (IOError, OSError) as e:
                    raise RuntimeError("STDIN read failed") from e

                if not char:
                    continue
                self._buffer += char
                await self._process_buffer()

        finally:
            if self._old_settings:
                termios.tcsetattr(sys.stdin, termios.TCSADRAIN, self._old_settings)
                log.debug("Terminal settings restored")

    async def _process_buffer(self) -> None:
        while self._buffer:
            # Escape sequences (arrows etc.) are swallowed whole
            if self._buffer.startswith('\x1b['):
                if len(self._buffer) < 3:
                    return
                self._buffer = self._buffer[3:]
                continue

            if self._buffer == '\x1b':
                return  # wait for a possible continuation

            if self._buffer.startswith('\x1b'):
                self._buffer = self._buffer[1:]
                await self._publish_key("ESCAPE")
                continue

            char = self._buffer[0]
            self._buffer = self._buffer[1:]
            key = self.normalize(char)
            if key is None:
                continue
            if '\x01' <= char <= '\x1a' and key not in ("ENTER", "TAB"):
                await self._publish_key(key, modifiers=["CTRL"])
            else:
                await self._publish_key(key)

    @staticmethod
    def normalize(char: str) -> Optional[str]:
        """Map one raw character to a key name"""
        if char in ('\r', '\n'):
            return "ENTER"
        if char == '\t':
            return "TAB"
        if char == '\x7f':
            return "BACKSPACE"
        if char == ' ':
            return "SPACE"
        if '\x01' <= char <= '\x1a':
            return chr(ord(char) + 96).upper()
        if char.isprintable():
            return char.upper()
        return None

    async def _publish_key(self, key: str, modifiers: Optional[List[str]] = None) -> None:
        log.debug(f"Key pressed: {key}", modifiers=modifiers)
        await self.event_bus.publish(KeyboardKeyPressEvent(key, modifiers, keyboard=KeyboardSource.STDIN))
