"""
Skip Controller

Turns user input into ItemChangeAnimator.skip_all():
- configured keys (ENTER / SPACE by default)
- clicks on the animation overlay
"""

from typing import Iterable, Optional

from engine.item_change_animator import ItemChangeAnimator
from models.events import EventType, KeyboardKeyPressEvent, OverlayClickEvent
from services.event_bus import EventBus
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.INPUT)

DEFAULT_SKIP_KEYS = ("ENTER", "SPACE")


class SkipController:
    """
    Skip/Interrupt controller for the item change overlay

    Input only counts while something is on screen or queued, the same way
    the overlay only receives clicks while it is shown.
    """

    def __init__(
        self,
        animator: ItemChangeAnimator,
        event_bus: Optional[EventBus] = None,
        skip_keys: Iterable[str] = DEFAULT_SKIP_KEYS,
    ):
        self.animator = animator
        self.skip_keys = frozenset(k.upper() for k in skip_keys)
        self.skips_requested = 0

        if event_bus is not None:
            event_bus.subscribe(
                EventType.KEYBOARD_KEYPRESS,
                self._on_key,
                priority=10,
                filter_fn=lambda e: e.key.upper() in self.skip_keys and not e.modifiers,
            )
            event_bus.subscribe(EventType.OVERLAY_CLICK, self._on_overlay_click, priority=10)

        log.debug("SkipController initialized", keys=sorted(self.skip_keys))

    @property
    def overlay_active(self) -> bool:
        return not self.animator.is_idle or self.animator.queue_size > 0

    def handle_key(self, key: str) -> bool:
        """Skip when `key` is a skip key and the overlay is active. Returns True if skipped."""
        if key.upper() not in self.skip_keys:
            return False
        return self.skip()

    def skip(self) -> bool:
        if not self.overlay_active:
            return False
        if self.animator.is_busy:
            log.debug("Skip ignored while host is busy")
            return False

        self.skips_requested += 1
        self.animator.skip_all()
        return True

    def _on_key(self, event: KeyboardKeyPressEvent) -> None:
        if self.skip():
            log.info(f"Animations skipped ({event.key})")

    def _on_overlay_click(self, event: OverlayClickEvent) -> None:
        if self.skip():
            log.info("Animations skipped (overlay click)")
