"""
Animation domain models

Queue entries, timing configuration, visual flags and the value objects
exchanged with the playback transition function.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from models.domain.item import Item
from models.enums import ChangeKind, DisappearType, EffectType, GlowType, PlaybackState
from models.exceptions import InvalidTimingError

DEFAULT_TRANSITION_MS = 600
DEFAULT_HOLD_MS = 2000


@dataclass(frozen=True)
class AnimationQueueEntry:
    """One queued animation unit derived from a single item change"""
    kind: ChangeKind
    item: Optional[Item] = None
    old_item: Optional[Item] = None
    new_item: Optional[Item] = None

    @property
    def display_name(self) -> str:
        if self.kind == ChangeKind.TRANSFORM and self.old_item and self.new_item:
            if self.old_item.name == self.new_item.name:
                return self.new_item.name
            return f"{self.old_item.name} → {self.new_item.name}"
        return self.item.name if self.item else "?"


@dataclass(frozen=True)
class AnimationTiming:
    """Immutable playback durations from YAML"""
    transition_ms: int = DEFAULT_TRANSITION_MS
    hold_ms: int = DEFAULT_HOLD_MS

    def __post_init__(self):
        for name in ("transition_ms", "hold_ms"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidTimingError(f"{name} must be a positive integer, got {value!r}")

    @property
    def entry_duration_ms(self) -> int:
        """Full appear → hold → disappear cycle of one entry"""
        return self.transition_ms * 2 + self.hold_ms

    def scaled(self, divisor: float) -> "AnimationTiming":
        """Return a faster (divisor > 1) or slower copy"""
        if divisor <= 0:
            raise InvalidTimingError(f"speed divisor must be positive, got {divisor!r}")
        return AnimationTiming(
            transition_ms=max(1, int(self.transition_ms / divisor)),
            hold_ms=max(1, int(self.hold_ms / divisor)),
        )


@dataclass(frozen=True)
class VisualFlags:
    """Render flags for the current tick"""
    overlay_visible: bool = False
    card_visible: bool = False
    glow: Optional[GlowType] = None
    disappear: Optional[DisappearType] = None

    @property
    def is_clear(self) -> bool:
        return self == CLEARED_FLAGS


CLEARED_FLAGS = VisualFlags()


@dataclass(frozen=True)
class Effect:
    """Side effect requested by the transition function"""
    type: EffectType
    duration_ms: Optional[int] = None
    flags: Optional[VisualFlags] = None


@dataclass(frozen=True)
class PlaybackContext:
    """Read-only view of the animator handed to the transition function"""
    busy: bool = False
    queue_size: int = 0
    current_kind: Optional[ChangeKind] = None


@dataclass(frozen=True)
class Transition:
    state: PlaybackState
    effects: Tuple[Effect, ...] = field(default_factory=tuple)

    @property
    def effect_types(self) -> Tuple[EffectType, ...]:
        return tuple(e.type for e in self.effects)
