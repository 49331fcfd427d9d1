from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List, Optional

from models.domain.animation import AnimationQueueEntry, VisualFlags
from models.enums import CardRole, ChangeKind, GlowType, PlaybackState
from utils.serialization import Serializer

BASE_CARD_CLASS = "animating-item-card"
OVERLAY_CLASS = "item-change-overlay active"

# Glow is only painted on the card it belongs to
_GLOW_ROLE = {
    GlowType.GAIN: CardRole.SINGLE,
    GlowType.LOSS: CardRole.SINGLE,
    GlowType.TRANSFORM_NEW: CardRole.NEW,
}


@dataclass
class CardSnapshotDTO:
    role: str
    item: Dict[str, Any]
    css_classes: List[str]

    @classmethod
    def build(cls, role: CardRole, item_data: Dict[str, Any], flags: VisualFlags) -> "CardSnapshotDTO":
        classes = [BASE_CARD_CLASS]
        if flags.card_visible:
            classes.append("visible")
        elif flags.disappear:
            classes.append(flags.disappear.value)
        if flags.glow and _GLOW_ROLE.get(flags.glow) == role:
            classes.append(flags.glow.value)
        return cls(role=role.name, item=item_data, css_classes=classes)


@dataclass
class AnimatorSnapshotDTO:
    state: str
    overlay_visible: bool
    card_visible: bool
    glow: Optional[str]
    disappear: Optional[str]
    queue_size: int
    entry: Optional[Dict[str, Any]]
    cards: List[CardSnapshotDTO] = field(default_factory=list)

    @property
    def overlay_class(self) -> str:
        return OVERLAY_CLASS if self.overlay_visible else ""

    @classmethod
    def from_state(
        cls,
        state: PlaybackState,
        flags: VisualFlags,
        entry: Optional[AnimationQueueEntry],
        queue_size: int,
    ) -> "AnimatorSnapshotDTO":
        cards: List[CardSnapshotDTO] = []
        if entry is not None:
            if entry.kind == ChangeKind.TRANSFORM and entry.old_item and entry.new_item:
                cards.append(CardSnapshotDTO.build(CardRole.OLD, Serializer.item_to_dict(entry.old_item), flags))
                cards.append(CardSnapshotDTO.build(CardRole.NEW, Serializer.item_to_dict(entry.new_item), flags))
            elif entry.item:
                cards.append(CardSnapshotDTO.build(CardRole.SINGLE, Serializer.item_to_dict(entry.item), flags))

        return cls(
            state=state.name,
            overlay_visible=flags.overlay_visible,
            card_visible=flags.card_visible,
            glow=Serializer.enum_to_str(flags.glow),
            disappear=Serializer.enum_to_str(flags.disappear),
            queue_size=queue_size,
            entry=Serializer.entry_to_dict(entry),
            cards=cards,
        )

    def to_dict(self) -> dict:
        return asdict(self)
