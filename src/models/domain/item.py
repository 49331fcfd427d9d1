"""
Item domain models

Items are snapshots handed over by the game engine. The animator never mutates
them; it only compares old/new snapshots to decide whether a transformation is
visible at all.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Optional, Tuple

from models.enums import ItemType

JUNK_TAG = "junk"


@dataclass(frozen=True)
class KnownUse:
    """A discovered way to use an item (rendered as a disabled button)"""
    action_name: str
    description: Optional[str] = None
    prompt_effect: Optional[str] = None
    applies_when_active: Optional[bool] = None
    applies_when_inactive: Optional[bool] = None

    def identity_key(self) -> tuple:
        return (
            self.action_name,
            self.description,
            self.prompt_effect,
            self.applies_when_active,
            self.applies_when_inactive,
        )


@dataclass(frozen=True)
class Item:
    """Immutable item snapshot"""
    name: str
    type: ItemType
    description: str = ""
    active_description: Optional[str] = None
    is_active: bool = False
    tags: Tuple[str, ...] = field(default_factory=tuple)
    known_uses: Tuple[KnownUse, ...] = field(default_factory=tuple)

    @property
    def is_junk(self) -> bool:
        return JUNK_TAG in self.tags

    @property
    def display_description(self) -> str:
        """Description shown on the card (active text wins while active)"""
        if self.is_active and self.active_description:
            return self.active_description
        return self.description

    def is_equivalent_to(self, other: Optional["Item"]) -> bool:
        return items_equivalent(self, other)


def known_uses_equivalent(first: Tuple[KnownUse, ...], second: Tuple[KnownUse, ...]) -> bool:
    """Compare known uses as a multiset: list order does not matter"""
    if len(first) != len(second):
        return False
    return Counter(ku.identity_key() for ku in first) == Counter(ku.identity_key() for ku in second)


def items_equivalent(first: Optional[Item], second: Optional[Item]) -> bool:
    """
    True when two item snapshots would render identically.

    Compares name, type, description, active description (None == ""),
    active flag, junk flag and the set of known uses.
    """
    if first is None or second is None:
        return first is second
    if (
        first.name != second.name
        or first.type != second.type
        or first.description != second.description
        or (first.active_description or "") != (second.active_description or "")
        or bool(first.is_active) != bool(second.is_active)
        or first.is_junk != second.is_junk
    ):
        return False
    return known_uses_equivalent(first.known_uses, second.known_uses)
