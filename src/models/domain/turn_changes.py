"""Turn change domain models - one batch of deltas per game turn"""

from dataclasses import dataclass, field
from typing import List, Optional

from models.domain.item import Item
from models.enums import ChangeKind


@dataclass(frozen=True)
class ItemChange:
    """
    Single item delta.

    Payloads are optional because the game engine may hand over malformed
    records; the classifier drops those.
    """
    kind: ChangeKind
    item: Optional[Item] = None
    old_item: Optional[Item] = None
    new_item: Optional[Item] = None

    @classmethod
    def gain(cls, item: Optional[Item]) -> "ItemChange":
        return cls(kind=ChangeKind.GAIN, item=item)

    @classmethod
    def loss(cls, item: Optional[Item]) -> "ItemChange":
        return cls(kind=ChangeKind.LOSS, item=item)

    @classmethod
    def transform(cls, old_item: Optional[Item], new_item: Optional[Item]) -> "ItemChange":
        return cls(kind=ChangeKind.TRANSFORM, old_item=old_item, new_item=new_item)


@dataclass(eq=False)
class TurnChanges:
    """
    Everything that changed during one turn.

    Compared by identity only: the animator remembers which batch object it
    already played, never its contents.
    """
    item_changes: List[ItemChange] = field(default_factory=list)
    score_changed_by: int = 0
    objective_achieved: bool = False
    main_quest_achieved: bool = False
    objective_text_changed: bool = False
    main_quest_text_changed: bool = False
    local_time_changed: bool = False
    local_environment_changed: bool = False
    local_place_changed: bool = False
    map_data_changed: bool = False
