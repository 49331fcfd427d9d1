"""Domain models - Items, turn change batches and animation value objects"""

from models.domain.item import Item, KnownUse, items_equivalent
from models.domain.turn_changes import ItemChange, TurnChanges
from models.domain.animation import AnimationQueueEntry, AnimationTiming, VisualFlags

__all__ = [
    "Item",
    "KnownUse",
    "items_equivalent",
    "ItemChange",
    "TurnChanges",
    "AnimationQueueEntry",
    "AnimationTiming",
    "VisualFlags",
]
