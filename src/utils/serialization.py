"""
Serialization utilities - enum and model conversion for snapshots and logs

Provides conversion between:
- Enums ↔ Strings (PlaybackState, ChangeKind, GlowType, ...)
- Domain models → Dicts (Item, KnownUse, AnimationQueueEntry)

Dict keys follow the camelCase shape the game engine uses, so snapshots can
be handed straight to a web renderer.
"""

from enum import Enum
from typing import Any, Dict, Optional, Type, TypeVar

from models.domain.animation import AnimationQueueEntry
from models.domain.item import Item, KnownUse

T = TypeVar('T', bound=Enum)


class Serializer:
    """Central enum and model serialization"""

    # ========================================================================
    # ENUM SERIALIZATION
    # ========================================================================

    @staticmethod
    def enum_to_str(value: Optional[Enum]) -> Optional[str]:
        """Convert any enum to string name"""
        return value.name if value else None

    @staticmethod
    def enum_value(value: Optional[Enum]) -> Any:
        """Convert enum to its wire value (e.g. CSS class, item type text)"""
        return value.value if value else None

    @staticmethod
    def str_to_enum(value: str, enum_type: Type[T]) -> T:
        """Convert string name to enum, raise ValueError if invalid"""
        try:
            return enum_type[value]
        except KeyError:
            raise ValueError(f"Invalid {enum_type.__name__}: {value}")

    # ========================================================================
    # ITEM SERIALIZATION
    # ========================================================================

    @staticmethod
    def known_use_to_dict(known_use: KnownUse) -> Dict[str, Any]:
        data: Dict[str, Any] = {"actionName": known_use.action_name}
        if known_use.description is not None:
            data["description"] = known_use.description
        if known_use.prompt_effect is not None:
            data["promptEffect"] = known_use.prompt_effect
        if known_use.applies_when_active is not None:
            data["appliesWhenActive"] = known_use.applies_when_active
        if known_use.applies_when_inactive is not None:
            data["appliesWhenInactive"] = known_use.applies_when_inactive
        return data

    @staticmethod
    def item_to_dict(item: Optional[Item]) -> Optional[Dict[str, Any]]:
        if item is None:
            return None
        return {
            "name": item.name,
            "type": item.type.value,
            "description": item.description,
            "activeDescription": item.active_description,
            "displayDescription": item.display_description,
            "isActive": item.is_active,
            "isJunk": item.is_junk,
            "tags": list(item.tags),
            "knownUses": [Serializer.known_use_to_dict(ku) for ku in item.known_uses],
        }

    @staticmethod
    def entry_to_dict(entry: Optional[AnimationQueueEntry]) -> Optional[Dict[str, Any]]:
        if entry is None:
            return None
        return {
            "kind": entry.kind.name,
            "item": Serializer.item_to_dict(entry.item),
            "oldItem": Serializer.item_to_dict(entry.old_item),
            "newItem": Serializer.item_to_dict(entry.new_item),
        }
