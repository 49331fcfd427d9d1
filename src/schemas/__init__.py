"""
Pydantic schemas for documents handed over by the game engine
"""

from .turn_changes import (
    KnownUseSchema,
    ItemSchema,
    ItemChangeRecordSchema,
    TurnChangesSchema,
    parse_turn_changes,
)

__all__ = [
    'KnownUseSchema',
    'ItemSchema',
    'ItemChangeRecordSchema',
    'TurnChangesSchema',
    'parse_turn_changes',
]
