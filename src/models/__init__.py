"""
Models package - Data models for the item change animator
"""

from .enums import ChangeKind, PlaybackState, PlaybackTrigger, GlowType, DisappearType, ItemType, LogLevel, LogCategory

__all__ = [
    'ChangeKind',
    'PlaybackState',
    'PlaybackTrigger',
    'GlowType',
    'DisappearType',
    'ItemType',
    'LogLevel',
    'LogCategory',
]
