from enum import Enum, auto


class EventSource(Enum):
    """Event source identifiers for application events"""
    HOST = auto()       # Game engine (turn changes, busy flag)
    INPUT = auto()      # Keyboard, overlay clicks
    ANIMATOR = auto()   # Item change animator
    REPLAY = auto()     # Batch replay runner
