"""
Enums for the item change animator state machine
"""

from enum import Enum, auto


class ChangeKind(Enum):
    """
    Kind of item change produced by a game turn.

    Values double as playback priority: lower plays first.
    """
    LOSS = 0       # Item left the player's possession
    GAIN = 1       # Item entered the player's possession
    TRANSFORM = 2  # Item changed in place (old → new)

    @property
    def priority(self) -> int:
        return self.value


class ChangeRecordType(Enum):
    """Wire-level change record types, as emitted by the game engine"""
    ACQUIRE = "acquire"
    LOSS = "loss"
    UPDATE = "update"


class PlaybackState(Enum):
    """
    Playback states of the animator

    IDLE: nothing on screen, ready to pull the next queue entry
    APPEARING: card fading in
    VISIBLE: card held on screen with a glow
    DISAPPEARING: card animating away
    """
    IDLE = auto()
    APPEARING = auto()
    VISIBLE = auto()
    DISAPPEARING = auto()


class PlaybackTrigger(Enum):
    """Inputs of the playback transition function"""
    ADVANCE = auto()        # Pull next entry if idle
    TIMER_ELAPSED = auto()  # Pending timer fired
    BUSY = auto()           # Host started computing a turn
    SKIP = auto()           # User asked to skip everything


class EffectType(Enum):
    """Side effects requested by the transition function"""
    CANCEL_TIMER = auto()
    START_TIMER = auto()
    DEQUEUE = auto()
    SET_FLAGS = auto()
    DROP_CURRENT = auto()
    CLEAR_QUEUE = auto()
    MARK_BATCH_PROCESSED = auto()
    ADVANCE_QUEUE = auto()


class GlowType(Enum):
    """Glow shown while a card is held visible"""
    GAIN = "apply-green-glow-effect"
    LOSS = "apply-red-glow-effect"
    TRANSFORM_NEW = "apply-neutral-glow-effect"


class DisappearType(Enum):
    """Direction a card leaves the screen"""
    SHRINK_AWAY = "disappear-to-small"
    GROW_AWAY = "disappear-to-large"


class CardRole(Enum):
    """Which card of an entry is being rendered"""
    SINGLE = auto()  # Gain / loss
    OLD = auto()     # Transform: state before
    NEW = auto()     # Transform: state after


class ItemType(Enum):
    """Item categories known to the game engine"""
    SINGLE_USE = "single-use"
    MULTI_USE = "multi-use"
    EQUIPMENT = "equipment"
    CONTAINER = "container"
    KEY = "key"
    WEAPON = "weapon"
    AMMUNITION = "ammunition"
    VEHICLE = "vehicle"
    KNOWLEDGE = "knowledge"
    STATUS_EFFECT = "status effect"
    PAGE = "page"
    JOURNAL = "journal"
    BOOK = "book"


class KeyboardSource(Enum):
    STDIN = auto()
    DUMMY = auto()


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    ANIMATION = auto()   # Playback state transitions
    QUEUE = auto()       # Animation queue operations
    CLASSIFIER = auto()  # Turn change classification
    SCHEDULER = auto()   # Timers
    RENDER = auto()      # Render adapters
    EVENT = auto()       # Event bus events and handling
    INPUT = auto()       # Keyboard / overlay input
    SYSTEM = auto()      # Startup, shutdown, errors

    GENERAL = auto()     # Default general category
