from enum import Enum, auto


class EventType(Enum):
    # Host (game engine)
    TURN_CHANGES_UPDATED = auto()
    GAME_BUSY_CHANGED = auto()

    # User input
    KEYBOARD_KEYPRESS = auto()
    OVERLAY_CLICK = auto()

    # Animator output
    ANIMATION_STATE_CHANGED = auto()
    BATCH_PROCESSED = auto()
