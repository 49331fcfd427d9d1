"""Exceptions raised by the item change animator"""

from typing import Optional


class AnimatorError(Exception):
    """Base class for animator errors"""


class QueueBusyError(AnimatorError):
    """Animation queue rebuilt while playback is still running"""


class InvalidTimingError(AnimatorError, ValueError):
    """Animation durations must be positive"""


class PayloadValidationError(AnimatorError, ValueError):
    """Turn change document does not match the expected schema"""

    def __init__(self, message: str, errors: Optional[list] = None):
        super().__init__(message)
        self.errors = errors or []
