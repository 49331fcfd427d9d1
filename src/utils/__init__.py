"""
Utility functions for the item change animator
"""

from .logger import get_logger, get_category_logger, configure_logger
from .serialization import Serializer

__all__ = [
    'get_logger',
    'get_category_logger',
    'configure_logger',
    'Serializer',
]
