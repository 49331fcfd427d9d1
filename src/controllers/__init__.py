from .skip_controller import SkipController, DEFAULT_SKIP_KEYS
from .host_sync_controller import HostSyncController

__all__ = [
    'SkipController',
    'DEFAULT_SKIP_KEYS',
    'HostSyncController',
]
