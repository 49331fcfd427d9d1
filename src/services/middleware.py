"""
Middleware for EventBus

Pipeline functions that run before handlers. They can modify, block or just
log events.
"""

from models.events import Event, EventType
from utils.logger import get_logger, LogCategory
from utils.serialization import Serializer

log = get_logger().for_category(LogCategory.EVENT)

# Published on every animator tick; logged at debug level only
_NOISY_EVENTS = (EventType.ANIMATION_STATE_CHANGED,)


def log_middleware(event: Event) -> Event:
    """
    Log all events for debugging

    Usage:
        event_bus.add_middleware(log_middleware)
    """
    source_str = Serializer.enum_to_str(event.source)
    data = event.data

    if "key" in data:
        data_str = f"key={data['key']}"
    elif "busy" in data:
        data_str = f"busy={data['busy']}"
    elif "turn_changes" in data:
        batch = data["turn_changes"]
        data_str = f"changes={len(batch.item_changes)}" if batch is not None else "changes=None"
    elif "snapshot" in data:
        data_str = f"state={data['snapshot'].state}"
    else:
        data_str = str(data) if data else ""

    message = f"Event: {event.type.name} from {source_str}" + (f" | {data_str}" if data_str else "")
    if event.type in _NOISY_EVENTS:
        log.debug(message)
    else:
        log.info(message)
    return event
