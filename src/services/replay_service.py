"""
Replay Service

Plays recorded turn change documents through the EventBus the same way the
game host would: busy pulse, then the new batch, then wait until the animator
reports the batch as processed.
"""

import asyncio
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from models.domain.turn_changes import TurnChanges
from models.events import (
    BatchProcessedEvent,
    EventSource,
    EventType,
    GameBusyChangedEvent,
    TurnChangesUpdatedEvent,
)
from models.exceptions import PayloadValidationError
from schemas.turn_changes import parse_turn_changes
from services.event_bus import EventBus
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SYSTEM)


def load_batch_documents(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """
    Read raw batch documents from a .json, .yaml or .yml file.

    A file may hold a single batch, a list of batches or (YAML only) several
    `---` separated documents.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        if path.suffix.lower() == ".json":
            loaded: List[Any] = [json.load(f)]
        else:
            loaded = [doc for doc in yaml.safe_load_all(f) if doc is not None]

    documents: List[Dict[str, Any]] = []
    for doc in loaded:
        items = doc if isinstance(doc, list) else [doc]
        for item in items:
            if not isinstance(item, dict):
                raise PayloadValidationError(f"{path.name}: batch must be a mapping, got {type(item).__name__}")
            documents.append(item)

    log.debug(f"Loaded {len(documents)} batch document(s)", file=str(path))
    return documents


def load_batches(path: Union[str, Path]) -> List[TurnChanges]:
    """Load and validate every batch in a file"""
    return [parse_turn_changes(doc) for doc in load_batch_documents(path)]


class ReplayService:
    """
    Host simulator

    Example:
        replay = ReplayService(event_bus)
        await replay.play(load_batches("samples/turn_changes.yaml"))
    """

    def __init__(self, event_bus: EventBus, batch_timeout_s: Optional[float] = None):
        self.event_bus = event_bus
        self.batch_timeout_s = batch_timeout_s
        self.batches_played = 0

        self._waiting_for: Optional[TurnChanges] = None
        self._done = asyncio.Event()

        event_bus.subscribe(EventType.BATCH_PROCESSED, self._on_batch_processed)

    def _on_batch_processed(self, event: BatchProcessedEvent) -> None:
        if event.turn_changes is self._waiting_for:
            self._done.set()

    async def play_one(self, batch: TurnChanges) -> None:
        """Publish one batch as a new turn and wait for it to finish playing"""
        self._waiting_for = batch
        self._done.clear()

        await self.event_bus.publish(GameBusyChangedEvent(True, source=EventSource.REPLAY))
        await self.event_bus.publish(GameBusyChangedEvent(False, source=EventSource.REPLAY))
        await self.event_bus.publish(TurnChangesUpdatedEvent(batch, source=EventSource.REPLAY))

        try:
            if self.batch_timeout_s is None:
                await self._done.wait()
            else:
                await asyncio.wait_for(self._done.wait(), timeout=self.batch_timeout_s)
        finally:
            self._waiting_for = None

        self.batches_played += 1

    async def play(self, batches: List[TurnChanges]) -> int:
        """Replay batches in order, return how many were played"""
        for index, batch in enumerate(batches, start=1):
            log.info(f"Turn {index}/{len(batches)}", changes=len(batch.item_changes))
            await self.play_one(batch)
        return self.batches_played
