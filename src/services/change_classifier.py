"""Change classifier - turns a turn change batch into ordered animation entries"""

from typing import List, Optional

from models.domain.animation import AnimationQueueEntry
from models.domain.item import items_equivalent
from models.domain.turn_changes import ItemChange, TurnChanges
from models.enums import ChangeKind
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.CLASSIFIER)


class ChangeClassifier:
    """
    Filters no-op updates and orders what is left.

    Rules:
    - busy host or no batch → nothing to play
    - gain / loss kept when the item payload is present
    - transform kept when both payloads are present and not equivalent
    - output sorted loss → gain → transform, stable within each kind
    """

    def classify(self, batch: Optional[TurnChanges], busy: bool = False) -> List[AnimationQueueEntry]:
        if busy or batch is None:
            return []

        entries: List[AnimationQueueEntry] = []
        for change in batch.item_changes:
            entry = self._to_entry(change)
            if entry is not None:
                entries.append(entry)

        # sorted() is stable: input order survives inside each kind
        entries = sorted(entries, key=lambda e: e.kind.priority)

        log.debug(
            "Batch classified",
            changes=len(batch.item_changes),
            entries=len(entries),
            order=[e.kind.name for e in entries] or None,
        )
        return entries

    def _to_entry(self, change: ItemChange) -> Optional[AnimationQueueEntry]:
        if change.kind in (ChangeKind.GAIN, ChangeKind.LOSS):
            if change.item is None:
                log.debug(f"Dropping {change.kind.name} change without item payload")
                return None
            return AnimationQueueEntry(kind=change.kind, item=change.item)

        if change.kind == ChangeKind.TRANSFORM:
            if change.old_item is None or change.new_item is None:
                log.debug("Dropping TRANSFORM change with missing payload")
                return None
            if items_equivalent(change.old_item, change.new_item):
                log.debug("Dropping no-op TRANSFORM", item=change.new_item.name)
                return None
            return AnimationQueueEntry(
                kind=ChangeKind.TRANSFORM,
                old_item=change.old_item,
                new_item=change.new_item,
            )

        return None
