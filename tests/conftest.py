import pytest

from engine.item_change_animator import ItemChangeAnimator
from engine.scheduler import ManualScheduler
from models.domain.animation import AnimationTiming
from models.domain.item import Item, KnownUse
from models.domain.turn_changes import ItemChange, TurnChanges
from models.enums import ItemType

TRANSITION_MS = 600
HOLD_MS = 2000
ENTRY_MS = TRANSITION_MS * 2 + HOLD_MS


class RecordingRenderer:
    """Render adapter that keeps every snapshot it receives"""

    def __init__(self):
        self.snapshots = []

    def render(self, snapshot):
        self.snapshots.append(snapshot)

    @property
    def states(self):
        return [s.state for s in self.snapshots]

    @property
    def last(self):
        return self.snapshots[-1] if self.snapshots else None


@pytest.fixture
def make_item():
    """Factory for item snapshots with sensible defaults"""

    def _make(name="Torch", type=ItemType.EQUIPMENT, description="A wooden torch.", **kwargs):
        uses = kwargs.pop("known_uses", ())
        kwargs["known_uses"] = tuple(
            u if isinstance(u, KnownUse) else KnownUse(action_name=u) for u in uses
        )
        kwargs["tags"] = tuple(kwargs.get("tags", ()))
        return Item(name=name, type=type, description=description, **kwargs)

    return _make


@pytest.fixture
def make_batch(make_item):
    """
    Build a TurnChanges batch from tuples:
    ("gain", "ItemA"), ("loss", "ItemB"), ("transform", old_item, new_item)
    """

    def _make(*changes):
        item_changes = []
        for change in changes:
            kind = change[0]
            if kind == "gain":
                item_changes.append(ItemChange.gain(make_item(change[1])))
            elif kind == "loss":
                item_changes.append(ItemChange.loss(make_item(change[1])))
            elif kind == "transform":
                item_changes.append(ItemChange.transform(change[1], change[2]))
            else:
                raise ValueError(kind)
        return TurnChanges(item_changes=item_changes)

    return _make


@pytest.fixture
def timing():
    return AnimationTiming(transition_ms=TRANSITION_MS, hold_ms=HOLD_MS)


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def animator(scheduler, timing, renderer):
    return ItemChangeAnimator(scheduler=scheduler, timing=timing, render_adapter=renderer)


@pytest.fixture
def processed_batches(animator):
    """Batches reported as processed, in order"""
    seen = []
    animator.add_batch_listener(seen.append)
    return seen
