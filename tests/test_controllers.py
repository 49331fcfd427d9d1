import asyncio
from unittest.mock import MagicMock, call

import pytest

from controllers import HostSyncController, SkipController
from engine.item_change_animator import ItemChangeAnimator
from models.enums import PlaybackState
from models.events import (
    EventType,
    GameBusyChangedEvent,
    KeyboardKeyPressEvent,
    OverlayClickEvent,
    TurnChangesUpdatedEvent,
)
from services.animator_event_forwarder import AnimatorEventForwarder
from services.event_bus import EventBus

from conftest import TRANSITION_MS


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def skip_controller(animator, event_bus):
    return SkipController(animator, event_bus)


@pytest.fixture
def host_sync(animator, event_bus):
    return HostSyncController(animator, event_bus)


# ---------------------------------------------------------------------------
# SkipController
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
@pytest.mark.parametrize("key", ["ENTER", "SPACE"])
async def test_skip_keys_clear_overlay(animator, event_bus, skip_controller, make_batch, key):
    animator.set_turn_changes(make_batch(("gain", "ItemA"), ("gain", "ItemB")))

    await event_bus.publish(KeyboardKeyPressEvent(key))

    assert animator.is_idle
    assert animator.queue_size == 0
    assert skip_controller.skips_requested == 1


@pytest.mark.asyncio
async def test_other_keys_and_modified_keys_ignored(animator, event_bus, skip_controller, make_batch):
    animator.set_turn_changes(make_batch(("gain", "ItemA")))

    await event_bus.publish(KeyboardKeyPressEvent("A"))
    await event_bus.publish(KeyboardKeyPressEvent("ENTER", ["CTRL"]))

    assert animator.state is PlaybackState.APPEARING
    assert skip_controller.skips_requested == 0


@pytest.mark.asyncio
async def test_overlay_click_skips(animator, scheduler, event_bus, skip_controller, make_batch):
    animator.set_turn_changes(make_batch(("loss", "ItemB")))
    scheduler.advance(TRANSITION_MS)

    await event_bus.publish(OverlayClickEvent())

    assert animator.is_idle


@pytest.mark.asyncio
async def test_skip_input_ignored_when_overlay_hidden(animator, event_bus, skip_controller, renderer):
    await event_bus.publish(KeyboardKeyPressEvent("ENTER"))

    assert skip_controller.skips_requested == 0
    assert renderer.snapshots == []


def test_skip_ignored_while_busy(animator, make_batch):
    controller = SkipController(animator)
    animator.set_turn_changes(make_batch(("gain", "ItemA")))
    animator.set_busy(True)

    assert controller.handle_key("ENTER") is False
    assert controller.skips_requested == 0


def test_custom_skip_keys(animator, make_batch):
    controller = SkipController(animator, skip_keys=["escape"])
    animator.set_turn_changes(make_batch(("gain", "ItemA")))

    assert controller.handle_key("ENTER") is False
    assert controller.handle_key("ESCAPE") is True
    assert animator.is_idle


# ---------------------------------------------------------------------------
# HostSyncController
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_host_events_drive_animator(animator, event_bus, host_sync, make_batch):
    batch = make_batch(("gain", "ItemA"))

    await event_bus.publish(TurnChangesUpdatedEvent(batch))
    assert animator.tracked_batch is batch
    assert animator.state is PlaybackState.APPEARING

    await event_bus.publish(GameBusyChangedEvent(True))
    assert animator.is_idle
    assert animator.is_busy
    assert animator.is_batch_processed(batch)

    await event_bus.publish(GameBusyChangedEvent(False))
    assert not animator.is_busy
    assert animator.is_idle


# ---------------------------------------------------------------------------
# AnimatorEventForwarder
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_forwarder_republishes_snapshots_and_batches(animator, scheduler, event_bus, make_batch):
    forwarder = AnimatorEventForwarder(animator, event_bus)
    states = []
    processed = []
    event_bus.subscribe(EventType.ANIMATION_STATE_CHANGED, lambda e: states.append(e.snapshot.state))
    event_bus.subscribe(EventType.BATCH_PROCESSED, lambda e: processed.append(e.turn_changes))

    batch = make_batch(("gain", "ItemA"))
    animator.set_turn_changes(batch)
    scheduler.run_until_idle()
    await forwarder.drain()

    assert states == ["APPEARING", "VISIBLE", "DISAPPEARING", "IDLE", "IDLE"]
    assert processed == [batch]
    assert forwarder.pending_count == 0


@pytest.mark.asyncio
async def test_forwarder_publishes_from_loop_tasks(animator, event_bus, make_batch):
    forwarder = AnimatorEventForwarder(animator, event_bus)
    animator.set_turn_changes(make_batch(("gain", "ItemA")))

    assert forwarder.pending_count == 1
    await asyncio.sleep(0)
    await forwarder.drain()
    assert len(event_bus.get_event_history()) == 1


@pytest.mark.asyncio
async def test_busy_handled_before_batch_on_same_bus(event_bus, make_batch):
    animator = MagicMock(spec=ItemChangeAnimator)
    HostSyncController(animator, event_bus)
    batch = make_batch(("gain", "ItemA"))

    await event_bus.publish(GameBusyChangedEvent(True))
    await event_bus.publish(TurnChangesUpdatedEvent(batch))

    assert animator.mock_calls == [call.set_busy(True), call.set_turn_changes(batch)]
