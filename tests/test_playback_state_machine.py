import pytest

from engine.playback_state_machine import transition
from models.domain.animation import CLEARED_FLAGS, AnimationTiming, PlaybackContext
from models.enums import ChangeKind, DisappearType, EffectType, GlowType, PlaybackState, PlaybackTrigger

TIMING = AnimationTiming(transition_ms=600, hold_ms=2000)
ALL_STATES = list(PlaybackState)


def ctx(busy=False, queue_size=0, kind=None):
    return PlaybackContext(busy=busy, queue_size=queue_size, current_kind=kind)


def flags_of(result):
    return [e.flags for e in result.effects if e.type is EffectType.SET_FLAGS][-1]


def timer_of(result):
    return [e.duration_ms for e in result.effects if e.type is EffectType.START_TIMER]


def test_advance_from_idle_pulls_next_entry():
    result = transition(PlaybackState.IDLE, PlaybackTrigger.ADVANCE, ctx(queue_size=2), TIMING)

    assert result.state is PlaybackState.APPEARING
    assert result.effect_types[0] is EffectType.CANCEL_TIMER
    assert EffectType.DEQUEUE in result.effect_types
    assert timer_of(result) == [600]
    flags = flags_of(result)
    assert flags.overlay_visible and flags.card_visible
    assert flags.glow is None and flags.disappear is None


def test_advance_with_empty_queue_marks_processed():
    result = transition(PlaybackState.IDLE, PlaybackTrigger.ADVANCE, ctx(queue_size=0), TIMING)

    assert result.state is PlaybackState.IDLE
    assert EffectType.MARK_BATCH_PROCESSED in result.effect_types
    assert EffectType.START_TIMER not in result.effect_types
    assert flags_of(result) == CLEARED_FLAGS


@pytest.mark.parametrize("state", [PlaybackState.APPEARING, PlaybackState.VISIBLE, PlaybackState.DISAPPEARING])
def test_advance_ignored_while_playing(state):
    result = transition(state, PlaybackTrigger.ADVANCE, ctx(queue_size=3), TIMING)
    assert result.state is state
    assert result.effects == ()


@pytest.mark.parametrize("kind,glow", [
    (ChangeKind.GAIN, GlowType.GAIN),
    (ChangeKind.LOSS, GlowType.LOSS),
    (ChangeKind.TRANSFORM, GlowType.TRANSFORM_NEW),
])
def test_appearing_to_visible_sets_glow(kind, glow):
    result = transition(PlaybackState.APPEARING, PlaybackTrigger.TIMER_ELAPSED, ctx(kind=kind), TIMING)

    assert result.state is PlaybackState.VISIBLE
    assert flags_of(result).glow is glow
    assert timer_of(result) == [2000]


@pytest.mark.parametrize("kind,disappear", [
    (ChangeKind.GAIN, DisappearType.SHRINK_AWAY),
    (ChangeKind.LOSS, DisappearType.GROW_AWAY),
    (ChangeKind.TRANSFORM, DisappearType.SHRINK_AWAY),
])
def test_visible_to_disappearing(kind, disappear):
    result = transition(PlaybackState.VISIBLE, PlaybackTrigger.TIMER_ELAPSED, ctx(kind=kind), TIMING)

    assert result.state is PlaybackState.DISAPPEARING
    flags = flags_of(result)
    assert flags.disappear is disappear
    assert flags.card_visible is False
    assert flags.glow is None
    assert timer_of(result) == [600]


def test_disappearing_to_idle_advances_queue():
    result = transition(PlaybackState.DISAPPEARING, PlaybackTrigger.TIMER_ELAPSED, ctx(queue_size=1), TIMING)

    assert result.state is PlaybackState.IDLE
    assert EffectType.DROP_CURRENT in result.effect_types
    assert result.effect_types[-1] is EffectType.ADVANCE_QUEUE
    assert flags_of(result) == CLEARED_FLAGS


def test_timer_while_idle_is_ignored():
    result = transition(PlaybackState.IDLE, PlaybackTrigger.TIMER_ELAPSED, ctx(), TIMING)
    assert result.effects == ()


def test_timed_states_cancel_before_arming():
    for state in (PlaybackState.APPEARING, PlaybackState.VISIBLE):
        types = transition(state, PlaybackTrigger.TIMER_ELAPSED, ctx(kind=ChangeKind.GAIN), TIMING).effect_types
        assert types.index(EffectType.CANCEL_TIMER) < types.index(EffectType.START_TIMER)


@pytest.mark.parametrize("state", ALL_STATES)
def test_busy_resets_from_every_state(state):
    result = transition(state, PlaybackTrigger.BUSY, ctx(busy=True, queue_size=2, kind=ChangeKind.GAIN), TIMING)

    assert result.state is PlaybackState.IDLE
    for effect in (EffectType.CANCEL_TIMER, EffectType.CLEAR_QUEUE, EffectType.DROP_CURRENT, EffectType.MARK_BATCH_PROCESSED):
        assert effect in result.effect_types
    assert flags_of(result) == CLEARED_FLAGS
    assert EffectType.START_TIMER not in result.effect_types


@pytest.mark.parametrize("state", [PlaybackState.APPEARING, PlaybackState.VISIBLE, PlaybackState.DISAPPEARING])
def test_timer_racing_busy_flag_resets(state):
    result = transition(state, PlaybackTrigger.TIMER_ELAPSED, ctx(busy=True, kind=ChangeKind.LOSS), TIMING)
    assert result.state is PlaybackState.IDLE
    assert EffectType.START_TIMER not in result.effect_types


@pytest.mark.parametrize("state", ALL_STATES)
def test_skip_resets_from_every_state(state):
    result = transition(state, PlaybackTrigger.SKIP, ctx(queue_size=4, kind=ChangeKind.TRANSFORM), TIMING)

    assert result.state is PlaybackState.IDLE
    assert EffectType.CLEAR_QUEUE in result.effect_types
    assert EffectType.MARK_BATCH_PROCESSED in result.effect_types
    assert flags_of(result) == CLEARED_FLAGS


@pytest.mark.parametrize("state", ALL_STATES)
def test_skip_while_busy_is_noop(state):
    result = transition(state, PlaybackTrigger.SKIP, ctx(busy=True), TIMING)
    assert result.state is state
    assert result.effects == ()
