"""
Playback State Machine

Pure transition function of the item change animator:

    transition(state, trigger, context, timing) -> Transition(state, effects)

No timers, no queue and no I/O live here. The caller (ItemChangeAnimator)
applies the returned effects in order. Keeping the function pure makes every
state/trigger pair testable without a clock.

State table:

    IDLE          ADVANCE, queue non-empty  → APPEARING   (dequeue, start T_transition)
    IDLE          ADVANCE, queue empty      → IDLE        (mark batch processed)
    APPEARING     TIMER_ELAPSED             → VISIBLE     (glow, start T_hold)
    VISIBLE       TIMER_ELAPSED             → DISAPPEARING(disappear flag, start T_transition)
    DISAPPEARING  TIMER_ELAPSED             → IDLE        (drop current, advance queue)
    any           BUSY                      → IDLE        (drop everything)
    any           SKIP (host not busy)      → IDLE        (drop everything, mark processed)
"""

from typing import Dict, Optional, Tuple

from models.domain.animation import (
    AnimationTiming,
    CLEARED_FLAGS,
    Effect,
    PlaybackContext,
    Transition,
    VisualFlags,
)
from models.enums import ChangeKind, DisappearType, EffectType, GlowType, PlaybackState, PlaybackTrigger

GLOW_BY_KIND: Dict[ChangeKind, GlowType] = {
    ChangeKind.GAIN: GlowType.GAIN,
    ChangeKind.LOSS: GlowType.LOSS,
    ChangeKind.TRANSFORM: GlowType.TRANSFORM_NEW,
}

DISAPPEAR_BY_KIND: Dict[ChangeKind, DisappearType] = {
    ChangeKind.GAIN: DisappearType.SHRINK_AWAY,
    ChangeKind.LOSS: DisappearType.GROW_AWAY,
    ChangeKind.TRANSFORM: DisappearType.SHRINK_AWAY,
}

APPEARING_FLAGS = VisualFlags(overlay_visible=True, card_visible=True)


def visible_flags(kind: Optional[ChangeKind]) -> VisualFlags:
    return VisualFlags(
        overlay_visible=True,
        card_visible=True,
        glow=GLOW_BY_KIND.get(kind),
    )


def disappearing_flags(kind: Optional[ChangeKind]) -> VisualFlags:
    return VisualFlags(
        overlay_visible=True,
        card_visible=False,
        disappear=DISAPPEAR_BY_KIND.get(kind, DisappearType.SHRINK_AWAY),
    )


def _reset(mark_processed: bool) -> Transition:
    """Drop everything and return to IDLE with all flags cleared"""
    effects: Tuple[Effect, ...] = (
        Effect(EffectType.CANCEL_TIMER),
        Effect(EffectType.CLEAR_QUEUE),
        Effect(EffectType.DROP_CURRENT),
        Effect(EffectType.SET_FLAGS, flags=CLEARED_FLAGS),
    )
    if mark_processed:
        effects += (Effect(EffectType.MARK_BATCH_PROCESSED),)
    return Transition(PlaybackState.IDLE, effects)


def _stay(state: PlaybackState) -> Transition:
    return Transition(state, ())


def _enter(state: PlaybackState, flags: VisualFlags, duration_ms: int, *extra: Effect) -> Transition:
    """Enter a timed state: cancel the old timer first, then arm a new one"""
    return Transition(
        state,
        (Effect(EffectType.CANCEL_TIMER),)
        + extra
        + (
            Effect(EffectType.SET_FLAGS, flags=flags),
            Effect(EffectType.START_TIMER, duration_ms=duration_ms),
        ),
    )


def transition(
    state: PlaybackState,
    trigger: PlaybackTrigger,
    context: PlaybackContext,
    timing: AnimationTiming,
) -> Transition:
    """Compute the next playback state and the effects needed to get there"""

    if trigger is PlaybackTrigger.SKIP:
        if context.busy:
            return _stay(state)
        return _reset(mark_processed=True)

    if trigger is PlaybackTrigger.BUSY:
        return _reset(mark_processed=True)

    if context.busy:
        # Stale timer or advance request racing a busy pulse
        if state is PlaybackState.IDLE:
            return _stay(state)
        return _reset(mark_processed=True)

    if trigger is PlaybackTrigger.ADVANCE:
        if state is not PlaybackState.IDLE:
            return _stay(state)
        if context.queue_size > 0:
            return _enter(
                PlaybackState.APPEARING,
                APPEARING_FLAGS,
                timing.transition_ms,
                Effect(EffectType.DEQUEUE),
            )
        return Transition(
            PlaybackState.IDLE,
            (
                Effect(EffectType.SET_FLAGS, flags=CLEARED_FLAGS),
                Effect(EffectType.MARK_BATCH_PROCESSED),
            ),
        )

    if trigger is PlaybackTrigger.TIMER_ELAPSED:
        if state is PlaybackState.APPEARING:
            return _enter(PlaybackState.VISIBLE, visible_flags(context.current_kind), timing.hold_ms)

        if state is PlaybackState.VISIBLE:
            return _enter(PlaybackState.DISAPPEARING, disappearing_flags(context.current_kind), timing.transition_ms)

        if state is PlaybackState.DISAPPEARING:
            return Transition(
                PlaybackState.IDLE,
                (
                    Effect(EffectType.CANCEL_TIMER),
                    Effect(EffectType.DROP_CURRENT),
                    Effect(EffectType.SET_FLAGS, flags=CLEARED_FLAGS),
                    Effect(EffectType.ADVANCE_QUEUE),
                ),
            )

        # Timer fired while idle: nothing to advance
        return _stay(state)

    raise ValueError(f"Unhandled playback trigger: {trigger}")
