"""
Item Change Animator

Plays the item changes of a game turn back one at a time:

    turn changes → ChangeClassifier → AnimationQueue → playback state machine
                                                         │
                                     scheduler timers ───┘──→ render adapter

The animator owns the queue, the single pending timer and the batch
bookkeeping. State decisions are delegated to the pure transition function in
engine.playback_state_machine; this class only applies the returned effects.
"""

from typing import Any, Callable, List, Optional

from components.render_adapter import IRenderAdapter
from engine.animation_queue import AnimationQueue
from engine.playback_state_machine import transition
from engine.scheduler import IScheduler
from models.domain.animation import (
    AnimationQueueEntry,
    AnimationTiming,
    CLEARED_FLAGS,
    Effect,
    PlaybackContext,
    VisualFlags,
)
from models.domain.turn_changes import TurnChanges
from models.dto.animator_snapshot_dto import AnimatorSnapshotDTO
from models.enums import EffectType, PlaybackState, PlaybackTrigger
from services.change_classifier import ChangeClassifier
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.ANIMATION)

SnapshotListener = Callable[[AnimatorSnapshotDTO], None]
BatchListener = Callable[[TurnChanges], None]


class ItemChangeAnimator:
    """
    Turn change animation scheduler

    Host inputs:
    - set_turn_changes(batch): latest batch (compared by identity)
    - set_busy(flag): host is computing the next turn
    - skip_all(): user wants everything gone now

    Guarantees:
    - at most one current entry and one pending timer
    - entries play loss → gain → transform, one at a time
    - a busy pulse resets to IDLE immediately, nothing survives it
    - a batch is played at most once; batches arriving mid-playback are
      deferred and only the latest one is considered once idle

    Example:
        animator = ItemChangeAnimator(AsyncioScheduler(), render_adapter=renderer)
        animator.set_turn_changes(batch)
        ...
        animator.skip_all()
    """

    def __init__(
        self,
        scheduler: IScheduler,
        timing: Optional[AnimationTiming] = None,
        classifier: Optional[ChangeClassifier] = None,
        render_adapter: Optional[IRenderAdapter] = None,
    ):
        self.scheduler = scheduler
        self.timing = timing or AnimationTiming()
        self.classifier = classifier or ChangeClassifier()
        self.render_adapter = render_adapter

        self.queue = AnimationQueue(is_idle=lambda: self.is_idle)

        self._state = PlaybackState.IDLE
        self._current: Optional[AnimationQueueEntry] = None
        self._flags: VisualFlags = CLEARED_FLAGS
        self._busy = False

        # Single owned timer; generation invalidates callbacks of cancelled timers
        self._timer_handle: Any = None
        self._timer_generation = 0

        # Batch bookkeeping (identity only)
        self._latest_batch: Optional[TurnChanges] = None
        self._tracked_batch: Optional[TurnChanges] = None
        self._processed_batch: Optional[TurnChanges] = None

        self.entries_completed = 0

        self._snapshot_listeners: List[SnapshotListener] = []
        self._batch_listeners: List[BatchListener] = []

        log.debug(
            "ItemChangeAnimator initialized",
            transition_ms=self.timing.transition_ms,
            hold_ms=self.timing.hold_ms,
        )

    # ============================================================
    # Read-only state
    # ============================================================

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def current_entry(self) -> Optional[AnimationQueueEntry]:
        return self._current

    @property
    def flags(self) -> VisualFlags:
        return self._flags

    @property
    def is_busy(self) -> bool:
        return self._busy

    @property
    def is_idle(self) -> bool:
        return self._state is PlaybackState.IDLE and self._current is None

    @property
    def queue_size(self) -> int:
        return len(self.queue)

    @property
    def has_pending_timer(self) -> bool:
        return self._timer_handle is not None

    @property
    def tracked_batch(self) -> Optional[TurnChanges]:
        return self._tracked_batch

    def is_batch_processed(self, batch: Optional[TurnChanges]) -> bool:
        return batch is not None and batch is self._processed_batch

    def snapshot(self) -> AnimatorSnapshotDTO:
        return AnimatorSnapshotDTO.from_state(self._state, self._flags, self._current, len(self.queue))

    # ============================================================
    # Listeners
    # ============================================================

    def add_snapshot_listener(self, listener: SnapshotListener) -> None:
        """Called with a fresh snapshot after every applied transition"""
        self._snapshot_listeners.append(listener)

    def add_batch_listener(self, listener: BatchListener) -> None:
        """Called once per batch when it is marked fully processed"""
        self._batch_listeners.append(listener)

    # ============================================================
    # Host inputs
    # ============================================================

    def set_turn_changes(self, batch: Optional[TurnChanges]) -> None:
        """Record the host's latest batch and play it if possible"""
        self._latest_batch = batch
        if batch is None and not self._busy and self.queue:
            # Abandon the queued remainder; the current entry still finishes
            dropped = self.queue.clear()
            log.info("Batch withdrawn, queued entries abandoned", dropped=dropped)
        self._reconsider()

    def set_busy(self, busy: bool) -> None:
        """Host busy signal. Going busy drops all animation state at once."""
        was_busy = self._busy
        self._busy = busy

        if busy and not was_busy:
            log.info("Host busy, resetting animations", state=self._state.name, dropped=len(self.queue))
            self._dispatch(PlaybackTrigger.BUSY)
        elif not busy and was_busy:
            log.debug("Host idle again")
            self._reconsider()

    def skip_all(self) -> None:
        """Force-complete everything pending and in flight (no-op while busy)"""
        if self._busy:
            log.debug("Skip ignored: host busy")
            return
        log.info("Skipping item animations", state=self._state.name, remaining=len(self.queue))
        self._dispatch(PlaybackTrigger.SKIP)

    # ============================================================
    # Batch intake
    # ============================================================

    def _reconsider(self) -> None:
        """Classify the latest batch when idle; otherwise defer it"""
        if self._busy:
            return

        batch = self._latest_batch
        if batch is None or batch is self._processed_batch or batch is self._tracked_batch:
            return

        if not self.is_idle:
            log.debug("New batch deferred until playback is idle", state=self._state.name)
            return

        entries = self.classifier.classify(batch, busy=self._busy)
        self._tracked_batch = batch

        if not entries:
            log.debug("Batch has nothing to animate")
            self._mark_processed(include_latest=False)
            return

        log.info(f"Animating {len(entries)} item change(s)", order=[e.kind.name for e in entries])
        self.queue.replace_all(entries)
        self._dispatch(PlaybackTrigger.ADVANCE)

    def _mark_processed(self, include_latest: bool) -> None:
        batch = self._tracked_batch
        if batch is None and include_latest and self._latest_batch is not self._processed_batch:
            batch = self._latest_batch
        self._tracked_batch = None
        if batch is None:
            return

        self._processed_batch = batch
        log.debug("Batch marked processed")
        for listener in self._batch_listeners:
            try:
                listener(batch)
            except Exception as e:
                log.error("Batch listener failed", exception=e)

    # ============================================================
    # State machine driver
    # ============================================================

    def _context(self) -> PlaybackContext:
        return PlaybackContext(
            busy=self._busy,
            queue_size=len(self.queue),
            current_kind=self._current.kind if self._current else None,
        )

    def _dispatch(self, trigger: PlaybackTrigger) -> None:
        previous = self._state
        result = transition(previous, trigger, self._context(), self.timing)
        if not result.effects:
            return

        self._state = result.state
        advance_after = False
        for effect in result.effects:
            if effect.type is EffectType.ADVANCE_QUEUE:
                advance_after = True
            else:
                self._apply(effect, trigger)

        if previous is PlaybackState.DISAPPEARING and trigger is PlaybackTrigger.TIMER_ELAPSED:
            self.entries_completed += 1

        if previous is not result.state:
            log.debug(
                f"{previous.name} → {result.state.name}",
                trigger=trigger.name,
                item=self._current.display_name if self._current else None,
            )

        self._publish_snapshot()

        if advance_after:
            self._dispatch(PlaybackTrigger.ADVANCE)

        if self._state is PlaybackState.IDLE and not self._busy:
            self._reconsider()

    def _apply(self, effect: Effect, trigger: PlaybackTrigger) -> None:
        if effect.type is EffectType.CANCEL_TIMER:
            self._cancel_timer()
        elif effect.type is EffectType.START_TIMER:
            self._start_timer(effect.duration_ms or 0)
        elif effect.type is EffectType.DEQUEUE:
            self._current = self.queue.pop_next()
            if self._current:
                log.info(f"{self._current.kind.name}: {self._current.display_name}")
        elif effect.type is EffectType.SET_FLAGS:
            self._flags = effect.flags or CLEARED_FLAGS
        elif effect.type is EffectType.DROP_CURRENT:
            self._current = None
        elif effect.type is EffectType.CLEAR_QUEUE:
            self.queue.clear()
        elif effect.type is EffectType.MARK_BATCH_PROCESSED:
            self._mark_processed(include_latest=trigger in (PlaybackTrigger.BUSY, PlaybackTrigger.SKIP))

    # ============================================================
    # Timer
    # ============================================================

    def _start_timer(self, duration_ms: int) -> None:
        self._cancel_timer()
        generation = self._timer_generation
        self._timer_handle = self.scheduler.after(duration_ms, lambda: self._on_timer(generation))

    def _cancel_timer(self) -> None:
        if self._timer_handle is not None:
            self.scheduler.cancel(self._timer_handle)
            self._timer_handle = None
        self._timer_generation += 1

    def _on_timer(self, generation: int) -> None:
        if generation != self._timer_generation:
            log.debug("Stale timer ignored", state=self._state.name)
            return
        self._timer_handle = None
        self._dispatch(PlaybackTrigger.TIMER_ELAPSED)

    # ============================================================
    # Output
    # ============================================================

    def _publish_snapshot(self) -> None:
        if self.render_adapter is None and not self._snapshot_listeners:
            return

        snapshot = self.snapshot()
        if self.render_adapter is not None:
            try:
                self.render_adapter.render(snapshot)
            except Exception as e:
                log.error("Render adapter failed", exception=e)
        for listener in self._snapshot_listeners:
            try:
                listener(snapshot)
            except Exception as e:
                log.error("Snapshot listener failed", exception=e)
