#!/usr/bin/env python3
"""
main.py — Item change animator replay
-------------------------------------

Replays recorded turn change documents through the animator and renders the
cards on the terminal. Press ENTER or SPACE to skip the running animations.

Responsible for:
- loading configuration and setting up logging
- wiring dependencies (event bus, animator, controllers, renderer)
- replaying batches in order, one turn at a time
- clean shutdown on Ctrl+C

Usage:
    python src/main.py samples/turn_changes.yaml
    python src/main.py --speed 4 --no-keyboard samples/turn_changes.yaml
"""

import sys

# Card glyphs and log symbols are UTF-8
if hasattr(sys.stdout, 'reconfigure') and (sys.stdout.encoding or '').lower() != 'utf-8':
    sys.stdout.reconfigure(encoding='utf-8')  # type: ignore
if hasattr(sys.stderr, 'reconfigure') and (sys.stderr.encoding or '').lower() != 'utf-8':
    sys.stderr.reconfigure(encoding='utf-8')  # type: ignore

import argparse
import asyncio
from typing import List, Optional

from components import ConsoleCardRenderer
from controllers import HostSyncController, SkipController
from engine.item_change_animator import ItemChangeAnimator
from engine.scheduler import AsyncioScheduler
from inputs import create_keyboard_adapter
from managers import ConfigManager
from models.enums import LogCategory
from models.exceptions import AnimatorError
from services.animator_event_forwarder import AnimatorEventForwarder
from services.event_bus import EventBus
from services.middleware import log_middleware
from services.replay_service import ReplayService, load_batches
from utils.logger import configure_logger, get_logger

log = get_logger().for_category(LogCategory.SYSTEM)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Replay turn change batches through the item change animator")
    parser.add_argument("batches", nargs="+", help="Batch files (.yaml, .yml or .json), replayed in order")
    parser.add_argument("--config", default="config/config.yaml", help="Config file (relative to src/)")
    parser.add_argument("--speed", type=float, default=1.0, help="Playback speed divisor (2 = twice as fast)")
    parser.add_argument("--no-keyboard", action="store_true", help="Disable ENTER/SPACE skip input")
    return parser.parse_args(argv)


async def main(argv: Optional[List[str]] = None) -> int:
    """Main async entry point (dependency injection and replay)."""
    args = parse_args(argv)

    # ========================================================================
    # 1. CONFIGURATION
    # ========================================================================

    config_manager = ConfigManager(config_path=args.config)
    config_manager.load()

    min_level, use_colors = config_manager.get_log_settings()
    configure_logger(min_level=min_level, use_colors=use_colors)

    log.info("Starting item change animator replay...")

    timing = config_manager.get_animation_timing()
    if args.speed != 1.0:
        timing = timing.scaled(args.speed)
    log.info("Animation timing", transition_ms=timing.transition_ms, hold_ms=timing.hold_ms)

    batches = []
    for path in args.batches:
        batches.extend(load_batches(path))
    if not batches:
        log.warn("No batches to replay")
        return 0

    # ========================================================================
    # 2. EVENT BUS + ANIMATOR
    # ========================================================================

    event_bus = EventBus()
    event_bus.add_middleware(log_middleware)

    animator = ItemChangeAnimator(
        scheduler=AsyncioScheduler(),
        timing=timing,
        render_adapter=ConsoleCardRenderer(),
    )
    forwarder = AnimatorEventForwarder(animator, event_bus)

    # ========================================================================
    # 3. CONTROLLERS + INPUT
    # ========================================================================

    HostSyncController(animator, event_bus)
    skip_controller = SkipController(animator, event_bus, skip_keys=config_manager.get_skip_keys())

    keyboard_enabled = config_manager.is_keyboard_enabled() and not args.no_keyboard
    keyboard_adapter = create_keyboard_adapter(event_bus, enabled=keyboard_enabled)
    keyboard_task = asyncio.create_task(keyboard_adapter.run())

    # ========================================================================
    # 4. REPLAY
    # ========================================================================

    replay = ReplayService(event_bus)
    try:
        played = await replay.play(batches)
        await forwarder.drain()
        log.info(
            "Replay finished",
            turns=played,
            entries=animator.entries_completed,
            skips=skip_controller.skips_requested,
        )
    finally:
        keyboard_task.cancel()
        try:
            await keyboard_task
        except asyncio.CancelledError:
            pass

    return 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        log.info("Interrupted")
        sys.exit(130)
    except (AnimatorError, OSError) as e:
        log.error("Replay failed", exception=e)
        sys.exit(1)
