"""Terminal CLI entrypoint for the Pacer interval timer."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from pacer.core.state import ClockSnapshot
from pacer.ui.announcer import TerminalAnnouncer
from pacer.ui.controller import UIController
from pacer.workout.library import UnknownPresetError, build_config_from_preset, list_presets
from pacer.workout.model import ConfigError, WorkoutConfig
from pacer.workout.parser import load_workout_config
from pacer.workout.progress import format_time, phase_label

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_INVALID_WORKOUT = 2
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Pacer run/walk interval timer")
    parser.add_argument("--run", type=int, default=None, help="Run phase length in seconds")
    parser.add_argument("--walk", type=int, default=None, help="Walk phase length in seconds")
    parser.add_argument("--reps", type=int, default=None, help="Number of repetitions")
    parser.add_argument("--preset", default=None, help="Use a built-in preset by key")
    parser.add_argument(
        "--list-presets",
        action="store_true",
        help="Print built-in presets and exit",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Load the workout from a .json or .csv file",
    )
    parser.add_argument("--mute", action="store_true", help="Disable audible cues")
    parser.add_argument(
        "--ui-web",
        action="store_true",
        help="Launch web UI (NiceGUI) instead of the terminal timer",
    )
    parser.add_argument(
        "--web-host",
        default="127.0.0.1",
        help="Host bind for --ui-web",
    )
    parser.add_argument(
        "--web-port",
        type=int,
        default=8088,
        help="Port for --ui-web",
    )
    parser.add_argument(
        "--tick-interval",
        type=float,
        default=1.0,
        help=argparse.SUPPRESS,
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def resolve_config(args: argparse.Namespace) -> WorkoutConfig | None:
    """Build the workout from --config, --preset or --run/--walk/--reps.

    Returns ``None`` when no workout source was given at all.
    """
    if args.config:
        return load_workout_config(args.config)
    if args.preset:
        return build_config_from_preset(args.preset)

    manual = (args.run, args.walk, args.reps)
    if all(value is None for value in manual):
        return None
    config = WorkoutConfig(run_sec=args.run, walk_sec=args.walk, repetitions=args.reps)
    config.validate()
    return config


def format_status_line(snapshot: ClockSnapshot, config: WorkoutConfig, progress_pct: float) -> str:
    label = phase_label(snapshot.phase, snapshot.current_rep, config.repetitions)
    return (
        f"{label:<18} | {format_time(snapshot.time_left_sec)} "
        f"| Total {format_time(snapshot.elapsed_sec)} | {progress_pct:5.1f}%"
    )


async def run_terminal(
    config: WorkoutConfig,
    muted: bool = False,
    tick_interval_sec: float = 1.0,
) -> bool:
    announcer = TerminalAnnouncer(muted=muted)
    controller = UIController(sink=announcer, tick_interval_sec=tick_interval_sec)
    finished: list[bool] = []

    def on_tick(snapshot: ClockSnapshot) -> None:
        if snapshot.running:
            print(format_status_line(snapshot, config, controller.workout_progress_pct()))

    name = config.name or "Interval workout"
    print(
        f"{name}: {config.repetitions} x ({format_time(config.run_sec)} run"
        f" + {format_time(config.walk_sec)} walk)"
    )
    await controller.start_workout(config, on_tick=on_tick, on_finish=finished.append)
    try:
        await controller.wait_finished()
    finally:
        if controller.workout_running:
            await controller.reset()

    snapshot = controller.snapshot()
    print(f"Total time: {format_time(snapshot.elapsed_sec)}")
    return bool(finished and finished[-1])


def print_presets() -> None:
    for preset in list_presets():
        print(
            f"{preset.key:<16} {preset.name:<24} {preset.category:<10} "
            f"{preset.repetitions} x {format_time(preset.run_sec)}/{format_time(preset.walk_sec)}"
        )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    if args.list_presets:
        print_presets()
        return EXIT_OK

    try:
        config = resolve_config(args)
    except (ConfigError, UnknownPresetError) as exc:
        message = exc.args[0] if isinstance(exc, KeyError) and exc.args else exc
        print(f"Error: {message}", file=sys.stderr)
        return EXIT_INVALID_WORKOUT

    if args.ui_web:
        from pacer.ui.web_app import run_web_ui

        return run_web_ui(
            host=args.web_host,
            port=args.web_port,
            muted=args.mute,
            initial_config=config,
        )

    if config is None:
        parser.print_help()
        return EXIT_USAGE

    try:
        asyncio.run(
            run_terminal(
                config,
                muted=args.mute,
                tick_interval_sec=max(0.0, args.tick_interval),
            )
        )
    except KeyboardInterrupt:
        print("Stopped")
        return EXIT_INTERRUPTED
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
