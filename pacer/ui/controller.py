"""Async controller shared by the terminal driver and the web UI."""

from __future__ import annotations

from typing import Callable

from pacer.core.clock import PhaseClock
from pacer.core.events import NotificationSink
from pacer.core.state import ClockSnapshot, Phase
from pacer.workout.model import WorkoutConfig
from pacer.workout.progress import calculate_progress, calculate_workout_progress
from pacer.workout.runner import ClockRunner


class UIController:
    def __init__(
        self,
        sink: NotificationSink | None = None,
        tick_interval_sec: float = 1.0,
    ) -> None:
        self._clock = PhaseClock(sink=sink)
        self._runner = ClockRunner(self._clock, tick_interval_sec=tick_interval_sec)
        self._last_config: WorkoutConfig | None = None

    async def start_workout(
        self,
        config: WorkoutConfig,
        on_tick: Callable[[ClockSnapshot], None] | None = None,
        on_finish: Callable[[bool], None] | None = None,
    ) -> None:
        if self._clock.phase != Phase.SETUP:
            # Start doubles as resume once a workout is underway.
            self._clock.start(config)
            return
        await self._runner.start(config, on_tick=on_tick, on_finish=on_finish)
        self._last_config = config

    def pause(self) -> None:
        self._clock.pause()

    def resume(self) -> None:
        self._clock.resume()

    async def reset(self) -> None:
        self._clock.reset()
        await self._runner.stop()

    async def wait_finished(self) -> None:
        await self._runner.wait()

    def snapshot(self) -> ClockSnapshot:
        return self._clock.snapshot()

    def progress_pct(self) -> float:
        return calculate_progress(self._clock.snapshot(), self._clock.config)

    def workout_progress_pct(self) -> float:
        return calculate_workout_progress(self._clock.snapshot(), self._clock.config)

    @property
    def clock(self) -> PhaseClock:
        return self._clock

    @property
    def config(self) -> WorkoutConfig | None:
        return self._clock.config

    @property
    def last_config(self) -> WorkoutConfig | None:
        return self._last_config

    @property
    def workout_running(self) -> bool:
        return self._runner.is_running
