"""Periodic tick driver for the phase clock."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

from pacer.core.clock import PhaseClock
from pacer.core.state import ClockSnapshot, Phase
from pacer.workout.model import WorkoutConfig

logger = logging.getLogger(__name__)

TickCallback = Callable[[ClockSnapshot], None]
FinishCallback = Callable[[bool], None]


class ClockRunner:
    def __init__(self, clock: PhaseClock, tick_interval_sec: float = 1.0) -> None:
        self._clock = clock
        self._tick_interval_sec = tick_interval_sec
        self._task: Optional[asyncio.Task[None]] = None
        self._stop_event = asyncio.Event()

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def clock(self) -> PhaseClock:
        return self._clock

    async def start(
        self,
        config: WorkoutConfig,
        on_tick: TickCallback | None = None,
        on_finish: FinishCallback | None = None,
    ) -> None:
        if self.is_running:
            raise RuntimeError("Clock runner already running")

        # Validation happens here so a bad config never spawns a task.
        self._clock.start(config)
        self._stop_event = asyncio.Event()
        self._task = asyncio.create_task(self._run(on_tick, on_finish))
        logger.debug("Clock runner started (interval=%.2fs)", self._tick_interval_sec)

    async def stop(self) -> None:
        if not self.is_running:
            return

        self._stop_event.set()
        assert self._task is not None
        await self._task
        self._task = None
        logger.debug("Clock runner stopped")

    async def wait(self) -> None:
        if self._task is not None:
            await self._task

    async def _run(
        self,
        on_tick: TickCallback | None,
        on_finish: FinishCallback | None,
    ) -> None:
        completed = False
        try:
            while not self._stop_event.is_set():
                try:
                    await asyncio.wait_for(
                        self._stop_event.wait(), timeout=self._tick_interval_sec
                    )
                    break
                except asyncio.TimeoutError:
                    pass

                was_active = self._clock.phase != Phase.SETUP
                self._clock.tick()
                if on_tick is not None:
                    on_tick(self._clock.snapshot())
                if self._clock.phase == Phase.SETUP:
                    # Only a tick can finish a workout; a SETUP seen before it means reset.
                    completed = was_active
                    break
        finally:
            if on_finish is not None:
                on_finish(completed)
