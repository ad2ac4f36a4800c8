"""Run/walk phase clock driven by an external one-second tick."""

from __future__ import annotations

import logging

from pacer.core.events import (
    ClockEvent,
    NotificationSink,
    Paused,
    PhaseEntered,
    TickWarning,
    WorkoutComplete,
)
from pacer.core.state import ClockSnapshot, ClockState, Phase
from pacer.workout.model import WorkoutConfig

logger = logging.getLogger(__name__)

WARNING_MAX_SEC = 6
WARNING_MIN_SEC = 2

_TRANSITIONS: frozenset[tuple[Phase, Phase]] = frozenset(
    {
        (Phase.SETUP, Phase.RUN),
        (Phase.RUN, Phase.WALK),
        (Phase.WALK, Phase.RUN),
        (Phase.RUN, Phase.COMPLETE),
        (Phase.WALK, Phase.COMPLETE),
        (Phase.COMPLETE, Phase.SETUP),
    }
)


class InvalidTransition(RuntimeError):
    """Raised when the clock is asked to take an edge outside the phase graph."""


class PhaseClock:
    """Single source of truth for phase, countdown, repetition and elapsed time.

    The clock never sleeps: a driver calls :meth:`tick` once per second while
    the workout is running. Every state change that matters to the outside
    world is pushed to the sink as an event.
    """

    def __init__(self, sink: NotificationSink | None = None) -> None:
        self._sink = sink
        self._state = ClockState()
        self._config: WorkoutConfig | None = None

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def time_left_sec(self) -> int:
        return self._state.time_left_sec

    @property
    def current_rep(self) -> int:
        return self._state.current_rep

    @property
    def elapsed_sec(self) -> int:
        return self._state.elapsed_sec

    @property
    def running(self) -> bool:
        return self._state.running

    @property
    def config(self) -> WorkoutConfig | None:
        return self._config

    def snapshot(self) -> ClockSnapshot:
        state = self._state
        return ClockSnapshot(
            phase=state.phase,
            time_left_sec=state.time_left_sec,
            current_rep=state.current_rep,
            elapsed_sec=state.elapsed_sec,
            running=state.running,
            pair_duration_sec=state.pair_duration_sec,
        )

    def set_sink(self, sink: NotificationSink | None) -> None:
        self._sink = sink

    def start(self, config: WorkoutConfig) -> None:
        """Begin a workout, or continue a paused one.

        Raises :class:`~pacer.workout.model.ConfigError` without touching the
        state when ``config`` is invalid.
        """
        config.validate()
        if self._state.phase != Phase.SETUP:
            self.resume()
            return

        self._config = config
        self._enter(Phase.RUN)
        self._state.current_rep = 1
        self._state.time_left_sec = config.run_sec
        self._state.pair_duration_sec = config.pair_duration_sec
        self._state.elapsed_sec = 0
        self._state.running = True
        self._emit(PhaseEntered(Phase.RUN, rep=1))

    def pause(self) -> None:
        if not self._state.running:
            return
        self._state.running = False
        self._emit(Paused())

    def resume(self) -> None:
        if self._state.running:
            return
        if self._state.phase in (Phase.SETUP, Phase.COMPLETE):
            return
        self._state.running = True

    def reset(self) -> None:
        # elapsed_sec survives a reset; only the next start clears it.
        previous = self._state.phase
        self._state.phase = Phase.SETUP
        self._state.current_rep = 0
        self._state.time_left_sec = 0
        self._state.running = False
        self._config = None
        if previous != Phase.SETUP:
            logger.debug("Phase %s -> %s (reset)", previous.value, Phase.SETUP.value)
            self._emit(PhaseEntered(Phase.SETUP, rep=0))

    def tick(self) -> None:
        state = self._state
        if not state.running:
            return

        if state.time_left_sec > 0:
            state.elapsed_sec += 1
            if WARNING_MIN_SEC <= state.time_left_sec <= WARNING_MAX_SEC:
                self._emit(TickWarning(state.time_left_sec))
            state.time_left_sec -= 1
            return

        self._advance_phase()

    def _advance_phase(self) -> None:
        state = self._state
        config = self._config
        assert config is not None

        if state.phase == Phase.RUN:
            # Completion is checked before the increment while running...
            if state.current_rep < config.repetitions:
                self._enter(Phase.WALK)
                state.time_left_sec = config.walk_sec
                self._emit(PhaseEntered(Phase.WALK, rep=state.current_rep))
            else:
                self._complete()
        elif state.phase == Phase.WALK:
            # ...and after it while walking.
            state.current_rep += 1
            if state.current_rep < config.repetitions:
                self._enter(Phase.RUN)
                state.time_left_sec = config.run_sec
                self._emit(PhaseEntered(Phase.RUN, rep=state.current_rep))
            else:
                self._complete()

    def _complete(self) -> None:
        self._enter(Phase.COMPLETE)
        # COMPLETE is transient: reset() takes the COMPLETE -> SETUP edge.
        self.reset()
        self._emit(WorkoutComplete())

    def _enter(self, phase: Phase) -> None:
        previous = self._state.phase
        if (previous, phase) not in _TRANSITIONS:
            raise InvalidTransition(f"{previous.value} -> {phase.value}")
        logger.debug("Phase %s -> %s", previous.value, phase.value)
        self._state.phase = phase

    def _emit(self, event: ClockEvent) -> None:
        if self._sink is None:
            return
        try:
            self._sink.notify(event)
        except Exception:
            logger.exception("Notification sink failed on %s", type(event).__name__)
