"""Progress and display helpers for the phase clock."""

from __future__ import annotations

from pacer.core.state import ClockSnapshot, ClockState, Phase
from pacer.workout.model import WorkoutConfig


def format_time(seconds: int) -> str:
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"


def calculate_progress(
    state: ClockState | ClockSnapshot, config: WorkoutConfig | None
) -> float:
    """Percentage shown on the progress bar.

    Measured against the current run/walk pair only (pair length minus the
    time left in the phase), divided by the whole workout length. It does not
    advance across repetitions; see :func:`calculate_workout_progress`.
    """
    if state.phase == Phase.SETUP or config is None:
        return 0.0
    total_sec = config.total_duration_sec
    completed_sec = state.pair_duration_sec - state.time_left_sec
    return _clamp_pct(completed_sec / total_sec * 100.0)


def calculate_workout_progress(
    state: ClockState | ClockSnapshot, config: WorkoutConfig | None
) -> float:
    if state.phase == Phase.SETUP or config is None:
        return 0.0
    return _clamp_pct(state.elapsed_sec / config.total_duration_sec * 100.0)


def phase_label(phase: Phase, rep: int, repetitions: int | None) -> str:
    if phase == Phase.SETUP:
        return "Ready"
    if phase == Phase.COMPLETE:
        return "Workout Complete"
    if repetitions is None:
        return f"{phase.value} · Rep {rep}"
    return f"{phase.value} · Rep {rep}/{repetitions}"


def _clamp_pct(value: float) -> float:
    return max(0.0, min(100.0, value))
