from __future__ import annotations

from pacer.core.clock import PhaseClock
from pacer.core.events import Paused, PhaseEntered, TickWarning, WorkoutComplete
from pacer.core.state import Phase
from pacer.ui.announcer import (
    PHASE_TONE_SEC,
    RUN_TONE_HZ,
    TICK_TONE_HZ,
    WALK_TONE_HZ,
    MutedSink,
    QueuedAnnouncer,
    TerminalAnnouncer,
    cue_for_event,
)
from pacer.workout.model import WorkoutConfig


def test_cue_mapping() -> None:
    run = cue_for_event(PhaseEntered(Phase.RUN, rep=1))
    assert run is not None
    assert run.tone_hz == RUN_TONE_HZ
    assert run.tone_sec == PHASE_TONE_SEC
    assert run.speech == "RUN"
    assert run.speech_delay_sec > 0

    walk = cue_for_event(PhaseEntered(Phase.WALK, rep=1))
    assert walk is not None
    assert walk.tone_hz == WALK_TONE_HZ
    assert walk.speech == "WALK"

    tick = cue_for_event(TickWarning(4))
    assert tick is not None
    assert tick.tone_hz == TICK_TONE_HZ
    assert tick.speech is None

    reset = cue_for_event(PhaseEntered(Phase.SETUP))
    assert reset is not None and reset.speech == "Reset" and reset.tone_hz is None

    paused = cue_for_event(Paused())
    assert paused is not None and paused.speech == "Paused"

    done = cue_for_event(WorkoutComplete())
    assert done is not None and done.speech == "Workout Complete"

    assert cue_for_event(PhaseEntered(Phase.COMPLETE)) is None


def test_terminal_announcer_output() -> None:
    lines: list[str] = []
    announcer = TerminalAnnouncer(write=lines.append)
    clock = PhaseClock(sink=announcer)

    clock.start(WorkoutConfig(run_sec=2, walk_sec=1, repetitions=2))
    clock.tick()
    clock.tick()
    clock.tick()
    clock.pause()

    assert lines == [">> RUN (rep 1)", "\a   1...", ">> WALK (rep 1)", ">> Paused"]


def test_terminal_announcer_mute_toggle() -> None:
    lines: list[str] = []
    announcer = TerminalAnnouncer(muted=True, write=lines.append)

    announcer.notify(PhaseEntered(Phase.RUN, rep=1))
    assert lines == []

    assert announcer.toggle_mute() is False
    announcer.notify(WorkoutComplete())
    assert lines == [">> Workout Complete"]


def test_queued_announcer_drains_in_order() -> None:
    announcer = QueuedAnnouncer()
    clock = PhaseClock(sink=announcer)

    clock.start(WorkoutConfig(run_sec=3, walk_sec=1, repetitions=2))
    clock.tick()

    cues = announcer.drain()
    assert [cue.speech for cue in cues] == ["RUN", None]
    assert cues[1].tone_hz == TICK_TONE_HZ
    assert announcer.drain() == []


def test_queued_announcer_mute_drops_pending() -> None:
    announcer = QueuedAnnouncer()
    announcer.notify(Paused())

    announcer.toggle_mute()
    announcer.notify(WorkoutComplete())

    assert announcer.drain() == []


def test_muted_sink_accepts_everything() -> None:
    clock = PhaseClock(sink=MutedSink())
    clock.start(WorkoutConfig(run_sec=1, walk_sec=1, repetitions=1))
    clock.tick()
    clock.tick()

    assert clock.phase == Phase.SETUP
