"""Audible cues for clock events: tones, spoken phase names, terminal output."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from pacer.core.events import (
    ClockEvent,
    Paused,
    PhaseEntered,
    TickWarning,
    WorkoutComplete,
)
from pacer.core.state import Phase

TICK_TONE_HZ = 800
TICK_TONE_SEC = 0.1
TICK_TONE_GAIN = 0.1
RUN_TONE_HZ = 880
WALK_TONE_HZ = 440
PHASE_TONE_SEC = 0.5
PHASE_TONE_GAIN = 0.3
SPEECH_DELAY_SEC = 0.5


@dataclass(frozen=True)
class Cue:
    tone_hz: int | None = None
    tone_sec: float = 0.0
    tone_gain: float = 0.0
    speech: str | None = None
    speech_delay_sec: float = 0.0


def cue_for_event(event: ClockEvent) -> Cue | None:
    if isinstance(event, TickWarning):
        return Cue(tone_hz=TICK_TONE_HZ, tone_sec=TICK_TONE_SEC, tone_gain=TICK_TONE_GAIN)
    if isinstance(event, Paused):
        return Cue(speech="Paused")
    if isinstance(event, WorkoutComplete):
        return Cue(speech="Workout Complete")
    if isinstance(event, PhaseEntered):
        if event.phase == Phase.SETUP:
            return Cue(speech="Reset")
        if event.phase in (Phase.RUN, Phase.WALK):
            return Cue(
                tone_hz=RUN_TONE_HZ if event.phase == Phase.RUN else WALK_TONE_HZ,
                tone_sec=PHASE_TONE_SEC,
                tone_gain=PHASE_TONE_GAIN,
                speech=event.phase.value,
                speech_delay_sec=SPEECH_DELAY_SEC,
            )
    return None


class MutedSink:
    def notify(self, event: ClockEvent) -> None:
        return None


class RecordingSink:
    """Keeps every event it receives, in order."""

    def __init__(self) -> None:
        self.events: list[ClockEvent] = []

    def notify(self, event: ClockEvent) -> None:
        self.events.append(event)

    def of_type(self, kind: type) -> list[ClockEvent]:
        return [event for event in self.events if isinstance(event, kind)]

    def clear(self) -> None:
        self.events.clear()


class TerminalAnnouncer:
    def __init__(
        self,
        muted: bool = False,
        write: Callable[[str], None] | None = None,
    ) -> None:
        self.muted = muted
        self._write = write or _print_line

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        return self.muted

    def notify(self, event: ClockEvent) -> None:
        if self.muted:
            return
        cue = cue_for_event(event)
        if cue is None:
            return
        if cue.speech is not None:
            rep = f" (rep {event.rep})" if isinstance(event, PhaseEntered) and event.rep else ""
            self._write(f">> {cue.speech}{rep}")
        elif isinstance(event, TickWarning):
            # Terminal bell stands in for the tick tone.
            self._write(f"\a   {event.time_left_sec - 1}...")


def _print_line(text: str) -> None:
    print(text, flush=True)


class QueuedAnnouncer:
    """Collects cues for a renderer that plays them on its own refresh loop."""

    def __init__(self, muted: bool = False) -> None:
        self.muted = muted
        self._pending: list[Cue] = []

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        if self.muted:
            self._pending.clear()
        return self.muted

    def notify(self, event: ClockEvent) -> None:
        if self.muted:
            return
        cue = cue_for_event(event)
        if cue is not None:
            self._pending.append(cue)

    def drain(self) -> list[Cue]:
        cues = self._pending
        self._pending = []
        return cues
