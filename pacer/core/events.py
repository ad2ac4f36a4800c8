"""Events emitted by the phase clock and the sink contract that consumes them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union

from pacer.core.state import Phase


@dataclass(frozen=True)
class PhaseEntered:
    phase: Phase
    rep: int = 0


@dataclass(frozen=True)
class TickWarning:
    time_left_sec: int


@dataclass(frozen=True)
class Paused:
    pass


@dataclass(frozen=True)
class WorkoutComplete:
    pass


ClockEvent = Union[PhaseEntered, TickWarning, Paused, WorkoutComplete]


class NotificationSink(Protocol):
    def notify(self, event: ClockEvent) -> None:
        ...
