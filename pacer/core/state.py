"""Shared runtime state for the phase clock."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Phase(str, Enum):
    SETUP = "SETUP"
    RUN = "RUN"
    WALK = "WALK"
    COMPLETE = "COMPLETE"


@dataclass
class ClockState:
    phase: Phase = Phase.SETUP
    time_left_sec: int = 0
    current_rep: int = 0
    elapsed_sec: int = 0
    running: bool = False
    pair_duration_sec: int = 0


@dataclass(frozen=True)
class ClockSnapshot:
    phase: Phase
    time_left_sec: int
    current_rep: int
    elapsed_sec: int
    running: bool
    pair_duration_sec: int
