"""Workout domain models."""

from __future__ import annotations

from dataclasses import dataclass


class ConfigError(ValueError):
    """Raised when a workout configuration is invalid."""


@dataclass(frozen=True)
class WorkoutConfig:
    run_sec: int
    walk_sec: int
    repetitions: int
    name: str | None = None

    @property
    def pair_duration_sec(self) -> int:
        return self.run_sec + self.walk_sec

    @property
    def total_duration_sec(self) -> int:
        return self.repetitions * self.pair_duration_sec

    def validate(self) -> None:
        for field_name in ("run_sec", "walk_sec", "repetitions"):
            value = getattr(self, field_name)
            if value is None:
                raise ConfigError(f"{field_name} is required")
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{field_name} must be an integer")
            if value <= 0:
                raise ConfigError(f"{field_name} must be > 0")
