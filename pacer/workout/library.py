"""Built-in run/walk presets inspired by common beginner running plans."""

from __future__ import annotations

from dataclasses import dataclass

from pacer.workout.model import WorkoutConfig


class UnknownPresetError(KeyError):
    """Raised when a preset key does not exist."""


@dataclass(frozen=True)
class WorkoutPreset:
    key: str
    name: str
    category: str
    run_sec: int
    walk_sec: int
    repetitions: int


PRESETS: tuple[WorkoutPreset, ...] = (
    WorkoutPreset(
        key="c25k_w1",
        name="Couch to 5K Week 1",
        category="Beginner",
        run_sec=60,
        walk_sec=90,
        repetitions=8,
    ),
    WorkoutPreset(
        key="c25k_w2",
        name="Couch to 5K Week 2",
        category="Beginner",
        run_sec=90,
        walk_sec=120,
        repetitions=6,
    ),
    WorkoutPreset(
        key="galloway_3x1",
        name="Galloway 3:1",
        category="Endurance",
        run_sec=180,
        walk_sec=60,
        repetitions=10,
    ),
    WorkoutPreset(
        key="galloway_4x1",
        name="Galloway 4:1",
        category="Endurance",
        run_sec=240,
        walk_sec=60,
        repetitions=8,
    ),
    WorkoutPreset(
        key="strides_20x40",
        name="Strides 20/40",
        category="Speed",
        run_sec=20,
        walk_sec=40,
        repetitions=10,
    ),
    WorkoutPreset(
        key="intervals_1x1",
        name="Minute On / Minute Off",
        category="Speed",
        run_sec=60,
        walk_sec=60,
        repetitions=12,
    ),
)


def list_presets() -> tuple[WorkoutPreset, ...]:
    return PRESETS


def get_preset(key: str) -> WorkoutPreset:
    for preset in PRESETS:
        if preset.key == key:
            return preset
    raise UnknownPresetError(f"Unknown preset: {key}")


def build_config_from_preset(key: str) -> WorkoutConfig:
    preset = get_preset(key)
    config = WorkoutConfig(
        run_sec=preset.run_sec,
        walk_sec=preset.walk_sec,
        repetitions=preset.repetitions,
        name=preset.name,
    )
    config.validate()
    return config
