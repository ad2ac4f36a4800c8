from __future__ import annotations

from pathlib import Path

import pytest

from pacer.workout.model import ConfigError
from pacer.workout.parser import WorkoutConfigError, load_workout_config


def test_load_workout_config_json(tmp_path: Path) -> None:
    workout_file = tmp_path / "sample.json"
    workout_file.write_text(
        '{"name":"Lunch Intervals","run_sec":90,"walk_sec":60,"repetitions":6}',
        encoding="utf-8",
    )

    config = load_workout_config(workout_file)

    assert config.name == "Lunch Intervals"
    assert config.run_sec == 90
    assert config.walk_sec == 60
    assert config.repetitions == 6


def test_load_workout_config_json_defaults_name_to_stem(tmp_path: Path) -> None:
    workout_file = tmp_path / "easy_day.json"
    workout_file.write_text('{"run_sec":"30","walk_sec":30.0,"repetitions":4}', encoding="utf-8")

    config = load_workout_config(workout_file)

    assert config.name == "easy_day"
    assert config.run_sec == 30
    assert config.walk_sec == 30


def test_load_workout_config_csv(tmp_path: Path) -> None:
    workout_file = tmp_path / "track.csv"
    workout_file.write_text(
        "run_sec,walk_sec,repetitions,name\n120,60,5,Track Night\n",
        encoding="utf-8",
    )

    config = load_workout_config(workout_file)

    assert config.name == "Track Night"
    assert config.total_duration_sec == 5 * 180


def test_load_workout_config_csv_requires_headers(tmp_path: Path) -> None:
    workout_file = tmp_path / "bad.csv"
    workout_file.write_text("run,walk\n60,30\n", encoding="utf-8")

    with pytest.raises(WorkoutConfigError, match="CSV must contain headers"):
        load_workout_config(workout_file)


def test_load_workout_config_csv_requires_single_row(tmp_path: Path) -> None:
    workout_file = tmp_path / "two.csv"
    workout_file.write_text(
        "run_sec,walk_sec,repetitions\n60,30,4\n90,30,4\n",
        encoding="utf-8",
    )

    with pytest.raises(WorkoutConfigError, match="exactly one"):
        load_workout_config(workout_file)


@pytest.mark.parametrize(
    "payload,message",
    [
        ('{"run_sec":0,"walk_sec":30,"repetitions":4}', "run_sec must be > 0"),
        ('{"run_sec":60,"walk_sec":-5,"repetitions":4}', "walk_sec must be > 0"),
        ('{"run_sec":60,"walk_sec":30}', "invalid repetitions"),
        ('{"run_sec":"fast","walk_sec":30,"repetitions":4}', "invalid run_sec"),
        ('{"run_sec":60.5,"walk_sec":30,"repetitions":4}', "invalid run_sec"),
        ('{"run_sec":true,"walk_sec":30,"repetitions":4}', "invalid run_sec"),
        ("[1, 2, 3]", "must be an object"),
        ("{not json", "Invalid JSON"),
    ],
)
def test_load_workout_config_rejects_invalid_json(
    tmp_path: Path, payload: str, message: str
) -> None:
    workout_file = tmp_path / "bad.json"
    workout_file.write_text(payload, encoding="utf-8")

    with pytest.raises(WorkoutConfigError, match=message):
        load_workout_config(workout_file)


def test_unsupported_format_is_a_config_error(tmp_path: Path) -> None:
    workout_file = tmp_path / "workout.yaml"
    workout_file.write_text("run_sec: 60\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Unsupported workout format"):
        load_workout_config(workout_file)
