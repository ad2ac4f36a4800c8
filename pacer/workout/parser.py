"""Workout config file parser (CSV/JSON)."""

from __future__ import annotations

import csv
import json
from pathlib import Path

from pacer.workout.model import ConfigError, WorkoutConfig

FIELDS = ("run_sec", "walk_sec", "repetitions")


class WorkoutConfigError(ConfigError):
    """Raised when a workout file is invalid."""


def load_workout_config(path: str | Path) -> WorkoutConfig:
    file_path = Path(path)
    suffix = file_path.suffix.lower()
    if suffix == ".json":
        return _load_json(file_path)
    if suffix == ".csv":
        return _load_csv(file_path)
    raise WorkoutConfigError(
        f"Unsupported workout format '{file_path.suffix}'. Use .json or .csv"
    )


def _load_json(path: Path) -> WorkoutConfig:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise WorkoutConfigError(f"Invalid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise WorkoutConfigError("Workout JSON must be an object")

    name_obj = data.get("name", path.stem)
    if not isinstance(name_obj, str):
        raise WorkoutConfigError("Workout field 'name' must be a string")

    return _build_config(
        name=name_obj.strip() or path.stem,
        raw={field: data.get(field) for field in FIELDS},
    )


def _load_csv(path: Path) -> WorkoutConfig:
    with path.open("r", encoding="utf-8", newline="") as handle:
        reader = csv.DictReader(handle)
        fields = set(reader.fieldnames or [])
        if not set(FIELDS).issubset(fields):
            raise WorkoutConfigError(
                "CSV must contain headers: run_sec,walk_sec,repetitions[,name]"
            )
        rows = [row for row in reader if any((row.get(f) or "").strip() for f in FIELDS)]

    if len(rows) != 1:
        raise WorkoutConfigError(f"CSV must contain exactly one workout row, got {len(rows)}")

    row = rows[0]
    name = (row.get("name") or "").strip() or path.stem
    return _build_config(name=name, raw={field: row.get(field) for field in FIELDS})


def _build_config(*, name: str, raw: dict[str, object]) -> WorkoutConfig:
    values = {field: _parse_int_field(raw=raw[field], field_name=field) for field in FIELDS}
    for field, value in values.items():
        if value <= 0:
            raise WorkoutConfigError(f"{field} must be > 0")

    return WorkoutConfig(
        run_sec=values["run_sec"],
        walk_sec=values["walk_sec"],
        repetitions=values["repetitions"],
        name=name,
    )


def _parse_int_field(*, raw: object, field_name: str) -> int:
    if raw is None or isinstance(raw, bool):
        raise WorkoutConfigError(f"invalid {field_name}")
    if isinstance(raw, float):
        if not raw.is_integer():
            raise WorkoutConfigError(f"invalid {field_name}")
        return int(raw)
    try:
        return int(str(raw).strip())
    except ValueError as exc:
        raise WorkoutConfigError(f"invalid {field_name}") from exc
