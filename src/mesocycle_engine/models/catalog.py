"""Exercise catalog collaborator interface and an in-memory implementation."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Iterable

from mesocycle_engine.models.enums import Equipment, MechanicalPattern, MuscleGroup
from mesocycle_engine.models.exercise import Exercise


class ExerciseCatalog(ABC):
    """Read-only view of the exercise catalog consumed by the generator.

    Implementations must be loaded and synchronous at call time. The
    generator never writes to the catalog.
    """

    @abstractmethod
    def fetch_all(self) -> list[Exercise]:
        """Return every exercise in the catalog."""
        ...

    @abstractmethod
    def get(self, exercise_id: str) -> Exercise | None:
        """Look up a single exercise, or None if the id is unknown."""
        ...

    def __contains__(self, exercise_id: object) -> bool:
        return isinstance(exercise_id, str) and self.get(exercise_id) is not None

    def exercise_ids(self) -> frozenset[str]:
        return frozenset(e.exercise_id for e in self.fetch_all())

    def covered_muscle_groups(self) -> frozenset[MuscleGroup]:
        """Muscle groups reachable through a primary or secondary match."""
        covered: set[MuscleGroup] = set()
        for exercise in self.fetch_all():
            covered |= exercise.all_targeted_muscles
        return frozenset(covered)


class InMemoryExerciseCatalog(ExerciseCatalog):
    """Dictionary-backed catalog for tests, the CLI, and embedding callers.

    Exercises are returned sorted alphabetically by name.
    """

    def __init__(self, exercises: Iterable[Exercise] = ()) -> None:
        self._items: dict[str, Exercise] = {}
        for exercise in exercises:
            if exercise.exercise_id in self._items:
                raise ValueError(f"Duplicate exercise id {exercise.exercise_id!r}")
            self._items[exercise.exercise_id] = exercise

    def fetch_all(self) -> list[Exercise]:
        return sorted(self._items.values(), key=lambda e: (e.name, e.exercise_id))

    def get(self, exercise_id: str) -> Exercise | None:
        return self._items.get(exercise_id)

    def __len__(self) -> int:
        return len(self._items)

    # -- Factories --------------------------------------------------------

    @classmethod
    def from_dicts(cls, records: Iterable[dict[str, Any]]) -> InMemoryExerciseCatalog:
        """Build a catalog from JSON-compatible exercise records.

        Enum fields are given by lowercase member name, e.g.
        ``{"id": "bench", "name": "Bench Press", "primaryMuscles": ["chest"],
        "mechanicalPattern": "horizontal_push", "equipment": "barbell"}``.
        """
        return cls(exercise_from_dict(record) for record in records)

    @classmethod
    def from_json_file(cls, path: str | Path) -> InMemoryExerciseCatalog:
        """Load a catalog from a JSON file holding a list of exercise records."""
        with open(path) as f:
            records = json.load(f)
        if isinstance(records, dict):
            records = records.get("exercises", [])
        return cls.from_dicts(records)


def exercise_from_dict(record: dict[str, Any]) -> Exercise:
    """Convert one JSON-compatible record into an Exercise.

    Raises:
        ValueError: If a required key is missing or an enum name is unknown.
    """
    try:
        return Exercise(
            exercise_id=str(record["id"]),
            name=record["name"],
            primary_muscles=frozenset(
                _enum_member(MuscleGroup, m) for m in record["primaryMuscles"]
            ),
            secondary_muscles=frozenset(
                _enum_member(MuscleGroup, m) for m in record.get("secondaryMuscles", ())
            ),
            mechanical_pattern=_enum_member(
                MechanicalPattern, record.get("mechanicalPattern", "isolation")
            ),
            equipment=_enum_member(Equipment, record.get("equipment", "other")),
            is_unilateral=bool(record.get("isUnilateral", False)),
        )
    except KeyError as exc:
        raise ValueError(f"Exercise record missing key {exc.args[0]!r}: {record}") from exc


def _enum_member(enum_cls, name: str):
    try:
        return enum_cls[name.strip().upper()]
    except KeyError:
        raise ValueError(f"Unknown {enum_cls.__name__} {name!r}") from None
