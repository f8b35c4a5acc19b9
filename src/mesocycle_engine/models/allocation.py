"""Intermediate pipeline models: weekly slot allocation and exercise assignment."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, NamedTuple

from mesocycle_engine.models.enums import MuscleGroup
from mesocycle_engine.models.exercise import Exercise


class SlotKey(NamedTuple):
    """Address of one muscle-group slot: 0-based week, day and slot position."""

    week: int
    day: int
    slot: int


@dataclass(frozen=True)
class WeeklyAllocation:
    """Output of the volume scheduler.

    ``weeks[w][d]`` is the ordered tuple of muscle groups trained on day
    ``d`` of week ``w``; a group may repeat within a day. ``minimum_frequency``
    is the per-group weekly slot floor the scheduler worked to.
    """

    days_per_week: int
    minimum_frequency: int
    weeks: tuple[tuple[tuple[MuscleGroup, ...], ...], ...] = field(default_factory=tuple)

    @property
    def week_count(self) -> int:
        return len(self.weeks)

    def groups_for(self, week: int, day: int) -> tuple[MuscleGroup, ...]:
        return self.weeks[week][day]

    def frequency(self, week: int, muscle_group: MuscleGroup) -> int:
        return sum(day.count(muscle_group) for day in self.weeks[week])

    def slots(self) -> Iterator[tuple[SlotKey, MuscleGroup]]:
        """Yield every slot in week, day, slot order."""
        for w, days in enumerate(self.weeks):
            for d, groups in enumerate(days):
                for s, group in enumerate(groups):
                    yield SlotKey(w, d, s), group


@dataclass(frozen=True)
class ExerciseAssignment:
    """Output of the exercise selector: one catalog exercise per slot."""

    exercises: dict[SlotKey, Exercise] = field(default_factory=dict)

    def exercise_for(self, key: SlotKey) -> Exercise:
        return self.exercises[key]

    def exercise_ids(self) -> frozenset[str]:
        return frozenset(e.exercise_id for e in self.exercises.values())

    def __len__(self) -> int:
        return len(self.exercises)
