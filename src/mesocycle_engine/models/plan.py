"""Plan models: RepRange, ExercisePlan, WorkoutPlan, Week and MesocyclePlan.

Plans are forward-looking prescriptions. Logged sets live with the
workout-repository collaborator and reference the same exercise ids, so
plan and actual data stay separate.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from mesocycle_engine.models.enums import (
    MAX_TARGET_RIR,
    Goal,
    MuscleGroup,
    SplitTemplate,
)


@dataclass(frozen=True)
class RepRange:
    """Inclusive repetition range prescribed per set."""

    min: int
    max: int

    def __post_init__(self) -> None:
        if self.min < 1 or self.max < self.min:
            raise ValueError(
                f"RepRange must satisfy 1 <= min <= max, got {self.min}-{self.max}"
            )

    @property
    def average(self) -> float:
        """Midpoint of the range, used to estimate planned reps."""
        return (self.min + self.max) / 2.0

    def within(self, bounds: tuple[int, int]) -> bool:
        """True if this range lies inside the inclusive (low, high) bounds."""
        low, high = bounds
        return low <= self.min and self.max <= high

    def __str__(self) -> str:
        return f"{self.min}-{self.max}"


@dataclass(frozen=True)
class ExercisePlan:
    """Prescription for one exercise filling one muscle-group slot of a day.

    ``load_multiplier`` is the relative-load proxy used for tonnage while
    the plan precedes any logging. ``load_kg`` takes over once a literal
    load is known.
    """

    exercise_id: str
    muscle_group: MuscleGroup
    sets: int
    rep_range: RepRange
    load_multiplier: float = 1.0
    exercise_name: str = ""
    load_kg: float | None = None
    target_rir: int | None = None

    def __post_init__(self) -> None:
        if self.sets <= 0:
            raise ValueError(f"Sets must be > 0, got {self.sets}")
        if self.load_multiplier <= 0:
            raise ValueError(f"Load multiplier must be > 0, got {self.load_multiplier}")
        if self.target_rir is not None and not 0 <= self.target_rir <= MAX_TARGET_RIR:
            raise ValueError(f"target_rir must be 0-{MAX_TARGET_RIR}, got {self.target_rir}")

    @property
    def planned_total_reps(self) -> float:
        return self.sets * self.rep_range.average

    @property
    def effective_load(self) -> float:
        return self.load_kg if self.load_kg is not None else self.load_multiplier

    @property
    def tonnage(self) -> float:
        """Sum over all sets of load x reps."""
        return self.planned_total_reps * self.effective_load


@dataclass(frozen=True)
class WorkoutPlan:
    """Ordered exercise prescriptions for one calendar training day."""

    week_index: int  # 0-based within the mesocycle
    day_index: int  # 0-based training day within the week
    title: str
    exercises: tuple[ExercisePlan, ...] = field(default_factory=tuple)

    def trainings(self, muscle_group: MuscleGroup) -> tuple[ExercisePlan, ...]:
        """Exercise plans filling a slot for *muscle_group*."""
        return tuple(e for e in self.exercises if e.muscle_group == muscle_group)

    @property
    def muscle_groups(self) -> tuple[MuscleGroup, ...]:
        return tuple(e.muscle_group for e in self.exercises)

    @property
    def total_sets(self) -> int:
        return sum(e.sets for e in self.exercises)

    @property
    def total_planned_reps(self) -> float:
        return sum(e.planned_total_reps for e in self.exercises)

    @property
    def total_tonnage(self) -> float:
        return sum(e.tonnage for e in self.exercises)


@dataclass(frozen=True)
class Week:
    """One mesocycle week: a workout per training day."""

    index: int
    workouts: tuple[WorkoutPlan, ...] = field(default_factory=tuple)
    is_deload: bool = False

    def trainings(self, muscle_group: MuscleGroup) -> tuple[ExercisePlan, ...]:
        return tuple(e for w in self.workouts for e in w.trainings(muscle_group))

    def frequency(self, muscle_group: MuscleGroup) -> int:
        """Number of slots training *muscle_group* this week."""
        return len(self.trainings(muscle_group))

    @property
    def total_sets(self) -> int:
        return sum(w.total_sets for w in self.workouts)

    @property
    def total_planned_reps(self) -> float:
        return sum(w.total_planned_reps for w in self.workouts)

    @property
    def total_tonnage(self) -> float:
        return sum(w.total_tonnage for w in self.workouts)


@dataclass(frozen=True)
class MesocyclePlan:
    """Top-level output of PlanGenerator.generate_mesocycle().

    Created once per call and never mutated afterwards. ``created_at`` is
    excluded from equality so that two generations with the same seed and
    request compare equal.
    """

    plan_id: str
    goal: Goal
    split_template: SplitTemplate
    weeks: tuple[Week, ...]
    seed: int
    created_at: datetime = field(compare=False)
    notes: str = ""

    @property
    def workouts(self) -> tuple[WorkoutPlan, ...]:
        return tuple(w for week in self.weeks for w in week.workouts)

    @property
    def total_workouts(self) -> int:
        return len(self.workouts)

    @property
    def all_exercise_ids(self) -> frozenset[str]:
        return frozenset(e.exercise_id for w in self.workouts for e in w.exercises)

    @property
    def weekly_tonnage(self) -> tuple[float, ...]:
        return tuple(week.total_tonnage for week in self.weeks)

    @property
    def weekly_planned_reps(self) -> tuple[float, ...]:
        return tuple(week.total_planned_reps for week in self.weeks)

    @property
    def has_deload(self) -> bool:
        return any(week.is_deload for week in self.weeks)

    def workout_for(self, week_index: int, day_index: int) -> WorkoutPlan | None:
        """Return the workout for a 0-based (week, day), or None if out of range."""
        if not 0 <= week_index < len(self.weeks):
            return None
        workouts = self.weeks[week_index].workouts
        if not 0 <= day_index < len(workouts):
            return None
        return workouts[day_index]
