"""Error taxonomy for plan generation.

Generation failures are expected and enumerable. Components raise these
internally and the PlanGenerator entry points hand them back inside a
failed GenerationResult rather than letting them escape.
"""

from __future__ import annotations

from enum import IntEnum, auto

from mesocycle_engine.models.enums import MuscleGroup


class ErrorCode(IntEnum):
    """Stable machine-readable error identifiers."""

    INVALID_DAYS_PER_WEEK = auto()
    NO_MUSCLE_GROUPS_SELECTED = auto()
    INVALID_WEEK_COUNT = auto()
    EMPTY_CATALOG_FOR_MUSCLE_GROUP = auto()
    INTERNAL_SCHEDULING_INCONSISTENCY = auto()
    INVALID_WORKOUT_DAY = auto()


class PlanGenerationError(Exception):
    """Base exception for all plan generation errors."""

    code: ErrorCode

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlanGenerationError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class InvalidDaysPerWeekError(PlanGenerationError):
    """days_per_week outside [1, 7]."""

    code = ErrorCode.INVALID_DAYS_PER_WEEK

    def __init__(self, days_per_week: int) -> None:
        super().__init__(f"days_per_week must be between 1 and 7, got {days_per_week}")
        self.days_per_week = days_per_week


class NoMuscleGroupsSelectedError(PlanGenerationError):
    """The request targets no muscle groups."""

    code = ErrorCode.NO_MUSCLE_GROUPS_SELECTED

    def __init__(self, message: str = "At least one target muscle group is required") -> None:
        super().__init__(message)


class InvalidWeekCountError(PlanGenerationError):
    """weeks < 1."""

    code = ErrorCode.INVALID_WEEK_COUNT

    def __init__(self, weeks: int) -> None:
        super().__init__(f"weeks must be at least 1, got {weeks}")
        self.weeks = weeks


class EmptyCatalogForMuscleGroupError(PlanGenerationError):
    """No catalog exercise trains a required muscle group."""

    code = ErrorCode.EMPTY_CATALOG_FOR_MUSCLE_GROUP

    def __init__(self, muscle_group: MuscleGroup) -> None:
        super().__init__(
            f"Catalog has no exercise for muscle group {muscle_group.display_name}"
        )
        self.muscle_group = muscle_group


class InternalSchedulingInconsistencyError(PlanGenerationError):
    """The assembled plan failed its own invariant check.

    Indicates a logic defect in the pipeline; never expected in correct
    operation.
    """

    code = ErrorCode.INTERNAL_SCHEDULING_INCONSISTENCY

    def __init__(self, violations: list[str] | tuple[str, ...]) -> None:
        self.violations = tuple(violations)
        super().__init__("Plan failed invariant check: " + "; ".join(self.violations))


class InvalidWorkoutDayError(PlanGenerationError):
    """A single-workout request named a day the split does not train."""

    code = ErrorCode.INVALID_WORKOUT_DAY

    def __init__(self, message: str) -> None:
        super().__init__(message)
