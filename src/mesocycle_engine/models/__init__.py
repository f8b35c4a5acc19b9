"""Data models for the mesocycle engine."""

from mesocycle_engine.models.allocation import ExerciseAssignment, SlotKey, WeeklyAllocation
from mesocycle_engine.models.catalog import ExerciseCatalog, InMemoryExerciseCatalog
from mesocycle_engine.models.enums import (
    Equipment,
    Goal,
    MechanicalPattern,
    MuscleGroup,
    SplitTemplate,
    Weekday,
)
from mesocycle_engine.models.exercise import Exercise
from mesocycle_engine.models.plan import (
    ExercisePlan,
    MesocyclePlan,
    RepRange,
    Week,
    WorkoutPlan,
)
from mesocycle_engine.models.request import MesocycleRequest

__all__ = [
    "Equipment",
    "Exercise",
    "ExerciseAssignment",
    "ExerciseCatalog",
    "ExercisePlan",
    "Goal",
    "InMemoryExerciseCatalog",
    "MechanicalPattern",
    "MesocyclePlan",
    "MesocycleRequest",
    "MuscleGroup",
    "RepRange",
    "SlotKey",
    "SplitTemplate",
    "Week",
    "WeeklyAllocation",
    "Weekday",
    "WorkoutPlan",
]
