"""Request validation — rejects structurally invalid requests up front."""

from __future__ import annotations

from mesocycle_engine.exceptions import (
    InvalidDaysPerWeekError,
    InvalidWeekCountError,
    NoMuscleGroupsSelectedError,
    PlanGenerationError,
)
from mesocycle_engine.models.enums import (
    MAX_DAYS_PER_WEEK,
    MIN_DAYS_PER_WEEK,
    MIN_MESOCYCLE_WEEKS,
)
from mesocycle_engine.models.request import MesocycleRequest


def validate(request: MesocycleRequest) -> PlanGenerationError | None:
    """Return the first structural problem with *request*, or None if valid.

    Checks run in a fixed order: day count, target groups, week count.
    """
    if not MIN_DAYS_PER_WEEK <= request.days_per_week <= MAX_DAYS_PER_WEEK:
        return InvalidDaysPerWeekError(request.days_per_week)
    if not request.target_muscle_groups:
        return NoMuscleGroupsSelectedError()
    if request.weeks < MIN_MESOCYCLE_WEEKS:
        return InvalidWeekCountError(request.weeks)
    return None
