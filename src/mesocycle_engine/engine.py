"""PlanGenerator — the entry point that turns requests into mesocycle plans."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Generic, TypeVar

from mesocycle_engine.exceptions import InvalidWorkoutDayError, PlanGenerationError
from mesocycle_engine.math.progression import build_progression
from mesocycle_engine.models.catalog import ExerciseCatalog
from mesocycle_engine.models.enums import (
    DEFAULT_SEED,
    MAX_SEED,
    Goal,
    MuscleGroup,
    SplitTemplate,
    Weekday,
)
from mesocycle_engine.models.plan import MesocyclePlan, WorkoutPlan
from mesocycle_engine.models.request import MesocycleRequest
from mesocycle_engine.planner.assembler import assemble
from mesocycle_engine.planner.exercise_selector import select
from mesocycle_engine.planner.validator import validate
from mesocycle_engine.planner.volume_scheduler import schedule

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class GenerationResult(Generic[T]):
    """Either a generated value or the PlanGenerationError explaining why not."""

    value: T | None = None
    error: PlanGenerationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising the carried error on failure."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    @classmethod
    def success(cls, value: T) -> GenerationResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: PlanGenerationError) -> GenerationResult[T]:
        return cls(error=error)


@dataclass(frozen=True)
class WorkoutDay:
    """A calendar day inside a mesocycle, for single-workout generation."""

    week_index: int  # 0-based
    weekday: Weekday


class PlanGenerator:
    """Generates deterministic mesocycle plans from an exercise catalog.

    The catalog is passed in explicitly and only read. Each call owns its
    random state, so one generator may serve concurrent callers.

    Usage:
        generator = PlanGenerator(catalog)
        result = generator.generate_mesocycle(request, seed=42)
        if result.ok:
            plan = result.value
    """

    def __init__(
        self,
        catalog: ExerciseCatalog,
        default_seed: int = DEFAULT_SEED,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.catalog = catalog
        self.default_seed = _check_seed(default_seed)
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def generate_mesocycle(
        self,
        request: MesocycleRequest,
        seed: int | None = None,
    ) -> GenerationResult[MesocyclePlan]:
        """Run the full pipeline: validate, schedule, select, progress, assemble.

        Args:
            request: The mesocycle request.
            seed: Unsigned 64-bit seed. None uses the generator's default.

        Returns:
            A successful result holding the plan, or a failed result holding
            the PlanGenerationError.

        Raises:
            ValueError: If *seed* is not an unsigned 64-bit integer.
        """
        seed = self.default_seed if seed is None else _check_seed(seed)

        error = validate(request)
        if error is not None:
            logger.info("Rejected mesocycle request: %s", error)
            return GenerationResult.failure(error)

        if request.includes_deload and request.weeks < 2:
            logger.warning("Deload ignored for a single-week mesocycle")

        try:
            allocation = schedule(request)
            assignment = select(allocation, self.catalog, seed)
            progression = build_progression(
                request.weeks, request.goal, request.includes_deload
            )
            plan = assemble(
                request,
                allocation,
                assignment,
                progression,
                self.catalog.exercise_ids(),
                seed=seed,
                created_at=self.clock(),
            )
        except PlanGenerationError as exc:
            logger.warning("Mesocycle generation failed: %s", exc)
            return GenerationResult.failure(exc)

        logger.info(
            "Generated %s mesocycle %s: %d weeks, %d workouts, seed=%d",
            request.goal.name,
            plan.plan_id,
            len(plan.weeks),
            plan.total_workouts,
            seed,
        )
        return GenerationResult.success(plan)

    def generate_workout(
        self,
        day: WorkoutDay,
        goal: Goal,
        split_template: SplitTemplate,
        *,
        seed: int | None = None,
        target_muscle_groups: frozenset[MuscleGroup] | None = None,
    ) -> GenerationResult[WorkoutPlan]:
        """Generate the workout for a single day of a template mesocycle.

        Plans ``day.week_index + 1`` weeks at the template's default
        training-day count and returns the requested day, so the workout
        matches what the full mesocycle would prescribe for it.

        Args:
            day: Week and weekday to generate.
            goal: Training goal.
            split_template: Split to follow.
            seed: Unsigned 64-bit seed. None uses the generator's default.
            target_muscle_groups: Groups to train. Defaults to every group
                the catalog can cover.
        """
        days_per_week = split_template.default_days_per_week
        if day.week_index < 0 or day.weekday >= days_per_week:
            return GenerationResult.failure(InvalidWorkoutDayError(
                f"{split_template.name} trains {days_per_week} day(s) per week; "
                f"week {day.week_index} {day.weekday.name} is not a training day"
            ))

        if target_muscle_groups is None:
            target_muscle_groups = self.catalog.covered_muscle_groups()

        request = MesocycleRequest(
            goal=goal,
            weeks=day.week_index + 1,
            days_per_week=days_per_week,
            target_muscle_groups=target_muscle_groups,
            split_template=split_template,
        )
        result = self.generate_mesocycle(request, seed=seed)
        if not result.ok:
            return GenerationResult.failure(result.error)
        return GenerationResult.success(
            result.value.workout_for(day.week_index, int(day.weekday))
        )


def _check_seed(seed: int) -> int:
    if isinstance(seed, bool) or not isinstance(seed, int) or not 0 <= seed <= MAX_SEED:
        raise ValueError(f"Seed must be an unsigned 64-bit integer, got {seed!r}")
    return seed
