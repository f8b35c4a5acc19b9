"""Plan assembler — composes scheduler, selector and progression output.

Builds the Week / WorkoutPlan / ExercisePlan tree, then re-verifies every
plan invariant before handing the plan back. A failed check means the
pipeline itself is wrong and is raised as an internal-consistency error
rather than returned.
"""

from __future__ import annotations

import logging
import uuid
from collections import defaultdict
from datetime import datetime

import numpy as np

from mesocycle_engine.exceptions import InternalSchedulingInconsistencyError
from mesocycle_engine.math.progression import WeekProgression, rep_bounds_for, weekly_sets_for
from mesocycle_engine.models.allocation import ExerciseAssignment, SlotKey, WeeklyAllocation
from mesocycle_engine.models.enums import MuscleGroup
from mesocycle_engine.models.plan import ExercisePlan, MesocyclePlan, Week, WorkoutPlan
from mesocycle_engine.models.request import MesocycleRequest
from mesocycle_engine.planner.split_templates import focus_name

logger = logging.getLogger(__name__)

_PLAN_NAMESPACE = uuid.uuid5(uuid.NAMESPACE_DNS, "mesocycle-engine.plans")


def plan_id_for(request: MesocycleRequest, seed: int) -> str:
    """Stable plan id: identical for identical (request, seed) pairs."""
    return str(uuid.uuid5(_PLAN_NAMESPACE, f"{seed}|{request.fingerprint()}"))


def distribute_sets(weekly_sets: int, slot_count: int) -> list[int]:
    """Split a group's weekly sets across its slots.

    Earlier slots take the remainder. Every slot gets at least one set, so
    the total exceeds *weekly_sets* only when there are more slots than sets.
    """
    base, remainder = divmod(weekly_sets, slot_count)
    return [max(1, base + (1 if i < remainder else 0)) for i in range(slot_count)]


def assemble(
    request: MesocycleRequest,
    allocation: WeeklyAllocation,
    assignment: ExerciseAssignment,
    progression: tuple[WeekProgression, ...],
    catalog_ids: frozenset[str],
    *,
    seed: int,
    created_at: datetime,
) -> MesocyclePlan:
    """Build and self-check the final MesocyclePlan.

    Raises:
        InternalSchedulingInconsistencyError: If the assembled plan
            violates any plan invariant.
    """
    weeks: list[Week] = []
    for w, week_rx in enumerate(progression):
        sets_by_slot = _sets_for_week(request, allocation, week_rx)
        workouts: list[WorkoutPlan] = []
        for d, groups in enumerate(allocation.weeks[w]):
            exercises = []
            for s, group in enumerate(groups):
                key = SlotKey(w, d, s)
                exercise = assignment.exercise_for(key)
                exercises.append(ExercisePlan(
                    exercise_id=exercise.exercise_id,
                    exercise_name=exercise.name,
                    muscle_group=group,
                    sets=sets_by_slot[key],
                    rep_range=week_rx.rep_range,
                    load_multiplier=week_rx.load_multiplier,
                    target_rir=week_rx.target_rir,
                ))
            workouts.append(WorkoutPlan(
                week_index=w,
                day_index=d,
                title=f"Week {w + 1} Day {d + 1}: {focus_name(request.split_template, d)}",
                exercises=tuple(exercises),
            ))
        weeks.append(Week(index=w, workouts=tuple(workouts), is_deload=week_rx.is_deload))

    plan = MesocyclePlan(
        plan_id=plan_id_for(request, seed),
        goal=request.goal,
        split_template=request.split_template,
        weeks=tuple(weeks),
        seed=seed,
        created_at=created_at,
        notes="Final week is a deload." if weeks and weeks[-1].is_deload else "",
    )

    violations = verify_plan(plan, request, catalog_ids, allocation.minimum_frequency)
    if violations:
        logger.error("Assembled plan %s failed self-check: %s", plan.plan_id, violations)
        raise InternalSchedulingInconsistencyError(violations)
    return plan


def verify_plan(
    plan: MesocyclePlan,
    request: MesocycleRequest,
    catalog_ids: frozenset[str],
    minimum_frequency: int,
) -> list[str]:
    """Check every plan invariant and describe each violation found.

    Returns:
        Human-readable violation messages; empty when the plan is sound.
    """
    violations: list[str] = []

    if len(plan.weeks) != request.weeks:
        violations.append(f"expected {request.weeks} weeks, got {len(plan.weeks)}")

    for week in plan.weeks:
        if len(week.workouts) != request.days_per_week:
            violations.append(
                f"week {week.index + 1} has {len(week.workouts)} workouts, "
                f"expected {request.days_per_week}"
            )
        for group in request.sorted_targets:
            if week.frequency(group) < minimum_frequency:
                violations.append(
                    f"week {week.index + 1} trains {group.name} "
                    f"{week.frequency(group)}x, minimum {minimum_frequency}"
                )

    unknown = plan.all_exercise_ids - catalog_ids
    if unknown:
        violations.append(f"unknown exercise ids {sorted(unknown)}")

    bounds = rep_bounds_for(request.goal)
    for workout in plan.workouts:
        for rx in workout.exercises:
            if not rx.rep_range.within(bounds):
                violations.append(
                    f"{workout.title}: rep range {rx.rep_range} outside {bounds[0]}-{bounds[1]}"
                )

    overload = np.array(
        [week.total_tonnage for week in plan.weeks if not week.is_deload],
        dtype=np.float64,
    )
    for i in np.flatnonzero(np.diff(overload) < 0):
        violations.append(f"tonnage drops from week {i + 1} to week {i + 2}")

    if len(plan.weeks) >= 2 and plan.weeks[-1].is_deload:
        if not plan.weeks[-1].total_tonnage < plan.weeks[-2].total_tonnage:
            violations.append("deload week tonnage is not below the penultimate week")

    return violations


def _sets_for_week(
    request: MesocycleRequest,
    allocation: WeeklyAllocation,
    week_rx: WeekProgression,
) -> dict[SlotKey, int]:
    week = week_rx.week_index
    slots_by_group: dict[MuscleGroup, list[SlotKey]] = defaultdict(list)
    for d, groups in enumerate(allocation.weeks[week]):
        for s, group in enumerate(groups):
            slots_by_group[group].append(SlotKey(week, d, s))

    sets: dict[SlotKey, int] = {}
    for group, keys in slots_by_group.items():
        if group in request.weekly_set_targets:
            weekly_sets = weekly_sets_for(
                request.weekly_set_targets[group], week, week_rx.is_deload
            )
        else:
            weekly_sets = week_rx.weekly_sets
        for key, count in zip(keys, distribute_sets(weekly_sets, len(keys))):
            sets[key] = count
    return sets
