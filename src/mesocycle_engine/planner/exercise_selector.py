"""Exercise selector — maps every allocated slot to a catalog exercise.

Selection is deterministic: each slot draws from its own numpy Generator
seeded with ``SeedSequence([seed, week, day, slot])``, so the same seed
and allocation always give the same exercise per slot, and no random
state is shared between slots or between calls.
"""

from __future__ import annotations

import logging

import numpy as np

from mesocycle_engine.exceptions import EmptyCatalogForMuscleGroupError
from mesocycle_engine.models.allocation import ExerciseAssignment, SlotKey, WeeklyAllocation
from mesocycle_engine.models.catalog import ExerciseCatalog
from mesocycle_engine.models.enums import MuscleGroup
from mesocycle_engine.models.exercise import Exercise

logger = logging.getLogger(__name__)


def candidates_for(
    muscle_group: MuscleGroup, exercises: list[Exercise]
) -> tuple[Exercise, ...]:
    """Exercises able to fill a *muscle_group* slot, sorted by id.

    Primary-muscle matches are preferred. Secondary matches are used only
    when no exercise lists the group as primary.
    """
    primary = [e for e in exercises if muscle_group in e.primary_muscles]
    if primary:
        return tuple(sorted(primary, key=lambda e: e.exercise_id))
    secondary = [e for e in exercises if muscle_group in e.secondary_muscles]
    if secondary:
        logger.debug(
            "No primary exercise for %s; using %d secondary match(es)",
            muscle_group.name,
            len(secondary),
        )
    return tuple(sorted(secondary, key=lambda e: e.exercise_id))


def slot_index(seed: int, key: SlotKey, candidate_count: int) -> int:
    """Seed-derived starting index into a slot's candidate list."""
    rng = np.random.default_rng(np.random.SeedSequence([seed, key.week, key.day, key.slot]))
    return int(rng.integers(candidate_count))


def select(
    allocation: WeeklyAllocation,
    catalog: ExerciseCatalog,
    seed: int,
) -> ExerciseAssignment:
    """Assign one catalog exercise to every slot of *allocation*.

    Within a day an exercise already used by another slot is skipped in
    favour of the next unused candidate, when one exists.

    Raises:
        EmptyCatalogForMuscleGroupError: If a scheduled group has no
            primary or secondary match in the catalog.
    """
    exercises = catalog.fetch_all()
    pools: dict[MuscleGroup, tuple[Exercise, ...]] = {}
    assigned: dict[SlotKey, Exercise] = {}
    used_today: set[str] = set()
    current_day: tuple[int, int] | None = None

    for key, group in allocation.slots():
        if (key.week, key.day) != current_day:
            current_day = (key.week, key.day)
            used_today = set()

        if group not in pools:
            pools[group] = candidates_for(group, exercises)
            if not pools[group]:
                raise EmptyCatalogForMuscleGroupError(group)
        pool = pools[group]

        start = slot_index(seed, key, len(pool))
        choice = pool[start]
        for offset in range(len(pool)):
            candidate = pool[(start + offset) % len(pool)]
            if candidate.exercise_id not in used_today:
                choice = candidate
                break

        used_today.add(choice.exercise_id)
        assigned[key] = choice

    logger.debug("Selected exercises for %d slot(s)", len(assigned))
    return ExerciseAssignment(exercises=assigned)
