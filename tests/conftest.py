"""Shared test fixtures: exercise catalogs, requests and a fixed clock."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

import pytest

from mesocycle_engine.engine import PlanGenerator
from mesocycle_engine.models.catalog import InMemoryExerciseCatalog
from mesocycle_engine.models.enums import (
    Equipment,
    Goal,
    MechanicalPattern,
    MuscleGroup,
    SplitTemplate,
)
from mesocycle_engine.models.exercise import Exercise
from mesocycle_engine.models.request import MesocycleRequest

M = MuscleGroup
P = MechanicalPattern
E = Equipment

FIXED_NOW = datetime(2025, 5, 27, 9, 0, tzinfo=timezone.utc)


def make_exercise(
    exercise_id: str,
    primary: set[MuscleGroup],
    secondary: set[MuscleGroup] | None = None,
    pattern: MechanicalPattern = MechanicalPattern.ISOLATION,
    equipment: Equipment = Equipment.DUMBBELL,
    name: str | None = None,
) -> Exercise:
    return Exercise(
        exercise_id=exercise_id,
        name=name or exercise_id.replace("-", " ").title(),
        primary_muscles=frozenset(primary),
        secondary_muscles=frozenset(secondary or ()),
        mechanical_pattern=pattern,
        equipment=equipment,
    )


# Covers every MuscleGroup as a primary muscle at least once
_FULL_CATALOG = (
    make_exercise("bench-press", {M.CHEST}, {M.TRICEPS, M.FRONT_DELTS}, P.HORIZONTAL_PUSH, E.BARBELL),
    make_exercise("incline-db-press", {M.CHEST}, {M.FRONT_DELTS, M.TRICEPS}, P.HORIZONTAL_PUSH),
    make_exercise("cable-fly", {M.CHEST}, equipment=E.CABLE),
    make_exercise("triceps-pushdown", {M.TRICEPS}, equipment=E.CABLE),
    make_exercise("skull-crusher", {M.TRICEPS}, equipment=E.BARBELL),
    make_exercise("overhead-press", {M.FRONT_DELTS}, {M.TRICEPS, M.LATERAL_DELTS}, P.VERTICAL_PUSH, E.BARBELL),
    make_exercise("lateral-raise", {M.LATERAL_DELTS}),
    make_exercise("reverse-fly", {M.REAR_DELTS}, {M.UPPER_BACK}),
    make_exercise("chest-supported-row", {M.UPPER_BACK}, {M.LATS, M.REAR_DELTS, M.BICEPS}, P.HORIZONTAL_PULL),
    make_exercise("lat-pulldown", {M.LATS}, {M.BICEPS}, P.VERTICAL_PULL, E.CABLE),
    make_exercise("pull-up", {M.LATS}, {M.BICEPS, M.FOREARMS}, P.VERTICAL_PULL, E.BODYWEIGHT),
    make_exercise("barbell-shrug", {M.TRAPS}, equipment=E.BARBELL),
    make_exercise("barbell-curl", {M.BICEPS}, {M.FOREARMS}, equipment=E.BARBELL),
    make_exercise("hammer-curl", {M.BICEPS}, {M.FOREARMS}),
    make_exercise("wrist-curl", {M.FOREARMS}),
    make_exercise("cable-crunch", {M.ABS}, pattern=P.CORE_ANTI_EXTENSION, equipment=E.CABLE),
    make_exercise("pallof-press", {M.OBLIQUES}, {M.ABS}, P.CORE_ANTI_ROTATION, E.CABLE),
    make_exercise("back-extension", {M.LOWER_BACK}, {M.GLUTES, M.HAMSTRINGS}, P.HINGE, E.BODYWEIGHT),
    make_exercise("hip-thrust", {M.GLUTES}, {M.HAMSTRINGS}, P.HINGE, E.BARBELL),
    make_exercise("back-squat", {M.QUADS}, {M.GLUTES, M.HIP_ADDUCTORS}, P.SQUAT, E.BARBELL),
    make_exercise("leg-press", {M.QUADS}, {M.GLUTES}, P.SQUAT, E.MACHINE),
    make_exercise("leg-extension", {M.QUADS}, equipment=E.MACHINE),
    make_exercise("romanian-deadlift", {M.HAMSTRINGS}, {M.GLUTES, M.LOWER_BACK}, P.HINGE, E.BARBELL),
    make_exercise("lying-leg-curl", {M.HAMSTRINGS}, equipment=E.MACHINE),
    make_exercise("standing-calf-raise", {M.CALVES}, equipment=E.MACHINE),
    make_exercise("adductor-machine", {M.HIP_ADDUCTORS}, equipment=E.MACHINE),
    make_exercise("abductor-machine", {M.HIP_ABDUCTORS}, equipment=E.MACHINE),
)


@pytest.fixture
def full_catalog() -> InMemoryExerciseCatalog:
    """27-exercise catalog covering every muscle group as a primary."""
    return InMemoryExerciseCatalog(_FULL_CATALOG)


@pytest.fixture
def minimal_catalog() -> InMemoryExerciseCatalog:
    """Two-exercise catalog: a squat and a bench press."""
    return InMemoryExerciseCatalog((
        make_exercise("back-squat", {M.QUADS}, {M.GLUTES}, P.SQUAT, E.BARBELL),
        make_exercise("bench-press", {M.CHEST}, {M.TRICEPS}, P.HORIZONTAL_PUSH, E.BARBELL),
    ))


@pytest.fixture
def exercise_factory() -> Callable[..., Exercise]:
    """Factory fixture for Exercise instances (see make_exercise)."""
    return make_exercise


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def generator(full_catalog: InMemoryExerciseCatalog) -> PlanGenerator:
    """PlanGenerator over the full catalog with a frozen clock."""
    return PlanGenerator(full_catalog, clock=lambda: FIXED_NOW)


@pytest.fixture
def request_factory() -> Callable[..., MesocycleRequest]:
    """Factory fixture for MesocycleRequest instances.

    Usage:
        request = request_factory(weeks=5, includes_deload=True)
    """

    def factory(
        goal: Goal = Goal.HYPERTROPHY,
        weeks: int = 4,
        days_per_week: int = 5,
        targets: tuple[MuscleGroup, ...] = (M.CHEST, M.TRICEPS, M.QUADS),
        includes_deload: bool = False,
        split_template: SplitTemplate = SplitTemplate.PUSH_PULL_LEGS,
        weekly_set_targets: dict[MuscleGroup, int] | None = None,
    ) -> MesocycleRequest:
        return MesocycleRequest(
            goal=goal,
            weeks=weeks,
            days_per_week=days_per_week,
            target_muscle_groups=frozenset(targets),
            includes_deload=includes_deload,
            split_template=split_template,
            weekly_set_targets=weekly_set_targets or {},
        )

    return factory
