"""Split templates — canonical day-to-muscle-group mapping for each split.

Each template is a cycle of day focuses. The volume scheduler repeats the
cycle to fill the requested training days. Every template covers every
MuscleGroup somewhere in its cycle.
"""

from __future__ import annotations

from mesocycle_engine.models.enums import MuscleGroup, SplitTemplate

_PUSH = frozenset({
    MuscleGroup.CHEST,
    MuscleGroup.FRONT_DELTS,
    MuscleGroup.LATERAL_DELTS,
    MuscleGroup.TRICEPS,
    MuscleGroup.ABS,
})

_PULL = frozenset({
    MuscleGroup.UPPER_BACK,
    MuscleGroup.LATS,
    MuscleGroup.TRAPS,
    MuscleGroup.REAR_DELTS,
    MuscleGroup.BICEPS,
    MuscleGroup.FOREARMS,
})

_LEGS = frozenset({
    MuscleGroup.GLUTES,
    MuscleGroup.QUADS,
    MuscleGroup.HAMSTRINGS,
    MuscleGroup.CALVES,
    MuscleGroup.HIP_ADDUCTORS,
    MuscleGroup.HIP_ABDUCTORS,
    MuscleGroup.LOWER_BACK,
    MuscleGroup.OBLIQUES,
})

_UPPER = frozenset(g for g in MuscleGroup if g.is_upper_body)
_LOWER = frozenset(g for g in MuscleGroup if not g.is_upper_body)

SPLIT_TEMPLATES: dict[SplitTemplate, tuple[tuple[str, frozenset[MuscleGroup]], ...]] = {
    SplitTemplate.FULL_BODY: (("Full Body", frozenset(MuscleGroup)),),
    SplitTemplate.PUSH_PULL_LEGS: (("Push", _PUSH), ("Pull", _PULL), ("Legs", _LEGS)),
    SplitTemplate.UPPER_LOWER: (("Upper", _UPPER), ("Lower", _LOWER)),
}


def cycle_length(template: SplitTemplate) -> int:
    """Number of distinct day focuses before the template repeats."""
    return len(SPLIT_TEMPLATES[template])


def focus_for_day(template: SplitTemplate, day_index: int) -> frozenset[MuscleGroup]:
    """Muscle groups the template trains on a 0-based training day."""
    _, groups = SPLIT_TEMPLATES[template][day_index % cycle_length(template)]
    return groups


def focus_name(template: SplitTemplate, day_index: int) -> str:
    """Display label of the template focus on a 0-based training day."""
    name, _ = SPLIT_TEMPLATES[template][day_index % cycle_length(template)]
    return name
