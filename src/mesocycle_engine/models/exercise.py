"""Exercise — read-only catalog descriptor for a resistance-training movement."""

from __future__ import annotations

from dataclasses import dataclass, field

from mesocycle_engine.models.enums import Equipment, MechanicalPattern, MuscleGroup


@dataclass(frozen=True)
class Exercise:
    """A single exercise definition owned by the catalog.

    ``exercise_id`` is assigned once by the catalog and must stay stable,
    plans reference exercises only through it.
    """

    exercise_id: str
    name: str
    primary_muscles: frozenset[MuscleGroup]
    mechanical_pattern: MechanicalPattern
    equipment: Equipment
    secondary_muscles: frozenset[MuscleGroup] = field(default_factory=frozenset)
    is_unilateral: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "primary_muscles", frozenset(self.primary_muscles))
        object.__setattr__(self, "secondary_muscles", frozenset(self.secondary_muscles))
        if not self.exercise_id:
            raise ValueError("Exercise id must not be empty")
        if not self.name:
            raise ValueError("Exercise name must not be empty")
        if not self.primary_muscles:
            raise ValueError(f"Exercise {self.name!r} needs at least one primary muscle")
        if self.primary_muscles & self.secondary_muscles:
            raise ValueError(
                f"Exercise {self.name!r}: primary and secondary muscles must be disjoint"
            )

    @property
    def all_targeted_muscles(self) -> frozenset[MuscleGroup]:
        return self.primary_muscles | self.secondary_muscles
