"""MesocycleRequest — immutable input to the plan generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from mesocycle_engine.models.enums import Goal, MuscleGroup, SplitTemplate


@dataclass(frozen=True)
class MesocycleRequest:
    """What the athlete asked for.

    Structural validity (day count, empty targets, week count) is checked
    by the request validator, not here, so that invalid requests can be
    reported as generation errors instead of construction failures.

    ``weekly_set_targets`` overrides the goal's first-week set count for
    individual groups; groups not listed use the goal default. Entries for
    groups outside ``target_muscle_groups`` are ignored.
    """

    goal: Goal
    weeks: int
    days_per_week: int
    target_muscle_groups: frozenset[MuscleGroup] = field(default_factory=frozenset)
    includes_deload: bool = False
    split_template: SplitTemplate = SplitTemplate.PUSH_PULL_LEGS
    weekly_set_targets: Mapping[MuscleGroup, int] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # Accept any iterable; order never matters
        object.__setattr__(
            self, "target_muscle_groups", frozenset(self.target_muscle_groups)
        )
        targets = dict(self.weekly_set_targets)
        for group, sets in targets.items():
            if sets < 1:
                raise ValueError(f"Weekly set target for {group.name} must be >= 1, got {sets}")
        object.__setattr__(self, "weekly_set_targets", targets)

    @property
    def sorted_targets(self) -> tuple[MuscleGroup, ...]:
        """Target groups in ascending ordinal order."""
        return tuple(sorted(self.target_muscle_groups))

    def fingerprint(self) -> str:
        """Stable text form of the request, independent of set ordering."""
        groups = ",".join(g.name for g in self.sorted_targets)
        overrides = ",".join(
            f"{g.name}={self.weekly_set_targets[g]}"
            for g in sorted(self.weekly_set_targets)
            if g in self.target_muscle_groups
        )
        return (
            f"{self.goal.name}|{self.weeks}|{self.days_per_week}|{groups}|"
            f"{int(self.includes_deload)}|{self.split_template.name}|{overrides}"
        )
