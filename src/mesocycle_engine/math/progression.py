"""Progression math: rep ranges, relative load, weekly sets and deload.

Implements a linear overload model for a single mesocycle:
- Rep range fixed per goal for the whole block
- Relative load rises by a fixed step each week
- Weekly sets per muscle group rise by one set each week
- Optional terminal deload cuts load and volume relative to the
  penultimate week

References:
    Schoenfeld, Ogborn & Krieger (2017), Dose-response relationship between
        weekly resistance training volume and increases in muscle mass.
    Helms et al. (2016), Application of the repetitions in reserve-based
        rating of perceived exertion scale for resistance training.
    Bell et al. (2023), Integrating deloading into strength and physique
        sports training programmes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from mesocycle_engine.models.enums import (
    BASE_WEEKLY_SETS,
    DELOAD_LOAD_FRACTION,
    DELOAD_TARGET_RIR,
    DELOAD_VOLUME_FRACTION,
    LOAD_STEP_PER_WEEK,
    PRESCRIBED_REP_RANGE,
    REP_RANGE_BOUNDS,
    STARTING_TARGET_RIR,
    WEEKLY_SET_INCREMENT,
    Goal,
)
from mesocycle_engine.models.plan import RepRange


@dataclass(frozen=True)
class WeekProgression:
    """Prescription parameters shared by every exercise in one week."""

    week_index: int  # 0-indexed
    rep_range: RepRange
    load_multiplier: float
    weekly_sets: int  # per targeted muscle group
    target_rir: int
    is_deload: bool = False


def rep_range_for(goal: Goal) -> RepRange:
    """Rep range prescribed for every set of a *goal* mesocycle."""
    low, high = PRESCRIBED_REP_RANGE[goal]
    return RepRange(min=low, max=high)


def rep_bounds_for(goal: Goal) -> tuple[int, int]:
    """Inclusive (min, max) reps any prescription for *goal* must respect."""
    return REP_RANGE_BOUNDS[goal]


def is_deload_week(week_index: int, total_weeks: int, includes_deload: bool) -> bool:
    """Only the final week of a multi-week block can be a deload.

    A single-week block has no preceding week to deload from, so the flag
    is ignored there.
    """
    return includes_deload and total_weeks >= 2 and week_index == total_weeks - 1


def assign_load_and_reps(
    week_index: int,
    total_weeks: int,
    goal: Goal,
    includes_deload: bool,
) -> WeekProgression:
    """Compute the rep range, relative load and volume for one week.

    Non-deload weeks never lower load or sets relative to the week before.
    The deload week takes the penultimate week's values and scales load by
    DELOAD_LOAD_FRACTION and sets by DELOAD_VOLUME_FRACTION (rounded up),
    so its tonnage is strictly below the penultimate week's.

    Args:
        week_index: 0-indexed week within the mesocycle.
        total_weeks: Total weeks in the mesocycle (>= 1).
        goal: Training goal.
        includes_deload: Whether the final week is a deload.

    Returns:
        WeekProgression for that week.

    Raises:
        ValueError: If week_index is outside [0, total_weeks).
    """
    if not 0 <= week_index < total_weeks:
        raise ValueError(
            f"Week {week_index} is outside mesocycle range (0-{total_weeks - 1})"
        )

    rep_range = rep_range_for(goal)

    if is_deload_week(week_index, total_weeks, includes_deload):
        previous = _overload_week(week_index - 1, goal, rep_range)
        return WeekProgression(
            week_index=week_index,
            rep_range=rep_range,
            load_multiplier=round(previous.load_multiplier * DELOAD_LOAD_FRACTION, 4),
            weekly_sets=weekly_sets_for(BASE_WEEKLY_SETS[goal], week_index, is_deload=True),
            target_rir=DELOAD_TARGET_RIR,
            is_deload=True,
        )

    return _overload_week(week_index, goal, rep_range)


def weekly_sets_for(base_sets: int, week_index: int, is_deload: bool = False) -> int:
    """Weekly sets for one muscle group starting from *base_sets* in week 0.

    Overload weeks add WEEKLY_SET_INCREMENT per week. A deload week takes
    the previous week's count scaled by DELOAD_VOLUME_FRACTION, rounded up.
    """
    if is_deload:
        previous = base_sets + WEEKLY_SET_INCREMENT * (week_index - 1)
        return max(1, math.ceil(previous * DELOAD_VOLUME_FRACTION))
    return base_sets + WEEKLY_SET_INCREMENT * week_index


def build_progression(
    total_weeks: int, goal: Goal, includes_deload: bool
) -> tuple[WeekProgression, ...]:
    """Progression for every week of a mesocycle, in order."""
    return tuple(
        assign_load_and_reps(w, total_weeks, goal, includes_deload)
        for w in range(total_weeks)
    )


def _overload_week(week_index: int, goal: Goal, rep_range: RepRange) -> WeekProgression:
    return WeekProgression(
        week_index=week_index,
        rep_range=rep_range,
        load_multiplier=round(1.0 + LOAD_STEP_PER_WEEK[goal] * week_index, 4),
        weekly_sets=weekly_sets_for(BASE_WEEKLY_SETS[goal], week_index),
        target_rir=max(0, STARTING_TARGET_RIR - week_index),
    )
