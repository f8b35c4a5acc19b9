"""Volume scheduler — allocates muscle-group slots to training days.

Algorithm:
1. Cycle the split template across the requested training days and keep
   the target groups each day's focus covers.
2. Any target group still below the goal's weekly minimum frequency is
   added to the day that lacks it and has the fewest groups (ties: earliest
   day), groups processed in ascending ordinal order. When every day
   already trains the group, the extra slot goes to the day with the
   fewest groups, so one day may hold several slots of the same group.
3. A day left with nothing to train receives the least-frequent target
   group (ties: lowest ordinal).

Every week of the mesocycle uses the same day pattern.
"""

from __future__ import annotations

import logging

from mesocycle_engine.models.allocation import WeeklyAllocation
from mesocycle_engine.models.enums import MIN_WEEKLY_FREQUENCY, Goal, MuscleGroup, SplitTemplate
from mesocycle_engine.models.request import MesocycleRequest
from mesocycle_engine.planner.split_templates import focus_for_day

logger = logging.getLogger(__name__)


def minimum_frequency(goal: Goal) -> int:
    """Weekly slot floor per muscle group for *goal*.

    Frequency counts slots, not distinct days, so the floor holds for any
    number of training days.
    """
    return MIN_WEEKLY_FREQUENCY[goal]


def schedule(request: MesocycleRequest) -> WeeklyAllocation:
    """Build the week-by-week, day-by-day muscle-group allocation."""
    floor = minimum_frequency(request.goal)
    pattern = build_week_pattern(
        request.sorted_targets,
        request.split_template,
        request.days_per_week,
        floor,
    )
    return WeeklyAllocation(
        days_per_week=request.days_per_week,
        minimum_frequency=floor,
        weeks=tuple(pattern for _ in range(request.weeks)),
    )


def build_week_pattern(
    targets: tuple[MuscleGroup, ...],
    template: SplitTemplate,
    days_per_week: int,
    floor: int,
) -> tuple[tuple[MuscleGroup, ...], ...]:
    """Allocate *targets* over one week of *days_per_week* training days.

    Args:
        targets: Target muscle groups in ascending ordinal order.
        template: Split template providing the canonical day focuses.
        days_per_week: Number of training days (1-7).
        floor: Minimum weekly slots per target group.

    Returns:
        One ordinal-sorted tuple of muscle groups per training day. A group
        appears more than once in a day only when there are fewer days than
        *floor*.
    """
    days: list[list[MuscleGroup]] = [
        [g for g in targets if g in focus_for_day(template, d)]
        for d in range(days_per_week)
    ]

    for group in targets:
        count = sum(day.count(group) for day in days)
        while count < floor:
            open_days = [d for d in range(days_per_week) if group not in days[d]]
            if open_days:
                chosen = min(open_days, key=lambda d: (len(days[d]), d))
                logger.debug("Supplemental %s slot on day %d", group.name, chosen)
            else:
                chosen = min(range(days_per_week), key=lambda d: (len(days[d]), d))
                logger.debug("Extra %s slot on day %d, which already trains it", group.name, chosen)
            days[chosen].append(group)
            count += 1

    for d, day in enumerate(days):
        if not day:
            group = min(targets, key=lambda g: (sum(x.count(g) for x in days), g))
            day.append(group)
            logger.debug("Filled empty day %d with %s", d, group.name)

    return tuple(tuple(sorted(day)) for day in days)
