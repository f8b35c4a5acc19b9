"""Plan metrics: tabular views of a MesocyclePlan's derived aggregates.

Used by callers that display or compare plans and by tests that sweep
the tonnage and frequency invariants.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from mesocycle_engine.models.plan import MesocyclePlan


def weekly_summary(plan: MesocyclePlan) -> pd.DataFrame:
    """One row per week: tonnage, planned reps, sets and deload flag.

    The index is the 1-based week number.
    """
    rows = [
        {
            "week": week.index + 1,
            "tonnage": week.total_tonnage,
            "planned_reps": week.total_planned_reps,
            "sets": week.total_sets,
            "workouts": len(week.workouts),
            "is_deload": week.is_deload,
        }
        for week in plan.weeks
    ]
    frame = pd.DataFrame(
        rows,
        columns=["week", "tonnage", "planned_reps", "sets", "workouts", "is_deload"],
    )
    return frame.set_index("week")


def frequency_table(plan: MesocyclePlan) -> pd.DataFrame:
    """Weeks x muscle groups matrix of slot counts.

    Columns are muscle-group names in ordinal order, covering every group
    the plan trains at least once.
    """
    groups = sorted({rx.muscle_group for w in plan.workouts for rx in w.exercises})
    data = {
        group.name: [week.frequency(group) for week in plan.weeks]
        for group in groups
    }
    index = pd.Index([week.index + 1 for week in plan.weeks], name="week")
    return pd.DataFrame(data, index=index, dtype=np.int64)


def tonnage_deltas(plan: MesocyclePlan) -> np.ndarray:
    """Week-over-week tonnage change (length = weeks - 1)."""
    return np.diff(np.asarray(plan.weekly_tonnage, dtype=np.float64))
