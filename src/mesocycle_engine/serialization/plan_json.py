"""JSON serialization for MesocyclePlan objects.

Converts a MesocyclePlan into a stable, camelCase JSON-compatible document
for the workout-repository collaborator to persist.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json

from mesocycle_engine.models.plan import ExercisePlan, MesocyclePlan, Week, WorkoutPlan

# Bump when the document shape changes.
SCHEMA_VERSION = 1


def to_plan_json(plan: MesocyclePlan) -> dict:
    """Convert a MesocyclePlan to a JSON-compatible dict."""
    return {
        "schemaVersion": SCHEMA_VERSION,
        "planId": plan.plan_id,
        "goal": plan.goal.name.lower(),
        "splitTemplate": plan.split_template.name.lower(),
        "seed": plan.seed,
        "createdAt": plan.created_at.isoformat(),
        "notes": plan.notes,
        "weeks": [_convert_week(week) for week in plan.weeks],
    }


def to_plan_json_string(plan: MesocyclePlan, indent: int = 2) -> str:
    """Convert a MesocyclePlan to a JSON string."""
    return json.dumps(to_plan_json(plan), indent=indent)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _convert_week(week: Week) -> dict:
    return {
        "index": week.index,
        "isDeload": week.is_deload,
        "totalTonnage": round(week.total_tonnage, 3),
        "totalPlannedReps": round(week.total_planned_reps, 3),
        "workouts": [_convert_workout(w) for w in week.workouts],
    }


def _convert_workout(workout: WorkoutPlan) -> dict:
    return {
        "title": workout.title,
        "week": workout.week_index,
        "dayIndex": workout.day_index,
        "exercises": [_convert_exercise(rx) for rx in workout.exercises],
    }


def _convert_exercise(rx: ExercisePlan) -> dict:
    result = {
        "exerciseId": rx.exercise_id,
        "exerciseName": rx.exercise_name,
        "muscleGroup": rx.muscle_group.name.lower(),
        "sets": rx.sets,
        "repRange": {"min": rx.rep_range.min, "max": rx.rep_range.max},
        "loadMultiplier": rx.load_multiplier,
        "plannedTotalReps": rx.planned_total_reps,
    }
    # Optional fields are omitted rather than written as null
    if rx.load_kg is not None:
        result["loadKg"] = rx.load_kg
    if rx.target_rir is not None:
        result["targetRIR"] = rx.target_rir
    return result
