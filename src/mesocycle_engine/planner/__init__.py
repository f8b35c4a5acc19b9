"""Planner pipeline — validate, schedule, select and assemble mesocycles."""

from mesocycle_engine.planner.assembler import assemble, verify_plan
from mesocycle_engine.planner.exercise_selector import select
from mesocycle_engine.planner.validator import validate
from mesocycle_engine.planner.volume_scheduler import schedule

__all__ = ["assemble", "schedule", "select", "validate", "verify_plan"]
