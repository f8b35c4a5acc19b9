"""Serialization module — export plans to persistence-friendly formats."""

from mesocycle_engine.serialization.plan_json import to_plan_json, to_plan_json_string

__all__ = ["to_plan_json", "to_plan_json_string"]
