"""Environment-variable-based configuration for the plan generation CLI."""

from __future__ import annotations

import os
from pathlib import Path

from mesocycle_engine.models.enums import DEFAULT_SEED

CATALOG_PATH: Path | None = (
    Path(os.environ["MESOCYCLE_CATALOG_PATH"]).expanduser()
    if os.environ.get("MESOCYCLE_CATALOG_PATH")
    else None
)
# Raw text; the CLI parses it with int(value, 0)
PLAN_SEED: str = os.environ.get("MESOCYCLE_SEED", hex(DEFAULT_SEED))
LOG_LEVEL: str = os.environ.get("MESOCYCLE_LOG_LEVEL", "INFO").upper()
OUTPUT_PATH: Path | None = (
    Path(os.environ["MESOCYCLE_OUTPUT_PATH"]).expanduser()
    if os.environ.get("MESOCYCLE_OUTPUT_PATH")
    else None
)
