"""Command-line mesocycle generation — writes a plan as JSON.

Usage:
    mesocycle-plan --weeks 4 --days 5 --muscles chest,triceps,quads
    python -m planner_cli.generate --weeks 5 --days 4 --split upper_lower \
        --muscles chest,lats,quads,hamstrings --deload --seed 42
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from mesocycle_engine.engine import PlanGenerator
from mesocycle_engine.models.catalog import InMemoryExerciseCatalog
from mesocycle_engine.models.enums import Goal, MuscleGroup, SplitTemplate
from mesocycle_engine.models.request import MesocycleRequest
from mesocycle_engine.serialization import to_plan_json_string

from planner_cli.config import CATALOG_PATH, LOG_LEVEL, OUTPUT_PATH, PLAN_SEED

logger = logging.getLogger(__name__)


def _choices(enum_cls) -> list[str]:
    return [member.name.lower() for member in enum_cls]


def _parse_muscles(parser: argparse.ArgumentParser, raw: str) -> frozenset[MuscleGroup]:
    groups = set()
    for name in filter(None, (part.strip() for part in raw.split(","))):
        try:
            groups.add(MuscleGroup[name.upper()])
        except KeyError:
            parser.error(
                f"unknown muscle group {name!r} (choose from {', '.join(_choices(MuscleGroup))})"
            )
    return frozenset(groups)


def _parse_set_targets(parser: argparse.ArgumentParser, raw: str) -> dict[MuscleGroup, int]:
    targets = {}
    for item in filter(None, (part.strip() for part in raw.split(","))):
        name, _, count = item.partition("=")
        try:
            group = MuscleGroup[name.strip().upper()]
            sets = int(count)
        except (KeyError, ValueError):
            parser.error(f"invalid set target {item!r} (expected group=sets, e.g. chest=12)")
        if sets < 1:
            parser.error(f"set target for {name.strip()} must be at least 1, got {sets}")
        targets[group] = sets
    return targets


def _parse_seed(parser: argparse.ArgumentParser, raw: str) -> int:
    try:
        seed = int(raw, 0)
    except ValueError:
        parser.error(f"seed must be an integer, got {raw!r}")
    if not 0 <= seed < 2**64:
        parser.error(f"seed must be an unsigned 64-bit integer, got {seed}")
    return seed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a mesocycle training plan")
    parser.add_argument("--goal", choices=_choices(Goal), default="hypertrophy")
    parser.add_argument("--weeks", type=int, required=True, help="Mesocycle length in weeks")
    parser.add_argument("--days", type=int, required=True, help="Training days per week (1-7)")
    parser.add_argument(
        "--muscles", required=True,
        help="Comma-separated target muscle groups, e.g. chest,triceps,quads",
    )
    parser.add_argument(
        "--split", choices=_choices(SplitTemplate), default="push_pull_legs",
    )
    parser.add_argument("--deload", action="store_true", help="Make the final week a deload")
    parser.add_argument(
        "--seed", default=PLAN_SEED,
        help="Unsigned 64-bit seed, decimal or 0x-prefixed (default: $MESOCYCLE_SEED)",
    )
    parser.add_argument(
        "--sets", default="",
        help="Per-group first-week set targets, e.g. chest=12,quads=8",
    )
    parser.add_argument(
        "--catalog", type=Path, default=CATALOG_PATH,
        help="Exercise catalog JSON (default: $MESOCYCLE_CATALOG_PATH)",
    )
    parser.add_argument(
        "--output", type=Path, default=OUTPUT_PATH,
        help="Write the plan here instead of stdout",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.catalog is None:
        parser.error("no catalog given (use --catalog or set MESOCYCLE_CATALOG_PATH)")
    seed = _parse_seed(parser, args.seed)

    request = MesocycleRequest(
        goal=Goal[args.goal.upper()],
        weeks=args.weeks,
        days_per_week=args.days,
        target_muscle_groups=_parse_muscles(parser, args.muscles),
        includes_deload=args.deload,
        split_template=SplitTemplate[args.split.upper()],
        weekly_set_targets=_parse_set_targets(parser, args.sets),
    )

    try:
        catalog = InMemoryExerciseCatalog.from_json_file(args.catalog)
    except (OSError, ValueError) as exc:
        # json.JSONDecodeError is a ValueError
        logger.error("Failed to load catalog from %s: %s", args.catalog, exc)
        return 1
    logger.info("Loaded %d exercises from %s", len(catalog), args.catalog)

    result = PlanGenerator(catalog).generate_mesocycle(request, seed=seed)
    if not result.ok:
        logger.error("Plan generation failed [%s]: %s", result.error.code.name, result.error)
        return 1

    document = to_plan_json_string(result.value)
    if args.output is not None:
        args.output.write_text(document + "\n")
        logger.info("Wrote plan %s to %s", result.value.plan_id, args.output)
    else:
        sys.stdout.write(document + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
