"""Tests for the mesocycle-plan command-line entry point."""

from __future__ import annotations

import importlib
import json

import pytest

import planner_cli.config
from planner_cli.generate import build_parser, main

CATALOG = [
    {"id": "bench-press", "name": "Bench Press", "primaryMuscles": ["chest"],
     "secondaryMuscles": ["triceps"], "mechanicalPattern": "horizontal_push",
     "equipment": "barbell"},
    {"id": "triceps-pushdown", "name": "Triceps Pushdown", "primaryMuscles": ["triceps"],
     "equipment": "cable"},
    {"id": "back-squat", "name": "Back Squat", "primaryMuscles": ["quads"],
     "secondaryMuscles": ["glutes"], "mechanicalPattern": "squat", "equipment": "barbell"},
]


@pytest.fixture
def catalog_path(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(CATALOG))
    return path


def _args(catalog_path, *extra: str) -> list[str]:
    return [
        "--weeks", "4",
        "--days", "5",
        "--muscles", "chest,triceps,quads",
        "--catalog", str(catalog_path),
        *extra,
    ]


class TestBuildParser:
    def test_defaults(self) -> None:
        args = build_parser().parse_args(["--weeks", "4", "--days", "3", "--muscles", "chest"])
        assert args.goal == "hypertrophy"
        assert args.split == "push_pull_legs"
        assert args.deload is False

    def test_seed_kept_as_text(self) -> None:
        args = build_parser().parse_args(
            ["--weeks", "4", "--days", "3", "--muscles", "chest", "--seed", "0x2a"]
        )
        assert args.seed == "0x2a"


class TestMain:
    def test_writes_plan_to_stdout(self, catalog_path, capsys) -> None:
        assert main(_args(catalog_path, "--seed", "42")) == 0
        doc = json.loads(capsys.readouterr().out)
        assert doc["seed"] == 42
        assert len(doc["weeks"]) == 4
        ids = {
            rx["exerciseId"]
            for week in doc["weeks"]
            for workout in week["workouts"]
            for rx in workout["exercises"]
        }
        assert ids <= {"bench-press", "triceps-pushdown", "back-squat"}

    def test_writes_plan_to_file(self, catalog_path, tmp_path, capsys) -> None:
        output = tmp_path / "plan.json"
        assert main(_args(catalog_path, "--output", str(output), "--deload")) == 0
        doc = json.loads(output.read_text())
        assert doc["weeks"][-1]["isDeload"] is True
        assert capsys.readouterr().out == ""

    def test_same_seed_same_output(self, catalog_path, capsys) -> None:
        main(_args(catalog_path, "--seed", "7"))
        first = json.loads(capsys.readouterr().out)
        main(_args(catalog_path, "--seed", "7"))
        second = json.loads(capsys.readouterr().out)
        first.pop("createdAt")
        second.pop("createdAt")
        assert first == second

    def test_generation_failure_exit_code(self, catalog_path) -> None:
        assert main(_args(catalog_path, "--days", "8")) == 1

    def test_catalog_gap_exit_code(self, catalog_path) -> None:
        argv = _args(catalog_path)
        argv[argv.index("chest,triceps,quads")] = "lats"
        assert main(argv) == 1

    def test_unreadable_catalog_exit_code(self, tmp_path) -> None:
        assert main(_args(tmp_path / "missing.json")) == 1

    def test_malformed_catalog_exit_code(self, tmp_path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        assert main(_args(path)) == 1

    def test_unknown_muscle_is_usage_error(self, catalog_path) -> None:
        argv = _args(catalog_path)
        argv[argv.index("chest,triceps,quads")] = "chest,wings"
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 2

    def test_missing_catalog_is_usage_error(self, monkeypatch) -> None:
        monkeypatch.setattr("planner_cli.generate.CATALOG_PATH", None)
        with pytest.raises(SystemExit) as exc_info:
            main(["--weeks", "4", "--days", "5", "--muscles", "chest"])
        assert exc_info.value.code == 2

    def test_negative_seed_is_usage_error(self, catalog_path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(_args(catalog_path, "--seed", "-1"))
        assert exc_info.value.code == 2

    def test_hex_seed(self, catalog_path, capsys) -> None:
        assert main(_args(catalog_path, "--seed", "0x2a")) == 0
        assert json.loads(capsys.readouterr().out)["seed"] == 42

    @pytest.mark.parametrize("raw", ["not-a-seed", "1.5", ""])
    def test_malformed_seed_is_usage_error(self, catalog_path, raw: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(_args(catalog_path, "--seed", raw))
        assert exc_info.value.code == 2

    def test_malformed_env_seed_is_usage_error(self, catalog_path, monkeypatch) -> None:
        monkeypatch.setattr("planner_cli.generate.PLAN_SEED", "bogus")
        with pytest.raises(SystemExit) as exc_info:
            main(_args(catalog_path))
        assert exc_info.value.code == 2

    def test_config_import_tolerates_malformed_seed(self, monkeypatch) -> None:
        monkeypatch.setenv("MESOCYCLE_SEED", "bogus")
        try:
            reloaded = importlib.reload(planner_cli.config)
            assert reloaded.PLAN_SEED == "bogus"
        finally:
            monkeypatch.delenv("MESOCYCLE_SEED")
            importlib.reload(planner_cli.config)

    def test_set_targets(self, catalog_path, capsys) -> None:
        assert main(_args(catalog_path, "--sets", "chest=14, quads=6")) == 0
        week = json.loads(capsys.readouterr().out)["weeks"][0]
        totals: dict[str, int] = {}
        for workout in week["workouts"]:
            for rx in workout["exercises"]:
                totals[rx["muscleGroup"]] = totals.get(rx["muscleGroup"], 0) + rx["sets"]
        assert totals == {"chest": 14, "triceps": 10, "quads": 6}

    @pytest.mark.parametrize("raw", ["chest=abc", "wings=4", "chest", "chest=0"])
    def test_bad_set_targets_are_usage_errors(self, catalog_path, raw: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(_args(catalog_path, "--sets", raw))
        assert exc_info.value.code == 2
