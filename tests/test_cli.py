"""Tests for the command line interface."""

import json
from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from gearpuzzle.cli import app
from gearpuzzle.levels import dump_level, get_level_by_id

runner = CliRunner()


@pytest.fixture
def level_file(tmp_path):
    return dump_level(get_level_by_id("builtin-001"), tmp_path / "first_steps.yaml")


class TestValidate:
    """Tests for the validate command."""

    def test_valid(self, level_file):
        result = runner.invoke(app, ["validate", str(level_file)])
        assert result.exit_code == 0
        assert "Level valid: First Steps" in result.output
        assert "inv-1 (medium)" in result.output

    def test_invalid(self, tmp_path):
        data = get_level_by_id("builtin-001").to_data()
        data["fixedGears"] = data["fixedGears"][:1]
        path = tmp_path / "bad.yaml"
        path.write_text(yaml.safe_dump(data))
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 1

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["validate", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 1


class TestSimulate:
    """Tests for the simulate command."""

    def test_unsolved(self, level_file):
        result = runner.invoke(app, ["simulate", str(level_file)])
        assert result.exit_code == 0
        assert "Not solved" in result.output

    def test_solved_by_builtin_id(self):
        result = runner.invoke(app, ["simulate", "builtin-001", "--place", "inv-1=360,470"])
        assert result.exit_code == 0
        assert "Solved!" in result.output

    def test_no_snap(self):
        result = runner.invoke(app, ["simulate", "builtin-001", "-p", "inv-1=360,560", "--no-snap"])
        assert result.exit_code == 0
        assert "Not solved" in result.output

    def test_report_output(self, tmp_path):
        report = tmp_path / "report.json"
        result = runner.invoke(app, ["simulate", "builtin-001", "-p", "inv-1=360,470", "-o", str(report)])
        assert result.exit_code == 0
        assert json.loads(report.read_text())["won"] is True

    def test_config(self, tmp_path):
        config = tmp_path / "tolerances.yaml"
        config.write_text("mesh_tolerance: 2\nsnap_tolerance: 2\n")
        # 5px off the mesh point: outside both bands, so nothing engages
        result = runner.invoke(app, ["simulate", "builtin-001", "-p", "inv-1=365,470", "-c", str(config)])
        assert result.exit_code == 0
        assert "Not solved" in result.output

    def test_bad_placement_format(self):
        result = runner.invoke(app, ["simulate", "builtin-001", "-p", "inv-1"])
        assert result.exit_code != 0

    def test_unknown_item(self):
        result = runner.invoke(app, ["simulate", "builtin-001", "-p", "inv-7=1,1"])
        assert result.exit_code == 1

    def test_unknown_level(self):
        result = runner.invoke(app, ["simulate", "no-such-level"])
        assert result.exit_code == 1


class TestLevelCommands:
    """Tests for the levels and daily commands."""

    def test_levels(self):
        result = runner.invoke(app, ["levels"])
        assert result.exit_code == 0
        assert "builtin-001" in result.output
        assert "Tight Fit" in result.output

    def test_daily(self):
        result = runner.invoke(app, ["daily", "--date", "2026-01-01"])
        assert result.exit_code == 0
        assert "Size Matters" in result.output

    def test_daily_bad_date(self):
        result = runner.invoke(app, ["daily", "--date", "tomorrow"])
        assert result.exit_code != 0


class TestExampleFiles:
    """Tests for the shipped example files."""

    def test_example_level_solution(self):
        example = Path(__file__).parent.parent / "examples" / "crossing.yaml"
        config = example.parent / "tolerances.yaml"
        if not example.exists():
            pytest.skip("Example file not found")

        result = runner.invoke(
            app,
            ["simulate", str(example), "-p", "inv-1=312,316", "-p", "inv-2=312,484", "-c", str(config)],
        )
        assert result.exit_code == 0
        assert "Solved!" in result.output
