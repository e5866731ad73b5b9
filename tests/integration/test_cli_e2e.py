"""End-to-end CLI integration tests using Typer's CliRunner."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from cocomo_estimate.cli.app import app

runner = CliRunner()
FIXTURES = Path(__file__).resolve().parent.parent / "fixtures"

_ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------


class TestVersion:
    def test_version_flag_prints_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "cocomo-estimate" in result.output


# ---------------------------------------------------------------------------
# Estimate: markdown
# ---------------------------------------------------------------------------


class TestEstimateMarkdown:
    def test_default_mode_is_organic(self) -> None:
        result = runner.invoke(app, ["estimate", "10"])
        assert result.exit_code == 0
        assert "# COCOMO Estimate" in result.output
        assert "| Development mode | organic |" in result.output
        assert "| Effort | 26.9 person-months |" in result.output
        assert "| Development time | 8.7 months |" in result.output
        assert "| Average team size | 3 people |" in result.output

    def test_mode_option(self) -> None:
        result = runner.invoke(app, ["estimate", "50", "--mode", "embedded"])
        assert result.exit_code == 0
        assert "| Effort | 393.6 person-months |" in result.output
        assert "| Average team size | 23 people |" in result.output

    def test_mode_short_option_alternate_spelling(self) -> None:
        result = runner.invoke(app, ["estimate", "32", "-m", "semi_detached"])
        assert result.exit_code == 0
        assert "| Development mode | semi-detached |" in result.output

    def test_custom_title(self) -> None:
        result = runner.invoke(app, ["estimate", "10", "--title", "Inventory System"])
        assert result.exit_code == 0
        assert "# Inventory System" in result.output

    def test_config_sets_default_mode_and_display(self) -> None:
        config = str(FIXTURES / "custom_config.yaml")
        result = runner.invoke(app, ["estimate", "50", "--config", config])
        assert result.exit_code == 0
        assert "# Embedded Budget" in result.output
        assert "| Development mode | embedded |" in result.output
        assert "| Average team size | 23.27 people |" in result.output

    def test_mode_option_overrides_config(self) -> None:
        config = str(FIXTURES / "custom_config.yaml")
        result = runner.invoke(app, ["estimate", "10", "-c", config, "-m", "organic"])
        assert result.exit_code == 0
        assert "| Effort | 26.93 person-months |" in result.output


# ---------------------------------------------------------------------------
# Estimate: json and export
# ---------------------------------------------------------------------------


class TestEstimateJson:
    def test_json_output(self) -> None:
        result = runner.invoke(app, ["estimate", "10", "--format", "json"])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["mode"] == "organic"
        assert payload["effort_person_months"] == pytest.approx(26.928443, rel=1e-6)
        assert payload["team_size"] == pytest.approx(3.081704, rel=1e-6)

    def test_export_to_file(self, tmp_path: Path) -> None:
        target = tmp_path / "estimate.json"
        result = runner.invoke(
            app, ["estimate", "50", "-m", "embedded", "--output", str(target)]
        )
        assert result.exit_code == 0
        assert "Estimate exported to" in result.output
        payload = json.loads(target.read_text(encoding="utf-8"))
        assert payload["mode"] == "embedded"
        assert payload["schedule_months"] == pytest.approx(16.918478, rel=1e-6)

    def test_export_to_directory(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["estimate", "10", "-o", str(tmp_path)])
        assert result.exit_code == 0
        exported = list(tmp_path.glob("cocomo-estimate-*.json"))
        assert len(exported) == 1

    def test_export_failure_exits_1(self, tmp_path: Path) -> None:
        target = tmp_path / "missing" / "estimate.json"
        result = runner.invoke(app, ["estimate", "10", "-o", str(target)])
        assert result.exit_code == 1
        assert "Failed to export estimate" in result.output


# ---------------------------------------------------------------------------
# Estimate: errors
# ---------------------------------------------------------------------------


class TestEstimateErrors:
    @pytest.mark.parametrize("size", ["0", "nan", "inf"])
    def test_invalid_size(self, size: str) -> None:
        result = runner.invoke(app, ["estimate", size])
        assert result.exit_code == 2
        assert "Invalid size" in result.output

    def test_size_that_underflows_is_rejected(self) -> None:
        result = runner.invoke(app, ["estimate", "1e-300", "--mode", "embedded"])
        assert result.exit_code == 2
        assert "Error: Invalid size" in result.output

    def test_negative_size_after_separator(self) -> None:
        result = runner.invoke(app, ["estimate", "--", "-5"])
        assert result.exit_code == 2
        assert "Invalid size" in result.output

    def test_non_numeric_size_rejected_by_parser(self) -> None:
        result = runner.invoke(app, ["estimate", "lots"])
        assert result.exit_code != 0

    def test_unknown_mode(self) -> None:
        result = runner.invoke(app, ["estimate", "10", "--mode", "waterfall"])
        assert result.exit_code == 2
        assert "Error: Invalid development mode: Unknown development mode 'waterfall'" in result.output
        assert "semi-detached" in result.output

    def test_unknown_format(self) -> None:
        result = runner.invoke(app, ["estimate", "10", "--format", "xml"])
        assert result.exit_code == 2
        assert "Unknown format" in result.output

    def test_missing_config(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["estimate", "10", "--config", str(tmp_path / "nope.yaml")]
        )
        assert result.exit_code == 2
        assert "Config file not found" in result.output

    def test_config_path_is_directory(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["estimate", "10", "--config", str(tmp_path)])
        assert result.exit_code == 2
        assert "Error: Failed to read config" in result.output

    def test_invalid_config(self) -> None:
        config = str(FIXTURES / "invalid_config.yaml")
        result = runner.invoke(app, ["estimate", "10", "--config", config])
        assert result.exit_code == 2
        assert "Config validation error" in result.output

    def test_missing_size_argument(self) -> None:
        result = runner.invoke(app, ["estimate"])
        assert result.exit_code != 0

    def test_estimate_help_lists_options(self) -> None:
        result = runner.invoke(app, ["estimate", "--help"])
        assert result.exit_code == 0
        compact = re.sub(r"\s+", "", _ANSI_ESCAPE_RE.sub("", result.output))
        assert "--mode" in compact
        assert "--output" in compact
        assert "semi-detached" in compact


# ---------------------------------------------------------------------------
# Modes
# ---------------------------------------------------------------------------


class TestModes:
    def test_modes_markdown(self) -> None:
        result = runner.invoke(app, ["modes"])
        assert result.exit_code == 0
        assert "| embedded | 3.6 | 1.2 | 2.5 | 0.32 |" in result.output

    def test_modes_json(self) -> None:
        result = runner.invoke(app, ["modes", "--format", "json"])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert len(payload) == 3

    def test_modes_unknown_format(self) -> None:
        result = runner.invoke(app, ["modes", "--format", "csv"])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# Verbose logging
# ---------------------------------------------------------------------------


@pytest.fixture
def _restore_root_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.usefixtures("_restore_root_logging")
class TestVerbose:
    def test_verbose_logs_estimate_and_config_load(self) -> None:
        result = runner.invoke(app, ["-v", "estimate", "10"])
        assert result.exit_code == 0
        assert "DEBUG: Loaded config from" in result.output
        assert "DEBUG: cocomo: mode=organic size_kloc=10" in result.output
        assert "| Effort | 26.9 person-months |" in result.output

    def test_without_verbose_no_debug_records(self) -> None:
        result = runner.invoke(app, ["estimate", "10"])
        assert result.exit_code == 0
        assert "DEBUG:" not in result.output
