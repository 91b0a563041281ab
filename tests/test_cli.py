"""Mini README: Tests for the Typer command line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from dronedock.configuration import get_settings
from main_dock_planner import cli

runner = CliRunner()


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def input_csv(tmp_path: Path) -> Path:
    path = tmp_path / "input.csv"
    path.write_text(
        "48.0,8.0,Field\n48.001,8.0,Field\n48.002,8.0,Field\n48.0005,8.001,Building\n",
        encoding="utf-8",
    )
    return path


def test_report_prints_statistics_and_exports(tmp_path: Path, input_csv: Path) -> None:
    output_dir = tmp_path / "out"
    result = runner.invoke(
        cli,
        ["report", "--input", str(input_csv), "--output-dir", str(output_dir), "--format", "csv"],
    )

    assert result.exit_code == 0, result.output
    assert "START STATISTICS FOR SURVEY NO 1" in result.output
    assert "Number Of Surveyed Fields: 3" in result.output
    assert (output_dir / "flight_paths_start_from_field.csv").exists()
    assert (output_dir / "flight_paths_start_from_building.csv").exists()


def test_report_without_export_writes_nothing(tmp_path: Path, input_csv: Path) -> None:
    output_dir = tmp_path / "out"
    result = runner.invoke(
        cli,
        ["report", "--input", str(input_csv), "--output-dir", str(output_dir), "--no-export"],
    )

    assert result.exit_code == 0, result.output
    assert not output_dir.exists()


def test_report_for_missing_input_prints_errors(tmp_path: Path) -> None:
    result = runner.invoke(
        cli,
        ["report", "--input", str(tmp_path / "missing.xlsx"), "--output-dir", str(tmp_path)],
    )

    assert result.exit_code == 0, result.output
    assert result.output.count("There is no input or the input is invalid!") == 2


def test_report_rejects_unknown_format(input_csv: Path, tmp_path: Path) -> None:
    result = runner.invoke(
        cli,
        ["report", "--input", str(input_csv), "--output-dir", str(tmp_path), "--format", "pdf"],
    )

    assert result.exit_code != 0
