"""Mini README: Tests for the plain-text survey report."""

from __future__ import annotations

from dronedock.interface import format_survey_report
from dronedock.surveys import ERROR_MESSAGE, DockLocationEngine


def test_report_lists_both_scenarios(reachable_fields, nearby_buildings) -> None:
    survey = DockLocationEngine().run(reachable_fields, nearby_buildings)
    report = format_survey_report(survey)

    assert "----- START STATISTICS FOR SURVEY NO 1 -----" in report
    assert "----- END STATISTICS FOR SURVEY NO 2 -----" in report
    assert f"Number Of Surveyed Fields: {len(reachable_fields)}" in report
    assert "Survey No: 2, Flight No: 1" in report
    assert "Distance In Meters To Nearest Building: 0.00" in report
    assert ERROR_MESSAGE not in report


def test_report_shows_errors_and_unavailable_distance(reachable_fields) -> None:
    report = format_survey_report(DockLocationEngine().run(reachable_fields, []))

    assert "Distance In Meters To Nearest Building: unavailable" in report
    assert report.count(ERROR_MESSAGE) == 1


def test_report_for_empty_input_only_contains_errors() -> None:
    report = format_survey_report(DockLocationEngine().run([], []))

    assert report.count(ERROR_MESSAGE) == 2
    assert "Optimal Drone Dock" not in report
