"""Mini README: End-to-end tests for the dock location engine.

Mirrors the operator-facing scenarios: empty input, buildings only, fields
only, clusters out of each other's range, and full inputs where every field is
reachable. Forced-dock comparisons confirm no other dock beats the chosen one.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from dronedock.geometry import LocationRole, Point
from dronedock.route_planning import FlightConstraints, SelectionPolicy
from dronedock.surveys import DockLocationEngine, DockSurvey, SurveyResult

ERROR_RESULT = SurveyResult.error_sentinel()


def _assert_not_strictly_better(candidate: SurveyResult, chosen: SurveyResult) -> None:
    assert candidate.surveyed_field_count <= chosen.surveyed_field_count
    if candidate.surveyed_field_count == chosen.surveyed_field_count:
        assert candidate.total_flight_minutes >= chosen.total_flight_minutes - 1e-6


def test_empty_input_reports_errors_for_both_scenarios() -> None:
    survey = DockLocationEngine().run([], [])

    assert survey.fields == ()
    assert survey.buildings == ()
    assert survey.results() == [ERROR_RESULT, ERROR_RESULT]


def test_buildings_only_reports_errors_for_both_scenarios(nearby_buildings) -> None:
    survey = DockLocationEngine().run([], nearby_buildings)

    assert survey.fields == ()
    assert survey.buildings == tuple(nearby_buildings)
    assert survey.results() == [ERROR_RESULT, ERROR_RESULT]


def test_fields_only_reports_field_dock(reachable_fields) -> None:
    survey = DockLocationEngine().run(reachable_fields, [])

    assert survey.buildings == ()
    assert not survey.field_start.is_error
    assert survey.field_start.dock.role is LocationRole.FIELD
    assert survey.building_start == ERROR_RESULT


def test_complete_input_surveys_every_field(reachable_fields, nearby_buildings) -> None:
    constraints = FlightConstraints()
    survey = DockLocationEngine(constraints).run(reachable_fields, nearby_buildings)

    assert survey.field_start.dock in reachable_fields
    assert survey.building_start.dock in nearby_buildings
    for result in survey.results():
        dock = result.dock
        # Every field is reachable on its own dedicated round trip.
        for field in reachable_fields:
            naive = 2 * constraints.leg_minutes(dock, field) + constraints.survey_minutes_per_field
            assert naive <= constraints.max_flight_minutes
        assert result.surveyed_field_count == result.target_field_count == len(reachable_fields)

        visited = [point for flight in result.flights for point in flight[1:-1]]
        assert len(visited) == len(set(visited))
        for flight in result.flights:
            assert flight[0] == dock and flight[-1] == dock


def test_building_scenario_counts_its_own_flights(reachable_fields) -> None:
    """Each scenario's surveyed count is derived from its own flights."""

    far_building = Point(48.09, 8.0, LocationRole.BUILDING)
    survey = DockLocationEngine().run(reachable_fields, [far_building])

    result = survey.building_start
    assert result.surveyed_field_count == sum(len(flight) - 2 for flight in result.flights)
    assert result.nearest_building_meters == 0.0


def test_unreachable_fields_are_reported_not_failed(small_cluster, large_cluster) -> None:
    fields = small_cluster + large_cluster
    buildings = [
        Point(49.0005, 8.001, LocationRole.BUILDING),
        Point(49.002, 8.001, LocationRole.BUILDING),
    ]
    survey = DockLocationEngine().run(fields, buildings)

    for result in survey.results():
        assert not result.is_error
        assert result.target_field_count - result.surveyed_field_count == len(small_cluster)


def test_lexicographic_policy_through_engine(small_cluster, large_cluster) -> None:
    fields = large_cluster + small_cluster

    default_survey = DockLocationEngine().run(fields, [])
    covering_survey = DockLocationEngine(policy=SelectionPolicy.LEXICOGRAPHIC).run(fields, [])

    assert default_survey.field_start.surveyed_field_count == len(small_cluster)
    assert covering_survey.field_start.surveyed_field_count == len(large_cluster)


def test_chosen_field_dock_is_not_beaten_by_forced_docks(reachable_fields, nearby_buildings) -> None:
    engine = DockLocationEngine()
    chosen = engine.run(reachable_fields, nearby_buildings)

    for candidate in reachable_fields:
        forced = engine.evaluate(
            reachable_fields,
            nearby_buildings,
            field_dock=candidate,
            building_dock=chosen.building_start.dock,
        )
        assert forced.field_start.dock == candidate
        _assert_not_strictly_better(forced.field_start, chosen.field_start)


def test_chosen_building_dock_is_not_beaten_by_forced_docks(reachable_fields, nearby_buildings) -> None:
    engine = DockLocationEngine()
    chosen = engine.run(reachable_fields, nearby_buildings)

    for candidate in nearby_buildings:
        forced = engine.evaluate(
            reachable_fields,
            nearby_buildings,
            field_dock=chosen.field_start.dock,
            building_dock=candidate,
        )
        _assert_not_strictly_better(forced.building_start, chosen.building_start)


def test_runs_are_reproducible(reachable_fields, nearby_buildings) -> None:
    engine = DockLocationEngine()
    first = engine.run(reachable_fields, nearby_buildings)
    second = engine.run(list(reachable_fields), list(nearby_buildings))

    assert first == second
    assert hash(first) == hash(second)


def test_run_from_missing_file_reports_errors(tmp_path: Path) -> None:
    survey = DockLocationEngine().run_from_file(tmp_path / "missing.xlsx")

    assert survey == DockSurvey()
    assert survey.results() == [ERROR_RESULT, ERROR_RESULT]


def test_run_from_csv_file(tmp_path: Path) -> None:
    path = tmp_path / "input.csv"
    path.write_text(
        "48.0,8.0,Field\n"
        "48.001,8.0,Field\n"
        "48.002,8.0,field\n"
        "48.0015,8.001,Building\n",
        encoding="utf-8",
    )
    survey = DockLocationEngine().run_from_file(path)

    assert len(survey.fields) == 3
    assert len(survey.buildings) == 1
    assert survey.field_start.surveyed_field_count == 3
    assert survey.building_start.dock == Point(48.0015, 8.001, LocationRole.BUILDING)
    assert survey.as_dict()["scenarios"]["building_start"]["nearest_building_meters"] == pytest.approx(0.0)


def test_run_from_csv_skips_out_of_range_coordinates(tmp_path: Path) -> None:
    path = tmp_path / "input.csv"
    path.write_text(
        "48.0,8.0,Field\n"
        "48.001,8.0,Field\n"
        "inf,8.0,Field\n"
        "1e999,8.0,Field\n"
        "48.0005,8.001,Building\n",
        encoding="utf-8",
    )
    survey = DockLocationEngine().run_from_file(path)

    assert len(survey.fields) == 2
    assert survey.field_start.surveyed_field_count == 2
    assert survey.building_start.surveyed_field_count == 2
