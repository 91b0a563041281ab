"""Mini README: Plain-text presentation of survey results.

Structure:
    * format_result - render one scenario block.
    * format_survey_report - render both scenarios of a run.

Each scenario is framed by START/END markers and numbered in the order the
engine reports them (dock on a field first, then dock on a building). Error
scenarios show only the error text.
"""

from __future__ import annotations

import math
from typing import List

from ..surveys import DockSurvey, SurveyResult


def _format_distance(meters: float) -> str:
    return f"{meters:.2f}" if math.isfinite(meters) else "unavailable"


def format_result(result: SurveyResult, survey_number: int) -> str:
    """Render the statistics and flight listings of one scenario."""

    lines: List[str] = [f"----- START STATISTICS FOR SURVEY NO {survey_number} -----"]
    if result.is_error:
        lines.append(str(result.error))
    else:
        lines.extend(
            [
                "",
                f"Optimal Drone Dock: {result.dock}",
                f"Target Number Of Fields To Survey: {result.target_field_count}",
                f"Number Of Surveyed Fields: {result.surveyed_field_count}",
                f"Total Flight Time In Minutes: {result.total_flight_minutes:.2f}",
                "Total Flight And Charging Time In Minutes: "
                f"{result.total_flight_and_charging_minutes:.2f}",
                "Distance In Meters To Nearest Building: "
                f"{_format_distance(result.nearest_building_meters)}",
                "",
            ]
        )
        for flight_number, flight in enumerate(result.flights, start=1):
            lines.append(f"Survey No: {survey_number}, Flight No: {flight_number}")
            lines.extend(str(point) for point in flight)
            lines.append("")
    lines.append(f"----- END STATISTICS FOR SURVEY NO {survey_number} -----")
    return "\n".join(lines)


def format_survey_report(survey: DockSurvey) -> str:
    """Render both scenario blocks separated by blank lines."""

    blocks = [
        format_result(result, survey_number)
        for survey_number, result in enumerate(survey.results(), start=1)
    ]
    return "\n\n\n".join(blocks) + "\n"
