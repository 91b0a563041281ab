"""Mini README: Export planned flights as coordinate blocks for map tools.

Structure:
    * flight_rows - flatten flights into titled latitude/longitude rows.
    * FlightPathExporter - writes ``.xlsx`` or ``.csv`` files with pandas.

Every flight becomes one block: a ``latitude | longitude`` title row followed
by the flight's coordinates in visitation order. Map visualisers such as
gpsvisualizer.com treat each titled block as a separate track, so every flight
of a survey renders in its own colour. Scenarios without flights produce no
file at all.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pandas as pd

from ..logging_utils import get_logger
from ..route_planning import Flight
from ..surveys.engine import DockSurvey
from ..surveys.statistics import Scenario

LOGGER = get_logger(__name__)

SUPPORTED_FORMATS = ("xlsx", "csv")
OUTPUT_STEMS: Dict[Scenario, str] = {
    Scenario.FIELD_START: "flight_paths_start_from_field",
    Scenario.BUILDING_START: "flight_paths_start_from_building",
}


def flight_rows(flights: Sequence[Flight]) -> List[List[object]]:
    """Build the titled coordinate rows written for ``flights``."""

    rows: List[List[object]] = []
    for flight in flights:
        rows.append(["latitude", "longitude"])
        rows.extend([point.latitude, point.longitude] for point in flight)
    return rows


class FlightPathExporter:
    """Persist flight coordinates so the routes can be drawn on a map."""

    def export(self, flights: Sequence[Flight], destination: Path) -> Optional[Path]:
        """Write ``flights`` to ``destination``; nothing is written without flights."""

        if not flights:
            LOGGER.info("No flights to export for %s; skipping", destination)
            return None

        suffix = destination.suffix.lower().lstrip(".")
        if suffix not in SUPPORTED_FORMATS:
            raise ValueError(f"Unsupported export format '{destination.suffix}'")

        frame = pd.DataFrame(flight_rows(flights))
        destination.parent.mkdir(parents=True, exist_ok=True)
        try:
            if suffix == "xlsx":
                frame.to_excel(destination, header=False, index=False, sheet_name="sheet1")
            else:
                frame.to_csv(destination, header=False, index=False)
        except OSError:
            LOGGER.exception("Failed to write flight paths to %s", destination)
            raise
        LOGGER.info("Exported %s flights to %s", len(flights), destination)
        return destination

    def export_survey(
        self,
        survey: DockSurvey,
        output_directory: Path,
        *,
        fmt: str = "xlsx",
    ) -> Dict[Scenario, Path]:
        """Export both scenarios, returning the files actually written."""

        written: Dict[Scenario, Path] = {}
        for scenario, result in survey.by_scenario().items():
            destination = output_directory / f"{OUTPUT_STEMS[scenario]}.{fmt}"
            path = self.export(result.flights, destination)
            if path is not None:
                written[scenario] = path
        return written
