"""Mini README: Reportable statistics for a planned survey.

Structure:
    * Scenario - the two dock placements evaluated per run.
    * SurveyResult - immutable summary of one scenario (or its error state).
    * SurveyAggregator - derives totals, charging time and building distance.

Totals are recomputed from the flights themselves: flight minutes add every
leg flown plus the per-field survey time, and charging time is counted only
between consecutive flights, never before the first or after the last.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Sequence, Tuple

from ..geometry import Point, distance_meters, seconds_to_minutes
from ..logging_utils import get_logger
from ..route_planning import Flight, FlightConstraints

LOGGER = get_logger(__name__)

ERROR_MESSAGE = "There is no input or the input is invalid!"


class Scenario(str, Enum):
    """Dock placements compared by the engine."""

    FIELD_START = "field_start"
    BUILDING_START = "building_start"

    @property
    def title(self) -> str:
        return "dock on a field" if self is Scenario.FIELD_START else "dock on a building"


@dataclass(frozen=True, slots=True)
class SurveyResult:
    """Statistics for one scenario; ``error`` is set when no survey is possible."""

    error: Optional[str]
    dock: Optional[Point]
    target_field_count: int = 0
    surveyed_field_count: int = 0
    total_flight_minutes: float = 0.0
    total_flight_and_charging_minutes: float = 0.0
    nearest_building_meters: float = 0.0
    flights: Tuple[Flight, ...] = field(default_factory=tuple)

    @classmethod
    def error_sentinel(cls) -> "SurveyResult":
        """Fixed result reported when there is nothing valid to survey."""

        return cls(error=ERROR_MESSAGE, dock=None)

    @property
    def is_error(self) -> bool:
        return bool(self.error)

    @property
    def unsurveyed_field_count(self) -> int:
        return self.target_field_count - self.surveyed_field_count

    def as_dict(self) -> Dict[str, object]:
        """Export the result with JSON serialisable values."""

        nearest = self.nearest_building_meters
        return {
            "error": self.error,
            "dock": self.dock.as_dict() if self.dock else None,
            "target_field_count": self.target_field_count,
            "surveyed_field_count": self.surveyed_field_count,
            "total_flight_minutes": self.total_flight_minutes,
            "total_flight_and_charging_minutes": self.total_flight_and_charging_minutes,
            "nearest_building_meters": nearest if math.isfinite(nearest) else None,
            "flights": [[point.as_dict() for point in flight] for flight in self.flights],
        }


def nearest_building_meters(dock: Point, buildings: Sequence[Point]) -> float:
    """Distance from ``dock`` to the closest building, ``inf`` when there are none."""

    return min((distance_meters(dock, building) for building in buildings), default=math.inf)


class SurveyAggregator:
    """Turn a dock and its flights into a ``SurveyResult``."""

    def __init__(self, constraints: Optional[FlightConstraints] = None) -> None:
        self.constraints = constraints or FlightConstraints()

    def flight_minutes(self, flights: Sequence[Flight]) -> float:
        """Minutes spent flying legs plus surveying every visited field."""

        leg_seconds = 0.0
        for flight in flights:
            for origin, destination in zip(flight, flight[1:]):
                leg_seconds += self.constraints.leg_seconds(origin, destination)
        surveyed = sum(len(flight) - 2 for flight in flights)
        return seconds_to_minutes(leg_seconds) + surveyed * self.constraints.survey_minutes_per_field

    def charging_minutes(self, flight_count: int) -> float:
        return max(0, flight_count - 1) * self.constraints.charge_minutes_between_flights

    def summarise(
        self,
        scenario: Scenario,
        dock: Point,
        flights: Sequence[Flight],
        fields: Sequence[Point],
        buildings: Sequence[Point],
    ) -> SurveyResult:
        """Build the scenario result, degrading to the error sentinel when invalid."""

        if not fields or not dock.is_identified:
            LOGGER.info("Scenario %s has no valid dock; reporting error", scenario.value)
            return SurveyResult.error_sentinel()
        if scenario is Scenario.BUILDING_START and not buildings:
            LOGGER.info("Scenario %s has no buildings; reporting error", scenario.value)
            return SurveyResult.error_sentinel()

        total_minutes = self.flight_minutes(flights)
        if scenario is Scenario.FIELD_START:
            nearest = nearest_building_meters(dock, buildings)
        else:
            nearest = 0.0

        return SurveyResult(
            error=None,
            dock=dock,
            target_field_count=len(fields),
            surveyed_field_count=sum(len(flight) - 2 for flight in flights),
            total_flight_minutes=total_minutes,
            total_flight_and_charging_minutes=total_minutes + self.charging_minutes(len(flights)),
            nearest_building_meters=nearest,
            flights=tuple(flights),
        )
