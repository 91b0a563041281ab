"""Mini README: Budget-constrained flight construction from a fixed dock.

Structure:
    * Flight - type alias for an ordered tuple of points (dock ... dock).
    * FlightPlan - dataclass aggregating flights and their elapsed minutes.
    * RoutePlanner - greedy nearest-unvisited planner honouring the flight budget.

Each flight leaves the dock, repeatedly hops to the closest field not yet
surveyed while the remaining battery still covers surveying it and flying
home, then returns to the dock. Flights are generated until one of them
cannot reach any new field. Remaining fields are stored in an insertion
ordered ``dict`` so equidistant candidates are always resolved the same way.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from ..geometry import Point, distance_meters, seconds_to_minutes
from ..logging_utils import get_logger
from .constraints import FlightConstraints

LOGGER = get_logger(__name__)

Flight = Tuple[Point, ...]


@dataclass(slots=True)
class FlightPlan:
    """Ordered flights flown from one dock plus summary counters."""

    dock: Point
    flights: List[Flight] = field(default_factory=list)
    total_minutes: float = 0.0
    surveyed_count: int = 0

    @property
    def surveyed_fields(self) -> List[Point]:
        """Fields in visitation order across all flights."""

        return [point for flight in self.flights for point in flight[1:-1]]


def _nearest_remaining(origin: Point, remaining: Dict[Point, None]) -> Optional[Point]:
    """Return the closest remaining field; the first one wins on ties."""

    nearest: Optional[Point] = None
    min_distance = float("inf")
    for candidate in remaining:
        distance = distance_meters(origin, candidate)
        if distance < min_distance:
            min_distance = distance
            nearest = candidate
    return nearest


class RoutePlanner:
    """Build sequential round-trip flights covering as many fields as possible."""

    def __init__(self, constraints: Optional[FlightConstraints] = None) -> None:
        self.constraints = constraints or FlightConstraints()
        LOGGER.debug("Initialised RoutePlanner with %s", self.constraints)

    def plan(self, dock: Point, fields: Iterable[Point]) -> FlightPlan:
        """Plan every flight needed to survey the reachable fields from ``dock``."""

        remaining: Dict[Point, None] = dict.fromkeys(fields)
        plan = FlightPlan(dock=dock)

        while True:
            flight, elapsed_minutes = self._build_flight(dock, remaining)
            plan.total_minutes += elapsed_minutes
            surveyed = len(flight) - 2
            if surveyed == 0:
                break
            plan.flights.append(flight)
            plan.surveyed_count += surveyed

        if remaining:
            LOGGER.debug(
                "%s fields unreachable from dock (%s, %s)",
                len(remaining),
                dock.latitude,
                dock.longitude,
            )
        return plan

    def _build_flight(self, dock: Point, remaining: Dict[Point, None]) -> Tuple[Flight, float]:
        """Fly one battery charge, removing surveyed fields from ``remaining``."""

        constraints = self.constraints
        elapsed_minutes = 0.0
        current = dock
        path: List[Point] = [dock]

        while True:
            candidate = _nearest_remaining(current, remaining)
            if candidate is not None:
                seconds_to_next = constraints.leg_seconds(current, candidate)
                seconds_next_to_dock = constraints.leg_seconds(candidate, dock)
                if constraints.can_survey_and_return(
                    seconds_to_next, seconds_next_to_dock, elapsed_minutes
                ):
                    elapsed_minutes += (
                        seconds_to_minutes(seconds_to_next) + constraints.survey_minutes_per_field
                    )
                    del remaining[candidate]
                    path.append(candidate)
                    current = candidate
                    continue
            elapsed_minutes += constraints.leg_minutes(current, dock)
            path.append(dock)
            return tuple(path), elapsed_minutes
