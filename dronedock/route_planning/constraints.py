"""Mini README: Battery and timing limits applied to every flight.

Structure:
    * FlightConstraints - frozen value bundling speed, budget, survey and
      charging durations, with helpers converting legs into minutes.

A single instance is passed explicitly to the planner, the dock selector and
the statistics aggregator so alternative drones can be modelled without any
module-level state.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..geometry import Point, flight_seconds, seconds_to_minutes


@dataclass(frozen=True, slots=True)
class FlightConstraints:
    """Operational limits of the survey drone."""

    speed_mps: float = 15.0
    max_flight_minutes: float = 40.0
    survey_minutes_per_field: float = 10.0
    charge_minutes_between_flights: float = 35.0

    def __post_init__(self) -> None:
        if self.speed_mps <= 0:
            raise ValueError("Speed must be positive")
        if self.max_flight_minutes <= 0:
            raise ValueError("Maximum flight time must be positive")
        if self.survey_minutes_per_field < 0 or self.charge_minutes_between_flights < 0:
            raise ValueError("Survey and charging durations cannot be negative")

    def leg_seconds(self, origin: Point, destination: Point) -> float:
        return flight_seconds(origin, destination, self.speed_mps)

    def leg_minutes(self, origin: Point, destination: Point) -> float:
        """Minutes of flight between two points at the configured speed."""

        return seconds_to_minutes(self.leg_seconds(origin, destination))

    def can_survey_and_return(
        self,
        seconds_to_next: float,
        seconds_next_to_dock: float,
        elapsed_minutes: float,
    ) -> bool:
        """Check the next field fits the budget including the flight home."""

        return (
            seconds_to_minutes(seconds_to_next + seconds_next_to_dock)
            + elapsed_minutes
            + self.survey_minutes_per_field
            <= self.max_flight_minutes
        )
