"""Mini README: End-to-end orchestration of the dock location search.

Structure:
    * DockSurvey - the ingested points and both scenario results of one run.
    * DockLocationEngine - selects docks, plans flights and aggregates results.

A run evaluates two independent scenarios: the dock placed on one of the
fields, and the dock placed on one of the buildings. Each scenario goes
through dock selection, flight planning from the chosen dock and statistics
aggregation. Runs share no state, so one engine can be reused across inputs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from ..geometry import Point
from ..ingestion import SpreadsheetIngestor
from ..logging_utils import get_logger
from ..route_planning import (
    DockSelector,
    FlightConstraints,
    RoutePlanner,
    SelectionPolicy,
)
from .statistics import Scenario, SurveyAggregator, SurveyResult

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class DockSurvey:
    """Outcome of a complete run over one set of fields and buildings."""

    fields: Tuple[Point, ...] = ()
    buildings: Tuple[Point, ...] = ()
    field_start: SurveyResult = field(default_factory=SurveyResult.error_sentinel)
    building_start: SurveyResult = field(default_factory=SurveyResult.error_sentinel)

    def results(self) -> List[SurveyResult]:
        """Both scenario results, field-start first."""

        return [self.field_start, self.building_start]

    def by_scenario(self) -> Dict[Scenario, SurveyResult]:
        return {
            Scenario.FIELD_START: self.field_start,
            Scenario.BUILDING_START: self.building_start,
        }

    def as_dict(self) -> Dict[str, object]:
        return {
            "fields": [point.as_dict() for point in self.fields],
            "buildings": [point.as_dict() for point in self.buildings],
            "scenarios": {
                scenario.value: result.as_dict()
                for scenario, result in self.by_scenario().items()
            },
        }


class DockLocationEngine:
    """Find the best field dock and building dock and plan their flights."""

    def __init__(
        self,
        constraints: Optional[FlightConstraints] = None,
        *,
        policy: SelectionPolicy = SelectionPolicy.INDEPENDENT,
        ingestor: Optional[SpreadsheetIngestor] = None,
    ) -> None:
        self.constraints = constraints or FlightConstraints()
        self.selector = DockSelector(self.constraints, policy=policy)
        self.planner = RoutePlanner(self.constraints)
        self.aggregator = SurveyAggregator(self.constraints)
        self.ingestor = ingestor or SpreadsheetIngestor()

    def run(self, fields: Sequence[Point], buildings: Sequence[Point]) -> DockSurvey:
        """Select both docks and evaluate the resulting surveys."""

        field_dock = self.selector.select(fields, fields)
        building_dock = self.selector.select(fields, buildings)
        return self.evaluate(
            fields,
            buildings,
            field_dock=field_dock,
            building_dock=building_dock,
        )

    def evaluate(
        self,
        fields: Sequence[Point],
        buildings: Sequence[Point],
        *,
        field_dock: Point,
        building_dock: Point,
    ) -> DockSurvey:
        """Plan and summarise both scenarios from the given docks."""

        fields = tuple(fields)
        buildings = tuple(buildings)
        return DockSurvey(
            fields=fields,
            buildings=buildings,
            field_start=self._survey(Scenario.FIELD_START, field_dock, fields, buildings),
            building_start=self._survey(
                Scenario.BUILDING_START, building_dock, fields, buildings
            ),
        )

    def run_from_file(self, path: Path) -> DockSurvey:
        """Ingest points from a spreadsheet and run both scenarios."""

        ingested = self.ingestor.ingest(path)
        return self.run(ingested.fields, ingested.buildings)

    def _survey(
        self,
        scenario: Scenario,
        dock: Point,
        fields: Sequence[Point],
        buildings: Sequence[Point],
    ) -> SurveyResult:
        flights = self.planner.plan(dock, fields).flights if dock.is_identified and fields else []
        result = self.aggregator.summarise(scenario, dock, flights, fields, buildings)
        if not result.is_error:
            LOGGER.info(
                "Scenario %s: dock %s surveys %s/%s fields in %s flights",
                scenario.value,
                dock,
                result.surveyed_field_count,
                result.target_field_count,
                len(result.flights),
            )
        return result
