"""Mini README: Exhaustive search for the best dock location.

Structure:
    * SelectionPolicy - rule deciding when a candidate displaces the best dock.
    * DockCandidate - evaluation record for one prospective dock.
    * DockSelector - plans from every candidate and keeps the winner.

Every candidate is evaluated by planning a full survey from it with
``RoutePlanner``. The default ``INDEPENDENT`` policy replaces the running
best whenever a candidate reaches more fields *or* needs fewer minutes, the
two tests applied separately. This can favour a dock that covers fewer
fields but flies less. ``LEXICOGRAPHIC`` compares minutes only between
candidates reaching the same number of fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from ..geometry import UNIDENTIFIED_POINT, Point
from ..logging_utils import get_logger
from .constraints import FlightConstraints
from .planner import RoutePlanner

LOGGER = get_logger(__name__)


class SelectionPolicy(str, Enum):
    """Replacement rules for the running best dock."""

    INDEPENDENT = "independent"
    LEXICOGRAPHIC = "lexicographic"

    def prefers(
        self,
        reached: int,
        minutes: float,
        best_reached: int,
        best_minutes: float,
    ) -> bool:
        """Return ``True`` when the candidate should replace the current best."""

        if self is SelectionPolicy.LEXICOGRAPHIC:
            return reached > best_reached or (
                reached == best_reached and minutes < best_minutes
            )
        return reached > best_reached or minutes < best_minutes


@dataclass(frozen=True, slots=True)
class DockCandidate:
    """Outcome of planning a survey from a prospective dock."""

    dock: Point
    reached_count: int
    total_minutes: float


class DockSelector:
    """Pick the dock whose survey plan wins under the configured policy."""

    def __init__(
        self,
        constraints: Optional[FlightConstraints] = None,
        *,
        policy: SelectionPolicy = SelectionPolicy.INDEPENDENT,
    ) -> None:
        self.planner = RoutePlanner(constraints)
        self.policy = SelectionPolicy(policy)

    def evaluate(self, candidate: Point, fields: Sequence[Point]) -> DockCandidate:
        """Plan a survey from ``candidate`` and summarise its coverage and time."""

        plan = self.planner.plan(candidate, fields)
        return DockCandidate(
            dock=candidate,
            reached_count=plan.surveyed_count,
            total_minutes=plan.total_minutes,
        )

    def rank(self, fields: Sequence[Point], candidates: Sequence[Point]) -> List[DockCandidate]:
        """Evaluate every candidate in input order."""

        return [self.evaluate(candidate, fields) for candidate in candidates]

    def select(self, fields: Sequence[Point], candidates: Sequence[Point]) -> Point:
        """Return the winning dock, or ``UNIDENTIFIED_POINT`` if none exists."""

        if not fields or not candidates:
            LOGGER.info(
                "No dock can be selected (fields=%s candidates=%s)",
                len(fields),
                len(candidates),
            )
            return UNIDENTIFIED_POINT

        best = UNIDENTIFIED_POINT
        best_reached = 0
        best_minutes = float("inf")
        for evaluation in self.rank(fields, candidates):
            LOGGER.debug(
                "Candidate %s reaches %s fields in %.2f minutes",
                evaluation.dock,
                evaluation.reached_count,
                evaluation.total_minutes,
            )
            if self.policy.prefers(
                evaluation.reached_count,
                evaluation.total_minutes,
                best_reached,
                best_minutes,
            ):
                best = evaluation.dock
                best_reached = evaluation.reached_count
                best_minutes = evaluation.total_minutes

        LOGGER.info(
            "Selected %s dock %s reaching %s/%s fields in %.2f minutes",
            best.role.value,
            best,
            best_reached,
            len(fields),
            best_minutes,
        )
        return best
