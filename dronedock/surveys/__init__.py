"""Mini README: Survey evaluation package.

Groups the statistics aggregator that summarises a dock's flights and the
engine that runs both dock scenarios end to end. The ``engine`` module holds
the primary public API.
"""

from .engine import DockLocationEngine, DockSurvey
from .statistics import ERROR_MESSAGE, Scenario, SurveyAggregator, SurveyResult

__all__ = [
    "DockLocationEngine",
    "DockSurvey",
    "ERROR_MESSAGE",
    "Scenario",
    "SurveyAggregator",
    "SurveyResult",
]
