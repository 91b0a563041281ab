"""Mini README: Core package initializer for the drone dock planner.

The package chooses the dock location from which a single battery-limited
drone can survey the most fields in the least time, and builds the flights
flown from it. The convenience imports below expose the engine entry point
and the logger factory without callers needing the module layout.
"""

from .logging_utils import get_logger
from .surveys.engine import DockLocationEngine, DockSurvey

__all__ = ["DockLocationEngine", "DockSurvey", "get_logger"]
