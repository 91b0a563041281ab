"""Mini README: Interactive interfaces (web/console) for the dock planner.

Exports the FastAPI application factory and the plain-text report renderer
used by the command line entry point.
"""

from .report import format_survey_report
from .web_app import create_application

__all__ = ["create_application", "format_survey_report"]
