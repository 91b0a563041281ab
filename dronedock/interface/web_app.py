"""Mini README: FastAPI service exposing dock planning over HTTP.

Structure:
    * PointPayload / SurveyRequest - request schemas for ad-hoc point sets.
    * create_application - application factory wiring the routes.

The service either evaluates the configured input spreadsheet or a point set
posted as JSON. Responses carry both scenarios in the same shape as
``DockSurvey.as_dict``; the GeoJSON route returns map-ready features instead.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..configuration import DockSettings, get_settings
from ..geometry import LocationRole, Point, partition_by_role
from ..logging_utils import configure_root_logger, get_logger
from ..surveys import DockLocationEngine, DockSurvey
from ..utils.geojson import flights_to_geojson

LOGGER = get_logger(__name__)


class PointPayload(BaseModel):
    """Single location submitted by a client."""

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    role: str = Field(..., description="'field' or 'building'; other labels are ignored.")

    def to_point(self) -> Point:
        return Point(self.latitude, self.longitude, LocationRole.from_label(self.role))


class SurveyRequest(BaseModel):
    """Collection of locations to evaluate."""

    points: List[PointPayload] = Field(default_factory=list)


def create_application(settings: Optional[DockSettings] = None) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = settings or get_settings()
    configure_root_logger(settings.log_level)
    app = FastAPI(title="Drone Dock Planner", version="0.1.0")
    engine = DockLocationEngine(
        settings.flight_constraints(),
        policy=settings.selection_policy,
    )

    def _run_request(request: SurveyRequest) -> DockSurvey:
        fields, buildings = partition_by_role(payload.to_point() for payload in request.points)
        LOGGER.info(
            "Evaluating posted survey with %s fields and %s buildings",
            len(fields),
            len(buildings),
        )
        return engine.run(fields, buildings)

    @app.get("/health")
    async def health() -> Dict[str, str]:
        return {"status": "ok"}

    @app.get("/surveys")
    async def configured_survey() -> JSONResponse:
        """Evaluate the spreadsheet named by the configured input path."""

        LOGGER.info("Evaluating configured input %s", settings.input_path)
        survey = engine.run_from_file(settings.input_path)
        return JSONResponse(survey.as_dict())

    @app.post("/surveys")
    async def posted_survey(request: SurveyRequest) -> JSONResponse:
        """Evaluate the posted point set."""

        return JSONResponse(_run_request(request).as_dict())

    @app.post("/surveys/geojson")
    async def posted_survey_geojson(request: SurveyRequest) -> JSONResponse:
        """Evaluate the posted point set and return GeoJSON per scenario."""

        survey = _run_request(request)
        payload = {
            scenario.value: {
                "error": result.error,
                "geojson": flights_to_geojson(result),
            }
            for scenario, result in survey.by_scenario().items()
        }
        return JSONResponse(payload)

    return app
