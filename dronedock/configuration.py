"""Mini README: Centralised configuration models and helpers for the dock planner.

Structure:
    * DockSettings - Pydantic settings model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``DRONEDOCK_`` prefixed environment
    variables (or a ``.env`` file). Besides file locations and the web
    interface binding, the settings carry the drone's flight limits, exposed
    to the planning code as a single ``FlightConstraints`` value via
    ``DockSettings.flight_constraints``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .route_planning import FlightConstraints, SelectionPolicy


class DockSettings(BaseSettings):
    """Runtime configuration for the dock planner."""

    model_config = SettingsConfigDict(
        env_prefix="DRONEDOCK_",
        env_file=".env",
        case_sensitive=False,
    )

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    log_level: str = Field("INFO", description="Root logging level name.")
    input_path: Path = Field(
        Path("data/input_coordinates_fields_and_buildings.xlsx"),
        description="Spreadsheet listing field and building coordinates.",
    )
    output_directory: Path = Field(
        Path("output"),
        description="Directory receiving exported flight path coordinates.",
    )
    export_format: str = Field(
        "xlsx",
        description="File format of exported flight paths ('xlsx' or 'csv').",
    )
    speed_mps: float = Field(15.0, gt=0, description="Drone ground speed in metres per second.")
    max_flight_minutes: float = Field(
        40.0, gt=0, description="Battery budget per flight, including the return leg."
    )
    survey_minutes_per_field: float = Field(
        10.0, ge=0, description="Time spent surveying each field."
    )
    charge_minutes_between_flights: float = Field(
        35.0, ge=0, description="Recharge time between consecutive flights."
    )
    selection_policy: SelectionPolicy = Field(
        SelectionPolicy.INDEPENDENT,
        description="Rule used to compare candidate docks.",
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface for the HTTP service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the HTTP service exposes.",
        ge=1,
        le=65535,
    )

    @field_validator("input_path", "output_directory", mode="before")
    @classmethod
    def _expand_path(cls, value: Union[str, Path]) -> Path:
        """Expand user directories so ``~`` works in environment variables."""

        return Path(value).expanduser()

    @field_validator("export_format")
    @classmethod
    def _check_format(cls, value: str) -> str:
        normalised = value.strip().lower().lstrip(".")
        if normalised not in {"xlsx", "csv"}:
            raise ValueError("export_format must be 'xlsx' or 'csv'")
        return normalised

    def flight_constraints(self) -> FlightConstraints:
        """Bundle the flight limits for the planning components."""

        return FlightConstraints(
            speed_mps=self.speed_mps,
            max_flight_minutes=self.max_flight_minutes,
            survey_minutes_per_field=self.survey_minutes_per_field,
            charge_minutes_between_flights=self.charge_minutes_between_flights,
        )


@lru_cache()
def get_settings() -> DockSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return DockSettings()
