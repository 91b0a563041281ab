"""Mini README: Entry point CLI for the drone dock planner.

This script exposes a Typer CLI with two commands:

    * report - evaluate an input spreadsheet, print both dock scenarios and
      optionally export the flight coordinates for map visualisation.
    * serve - start the FastAPI service through uvicorn.

Defaults come from ``DRONEDOCK_`` environment variables (see
``dronedock.configuration``); command line options override them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
import uvicorn

from dronedock.configuration import get_settings
from dronedock.export import FlightPathExporter
from dronedock.interface import format_survey_report
from dronedock.logging_utils import configure_root_logger
from dronedock.surveys import DockLocationEngine

cli = typer.Typer(help="Choose the optimal drone dock and plan its survey flights.")


@cli.command()
def report(
    input_path: Optional[Path] = typer.Option(
        None, "--input", help="Spreadsheet with field and building coordinates."
    ),
    export: bool = typer.Option(
        True, help="Write flight path coordinates for map visualisation."
    ),
    output_dir: Optional[Path] = typer.Option(
        None, help="Directory receiving the exported coordinate files."
    ),
    export_format: Optional[str] = typer.Option(
        None, "--format", help="Export file format: xlsx or csv."
    ),
) -> None:
    """Evaluate both dock scenarios and print the statistics."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    effective_input = input_path or settings.input_path
    effective_output = output_dir or settings.output_directory
    effective_format = (export_format or settings.export_format).lower()
    if effective_format not in {"xlsx", "csv"}:
        raise typer.BadParameter("Format must be 'xlsx' or 'csv'", param_hint="--format")

    engine = DockLocationEngine(
        settings.flight_constraints(),
        policy=settings.selection_policy,
    )
    survey = engine.run_from_file(effective_input)
    typer.echo(format_survey_report(survey))

    if not export:
        return
    try:
        written = FlightPathExporter().export_survey(
            survey, effective_output, fmt=effective_format
        )
    except OSError as error:
        typer.echo(f"Could not write flight paths: {error}", err=True)
        raise typer.Exit(code=1) from error
    for path in written.values():
        typer.echo(f"Flight paths written to {path}")


@cli.command()
def serve(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # 0.0.0.0 and :: are bind-only addresses; browsers need a concrete host.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting dock planner on {effective_host}:{effective_port}.\n"
        f"API documentation at http://{browser_host}:{effective_port}/docs"
    )
    uvicorn.run(
        "dronedock.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


if __name__ == "__main__":
    cli()
