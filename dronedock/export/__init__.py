"""Mini README: Export utilities for planned surveys.

Exposes the exporter that writes flight coordinates into spreadsheet or CSV
files for external map visualisation.
"""

from .flight_path_exporter import SUPPORTED_FORMATS, FlightPathExporter, flight_rows

__all__ = ["FlightPathExporter", "SUPPORTED_FORMATS", "flight_rows"]
