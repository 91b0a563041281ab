"""Mini README: Utility helper functions for the dock planner.

Currently exports the GeoJSON renderer used by the web interface to draw
docks and flights on a map.
"""

from .geojson import flights_to_geojson

__all__ = ["flights_to_geojson"]
