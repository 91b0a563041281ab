"""Mini README: GeoJSON helper utilities for survey results.

Converts scenario results into FeatureCollections so web map clients can draw
the dock and every flight without knowing the internal data model. The helper
stays free of web framework imports so it can be reused from scripts and
tests.
"""

from __future__ import annotations

from typing import Dict, List

from ..geometry import Point
from ..surveys.statistics import SurveyResult


def _position(point: Point) -> List[float]:
    return [point.longitude, point.latitude]


def flights_to_geojson(result: SurveyResult) -> Dict:
    """Return a FeatureCollection with the dock and one LineString per flight."""

    features: List[Dict] = []
    if result.dock is not None:
        features.append(
            {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": _position(result.dock)},
                "properties": {"kind": "dock", "role": result.dock.role.value},
            }
        )
    for flight_number, flight in enumerate(result.flights, start=1):
        features.append(
            {
                "type": "Feature",
                "geometry": {
                    "type": "LineString",
                    "coordinates": [_position(point) for point in flight],
                },
                "properties": {
                    "kind": "flight",
                    "flight": flight_number,
                    "fields": len(flight) - 2,
                },
            }
        )
    return {"type": "FeatureCollection", "features": features}
