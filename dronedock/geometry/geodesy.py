"""Mini README: Great-circle distance and flight time helpers.

Distances use the haversine formula on a spherical Earth (radius 6371 km).
Results agree with reference geodesic calculators to within a few metres at
the tens-of-kilometres ranges a survey drone covers; the spherical model
drifts further at continental distances.
"""

from __future__ import annotations

import math

from .points import Point

EARTH_RADIUS_KM = 6371.0
SPEED_MPS = 15.0


def distance_meters(first: Point, second: Point) -> float:
    """Return the haversine distance in metres between two points."""

    d_lat = math.radians(first.latitude - second.latitude)
    d_lon = math.radians(first.longitude - second.longitude)
    lat1 = math.radians(first.latitude)
    lat2 = math.radians(second.latitude)

    a = math.sin(d_lat / 2) ** 2 + math.sin(d_lon / 2) ** 2 * math.cos(lat1) * math.cos(lat2)
    # rounding can push a just past 1 for antipodal points
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c * 1000


def flight_seconds(first: Point, second: Point, speed_mps: float = SPEED_MPS) -> float:
    """Seconds needed to fly between two points at a constant ground speed."""

    return distance_meters(first, second) / speed_mps


def seconds_to_minutes(seconds: float) -> float:
    return seconds / 60
