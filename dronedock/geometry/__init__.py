"""Mini README: Geometry primitives shared by planning and reporting.

Exports the immutable ``Point`` value type, the ``LocationRole`` enumeration
and the haversine helpers used to turn coordinates into flight time.
"""

from .geodesy import (
    EARTH_RADIUS_KM,
    SPEED_MPS,
    distance_meters,
    flight_seconds,
    seconds_to_minutes,
)
from .points import UNIDENTIFIED_POINT, LocationRole, Point, partition_by_role

__all__ = [
    "EARTH_RADIUS_KM",
    "SPEED_MPS",
    "UNIDENTIFIED_POINT",
    "LocationRole",
    "Point",
    "distance_meters",
    "flight_seconds",
    "partition_by_role",
    "seconds_to_minutes",
]
