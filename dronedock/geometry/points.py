"""Mini README: Location value types for fields and buildings.

Structure:
    * LocationRole - enumeration of the roles a surveyed location can carry.
    * Point - frozen dataclass keyed by latitude, longitude and role.
    * partition_by_role - split mixed points into field and building lists.

Points are hashable value objects so they can key the ordered "remaining
fields" mappings used by the route planner. Two points are equal only when
coordinates and role all match.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class LocationRole(str, Enum):
    """Roles a location can take within a survey."""

    FIELD = "field"
    BUILDING = "building"
    UNIDENTIFIED = "unidentified"

    @classmethod
    def from_label(cls, label: Optional[object]) -> "LocationRole":
        """Match a free-text label, ignoring case and surrounding whitespace."""

        if label is None:
            return cls.UNIDENTIFIED
        normalised = str(label).strip().lower()
        if normalised == cls.FIELD.value:
            return cls.FIELD
        if normalised == cls.BUILDING.value:
            return cls.BUILDING
        return cls.UNIDENTIFIED


@dataclass(frozen=True, slots=True)
class Point:
    """Geographic location in decimal degrees tagged with its role."""

    latitude: float
    longitude: float
    role: LocationRole

    @property
    def is_identified(self) -> bool:
        return self.role is not LocationRole.UNIDENTIFIED

    def as_dict(self) -> dict:
        """Export the point with JSON friendly values."""

        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "role": self.role.value,
        }

    def __str__(self) -> str:
        return f"Point(latitude={self.latitude}, longitude={self.longitude}, role={self.role.value})"


# Returned by the dock selector when no valid dock exists.
UNIDENTIFIED_POINT = Point(0.0, 0.0, LocationRole.UNIDENTIFIED)


def partition_by_role(points: Iterable[Point]) -> Tuple[List[Point], List[Point]]:
    """Split points into (fields, buildings), dropping unidentified entries."""

    fields: List[Point] = []
    buildings: List[Point] = []
    dropped = 0
    for point in points:
        if point.role is LocationRole.FIELD:
            fields.append(point)
        elif point.role is LocationRole.BUILDING:
            buildings.append(point)
        else:
            dropped += 1
    if dropped:
        LOGGER.warning("Dropped %s points with an unidentified role", dropped)
    return fields, buildings
