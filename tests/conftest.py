"""Mini README: Shared fixtures for dock planner tests.

Structure:
    * make_fields - factory building a north-south line of fields.
    * reachable_fields / nearby_buildings - one compact cluster plus buildings.
    * split_fields - two clusters about 111 km apart, out of each other's range.

Fields are spaced 0.001 degrees of latitude apart (roughly 111 m, or about
0.12 minutes of flight at 15 m/s), so flight contents are easy to reason
about by hand.
"""

from __future__ import annotations

from typing import Callable, List

import pytest

from dronedock.geometry import LocationRole, Point


def _line(latitude: float, longitude: float, count: int, role: LocationRole) -> List[Point]:
    return [Point(round(latitude + index * 0.001, 6), longitude, role) for index in range(count)]


@pytest.fixture
def make_fields() -> Callable[..., List[Point]]:
    def factory(latitude: float = 48.0, longitude: float = 8.0, count: int = 7) -> List[Point]:
        return _line(latitude, longitude, count, LocationRole.FIELD)

    return factory


@pytest.fixture
def reachable_fields(make_fields) -> List[Point]:
    return make_fields(48.0, 8.0, 7)


@pytest.fixture
def nearby_buildings() -> List[Point]:
    return [
        Point(48.0035, 8.002, LocationRole.BUILDING),
        Point(48.01, 8.01, LocationRole.BUILDING),
        Point(48.0, 7.99, LocationRole.BUILDING),
    ]


@pytest.fixture
def small_cluster(make_fields) -> List[Point]:
    return make_fields(48.0, 8.0, 4)


@pytest.fixture
def large_cluster(make_fields) -> List[Point]:
    return make_fields(49.0, 8.0, 6)
