"""Mini README: Route planning subsystem for dock selection and flight design.

Exports the flight constraint value, the greedy ``RoutePlanner`` that turns a
dock and a field list into battery-sized flights, and the ``DockSelector``
that searches all candidate docks using that planner.
"""

from .constraints import FlightConstraints
from .dock_selector import DockCandidate, DockSelector, SelectionPolicy
from .planner import Flight, FlightPlan, RoutePlanner

__all__ = [
    "DockCandidate",
    "DockSelector",
    "Flight",
    "FlightConstraints",
    "FlightPlan",
    "RoutePlanner",
    "SelectionPolicy",
]
