"""
Flight route network engine.

This package computes what a route map should draw: continuous great circle
paths between airports, and the routes selected by an airport and a set of
airline and aircraft filters.

The main public API includes:
- RouteNetworkModel: Airports, airlines, routes and the route index
- FilterState / SelectionState: Immutable user selection values
- SelectionResolver: Routes to draw for a selection, with paths and colors
- interpolate_great_circle / unwrap_longitudes: Path geometry
"""

from .models import (
    Airport,
    Airline,
    Route,
    RouteIndex,
    FilterState,
    RouteNetworkModel,
    NavPoint,
    interpolate_great_circle,
    unwrap_longitudes,
)
from .selection import SelectionState, SelectionResolver

__version__ = '0.1.0'
__all__ = [
    'Airport',
    'Airline',
    'Route',
    'RouteIndex',
    'FilterState',
    'RouteNetworkModel',
    'NavPoint',
    'interpolate_great_circle',
    'unwrap_longitudes',
    'SelectionState',
    'SelectionResolver',
]
