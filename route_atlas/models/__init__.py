"""
Data models for the route_atlas library.

This package contains the immutable entities (airports, airlines, routes),
the route index and filter state, the queryable collections used to query
them, and the great circle geometry.
"""

from .navpoint import NavPoint, interpolate_great_circle, unwrap_longitudes, haversine_distance, central_angle
from .airport import Airport
from .airline import Airline
from .route import Route
from .route_index import RouteIndex
from .filters import FilterState, route_matches, filter_aircraft_types
from .queryable_collection import QueryableCollection
from .airport_collection import AirportCollection, AirlineCollection
from .route_collection import RouteCollection
from .route_network_model import RouteNetworkModel
from .validation import ValidationResult, DataIssue, ModelValidationError

__all__ = [
    # Geometry
    'NavPoint',
    'interpolate_great_circle',
    'unwrap_longitudes',
    'haversine_distance',
    'central_angle',
    # Core models
    'Airport',
    'Airline',
    'Route',
    'RouteIndex',
    'FilterState',
    'route_matches',
    'filter_aircraft_types',
    'RouteNetworkModel',
    # Queryable collections
    'QueryableCollection',
    'AirportCollection',
    'AirlineCollection',
    'RouteCollection',
    # Validation
    'ValidationResult',
    'DataIssue',
    'ModelValidationError',
]
