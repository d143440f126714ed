"""
Data sources for the route_atlas library.

This package contains the classes that read a dataset from disk and build
a RouteNetworkModel from it.
"""

from .base import SourceInterface
from .openflights import OpenFlightsSource
from .json_dataset import JsonDatasetSource

__all__ = [
    'SourceInterface',
    'OpenFlightsSource',
    'JsonDatasetSource',
]
