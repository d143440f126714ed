"""
Index of routes by origin airport.

Built once from the full route list and read-only afterwards. A dataset
reload builds a new index.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Tuple

from .route import Route

logger = logging.getLogger(__name__)


class RouteIndex:
    """
    Mapping from airport IATA code to the routes departing from it.

    Examples:
        index = RouteIndex.build(routes)
        index.routes_from('JFK')     # tuple of Route, in input order
        index.routes_from('XXX')     # () for an airport without routes
        'JFK' in index
    """

    def __init__(self, routes_by_origin: Mapping[str, Tuple[Route, ...]]):
        self._routes_by_origin = MappingProxyType(dict(routes_by_origin))

    @classmethod
    def build(cls, routes: Iterable[Route]) -> 'RouteIndex':
        """
        Build the index in a single pass over ``routes``.

        Routes keep their input order within each origin bucket.
        """
        buckets: Dict[str, List[Route]] = {}
        for route in routes:
            if route.origin not in buckets:
                buckets[route.origin] = []
            buckets[route.origin].append(route)

        index = cls({origin: tuple(bucket) for origin, bucket in buckets.items()})
        logger.debug(f"Built route index: {index.route_count} routes from {len(index)} airports")
        return index

    def routes_from(self, airport_code: str) -> Tuple[Route, ...]:
        """Routes departing ``airport_code``; empty tuple when there are none."""
        return self._routes_by_origin.get(airport_code, ())

    def airports_with_routes(self) -> List[str]:
        """Codes of airports with at least one outbound route."""
        return list(self._routes_by_origin.keys())

    @property
    def route_count(self) -> int:
        return sum(len(bucket) for bucket in self._routes_by_origin.values())

    def as_dict(self) -> Dict[str, List[Route]]:
        """Plain dictionary copy, e.g. for serialisation."""
        return {origin: list(bucket) for origin, bucket in self._routes_by_origin.items()}

    def __contains__(self, airport_code: object) -> bool:
        return airport_code in self._routes_by_origin

    def __len__(self) -> int:
        return len(self._routes_by_origin)

    def __iter__(self) -> Iterator[str]:
        return iter(self._routes_by_origin)

    def __repr__(self):
        return f"RouteIndex(airports={len(self)}, routes={self.route_count})"
