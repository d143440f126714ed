"""
Specialized queryable collection for Route objects.

Provides domain-specific filtering methods for common route queries
while maintaining the composability of the base QueryableCollection.
"""

from typing import Iterable, List, TYPE_CHECKING

from .queryable_collection import QueryableCollection

if TYPE_CHECKING:
    from .route import Route
    from .filters import FilterState


class RouteCollection(QueryableCollection['Route']):
    """
    Specialized collection for querying routes.

    Examples:
        routes.by_origin('JFK').by_airlines(['AA']).all()
        routes.matching(filters).count()
        routes.aircraft_types()
    """

    def by_origin(self, airport_code: str) -> 'RouteCollection':
        return RouteCollection([r for r in self._items if r.origin == airport_code])

    def by_destination(self, airport_code: str) -> 'RouteCollection':
        return RouteCollection([r for r in self._items if r.destination == airport_code])

    def by_airlines(self, airline_codes: Iterable[str], include_codeshares: bool = False) -> 'RouteCollection':
        """
        Routes operated by any of the airlines, optionally counting codeshares.

        Examples:
            # Everything American Airlines sells from JFK
            routes.by_origin('JFK').by_airlines(['AA'], include_codeshares=True)
        """
        codes = set(airline_codes)
        return RouteCollection([
            r for r in self._items
            if not codes.isdisjoint(r.operators)
            or (include_codeshares and not codes.isdisjoint(r.codeshares))
        ])

    def by_aircraft(self, aircraft_codes: Iterable[str]) -> 'RouteCollection':
        codes = set(aircraft_codes)
        return RouteCollection([r for r in self._items if not codes.isdisjoint(r.aircraft)])

    def matching(self, filters: 'FilterState') -> 'RouteCollection':
        """Routes that pass the given filter state."""
        return RouteCollection([r for r in self._items if filters.matches(r)])

    def airline_codes(self, include_codeshares: bool = False) -> List[str]:
        """Distinct airline codes on these routes, first-seen order."""
        codes = {}
        for route in self._items:
            for code in route.operators:
                codes[code] = None
            if include_codeshares:
                for code in route.codeshares:
                    codes[code] = None
        return list(codes)

    def aircraft_types(self) -> List[str]:
        """Distinct aircraft codes on these routes, sorted."""
        types = set()
        for route in self._items:
            types.update(route.aircraft)
        return sorted(types)
