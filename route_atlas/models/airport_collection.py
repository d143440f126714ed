"""
Specialized queryable collections for Airport and Airline objects.
"""

from typing import Iterable, TYPE_CHECKING

from .queryable_collection import QueryableCollection

if TYPE_CHECKING:
    from .airport import Airport
    from .airline import Airline


class AirportCollection(QueryableCollection['Airport']):
    """
    Specialized collection for querying airports.

    Examples:
        airports.search('lon').all()
        airports.by_country('GB').count()
    """

    def by_country(self, country_code: str) -> 'AirportCollection':
        """
        Filter airports by ISO country code.

        Args:
            country_code: ISO country code (e.g., "GB", "FR", "US")
        """
        return AirportCollection([
            a for a in self._items
            if a.country == country_code
        ])

    def by_codes(self, codes: Iterable[str]) -> 'AirportCollection':
        code_set = set(codes)
        return AirportCollection([a for a in self._items if a.iata in code_set])

    def search(self, query: str, limit: int = 10) -> 'AirportCollection':
        """
        Case-insensitive substring search on IATA code, name and city.

        Args:
            query: Text to look for; an empty query matches nothing
            limit: Maximum number of results

        Examples:
            airports.search('heath').first()
        """
        if not query:
            return AirportCollection([])
        q = query.lower()
        return AirportCollection([
            a for a in self._items
            if q in a.iata.lower() or q in a.name.lower() or q in a.city.lower()
        ][:limit])


class AirlineCollection(QueryableCollection['Airline']):
    """Specialized collection for querying airlines."""

    def by_codes(self, codes: Iterable[str]) -> 'AirlineCollection':
        code_set = set(codes)
        return AirlineCollection([a for a in self._items if a.iata in code_set])

    def search(self, query: str) -> 'AirlineCollection':
        """Case-insensitive substring search on IATA code and name; empty query keeps everything."""
        if not query:
            return AirlineCollection(self._items)
        q = query.lower()
        return AirlineCollection([
            a for a in self._items
            if q in a.iata.lower() or q in a.name.lower()
        ])

    def sorted_by_name(self) -> 'AirlineCollection':
        return AirlineCollection(sorted(self._items, key=lambda a: a.name))
