"""
Queryable collection classes for fluent, composable queries.

This module provides a lightweight alternative to query builders that leverages
Python's functional programming capabilities for clean, chainable queries on
in-memory data.
"""

from typing import TypeVar, Generic, Callable, List, Dict, Optional, Any, Union
from collections.abc import Iterable

T = TypeVar('T')


class QueryableCollection(Generic[T]):
    """
    A lightweight, chainable collection for filtering and querying in-memory data.

    Supports method chaining, functional filtering, and convenient result
    transformations.

    Examples:
        # Basic filtering
        routes.filter(lambda r: len(r.operators) > 1).all()

        # Attribute matching
        routes.where(origin='JFK').all()

        # Chaining
        airports.where(country='US').order_by(lambda a: a.iata).take(10).all()

        # Grouping
        routes.group_by(lambda r: r.origin)
    """

    def __init__(self, items: Union[List[T], Iterable[T]]):
        """
        Initialize a queryable collection.

        Args:
            items: List or iterable of items to wrap
        """
        self._items: List[T] = list(items) if not isinstance(items, list) else items

    def filter(self, predicate: Callable[[T], bool]) -> 'QueryableCollection[T]':
        """
        Filter items using a predicate function.

        Args:
            predicate: Function that takes an item and returns True to include it

        Returns:
            New collection with filtered items

        Examples:
            # Routes with more than one operator
            routes.filter(lambda r: len(r.operators) > 1)
        """
        return self.__class__([item for item in self._items if predicate(item)])

    def where(self, **kwargs) -> 'QueryableCollection[T]':
        """
        Filter items using keyword arguments (attribute matching).
        All conditions must match (AND logic).

        Examples:
            airports.where(iata='LHR')
            routes.where(origin='JFK', destination='LHR')
        """
        def matches(item: T) -> bool:
            return all(
                getattr(item, key, None) == value
                for key, value in kwargs.items()
            )
        return self.filter(matches)

    def first(self) -> Optional[T]:
        """Return the first item or None if collection is empty."""
        return self._items[0] if self._items else None

    def all(self) -> List[T]:
        """Return all items as a list."""
        return self._items

    def count(self) -> int:
        return len(self._items)

    def exists(self) -> bool:
        return len(self._items) > 0

    def group_by(self, key_func: Callable[[T], str]) -> Dict[str, List[T]]:
        """
        Group items by a key function.

        Args:
            key_func: Function that returns a grouping key for each item

        Returns:
            Dictionary mapping keys to lists of items, in first-seen key order

        Examples:
            # Group airports by country
            by_country = airports.group_by(lambda a: a.country or 'unknown')
        """
        result: Dict[str, List[T]] = {}
        for item in self._items:
            key = key_func(item)
            if key not in result:
                result[key] = []
            result[key].append(item)
        return result

    def order_by(self, key_func: Callable[[T], Any], reverse: bool = False) -> 'QueryableCollection[T]':
        """
        Sort items by a key function.

        Examples:
            airlines.order_by(lambda a: a.name)
        """
        return self.__class__(sorted(self._items, key=key_func, reverse=reverse))

    def take(self, n: int) -> 'QueryableCollection[T]':
        """Take the first n items."""
        return self.__class__(self._items[:n])

    def map(self, transform: Callable[[T], Any]) -> 'QueryableCollection[Any]':
        """
        Transform each item using a function.

        Examples:
            # Extract IATA codes
            codes = airports.map(lambda a: a.iata)
        """
        return QueryableCollection([transform(item) for item in self._items])

    def to_dict(self, key_func: Callable[[T], Any]) -> Dict[Any, T]:
        """
        Convert to dictionary using key function.
        Raises ValueError if keys are not unique.

        Examples:
            # Create IATA -> Airport mapping
            airports_by_code = airports.to_dict(lambda a: a.iata)
        """
        result = {}
        for item in self._items:
            key = key_func(item)
            if key in result:
                raise ValueError(f"Duplicate key: {key}")
            result[key] = item
        return result

    # Make the collection behave like a list
    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self.__class__(self._items[index])
        return self._items[index]

    def __bool__(self):
        return len(self._items) > 0

    def __repr__(self):
        """
        Return string representation with preview of items.

        Shows class name, preview of first few items and total count.
        """
        class_name = self.__class__.__name__
        count = len(self._items)

        if count == 0:
            return f"{class_name}([])"

        preview_items = []
        for item in self._items[:3]:
            if hasattr(item, 'iata'):
                preview_items.append(repr(item.iata))
            elif hasattr(item, 'key'):
                preview_items.append(repr(item.key))
            else:
                preview_items.append(f"<{type(item).__name__}>")

        if count > 3:
            preview_items.append('...')

        preview = '[' + ', '.join(preview_items) + ']'
        return f"{class_name}({preview}, count={count})"
