"""
Route filter state.

FilterState is an immutable value: every user action builds a new instance,
so consumers can detect changes with a plain equality check.
"""

from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable, List

from .route import Route


def _toggled(values: FrozenSet[str], code: str) -> FrozenSet[str]:
    if code in values:
        return values - {code}
    return values | {code}


@dataclass(frozen=True)
class FilterState:
    """
    Active route filters.

    Empty ``airlines`` or ``aircraft`` means no restriction on that criterion.

    Examples:
        filters = FilterState()
        filters = filters.toggle_airline('AA').toggle_codeshares()
        filters.matches(route)
    """

    airlines: FrozenSet[str] = field(default_factory=frozenset)
    aircraft: FrozenSet[str] = field(default_factory=frozenset)
    include_codeshares: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'airlines', frozenset(self.airlines))
        object.__setattr__(self, 'aircraft', frozenset(self.aircraft))

    @property
    def is_active(self) -> bool:
        """True when an airline or aircraft restriction is set."""
        return bool(self.airlines or self.aircraft)

    def matches_airline(self, route: Route) -> bool:
        """
        Airline criterion.

        An operator match is always enough; codeshares only add matches when
        ``include_codeshares`` is set.
        """
        if not self.airlines:
            return True
        if not self.airlines.isdisjoint(route.operators):
            return True
        return self.include_codeshares and not self.airlines.isdisjoint(route.codeshares)

    def matches_aircraft(self, route: Route) -> bool:
        if not self.aircraft:
            return True
        return not self.aircraft.isdisjoint(route.aircraft)

    def matches(self, route: Route) -> bool:
        """True if the route passes both the airline and the aircraft criteria."""
        return self.matches_airline(route) and self.matches_aircraft(route)

    # Transitions, each returns a new FilterState

    def toggle_airline(self, code: str) -> 'FilterState':
        return replace(self, airlines=_toggled(self.airlines, code))

    def toggle_aircraft(self, code: str) -> 'FilterState':
        return replace(self, aircraft=_toggled(self.aircraft, code))

    def toggle_codeshares(self) -> 'FilterState':
        return replace(self, include_codeshares=not self.include_codeshares)

    def with_airlines(self, codes: Iterable[str]) -> 'FilterState':
        return replace(self, airlines=frozenset(codes))

    def with_aircraft(self, codes: Iterable[str]) -> 'FilterState':
        return replace(self, aircraft=frozenset(codes))

    def cleared(self) -> 'FilterState':
        """Filter state with no restriction, as at session start."""
        return FilterState()


def route_matches(route: Route, filters: FilterState) -> bool:
    """Return True if ``route`` should be displayed under ``filters``."""
    return filters.matches(route)


def filter_aircraft_types(aircraft_types: Iterable[str], query: str) -> List[str]:
    """Case-insensitive substring search over aircraft codes; an empty query keeps everything."""
    q = query.strip().lower()
    return [code for code in aircraft_types if q in code.lower()]
