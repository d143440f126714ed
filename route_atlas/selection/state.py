"""Selection state: the chosen airport plus the active filters."""

from dataclasses import dataclass, field, replace
from typing import Optional

from ..models.filters import FilterState


@dataclass(frozen=True)
class SelectionState:
    """
    What the user is looking at.

    ``airport`` is an IATA code or None (no airport selected). Transitions
    return new states; a state is never changed in place.

    Examples:
        state = SelectionState()
        state = state.select_airport('JFK')
        state = state.with_filters(state.filters.toggle_airline('AA'))
        state = state.reset()
    """

    airport: Optional[str] = None
    filters: FilterState = field(default_factory=FilterState)

    @property
    def has_airport(self) -> bool:
        return self.airport is not None

    def select_airport(self, airport_code: Optional[str]) -> 'SelectionState':
        return replace(self, airport=airport_code)

    def clear_airport(self) -> 'SelectionState':
        return replace(self, airport=None)

    def with_filters(self, filters: FilterState) -> 'SelectionState':
        return replace(self, filters=filters)

    def reset(self) -> 'SelectionState':
        """No airport and no filters, as at session start."""
        return SelectionState()
