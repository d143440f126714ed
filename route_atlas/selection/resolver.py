"""
Selection resolver.

Turns a SelectionState into the list of routes to draw, each with its
great circle path, color and labels. Every call recomputes from scratch.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .. import config
from ..models.airport import Airport
from ..models.navpoint import Coordinate, interpolate_great_circle, unwrap_longitudes
from ..models.route import Route
from ..models.route_network_model import RouteNetworkModel
from ..render.colors import airline_color, color_airline_for
from ..render.labels import operators_label, route_tooltip, airport_tooltip
from .state import SelectionState

logger = logging.getLogger(__name__)

MODE_EMPTY = 'empty'
MODE_AIRPORT = 'airport'
MODE_AIRLINE_NETWORK = 'airline_network'


@dataclass(frozen=True)
class ResolvedRoute:
    """A route ready to be drawn."""

    route: Route
    origin: Airport
    destination: Airport
    path: Tuple[Coordinate, ...]
    color_airline: str
    color: str
    label: str
    tooltip: str

    @property
    def destination_marker(self) -> Coordinate:
        """Where to draw the destination marker: the path end, possibly at an extended longitude."""
        return self.path[-1]

    @property
    def destination_tooltip(self) -> str:
        return airport_tooltip(self.destination, include_country=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'origin': self.route.origin,
            'destination': self.route.destination,
            'path': [list(p) for p in self.path],
            'color': self.color,
            'color_airline': self.color_airline,
            'label': self.label,
            'tooltip': self.tooltip,
            'destination_marker': list(self.destination_marker),
        }


@dataclass(frozen=True)
class ResolvedSelection:
    """Result of resolving a selection state."""

    state: SelectionState
    mode: str
    routes: Tuple[ResolvedRoute, ...] = field(default_factory=tuple)
    airline_names: Tuple[str, ...] = field(default_factory=tuple)  # names of the filtered airlines, in code order

    @property
    def view(self) -> Optional[Tuple[float, float, int]]:
        """
        Map view hint (latitude, longitude, zoom), None to leave the map alone.

        Only given when there is something drawn.
        """
        if not self.routes:
            return None
        if self.mode == MODE_AIRPORT:
            origin = self.routes[0].origin
            return (origin.latitude_deg, origin.longitude_deg, config.AIRPORT_ZOOM)
        return config.WORLD_VIEW

    def summary(self) -> str:
        if self.mode == MODE_AIRPORT:
            return f"Showing routes from {self.state.airport}"
        if self.mode == MODE_AIRLINE_NETWORK:
            airlines = ", ".join(self.airline_names or sorted(self.state.filters.airlines))
            codeshares = " (incl. codeshares)" if self.state.filters.include_codeshares else ""
            return f"Showing {len(self.routes)} routes for {airlines}{codeshares}"
        return "Click an airport to explore routes"

    def __len__(self) -> int:
        return len(self.routes)

    def __iter__(self):
        return iter(self.routes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'mode': self.mode,
            'airport': self.state.airport,
            'summary': self.summary(),
            'routes': [r.to_dict() for r in self.routes],
        }


class SelectionResolver:
    """
    Resolve which routes to draw for a selection state.

    Two modes, sharing the same filtering and path logic:
    - an airport is selected: its outbound routes, filtered
    - no airport but an airline filter: every route of those airlines

    With neither, nothing is drawn.

    Examples:
        resolver = SelectionResolver(model)
        selection = resolver.resolve(SelectionState(airport='JFK'))
        for resolved in selection:
            draw(resolved.path, resolved.color)
    """

    def __init__(self, model: RouteNetworkModel, steps: int = config.ROUTE_PATH_STEPS):
        if steps < 1:
            raise ValueError(f"steps must be a positive integer, got {steps}")
        self.model = model
        self.steps = steps

    def candidate_routes(self, state: SelectionState) -> Tuple[str, List[Route]]:
        """Mode and filtered routes for a state, before endpoints are resolved."""
        filters = state.filters
        if state.airport is not None:
            routes = self.model.routes_from(state.airport)
            return MODE_AIRPORT, [r for r in routes if filters.matches(r)]
        if filters.airlines:
            return MODE_AIRLINE_NETWORK, self.model.routes.matching(filters).all()
        return MODE_EMPTY, []

    def resolve(self, state: SelectionState) -> ResolvedSelection:
        mode, routes = self.candidate_routes(state)
        resolved = tuple(self._resolve_routes(routes, state))
        logger.debug(f"Resolved {len(resolved)} routes in mode {mode} for airport {state.airport}")
        airline_names: Tuple[str, ...] = ()
        if mode == MODE_AIRLINE_NETWORK:
            airline_names = tuple(self.model.airline_name(code) for code in sorted(state.filters.airlines))
        return ResolvedSelection(state=state, mode=mode, routes=resolved, airline_names=airline_names)

    def _resolve_routes(self, routes: Iterable[Route], state: SelectionState) -> Iterable[ResolvedRoute]:
        for route in routes:
            resolved = self.resolve_route(route, state)
            if resolved is not None:
                yield resolved

    def resolve_route(self, route: Route, state: SelectionState) -> Optional[ResolvedRoute]:
        """
        Path, color and labels for one route.

        Returns None when an endpoint airport is unknown.
        """
        origin = self.model.get_airport(route.origin)
        destination = self.model.get_airport(route.destination)
        if origin is None or destination is None:
            logger.debug(f"Skipping route {route}: unknown endpoint airport")
            return None

        path = unwrap_longitudes(
            interpolate_great_circle(origin.coordinates, destination.coordinates, self.steps)
        )
        color_airline = color_airline_for(route, state.filters)
        label = operators_label(route.operators, self.model.airline_name)

        return ResolvedRoute(
            route=route,
            origin=origin,
            destination=destination,
            path=tuple(path),
            color_airline=color_airline,
            color=airline_color(color_airline),
            label=label,
            tooltip=route_tooltip(route, destination, label),
        )
