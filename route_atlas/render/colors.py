"""Deterministic airline colors for route display."""

from typing import TYPE_CHECKING

from .. import config

if TYPE_CHECKING:
    from ..models.route import Route
    from ..models.filters import FilterState


def airline_hue(airline_code: str) -> int:
    """
    Hue in [0, 360) derived from the first two characters of the code.

    A missing second character counts as 0. Different codes may collide.
    """
    first = ord(airline_code[0]) if airline_code else 0
    second = ord(airline_code[1]) if len(airline_code) > 1 else 0
    return (first * config.HUE_WEIGHT_FIRST + second * config.HUE_WEIGHT_SECOND) % 360


def airline_color(airline_code: str) -> str:
    """CSS color string for an airline, e.g. ``hsl(318, 70%, 60%)``."""
    return f"hsl({airline_hue(airline_code)}, {config.ROUTE_COLOR_SATURATION}%, {config.ROUTE_COLOR_LIGHTNESS}%)"


def color_airline_for(route: 'Route', filters: 'FilterState') -> str:
    """
    Airline whose color a route is drawn with.

    With an airline filter, the first operator that is selected; otherwise
    the first operator in list order. Routes without operators use
    ``config.UNKNOWN_AIRLINE``.
    """
    if filters.airlines:
        for code in route.operators:
            if code in filters.airlines:
                return code
    if route.operators:
        return route.operators[0]
    return config.UNKNOWN_AIRLINE


def route_color(route: 'Route', filters: 'FilterState') -> str:
    return airline_color(color_airline_for(route, filters))
