"""
Display helpers: airline colors, labels and tooltips.
"""

from .colors import airline_color, airline_hue, color_airline_for, route_color
from .labels import operators_label, aircraft_label, route_tooltip, airport_tooltip

__all__ = [
    'airline_color',
    'airline_hue',
    'color_airline_for',
    'route_color',
    'operators_label',
    'aircraft_label',
    'route_tooltip',
    'airport_tooltip',
]
