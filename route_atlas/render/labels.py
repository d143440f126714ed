"""Human readable route labels and tooltips."""

from typing import Callable, Sequence, TYPE_CHECKING

from .. import config

if TYPE_CHECKING:
    from ..models.airport import Airport
    from ..models.route import Route


def operators_label(
    operators: Sequence[str],
    airline_name: Callable[[str], str],
    limit: int = config.MAX_LABEL_OPERATORS,
) -> str:
    """
    Names of the first ``limit`` operators plus an overflow count.

    Examples:
        operators_label(['AA', 'BA'], model.airline_name)
        # 'American Airlines, British Airways'
        operators_label(['AA', 'BA', 'IB', 'AY'], model.airline_name)
        # 'American Airlines, British Airways, Iberia +1 more'
    """
    names = ", ".join(airline_name(code) for code in operators[:limit])
    if len(operators) > limit:
        names += f" +{len(operators) - limit} more"
    return names


def aircraft_label(aircraft: Sequence[str], limit: int = config.MAX_TOOLTIP_AIRCRAFT) -> str:
    label = ", ".join(aircraft[:limit])
    if len(aircraft) > limit:
        label += "..."
    return label


def route_tooltip(route: 'Route', destination: 'Airport', operators: str) -> str:
    """Plain-text tooltip, one fact per line."""
    return "\n".join([
        str(route),
        destination.city or destination.name,
        f"Operated by: {operators}",
        f"Aircraft: {aircraft_label(route.aircraft)}",
    ])


def airport_tooltip(airport: 'Airport', include_country: bool = True) -> str:
    lines = [airport.iata, airport.city or airport.name]
    if include_country:
        lines.append(airport.country)
    return "\n".join(lines)
