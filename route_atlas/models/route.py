"""Route data model."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Tuple


def _unique(values: Iterable[str]) -> Tuple[str, ...]:
    """Tuple of values with duplicates removed, first occurrence order kept."""
    return tuple(dict.fromkeys(v for v in values if v))


@dataclass(frozen=True)
class Route:
    """
    A direct route between two airports.

    Attributes:
        origin: Origin airport IATA code
        destination: Destination airport IATA code
        operators: Airlines that actually fly the route, in source order
        codeshares: Airlines that market the route without operating it
        aircraft: Aircraft type codes used by the operators
    """
    origin: str
    destination: str
    operators: Tuple[str, ...] = field(default_factory=tuple)
    codeshares: Tuple[str, ...] = field(default_factory=tuple)
    aircraft: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable (lists from JSON) but store de-duplicated tuples
        object.__setattr__(self, 'operators', _unique(self.operators))
        object.__setattr__(self, 'codeshares', _unique(self.codeshares))
        object.__setattr__(self, 'aircraft', _unique(self.aircraft))

    @property
    def key(self) -> Tuple[str, str]:
        """Ordered (origin, destination) pair identifying the route."""
        return (self.origin, self.destination)

    @property
    def airlines(self) -> Tuple[str, ...]:
        """Operators followed by codeshare-only airlines."""
        return _unique(self.operators + self.codeshares)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            'origin': self.origin,
            'destination': self.destination,
            'operators': list(self.operators),
            'codeshares': list(self.codeshares),
            'aircraft': list(self.aircraft),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Route':
        """Create from dictionary."""
        return cls(
            origin=data['origin'],
            destination=data['destination'],
            operators=tuple(data.get('operators') or ()),
            codeshares=tuple(data.get('codeshares') or ()),
            aircraft=tuple(data.get('aircraft') or ()),
        )

    def __str__(self) -> str:
        return f"{self.origin} → {self.destination}"
