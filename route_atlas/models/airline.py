from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Airline:
    """Data class for storing airline information."""

    iata: str  # IATA code, 2 characters
    name: str = ''
    icao: str = ''
    country: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {
            'iata': self.iata,
            'icao': self.icao,
            'name': self.name,
            'country': self.country,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Airline':
        return cls(
            iata=data['iata'],
            name=data.get('name') or '',
            icao=data.get('icao') or '',
            country=data.get('country') or '',
        )
