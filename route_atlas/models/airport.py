from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from route_atlas.models.navpoint import NavPoint


@dataclass(frozen=True)
class Airport:
    """Data class for storing airport information."""

    iata: str  # IATA code, 3 letters
    latitude_deg: float
    longitude_deg: float
    icao: str = ''
    name: str = ''
    city: str = ''
    country: str = ''
    type: Optional[str] = None

    def __post_init__(self):
        if not -90 <= self.latitude_deg <= 90:
            raise ValueError(f"Latitude must be between -90 and 90 degrees, got {self.latitude_deg} for {self.iata}")
        if not -180 <= self.longitude_deg <= 180:
            raise ValueError(f"Longitude must be between -180 and 180 degrees, got {self.longitude_deg} for {self.iata}")

    @property
    def navpoint(self) -> NavPoint:
        """Get NavPoint representation of this airport."""
        return NavPoint(
            latitude=self.latitude_deg,
            longitude=self.longitude_deg,
            name=self.iata
        )

    @property
    def coordinates(self) -> Tuple[float, float]:
        return (self.latitude_deg, self.longitude_deg)

    @property
    def display_name(self) -> str:
        """Short label such as 'LHR - London'."""
        return f"{self.iata} - {self.city or self.name}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert airport to dictionary using the record keys."""
        return {
            'iata': self.iata,
            'icao': self.icao,
            'name': self.name,
            'city': self.city,
            'country': self.country,
            'lat': self.latitude_deg,
            'lon': self.longitude_deg,
            'type': self.type,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Airport':
        """Create an airport from a `{iata, icao, name, city, country, lat, lon, type}` record."""
        return cls(
            iata=data['iata'],
            latitude_deg=float(data['lat']),
            longitude_deg=float(data['lon']),
            icao=data.get('icao') or '',
            name=data.get('name') or '',
            city=data.get('city') or '',
            country=data.get('country') or '',
            type=data.get('type'),
        )

    def __repr__(self):
        return f"Airport(iata='{self.iata}', name='{self.name}')"
