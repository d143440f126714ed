#!/usr/bin/env python3

import math
from typing import Optional, Tuple, List, Sequence, Union
from dataclasses import dataclass

from route_atlas import config

Coordinate = Tuple[float, float]


@dataclass(frozen=True)
class NavPoint:
    """
    A geographic point with coordinates and optional name.

    All coordinates are stored in decimal degrees:
    - Latitude: -90 to +90 degrees (negative for South, positive for North)
    - Longitude: -180 to +180 degrees (negative for West, positive for East)

    All distance calculations use nautical miles (1 nautical mile = 1.852 kilometers)
    All bearing calculations use degrees (0-360, where 0/360 is North, 90 is East, etc.)
    """

    EARTH_RADIUS_NM = 3440.065

    latitude: float  # Decimal degrees, -90 to +90
    longitude: float  # Decimal degrees, -180 to +180
    name: Optional[str] = None  # Optional identifier for the point

    def __post_init__(self):
        """Validate coordinates after initialization."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(f"Latitude must be between -90 and 90 degrees, got {self.latitude}")
        if not -180 <= self.longitude <= 180:
            raise ValueError(f"Longitude must be between -180 and 180 degrees, got {self.longitude}")

    @property
    def coordinates(self) -> Coordinate:
        """(latitude, longitude) tuple."""
        return (self.latitude, self.longitude)

    def haversine_distance(self, other: 'NavPoint') -> Tuple[float, float]:
        """
        Calculate the bearing and distance to another NavPoint using the Haversine formula.

        Args:
            other: The target NavPoint

        Returns:
            Tuple of (bearing in degrees, distance in nautical miles)
            - bearing: 0-360 degrees (0/360 is North, 90 is East, etc.)
            - distance: Distance in nautical miles
        """
        lat1 = math.radians(self.latitude)
        lat2 = math.radians(other.latitude)
        dlon = math.radians(other.longitude - self.longitude)

        distance = central_angle(self.coordinates, other.coordinates) * self.EARTH_RADIUS_NM

        y = math.sin(dlon) * math.cos(lat2)
        x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)
        bearing = math.degrees(math.atan2(y, x))
        bearing = (bearing + 360) % 360  # Normalize to [0, 360)

        return bearing, distance

    def great_circle_points(self, other: 'NavPoint', steps: int = config.EXPLORE_PATH_STEPS) -> List[Coordinate]:
        """
        Points along the great circle from this point to another.

        Args:
            other: The target NavPoint
            steps: Number of segments, the path has steps + 1 points

        Returns:
            List of (latitude, longitude) tuples with continuous longitudes
        """
        return interpolate_great_circle(self.coordinates, other.coordinates, steps, unwrap=True)

    def __str__(self) -> str:
        """String representation of the NavPoint."""
        name_str = f"{self.name} " if self.name else ""
        return f"{name_str}({self.latitude}, {self.longitude})"


PointLike = Union[NavPoint, Sequence[float]]


def _as_coordinate(point: PointLike) -> Coordinate:
    if isinstance(point, NavPoint):
        return point.coordinates
    return (float(point[0]), float(point[1]))


def central_angle(start: PointLike, end: PointLike) -> float:
    """
    Central angle in radians between two points, using the haversine formula.

    Always in [0, pi]: the minor arc.
    """
    lat1, lon1 = (math.radians(v) for v in _as_coordinate(start))
    lat2, lon2 = (math.radians(v) for v in _as_coordinate(end))

    a = math.sin((lat2 - lat1) / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin((lon2 - lon1) / 2) ** 2
    # rounding can push a slightly above 1 for antipodal points
    return 2 * math.asin(math.sqrt(min(1.0, a)))


def haversine_distance(start: PointLike, end: PointLike) -> float:
    """Great circle distance in nautical miles."""
    return central_angle(start, end) * NavPoint.EARTH_RADIUS_NM


def interpolate_great_circle(
    start: PointLike,
    end: PointLike,
    steps: int = config.EXPLORE_PATH_STEPS,
    unwrap: bool = False,
) -> List[Coordinate]:
    """
    Interpolate points along the great circle between two coordinates.

    Uses spherical linear interpolation between the Cartesian unit vectors
    of both endpoints, so the path follows the minor arc.

    Args:
        start: Start point, (lat, lon) in degrees or a NavPoint
        end: End point, (lat, lon) in degrees or a NavPoint
        steps: Number of segments; steps + 1 points are returned
        unwrap: Pass the result through unwrap_longitudes

    Returns:
        List of (latitude, longitude) tuples, first is start, last is end

    Raises:
        ValueError: if steps is not a positive integer
    """
    if steps < 1:
        raise ValueError(f"steps must be a positive integer, got {steps}")

    start_coord = _as_coordinate(start)
    end_coord = _as_coordinate(end)

    d = central_angle(start_coord, end_coord)
    if d == 0:
        return [start_coord] * (steps + 1)

    lat1, lon1 = (math.radians(v) for v in start_coord)
    lat2, lon2 = (math.radians(v) for v in end_coord)
    sin_d = math.sin(d)

    points = []
    for i in range(steps + 1):
        f = i / steps
        a = math.sin((1 - f) * d) / sin_d
        b = math.sin(f * d) / sin_d

        x = a * math.cos(lat1) * math.cos(lon1) + b * math.cos(lat2) * math.cos(lon2)
        y = a * math.cos(lat1) * math.sin(lon1) + b * math.cos(lat2) * math.sin(lon2)
        z = a * math.sin(lat1) + b * math.sin(lat2)

        lat = math.atan2(z, math.sqrt(x ** 2 + y ** 2))
        lon = math.atan2(y, x)
        points.append((math.degrees(lat), math.degrees(lon)))

    if unwrap:
        return unwrap_longitudes(points)
    return points


def unwrap_longitudes(points: Sequence[Coordinate]) -> List[Coordinate]:
    """
    Shift longitudes by multiples of 360 so consecutive points never jump
    by more than 180 degrees.

    The result can go outside [-180, 180]; latitudes are left untouched.

    Args:
        points: Sequence of (latitude, longitude) tuples

    Returns:
        New list of (latitude, longitude) tuples, same length and order
    """
    result: List[Coordinate] = [tuple(p) for p in points[:1]]
    for lat, lon in points[1:]:
        prev_lon = result[-1][1]
        while lon - prev_lon > 180:
            lon -= 360
        while lon - prev_lon < -180:
            lon += 360
        result.append((lat, lon))
    return result
