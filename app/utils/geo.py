"""
Geo helpers - coordinates and great-circle distance
"""
import math
from dataclasses import dataclass

EARTH_RADIUS_M = 6371000  # Earth's radius in meters


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float


def haversine_distance(a: Coordinate, b: Coordinate) -> float:
    """
    Calculate distance between two coordinates using Haversine formula

    Returns:
        float: Distance in meters
    """
    lat1_rad = math.radians(a.latitude)
    lat2_rad = math.radians(b.latitude)
    delta_lat = math.radians(b.latitude - a.latitude)
    delta_lon = math.radians(b.longitude - a.longitude)

    h = (math.sin(delta_lat / 2) ** 2 +
         math.cos(lat1_rad) * math.cos(lat2_rad) *
         math.sin(delta_lon / 2) ** 2)
    # Rounding can push h past 1 for near-antipodal points
    h = min(1.0, h)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return EARTH_RADIUS_M * c
