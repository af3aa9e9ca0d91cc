"""
Geographic utilities for coordinate calculations
"""
import math
from typing import Tuple
from utils.constants import EARTH_RADIUS_NM, KM_PER_NM


def km_to_nm(km: float) -> float:
    """
    Convert kilometers to nautical miles

    Args:
        km: Distance in kilometers

    Returns:
        Distance in nautical miles
    """
    return km / KM_PER_NM


def nm_to_km(nm: float) -> float:
    """Convert nautical miles to kilometers"""
    return nm * KM_PER_NM


def calculate_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate bearing between two points

    Args:
        lat1: Starting latitude in degrees
        lon1: Starting longitude in degrees
        lat2: Ending latitude in degrees
        lon2: Ending longitude in degrees

    Returns:
        Bearing in degrees (0-360)
    """
    # Convert to radians
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    lon_diff = math.radians(lon2 - lon1)

    # Calculate bearing
    y = math.sin(lon_diff) * math.cos(lat2_rad)
    x = math.cos(lat1_rad) * math.sin(lat2_rad) - \
        math.sin(lat1_rad) * math.cos(lat2_rad) * math.cos(lon_diff)

    bearing_rad = math.atan2(y, x)
    return (math.degrees(bearing_rad) + 360) % 360


def calculate_distance_nm(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate distance between two points using Haversine formula

    Args:
        lat1: Starting latitude in degrees
        lon1: Starting longitude in degrees
        lat2: Ending latitude in degrees
        lon2: Ending longitude in degrees

    Returns:
        Distance in nautical miles
    """
    # Convert to radians
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)

    # Haversine formula
    a = math.sin(dlat / 2) ** 2 + \
        math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2) ** 2
    c = 2 * math.asin(math.sqrt(a))

    return EARTH_RADIUS_NM * c


def calculate_relative_position(lat: float, lon: float, ref_lat: float, ref_lon: float) -> Tuple[float, float]:
    """
    Calculate the planar position of a point relative to a reference point

    Args:
        lat: Latitude of the point in degrees
        lon: Longitude of the point in degrees
        ref_lat: Reference (airport) latitude in degrees
        ref_lon: Reference (airport) longitude in degrees

    Returns:
        (x, y) tuple in km, x east and y north of the reference
    """
    distance_km = nm_to_km(calculate_distance_nm(ref_lat, ref_lon, lat, lon))
    bearing_rad = math.radians(calculate_bearing(ref_lat, ref_lon, lat, lon))

    return (distance_km * math.sin(bearing_rad), distance_km * math.cos(bearing_rad))


def distance_2d(a: Tuple[float, float], b: Tuple[float, float]) -> float:
    """Planar distance between two (x, y) positions, in the positions' unit"""
    return math.hypot(b[0] - a[0], b[1] - a[1])
