"""
Fix database for coordinate lookups
Used to place SID/STAR waypoints on the airport's planar grid
"""
import logging
import re
from typing import Dict, Optional, Tuple, Union
from models.airport import Fix
from utils.geo_utils import calculate_relative_position

logger = logging.getLogger(__name__)

# e.g. "N36d4.80m0" or "W115d9.22m0" (hemisphere, degrees, minutes, seconds)
DMS_PATTERN = re.compile(r'^([NSEW])(\d+(?:\.\d+)?)d(?:(\d+(?:\.\d+)?)m)?(\d+(?:\.\d+)?)?s?$', re.IGNORECASE)

Coordinate = Union[str, int, float]


def parse_coordinate(coord: Coordinate) -> Optional[float]:
    """
    Parse a coordinate from airport data

    Accepts decimal degrees (36.08, "-115.15") or degrees/minutes/seconds
    strings with a hemisphere prefix ("N36d4.80m0"). S and W are negative.

    Returns:
        Decimal degrees, or None if the value cannot be parsed
    """
    if isinstance(coord, bool):
        return None

    if isinstance(coord, (int, float)):
        return float(coord)

    if not isinstance(coord, str):
        return None

    coord = coord.strip()
    try:
        return float(coord)
    except ValueError:
        pass

    match = DMS_PATTERN.match(coord)
    if not match:
        logger.debug(f"Unrecognized coordinate format: {coord}")
        return None

    direction, degrees, minutes, seconds = match.groups()
    decimal = float(degrees) + float(minutes or 0) / 60.0 + float(seconds or 0) / 3600.0

    if direction.upper() in ['S', 'W']:
        decimal = -decimal

    return decimal


class FixDatabase:
    """Fix name to position lookups for one airport"""

    def __init__(self, fixes: Dict[str, list], reference: Tuple[float, float]):
        """
        Initialize fix database

        Args:
            fixes: Fix name -> [latitude, longitude]
            reference: (latitude, longitude) of the airport reference point
        """
        self.reference = reference
        self.fixes: Dict[str, Fix] = {}
        self._load_fixes(fixes)

    def _load_fixes(self, fixes: Dict[str, list]):
        """Parse every fix definition, skipping the ones that cannot be placed"""
        ref_lat, ref_lon = self.reference

        for name, coordinates in fixes.items():
            if not isinstance(coordinates, (list, tuple)) or len(coordinates) < 2:
                logger.warning(f"Skipping fix {name}: expected [latitude, longitude] but got {coordinates!r}")
                continue

            latitude = parse_coordinate(coordinates[0])
            longitude = parse_coordinate(coordinates[1])

            if latitude is None or longitude is None:
                logger.warning(f"Skipping fix {name}: could not parse {coordinates!r}")
                continue

            fix = Fix(
                name=name.upper(),
                latitude=latitude,
                longitude=longitude,
                position=calculate_relative_position(latitude, longitude, ref_lat, ref_lon)
            )
            self.fixes[fix.name] = fix
            logger.debug(f"Loaded fix: {fix.name} at {latitude}, {longitude}")

        logger.info(f"Loaded {len(self.fixes)} fixes")

    def get_fix(self, fix_name: str) -> Optional[Fix]:
        """
        Get fix by name

        Args:
            fix_name: Fix identifier (e.g., "BESSY"), any case

        Returns:
            Fix object, or None if not found
        """
        return self.fixes.get(fix_name.upper())

    def get_position(self, fix_name: str) -> Optional[Tuple[float, float]]:
        """
        Get the planar position of a fix

        Args:
            fix_name: Fix identifier

        Returns:
            (x, y) tuple in km relative to the airport, or None if not found
        """
        fix = self.get_fix(fix_name)
        if fix:
            return fix.position
        return None

    def has_fix(self, fix_name: str) -> bool:
        return fix_name.upper() in self.fixes

    def get_all_fixes(self) -> Dict[str, Fix]:
        """
        Get all fixes in database

        Returns:
            Dictionary mapping fix names to Fix objects
        """
        return self.fixes.copy()
