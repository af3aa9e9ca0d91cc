"""
Route segment models for SID/STAR procedures

A procedure is published as runway, body and entry/exit segments, each one a
list of fixes. A fix is either a bare name or a [name, restriction] pair where
the restriction encodes altitude and/or speed constraints:

    "A80+"       at or above 8,000 ft
    "A110"       at 11,000 ft
    "S230"       at 230 kts
    "A70-|S210"  at or below 7,000 ft and at 210 kts
"""
import copy
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union
from utils.constants import FEET_PER_FLIGHT_LEVEL_UNIT

logger = logging.getLogger(__name__)

RESTRICTION_SEPARATOR = "|"
RESTRICTION_PATTERN = re.compile(r'^([AS])(\d+)([+-]?)$')

FixEntry = Union[str, List[str], Tuple[str, str]]


class RestrictionQualifier(Enum):
    """How a restriction value applies"""
    AT = "at"
    AT_OR_ABOVE = "at_or_above"
    AT_OR_BELOW = "at_or_below"


QUALIFIER_SUFFIXES = {
    "": RestrictionQualifier.AT,
    "+": RestrictionQualifier.AT_OR_ABOVE,
    "-": RestrictionQualifier.AT_OR_BELOW,
}


def parse_restriction(restriction: Optional[str]) -> Dict[str, object]:
    """
    Parse a restriction code into altitude and speed constraints

    Args:
        restriction: Restriction code (e.g. "A80+|S210"), or None

    Returns:
        Dict with altitude, altitude_qualifier, speed and speed_qualifier keys,
        None for anything not constrained
    """
    parsed = {
        "altitude": None,
        "altitude_qualifier": None,
        "speed": None,
        "speed_qualifier": None,
    }

    if not restriction:
        return parsed

    for part in restriction.split(RESTRICTION_SEPARATOR):
        match = RESTRICTION_PATTERN.match(part.strip().upper())
        if not match:
            raise ValueError(f"Invalid restriction '{part}' in '{restriction}'")

        restriction_type, value, suffix = match.groups()
        qualifier = QUALIFIER_SUFFIXES[suffix]

        if restriction_type == "A":
            parsed["altitude"] = int(value) * FEET_PER_FLIGHT_LEVEL_UNIT
            parsed["altitude_qualifier"] = qualifier
        else:
            parsed["speed"] = int(value)
            parsed["speed_qualifier"] = qualifier

    return parsed


@dataclass
class StandardWaypoint:
    """Represents one fix of a SID/STAR with its restrictions"""
    name: str
    restriction: Optional[str] = None
    altitude: Optional[int] = None  # feet
    altitude_qualifier: Optional[RestrictionQualifier] = None
    speed: Optional[int] = None  # knots
    speed_qualifier: Optional[RestrictionQualifier] = None
    position: Optional[Tuple[float, float]] = None  # km east/north of the airport

    # Set together by the pre-spawn pass
    distance_from_previous: Optional[float] = None  # nm
    previous_waypoint_name: Optional[str] = None

    @classmethod
    def from_fix_entry(cls, entry: FixEntry, fix_database=None) -> 'StandardWaypoint':
        """
        Create from a fix list entry

        Args:
            entry: Fix name, or [fix name, restriction] pair
            fix_database: Optional FixDatabase used to resolve the position

        Returns:
            StandardWaypoint
        """
        if isinstance(entry, str):
            name, restriction = entry, None
        elif isinstance(entry, (list, tuple)) and len(entry) == 2:
            name, restriction = entry
        else:
            raise ValueError(f"Invalid fix entry: {entry!r}")

        name = name.upper()
        position = None
        if fix_database is not None:
            position = fix_database.get_position(name)
            if position is None:
                logger.debug(f"No position found for fix {name}")

        return cls(name=name, restriction=restriction, position=position, **parse_restriction(restriction))

    @property
    def fix_name_with_restrictions(self) -> List[Optional[str]]:
        """[name, restriction] pair as published"""
        return [self.name, self.restriction]

    @property
    def has_restriction(self) -> bool:
        return self.altitude is not None or self.speed is not None

    def set_previous_waypoint(self, previous_waypoint_name: str, distance: float):
        """Record the preceding waypoint and the distance to it in nm"""
        self.previous_waypoint_name = previous_waypoint_name
        self.distance_from_previous = distance


class RouteSegment:
    """A named, ordered list of waypoints, e.g. one runway transition or the body"""

    def __init__(self, name: str, fix_list: Optional[List[FixEntry]] = None, fix_database=None):
        """
        Initialize the segment

        Args:
            name: Segment name (runway, entry/exit fix or "body")
            fix_list: Fix entries in flying order
            fix_database: Optional FixDatabase used to resolve positions
        """
        self.name = name
        self._items: List[StandardWaypoint] = [
            StandardWaypoint.from_fix_entry(entry, fix_database) for entry in (fix_list or [])
        ]

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> List[StandardWaypoint]:
        """Copies of the waypoints, the segment itself never changes"""
        return [copy.copy(waypoint) for waypoint in self._items]

    def find_waypoints_for_segment(self) -> List[List[Optional[str]]]:
        """[name, restriction] pairs for every waypoint in order"""
        return [waypoint.fix_name_with_restrictions for waypoint in self._items]

    def gather_fix_names(self) -> List[str]:
        """Fix names in order"""
        return [waypoint.name for waypoint in self._items]


def _normalize_segment_name(name: str) -> str:
    return name.strip().upper()


class RouteSegmentCollection:
    """Mapping of segment name to RouteSegment, looked up case-insensitively"""

    def __init__(self, segments: Dict[str, List[FixEntry]], fix_database=None):
        """
        Initialize the collection

        Args:
            segments: Segment name -> fix list (e.g. the "rwy" or "exitPoints" object)
            fix_database: Optional FixDatabase used to resolve positions
        """
        self._segments: Dict[str, RouteSegment] = {}

        for name, fix_list in segments.items():
            if not fix_list:
                logger.debug(f"Skipping segment {name} with no fixes")
                continue

            key = _normalize_segment_name(name)
            if key in self._segments:
                logger.warning(f"Segment {name} replaces {self._segments[key].name}, names differ only by case")

            self._segments[key] = RouteSegment(name, fix_list, fix_database)

    def __len__(self) -> int:
        return len(self._segments)

    def find_segment_by_name(self, name: Optional[str]) -> Optional[RouteSegment]:
        """
        Get a segment by name

        Args:
            name: Segment name, any case

        Returns:
            RouteSegment, or None if not found
        """
        if not name:
            return None
        return self._segments.get(_normalize_segment_name(name))

    def find_waypoints_for_segment_name(self, name: Optional[str]) -> List[List[Optional[str]]]:
        """[name, restriction] pairs of a segment, empty if the segment does not exist"""
        segment = self.find_segment_by_name(name)
        if segment is None:
            return []
        return segment.find_waypoints_for_segment()

    def gather_segment_names(self) -> List[str]:
        """Names of every segment as published"""
        return [segment.name for segment in self._segments.values()]

    def gather_fix_names(self) -> List[str]:
        """Every fix across every segment, first occurrence order, no duplicates"""
        fix_names = []
        for segment in self._segments.values():
            for fix_name in segment.gather_fix_names():
                if fix_name not in fix_names:
                    fix_names.append(fix_name)
        return fix_names


def build_segment_collection(segments: Optional[Dict[str, List[FixEntry]]],
                             fix_database=None) -> Optional[RouteSegmentCollection]:
    """
    Build a RouteSegmentCollection, or None when there is nothing to build

    A None result lets callers test whether a procedure has an entry/exit side
    at all without counting segments.
    """
    if not segments:
        return None

    return RouteSegmentCollection(segments, fix_database)
