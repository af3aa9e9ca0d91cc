"""
Standard route (SID/STAR) model

Expects a procedure definition in the form of:

    {
        "icao": "SHEAD9",
        "name": "Shead Nine",
        "rwy": {
            "01L": [["BESSY", "S230"], ["MDDOG", "A90"], ["TARRK", "A110"]],
            "07L": ["WASTE", ["BAKRR", "A70"], ["MINEY", "A80+"], "HITME"]
        },
        "body": [["SHEAD", "A140+"]],
        "exitPoints": {
            "KENNO": [["DBIGE", "A210+"], ["BIKKR", "A210+"], "KENNO"],
            "OAL": [["DBIGE", "A210+"], ["BIKKR", "A210+"], "KENNO", "OAL"]
        }
    }

SIDs publish "exitPoints" and STARs publish "entryPoints". The runway segments
are flown first on a SID and last on a STAR.
"""
import logging
from enum import Enum
from typing import Dict, List, Optional
from models.route_segment import (
    RouteSegment,
    RouteSegmentCollection,
    StandardWaypoint,
    build_segment_collection
)
from utils.geo_utils import distance_2d, km_to_nm

logger = logging.getLogger(__name__)


class ProcedureType(Enum):
    """Departure or arrival procedure"""
    SID = "sid"
    STAR = "star"


def detect_procedure_type(standard_route: Dict) -> Optional[ProcedureType]:
    """
    Determine whether a procedure definition is a SID or a STAR

    Returns:
        ProcedureType, or None when neither entryPoints nor exitPoints is present
    """
    if "entryPoints" in standard_route:
        return ProcedureType.STAR
    if "exitPoints" in standard_route:
        return ProcedureType.SID
    return None


class StandardRouteModel:
    """A single SID or STAR and the fix lists it can produce"""

    def __init__(self, standard_route: Dict, fix_database=None):
        """
        Initialize the model

        Args:
            standard_route: Procedure definition (see module docstring)
            fix_database: Optional FixDatabase used to resolve waypoint positions
        """
        if not isinstance(standard_route, dict):
            raise TypeError(f"Expected standard_route to be a dict, instead received {type(standard_route).__name__}")

        self.icao: str = standard_route.get("icao", "")
        self.name: str = standard_route.get("name", "")
        self.procedure_type: Optional[ProcedureType] = detect_procedure_type(standard_route)

        self._body_segment: Optional[RouteSegment] = RouteSegment("body", standard_route.get("body"), fix_database)
        self._entry_collection: Optional[RouteSegmentCollection] = None
        self._exit_collection: Optional[RouteSegmentCollection] = None

        if self.procedure_type is ProcedureType.STAR:
            self._entry_collection = build_segment_collection(standard_route.get("entryPoints"), fix_database)
            self._exit_collection = build_segment_collection(standard_route.get("rwy"), fix_database)
        elif self.procedure_type is ProcedureType.SID:
            self._entry_collection = build_segment_collection(standard_route.get("rwy"), fix_database)
            self._exit_collection = build_segment_collection(standard_route.get("exitPoints"), fix_database)
        else:
            logger.warning(f"Procedure {self.icao} has neither entryPoints nor exitPoints")

    def reset(self) -> 'StandardRouteModel':
        """Clear every field so the instance can be disposed of or reused"""
        self.icao = ""
        self.name = ""
        self.procedure_type = None
        self._body_segment = None
        self._entry_collection = None
        self._exit_collection = None

        return self

    @property
    def is_sid(self) -> bool:
        return self.procedure_type is ProcedureType.SID

    @property
    def is_star(self) -> bool:
        return self.procedure_type is ProcedureType.STAR

    def find_fixes_and_restrictions_for_runway_and_exit(self, runway_name: str, exit_fix_name: str) -> List[List[Optional[str]]]:
        """
        Gather [fix name, restriction] pairs of a SID for a runway and exit

        Args:
            runway_name: Departure runway (e.g. "01L")
            exit_fix_name: Exit point (e.g. "KENNO")

        Returns:
            Runway segment fixes, then body fixes, then exit segment fixes
        """
        return self._generate_fix_list(runway_name, exit_fix_name)

    def find_fixes_and_restrictions_for_entry_and_runway(self, entry_fix_name: str, runway_name: str = "") -> List[List[Optional[str]]]:
        """
        Gather [fix name, restriction] pairs of a STAR for an entry and runway

        Args:
            entry_fix_name: Entry point (e.g. "DVC")
            runway_name: Arrival runway (e.g. "25L"), optional

        Returns:
            Entry segment fixes, then body fixes, then runway segment fixes
        """
        return self._generate_fix_list(entry_fix_name, runway_name)

    def find_standard_waypoints_for_entry_and_exit(self, entry: str, exit: str, is_pre_spawn: bool = False) -> List[StandardWaypoint]:
        """
        Collect the waypoints for an entry (runway on a SID) and exit (runway on a STAR)

        Args:
            entry: Entry segment name
            exit: Exit segment name
            is_pre_spawn: Annotate each waypoint with the distance from the previous one

        Returns:
            Copies of the waypoints in flying order
        """
        waypoint_list = []

        entry_segment = self._find_segment(self._entry_collection, entry)
        if entry_segment is not None:
            waypoint_list.extend(entry_segment.items)

        if self._body_segment is not None:
            waypoint_list.extend(self._body_segment.items)

        exit_segment = self._find_segment(self._exit_collection, exit)
        if exit_segment is not None:
            waypoint_list.extend(exit_segment.items)

        if is_pre_spawn:
            self._update_waypoints_with_previous_waypoint_data(waypoint_list)

        return waypoint_list

    def calculate_distance_between_waypoints(self, position, previous_position) -> float:
        """
        Calculate the distance in nm between two waypoint positions

        Args:
            position: (x, y) in km
            previous_position: (x, y) in km

        Returns:
            Distance in nm
        """
        return km_to_nm(distance_2d(previous_position, position))

    def gather_entry_point_names(self) -> List[str]:
        """Names of the entry segments (runways on a SID)"""
        if not self.has_entry_points():
            return []
        return self._entry_collection.gather_segment_names()

    def gather_exit_point_names(self) -> List[str]:
        """Names of the exit segments (runways on a STAR)"""
        if not self.has_exit_points():
            return []
        return self._exit_collection.gather_segment_names()

    def has_entry_points(self) -> bool:
        return self._entry_collection is not None and len(self._entry_collection) > 0

    def has_exit_points(self) -> bool:
        return self._exit_collection is not None and len(self._exit_collection) > 0

    def has_fix_name(self, fix_name: str) -> bool:
        """
        Check if a segment named fix_name exists in the entry or exit collection

        The body segment is not searched.
        """
        for collection in (self._entry_collection, self._exit_collection):
            if collection is not None and collection.find_segment_by_name(fix_name) is not None:
                return True
        return False

    def _find_segment(self, collection: Optional[RouteSegmentCollection], segment_name: str) -> Optional[RouteSegment]:
        """Segment from a collection, None when the collection or segment is missing"""
        if collection is None or not segment_name:
            return None
        return collection.find_segment_by_name(segment_name)

    def _generate_fix_list(self, entry_name: str, exit_name: str) -> List[List[Optional[str]]]:
        """
        Concatenate entry, body and exit fixes

        A missing collection or segment contributes nothing, it is not an error.
        """
        fix_list = []

        entry_segment = self._find_segment(self._entry_collection, entry_name)
        if entry_segment is not None:
            fix_list.extend(entry_segment.find_waypoints_for_segment())

        if self._body_segment is not None:
            fix_list.extend(self._body_segment.find_waypoints_for_segment())

        exit_segment = self._find_segment(self._exit_collection, exit_name)
        if exit_segment is not None:
            fix_list.extend(exit_segment.find_waypoints_for_segment())

        return fix_list

    def _update_waypoints_with_previous_waypoint_data(self, waypoint_list: List[StandardWaypoint]):
        """
        Set the distance from, and name of, the previous waypoint on each waypoint

        The first waypoint is measured against itself: distance 0 and its own
        name as the previous waypoint.
        """
        for i, waypoint in enumerate(waypoint_list):
            previous_waypoint = waypoint_list[i - 1] if i > 0 else waypoint

            if waypoint.position is None or previous_waypoint.position is None:
                logger.warning(f"Cannot measure {previous_waypoint.name} -> {waypoint.name} on {self.icao}: position unknown")
                continue

            distance = self.calculate_distance_between_waypoints(waypoint.position, previous_waypoint.position)
            waypoint.set_previous_waypoint(previous_waypoint.name, distance)
