"""
Command kind enumerations
"""
from enum import Enum


class SystemCommand(Enum):
    """Commands directed at the application itself"""
    AIRPORT = "airport"
    AUTO = "auto"
    CLEAR = "clear"
    PAUSE = "pause"
    RATE = "rate"
    TIMEWARP = "timewarp"
    TUTORIAL = "tutorial"
    TRANSMIT = "transmit"  # Marks a line addressed to an aircraft, never a system command itself


class TransmitCommand(Enum):
    """Canonical commands an aircraft understands"""
    ABORT = "abort"
    ALTITUDE = "altitude"
    CLEARED_AS_FILED = "clearedAsFiled"
    CLIMB_VIA_SID = "climbViaSID"
    DESCEND_VIA_STAR = "descendViaSTAR"
    DELETE = "delete"
    DIRECT = "direct"
    FIX = "fix"
    FLY_PRESENT_HEADING = "flyPresentHeading"
    HEADING = "heading"
    HOLD = "hold"
    LAND = "land"
    REROUTE = "reroute"
    ROUTE = "route"
    SAY_ROUTE = "sayRoute"
    SID = "sid"
    SPEED = "speed"
    SQUAWK = "squawk"
    STAR = "star"
    TAKEOFF = "takeoff"
    TAXI = "taxi"


class TurnDirection(Enum):
    """Direction of a turn"""
    LEFT = "left"
    RIGHT = "right"
