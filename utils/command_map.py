"""
Command alias tables

Every alias an operator can type maps to exactly one canonical command. System
commands are single-argument instructions for the application, transmit
commands are instructions for one aircraft.
"""
from typing import Dict, Optional, Tuple
from models.command_kind import SystemCommand, TransmitCommand, TurnDirection


SYSTEM_COMMANDS: Dict[str, SystemCommand] = {
    "airport": SystemCommand.AIRPORT,
    "auto": SystemCommand.AUTO,
    "clear": SystemCommand.CLEAR,
    "pause": SystemCommand.PAUSE,
    "rate": SystemCommand.RATE,
    "timewarp": SystemCommand.TIMEWARP,
    "tutorial": SystemCommand.TUTORIAL,
    "transmit": SystemCommand.TRANSMIT,
}

COMMAND_MAP: Dict[str, TransmitCommand] = {
    # Altitude
    "a": TransmitCommand.ALTITUDE,
    "altitude": TransmitCommand.ALTITUDE,
    "c": TransmitCommand.ALTITUDE,
    "climb": TransmitCommand.ALTITUDE,
    "d": TransmitCommand.ALTITUDE,
    "descend": TransmitCommand.ALTITUDE,
    "cvs": TransmitCommand.CLIMB_VIA_SID,
    "dvs": TransmitCommand.DESCEND_VIA_STAR,

    # Heading
    "fh": TransmitCommand.HEADING,
    "h": TransmitCommand.HEADING,
    "heading": TransmitCommand.HEADING,
    "t": TransmitCommand.HEADING,
    "turn": TransmitCommand.HEADING,
    "fph": TransmitCommand.FLY_PRESENT_HEADING,

    # Speed
    "sp": TransmitCommand.SPEED,
    "speed": TransmitCommand.SPEED,

    # Navigation
    "dct": TransmitCommand.DIRECT,
    "direct": TransmitCommand.DIRECT,
    "pd": TransmitCommand.DIRECT,
    "f": TransmitCommand.FIX,
    "fix": TransmitCommand.FIX,
    "track": TransmitCommand.FIX,
    "hold": TransmitCommand.HOLD,
    "route": TransmitCommand.ROUTE,
    "rr": TransmitCommand.REROUTE,
    "reroute": TransmitCommand.REROUTE,
    "sr": TransmitCommand.SAY_ROUTE,
    "sid": TransmitCommand.SID,
    "star": TransmitCommand.STAR,
    "caf": TransmitCommand.CLEARED_AS_FILED,

    # Ground and runway
    "taxi": TransmitCommand.TAXI,
    "wait": TransmitCommand.TAXI,
    "w": TransmitCommand.TAXI,
    "to": TransmitCommand.TAKEOFF,
    "cto": TransmitCommand.TAKEOFF,
    "takeoff": TransmitCommand.TAKEOFF,
    "i": TransmitCommand.LAND,
    "ils": TransmitCommand.LAND,
    "land": TransmitCommand.LAND,
    "abort": TransmitCommand.ABORT,

    # Misc
    "sq": TransmitCommand.SQUAWK,
    "squawk": TransmitCommand.SQUAWK,
    "del": TransmitCommand.DELETE,
    "delete": TransmitCommand.DELETE,
    "kill": TransmitCommand.DELETE,
}

# Arrow keys typed into the command bar, keyed by their escape text, and the
# textual alias each arrow stands in for
UNICODE_ALIASES: Dict[str, str] = {
    "\\u2190": "t",
    "\\u2192": "t",
    "\\u2191": "climb",
    "\\u2193": "descend",
}

# Left/right arrows imply the turn direction for the heading command
UNICODE_TURN_DIRECTIONS: Dict[str, TurnDirection] = {
    "\\u2190": TurnDirection.LEFT,
    "\\u2192": TurnDirection.RIGHT,
}

UNICODE_COMMAND_MAP: Dict[str, Tuple[TransmitCommand, Optional[TurnDirection]]] = {
    escape: (COMMAND_MAP[alias], UNICODE_TURN_DIRECTIONS.get(escape))
    for escape, alias in UNICODE_ALIASES.items()
}


def is_unicode_token(token: str) -> bool:
    """True when the token is a single non-latin-1 character, e.g. an arrow key"""
    return len(token) == 1 and ord(token) > 0xFF


def unicode_to_string(token: str) -> str:
    """
    Convert a single unicode character to its escape text

    Examples:
        "←" (left arrow) -> "\\u2190"

    Args:
        token: Single character

    Returns:
        Escape text in the form \\uXXXX
    """
    return f"\\u{ord(token):04x}"


def find_system_command(token: str) -> Optional[SystemCommand]:
    """
    Get the system command an alias refers to

    The transmit marker is never returned, a line starting with it is
    addressed to an aircraft called "transmit".

    Args:
        token: Lower-case alias

    Returns:
        SystemCommand or None if the token is not a system command
    """
    command = SYSTEM_COMMANDS.get(token)
    if command is SystemCommand.TRANSMIT:
        return None

    return command


def resolve_transmit_token(token: str) -> Optional[Tuple[TransmitCommand, Optional[TurnDirection]]]:
    """
    Resolve a token to a transmit command and the turn direction it implies

    Args:
        token: Lower-case alias or arrow character

    Returns:
        (command, implied turn direction) tuple, or None if the token is not a command
    """
    if is_unicode_token(token):
        return UNICODE_COMMAND_MAP.get(unicode_to_string(token))

    command = COMMAND_MAP.get(token)
    if command is None:
        return None

    return (command, None)


def find_transmit_command(token: str) -> Optional[TransmitCommand]:
    """Get the transmit command an alias or arrow refers to"""
    resolved = resolve_transmit_token(token)
    if resolved is None:
        return None

    return resolved[0]


def is_system_command(token: str) -> bool:
    """True when the token is a system command alias"""
    return find_system_command(token) is not None


def is_transmit_command(token: str) -> bool:
    """True when the token is a transmit command alias or arrow"""
    return find_transmit_command(token) is not None
