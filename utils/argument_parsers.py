"""
Argument parsers for system and transmit commands

Parsers turn validated raw argument strings into typed values. They assume the
matching validator in utils.argument_validators has already accepted the
arguments.
"""
from typing import Any, Callable, Dict, List, Optional, Sequence, Union
from models.command_kind import SystemCommand, TransmitCommand, TurnDirection
from utils.argument_validators import (
    EXPEDITE_TOKENS,
    HOLD_LEG_LENGTH_PATTERN,
    TURN_DIRECTION_TOKENS
)
from utils.constants import (
    DEFAULT_HOLD_LEG_LENGTH,
    DEFAULT_HOLD_TURN_DIRECTION,
    FEET_PER_FLIGHT_LEVEL_UNIT
)

Parser = Callable[[Sequence[str]], List[Any]]


def parse_turn_direction(value: str) -> TurnDirection:
    """
    Convert a direction token to a TurnDirection

    Args:
        value: One of "l", "left", "r", "right"

    Returns:
        TurnDirection
    """
    if value in ("l", "left"):
        return TurnDirection.LEFT
    if value in ("r", "right"):
        return TurnDirection.RIGHT
    raise ValueError(f"Invalid turn direction: {value}")


def convert_altitude(value: str) -> int:
    """Convert an altitude typed in hundreds of feet to feet ("050" -> 5000)"""
    return int(value) * FEET_PER_FLIGHT_LEVEL_UNIT


def no_argument_parser(args: Sequence[str]) -> List[Any]:
    return []


def upper_case_parser(args: Sequence[str]) -> List[Any]:
    return [arg.upper() for arg in args]


def string_parser(args: Sequence[str]) -> List[Any]:
    return list(args)


def rate_parser(args: Sequence[str]) -> List[Any]:
    return [float(args[0])]


def integer_parser(args: Sequence[str]) -> List[Any]:
    return [int(arg) for arg in args]


def altitude_parser(args: Sequence[str]) -> List[Any]:
    """
    Parse an altitude command

    Returns:
        [altitude in feet, expedite flag]
    """
    expedite = len(args) == 2 and args[1] in EXPEDITE_TOKENS
    return [convert_altitude(args[0]), expedite]


def optional_altitude_parser(args: Sequence[str]) -> List[Any]:
    if not args:
        return []
    return [convert_altitude(args[0])]


def heading_parser(args: Sequence[str]) -> List[Any]:
    """
    Parse a heading command

    A two digit heading given with a direction is a relative turn by that many
    degrees, anything else is an absolute heading.

    Returns:
        [TurnDirection or None, heading, is_incremental]
    """
    direction: Optional[TurnDirection] = None
    if len(args) == 2:
        direction = parse_turn_direction(args[0])

    heading = args[-1]
    is_incremental = direction is not None and len(heading) <= 2

    return [direction, int(heading), is_incremental]


def hold_parser(args: Sequence[str]) -> List[Any]:
    """
    Parse a hold command

    Returns:
        [fix name or None (hold at present position), TurnDirection, leg length]
    """
    fix_name = None
    direction = parse_turn_direction(DEFAULT_HOLD_TURN_DIRECTION)
    leg_length = DEFAULT_HOLD_LEG_LENGTH

    for arg in args:
        if arg in TURN_DIRECTION_TOKENS:
            direction = parse_turn_direction(arg)
        elif HOLD_LEG_LENGTH_PATTERN.match(arg):
            leg_length = arg
        else:
            fix_name = arg.upper()

    return [fix_name, direction, leg_length]


PARSERS: Dict[Union[SystemCommand, TransmitCommand], Parser] = {
    # System
    SystemCommand.AIRPORT: upper_case_parser,
    SystemCommand.AUTO: no_argument_parser,
    SystemCommand.CLEAR: no_argument_parser,
    SystemCommand.PAUSE: no_argument_parser,
    SystemCommand.RATE: rate_parser,
    SystemCommand.TIMEWARP: integer_parser,
    SystemCommand.TUTORIAL: no_argument_parser,

    # Transmit
    TransmitCommand.ABORT: no_argument_parser,
    TransmitCommand.ALTITUDE: altitude_parser,
    TransmitCommand.CLEARED_AS_FILED: no_argument_parser,
    TransmitCommand.CLIMB_VIA_SID: optional_altitude_parser,
    TransmitCommand.DESCEND_VIA_STAR: optional_altitude_parser,
    TransmitCommand.DELETE: no_argument_parser,
    TransmitCommand.DIRECT: upper_case_parser,
    TransmitCommand.FIX: upper_case_parser,
    TransmitCommand.FLY_PRESENT_HEADING: no_argument_parser,
    TransmitCommand.HEADING: heading_parser,
    TransmitCommand.HOLD: hold_parser,
    TransmitCommand.LAND: upper_case_parser,
    TransmitCommand.REROUTE: upper_case_parser,
    TransmitCommand.ROUTE: upper_case_parser,
    TransmitCommand.SAY_ROUTE: no_argument_parser,
    TransmitCommand.SID: upper_case_parser,
    TransmitCommand.SPEED: integer_parser,
    TransmitCommand.SQUAWK: string_parser,
    TransmitCommand.STAR: upper_case_parser,
    TransmitCommand.TAKEOFF: no_argument_parser,
    TransmitCommand.TAXI: upper_case_parser,
}


def get_parser(kind: Union[SystemCommand, TransmitCommand]) -> Parser:
    """Get the parser for a command kind"""
    return PARSERS[kind]
