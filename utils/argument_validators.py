"""
Argument validators for system and transmit commands

Each validator receives the raw argument strings of one command and returns an
error message, or None when the arguments are acceptable.
"""
import re
from typing import Callable, Dict, List, Optional, Sequence, Union
from models.command_kind import SystemCommand, TransmitCommand

Validator = Callable[[Sequence[str]], Optional[str]]

TURN_DIRECTION_TOKENS = ["l", "left", "r", "right"]
EXPEDITE_TOKENS = ["expedite", "x"]

HOLD_LEG_LENGTH_PATTERN = re.compile(r'^\d+(\.\d+)?(min|nm)$', re.ASCII)
SQUAWK_PATTERN = re.compile(r'^[0-7]{4}$')
AIRPORT_PATTERN = re.compile(r'^[a-z0-9]{3,4}$')
DIGITS_PATTERN = re.compile(r'\d+', re.ASCII)
NUMBER_PATTERN = re.compile(r'\d+(\.\d+)?', re.ASCII)


def _is_number(value: str) -> bool:
    """True for plain integer or decimal strings"""
    return NUMBER_PATTERN.fullmatch(value) is not None


def _is_whole_number(value: str) -> bool:
    """True for strings of ASCII digits only, so int() always accepts them"""
    return DIGITS_PATTERN.fullmatch(value) is not None


def zero_argument_validator(args: Sequence[str]) -> Optional[str]:
    if len(args) != 0:
        return "Invalid argument length. Expected exactly zero arguments"
    return None


def single_argument_validator(args: Sequence[str]) -> Optional[str]:
    if len(args) != 1:
        return "Invalid argument length. Expected exactly one argument"
    return None


def zero_or_one_argument_validator(args: Sequence[str]) -> Optional[str]:
    if len(args) > 1:
        return "Invalid argument length. Expected zero or one argument"
    return None


def one_or_more_argument_validator(args: Sequence[str]) -> Optional[str]:
    if len(args) < 1:
        return "Invalid argument length. Expected one or more arguments"
    return None


def airport_validator(args: Sequence[str]) -> Optional[str]:
    error = single_argument_validator(args)
    if error:
        return error

    if not AIRPORT_PATTERN.match(args[0]):
        return f"Invalid argument. Expected an airport ICAO identifier but received '{args[0]}'"
    return None


def rate_validator(args: Sequence[str]) -> Optional[str]:
    error = single_argument_validator(args)
    if error:
        return error

    if not _is_number(args[0]) or float(args[0]) <= 0:
        return f"Invalid argument. Expected a positive number but received '{args[0]}'"
    return None


def timewarp_validator(args: Sequence[str]) -> Optional[str]:
    error = zero_or_one_argument_validator(args)
    if error:
        return error

    if args and not _is_whole_number(args[0]):
        return f"Invalid argument. Expected a whole number but received '{args[0]}'"
    return None


def altitude_validator(args: Sequence[str]) -> Optional[str]:
    """
    Validate an altitude command

    Accepts the altitude in hundreds of feet, optionally followed by an
    expedite flag (e.g. "050", "180 x").
    """
    if len(args) < 1 or len(args) > 2:
        return "Invalid argument length. Expected one or two arguments"

    if not _is_whole_number(args[0]):
        return f"Invalid argument. Altitude must be a number but received '{args[0]}'"

    if len(args) == 2 and args[1] not in EXPEDITE_TOKENS:
        return f"Invalid argument. Expected one of {EXPEDITE_TOKENS} but received '{args[1]}'"
    return None


def optional_altitude_validator(args: Sequence[str]) -> Optional[str]:
    error = zero_or_one_argument_validator(args)
    if error:
        return error

    if args and not _is_whole_number(args[0]):
        return f"Invalid argument. Altitude must be a number but received '{args[0]}'"
    return None


def heading_validator(args: Sequence[str]) -> Optional[str]:
    """
    Validate a heading command

    Forms:
        [heading]               e.g. "270"
        [direction, heading]    e.g. "l 270" (absolute) or "l 20" (turn 20 degrees)
    """
    if len(args) < 1 or len(args) > 2:
        return "Invalid argument length. Expected one or two arguments"

    if len(args) == 2 and args[0] not in TURN_DIRECTION_TOKENS:
        return f"Invalid argument. Expected one of {TURN_DIRECTION_TOKENS} but received '{args[0]}'"

    heading = args[-1]
    if not _is_whole_number(heading):
        return f"Invalid argument. Heading must be a number but received '{heading}'"

    is_incremental = len(args) == 2 and len(heading) <= 2
    if is_incremental and int(heading) == 0:
        return f"Invalid argument. Turn must be at least 1 degree but received '{heading}'"
    if not is_incremental and not 1 <= int(heading) <= 360:
        return f"Invalid argument. Heading must be between 001 and 360 but received '{heading}'"
    return None


def speed_validator(args: Sequence[str]) -> Optional[str]:
    error = single_argument_validator(args)
    if error:
        return error

    if not _is_whole_number(args[0]):
        return f"Invalid argument. Speed must be a number but received '{args[0]}'"
    return None


def squawk_validator(args: Sequence[str]) -> Optional[str]:
    error = single_argument_validator(args)
    if error:
        return error

    if not SQUAWK_PATTERN.match(args[0]):
        return f"Invalid argument. Expected a four digit octal code but received '{args[0]}'"
    return None


def hold_validator(args: Sequence[str]) -> Optional[str]:
    """
    Validate a hold command

    Up to three arguments in any order: fix name, turn direction and leg
    length ("2min", "5nm"). At most one of each.
    """
    if len(args) > 3:
        return "Invalid argument length. Expected zero to three arguments"

    directions = [arg for arg in args if arg in TURN_DIRECTION_TOKENS]
    leg_lengths = [arg for arg in args if HOLD_LEG_LENGTH_PATTERN.match(arg)]
    fixes = [arg for arg in args if arg not in directions and arg not in leg_lengths]

    if len(directions) > 1:
        return "Invalid argument. Expected at most one turn direction"
    if len(leg_lengths) > 1:
        return "Invalid argument. Expected at most one leg length"
    if len(fixes) > 1:
        return "Invalid argument. Expected at most one fix name"
    return None


VALIDATORS: Dict[Union[SystemCommand, TransmitCommand], Validator] = {
    # System
    SystemCommand.AIRPORT: airport_validator,
    SystemCommand.AUTO: zero_argument_validator,
    SystemCommand.CLEAR: zero_argument_validator,
    SystemCommand.PAUSE: zero_argument_validator,
    SystemCommand.RATE: rate_validator,
    SystemCommand.TIMEWARP: timewarp_validator,
    SystemCommand.TUTORIAL: zero_argument_validator,

    # Transmit
    TransmitCommand.ABORT: zero_argument_validator,
    TransmitCommand.ALTITUDE: altitude_validator,
    TransmitCommand.CLEARED_AS_FILED: zero_argument_validator,
    TransmitCommand.CLIMB_VIA_SID: optional_altitude_validator,
    TransmitCommand.DESCEND_VIA_STAR: optional_altitude_validator,
    TransmitCommand.DELETE: zero_argument_validator,
    TransmitCommand.DIRECT: single_argument_validator,
    TransmitCommand.FIX: one_or_more_argument_validator,
    TransmitCommand.FLY_PRESENT_HEADING: zero_argument_validator,
    TransmitCommand.HEADING: heading_validator,
    TransmitCommand.HOLD: hold_validator,
    TransmitCommand.LAND: single_argument_validator,
    TransmitCommand.REROUTE: single_argument_validator,
    TransmitCommand.ROUTE: single_argument_validator,
    TransmitCommand.SAY_ROUTE: zero_argument_validator,
    TransmitCommand.SID: single_argument_validator,
    TransmitCommand.SPEED: speed_validator,
    TransmitCommand.SQUAWK: squawk_validator,
    TransmitCommand.STAR: single_argument_validator,
    TransmitCommand.TAKEOFF: zero_argument_validator,
    TransmitCommand.TAXI: zero_or_one_argument_validator,
}


def get_validator(kind: Union[SystemCommand, TransmitCommand]) -> Validator:
    """Get the validator for a command kind"""
    return VALIDATORS[kind]


def list_validated_commands() -> List[str]:
    """Canonical names of every command with a validation rule"""
    return sorted(kind.value for kind in VALIDATORS)
