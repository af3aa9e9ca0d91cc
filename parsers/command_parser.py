"""
Parser for operator command lines

Everything comes in as a single string typed into the command bar, e.g.:
    - timewarp 50
    - AA777 fh 0270 d 050 sp 200
    - AA777 hold dumba left 2min

Commands fall into two categories:
    - System commands are single argument commands for the application
      itself (timewarp, pause, airport, ...)
    - Transmit commands are instructions for one aircraft. A line starts with
      the callsign followed by one or more commands, each with zero or more
      arguments.

A line moves through these steps:
    - split into tokens
    - grouped into CommandModel objects, one per command alias
    - every command's arguments validated (count and format)
    - every command's arguments parsed, only when all of them validated
"""
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Tuple
from models.command import CommandArgumentError, CommandModel, CommandValidationError
from models.command_kind import SystemCommand
from utils.command_map import find_system_command, resolve_transmit_token
from utils.constants import COMMAND_ARGS_SEPARATOR

logger = logging.getLogger(__name__)


@dataclass
class CommandParseResult:
    """
    Outcome of interpreting one command line.

    Either every command validated and was parsed (errors is empty), or errors
    lists every problem found and no command was parsed.
    """
    command: str
    callsign: str = ""
    command_list: List[CommandModel] = field(default_factory=list)
    errors: List[CommandArgumentError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def is_transmit(self) -> bool:
        return self.command == SystemCommand.TRANSMIT.value

    @property
    def args(self) -> List[Any]:
        """
        Arguments in the shape the dispatcher expects

        System command: the parsed arguments of the single command
        Transmit command: [name, *parsed_args] for each command in order
        """
        if not self.is_transmit:
            if not self.command_list:
                return []
            return list(self.command_list[0].parsed_args)

        return [command.name_and_args for command in self.command_list]

    def raise_for_errors(self):
        """Raise CommandValidationError when the line did not validate"""
        if self.errors:
            raise CommandValidationError(self.errors)


def _tokenize(raw_command: str) -> List[str]:
    """Lower-case the line and split it on the argument separator"""
    return raw_command.strip().lower().split(COMMAND_ARGS_SEPARATOR)


def _build_system_command(system_command: SystemCommand, tokens: Sequence[str]) -> CommandModel:
    """
    Build the CommandModel for a system command

    Only the first non-empty token after the command name is used as an argument.
    """
    command = CommandModel(system_command)
    arg_tokens = [token for token in tokens[1:] if token != ""]
    if arg_tokens:
        command.add_arg(arg_tokens[0])

    if len(arg_tokens) > 1:
        logger.debug(f"Ignoring extra tokens for system command {system_command.value}: {arg_tokens[1:]}")

    command.seal()
    return command


def _build_command_list(tokens: Sequence[str]) -> Tuple[List[CommandModel], List[CommandArgumentError]]:
    """
    Group tokens into CommandModel objects

    Tokens are a mix of commands and arguments, e.g.
    [cmd, arg, arg, cmd, cmd, arg]. Each command token starts a new
    CommandModel and every following non-command token is added to it as an
    argument until the next command token.

    A non-command token before any command has nothing to attach to and is
    reported as an error.

    Args:
        tokens: Tokens following the callsign

    Returns:
        (command list, grouping errors) tuple
    """
    command_list: List[CommandModel] = []
    errors: List[CommandArgumentError] = []
    current: Optional[CommandModel] = None

    for token in tokens:
        if token == "":
            continue

        resolved = resolve_transmit_token(token)
        if resolved is not None:
            if current is not None:
                command_list.append(current)

            transmit_command, implied_direction = resolved
            current = CommandModel(transmit_command)
            if implied_direction is not None:
                current.add_arg(implied_direction.value)
            continue

        if current is None:
            errors.append(CommandArgumentError(
                command=token,
                args=(),
                message=f"'{token}' is not a recognized command"
            ))
            continue

        current.add_arg(token)

    if current is not None:
        command_list.append(current)

    for command in command_list:
        command.seal()

    return command_list, errors


def _validate_command_arguments(command_list: Sequence[CommandModel]) -> List[CommandArgumentError]:
    """Validate every command and collect all errors, in command order"""
    errors = []
    for command in command_list:
        message = command.validate_args()
        if message:
            errors.append(CommandArgumentError(
                command=command.name,
                args=tuple(command.args),
                message=message
            ))

    return errors


def interpret(raw_command: str) -> CommandParseResult:
    """
    Interpret one operator command line

    Args:
        raw_command: Text in the command bar when the operator pressed enter

    Returns:
        CommandParseResult holding either the fully parsed commands or every
        validation error found in the line

    Raises:
        TypeError: raw_command is not a string
    """
    if not isinstance(raw_command, str):
        raise TypeError(f"Invalid parameter. Expected a string but received {type(raw_command).__name__}")

    tokens = _tokenize(raw_command)
    callsign_or_system_command = tokens[0]

    if callsign_or_system_command == "":
        return CommandParseResult(
            command=SystemCommand.TRANSMIT.value,
            errors=[CommandArgumentError(command="", args=(), message="No input given")]
        )

    system_command = find_system_command(callsign_or_system_command)
    if system_command is not None:
        result = CommandParseResult(
            command=system_command.value,
            command_list=[_build_system_command(system_command, tokens)]
        )
    else:
        command_list, errors = _build_command_list(tokens[1:])
        result = CommandParseResult(
            command=SystemCommand.TRANSMIT.value,
            callsign=callsign_or_system_command.upper(),
            command_list=command_list,
            errors=errors
        )

        if not command_list and not errors:
            result.errors.append(CommandArgumentError(
                command=result.callsign,
                args=(),
                message=f"No command given for {result.callsign}"
            ))

    result.errors.extend(_validate_command_arguments(result.command_list))

    if result.errors:
        logger.debug(f"Rejected command line '{raw_command}': {len(result.errors)} error(s)")
        return result

    for command in result.command_list:
        command.parse_args()

    logger.debug(f"Interpreted '{raw_command}' as {result.command} {result.callsign} {result.args}")
    return result


class CommandParser:
    """
    Parse a command line and raise on invalid input

    Attributes:
        command: "transmit" or the system command name
        callsign: Aircraft callsign, empty for system commands
        command_list: Parsed CommandModel objects in typed order

    Raises:
        TypeError: raw_command is not a string
        CommandValidationError: one or more commands did not validate, carrying
            every error found in the line
    """

    def __init__(self, raw_command: str = ""):
        """Initialize the parser"""
        result = interpret(raw_command)
        result.raise_for_errors()

        self._result = result
        self.command = result.command
        self.callsign = result.callsign
        self.command_list = result.command_list

    @property
    def args(self) -> List[Any]:
        """See CommandParseResult.args"""
        return self._result.args
