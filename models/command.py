"""
Command Model

This module defines the data model for a single command and its arguments as
typed by the operator, along with the errors raised when arguments fail
validation.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence, Tuple, Union
from models.command_kind import SystemCommand, TransmitCommand
from utils.argument_parsers import get_parser
from utils.argument_validators import get_validator


@dataclass
class CommandModel:
    """
    Represents one command and its arguments.

    Attributes:
        kind: Canonical command (SystemCommand or TransmitCommand)
        args: Raw argument strings in the order they were typed. A list while
              the command line is being grouped, sealed to a tuple afterwards.
        parsed_args: Typed arguments, empty until parse_args() has run
    """
    kind: Union[SystemCommand, TransmitCommand]
    args: Union[List[str], Tuple[str, ...]] = field(default_factory=list)
    parsed_args: Tuple[Any, ...] = ()

    def __post_init__(self):
        """Validate the command kind"""
        if not isinstance(self.kind, (SystemCommand, TransmitCommand)):
            raise TypeError(f"Invalid command kind: {self.kind!r}")

        if self.kind is SystemCommand.TRANSMIT:
            raise ValueError("'transmit' marks a transmit line and cannot be used as a command")

    @property
    def name(self) -> str:
        """Canonical command name"""
        return self.kind.value

    @property
    def is_system(self) -> bool:
        return isinstance(self.kind, SystemCommand)

    @property
    def name_and_args(self) -> List[Any]:
        """[name, *parsed_args], the shape the aircraft command dispatcher expects"""
        return [self.name, *self.parsed_args]

    def add_arg(self, arg: str):
        """Append a raw argument while the command line is being grouped"""
        if isinstance(self.args, tuple):
            raise ValueError(f"Arguments for '{self.name}' are sealed")
        self.args.append(arg)

    def seal(self):
        """Freeze the raw arguments once grouping is complete"""
        self.args = tuple(self.args)

    def validate_args(self) -> Optional[str]:
        """
        Check argument count and format against this command's rule.

        Returns:
            Error message, or None when the arguments are valid
        """
        validator = get_validator(self.kind)
        return validator(self.args)

    def parse_args(self):
        """Convert the raw arguments to typed values"""
        error = self.validate_args()
        if error:
            raise ValueError(f"Cannot parse arguments for '{self.name}': {error}")

        parser = get_parser(self.kind)
        self.parsed_args = tuple(parser(self.args))

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        return {
            "name": self.name,
            "args": list(self.args),
            "parsed_args": list(self.parsed_args)
        }


@dataclass
class CommandArgumentError:
    """
    One validation problem found in a command line.

    Attributes:
        command: Canonical command name, or the offending token when it did
                 not resolve to a command
        args: Raw arguments given to the command
        message: What is wrong
    """
    command: str
    args: Tuple[str, ...]
    message: str

    def __str__(self) -> str:
        return f"{self.command}: {self.message}"


class CommandValidationError(ValueError):
    """Raised with every validation problem found in one command line"""

    def __init__(self, errors: Sequence[CommandArgumentError]):
        if not errors:
            raise ValueError("CommandValidationError requires at least one error")

        self.errors: List[CommandArgumentError] = list(errors)
        super().__init__("; ".join(str(error) for error in self.errors))
