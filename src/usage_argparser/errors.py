"""
Error types raised or returned by UsageArgParser.

Every error carries a kind, a human readable message and, for positional
arguments, the 1-based position involved. Whether an error ends the process
or reaches the caller is decided by the ExitPolicy given to the parser.
"""

import enum
from typing import Optional


class ErrorKind(enum.Enum):
    SPECIFICATION = "specification"
    VALUE = "value"
    LOOKUP = "lookup"
    STATE = "state"
    REQUIRED = "required"
    HELP = "help"


class ExitPolicy(enum.Enum):
    """What happens when a fatal error reaches the parser's error policy."""

    # raise the LappError for the caller to handle
    RAISE = "raise"
    # print the message and terminate the process with the error's exit code
    EXIT = "exit"


class LappError(Exception):
    """Base class for all errors produced while parsing usage text or arguments."""

    kind: ErrorKind = ErrorKind.VALUE
    exit_code: int = 1

    def __init__(self, message: str, position: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.position = position

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LappError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.message == other.message
            and self.position == other.position
        )

    def __hash__(self) -> int:
        return hash((type(self), self.message, self.position))


class SpecificationError(LappError):
    """The usage text itself is malformed."""

    kind = ErrorKind.SPECIFICATION


class FlagValueError(LappError, ValueError):
    """A raw value could not be coerced, or violates a flag's constraint."""

    kind = ErrorKind.VALUE


class FlagLookupError(LappError, LookupError):
    """An undeclared long name, short flag or position was referenced."""

    kind = ErrorKind.LOOKUP


class FlagStateError(LappError):
    """A flag that may only be given once was given again."""

    kind = ErrorKind.STATE


class RequiredFlagError(LappError):
    kind = ErrorKind.REQUIRED


class HelpRequested(LappError):
    """
    Raised when -h/--help was matched. The message holds the usage text and
    the exit code signals success.
    """

    kind = ErrorKind.HELP
    exit_code = 0
