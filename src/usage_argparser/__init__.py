"""
usage_argparser - command-line parsing driven by a program's usage text.

The text that documents a program's flags also declares them: names, short
forms, types, defaults, ranges, repeatable flags and positional arguments.
Values are matched GNU-style from the command line (and optionally a YAML or
JSON config file) and read back through typed accessors.
"""

from .errors import (
    ErrorKind,
    ExitPolicy,
    FlagLookupError,
    FlagStateError,
    FlagValueError,
    HelpRequested,
    LappError,
    RequiredFlagError,
    SpecificationError,
)
from .flag import FlagDefinition, RangeConstraint
from .parser import UsageArgParser, parse_args
from .values import Kind, Type, Value

__version__ = "1.0.0"
__all__ = [
    "UsageArgParser",
    "parse_args",
    "FlagDefinition",
    "RangeConstraint",
    "Kind",
    "Type",
    "Value",
    "ErrorKind",
    "ExitPolicy",
    "LappError",
    "SpecificationError",
    "FlagValueError",
    "FlagLookupError",
    "FlagStateError",
    "RequiredFlagError",
    "HelpRequested",
]
