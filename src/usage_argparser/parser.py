"""
UsageArgParser - command-line parsing driven by a program's usage text.

The usage text that documents a program's flags is also the specification
of those flags: their names, types, defaults, multiplicity and whether they
are required. This module parses that text into FlagDefinitions, matches the
program's arguments against them GNU-style, and provides typed accessors for
the results. Values can additionally be supplied from a YAML or JSON config
file.
"""

import json
import logging
import os
import sys
from collections.abc import Mapping
from typing import IO, Any, Callable, Iterable, NoReturn, Optional, Union

import yaml
from result import Err, Ok, Result

from .errors import (
    ExitPolicy,
    FlagLookupError,
    FlagValueError,
    HelpRequested,
    LappError,
    RequiredFlagError,
    SpecificationError,
)
from .flag import Constraint, FlagDefinition, RangeConstraint
from .scanner import END, Scanner, dedent
from .values import BOOL, BUILTIN_TYPE_NAMES, STRING, Kind, Type, Value

logger = logging.getLogger(__name__)

ErrorHandler = Callable[[LappError], Any]

MULTIPLE = "..."


def _is_long_name_char(c: str) -> bool:
    return c.isalnum() or c in "_-"


def _config_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class UsageArgParser:
    """
    A command-line parser whose flags are declared by usage text.

    Each line starting with '-' or '<' (after indentation) declares one flag
    or positional argument; any other line is free-form documentation:

        Copy lines between files
          -v, --verbose          verbose output
          -n, --lines (1..100)   number of lines to copy
          -I, --include... (string)  directories to search, repeatable
          -p (integer...)        several integers in one value, e.g. '10 20 30'
          --mode (string default 'fast')
          <in> (default stdin)   input file
          <out>... (string)      any number of outputs

    A flag without a "(...)" specifier is a bool defaulting to false. A flag
    with a type but no default is required. "..." after the name lets the
    flag repeat (a positional then swallows the remaining arguments); "..."
    inside the parentheses makes a flag's single value a list. Names
    registered as custom types are stored as strings and can be converted
    by the caller with `get_as`.

    Example:
        parser = UsageArgParser(USAGE, on_error=ExitPolicy.RAISE)
        parser.parse(["-v", "--lines", "10", "notes.txt"])
        parser.get_bool("verbose")   # True
        parser.get_integer("lines")  # 10

    Errors are either returned (`safe_*` methods, as `result.Result`) or
    handed to the error policy given at construction (all other methods).
    """

    def __init__(
        self,
        text: str,
        on_error: Union[ExitPolicy, ErrorHandler] = ExitPolicy.EXIT,
        custom_types: Iterable[str] = (),
        prog: Optional[str] = None,
    ) -> None:
        """
        Args:
            text: The usage text declaring flags and positional arguments.
            on_error: ExitPolicy.EXIT prints the error and exits,
                ExitPolicy.RAISE raises it; a callable receives the error
                and is expected not to return.
            custom_types: Extra type names accepted inside "(...)".
            prog: Program name used in error messages (default: argv[0]).
        """
        self.text = text
        self.on_error = on_error
        self.prog = prog
        self.custom_types: set[str] = set()
        for name in custom_types:
            self.register_type(name)

        self._flags: list[FlagDefinition] = []
        self._by_long: dict[str, FlagDefinition] = {}
        self._by_short: dict[str, FlagDefinition] = {}
        self._by_position: dict[int, FlagDefinition] = {}
        self._position = 0
        self._varargs: Optional[FlagDefinition] = None
        self._spec_parsed = False
        self._matched = False

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} flags={[f.long_name for f in self._flags]}>"

    @property
    def flags(self) -> tuple[FlagDefinition, ...]:
        return tuple(self._flags)

    def register_type(self, name: str) -> None:
        """Accept `name` as a type in usage text. Its values are stored as strings."""
        if not name or not all(_is_long_name_char(c) for c in name):
            raise ValueError(f"Invalid custom type name: {name!r}")
        if name in BUILTIN_TYPE_NAMES or name == "default":
            raise ValueError(f"Custom type name conflicts with a built-in: {name}")
        self.custom_types.add(name)

    # -- error policy --------------------------------------------------

    def _prog_name(self) -> str:
        if self.prog:
            return self.prog
        if sys.argv and sys.argv[0]:
            return os.path.basename(sys.argv[0])
        return "program"

    def _fail(self, error: LappError) -> NoReturn:
        """Hand a fatal error to the configured policy."""
        if not isinstance(self.on_error, ExitPolicy):
            self.on_error(error)
            raise error
        if self.on_error is ExitPolicy.RAISE:
            raise error
        if isinstance(error, HelpRequested):
            sys.stdout.write(error.message)
            sys.stdout.flush()
        else:
            sys.stderr.write(f"{self._prog_name()} error: {error.message}\n")
        sys.exit(error.exit_code)

    def _unwrap(self, result: Result[Any, LappError]) -> Any:
        if result.is_err():
            self._fail(result.unwrap_err())
        return result.unwrap()

    @staticmethod
    def _safe(func: Callable[..., Any], *args: Any) -> Result[Any, LappError]:
        try:
            return Ok(func(*args))
        except LappError as e:
            return Err(e)

    def quit(self, message: str) -> NoReturn:
        """Report an error detected by the caller, through the same policy."""
        self._fail(LappError(message))

    # -- specification parsing -----------------------------------------

    def safe_parse_spec(self) -> Result[None, LappError]:
        """Parse the usage text, returning Err(SpecificationError) if it is malformed."""
        return self._safe(self._parse_spec)

    def parse_spec(self) -> None:
        self._unwrap(self.safe_parse_spec())

    def _parse_spec(self) -> None:
        self._flags = []
        self._by_long = {}
        self._by_short = {}
        self._by_position = {}
        self._position = 0
        self._varargs = None
        self._spec_parsed = False
        self._matched = False

        for lineno, line in enumerate(self.text.splitlines(), start=1):
            try:
                self._parse_spec_line(line)
            except SpecificationError as e:
                raise SpecificationError(f"line {lineno}: {e.message}") from e

        if "help" not in self._by_long:
            self._add_flag(
                FlagDefinition(
                    "help",
                    short_char=None if "h" in self._by_short else "h",
                    value_type=BOOL,
                    default=Value.of_bool(False),
                    default_text="false",
                    help="this help",
                )
            )
        self._spec_parsed = True

    def _parse_spec_line(self, line: str) -> None:
        scan = Scanner(line)
        if not scan.skip_whitespace():
            return
        if scan.peek() == "-":
            flag = self._parse_flag_head(scan)
        elif scan.peek() == "<":
            flag = self._parse_positional_head(scan)
        else:
            # documentation
            return

        if scan.skip(MULTIPLE):
            flag.is_multiple = True
        scan.skip_whitespace()
        if scan.peek() == "(":
            scan.advance()
            body = scan.take_until(")")
            if scan.advance() != ")":
                raise SpecificationError(
                    f"missing ')' after type of {flag.display_name()}"
                )
            self._parse_type_spec(flag, body)
        elif flag.is_positional:
            flag.value_type = STRING
        else:
            flag.value_type = BOOL
            if not flag.is_multiple:
                flag.default = Value.of_bool(False)
                flag.default_text = "false"

        flag.help = scan.rest().strip()
        if flag.is_multiple:
            flag.value = Value.array()
        self._add_flag(flag)

    def _parse_flag_head(self, scan: Scanner) -> FlagDefinition:
        scan.advance()
        short = None
        long = ""
        if scan.peek() != "-":
            short = scan.advance()
            if not short.isalnum():
                raise SpecificationError(
                    f"{short!r} isn't allowed: only letters or digits in short flags"
                )
            if scan.skip(","):
                scan.skip_whitespace()
                if not scan.skip("--"):
                    raise SpecificationError(
                        f"expected long flag after short flag '-{short}'"
                    )
                long = self._take_long_name(scan)
            elif not (scan.at_end or scan.peek().isspace() or scan.starts_with(MULTIPLE)):
                raise SpecificationError(
                    f"'-{short}{scan.peek()}' isn't allowed: short flag not followed by comma or space"
                )
        else:
            scan.advance()
            long = self._take_long_name(scan)
        return FlagDefinition(long or short, short_char=short)

    def _take_long_name(self, scan: Scanner) -> str:
        name = scan.take_while(_is_long_name_char)
        if not name:
            raise SpecificationError("missing long flag name after '--'")
        if not any(c.isalnum() for c in name):
            raise SpecificationError(
                f"'--{name}' isn't a flag: long flag names need a letter or digit"
            )
        nxt = scan.peek()
        if nxt != END and not nxt.isspace() and not scan.starts_with(MULTIPLE):
            raise SpecificationError(
                f"{nxt!r} isn't allowed: long flag chars are alphanumeric, '_' or '-'"
            )
        return name

    def _parse_positional_head(self, scan: Scanner) -> FlagDefinition:
        scan.advance()
        name = scan.take_until(">").strip()
        if scan.advance() != ">":
            raise SpecificationError(f"missing '>' after positional <{name}")
        if not name:
            raise SpecificationError("empty positional argument name")
        self._position += 1
        return FlagDefinition(name, position=self._position)

    def _parse_type_spec(self, flag: FlagDefinition, body: str) -> None:
        """
        Interpret the text between parentheses: a range `lo..hi`, a
        `default VALUE`, or a type name optionally followed by a default.
        A trailing '...' makes a positional collect the remaining arguments
        and turns a flag's type into an array.
        """
        body = body.strip()
        varargs = False
        scan = Scanner(body)
        word = scan.take_while(lambda c: not c.isspace())
        if word.endswith(MULTIPLE) and not word.startswith("'"):
            word = word[: -len(MULTIPLE)]
            varargs = True
        rest = scan.rest().strip()
        if rest.endswith(MULTIPLE) and not rest.endswith("'" + MULTIPLE):
            rest = rest[: -len(MULTIPLE)].rstrip()
            varargs = True
        if not word:
            raise SpecificationError(f"empty type specifier for {flag.display_name()}")

        literal = None
        infer = False
        if word == "default":
            literal, infer = rest, True
        elif ".." in word:
            low, high = word.split("..", 1)
            constraint = RangeConstraint.from_bounds(flag.long_name, low, high)
            flag.value_type = constraint.value_type
            flag.constraint = constraint
            literal = self._trailing_default(flag, rest)
        elif word in BUILTIN_TYPE_NAMES:
            flag.value_type = Type.from_name(word)
            literal = self._trailing_default(flag, rest)
        elif word in self.custom_types:
            flag.value_type = STRING
            literal = self._trailing_default(flag, rest)
        else:
            raise SpecificationError(f"not a known type {word}")

        # an inferred default decides the element type, an explicit type
        # decides how the default is read
        if literal is not None and infer:
            self._set_default(flag, literal, infer)
        if varargs:
            if flag.is_positional:
                flag.is_multiple = True
            else:
                flag.value_type = Type.array(flag.value_type)
        if literal is not None and not infer:
            self._set_default(flag, literal, infer)
        if flag.collects_array and flag.default.kind not in (Kind.NONE, Kind.ARRAY):
            flag.default = Value.array([flag.default])

    def _trailing_default(self, flag: FlagDefinition, rest: str) -> Optional[str]:
        if not rest:
            return None
        scan = Scanner(rest)
        if not scan.skip("default") or not (scan.at_end or scan.peek().isspace()):
            raise SpecificationError(
                f"unexpected {rest!r} in type specifier of {flag.display_name()}"
            )
        return scan.rest().strip()

    def _set_default(self, flag: FlagDefinition, literal: str, infer: bool) -> None:
        if not literal:
            raise SpecificationError(f"missing default value for {flag.display_name()}")
        if infer:
            value = Value.from_literal(literal)
            if not value.is_error:
                flag.value_type = value.type_of()
        else:
            value = Value.from_literal(literal, flag.value_type)
        value = flag.apply_constraint(value)
        if value.is_error:
            raise SpecificationError(
                f"bad default for {flag.display_name()}: {value.data}"
            )
        flag.default = value
        flag.default_text = literal

    def _add_flag(self, flag: FlagDefinition) -> None:
        if flag.long_name in self._by_long:
            raise SpecificationError(f"flag {flag.long_name} already defined")
        if flag.short_char is not None and flag.short_char in self._by_short:
            raise SpecificationError(f"short flag -{flag.short_char} already defined")
        if flag.is_positional and self._varargs is not None:
            if flag.is_multiple:
                raise SpecificationError(
                    f"{flag.display_name()}: only one positional argument may take "
                    f"multiple values, {self._varargs.display_name()} already does"
                )
            raise SpecificationError(
                f"{flag.display_name()} follows {self._varargs.display_name()}, "
                "which takes all remaining arguments"
            )

        self._flags.append(flag)
        self._by_long[flag.long_name] = flag
        if flag.short_char is not None:
            self._by_short[flag.short_char] = flag
        if flag.is_positional:
            self._by_position[flag.position] = flag
            if flag.is_multiple:
                self._varargs = flag
        logger.debug(
            "declared %s type=%r default=%r multiple=%s",
            flag.display_name(),
            flag.value_type,
            flag.default,
            flag.is_multiple,
        )

    # -- command-line matching -----------------------------------------

    def _lookup_long(self, name: str) -> FlagDefinition:
        try:
            return self._by_long[name]
        except KeyError:
            raise FlagLookupError(f"no long flag '{name}'") from None

    def _lookup_short(self, ch: str) -> FlagDefinition:
        try:
            return self._by_short[ch]
        except KeyError:
            raise FlagLookupError(f"no short flag '{ch}'") from None

    def flag(self, name: str) -> FlagDefinition:
        """Return the FlagDefinition declared with long name `name`."""
        if not self._spec_parsed:
            self.parse_spec()
        return self._lookup_long(name)

    def set_constraint(self, name: str, constraint: Constraint) -> None:
        """
        Attach a validator to a flag. It receives each coerced Value and
        returns it, or Value.error(message) to reject it.
        """
        self.flag(name).constraint = constraint

    def safe_parse_command_line(
        self,
        argv: Optional[list[str]] = None,
        config: Union[str, os.PathLike, Mapping, None] = None,
    ) -> Result[None, LappError]:
        """
        Match `argv` (default: sys.argv[1:]) against the declared flags.

        Values for flags not given on the command line may come from
        `config`, a mapping or the path of a JSON/YAML file keyed by long
        flag name. Unset flags then take their defaults.

        Returns:
            Result[None, LappError]:
                - Ok(None) once every flag has a value (or a deferred error),
                - Err with the first lookup, missing-value or repeated-flag
                  error, or HelpRequested if -h/--help was given.
        """
        if argv is None:
            argv = sys.argv[1:]
        return self._safe(self._parse_command_line, list(argv), config)

    def parse_command_line(
        self,
        argv: Optional[list[str]] = None,
        config: Union[str, os.PathLike, Mapping, None] = None,
    ) -> None:
        self._unwrap(self.safe_parse_command_line(argv, config))

    def _parse_command_line(
        self, rargs: list[str], config: Union[str, os.PathLike, Mapping, None]
    ) -> None:
        if not self._spec_parsed:
            self._parse_spec()
        self.clear()

        position = 1
        parsing = True
        while rargs:
            arg = rargs.pop(0)
            if parsing and arg == "--":
                parsing = False
            elif parsing and arg.startswith("--"):
                self._match_long(arg[2:], rargs)
            elif parsing and arg.startswith("-") and len(arg) > 1:
                self._match_short(arg[1:], rargs)
            else:
                flag = self._by_position.get(position)
                if flag is None:
                    raise FlagLookupError(
                        f"too many positional arguments: no argument at position {position} for {arg!r}",
                        position=position,
                    )
                logger.debug("positional %d %s = %r", position, flag.display_name(), arg)
                flag.set_value_from_string(arg)
                if not flag.is_multiple:
                    position += 1
        self._matched = True

        help_flag = self._by_long["help"]
        wants_help = help_flag.is_set and help_flag.value == Value.of_bool(True)
        if config is not None and not wants_help:
            self._apply_config(config)

        for flag in self._flags:
            flag.check()

        if wants_help:
            raise HelpRequested(dedent(self.text))

    def _next_value(self, flag: FlagDefinition, rargs: list[str]) -> str:
        if not rargs:
            raise FlagValueError(f"no value for flag '{flag.long_name}'")
        return rargs.pop(0)

    def _match_long(self, body: str, rargs: list[str]) -> None:
        # the value may be attached with '=' or ':'
        cut = min((i for i in (body.find("="), body.find(":")) if i >= 0), default=-1)
        if cut >= 0:
            name, inline = body[:cut], body[cut + 1 :]
        else:
            name, inline = body, None
        flag = self._lookup_long(name)
        logger.debug("long flag --%s inline=%r", name, inline)
        if inline:
            flag.set_value_from_string(inline)
        elif flag.is_bool:
            flag.set_value_from_string("true")
        else:
            flag.set_value_from_string(self._next_value(flag, rargs))

    def _match_short(self, chars: str, rargs: list[str]) -> None:
        """
        Match a group of short flags such as '-vk' or '-vn10'. Bool flags
        may be combined freely; a flag taking a value consumes the rest of
        the group (after an optional '=' or ':') or else the next argument.
        """
        scan = Scanner(chars)
        while not scan.at_end:
            flag = self._lookup_short(scan.advance())
            if flag.is_bool:
                flag.set_value_from_string("true")
                continue
            if scan.peek() in ("=", ":"):
                scan.advance()
            value = scan.rest() or self._next_value(flag, rargs)
            logger.debug("short flag -%s = %r", flag.short_char, value)
            flag.set_value_from_string(value)

    # -- config files --------------------------------------------------

    def _load_config_file(self, config_path: Union[str, os.PathLike]) -> Mapping:
        """
        Load flag values from a YAML or JSON file.

        Args:
            config_path: Path to the configuration file.

        Returns:
            Mapping of long flag names to values.

        Raises:
            FlagLookupError: If the config file doesn't exist.
            FlagValueError: If the file format is not supported or invalid.
        """
        if not os.path.exists(config_path):
            raise FlagLookupError(f"Configuration file not found: {config_path}")

        file_ext = os.path.splitext(config_path)[1].lower()

        with open(config_path, "r") as f:
            if file_ext in [".yaml", ".yml"]:
                try:
                    data = yaml.safe_load(f)
                except yaml.YAMLError as e:
                    raise FlagValueError(f"Invalid YAML file: {e}") from e
            elif file_ext == ".json":
                try:
                    data = json.load(f)
                except json.JSONDecodeError as e:
                    raise FlagValueError(f"Invalid JSON file: {e}") from e
            else:
                raise FlagValueError(
                    f"Unsupported file format: {file_ext}. "
                    "Supported formats are: .yaml, .yml, .json"
                )

        if data is None:
            return {}
        if not isinstance(data, Mapping):
            raise FlagValueError(
                f"Configuration file must contain a mapping of flag names, got {type(data).__name__}"
            )
        return data

    def _apply_config(self, config: Union[str, os.PathLike, Mapping]) -> None:
        data = config if isinstance(config, Mapping) else self._load_config_file(config)
        for name, raw in data.items():
            flag = self._lookup_long(str(name))
            # the command line wins over the config file
            if flag.is_set or raw is None:
                continue
            logger.debug("config sets %s = %r", flag.display_name(), raw)
            if isinstance(raw, (list, tuple)):
                items = [_config_text(item) for item in raw]
                if flag.is_multiple:
                    for item in items:
                        flag.set_value_from_string(item)
                else:
                    flag.set_value_from_string(",".join(items))
            else:
                flag.set_value_from_string(_config_text(raw))

    # -- whole-run helpers ---------------------------------------------

    def safe_parse(
        self,
        argv: Optional[list[str]] = None,
        config: Union[str, os.PathLike, Mapping, None] = None,
    ) -> Result["UsageArgParser", LappError]:
        """
        Match the command line, parsing the usage text first if that has not
        happened yet. Returns Ok(self) on success.
        """
        if argv is None:
            argv = sys.argv[1:]
        result = Ok(None) if self._spec_parsed else self.safe_parse_spec()
        if result.is_ok():
            result = self.safe_parse_command_line(argv, config)
        return result.map(lambda _: self)

    def parse(
        self,
        argv: Optional[list[str]] = None,
        config: Union[str, os.PathLike, Mapping, None] = None,
    ) -> "UsageArgParser":
        return self._unwrap(self.safe_parse(argv, config))

    def clear(self) -> None:
        """Forget every matched value so another command line can be parsed."""
        for flag in self._flags:
            flag.clear()
        self._matched = False

    def dump(self, file: Optional[IO[str]] = None) -> None:
        """Print each flag with its current value."""
        for flag in self._flags:
            print(f"flag '{flag.long_name}' value {flag.value!r}", file=file or sys.stdout)

    # -- accessors -----------------------------------------------------

    def _matched_flag(self, name: str) -> FlagDefinition:
        if not self._matched:
            raise FlagLookupError(
                f"flag '{name}': the command line has not been parsed yet"
            )
        flag = self._by_long.get(name)
        if flag is None:
            raise FlagLookupError(f"unknown flag '{name}'")
        if flag.missing:
            raise RequiredFlagError(f"flag '{name}' is required")
        if flag.value.is_error:
            message = flag.value.data
            if not message.startswith(f"flag '{name}'"):
                message = f"flag '{name}': {message}"
            raise FlagValueError(message)
        return flag

    def _get_typed(self, name: str, kind: Kind) -> Any:
        value = self._matched_flag(name).value
        try:
            return value.expect(kind)
        except FlagValueError as e:
            raise FlagValueError(f"flag '{name}' is {e.message}") from None

    def _get_array(self, name: str, kind: Kind) -> list:
        items = self._get_typed(name, Kind.ARRAY)
        # an empty array carries no element, so it matches any kind
        if items and items[0].kind is not kind:
            raise FlagValueError(
                f"flag '{name}' is not an array of {kind.value}, "
                f"but of {items[0].type_of().short_name}"
            )
        return [item.data for item in items]

    def _open(self, name: str, kind: Kind) -> IO[str]:
        self._get_typed(name, kind)
        value = self._matched_flag(name).value
        try:
            if kind is Kind.INFILE:
                return value.open_infile()
            return value.open_outfile()
        except FlagValueError as e:
            raise FlagValueError(f"flag '{name}': {e.message}") from e

    def _get_as(self, name: str, convert: Callable[[str], Any], every: bool) -> Any:
        flag = self._matched_flag(name)
        if not every and not flag.captures:
            raise RequiredFlagError(f"flag '{name}' has no value")
        results = []
        for raw in flag.captures if every else flag.captures[:1]:
            try:
                results.append(convert(raw))
            except (ValueError, TypeError) as e:
                raise FlagValueError(f"flag '{name}': can't convert '{raw}': {e}") from e
        return results if every else results[0]

    def safe_get_string(self, name: str) -> Result[str, LappError]:
        return self._safe(self._get_typed, name, Kind.STRING)

    def safe_get_integer(self, name: str) -> Result[int, LappError]:
        return self._safe(self._get_typed, name, Kind.INTEGER)

    def safe_get_float(self, name: str) -> Result[float, LappError]:
        return self._safe(self._get_typed, name, Kind.FLOAT)

    def safe_get_bool(self, name: str) -> Result[bool, LappError]:
        return self._safe(self._get_typed, name, Kind.BOOL)

    def safe_get_infile(self, name: str) -> Result[IO[str], LappError]:
        """Open the flag's file for reading ('stdin' gives sys.stdin)."""
        return self._safe(self._open, name, Kind.INFILE)

    def safe_get_outfile(self, name: str) -> Result[IO[str], LappError]:
        """Open the flag's file for writing ('stdout' gives sys.stdout)."""
        return self._safe(self._open, name, Kind.OUTFILE)

    def safe_get_strings(self, name: str) -> Result[list[str], LappError]:
        return self._safe(self._get_array, name, Kind.STRING)

    def safe_get_integers(self, name: str) -> Result[list[int], LappError]:
        return self._safe(self._get_array, name, Kind.INTEGER)

    def safe_get_floats(self, name: str) -> Result[list[float], LappError]:
        return self._safe(self._get_array, name, Kind.FLOAT)

    def safe_get_bools(self, name: str) -> Result[list[bool], LappError]:
        return self._safe(self._get_array, name, Kind.BOOL)

    def safe_get_as(
        self, name: str, convert: Callable[[str], Any]
    ) -> Result[Any, LappError]:
        """
        Convert the flag's raw text with `convert`, e.g. for custom types.
        ValueError or TypeError from the converter becomes a FlagValueError.
        """
        return self._safe(self._get_as, name, convert, False)

    def safe_get_all_as(
        self, name: str, convert: Callable[[str], Any]
    ) -> Result[list[Any], LappError]:
        """Like safe_get_as, converting every raw value given for the flag."""
        return self._safe(self._get_as, name, convert, True)

    def get_string(self, name: str) -> str:
        return self._unwrap(self.safe_get_string(name))

    def get_integer(self, name: str) -> int:
        return self._unwrap(self.safe_get_integer(name))

    def get_float(self, name: str) -> float:
        return self._unwrap(self.safe_get_float(name))

    def get_bool(self, name: str) -> bool:
        return self._unwrap(self.safe_get_bool(name))

    def get_infile(self, name: str) -> IO[str]:
        return self._unwrap(self.safe_get_infile(name))

    def get_outfile(self, name: str) -> IO[str]:
        return self._unwrap(self.safe_get_outfile(name))

    def get_strings(self, name: str) -> list[str]:
        return self._unwrap(self.safe_get_strings(name))

    def get_integers(self, name: str) -> list[int]:
        return self._unwrap(self.safe_get_integers(name))

    def get_floats(self, name: str) -> list[float]:
        return self._unwrap(self.safe_get_floats(name))

    def get_bools(self, name: str) -> list[bool]:
        return self._unwrap(self.safe_get_bools(name))

    def get_as(self, name: str, convert: Callable[[str], Any]) -> Any:
        return self._unwrap(self.safe_get_as(name, convert))

    def get_all_as(self, name: str, convert: Callable[[str], Any]) -> list[Any]:
        return self._unwrap(self.safe_get_all_as(name, convert))


def parse_args(
    text: str, argv: Optional[list[str]] = None, **kwargs: Any
) -> UsageArgParser:
    """
    Build a UsageArgParser for `text` and parse `argv` (default: sys.argv[1:]).

    Keyword arguments are passed to UsageArgParser; by default any error
    prints a message and exits.
    """
    return UsageArgParser(text, **kwargs).parse(argv)
