"""
Flag types and the values they hold.

A Type describes the shape a flag expects (string, integer, float, bool,
infile, outfile or an array of one of those). A Value is the result of
coercing raw command-line text to a Type. A failed coercion does not raise:
it produces an error Value, so the failure can travel with the flag until
somebody asks for it.
"""

import dataclasses
import enum
import re
import sys
from typing import IO, Any, Optional

from .errors import FlagValueError, SpecificationError

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_NUMERIC_LITERAL_RE = re.compile(r"[+-]?[0-9]")

STDIN = "stdin"
STDOUT = "stdout"


class Kind(enum.Enum):
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOL = "bool"
    INFILE = "infile"
    OUTFILE = "outfile"
    NONE = "none"
    ARRAY = "array"
    ERROR = "error"


# type names that may appear inside "(...)" in usage text
BUILTIN_TYPE_NAMES = {
    "string": Kind.STRING,
    "integer": Kind.INTEGER,
    "float": Kind.FLOAT,
    "bool": Kind.BOOL,
    "infile": Kind.INFILE,
    "outfile": Kind.OUTFILE,
}


def _strict_bool(value: str) -> Optional[bool]:
    if value in ("True", "true", "1"):
        return True
    if value in ("False", "false", "0"):
        return False
    return None


@dataclasses.dataclass(frozen=True)
class Type:
    """The expected shape of a flag value. Arrays nest through `element`."""

    kind: Kind
    element: Optional["Type"] = None

    def __repr__(self) -> str:
        if self.kind is Kind.ARRAY:
            return f"Type.array({self.element!r})"
        return f"Type({self.kind.name})"

    @classmethod
    def array(cls, element: "Type") -> "Type":
        return cls(Kind.ARRAY, element)

    @classmethod
    def from_name(cls, name: str) -> "Type":
        """Look up a built-in type name such as 'integer' or 'outfile'."""
        try:
            return cls(BUILTIN_TYPE_NAMES[name])
        except KeyError:
            raise SpecificationError(f"not a known type {name}") from None

    @property
    def is_array(self) -> bool:
        return self.kind is Kind.ARRAY

    @property
    def short_name(self) -> str:
        return self.kind.value

    def parse_string(self, raw: str) -> "Value":
        """
        Coerce raw command-line text to this type.

        Returns an error Value rather than raising when the text does not fit.
        Arrays split on commas when the text contains one, otherwise on runs
        of whitespace, and coerce each part with the element type.
        """
        kind = self.kind
        if kind is Kind.STRING:
            return Value.of_string(raw)
        if kind is Kind.INTEGER:
            if not _INTEGER_RE.fullmatch(raw):
                return Value.error(f"can't convert '{raw}' to integer - invalid digit")
            number = int(raw)
            if not INT_MIN <= number <= INT_MAX:
                return Value.error(
                    f"can't convert '{raw}' to integer - number too large to fit in 32 bits"
                )
            return Value.of_int(number)
        if kind is Kind.FLOAT:
            # kept at Python float (double) precision, no 32-bit rounding
            # float() is more forgiving than we want about padding and separators
            if not raw or "_" in raw or any(c.isspace() for c in raw):
                return Value.error(f"can't convert '{raw}' to float - invalid float literal")
            try:
                return Value.of_float(float(raw))
            except ValueError:
                return Value.error(f"can't convert '{raw}' to float - invalid float literal")
        if kind is Kind.BOOL:
            flag = _strict_bool(raw)
            if flag is None:
                return Value.error(
                    f"can't convert '{raw}' to bool - must be one of: true, false, 1, 0"
                )
            return Value.of_bool(flag)
        if kind is Kind.INFILE:
            return Value.infile(raw)
        if kind is Kind.OUTFILE:
            return Value.outfile(raw)
        if kind is Kind.ARRAY and self.element is not None:
            if "," in raw:
                parts = [part.strip() for part in raw.split(",")]
            else:
                parts = raw.split()
            items = []
            for part in parts:
                item = self.element.parse_string(part)
                if item.is_error:
                    return item
                items.append(item)
            return Value.array(items)
        return Value.error(f"can't convert '{raw}' to {self.short_name}")


STRING = Type(Kind.STRING)
INTEGER = Type(Kind.INTEGER)
FLOAT = Type(Kind.FLOAT)
BOOL = Type(Kind.BOOL)
INFILE = Type(Kind.INFILE)
OUTFILE = Type(Kind.OUTFILE)
NONE = Type(Kind.NONE)


@dataclasses.dataclass
class Value:
    """A typed flag value. `data` is a Python scalar, a list of Values, or None."""

    kind: Kind
    data: Any = None

    def __repr__(self) -> str:
        if self.kind is Kind.NONE:
            return "None"
        label = self.kind.name.title()
        return f"{label}({self.data!r})"

    @classmethod
    def none(cls) -> "Value":
        return cls(Kind.NONE)

    @classmethod
    def of_string(cls, text: str) -> "Value":
        return cls(Kind.STRING, text)

    @classmethod
    def of_int(cls, number: int) -> "Value":
        return cls(Kind.INTEGER, number)

    @classmethod
    def of_float(cls, number: float) -> "Value":
        return cls(Kind.FLOAT, number)

    @classmethod
    def of_bool(cls, flag: bool) -> "Value":
        return cls(Kind.BOOL, flag)

    @classmethod
    def infile(cls, path: str) -> "Value":
        return cls(Kind.INFILE, path)

    @classmethod
    def outfile(cls, path: str) -> "Value":
        return cls(Kind.OUTFILE, path)

    @classmethod
    def array(cls, items: Optional[list] = None) -> "Value":
        return cls(Kind.ARRAY, list(items or []))

    @classmethod
    def error(cls, message: str) -> "Value":
        return cls(Kind.ERROR, message)

    @classmethod
    def from_literal(cls, text: str, vtype: Optional[Type] = None) -> "Value":
        """
        Build a value from a literal written in usage text, e.g. `(default 10)`.

        With no `vtype`, the type is inferred from the literal's surface form:
        a leading digit gives an integer (a float if it contains '.'), a
        leading quote forces a string, 'stdin'/'stdout' give file
        placeholders and anything else is a string. With a `vtype` the
        literal is coerced to that type instead.
        """
        quoted = len(text) >= 1 and text[0] == "'"
        if quoted:
            text = text[1:-1] if len(text) >= 2 and text.endswith("'") else text[1:]
        if vtype is not None:
            return vtype.parse_string(text)
        if quoted:
            return cls.of_string(text)
        if _NUMERIC_LITERAL_RE.match(text):
            return (FLOAT if "." in text else INTEGER).parse_string(text)
        if text == STDIN:
            return cls.infile(STDIN)
        if text == STDOUT:
            return cls.outfile(STDOUT)
        return cls.of_string(text)

    @property
    def is_error(self) -> bool:
        return self.kind is Kind.ERROR

    @property
    def is_none(self) -> bool:
        return self.kind is Kind.NONE

    def type_of(self) -> Type:
        """
        Structural type of this value. For arrays the element type is taken
        from the first element; an empty array has element type none.
        """
        if self.kind is Kind.ARRAY:
            element = self.data[0].type_of() if self.data else NONE
            return Type.array(element)
        return Type(self.kind)

    def expect(self, kind: Kind) -> Any:
        """Return the payload, raising FlagValueError if the kind differs."""
        if self.kind is not kind:
            article = "an" if kind.value[0] in "aeiou" else "a"
            raise FlagValueError(
                f"not {article} {kind.value}, but {self.type_of().short_name}"
            )
        return self.data

    def as_string(self) -> str:
        return self.expect(Kind.STRING)

    def as_int(self) -> int:
        return self.expect(Kind.INTEGER)

    def as_float(self) -> float:
        return self.expect(Kind.FLOAT)

    def as_bool(self) -> bool:
        return self.expect(Kind.BOOL)

    def as_array(self) -> list:
        return self.expect(Kind.ARRAY)

    def open_infile(self) -> IO[str]:
        """Open the referenced file for reading; 'stdin' means standard input."""
        path = self.expect(Kind.INFILE)
        if path == STDIN:
            return sys.stdin
        try:
            return open(path, "r")
        except OSError as e:
            raise FlagValueError(
                f"can't open '{path}' for reading: {e.strerror or e}"
            ) from e

    def open_outfile(self) -> IO[str]:
        """Open the referenced file for writing; 'stdout' means standard output."""
        path = self.expect(Kind.OUTFILE)
        if path == STDOUT:
            return sys.stdout
        try:
            return open(path, "w")
        except OSError as e:
            raise FlagValueError(
                f"can't open '{path}' for writing: {e.strerror or e}"
            ) from e

    def to_python(self) -> Any:
        """Plain Python form of the value: scalars, paths, None or a list."""
        if self.kind is Kind.ARRAY:
            return [item.to_python() for item in self.data]
        return self.data
