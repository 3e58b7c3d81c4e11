"""
FlagDefinition: one flag or positional argument declared in usage text,
together with the value matched for it on the command line.
"""

import copy
import dataclasses
import logging
from typing import Callable, Optional

from .errors import FlagStateError, SpecificationError
from .values import FLOAT, INTEGER, Kind, Type, Value

logger = logging.getLogger(__name__)

# A constraint receives a coerced value and returns it (possibly adjusted),
# or an error Value describing why it was rejected.
Constraint = Callable[[Value], Value]


@dataclasses.dataclass(frozen=True)
class RangeConstraint:
    """Rejects integer or float values outside the closed interval low..high."""

    flag_name: str
    low: Value
    high: Value

    @classmethod
    def from_bounds(cls, flag_name: str, low: str, high: str) -> "RangeConstraint":
        """Build a range from the two literals of a `(low..high)` specifier."""
        lo = Value.from_literal(low)
        hi = Value.from_literal(high)
        for bound in (lo, hi):
            if bound.is_error:
                raise SpecificationError(bound.data)
        if lo.type_of() != hi.type_of():
            raise SpecificationError("range values must be same type")
        if lo.type_of() not in (INTEGER, FLOAT):
            raise SpecificationError("range values must be integer or float")
        return cls(flag_name, lo, hi)

    @property
    def value_type(self) -> Type:
        return self.low.type_of()

    def __call__(self, value: Value) -> Value:
        if value.kind is not self.low.kind:
            return Value.error(
                f"flag '{self.flag_name}' expects {self.low.kind.value} in range"
            )
        if not self.low.data <= value.data <= self.high.data:
            return Value.error(
                f"flag '{self.flag_name}' out of range {self.low.data}..{self.high.data}"
            )
        return value


@dataclasses.dataclass
class FlagDefinition:
    """
    A declared flag (position 0) or positional argument (position >= 1).

    `value` starts as none (an empty array for multiple flags) and is filled
    in while the command line is matched; `check()` then adopts the default
    or marks the flag as missing. `captures` keeps every raw token assigned
    to the flag so callers can convert custom types themselves.
    """

    long_name: str
    short_char: Optional[str] = None
    value_type: Type = dataclasses.field(default_factory=lambda: Type(Kind.BOOL))
    value: Value = dataclasses.field(default_factory=Value.none)
    default: Value = dataclasses.field(default_factory=Value.none)
    default_text: str = ""
    is_set: bool = False
    is_multiple: bool = False
    position: int = 0
    help: str = ""
    constraint: Optional[Constraint] = None
    captures: list[str] = dataclasses.field(default_factory=list)
    missing: bool = False

    @property
    def is_positional(self) -> bool:
        return self.position > 0

    @property
    def is_bool(self) -> bool:
        return self.value_type.kind is Kind.BOOL

    @property
    def collects_array(self) -> bool:
        """True when the flag's final value is an array, whether set or not."""
        return self.is_multiple or self.value_type.is_array

    def display_name(self) -> str:
        if self.is_positional:
            return f"<{self.long_name}>"
        if len(self.long_name) == 1 and self.long_name == self.short_char:
            return f"-{self.short_char}"
        return f"--{self.long_name}"

    def apply_constraint(self, value: Value) -> Value:
        """Run the constraint on a value, element by element for array types."""
        if self.constraint is None or value.is_error:
            return value
        if value.kind is Kind.ARRAY and self.value_type.is_array:
            items = []
            for item in value.data:
                checked = self.constraint(item)
                if checked.is_error:
                    return checked
                items.append(checked)
            return Value.array(items)
        return self.constraint(value)

    def set_value_from_string(self, raw: str) -> None:
        """Coerce `raw` with the flag's type and constraint, then store it."""
        value = self.apply_constraint(self.value_type.parse_string(raw))
        self.captures.append(raw)
        self.set_value(value)

    def set_value(self, value: Value) -> None:
        if self.is_set and not self.is_multiple:
            raise FlagStateError(f"flag '{self.long_name}' already specified")
        self.is_set = True
        if not self.is_multiple:
            self.value = value
        elif value.is_error:
            self.value = value
        elif self.value.kind is Kind.ARRAY:
            self.value.data.append(value)
        # otherwise an earlier element already failed; keep that error

    def check(self) -> None:
        """
        Finalize the flag after matching. An unset flag adopts its default;
        array and multiple flags fall back to an empty array; anything else
        is missing and will report itself as required when accessed.
        """
        if self.is_set:
            return
        if not self.default.is_none:
            self.value = copy.deepcopy(self.default)
            self.captures = [self.default_text]
            logger.debug("flag %r takes default %r", self.long_name, self.value)
        elif self.collects_array:
            self.value = Value.array()
        else:
            self.missing = True
            self.value = Value.error(f"flag '{self.long_name}' is required")

    def clear(self) -> None:
        self.is_set = False
        self.missing = False
        self.captures.clear()
        self.value = Value.array() if self.is_multiple else Value.none()
