#!/usr/bin/env python3
"""
Tests for flag types and value coercion.

This module tests how raw command-line text is converted to typed values,
how literals written in usage text are interpreted, and how failures are
carried as error values instead of exceptions.
"""

import pytest

from usage_argparser import FlagValueError, Kind, SpecificationError, Type, Value
from usage_argparser.values import BOOL, FLOAT, INTEGER, NONE, STRING, INFILE, OUTFILE


class TestScalarCoercion:
    """Test suite for converting raw text to scalar values."""

    def test_string_is_identity(self):
        assert STRING.parse_string("hello world") == Value.of_string("hello world")

    @pytest.mark.parametrize(
        "raw,expected", [("42", 42), ("-7", -7), ("+3", 3), ("2147483647", 2147483647)]
    )
    def test_integer(self, raw, expected):
        assert INTEGER.parse_string(raw) == Value.of_int(expected)

    @pytest.mark.parametrize("raw", ["4x2", "", " 5", "1_000", "1.5"])
    def test_integer_rejects_malformed_text(self, raw):
        """Test that bad integers become error values naming text and type."""
        value = INTEGER.parse_string(raw)
        assert value.is_error
        assert f"'{raw}'" in value.data
        assert "integer" in value.data

    def test_integer_is_32_bit(self):
        assert INTEGER.parse_string("-2147483648") == Value.of_int(-(2**31))
        value = INTEGER.parse_string("2147483648")
        assert value.is_error
        assert "too large" in value.data

    @pytest.mark.parametrize("raw,expected", [("1.5", 1.5), ("1", 1.0), ("-2e3", -2000.0)])
    def test_float(self, raw, expected):
        assert FLOAT.parse_string(raw) == Value.of_float(expected)

    def test_float_keeps_double_precision(self):
        # single precision would give 0.10000000149011612
        assert FLOAT.parse_string("0.1").data == 0.1
        assert FLOAT.parse_string("1e300").data == 1e300

    @pytest.mark.parametrize("raw", ["abc", "", " 1.5", "1_0.0"])
    def test_float_rejects_malformed_text(self, raw):
        value = FLOAT.parse_string(raw)
        assert value.is_error
        assert "float" in value.data

    @pytest.mark.parametrize(
        "raw,expected",
        [("true", True), ("True", True), ("1", True), ("false", False), ("0", False)],
    )
    def test_bool(self, raw, expected):
        assert BOOL.parse_string(raw) == Value.of_bool(expected)

    def test_bool_rejects_other_words(self):
        assert BOOL.parse_string("yes").is_error

    def test_file_types_wrap_the_path(self):
        """File references are only opened when accessed."""
        assert INFILE.parse_string("/no/such/file") == Value.infile("/no/such/file")
        assert OUTFILE.parse_string("out.txt") == Value.outfile("out.txt")


class TestArrayCoercion:
    """Test suite for array types, which split one token into many values."""

    def test_whitespace_separated(self):
        value = Type.array(INTEGER).parse_string("10 20  30")
        assert value.to_python() == [10, 20, 30]

    def test_comma_separated(self):
        value = Type.array(INTEGER).parse_string("10,20,30")
        assert value.to_python() == [10, 20, 30]

    def test_comma_takes_precedence_over_whitespace(self):
        """A token containing a comma splits only on commas."""
        value = Type.array(STRING).parse_string("a b,c d")
        assert value.to_python() == ["a b", "c d"]

    def test_failing_element_aborts_array(self):
        value = Type.array(INTEGER).parse_string("1,x,3")
        assert value.is_error
        assert "'x'" in value.data

    def test_empty_token_gives_empty_array(self):
        assert Type.array(FLOAT).parse_string("") == Value.array()

    @pytest.mark.parametrize(
        "raw,sep",
        [("1 2 3", " "), ("4,5,6", ","), ("alpha beta", " "), ("x y,z", ",")],
    )
    def test_split_is_idempotent(self, raw, sep):
        """Re-joining the split elements and parsing again gives the same array."""
        elem = INTEGER if raw[0].isdigit() else STRING
        atype = Type.array(elem)
        first = atype.parse_string(raw)
        rejoined = sep.join(str(item) for item in first.to_python())
        assert atype.parse_string(rejoined) == first

    def test_type_of_uses_first_element(self):
        value = Value.array([Value.of_int(1), Value.of_int(2)])
        assert value.type_of() == Type.array(INTEGER)
        assert Value.array().type_of() == Type.array(NONE)


class TestLiterals:
    """Test suite for default values written in usage text."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("10", Value.of_int(10)),
            ("-3", Value.of_int(-3)),
            ("2.5", Value.of_float(2.5)),
            ("'10'", Value.of_string("10")),
            ("'stdout'", Value.of_string("stdout")),
            ("stdin", Value.infile("stdin")),
            ("stdout", Value.outfile("stdout")),
            ("hello", Value.of_string("hello")),
        ],
    )
    def test_inferred_from_surface_form(self, text, expected):
        assert Value.from_literal(text) == expected

    def test_coerced_to_known_type(self):
        assert Value.from_literal("10", FLOAT) == Value.of_float(10.0)
        assert Value.from_literal("'5'", INTEGER) == Value.of_int(5)
        assert Value.from_literal("1,2", Type.array(INTEGER)).to_python() == [1, 2]

    def test_bad_numeric_literal_is_error(self):
        assert Value.from_literal("10abc").is_error


class TestExtraction:
    """Test suite for reading payloads back out of values."""

    def test_expect_matching_kind(self):
        assert Value.of_float(1.0).as_float() == 1.0
        assert Value.of_string("x").as_string() == "x"

    def test_expect_reports_actual_kind(self):
        with pytest.raises(FlagValueError) as exc:
            Value.of_float(1.0).as_string()
        assert str(exc.value) == "not a string, but float"

        with pytest.raises(FlagValueError) as exc:
            Value.of_string("x").as_int()
        assert str(exc.value) == "not an integer, but string"

    def test_unknown_type_name(self):
        with pytest.raises(SpecificationError, match="not a known type bogus"):
            Type.from_name("bogus")
        assert Type.from_name("outfile").kind is Kind.OUTFILE

    def test_missing_infile_fails_on_open(self, tmp_path):
        value = Value.infile(str(tmp_path / "missing.txt"))
        with pytest.raises(FlagValueError, match="can't open"):
            value.open_infile()

    def test_repr(self):
        assert repr(Value.array([Value.of_int(1)])) == "Array([Integer(1)])"
        assert repr(Value.none()) == "None"
