import pytest

from usage_argparser import (
    ExitPolicy,
    FlagLookupError,
    FlagStateError,
    FlagValueError,
    HelpRequested,
    RequiredFlagError,
    UsageArgParser,
)

SIMPLE = """
Testing usage parsing
  -v, --verbose verbose flag
  -k   arb flag
  -o, --output (default 'stdout')
  -p   (integer...)
  -I, --include... (string)
  <in> (string)
  <out> (string...)
"""


def parse(argv, text=SIMPLE, **kwargs):
    parser = UsageArgParser(text, on_error=ExitPolicy.RAISE, **kwargs)
    return parser.parse(argv)


class TestSimpleScenarios:
    """Test suite for the basic command lines against SIMPLE."""

    def test_just_out(self):
        args = parse(["boo", "hello"])
        assert args.get_bool("verbose") is False
        assert args.get_bool("k") is False
        assert args.get_string("output") == "stdout"
        assert args.get_integers("p") == []
        assert args.get_strings("include") == []
        assert args.get_string("in") == "boo"
        assert args.get_strings("out") == ["hello"]

    def test_combined_bool_flags(self):
        args = parse(["boo", "-vk", "hello"])
        assert args.get_bool("verbose") is True
        assert args.get_bool("k") is True
        assert args.get_strings("out") == ["hello"]

    def test_combined_equals_separate(self):
        combined = parse(["boo", "-vk"])
        separate = parse(["boo", "-v", "-k"])
        for name in ("verbose", "k"):
            assert combined.get_bool(name) == separate.get_bool(name)

    def test_array_flag(self):
        args = parse(["boo", "-p", "10 20 30", "hello"])
        assert args.get_integers("p") == [10, 20, 30]
        assert args.get_strings("out") == ["hello"]

    def test_array_flag_with_commas(self):
        args = parse(["boo", "-p10,20,30"])
        assert args.get_integers("p") == [10, 20, 30]

    def test_double_dash_ends_flags(self):
        args = parse(["boo", "hello", "baggins", "--", "--frodo"])
        assert args.get_strings("include") == []
        assert args.get_strings("out") == ["hello", "baggins", "--frodo"]

    def test_double_dash_makes_flag_lookalikes_positional(self):
        args = parse(["--", "-v", "-k"])
        assert args.get_bool("verbose") is False
        assert args.get_string("in") == "-v"
        assert args.get_strings("out") == ["-k"]

    def test_multiple_flag(self):
        args = parse(["boo", "-I.", "-I..", "--include", "lib", "hello"])
        assert args.get_strings("include") == [".", "..", "lib"]
        assert args.get_strings("out") == ["hello"]

    def test_no_out_is_empty(self):
        args = parse(["boo"])
        assert args.get_strings("out") == []


def test_float_positional_and_varargs():
    text = """
        -s,--str (string)
        <frodo> (float)
        <bonzo>... (integer)
    """
    args = parse(["1", "10", "20", "30"], text)
    with pytest.raises(RequiredFlagError, match="flag 'str' is required"):
        args.get_string("str")
    with pytest.raises(FlagValueError, match="not a string, but float"):
        args.get_string("frodo")
    assert args.get_float("frodo") == 1.0
    assert args.get_integers("bonzo") == [10, 20, 30]


@pytest.mark.parametrize(
    "argv",
    [
        ["boo", "--output=file.txt"],
        ["boo", "--output:file.txt"],
        ["boo", "--output", "file.txt"],
        ["boo", "-ofile.txt"],
        ["boo", "-o=file.txt"],
        ["boo", "-o:file.txt"],
        ["boo", "-o", "file.txt"],
        ["boo", "-vo", "file.txt"],
        ["boo", "--output=", "file.txt"],
        ["boo", "--output:", "file.txt"],
    ],
)
def test_value_forms(argv):
    assert parse(argv).get_string("output") == "file.txt"


def test_value_taking_short_flag_ends_group():
    args = parse(["boo", "-vpk"])
    # 'k' is the value of -p, not another flag
    assert args.get_bool("verbose") is True
    assert args.get_bool("k") is False
    with pytest.raises(FlagValueError, match="can't convert 'k' to integer"):
        args.get_integers("p")


def test_long_bool_takes_inline_value():
    assert parse(["boo", "--verbose=false"]).get_bool("verbose") is False
    assert parse(["boo", "--verbose"]).get_bool("verbose") is True


def test_bare_dash_is_positional():
    assert parse(["-"]).get_string("in") == "-"


def test_repeated_flags_accumulate_verbosity():
    args = parse(["-vvv"], "-v... verbosity")
    assert args.get_bools("v") == [True, True, True]
    assert parse([], "-v... verbosity").get_bools("v") == []


class TestMatchingErrors:
    """Test suite for errors that stop matching."""

    def test_unknown_long_flag(self):
        with pytest.raises(FlagLookupError, match="no long flag 'frodo'"):
            parse(["boo", "--frodo"])

    def test_unknown_short_flag(self):
        with pytest.raises(FlagLookupError, match="no short flag 'z'"):
            parse(["boo", "-vz"])

    def test_too_many_positionals(self):
        with pytest.raises(FlagLookupError, match="too many positional arguments") as exc:
            parse(["one", "two"], "<in> (string)")
        assert exc.value.position == 2

    def test_missing_value(self):
        with pytest.raises(FlagValueError, match="no value for flag 'output'"):
            parse(["boo", "--output"])
        with pytest.raises(FlagValueError, match="no value for flag 'p'"):
            parse(["boo", "-p"])

    def test_flag_given_twice(self):
        with pytest.raises(FlagStateError, match="flag 'verbose' already specified"):
            parse(["boo", "-v", "--verbose"])

    def test_safe_parse_returns_err(self):
        parser = UsageArgParser(SIMPLE)
        result = parser.safe_parse(["boo", "--frodo"])
        assert result.is_err()
        assert isinstance(result.unwrap_err(), FlagLookupError)

    def test_safe_parse_returns_parser(self):
        parser = UsageArgParser(SIMPLE)
        result = parser.safe_parse(["boo"])
        assert result.is_ok()
        assert result.unwrap() is parser


class TestDeferredErrors:
    """Test suite for coercion failures that wait until the flag is read."""

    def test_bad_value_does_not_block_other_flags(self):
        args = parse(["boo", "-v", "-p", "1 x 3"])
        assert args.get_bool("verbose") is True
        assert args.get_string("in") == "boo"
        with pytest.raises(FlagValueError, match="flag 'p': can't convert 'x' to integer"):
            args.get_integers("p")

    def test_out_of_range(self):
        args = parse(["--lines", "11"], "--lines (1..10)")
        with pytest.raises(FlagValueError, match="out of range 1..10"):
            args.get_integer("lines")
        assert parse(["--lines", "10"], "--lines (1..10)").get_integer("lines") == 10

    def test_required_flag(self):
        args = parse([], "--count (integer)")
        result = args.safe_get_integer("count")
        assert result.is_err()
        assert isinstance(result.unwrap_err(), RequiredFlagError)

    def test_custom_constraint(self):
        from usage_argparser import Value

        parser = UsageArgParser("--name (string)", on_error=ExitPolicy.RAISE)
        parser.set_constraint(
            "name",
            lambda v: v if v.data.islower() else Value.error("name must be lower case"),
        )
        parser.parse(["--name", "Frodo"])
        with pytest.raises(FlagValueError, match="lower case"):
            parser.get_string("name")
        parser.parse(["--name", "frodo"])
        assert parser.get_string("name") == "frodo"


class TestHelp:
    """Test suite for -h/--help."""

    @pytest.mark.parametrize("flag", ["-h", "--help"])
    def test_help_raises_help_requested(self, flag):
        with pytest.raises(HelpRequested) as exc:
            parse([flag])
        assert exc.value.exit_code == 0
        assert exc.value.message.startswith("Testing usage parsing\n")
        assert "-v, --verbose verbose flag" in exc.value.message

    def test_flags_are_finalized_before_help(self):
        parser = UsageArgParser(
            "-n (integer)\n--level (integer default 2)", on_error=ExitPolicy.RAISE
        )
        with pytest.raises(HelpRequested):
            parser.parse(["--help"])
        assert parser.get_integer("level") == 2
        with pytest.raises(RequiredFlagError, match="flag 'n' is required"):
            parser.get_integer("n")

    def test_help_prints_dedented_usage_and_exits(self, capsys):
        parser = UsageArgParser(SIMPLE)
        with pytest.raises(SystemExit) as exc:
            parser.parse(["--help"])
        assert exc.value.code == 0
        out = capsys.readouterr().out
        assert out.startswith("Testing usage parsing\n")
        assert "\n  -k   arb flag\n" in out


def test_parse_again_starts_fresh():
    parser = UsageArgParser(SIMPLE, on_error=ExitPolicy.RAISE)
    parser.parse(["boo", "-v", "-I", "x"])
    parser.parse(["boo"])
    assert parser.get_bool("verbose") is False
    assert parser.get_strings("include") == []


def test_accessing_before_parsing():
    parser = UsageArgParser(SIMPLE, on_error=ExitPolicy.RAISE)
    with pytest.raises(FlagLookupError, match="not been parsed"):
        parser.get_bool("verbose")


def test_parse_args_uses_sys_argv(monkeypatch):
    from usage_argparser import parse_args

    monkeypatch.setattr("sys.argv", ["prog", "boo", "-k", "hello"])
    args = parse_args(SIMPLE, on_error=ExitPolicy.RAISE)
    assert args.get_bool("k") is True
    assert args.get_strings("out") == ["hello"]
