import pytest

from clargs import opt
from clargs.exceptions import CommandArgumentError
from clargs.parser import FlagTable, tokenize


@pytest.fixture
def table():
    schema = opt.options(
        verbose=opt.boolean(aliases=["v"]),
        name=opt.string(aliases=["n"]),
        ratio=opt.number(aliases=["r"]),
    )
    return FlagTable(schema.options)


def test_long_forms(table):
    stream = tokenize(["--name", "x", "--ratio=2", "file"], table)
    assert [(o.flag.token, o.value) for o in stream.occurrences] == [
        ("--name", "x"),
        ("--ratio", "2"),
    ]
    assert stream.positionals == ["file"]


def test_inline_value_may_be_empty_or_contain_equals(table):
    stream = tokenize(["--name=", "--ratio=1", "--name=a=b"], table)
    assert [o.value for o in stream.occurrences] == ["", "1", "a=b"]


def test_short_attached_value(table):
    stream = tokenize(["-nvalue"], table)
    assert stream.occurrences[0].value == "value"


def test_double_dash_ends_options(table):
    stream = tokenize(["-v", "--", "--name", "-v"], table)
    assert len(stream.occurrences) == 1
    assert stream.positionals == ["--name", "-v"]


def test_single_dash_is_positional(table):
    stream = tokenize(["-"], table)
    assert stream.positionals == ["-"]


def test_negative_numbers_are_positional(table):
    stream = tokenize(["-5", "-2.5"], table)
    assert stream.positionals == ["-5", "-2.5"]
    assert stream.occurrences == []


def test_negative_number_as_option_value(table):
    stream = tokenize(["--ratio", "-1.5"], table)
    assert stream.occurrences[0].value == "-1.5"


def test_registered_digit_alias_wins():
    table = FlagTable(opt.options(five=opt.boolean(aliases=["5"])).options)
    stream = tokenize(["-5"], table)
    assert stream.occurrences[0].flag.name == "five"


def test_missing_value(table):
    with pytest.raises(CommandArgumentError, match="Option '--name' requires a value"):
        tokenize(["--name"], table)
    with pytest.raises(CommandArgumentError, match="Option '--name' requires a value"):
        tokenize(["--name", "--verbose"], table)


def test_boolean_with_inline_value(table):
    with pytest.raises(CommandArgumentError, match="does not take a value"):
        tokenize(["--verbose=true"], table)


def test_unknown_option_suggests(table):
    with pytest.raises(CommandArgumentError) as excinfo:
        tokenize(["--verbos"], table, command="add")
    assert str(excinfo.value).startswith(
        "Unknown option: --verbos. Did you mean: --verbose"
    )
    assert excinfo.value.command == "add"


def test_unknown_option_without_suggestion(table):
    with pytest.raises(CommandArgumentError) as excinfo:
        tokenize(["--zzz"], table)
    assert str(excinfo.value) == "Unknown option: --zzz"
