import pytest

from clargs import opt, parse_args
from clargs.exceptions import CommandArgumentError, HelpError


def test_absent_options_use_defaults():
    options = opt.options(
        name=opt.string(),
        format=opt.enum(["json", "text"], default="text"),
        tag=opt.array(default=["a"]),
        level=opt.count(),
        flag=opt.boolean(),
    ).options
    result = parse_args([], options)
    assert result.values == {
        "name": None,
        "format": "text",
        "tag": ["a"],
        "level": 0,
        "flag": None,
    }


def test_defaults_are_copied():
    options = opt.options(tag=opt.array(default=["a"])).options
    first = parse_args([], options)
    first.values["tag"].append("b")
    assert parse_args([], options).values["tag"] == ["a"]


def test_required_option():
    options = opt.options(name=opt.string(required=True)).options
    with pytest.raises(CommandArgumentError) as excinfo:
        parse_args([], options, command="add")
    assert str(excinfo.value) == "Missing required option '--name'"
    assert excinfo.value.command == "add"
    assert parse_args(["--name", "x"], options).values["name"] == "x"


def test_required_option_with_default_is_satisfied():
    options = opt.options(name=opt.string(required=True, default="x")).options
    assert parse_args([], options).values["name"] == "x"


def test_number_values():
    options = opt.options(port=opt.number(aliases=["p"])).options
    assert parse_args(["-p", "8080"], options).values["port"] == 8080
    assert parse_args(["--port=0.5"], options).values["port"] == 0.5
    with pytest.raises(CommandArgumentError) as excinfo:
        parse_args(["--port", "abc"], options)
    assert str(excinfo.value) == 'Invalid value for --port: "abc" is not a number'


def test_enum_values():
    options = opt.options(format=opt.enum(["json", "text"])).options
    assert parse_args(["--format", "json"], options).values["format"] == "json"
    with pytest.raises(CommandArgumentError, match="Must be one of: json, text"):
        parse_args(["--format", "xml"], options)


def test_array_collects_each_occurrence():
    options = opt.options(
        tag=opt.array(aliases=["t"]),
        size=opt.array("number"),
    ).options
    result = parse_args(["-t", "a", "--tag=b", "--size", "1", "--size", "2.5"], options)
    assert result.values["tag"] == ["a", "b"]
    assert result.values["size"] == [1, 2.5]


def test_array_choices():
    options = opt.options(env=opt.array(choices=["dev", "prod"])).options
    with pytest.raises(CommandArgumentError, match="Invalid value for --env"):
        parse_args(["--env", "qa"], options)


def test_repeated_spelling_keeps_last_value():
    options = opt.options(name=opt.string(aliases=["n"])).options
    assert parse_args(["-n", "a", "-n", "b"], options).values["name"] == "b"


def test_different_spellings_conflict():
    options = opt.options(name=opt.string(aliases=["n"])).options
    with pytest.raises(HelpError) as excinfo:
        parse_args(["-n", "a", "--name", "b"], options)
    assert str(excinfo.value) == "Conflicting options: -n and --name"
    assert not isinstance(excinfo.value, CommandArgumentError)


def test_array_spellings_do_not_conflict():
    options = opt.options(tag=opt.array(aliases=["t"])).options
    assert parse_args(["-t", "a", "--tag", "b"], options).values["tag"] == ["a", "b"]


def test_values_keyed_by_canonical_name():
    options = opt.options(dry_run=opt.boolean(aliases=["dry-run", "d"])).options
    assert parse_args(["--dry-run"], options).values == {"dry_run": True}


def test_required_boolean_and_count():
    options = opt.options(
        force=opt.boolean(required=True),
        verbose=opt.count(aliases=["v"], required=True),
    ).options
    with pytest.raises(CommandArgumentError) as excinfo:
        parse_args(["-v"], options)
    assert str(excinfo.value) == "Missing required option '--force'"
    with pytest.raises(CommandArgumentError) as excinfo:
        parse_args(["--force"], options)
    assert str(excinfo.value) == "Missing required option '--verbose'"
    assert parse_args(["--no-force", "-vv"], options).values == {
        "force": False,
        "verbose": 2,
    }


def test_required_count_with_default_is_satisfied():
    options = opt.options(verbose=opt.count(required=True, default=1)).options
    assert parse_args([], options).values["verbose"] == 1
