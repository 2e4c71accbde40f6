import io

import pytest
from rich.console import Console

from clargs import (
    Cli,
    ParseResult,
    Transforms,
    ValidationError,
    handle,
    map,
    merge,
    opt,
    pipe,
    pos,
    snake_case_values,
)


def quiet_console():
    return Console(file=io.StringIO(), width=120)


def add_item(result):
    return None


def list_items(result):
    return None


def build():
    add = pipe(
        merge(
            opt.options(priority=opt.enum(["low", "high"], default="low")),
            pos.positionals(pos.variadic(name="text", required=True)),
        ),
        handle(add_item),
    )
    return (
        Cli("demo-cli", console=quiet_console())
        .globals(opt.options(verbose=opt.boolean(aliases=["v"], default=False)))
        .command("add", add, description="Add an item")
        .command("list", {"handler": list_items})
    )


def test_builder_registers_commands():
    cli = build()
    assert list(cli.config.commands) == ["add", "list"]
    assert cli.config.commands["add"].description == "Add an item"
    result = cli.parse(["-v", "add", "buy", "milk"])
    assert result == ParseResult(
        command="add",
        values={"verbose": True, "priority": "low"},
        positionals=(["buy", "milk"],),
    )


def test_default_command():
    cli = build().default_command("list")
    assert cli.parse([]).command == "list"
    assert cli.parse(["-v"]).values == {"verbose": True}


def test_default_handler_function():
    seen = []
    cli = build().default_command(seen.append)
    result = cli.parse(["--no-verbose"])
    assert result.command is None
    assert result.values == {"verbose": False}
    assert seen == [result]


def test_builder_revalidates():
    cli = build()
    with pytest.raises(ValidationError) as excinfo:
        cli.command("remove", {"handler": list_items, "options": {"x": {"type": "enum"}}})
    assert excinfo.value.path == "commands.remove.options.x.choices"
    with pytest.raises(ValidationError) as excinfo:
        build().default_command("missing")
    assert excinfo.value.path == "default_handler"


def test_global_option_alias_conflict():
    cli = Cli("demo-cli", console=quiet_console())
    value = {"type": "string", "aliases": ["v"]}
    cli.command("add", {"handler": add_item, "options": {"value": value}})
    with pytest.raises(ValidationError) as excinfo:
        cli.globals(opt.options(verbose=opt.boolean(aliases=["v"])))
    assert excinfo.value.path == "commands.add.options.value.aliases[0]"


def test_parser_transforms_are_carried():
    options = map(opt.options(**{"dry-run": opt.boolean()}), snake_case_values)
    cli = Cli("demo-cli", options=options, console=quiet_console())
    assert cli.parse(["--dry-run"]).values == {"dry_run": True}


def test_config_style_transforms():
    cli = Cli(
        "demo-cli",
        positionals=pos.positionals(pos.number(name="n", required=True)),
        transforms=Transforms(positionals=lambda values: [values[0] * 2]),
        console=quiet_console(),
    )
    assert cli.parse(["21"]).positionals == (42,)


def test_command_transforms_follow_top_level():
    calls = []

    def top(result):
        calls.append("top")
        return result

    def local(result):
        calls.append("local")
        return result

    command = pipe(opt.options(), map(local), handle(add_item))
    cli = Cli(
        "demo-cli", commands={"add": command}, transforms=[top], console=quiet_console()
    )
    cli.parse(["add"])
    assert calls == ["top", "local"]


def test_constructor_validation():
    with pytest.raises(ValidationError) as excinfo:
        Cli("", console=quiet_console())
    assert excinfo.value.path == "name"
    with pytest.raises(ValidationError) as excinfo:
        Cli(
            "demo-cli",
            positionals=pos.positionals(pos.string()),
            commands={"add": {"handler": add_item}},
        )
    assert excinfo.value.path == "positionals"


def test_repr():
    assert repr(build()) == "Cli(name='demo-cli', version=None, commands=['add', 'list'])"


def test_globals_replaces_previous_globals():
    calls = []

    def first(result):
        calls.append("first")
        return result

    def second(result):
        calls.append("second")
        return result

    cli = Cli(
        "demo-cli", commands={"run": {"handler": list_items}}, console=quiet_console()
    )
    cli.globals(pipe(opt.options(a=opt.boolean()), map(first)))
    cli.globals(pipe(opt.options(b=opt.boolean()), map(second)))
    result = cli.parse(["run"])
    assert calls == ["second"]
    assert result.values == {"b": None}


def test_globals_keeps_constructor_transforms():
    calls = []

    def top(result):
        calls.append("top")
        return result

    def scoped(result):
        calls.append("scoped")
        return result

    cli = Cli(
        "demo-cli",
        commands={"run": {"handler": list_items}},
        transforms=[top],
        console=quiet_console(),
    )
    cli.globals(map(opt.options(a=opt.boolean()), scoped))
    cli.globals(map(opt.options(a=opt.boolean()), scoped))
    cli.parse(["run"])
    assert calls == ["top", "scoped"]
