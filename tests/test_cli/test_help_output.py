import io

import pytest
from rich.console import Console

from clargs import HelpError, format_help, render_help, validate_config
from clargs.themes import get_default_theme


def handler(result):
    return None


def render(config, command=None):
    buffer = io.StringIO()
    console = Console(file=buffer, width=120, theme=get_default_theme())
    render_help(config, command, console)
    return buffer.getvalue()


def line_with(output, text):
    return next(line for line in output.splitlines() if text in line)


@pytest.fixture
def simple_config():
    return validate_config(
        {
            "name": "demo-cli",
            "version": "1.2.3",
            "description": "Copies files around",
            "options": {
                "verbose": {
                    "type": "boolean",
                    "aliases": ["v"],
                    "description": "Be loud",
                },
                "format": {
                    "type": "enum",
                    "choices": ["json", "text"],
                    "default": "text",
                },
                "output": {"type": "string", "aliases": ["o"], "required": True},
                "tag": {"type": "array", "items": "string"},
                "secret": {"type": "string", "hidden": True},
                "host": {"type": "string", "group": "network"},
            },
            "positionals": [
                {"type": "string", "name": "src", "required": True},
                {"type": "string", "name": "dest"},
                {"type": "string", "name": "internal", "hidden": True},
            ],
            "handler": handler,
        }
    )


@pytest.fixture
def command_config():
    return validate_config(
        {
            "name": "demo-cli",
            "options": {
                "verbose": {"type": "boolean", "aliases": ["v"]},
                "config": {"type": "string", "description": "Config file"},
            },
            "commands": {
                "add": {
                    "handler": handler,
                    "description": "Add an item",
                    "options": {"verbose": {"type": "count", "aliases": ["v"]}},
                    "positionals": [
                        {"type": "variadic", "items": "string", "name": "items"}
                    ],
                },
                "remove": {"handler": handler, "description": "Remove an item"},
            },
        }
    )


def test_title_and_usage(simple_config):
    output = render(simple_config)
    assert "demo-cli v1.2.3" in output
    assert "Copies files around" in output
    assert "$ demo-cli [options] <src> [dest]" in output
    assert "internal" not in output


def test_option_rows(simple_config):
    output = render(simple_config)
    verbose = line_with(output, "--verbose")
    assert "-v, --verbose, --no-verbose" in verbose
    assert "Be loud" in verbose
    assert "[boolean]" in verbose
    fmt = line_with(output, "--format")
    assert "--format <json|text>" in fmt
    assert 'default: "text"' in fmt
    output_row = line_with(output, "--output")
    assert "-o, --output <string>" in output_row
    assert "required" in output_row
    assert "[string[]]" in line_with(output, "--tag")
    assert "--secret" not in output


def test_groups_and_sections(simple_config):
    output = render(simple_config)
    lines = output.splitlines()
    assert "ARGUMENTS" in lines
    assert "NETWORK" in lines
    assert "OPTIONS" in lines
    assert lines.index("NETWORK") < lines.index("OPTIONS")
    assert lines.index("NETWORK") < lines.index(line_with(output, "--host"))
    assert "COMMANDS" not in lines


def test_builtin_rows(simple_config):
    output = render(simple_config)
    assert "Show help" in line_with(output, "-h, --help")
    assert "Show version number" in line_with(output, "--version")


def test_version_row_requires_version(command_config):
    output = render(command_config)
    assert "-h, --help" in output
    assert "--version" not in output


def test_top_level_command_help(command_config):
    output = render(command_config)
    assert "$ demo-cli <command> [options]" in output
    assert "Add an item" in line_with(output, "add")
    assert "Remove an item" in line_with(output, "remove")
    assert "GLOBAL OPTIONS" in output.splitlines()
    assert "Run 'demo-cli <command> --help' for command-specific help." in output


def test_command_help(command_config):
    output = render(command_config, "add")
    lines = output.splitlines()
    assert "demo-cli add" in output
    assert "$ demo-cli add [options] [items...]" in output
    assert "OPTIONS" in lines
    assert "GLOBAL OPTIONS" in lines
    assert "[count]" in line_with(output, "--verbose")
    assert output.count("--verbose") == 1
    assert "Config file" in line_with(output, "--config")
    assert "Remove an item" not in output


def test_unknown_command_help(command_config):
    with pytest.raises(HelpError, match="Unknown command: nope"):
        format_help(command_config, "nope")


def test_format_help_returns_markup(simple_config):
    text = format_help(simple_config)
    assert "[clargs.heading]USAGE[/]" in text
