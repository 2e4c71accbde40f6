# clargs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders help text for clargs CLIs using Rich markup.

Help is derived from the schema alone. `format_help()` returns the markup string
and `render_help()` prints it to a Rich console. Hidden options and positionals
are left out, and options that declare a `group` are listed under that group's
heading.

Layout:
    name version
    description

    USAGE
    COMMANDS            (command-based CLIs, top level)
    ARGUMENTS           (positionals)
    <GROUP>             (one section per option group)
    OPTIONS / GLOBAL OPTIONS
"""
from __future__ import annotations

import json
from collections import defaultdict
from typing import Any, Mapping, Sequence

from rich.console import Console
from rich.markup import escape

from clargs.console import console as default_console
from clargs.exceptions import HelpError
from clargs.parser.flags import flag_token
from clargs.schema.kinds import OptionKind, PositionalKind
from clargs.schema.models import CliConfig, OptionDef, PositionalDef
from clargs.themes import get_default_theme

HELP_FLAGS = ("--help", "-h")
VERSION_FLAG = "--version"


def has_builtin_help(options: Mapping[str, OptionDef]) -> bool:
    """`--help`/`-h` are built in unless the schema claims `help` or `h`."""
    return not _claims(options, "help", "h")


def has_builtin_version(options: Mapping[str, OptionDef]) -> bool:
    """`--version` is built in unless the schema claims `version` or `V`."""
    return not _claims(options, "version", "V")


def _claims(options: Mapping[str, OptionDef], name: str, short: str) -> bool:
    if name in options:
        return True
    return any(
        short in option.aliases or name in option.aliases for option in options.values()
    )


def _format_default(value: Any) -> str:
    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return repr(value)


def _option_flags(name: str, option: OptionDef) -> str:
    flags = [flag_token(alias) for alias in option.short_aliases]
    flags.append(f"--{name}")
    flags.extend(flag_token(alias) for alias in option.long_aliases)
    if option.type == OptionKind.BOOLEAN:
        flags.append(f"--no-{name}")
    text = ", ".join(flags)
    if option.type.takes_value:
        if option.choices:
            text += f" <{'|'.join(option.choices)}>"
        elif option.type == OptionKind.ARRAY:
            text += f" <{option.items}>"
        else:
            text += f" <{option.type}>"
    return text


def _option_suffix(option: OptionDef) -> str:
    kind = str(option.type)
    if option.type == OptionKind.ARRAY:
        kind = f"{option.items}[]"
    parts = [f"[clargs.type]{escape(f'[{kind}]')}[/]"]
    if option.required:
        parts.append("[clargs.error]required[/]")
    if option.default is not None:
        default = escape(_format_default(option.default))
        parts.append(f"[clargs.default]default: {default}[/]")
    return " ".join(parts)


def _positional_label(positional: PositionalDef, index: int) -> str:
    name = positional.display_name(index)
    if positional.type == PositionalKind.VARIADIC:
        name = f"{name}..."
    if positional.required:
        return f"<{name}>"
    return f"[{name}]"


def _positional_suffix(positional: PositionalDef) -> str:
    kind = str(positional.type)
    if positional.type == PositionalKind.VARIADIC:
        kind = f"{positional.items}[]"
    elif positional.type == PositionalKind.ENUM and positional.choices:
        kind = "|".join(positional.choices)
    parts = [f"[clargs.type]{escape(f'[{kind}]')}[/]"]
    if positional.default is not None:
        parts.append(
            f"[clargs.default]default: {escape(_format_default(positional.default))}[/]"
        )
    return " ".join(parts)


def _rows(rows: list[tuple[str, str, str]], style: str) -> list[str]:
    """Align `(label, description, suffix)` rows into two columns."""
    width = max((len(label) for label, _, _ in rows), default=0)
    lines = []
    for label, description, suffix in rows:
        padding = " " * (width - len(label) + 2)
        text = "  ".join(part for part in (escape(description), suffix) if part)
        lines.append(f"  [{style}]{escape(label)}[/]{padding}{text}".rstrip())
    return lines


def _option_sections(
    options: Mapping[str, OptionDef],
    label: str,
    builtins: list[tuple[str, str, str]] | None = None,
) -> list[str]:
    groups: dict[str, list[tuple[str, str, str]]] = defaultdict(list)
    ungrouped: list[tuple[str, str, str]] = []
    for name, option in options.items():
        if option.hidden:
            continue
        row = (_option_flags(name, option), option.description, _option_suffix(option))
        if option.group:
            groups[option.group].append(row)
        else:
            ungrouped.append(row)
    ungrouped.extend(builtins or [])

    lines: list[str] = []
    for group, rows in groups.items():
        lines.append(f"[clargs.heading]{escape(group.upper())}[/]")
        lines.extend(_rows(rows, "clargs.flag"))
        lines.append("")
    if ungrouped:
        lines.append(f"[clargs.heading]{label}[/]")
        lines.extend(_rows(ungrouped, "clargs.flag"))
        lines.append("")
    return lines


def _positional_section(positionals: Sequence[PositionalDef]) -> list[str]:
    rows = [
        (
            _positional_label(positional, index),
            positional.description,
            _positional_suffix(positional),
        )
        for index, positional in enumerate(positionals)
        if not positional.hidden
    ]
    if not rows:
        return []
    return ["[clargs.heading]ARGUMENTS[/]", *_rows(rows, "clargs.flag"), ""]


def _usage_positionals(positionals: Sequence[PositionalDef]) -> str:
    return " ".join(
        escape(_positional_label(positional, index))
        for index, positional in enumerate(positionals)
        if not positional.hidden
    )


def _builtin_rows(
    config: CliConfig, global_options: Mapping[str, OptionDef]
) -> list[tuple[str, str, str]]:
    rows = []
    if has_builtin_help(global_options):
        rows.append(("-h, --help", "Show help", ""))
    if config.version and has_builtin_version(global_options):
        rows.append(("--version", "Show version number", ""))
    return rows


def format_help(config: CliConfig, command: str | None = None) -> str:
    """
    Build the help text for `config`, or for one of its commands.

    Args:
        config (CliConfig): A validated config.
        command (str | None): Scope the help to this command.

    Returns:
        str: Help text with Rich markup.

    Raises:
        HelpError: If `command` is not a registered command.
    """
    lines: list[str] = [""]
    name = escape(config.name)
    builtins = _builtin_rows(config, config.options)

    if command is not None:
        commands = config.commands or {}
        if command not in commands:
            raise HelpError(f"Unknown command: {command}")
        definition = commands[command]
        lines.append(f"  [clargs.title]{name} {escape(command)}[/]")
        if definition.description:
            lines.append(f"  [clargs.description]{escape(definition.description)}[/]")
        lines.append("")
        usage = f"  $ {name} {escape(command)} {escape('[options]')}"
        positionals = _usage_positionals(definition.positionals)
        lines.append("[clargs.heading]USAGE[/]")
        lines.append(f"{usage} {positionals}" if positionals else usage)
        lines.append("")
        lines.extend(_positional_section(definition.positionals))
        lines.extend(_option_sections(definition.options, "OPTIONS"))
        shared = {
            key: option
            for key, option in config.options.items()
            if key not in definition.options
        }
        lines.extend(_option_sections(shared, "GLOBAL OPTIONS", builtins))
        return "\n".join(lines)

    version = f" [clargs.version]v{escape(config.version)}[/]" if config.version else ""
    lines.append(f"  [clargs.title]{name}[/]{version}")
    if config.description:
        lines.append(f"  [clargs.description]{escape(config.description)}[/]")
    lines.append("")
    lines.append("[clargs.heading]USAGE[/]")
    if config.has_commands:
        lines.append(f"  $ {name} {escape('<command> [options]')}")
    else:
        positionals = _usage_positionals(config.positionals)
        usage = f"  $ {name} {escape('[options]')}"
        lines.append(f"{usage} {positionals}" if positionals else usage)
    lines.append("")

    if config.has_commands:
        rows = [
            (command_name, definition.description, "")
            for command_name, definition in (config.commands or {}).items()
        ]
        lines.append("[clargs.heading]COMMANDS[/]")
        lines.extend(_rows(rows, "clargs.command"))
        lines.append("")
        lines.extend(_option_sections(config.options, "GLOBAL OPTIONS", builtins))
        lines.append(
            f"[dim]Run '{name} <command> --help' for command-specific help.[/dim]"
        )
        lines.append("")
    else:
        lines.extend(_positional_section(config.positionals))
        lines.extend(_option_sections(config.options, "OPTIONS", builtins))
    return "\n".join(lines)


def render_help(
    config: CliConfig,
    command: str | None = None,
    console: Console | None = None,
) -> None:
    """Print the help text for `config` (or one command) to `console`."""
    target = console or default_console
    with target.use_theme(get_default_theme()):
        target.print(format_help(config, command))
