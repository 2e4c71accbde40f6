# clargs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Selects the command an argument vector addresses and builds its effective schema.

The command token is the first token that is neither a flag nor the value of a
preceding value-taking global flag. Scanning stops at `--`. When no command token
is present, the CLI's `default_handler` decides: a command name is resolved as if
it had been typed, a function runs with the global options only.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from difflib import get_close_matches
from typing import Sequence

from clargs.exceptions import HelpError
from clargs.logger import logger
from clargs.parser.flags import FlagTable
from clargs.pipeline import normalize_transforms
from clargs.schema.models import (
    CliConfig,
    HandlerFn,
    OptionDef,
    PositionalDef,
    TransformFn,
)


@dataclass
class Resolution:
    """
    The outcome of command resolution.

    Attributes:
        command (str | None): The resolved command name. None when a default
            handler function runs.
        options (dict[str, OptionDef]): Global options merged with the command's
            own; command-local definitions win on name collisions.
        positionals (list[PositionalDef]): The command's positionals.
        argv (list[str]): The argument vector with the command token removed.
        handler (HandlerFn | None): The handler to run.
        transforms (list[TransformFn]): Top-level transforms, then the command's.
    """

    command: str | None
    options: dict[str, OptionDef]
    positionals: list[PositionalDef]
    argv: list[str]
    handler: HandlerFn | None = None
    transforms: list[TransformFn] = field(default_factory=list)


def _consumes_next(token: str, table: FlagTable) -> bool:
    """True if `token` is a value-taking flag whose value is the next token."""
    if token.startswith("--"):
        if "=" in token:
            return False
        flag = table.get(token)
        return flag is not None and flag.takes_value
    for position in range(1, len(token)):
        flag = table.get(f"-{token[position]}")
        if flag is None:
            return False
        if flag.takes_value:
            return position == len(token) - 1
    return False


def find_command_token(argv: Sequence[str], table: FlagTable) -> int | None:
    """Return the index of the command token in `argv`, or None."""
    index = 0
    while index < len(argv):
        token = argv[index]
        if token == "--":
            return None
        if token.startswith("-") and token != "-":
            index += 2 if _consumes_next(token, table) else 1
            continue
        return index
    return None


def resolve_command(argv: Sequence[str], config: CliConfig) -> Resolution:
    """
    Resolve the command addressed by `argv`.

    Args:
        argv (Sequence[str]): Arguments without the program name.
        config (CliConfig): A validated, command-based config.

    Raises:
        HelpError: If no command is given and there is no default handler, or the
            command token does not name a registered command.
    """
    commands = config.commands or {}
    top_level = normalize_transforms(config.transforms)
    index = find_command_token(argv, FlagTable(config.options))

    if index is None:
        default = config.default_handler
        if isinstance(default, str):
            logger.debug("No command token; using default command '%s'.", default)
            return resolve_command([default, *argv], config)
        if default is not None:
            logger.debug("No command token; using the default handler.")
            return Resolution(
                command=None,
                options=dict(config.options),
                positionals=[],
                argv=list(argv),
                handler=default,
                transforms=top_level,
            )
        raise HelpError("No command specified.")

    name = argv[index]
    command = commands.get(name)
    if command is None:
        message = f"Unknown command: {name}"
        suggestions = get_close_matches(name, list(commands), n=3, cutoff=0.6)
        if suggestions:
            message += f". Did you mean: {', '.join(suggestions)}?"
        raise HelpError(message)

    remaining = [*argv[:index], *argv[index + 1 :]]
    logger.debug("Resolved command '%s' with argv %r.", name, remaining)
    return Resolution(
        command=name,
        options={**config.options, **command.options},
        positionals=list(command.positionals),
        argv=remaining,
        handler=command.handler,
        transforms=[*top_level, *normalize_transforms(command.transforms)],
    )

