# clargs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Cli`, the entry point of a clargs application.

A `Cli` holds one validated `CliConfig`. It is built either from keyword arguments
in one go or incrementally with the builder methods (`globals()`, `command()`,
`default_command()`), each of which revalidates the whole definition.

Invocation has two layers:

- `parse()` / `parse_async()` intercept the built-in `--help` and `--version`
  flags, resolve the command, parse argv, run the transforms and call the
  handler. They never exit the process: built-in flags raise `HelpSignal` or
  `VersionSignal`, and user-input problems raise `HelpError`.
- `run()` / `run_async()` wrap the above for use as a program entry point. They
  print errors, map signals and errors to exit codes and call `sys.exit()`.

Example:
    from clargs import Cli, opt, pos

    def greet(result):
        print(f"Hello, {result.positionals[0]}!")

    Cli(
        "greeter",
        options=opt.options(shout=opt.boolean(aliases=["s"])),
        positionals=pos.positionals(pos.string(name="name", required=True)),
        handler=greet,
    ).run()

Exit codes (`run` / `run_async`):
    0   Success, help or version shown.
    1   Invalid input (message and help are printed) or a clargs error.
    130 Interrupted with Ctrl+C.
"""
from __future__ import annotations

import sys
from typing import Any, Mapping, Sequence

from rich.console import Console
from rich.markup import escape

from clargs.console import console as default_console
from clargs.exceptions import ClargsError, HelpError
from clargs.help import (
    HELP_FLAGS,
    VERSION_FLAG,
    has_builtin_help,
    has_builtin_version,
    render_help,
)
from clargs.logger import logger
from clargs.parser.flags import FlagTable
from clargs.parser.raw_parser import parse_args
from clargs.pipeline import normalize_transforms, run_pipeline, run_pipeline_async
from clargs.resolver import find_command_token, resolve_command
from clargs.schema.models import (
    CliConfig,
    CommandDef,
    HandlerFn,
    OptionDef,
    ParseResult,
    Parser,
    PositionalDef,
    TransformFn,
    Transforms,
)
from clargs.signals import HelpSignal, VersionSignal
from clargs.validate import validate_config
from clargs.version import resolve_version


class Cli:
    """
    A schema-driven command-line interface.

    Args:
        name (str): Program name, shown in help and used for the version lookup.
        version (str | None): Version string. When omitted, the installed
            distribution named `name` is consulted.
        description (str): One-line description shown in help.
        options (Parser | Mapping[str, OptionDef] | None): Options, global for
            command-based CLIs. A `Parser` also contributes its transforms.
        positionals (Parser | Sequence[PositionalDef] | None): Positionals of a
            simple CLI.
        commands (Mapping[str, CommandDef] | None): Commands by name.
        handler (HandlerFn | None): Handler of a simple CLI.
        default_handler (HandlerFn | str | None): What a command-based CLI runs
            when no command is given: a handler, or the name of a command.
        transforms (list[TransformFn] | Transforms | None): Top-level transforms.
        console (Console | None): Console used for help, version and errors.

    Raises:
        ValidationError: If the definition is invalid.
    """

    def __init__(
        self,
        name: str,
        *,
        version: str | None = None,
        description: str = "",
        options: Parser | Mapping[str, OptionDef] | None = None,
        positionals: Parser | Sequence[PositionalDef] | None = None,
        commands: Mapping[str, CommandDef | Mapping[str, Any]] | None = None,
        handler: HandlerFn | None = None,
        default_handler: HandlerFn | str | None = None,
        transforms: list[TransformFn] | Transforms | None = None,
        console: Console | None = None,
    ) -> None:
        self.console = console or default_console
        self._name = name
        self._version = version
        if isinstance(name, str) and name:
            self._version = resolve_version(name, version)
        self._description = description
        self._options: dict[str, Any] = {}
        self._transforms: Any = [] if transforms is None else transforms
        # Positionals and transforms contributed by the `options` and
        # `positionals` arguments, kept apart so `globals()` can replace them.
        self._option_positionals: list[Any] = []
        self._option_transforms: list[TransformFn] = []
        self._positionals: list[Any] = []
        self._positional_transforms: list[TransformFn] = []
        self._commands: dict[str, Any] | None = None
        if commands is not None:
            self._commands = dict(commands)
        self._handler = handler
        self._default_handler = default_handler
        self._set_options(options)
        self._set_positionals(positionals)
        self.config: CliConfig = self._validate()

    def _set_options(self, options: Parser | Mapping[str, OptionDef] | None) -> None:
        self._option_positionals = []
        self._option_transforms = []
        if isinstance(options, Parser):
            self._options = dict(options.options)
            self._option_positionals = list(options.positionals)
            self._option_transforms = normalize_transforms(options.transforms)
        else:
            self._options = dict(options or {})

    def _set_positionals(
        self, positionals: Parser | Sequence[PositionalDef] | None
    ) -> None:
        self._positional_transforms = []
        if isinstance(positionals, Parser):
            self._positionals = list(positionals.positionals)
            self._positional_transforms = normalize_transforms(positionals.transforms)
        else:
            self._positionals = list(positionals or [])

    def _validate(self) -> CliConfig:
        transforms = self._transforms
        contributed = [*self._option_transforms, *self._positional_transforms]
        if contributed:
            transforms = [*normalize_transforms(transforms), *contributed]
        config = validate_config(
            {
                "name": self._name,
                "version": self._version,
                "description": self._description,
                "options": self._options,
                "positionals": [*self._option_positionals, *self._positionals],
                "transforms": transforms,
                "commands": self._commands,
                "handler": self._handler,
                "default_handler": self._default_handler,
            }
        )
        logger.debug("CLI '%s' configured.", config.name)
        return config

    def globals(self, parser: Parser) -> Cli:
        """Replace the global options (and their transforms) of the CLI."""
        self._set_options(parser)
        self.config = self._validate()
        return self

    def command(
        self,
        name: str,
        command: CommandDef | Mapping[str, Any],
        description: str | None = None,
    ) -> Cli:
        """Register `command` under `name`."""
        if description is not None:
            if isinstance(command, CommandDef):
                command = command.model_copy(update={"description": description})
            else:
                command = {**command, "description": description}
        if self._commands is None:
            self._commands = {}
        self._commands[name] = command
        self.config = self._validate()
        return self

    def default_command(self, target: str | HandlerFn) -> Cli:
        """Set what runs when no command token is given."""
        self._default_handler = target
        self.config = self._validate()
        return self

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def version(self) -> str | None:
        return self.config.version

    def _scoped_command(self, argv: Sequence[str]) -> str | None:
        """Return the command named before any builtin flag, if it exists."""
        if not self.config.has_commands:
            return None
        index = find_command_token(argv, FlagTable(self.config.options))
        if index is None:
            return None
        name = argv[index]
        return name if name in (self.config.commands or {}) else None

    def _handle_builtins(self, argv: list[str]) -> None:
        options = self.config.options
        help_enabled = has_builtin_help(options)
        version = self.config.version if has_builtin_version(options) else None
        for index, token in enumerate(argv):
            if token == "--":
                return
            if help_enabled and token in HELP_FLAGS:
                command = self._scoped_command(argv[:index])
                logger.info("Help requested%s.", f" for '{command}'" if command else "")
                render_help(self.config, command, self.console)
                raise HelpSignal(command=command)
            if version and token == VERSION_FLAG:
                logger.info("Version requested.")
                self.console.print(f"[clargs.version]{escape(version)}[/]")
                raise VersionSignal(version)

    def _prepare(
        self, argv: list[str]
    ) -> tuple[ParseResult, list[TransformFn], HandlerFn | None]:
        self._handle_builtins(argv)
        config = self.config
        if config.has_commands:
            resolution = resolve_command(argv, config)
            result = parse_args(
                resolution.argv,
                resolution.options,
                resolution.positionals,
                command=resolution.command,
            )
            return result, resolution.transforms, resolution.handler
        result = parse_args(argv, config.options, config.positionals)
        return result, normalize_transforms(config.transforms), config.handler

    def parse(self, argv: Sequence[str] | None = None) -> ParseResult:
        """
        Parse `argv`, run transforms and the handler synchronously.

        Args:
            argv (Sequence[str] | None): Arguments without the program name.
                Defaults to `sys.argv[1:]`.

        Returns:
            ParseResult: The result after all transforms.

        Raises:
            HelpSignal: After `--help` output.
            VersionSignal: After `--version` output.
            HelpError: For unusable input (`CommandArgumentError` for bad values).
            AsyncExecutionError: If a transform or handler returned an awaitable.
        """
        args = list(sys.argv[1:] if argv is None else argv)
        result, transforms, handler = self._prepare(args)
        return run_pipeline(result, transforms, handler)

    async def parse_async(self, argv: Sequence[str] | None = None) -> ParseResult:
        """Like `parse()`, awaiting async transforms and handlers in order."""
        args = list(sys.argv[1:] if argv is None else argv)
        result, transforms, handler = self._prepare(args)
        return await run_pipeline_async(result, transforms, handler)

    def _report_help_error(self, error: HelpError) -> None:
        self.console.print(f"[clargs.error]❌ Error:[/] {escape(error.message)}")
        commands = self.config.commands or {}
        command = error.command if error.command in commands else None
        render_help(self.config, command, self.console)

    def _report_error(self, error: ClargsError) -> None:
        self.console.print(f"[clargs.error]❌ Error:[/] {escape(str(error))}")

    def run(self, argv: Sequence[str] | None = None) -> ParseResult:
        """
        Program entry point: `parse()` with errors printed and mapped to exit codes.

        Returns the result when the handler completes normally.
        """
        try:
            return self.parse(argv)
        except (HelpSignal, VersionSignal):
            sys.exit(0)
        except HelpError as error:
            self._report_help_error(error)
            sys.exit(1)
        except ClargsError as error:
            self._report_error(error)
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("[KeyboardInterrupt]. <- Exiting run.")
            sys.exit(130)

    async def run_async(self, argv: Sequence[str] | None = None) -> ParseResult:
        """Program entry point for CLIs with async transforms or handlers."""
        try:
            return await self.parse_async(argv)
        except (HelpSignal, VersionSignal):
            sys.exit(0)
        except HelpError as error:
            self._report_help_error(error)
            sys.exit(1)
        except ClargsError as error:
            self._report_error(error)
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("[KeyboardInterrupt]. <- Exiting run.")
            sys.exit(130)

    def __repr__(self) -> str:
        return (
            f"Cli(name={self.config.name!r}, version={self.config.version!r}, "
            f"commands={list(self.config.commands or {})!r})"
        )
