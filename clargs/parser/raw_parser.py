# clargs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Parses an argument vector against an options schema and a positionals schema.

`parse_args()` is the raw parser used by every clargs CLI. It builds a fresh flag
table, tokenizes argv, resolves each option from its occurrences, applies defaults
and coerces values by kind, then assigns positional tokens left to right.

Rules:
- `--x` together with `--no-x` is a conflict; `--no-x` alone yields `False`.
- Two different spellings of one non-repeatable option are a conflict. Repeating
  the same spelling keeps the last value.
- `array` options collect one value per occurrence; `count` options count them.
- Absent options take their default, else `None` (`0` for counts), unless the
  option is required.
- A variadic positional takes every remaining token. Extra tokens with no
  variadic are an error.

Errors are raised on the first problem; there is no partial result.
"""
from __future__ import annotations

from copy import deepcopy
from typing import Any, Mapping, Sequence

from clargs.exceptions import CommandArgumentError, HelpError
from clargs.logger import logger
from clargs.parser.coerce import coerce_choice, coerce_items, coerce_number
from clargs.parser.flags import FlagTable
from clargs.parser.tokenizer import Occurrence, tokenize
from clargs.schema.kinds import OptionKind, PositionalKind
from clargs.schema.models import OptionDef, ParseResult, PositionalDef


def _resolve_option(
    name: str,
    option: OptionDef,
    occurrences: list[Occurrence],
    command: str | None,
) -> Any:
    if not occurrences:
        if option.required and option.default is None:
            raise CommandArgumentError(
                f"Missing required option '--{name}'", command=command
            )
        if option.type == OptionKind.COUNT:
            return option.default if option.default is not None else 0
        return deepcopy(option.default)

    positive = [occurrence for occurrence in occurrences if not occurrence.flag.negated]
    negative = [occurrence for occurrence in occurrences if occurrence.flag.negated]
    if positive and negative:
        raise HelpError(
            f"Conflicting options: {positive[0].flag.token} and {negative[0].flag.token}",
            command=command,
        )
    if negative:
        return False

    if not option.type.repeatable:
        spellings = list(dict.fromkeys(occurrence.flag.token for occurrence in positive))
        if len(spellings) > 1:
            raise HelpError(
                f"Conflicting options: {' and '.join(spellings)}", command=command
            )

    kind = option.type
    raw = [occurrence.value for occurrence in positive]
    try:
        if kind == OptionKind.BOOLEAN:
            return True
        if kind == OptionKind.COUNT:
            return len(positive)
        if kind == OptionKind.ARRAY:
            present = [value for value in raw if value is not None]
            return coerce_items(present, option.items, option.choices)
        last = raw[-1]
        assert last is not None, "value-taking flags always carry a value"
        if kind == OptionKind.NUMBER:
            return coerce_number(last)
        if kind == OptionKind.ENUM:
            return coerce_choice(last, option.choices or [])
        return last
    except ValueError as error:
        raise CommandArgumentError(
            f"Invalid value for --{name}: {error}", command=command
        ) from None


def _resolve_positionals(
    tokens: list[str],
    positionals: Sequence[PositionalDef],
    command: str | None,
) -> tuple[Any, ...]:
    result: list[Any] = []
    remaining = list(tokens)
    for index, positional in enumerate(positionals):
        label = positional.display_name(index)
        try:
            if positional.type == PositionalKind.VARIADIC:
                if remaining:
                    result.append(
                        coerce_items(remaining, positional.items, positional.choices)
                    )
                elif positional.required and positional.default is None:
                    raise CommandArgumentError(
                        f"Missing required positional argument '{label}'", command=command
                    )
                else:
                    default = positional.default
                    result.append(deepcopy(default) if default is not None else [])
                remaining = []
                break
            if not remaining:
                if positional.default is not None:
                    result.append(deepcopy(positional.default))
                elif positional.required:
                    raise CommandArgumentError(
                        f"Missing required positional argument '{label}'", command=command
                    )
                else:
                    result.append(None)
                continue
            token = remaining.pop(0)
            if positional.type == PositionalKind.NUMBER:
                result.append(coerce_number(token))
            elif positional.type == PositionalKind.ENUM:
                result.append(coerce_choice(token, positional.choices or []))
            else:
                result.append(token)
        except ValueError as error:
            raise CommandArgumentError(
                f"Invalid value for positional '{label}': {error}", command=command
            ) from None

    if remaining:
        plural = "s" if len(remaining) > 1 else ""
        raise CommandArgumentError(
            f"Unexpected positional argument{plural}: {', '.join(remaining)}",
            command=command,
        )
    return tuple(result)


def parse_args(
    argv: Sequence[str],
    options: Mapping[str, OptionDef] | None = None,
    positionals: Sequence[PositionalDef] | None = None,
    command: str | None = None,
) -> ParseResult:
    """
    Parse `argv` into a `ParseResult`.

    Args:
        argv (Sequence[str]): Arguments without the program name. For command-based
            CLIs the command token must already be removed.
        options (Mapping[str, OptionDef]): The effective options schema.
        positionals (Sequence[PositionalDef]): The effective positionals schema.
        command (str | None): Name recorded in the result and in raised errors.

    Returns:
        ParseResult: One value per option name and one entry per positional.

    Raises:
        CommandArgumentError: For unknown flags, missing or invalid values, and
            extra positional tokens.
        HelpError: For conflicting spellings of one option.
    """
    options = options or {}
    positionals = positionals or []
    table = FlagTable(options)
    stream = tokenize(list(argv), table, command)

    grouped: dict[str, list[Occurrence]] = {name: [] for name in options}
    for occurrence in stream.occurrences:
        grouped[occurrence.flag.name].append(occurrence)

    values = {
        name: _resolve_option(name, option, grouped[name], command)
        for name, option in options.items()
    }
    result = ParseResult(
        command=command,
        values=values,
        positionals=_resolve_positionals(stream.positionals, positionals, command),
    )
    logger.debug("Parsed %r -> %r", list(argv), result)
    return result
