# clargs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Builder functions for positional arguments.

Positionals are consumed in the order they are declared. `positionals()` checks the
ordering rules eagerly: a variadic positional must come last, and a required
positional cannot follow an optional one.
"""
from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from clargs.schema.kinds import ItemKind, PositionalKind
from clargs.schema.models import Parser, PositionalDef
from clargs.validate import translate_pydantic_error, validate_positionals


def _build(kind: PositionalKind, **fields: Any) -> PositionalDef:
    try:
        return PositionalDef(type=kind, **fields)
    except PydanticValidationError as error:
        raise translate_pydantic_error(error) from None


def string(
    *,
    name: str | None = None,
    description: str = "",
    group: str | None = None,
    hidden: bool = False,
    required: bool = False,
    default: str | None = None,
) -> PositionalDef:
    return _build(
        PositionalKind.STRING,
        name=name,
        description=description,
        group=group,
        hidden=hidden,
        required=required,
        default=default,
    )


def number(
    *,
    name: str | None = None,
    description: str = "",
    group: str | None = None,
    hidden: bool = False,
    required: bool = False,
    default: int | float | None = None,
) -> PositionalDef:
    return _build(
        PositionalKind.NUMBER,
        name=name,
        description=description,
        group=group,
        hidden=hidden,
        required=required,
        default=default,
    )


def enum(
    choices: list[str],
    *,
    name: str | None = None,
    description: str = "",
    group: str | None = None,
    hidden: bool = False,
    required: bool = False,
    default: str | None = None,
) -> PositionalDef:
    return _build(
        PositionalKind.ENUM,
        choices=list(choices),
        name=name,
        description=description,
        group=group,
        hidden=hidden,
        required=required,
        default=default,
    )


def variadic(
    items: ItemKind | str = ItemKind.STRING,
    *,
    name: str | None = None,
    description: str = "",
    group: str | None = None,
    hidden: bool = False,
    required: bool = False,
    default: list[Any] | None = None,
) -> PositionalDef:
    """Positional collecting every remaining token. Must be declared last."""
    return _build(
        PositionalKind.VARIADIC,
        items=items,
        name=name,
        description=description,
        group=group,
        hidden=hidden,
        required=required,
        default=default,
    )


def positionals(*defs: PositionalDef) -> Parser:
    """Collect positional definitions, in order, into a `Parser`."""
    collected = list(defs)
    validate_positionals(collected, "positionals")
    return Parser(positionals=collected)
