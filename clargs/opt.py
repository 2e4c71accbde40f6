# clargs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Builder functions for named options.

Each builder returns a validated `OptionDef`. `options()` collects definitions into
a `Parser` and checks the alias namespace right away, so conflicting aliases are
reported where the schema is written rather than when the CLI is assembled.

Example:
    from clargs import opt

    schema = opt.options(
        verbose=opt.boolean(aliases=["v"], description="Show more output"),
        level=opt.enum(["low", "high"], default="low"),
        tag=opt.array("string", aliases=["t"]),
    )
"""
from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError as PydanticValidationError

from clargs.schema.kinds import ItemKind, OptionKind
from clargs.schema.models import OptionDef, Parser
from clargs.validate import translate_pydantic_error, validate_options


def _build(kind: OptionKind, aliases: list[str] | None, **fields: Any) -> OptionDef:
    try:
        return OptionDef(type=kind, aliases=list(aliases or []), **fields)
    except PydanticValidationError as error:
        raise translate_pydantic_error(error) from None


def string(
    *,
    aliases: list[str] | None = None,
    description: str = "",
    group: str | None = None,
    hidden: bool = False,
    required: bool = False,
    default: str | None = None,
) -> OptionDef:
    """Option taking one string value."""
    return _build(
        OptionKind.STRING,
        aliases,
        description=description,
        group=group,
        hidden=hidden,
        required=required,
        default=default,
    )


def boolean(
    *,
    aliases: list[str] | None = None,
    description: str = "",
    group: str | None = None,
    hidden: bool = False,
    required: bool = False,
    default: bool | None = None,
) -> OptionDef:
    """Flag option. Also answers to `--no-<name>`."""
    return _build(
        OptionKind.BOOLEAN,
        aliases,
        description=description,
        group=group,
        hidden=hidden,
        required=required,
        default=default,
    )


def number(
    *,
    aliases: list[str] | None = None,
    description: str = "",
    group: str | None = None,
    hidden: bool = False,
    required: bool = False,
    default: int | float | None = None,
) -> OptionDef:
    """Option taking one numeric literal."""
    return _build(
        OptionKind.NUMBER,
        aliases,
        description=description,
        group=group,
        hidden=hidden,
        required=required,
        default=default,
    )


def enum(
    choices: list[str],
    *,
    aliases: list[str] | None = None,
    description: str = "",
    group: str | None = None,
    hidden: bool = False,
    required: bool = False,
    default: str | None = None,
) -> OptionDef:
    """Option taking one value out of `choices`."""
    return _build(
        OptionKind.ENUM,
        aliases,
        choices=list(choices),
        description=description,
        group=group,
        hidden=hidden,
        required=required,
        default=default,
    )


def array(
    items: ItemKind | str = ItemKind.STRING,
    *,
    choices: list[str] | None = None,
    aliases: list[str] | None = None,
    description: str = "",
    group: str | None = None,
    hidden: bool = False,
    required: bool = False,
    default: list[Any] | None = None,
) -> OptionDef:
    """
    Repeatable option collecting one value per occurrence.

    Args:
        items (ItemKind | str): Element kind, `"string"` or `"number"`.
        choices (list[str] | None): Restrict string items to these values.
    """
    return _build(
        OptionKind.ARRAY,
        aliases,
        items=items,
        choices=list(choices) if choices is not None else None,
        description=description,
        group=group,
        hidden=hidden,
        required=required,
        default=default,
    )


def count(
    *,
    aliases: list[str] | None = None,
    description: str = "",
    group: str | None = None,
    hidden: bool = False,
    required: bool = False,
    default: int | None = None,
) -> OptionDef:
    """Flag option counting its occurrences (`-vvv` is 3)."""
    return _build(
        OptionKind.COUNT,
        aliases,
        description=description,
        group=group,
        hidden=hidden,
        required=required,
        default=default,
    )


def options(schema: Mapping[str, OptionDef] | None = None, **named: OptionDef) -> Parser:
    """
    Collect option definitions into a `Parser`.

    Names that are not valid Python identifiers (`"dry-run"`) can be passed in the
    `schema` mapping. Keyword arguments are added after it.

    Raises:
        ValidationError: If an option is invalid or two entries claim the same
            flag.
    """
    combined: dict[str, OptionDef] = {**(schema or {}), **named}
    validate_options(combined, "options")
    return Parser(options=combined)
