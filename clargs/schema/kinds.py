# clargs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the closed sets of option, positional and item kinds used by clargs schemas.

Each schema entry carries one of these enums as its `type` discriminant. The parser,
the validator and the help renderer all switch on it, so the members listed here
are the complete vocabulary of the framework.

Supports alias coercion for shorthand or config-friendly values, so definitions
loaded from plain mappings can say `"bool"` or `"int"`.

Exports:
    - OptionKind: Kinds of named (flag-style) options.
    - PositionalKind: Kinds of positional arguments.
    - ItemKind: Element kinds for `array` options and `variadic` positionals.

Example:
    OptionKind("boolean") → OptionKind.BOOLEAN
    OptionKind("bool")    → OptionKind.BOOLEAN (via alias)
    PositionalKind("rest") → PositionalKind.VARIADIC
"""
from __future__ import annotations

from enum import Enum


class _KindEnum(Enum):
    """Shared alias handling for the kind enums."""

    @classmethod
    def choices(cls) -> list[str]:
        """Return the canonical values of all members."""
        return [member.value for member in cls]

    @classmethod
    def _get_alias(cls, value: str) -> str:
        return value

    @classmethod
    def _missing_(cls, value: object) -> _KindEnum:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(cls.choices())
        raise ValueError(f"must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


class OptionKind(_KindEnum):
    """
    Kinds of named options.

    Members:
        STRING: Takes one string value.
        BOOLEAN: Takes no value; also answers to `--no-<name>`.
        NUMBER: Takes one numeric literal.
        ENUM: Takes one value from a fixed list of choices.
        ARRAY: Takes one value per occurrence; repeatable.
        COUNT: Takes no value; counts occurrences.

    Aliases:
        - "str" → "string"
        - "bool", "flag" → "boolean"
        - "int", "float" → "number"
        - "choice" → "enum"
        - "list" → "array"
    """

    STRING = "string"
    BOOLEAN = "boolean"
    NUMBER = "number"
    ENUM = "enum"
    ARRAY = "array"
    COUNT = "count"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "str": "string",
            "bool": "boolean",
            "flag": "boolean",
            "int": "number",
            "float": "number",
            "choice": "enum",
            "list": "array",
        }
        return aliases.get(value, value)

    @property
    def takes_value(self) -> bool:
        """True if the flag consumes a value token."""
        return self not in (OptionKind.BOOLEAN, OptionKind.COUNT)

    @property
    def repeatable(self) -> bool:
        """True if every occurrence of the flag is kept."""
        return self in (OptionKind.ARRAY, OptionKind.COUNT)


class PositionalKind(_KindEnum):
    """
    Kinds of positional arguments.

    Members:
        STRING: One string token.
        NUMBER: One numeric token.
        ENUM: One token from a fixed list of choices.
        VARIADIC: Every remaining token; must be last.
    """

    STRING = "string"
    NUMBER = "number"
    ENUM = "enum"
    VARIADIC = "variadic"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "str": "string",
            "int": "number",
            "float": "number",
            "choice": "enum",
            "rest": "variadic",
        }
        return aliases.get(value, value)


class ItemKind(_KindEnum):
    """Element kinds of `array` options and `variadic` positionals."""

    STRING = "string"
    NUMBER = "number"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {"str": "string", "int": "number", "float": "number"}
        return aliases.get(value, value)
