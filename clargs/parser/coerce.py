# clargs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value coercion for raw argument tokens.

Functions:
- coerce_number: Parse a numeric literal into an `int` or a finite `float`.
- coerce_choice: Check a token against a list of choices.
- coerce_items: Convert the elements of an array option or variadic positional.
- looks_like_number: Tell a negative number apart from a short flag.
"""
from __future__ import annotations

import math
import re
from typing import Any

from clargs.schema.kinds import ItemKind

INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")
DECIMAL_LITERAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def coerce_number(value: str) -> int | float:
    """
    Convert a numeric literal.

    Only ASCII decimal literals are accepted, with an optional sign, fraction
    and exponent. Integral literals become `int`, the rest a finite `float`.

    Raises:
        ValueError: If the literal is not a finite number.
    """
    text = value.strip()
    if INTEGER_LITERAL.fullmatch(text):
        return int(text)
    if DECIMAL_LITERAL.fullmatch(text):
        number = float(text)
    elif text.lower().lstrip("+-") in ("inf", "infinity", "nan"):
        raise ValueError(f'"{value}" is not a finite number')
    else:
        raise ValueError(f'"{value}" is not a number')
    if not math.isfinite(number):
        raise ValueError(f'"{value}" is not a finite number')
    return number


def looks_like_number(token: str) -> bool:
    try:
        coerce_number(token)
    except ValueError:
        return False
    return True


def coerce_choice(value: str, choices: list[str]) -> str:
    """
    Raises:
        ValueError: If `value` is not one of `choices`.
    """
    if value not in choices:
        raise ValueError(f'"{value}". Must be one of: {", ".join(choices)}')
    return value


def coerce_item(
    value: str, items: ItemKind | None, choices: list[str] | None = None
) -> Any:
    if items == ItemKind.NUMBER:
        return coerce_number(value)
    if choices:
        return coerce_choice(value, choices)
    return value


def coerce_items(
    values: list[str], items: ItemKind | None, choices: list[str] | None = None
) -> list[Any]:
    return [coerce_item(value, items, choices) for value in values]
