"""
clargs CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .kinds import ItemKind, OptionKind, PositionalKind
from .models import (
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

__all__ = [
    "CliConfig",
    "CommandDef",
    "HandlerFn",
    "ItemKind",
    "OptionDef",
    "OptionKind",
    "ParseResult",
    "Parser",
    "PositionalDef",
    "PositionalKind",
    "TransformFn",
    "Transforms",
]
