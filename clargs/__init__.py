"""
clargs CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from . import opt, pos
from .cli import Cli
from .exceptions import (
    AsyncExecutionError,
    ClargsError,
    CommandArgumentError,
    HelpError,
    TransformError,
    ValidationError,
)
from .help import format_help, render_help
from .parser import parse_args
from .pipeline import handle, map, merge, pipe, snake_case_values
from .resolver import Resolution, resolve_command
from .schema import (
    CliConfig,
    CommandDef,
    OptionDef,
    ParseResult,
    Parser,
    PositionalDef,
    Transforms,
)
from .signals import FlowSignal, HelpSignal, VersionSignal
from .validate import validate_config
from .version import __version__

logger = logging.getLogger("clargs")


__all__ = [
    "AsyncExecutionError",
    "ClargsError",
    "Cli",
    "CliConfig",
    "CommandArgumentError",
    "CommandDef",
    "FlowSignal",
    "HelpError",
    "HelpSignal",
    "OptionDef",
    "ParseResult",
    "Parser",
    "PositionalDef",
    "Resolution",
    "TransformError",
    "Transforms",
    "ValidationError",
    "VersionSignal",
    "__version__",
    "format_help",
    "handle",
    "map",
    "merge",
    "opt",
    "parse_args",
    "pipe",
    "pos",
    "render_help",
    "resolve_command",
    "snake_case_values",
    "validate_config",
]
