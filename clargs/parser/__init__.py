"""
clargs CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .coerce import coerce_number
from .flags import Flag, FlagTable
from .raw_parser import parse_args
from .tokenizer import Occurrence, TokenStream, tokenize

__all__ = [
    "Flag",
    "FlagTable",
    "Occurrence",
    "TokenStream",
    "coerce_number",
    "parse_args",
    "tokenize",
]
