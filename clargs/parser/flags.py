# clargs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Derives the flag table of an options schema.

Every option registers `--<name>`. Single-character aliases register `-<c>` and
word aliases register `--<word>`. Boolean options additionally register
`--no-<name>` for their canonical name only.
"""
from __future__ import annotations

from dataclasses import dataclass
from difflib import get_close_matches
from typing import Iterator, Mapping

from clargs.logger import logger
from clargs.schema.kinds import OptionKind
from clargs.schema.models import OptionDef


@dataclass(frozen=True)
class Flag:
    """
    One spelling of an option on the command line.

    Attributes:
        token (str): The flag as typed, e.g. `--verbose`, `-v` or `--no-verbose`.
        name (str): Canonical name of the option the flag belongs to.
        option (OptionDef): The option definition.
        negated (bool): True for the `--no-<name>` spelling of a boolean.
    """

    token: str
    name: str
    option: OptionDef
    negated: bool = False

    @property
    def takes_value(self) -> bool:
        return not self.negated and self.option.type.takes_value

    @property
    def is_short(self) -> bool:
        return not self.token.startswith("--")


def flag_token(alias: str) -> str:
    return f"-{alias}" if len(alias) == 1 else f"--{alias}"


class FlagTable:
    """Lookup from flag spelling to `Flag`, built fresh for every parse."""

    def __init__(self, options: Mapping[str, OptionDef]) -> None:
        self._flags: dict[str, Flag] = {}
        for name, option in options.items():
            self._add(Flag(f"--{name}", name, option))
            for alias in option.aliases:
                self._add(Flag(flag_token(alias), name, option))
            if option.type == OptionKind.BOOLEAN:
                self._add(Flag(f"--no-{name}", name, option, negated=True))
        logger.debug("Flag table: %s", ", ".join(self._flags))

    def _add(self, flag: Flag) -> None:
        self._flags.setdefault(flag.token, flag)

    def __contains__(self, token: object) -> bool:
        return token in self._flags

    def __iter__(self) -> Iterator[str]:
        return iter(self._flags)

    def __len__(self) -> int:
        return len(self._flags)

    def get(self, token: str) -> Flag | None:
        return self._flags.get(token)

    def suggest(self, token: str) -> list[str]:
        """Return up to three registered flags close to `token`."""
        return get_close_matches(token, list(self._flags), n=3, cutoff=0.6)
