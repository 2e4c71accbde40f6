# clargs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Splits an argument vector into option occurrences and positional tokens.

Matching is strict: every flag must be registered in the `FlagTable`. Supported
forms are `--flag value`, `--flag=value`, `-x value`, `-xVALUE` and bundled short
flags (`-abc`), where a value-taking short flag ends the bundle and consumes the
rest of the bundle or the next token. `--` ends option parsing and a lone `-` is
a positional token.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from clargs.exceptions import CommandArgumentError
from clargs.parser.coerce import looks_like_number
from clargs.parser.flags import Flag, FlagTable


@dataclass(frozen=True)
class Occurrence:
    """One appearance of a flag in argv."""

    flag: Flag
    value: str | None = None


@dataclass
class TokenStream:
    occurrences: list[Occurrence] = field(default_factory=list)
    positionals: list[str] = field(default_factory=list)


def is_flag_like(token: str) -> bool:
    """True for tokens that would be read as a flag rather than a value."""
    return token.startswith("-") and token != "-" and not looks_like_number(token)


def unknown_option(
    token: str, table: FlagTable, command: str | None
) -> CommandArgumentError:
    message = f"Unknown option: {token}"
    suggestions = table.suggest(token)
    if suggestions:
        message += f". Did you mean: {', '.join(suggestions)}?"
    return CommandArgumentError(message, command=command)


class Tokenizer:
    """Walks argv once and records what each token means."""

    def __init__(self, table: FlagTable, command: str | None = None) -> None:
        self.table = table
        self.command = command

    def _error(self, message: str) -> CommandArgumentError:
        return CommandArgumentError(message, command=self.command)

    def _take_value(self, flag: Flag, argv: list[str], index: int) -> str:
        if index >= len(argv) or is_flag_like(argv[index]):
            raise self._error(f"Option '{flag.token}' requires a value")
        return argv[index]

    def _long(self, token: str, argv: list[str], index: int, stream: TokenStream) -> int:
        spelling, has_inline, inline = token.partition("=")
        flag = self.table.get(spelling)
        if flag is None:
            raise unknown_option(spelling, self.table, self.command)
        if not flag.takes_value:
            if has_inline:
                raise self._error(f"Option '{flag.token}' does not take a value")
            stream.occurrences.append(Occurrence(flag))
            return index + 1
        if has_inline:
            stream.occurrences.append(Occurrence(flag, inline))
            return index + 1
        value = self._take_value(flag, argv, index + 1)
        stream.occurrences.append(Occurrence(flag, value))
        return index + 2

    def _short(self, token: str, argv: list[str], index: int, stream: TokenStream) -> int:
        position = 1
        while position < len(token):
            spelling = f"-{token[position]}"
            flag = self.table.get(spelling)
            if flag is None:
                raise unknown_option(spelling, self.table, self.command)
            rest = token[position + 1 :]
            if flag.takes_value:
                if rest:
                    stream.occurrences.append(Occurrence(flag, rest))
                    return index + 1
                stream.occurrences.append(
                    Occurrence(flag, self._take_value(flag, argv, index + 1))
                )
                return index + 2
            if rest.startswith("="):
                raise self._error(f"Option '{flag.token}' does not take a value")
            stream.occurrences.append(Occurrence(flag))
            position += 1
        return index + 1

    def tokenize(self, argv: list[str]) -> TokenStream:
        stream = TokenStream()
        index = 0
        while index < len(argv):
            token = argv[index]
            if token == "--":
                stream.positionals.extend(argv[index + 1 :])
                break
            if token.startswith("--"):
                index = self._long(token, argv, index, stream)
            elif token.startswith("-") and token != "-":
                if token[:2] not in self.table and looks_like_number(token):
                    stream.positionals.append(token)
                    index += 1
                else:
                    index = self._short(token, argv, index, stream)
            else:
                stream.positionals.append(token)
                index += 1
        return stream


def tokenize(
    argv: list[str], table: FlagTable, command: str | None = None
) -> TokenStream:
    return Tokenizer(table, command).tokenize(argv)
