# clargs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the declarative schema model of a clargs CLI.

A CLI is described entirely by data: option definitions keyed by canonical name,
an ordered list of positional definitions, optional commands, and the handlers and
transforms to run once a parse succeeds. The models here only check *shape*
(field types, unknown keys). Cross-field rules such as default/choice agreement,
alias uniqueness and positional ordering live in `clargs.validate`.

Models:
- `OptionDef`: One named option (`--name`), tagged by `OptionKind`.
- `PositionalDef`: One positional argument, tagged by `PositionalKind`.
- `Transforms`: Config-style transforms for values and positionals.
- `Parser`: An options schema, a positionals schema and pending transforms.
- `CommandDef`: A `Parser` with a description and a terminal handler.
- `CliConfig`: The full CLI definition.
- `ParseResult`: The immutable value handed to transforms and handlers.

Option and positional models revalidate whenever they are embedded in a larger
model, so a definition that was modified after construction is checked again
when it is placed in a CLI and any error is reported with its full path.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Awaitable, Callable, Mapping, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    field_validator,
)

from clargs.schema.kinds import ItemKind, OptionKind, PositionalKind


@dataclass(frozen=True)
class ParseResult:
    """
    The outcome of one invocation.

    Attributes:
        command (str | None): The resolved command name, or None for simple CLIs
            and default handlers.
        values (dict[str, Any]): Option values keyed by canonical option name.
        positionals (tuple[Any, ...]): Positional values in schema order. A
            variadic positional contributes one list.
    """

    command: str | None = None
    values: dict[str, Any] = field(default_factory=dict)
    positionals: tuple[Any, ...] = ()

    def replace(self, **changes: Any) -> ParseResult:
        """Return a copy with the given fields replaced."""
        if "positionals" in changes:
            changes["positionals"] = tuple(changes["positionals"])
        return replace(self, **changes)


TransformFn = Callable[[ParseResult], Union[ParseResult, Awaitable[ParseResult]]]
HandlerFn = Callable[[ParseResult], Any]


class OptionDef(BaseModel):
    """
    Represents a named command-line option.

    Attributes:
        type (OptionKind): The option kind (string, boolean, number, enum, array, count).
        aliases (list[str]): Alternate names. Single characters are used as `-x`,
            words as `--word`.
        description (str): Help text for the option.
        group (str | None): Heading under which the option is listed in help.
        hidden (bool): Leave the option out of help output.
        required (bool): Fail the parse if the option is absent and has no default.
        default (Any): Value used when the option is absent. None means no default.
        choices (list[str] | None): Allowed values for enum options and enum arrays.
        items (ItemKind | None): Element kind for array options.
    """

    model_config = ConfigDict(extra="forbid", revalidate_instances="always")

    type: OptionKind
    aliases: list[StrictStr] = Field(default_factory=list)
    description: StrictStr = ""
    group: StrictStr | None = None
    hidden: StrictBool = False
    required: StrictBool = False
    default: Any = None
    choices: list[StrictStr] | None = None
    items: ItemKind | None = None

    @field_validator("type", mode="before")
    @classmethod
    def coerce_kind(cls, value: Any) -> OptionKind:
        return OptionKind(value)

    @field_validator("items", mode="before")
    @classmethod
    def coerce_items(cls, value: Any) -> ItemKind | None:
        if value is None:
            return None
        return ItemKind(value)

    @property
    def short_aliases(self) -> list[str]:
        return [alias for alias in self.aliases if len(alias) == 1]

    @property
    def long_aliases(self) -> list[str]:
        return [alias for alias in self.aliases if len(alias) > 1]


class PositionalDef(BaseModel):
    """
    Represents a positional argument.

    Attributes:
        type (PositionalKind): The positional kind (string, number, enum, variadic).
        name (str | None): Display name used in help and error messages.
        description (str): Help text.
        group (str | None): Heading under which the positional is listed in help.
        hidden (bool): Leave the positional out of help output.
        required (bool): Fail the parse if no token is supplied and there is no default.
        default (Any): Value used when no token is supplied.
        choices (list[str] | None): Allowed values for enum positionals.
        items (ItemKind | None): Element kind for variadic positionals.
    """

    model_config = ConfigDict(extra="forbid", revalidate_instances="always")

    type: PositionalKind
    name: StrictStr | None = None
    description: StrictStr = ""
    group: StrictStr | None = None
    hidden: StrictBool = False
    required: StrictBool = False
    default: Any = None
    choices: list[StrictStr] | None = None
    items: ItemKind | None = None

    @field_validator("type", mode="before")
    @classmethod
    def coerce_kind(cls, value: Any) -> PositionalKind:
        return PositionalKind(value)

    @field_validator("items", mode="before")
    @classmethod
    def coerce_items(cls, value: Any) -> ItemKind | None:
        if value is None:
            return None
        return ItemKind(value)

    @property
    def is_optional(self) -> bool:
        """Neither required nor defaulted."""
        return not self.required and self.default is None

    def display_name(self, index: int) -> str:
        return self.name or f"arg{index}"


class Transforms(BaseModel):
    """
    Config-style transforms, applied after parsing and before the handler.

    `values` receives the values mapping and returns a new one; `positionals`
    receives the positionals tuple and returns a new sequence. Either may return
    an awaitable when the CLI is run through `parse_async()`.
    """

    model_config = ConfigDict(extra="forbid")

    values: Callable[..., Any] | None = None
    positionals: Callable[..., Any] | None = None


class Parser(BaseModel):
    """
    An options schema, a positionals schema and the transforms still to apply.

    Parsers are combined with `clargs.pipeline.merge` and extended with
    `clargs.pipeline.map`. They are treated as immutable: every combinator returns
    a new instance.
    """

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    options: dict[str, OptionDef] = Field(default_factory=dict)
    positionals: list[PositionalDef] = Field(default_factory=list)
    transforms: Any = Field(default_factory=list)

    @field_validator("transforms", mode="before")
    @classmethod
    def coerce_transforms(cls, value: Any) -> Any:
        """Accept `{"values": fn, "positionals": fn}` for config-style transforms."""
        keys = {"values", "positionals"}
        if isinstance(value, Mapping) and value and set(value) <= keys:
            if all(fn is None or callable(fn) for fn in value.values()):
                return Transforms(**value)
        return value


class CommandDef(Parser):
    """A `Parser` finalized with a description and a terminal handler."""

    model_config = ConfigDict(revalidate_instances="always")

    description: StrictStr = ""
    handler: Any = None


class CliConfig(Parser):
    """
    The full definition of a CLI.

    Simple CLIs use `options`, `positionals` and `handler`. Command-based CLIs use
    `options` (global), `commands` and `default_handler`, which is either a handler
    function or the name of a registered command.
    """

    name: StrictStr
    version: StrictStr | None = None
    description: StrictStr = ""
    commands: dict[str, CommandDef] | None = None
    handler: Any = None
    default_handler: Any = None

    @property
    def has_commands(self) -> bool:
        return self.commands is not None
