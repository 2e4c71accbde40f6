# clargs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Static validation of clargs CLI configurations.

`validate_config()` walks a complete CLI definition once, before any argument is
read, and raises `ValidationError` for the first structural problem it finds. The
error carries a dot/bracket path relative to the config root, for example
`options.verbose.aliases[0]` or `commands.add.positionals[1]`.

Checks run in this order:
1. Shape: the pydantic models in `clargs.schema.models`.
2. Per-option rules: choices, items and default/type agreement.
3. The alias namespace: aliases, option names and implicit `no-<name>` flags.
4. Positional sequence rules: variadic last, required never after optional.
5. Command-based rules: per-command validation with the global namespace
   seeded in, no top-level positionals or handler, `default_handler` target.

There is no error aggregation. The first violation is raised.
"""
from __future__ import annotations

import math
from typing import Any, Mapping

from pydantic import ValidationError as PydanticValidationError

from clargs.exceptions import ValidationError
from clargs.logger import logger
from clargs.schema.kinds import ItemKind, OptionKind, PositionalKind
from clargs.schema.models import (
    CliConfig,
    CommandDef,
    OptionDef,
    PositionalDef,
    Transforms,
)


def format_path(*parts: str | int) -> str:
    """Join path parts as `a.b[0].c`."""
    path = ""
    for part in parts:
        if isinstance(part, int):
            path += f"[{part}]"
        elif path:
            path += f".{part}"
        else:
            path = str(part)
    return path


def translate_pydantic_error(
    error: PydanticValidationError, prefix: str = ""
) -> ValidationError:
    """Convert the first pydantic error into a clargs `ValidationError`."""
    first = error.errors()[0]
    loc = [part for part in first.get("loc", ()) if part != "__root__"]
    path = format_path(*([prefix] if prefix else []), *loc) or "config"
    message = first.get("msg", "is invalid")
    if message.startswith("Value error, "):
        message = message[len("Value error, ") :]
    return ValidationError(path, message)


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_valid_token(token: str) -> bool:
    """Non-empty, no leading `-`, no whitespace."""
    if not token or token.startswith("-"):
        return False
    return not any(char.isspace() for char in token)


def _validate_default(default: Any, kind: str, items: ItemKind | None, path: str) -> None:
    if kind in ("string", "enum"):
        if not isinstance(default, str):
            raise ValidationError(path, "must be a string")
    elif kind == "boolean":
        if not isinstance(default, bool):
            raise ValidationError(path, "must be a boolean")
    elif kind in ("number", "count"):
        if not is_number(default) or not math.isfinite(default):
            raise ValidationError(path, "must be a number")
        if kind == "count" and (not isinstance(default, int) or default < 0):
            raise ValidationError(path, "must be a non-negative integer")
    elif kind in ("array", "variadic"):
        if not isinstance(default, list):
            raise ValidationError(path, "must be a list")
        numeric = items == ItemKind.NUMBER
        expected = "numbers" if numeric else "strings"
        for index, item in enumerate(default):
            if not (is_number(item) if numeric else isinstance(item, str)):
                raise ValidationError(f"{path}[{index}]", f"must be a list of {expected}")


def _validate_choices(choices: list[str] | None, path: str) -> list[str]:
    if choices is None:
        raise ValidationError(path, "must be a non-empty list of strings")
    if not choices:
        raise ValidationError(path, "must not be empty")
    if len(set(choices)) != len(choices):
        raise ValidationError(path, "must not contain duplicates")
    return choices


def validate_option(name: str, option: OptionDef, path: str) -> None:
    """Validate the type-specific rules of one option."""
    if not _is_valid_token(name):
        raise ValidationError(path, f"invalid option name {name!r}")

    kind = option.type
    if kind == OptionKind.ENUM:
        _validate_choices(option.choices, f"{path}.choices")
    elif kind == OptionKind.ARRAY:
        if option.items is None:
            raise ValidationError(f"{path}.items", 'must be "string" or "number"')
        if option.choices is not None:
            if option.items != ItemKind.STRING:
                raise ValidationError(
                    f"{path}.choices", 'choices are only allowed with items "string"'
                )
            _validate_choices(option.choices, f"{path}.choices")
    elif option.choices is not None:
        raise ValidationError(f"{path}.choices", f"not allowed for {kind} options")

    if kind != OptionKind.ARRAY and option.items is not None:
        raise ValidationError(f"{path}.items", f"not allowed for {kind} options")

    if option.default is not None:
        _validate_default(option.default, kind.value, option.items, f"{path}.default")
        if option.choices:
            members = option.default if kind == OptionKind.ARRAY else [option.default]
            for member in members:
                if member not in option.choices:
                    raise ValidationError(
                        f"{path}.default",
                        f"must be one of the choices: {', '.join(option.choices)}",
                    )


def validate_aliases(
    options: Mapping[str, OptionDef],
    path: str,
    namespace: dict[str, str] | None = None,
) -> dict[str, str]:
    """
    Check the alias namespace of an options schema.

    Every option name, explicit alias and implicit `no-<boolean>` flag is a token in
    one namespace and must be unique. `namespace` seeds tokens already taken (the
    global options of a command-based CLI) and maps each token to its owner.

    Returns:
        dict[str, str]: The namespace with this schema's tokens added.
    """
    taken: dict[str, str] = dict(namespace or {})

    def claim(token: str, owner: str, where: str, what: str) -> None:
        existing = taken.get(token)
        if existing is not None:
            raise ValidationError(
                where, f'{what} "{token}" is already used by {existing}'
            )
        taken[token] = owner

    for name, option in options.items():
        claim(name, f'option "{name}"', format_path(path, name), "option name")
        if option.type == OptionKind.BOOLEAN:
            claim(
                f"no-{name}",
                f'the negation of option "{name}"',
                format_path(path, name),
                "negated flag",
            )

    for name, option in options.items():
        for index, alias in enumerate(option.aliases):
            where = format_path(path, name, "aliases", index)
            if not _is_valid_token(alias):
                raise ValidationError(where, f"invalid alias {alias!r}")
            claim(alias, f'option "{name}"', where, "alias")

    return taken


def validate_options(
    options: Mapping[str, OptionDef],
    path: str,
    namespace: dict[str, str] | None = None,
) -> dict[str, str]:
    for name, option in options.items():
        validate_option(name, option, format_path(path, name))
    return validate_aliases(options, path, namespace)


def validate_positional(positional: PositionalDef, path: str) -> None:
    kind = positional.type
    if kind == PositionalKind.ENUM:
        _validate_choices(positional.choices, f"{path}.choices")
    elif positional.choices is not None:
        raise ValidationError(f"{path}.choices", f"not allowed for {kind} positionals")

    if kind == PositionalKind.VARIADIC:
        if positional.items is None:
            raise ValidationError(f"{path}.items", 'must be "string" or "number"')
    elif positional.items is not None:
        raise ValidationError(f"{path}.items", f"not allowed for {kind} positionals")

    if positional.default is not None:
        _validate_default(
            positional.default, kind.value, positional.items, f"{path}.default"
        )
        if positional.choices and positional.default not in positional.choices:
            raise ValidationError(
                f"{path}.default",
                f"must be one of the choices: {', '.join(positional.choices)}",
            )


def validate_positionals(positionals: list[PositionalDef], path: str) -> None:
    for index, positional in enumerate(positionals):
        validate_positional(positional, format_path(path, index))

    for index, positional in enumerate(positionals):
        if positional.type == PositionalKind.VARIADIC and index != len(positionals) - 1:
            raise ValidationError(
                format_path(path, index),
                "variadic positional must be the last positional argument",
            )

    seen_optional = False
    for index, positional in enumerate(positionals):
        if positional.is_optional:
            seen_optional = True
        elif seen_optional and positional.type != PositionalKind.VARIADIC:
            raise ValidationError(
                format_path(path, index),
                "required positional cannot follow an optional positional",
            )


def validate_transforms(transforms: Any, path: str) -> None:
    if transforms is None or isinstance(transforms, Transforms):
        return
    if not isinstance(transforms, (list, tuple)):
        raise ValidationError(path, "must be a Transforms or a list of functions")
    for index, transform in enumerate(transforms):
        if not callable(transform):
            raise ValidationError(format_path(path, index), "must be a function")


def validate_handler(handler: Any, path: str, required: bool = False) -> None:
    if handler is None:
        if required:
            raise ValidationError(path, "is required")
        return
    if not callable(handler):
        raise ValidationError(path, "must be a function")


def validate_command(
    name: str,
    command: CommandDef,
    path: str,
    global_options: Mapping[str, OptionDef],
    global_namespace: dict[str, str],
) -> None:
    """Validate one command with the global alias namespace seeded in."""
    if not _is_valid_token(name):
        raise ValidationError(path, f"invalid command name {name!r}")
    validate_handler(command.handler, f"{path}.handler", required=True)

    # A command-local option shadows the global option of the same name, so the
    # shadowed option's tokens are released before the local ones are claimed.
    shadowed = {
        owner
        for local_name in command.options
        if local_name in global_options
        for owner in (f'option "{local_name}"', f'the negation of option "{local_name}"')
    }
    namespace = {
        token: owner for token, owner in global_namespace.items() if owner not in shadowed
    }
    validate_options(command.options, f"{path}.options", namespace)
    validate_positionals(command.positionals, f"{path}.positionals")
    validate_transforms(command.transforms, f"{path}.transforms")


def validate_config(config: CliConfig | Mapping[str, Any]) -> CliConfig:
    """
    Validate a CLI definition.

    Args:
        config (CliConfig | Mapping[str, Any]): A config model, or a plain mapping
            with the same keys (option and positional entries use a `"type"` key).

    Returns:
        CliConfig: The validated (and revalidated) config model.

    Raises:
        ValidationError: For the first structural problem found.
    """
    if isinstance(config, CliConfig):
        raw: Any = {key: getattr(config, key) for key in CliConfig.model_fields}
    elif isinstance(config, Mapping):
        raw = config
    else:
        raise ValidationError("config", "config must be a mapping or CliConfig")

    try:
        model = CliConfig.model_validate(raw)
    except PydanticValidationError as error:
        raise translate_pydantic_error(error) from None

    if not model.name:
        raise ValidationError("name", "must not be empty")

    namespace = validate_options(model.options, "options")

    if model.has_commands:
        assert model.commands is not None
        if not model.commands:
            raise ValidationError("commands", "must have at least one command")
        for name, command in model.commands.items():
            validate_command(
                name, command, format_path("commands", name), model.options, namespace
            )
        if model.positionals:
            raise ValidationError(
                "positionals",
                "top-level positionals are not allowed in command-based CLIs "
                "(define them per-command)",
            )
        if model.handler is not None:
            raise ValidationError("handler", "use default_handler for command-based CLIs")
        default_handler = model.default_handler
        if isinstance(default_handler, str):
            if default_handler not in model.commands:
                raise ValidationError(
                    "default_handler",
                    f'must reference an existing command, got "{default_handler}"',
                )
        elif default_handler is not None and not callable(default_handler):
            raise ValidationError(
                "default_handler", "must be a function or command name string"
            )
    else:
        validate_positionals(model.positionals, "positionals")
        validate_handler(model.handler, "handler")
        if model.default_handler is not None:
            raise ValidationError(
                "default_handler", "default_handler is only allowed with commands"
            )

    validate_transforms(model.transforms, "transforms")
    logger.debug(
        "Validated CLI '%s' (%d options, %d commands).",
        model.name,
        len(model.options),
        len(model.commands or {}),
    )
    return model
