# clargs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Combinators for building parsers and the runtime that executes their transforms.

A `Parser` carries an options schema, a positionals schema and a list of pending
transforms. The combinators return new parsers and never modify their inputs:

- `merge(*parsers)`: Combine schemas; later options override earlier ones with the
  same name, positionals and transforms are concatenated in order.
- `map(parser, fn)` / `map(fn)`: Append a transform.
- `handle(parser, fn)` / `handle(fn)`: Finalize a parser into a `CommandDef`.
- `pipe(value, *fns)`: Left-to-right function composition.

After a successful parse, `run_pipeline()` or `run_pipeline_async()` applies the
transforms in registration order and then calls the handler. A transform receives
a `ParseResult` and returns a new one, or a mapping with `values` and/or
`positionals` keys. The sync runner refuses awaitables; the async runner awaits
each step before starting the next.
"""
from __future__ import annotations

from functools import reduce
from typing import Any, Callable, Generator, Iterable, Mapping, Sequence

from clargs.exceptions import AsyncExecutionError, TransformError, ValidationError
from clargs.logger import logger
from clargs.schema.models import (
    CommandDef,
    HandlerFn,
    ParseResult,
    Parser,
    TransformFn,
    Transforms,
)
from clargs.utils import discard_awaitable, is_awaitable
from clargs.validate import validate_aliases, validate_positionals

RESULT_KEYS = ("values", "positionals")


class _KeyedAwaitable:
    """Wraps an awaitable so its result is returned under `key`."""

    def __init__(self, key: str, awaitable: Any) -> None:
        self.key = key
        self.awaitable = awaitable

    def __await__(self) -> Generator[Any, None, dict[str, Any]]:
        value = yield from self.awaitable.__await__()
        return {self.key: value}

    def close(self) -> None:
        discard_awaitable(self.awaitable)


def _config_step(key: str, fn: Callable[..., Any]) -> TransformFn:
    def step(result: ParseResult) -> Any:
        current = dict(result.values) if key == "values" else tuple(result.positionals)
        returned = fn(current)
        if is_awaitable(returned):
            return _KeyedAwaitable(key, returned)
        return {key: returned}

    step.__name__ = f"{key}_transform"
    step.__qualname__ = step.__name__
    return step


def normalize_transforms(transforms: Any) -> list[TransformFn]:
    """
    Flatten a parser's transforms into a list of `ParseResult` functions.

    Config-style `Transforms` are expanded values first, then positionals.
    """
    if transforms is None:
        return []
    if isinstance(transforms, Transforms):
        steps: list[TransformFn] = []
        if transforms.values is not None:
            steps.append(_config_step("values", transforms.values))
        if transforms.positionals is not None:
            steps.append(_config_step("positionals", transforms.positionals))
        return steps
    return list(transforms)


def _name_of(fn: Any) -> str:
    return getattr(fn, "__name__", type(fn).__name__)


def apply_returned(result: ParseResult, returned: Any, transform: Any) -> ParseResult:
    """
    Turn what a transform returned into the next `ParseResult`.

    Raises:
        TransformError: If the value is neither a `ParseResult` nor a mapping with
            `values`/`positionals` keys of the right shape.
    """
    name = _name_of(transform)
    if isinstance(returned, ParseResult):
        return returned
    if not isinstance(returned, Mapping):
        raise TransformError(
            f"Transform '{name}' must return a ParseResult, got {type(returned).__name__}"
        )
    if not returned or any(key not in RESULT_KEYS for key in returned):
        got = ", ".join(str(key) for key in returned) or "an empty mapping"
        raise TransformError(
            f"Transform '{name}' must return a ParseResult or a mapping with "
            f"'values' and/or 'positionals' keys (got: {got})"
        )
    changes: dict[str, Any] = {}
    if "values" in returned:
        values = returned["values"]
        if not isinstance(values, Mapping):
            raise TransformError(
                f"Transform '{name}' returned values that are not a mapping"
            )
        changes["values"] = dict(values)
    if "positionals" in returned:
        positionals = returned["positionals"]
        if isinstance(positionals, (str, bytes)) or not isinstance(positionals, Sequence):
            raise TransformError(
                f"Transform '{name}' returned positionals that are not a sequence"
            )
        changes["positionals"] = positionals
    return result.replace(**changes)


def run_pipeline(
    result: ParseResult,
    transforms: Iterable[TransformFn],
    handler: HandlerFn | None = None,
) -> ParseResult:
    """
    Apply `transforms` in order, then call `handler`, without suspending.

    Raises:
        AsyncExecutionError: If a transform or the handler returns an awaitable. The
            awaitable is closed before the error is raised.
    """
    for transform in transforms:
        logger.debug("Running transform '%s'.", _name_of(transform))
        returned = transform(result)
        if is_awaitable(returned):
            discard_awaitable(returned)
            raise AsyncExecutionError(
                f"Transform '{_name_of(transform)}' returned an awaitable. "
                "Use parse_async() for async transforms."
            )
        result = apply_returned(result, returned, transform)

    if handler is not None:
        logger.debug("Running handler '%s'.", _name_of(handler))
        returned = handler(result)
        if is_awaitable(returned):
            discard_awaitable(returned)
            raise AsyncExecutionError(
                f"Handler '{_name_of(handler)}' returned an awaitable. "
                "Use parse_async() for async handlers."
            )
    return result


async def run_pipeline_async(
    result: ParseResult,
    transforms: Iterable[TransformFn],
    handler: HandlerFn | None = None,
) -> ParseResult:
    """Apply `transforms` in order, then call `handler`, awaiting each step."""
    for transform in transforms:
        logger.debug("Running transform '%s'.", _name_of(transform))
        returned = transform(result)
        if is_awaitable(returned):
            returned = await returned
        result = apply_returned(result, returned, transform)

    if handler is not None:
        logger.debug("Running handler '%s'.", _name_of(handler))
        returned = handler(result)
        if is_awaitable(returned):
            await returned
    return result


def merge(*parsers: Parser) -> Parser:
    """
    Combine parsers into one.

    Raises:
        ValidationError: If the combined options claim the same flag twice, or the
            combined positionals break the ordering rules.
    """
    options: dict[str, Any] = {}
    positionals: list[Any] = []
    transforms: list[TransformFn] = []
    for parser in parsers:
        if not isinstance(parser, Parser):
            raise ValidationError("parsers", f"cannot merge {type(parser).__name__}")
        options.update(parser.options)
        positionals.extend(parser.positionals)
        transforms.extend(normalize_transforms(parser.transforms))
    validate_aliases(options, "options")
    validate_positionals(positionals, "positionals")
    return Parser(options=options, positionals=positionals, transforms=transforms)


def _append_transform(parser: Parser, fn: TransformFn) -> Parser:
    if not callable(fn):
        raise ValidationError("transforms", "must be a function")
    transforms = [*normalize_transforms(parser.transforms), fn]
    return parser.model_copy(update={"transforms": transforms})


def map(*args: Any) -> Any:
    """
    Register a transform.

    `map(parser, fn)` returns a new parser with `fn` appended to its transforms.
    `map(fn)` returns a function that does the same to the parser it is given, for
    use with `pipe()`.
    """
    if len(args) == 1:
        fn = args[0]
        return lambda parser: _append_transform(parser, fn)
    if len(args) == 2:
        return _append_transform(args[0], args[1])
    raise TypeError(f"map() takes 1 or 2 arguments ({len(args)} given)")


def _finalize(parser: Parser, fn: HandlerFn, description: str) -> CommandDef:
    if not callable(fn):
        raise ValidationError("handler", "must be a function")
    return CommandDef(
        options=parser.options,
        positionals=parser.positionals,
        transforms=normalize_transforms(parser.transforms),
        description=description,
        handler=fn,
    )


def handle(*args: Any, description: str = "") -> Any:
    """
    Attach a handler, producing a `CommandDef`.

    `handle(parser, fn)` finalizes directly. `handle(fn)` returns a function that
    finalizes the parser it is given.
    """
    if len(args) == 1:
        fn = args[0]
        return lambda parser: _finalize(parser, fn, description)
    if len(args) == 2:
        return _finalize(args[0], args[1], description)
    raise TypeError(f"handle() takes 1 or 2 arguments ({len(args)} given)")


def pipe(value: Any, *fns: Callable[[Any], Any]) -> Any:
    """Thread `value` through `fns` left to right."""
    return reduce(lambda acc, fn: fn(acc), fns, value)


def snake_case_values(result: ParseResult) -> ParseResult:
    """Transform renaming `kebab-case` value keys to `snake_case`."""
    return result.replace(
        values={key.replace("-", "_"): value for key, value in result.values.items()}
    )
