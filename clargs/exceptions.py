# clargs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used in the clargs argument parsing framework.

These exceptions separate programmer mistakes in a CLI definition from user-input
mistakes on the command line, so the outer shell can decide how to report each one.

All exceptions inherit from `ClargsError`, the base exception for the framework.

Exception Hierarchy:
- ClargsError
    ├── ValidationError
    ├── HelpError
    │   └── CommandArgumentError
    ├── AsyncExecutionError
    └── TransformError

`ValidationError` is raised once, while a CLI is being constructed. `HelpError` and
`CommandArgumentError` are raised while reading an argument vector and are meant to
be shown to the user together with the help text.
"""
from __future__ import annotations


class ClargsError(Exception):
    """Base exception for the clargs framework."""


class ValidationError(ClargsError):
    """
    Raised when a CLI configuration is structurally invalid.

    Attributes:
        path (str): Dot/bracket path to the offending entry, e.g.
            `options.verbose.aliases[0]`.
        message (str): What is wrong with it.
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}" if path else message)


class HelpError(ClargsError):
    """
    Raised when the CLI cannot proceed without more user input.

    Carries an optional command name so the caller can scope the help text.
    """

    def __init__(self, message: str, command: str | None = None) -> None:
        self.message = message
        self.command = command
        super().__init__(message)


class CommandArgumentError(HelpError):
    """Exception raised when a command-line value cannot be parsed or coerced."""


class AsyncExecutionError(ClargsError):
    """Exception raised when a transform or handler is awaitable on the sync path."""


class TransformError(ClargsError):
    """Exception raised when a transform returns something that is not a parse result."""
