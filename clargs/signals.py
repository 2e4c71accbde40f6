# clargs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used by the clargs parsing core.

The core never terminates the host process. When a built-in flag such as `--help`
or `--version` has been handled, a signal is raised instead and the outer shell
(`Cli.run`) decides whether to exit.

All signals inherit from `FlowSignal`, which is a subclass of `BaseException`
to ensure they bypass standard `except Exception` blocks.

Signals:
- HelpSignal: Help text was rendered; nothing left to do.
- VersionSignal: The version string was printed; nothing left to do.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in clargs.

    These are not errors. They report that a built-in behavior already
    produced the output the user asked for.
    """


class HelpSignal(FlowSignal):
    """Raised after help text has been displayed."""

    def __init__(
        self, message: str = "Help signal received.", command: str | None = None
    ):
        super().__init__(message)
        self.command = command


class VersionSignal(FlowSignal):
    """Raised after the version string has been displayed."""

    def __init__(self, version: str):
        super().__init__(f"Version signal received: {version}")
        self.version = version
