# clargs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import inspect
import logging
import os
from typing import Any

import pythonjsonlogger.json
from rich.logging import RichHandler

CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")
JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
TEXT_LOG_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"


def is_awaitable(value: Any) -> bool:
    """Return True if `value` can be awaited (coroutine, Future, or any `__await__`)."""
    return inspect.isawaitable(value)


def discard_awaitable(value: Any) -> None:
    """Close an awaitable that will never be awaited so no warning is emitted."""
    if inspect.iscoroutine(value):
        value.close()
        return
    for method in ("close", "cancel"):
        stop = getattr(value, method, None)
        if callable(stop):
            stop()
            return


def running_in_container() -> bool:
    """Best-effort check of PID 1's cgroup for a container runtime."""
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as cgroup:
            content = cgroup.read()
    except OSError:
        return False
    return any(marker in content for marker in CONTAINER_MARKERS)


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=True,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
        return handler
    raise ValueError(f"Invalid log mode: {mode}")


def _file_handler(filename: str, as_json: bool, level: int) -> logging.Handler:
    handler = logging.FileHandler(filename, "a", "UTF-8")
    handler.setLevel(level)
    if as_json:
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
    else:
        handler.setFormatter(
            logging.Formatter(TEXT_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
    return handler


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Install root logging handlers for an application built on clargs.

    The library itself only emits records on the `clargs` logger and never
    configures handlers on import. Applications call this once at startup.

    Args:
        mode (str | None): "cli" for Rich console output or "json" for one JSON
            object per record. Defaults to `CLARGS_LOG_MODE`, then to "json"
            inside a container and "cli" elsewhere.
        log_filename (str | None): Also log to this file when given.
        json_log_to_file (bool): Write JSON records to the file instead of text.
        file_log_level (int): Threshold for the file handler.
        console_log_level (int): Threshold for the console handler.

    Raises:
        ValueError: If `mode` is not "cli" or "json".
    """
    if not mode:
        mode = os.getenv("CLARGS_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )
    console_handler = _console_handler(mode)
    console_handler.setLevel(console_log_level)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    root.addHandler(console_handler)
    if log_filename:
        root.addHandler(_file_handler(log_filename, json_log_to_file, file_log_level))

    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("clargs").debug("Logging initialized in '%s' mode.", mode)
