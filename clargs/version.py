# clargs CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Version information for clargs and version lookup for CLIs built with it.

A CLI may declare its version explicitly. When it does not, `resolve_version()`
falls back to the installed distribution metadata for the CLI's name.
"""
from importlib.metadata import PackageNotFoundError, version as dist_version

from clargs.logger import logger

__version__ = "0.1.0"


def resolve_version(name: str, version: str | None = None) -> str | None:
    """
    Return the version string to show for `--version`.

    Args:
        name (str): The CLI name, looked up as a distribution name.
        version (str | None): An explicitly configured version, used as-is.

    Returns:
        str | None: The resolved version, or None if nothing could be found.
    """
    if version:
        return version
    try:
        return dist_version(name)
    except PackageNotFoundError:
        logger.debug("No installed distribution named '%s'; no version.", name)
        return None
