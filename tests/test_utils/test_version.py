from importlib.metadata import version as dist_version

from clargs import Cli, __version__
from clargs.version import resolve_version


def test_package_version():
    assert __version__ == "0.1.0"


def test_explicit_version_wins():
    assert resolve_version("pytest", "9.9.9") == "9.9.9"


def test_version_from_installed_distribution():
    assert resolve_version("pytest") == dist_version("pytest")


def test_unknown_distribution():
    assert resolve_version("clargs-demo-cli-not-installed") is None


def test_cli_uses_distribution_version():
    assert Cli("pytest").version == dist_version("pytest")
    assert Cli("clargs-demo-cli-not-installed").version is None
