import json
import logging

import pytest
from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

from clargs.utils import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_cli_mode_uses_rich():
    setup_logging("cli")
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RichHandler)
    assert handlers[0].level == logging.WARNING


def test_json_mode_uses_json_formatter():
    setup_logging("json", console_log_level=logging.INFO)
    handler = logging.getLogger().handlers[0]
    assert isinstance(handler.formatter, JsonFormatter)
    assert handler.level == logging.INFO


def test_mode_from_environment(monkeypatch):
    monkeypatch.setenv("CLARGS_LOG_MODE", "json")
    setup_logging()
    assert isinstance(logging.getLogger().handlers[0].formatter, JsonFormatter)


def test_invalid_mode():
    with pytest.raises(ValueError, match="Invalid log mode: xml"):
        setup_logging("xml")


def test_json_log_file(tmp_path):
    log_file = tmp_path / "clargs.log"
    setup_logging("cli", log_filename=str(log_file), json_log_to_file=True)
    logging.getLogger("clargs").debug("parsed %s", "argv")
    for handler in logging.getLogger().handlers:
        handler.flush()
    records = [json.loads(line) for line in log_file.read_text().splitlines()]
    assert records[-1]["message"] == "parsed argv"
    assert records[-1]["name"] == "clargs"


def test_plain_log_file(tmp_path):
    log_file = tmp_path / "clargs.log"
    setup_logging("cli", log_filename=str(log_file))
    logging.getLogger("clargs").info("hello")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "[clargs] [INFO] hello" in log_file.read_text()
