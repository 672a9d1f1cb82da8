import json
import logging

import pytest

from common.logging_config import JSONFormatter, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord(
        "stack_setup", logging.INFO, __file__, 10, "step %s", ("migrate",), None
    )
    record.step = "migrate"

    entry = json.loads(JSONFormatter().format(record))

    assert entry["message"] == "step migrate"
    assert entry["level"] == "INFO"
    assert entry["logger"] == "stack_setup"
    assert entry["extra"] == {"step": "migrate"}


def test_setup_logging_verbose_sets_debug():
    setup_logging("stack_setup", verbose=True)
    assert logging.getLogger().level == logging.DEBUG


def test_setup_logging_honours_log_level_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    setup_logging("stack_setup")
    assert logging.getLogger().level == logging.WARNING


def test_setup_logging_invalid_env_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    setup_logging("stack_setup")
    assert logging.getLogger().level == logging.INFO


def test_setup_logging_writes_json_file(tmp_path, monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    log_file = tmp_path / "setup.log"

    logger = setup_logging("stack_setup", log_file_path=str(log_file))
    logger.info("Backend directory already exists")
    for handler in logging.getLogger().handlers:
        handler.flush()

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert json.loads(lines[-1])["message"] == "Backend directory already exists"


def test_setup_logging_puts_prefix_on_console_lines(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    setup_logging("stack_setup", log_prefix=" [STACK-SETUP] ")

    console = logging.getLogger().handlers[0]
    record = logging.LogRecord(
        "stack_setup", logging.INFO, __file__, 1, "Building Docker images", None, None
    )
    line = console.format(record)
    assert line.startswith("[STACK-SETUP] ")
    assert line.endswith(" - stack_setup - INFO - Building Docker images")


def test_setup_logging_without_prefix(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    setup_logging("stack_setup")

    console = logging.getLogger().handlers[0]
    record = logging.LogRecord(
        "stack_setup", logging.INFO, __file__, 1, "Building Docker images", None, None
    )
    assert console.format(record)[0].isdigit()
