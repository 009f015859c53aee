# tests/unit/infrastructure/test_logger.py
from __future__ import annotations

import json
import logging
import sys

import pytest

from contact_feed.infrastructure.logging.logger import (
    _JsonFormatter,  # internal but importable
    configure_root_logging,
    get_json_logger,
    get_run_id,
    set_run_context,
)


def _render(msg: str, level: int = logging.INFO, **attrs: object) -> dict:
    """Build a record, attach ``attrs`` and return the parsed JSON line."""
    logger = logging.getLogger("test.logger")
    record = logger.makeRecord(
        name=logger.name,
        level=level,
        fn="test_logger",
        lno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in attrs.items():
        setattr(record, key, value)
    return json.loads(_JsonFormatter().format(record))


@pytest.fixture
def _restore_root_logging():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_configure_root_logging_installs_json_handler(
    monkeypatch: pytest.MonkeyPatch, _restore_root_logging: logging.Logger
) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    root = _restore_root_logging
    root.handlers.clear()

    configure_root_logging()
    configure_root_logging()

    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, _JsonFormatter)


def test_configure_root_logging_explicit_level_wins(
    monkeypatch: pytest.MonkeyPatch, _restore_root_logging: logging.Logger
) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")

    configure_root_logging("warning")

    assert _restore_root_logging.level == logging.WARNING


def test_json_formatter_basic_fields() -> None:
    payload = _render("hello-world")

    assert payload["message"] == "hello-world"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert "ts" in payload
    assert "run_id" not in payload


def test_json_formatter_run_id_sources(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("RUN_ID", raising=False)

    assert _render("from-record", run_id="rec-1")["run_id"] == "rec-1"

    set_run_context(run_id="ctx-1")
    assert get_run_id() == "ctx-1"
    assert _render("from-context")["run_id"] == "ctx-1"

    set_run_context(run_id=None)
    monkeypatch.setenv("RUN_ID", "env-1")
    assert _render("from-env")["run_id"] == "env-1"


def test_json_formatter_merges_extra_dict() -> None:
    payload = _render("with-extra", extra={"source": "feed.json", "count": 3})

    assert payload["source"] == "feed.json"
    assert payload["count"] == 3


def test_json_formatter_includes_exception_info() -> None:
    try:
        raise ValueError("boom")
    except ValueError:
        exc_info = sys.exc_info()

    logger = logging.getLogger("test.logger.exc")
    record = logger.makeRecord(logger.name, logging.ERROR, "f", 1, "failure", (), exc_info)
    payload = json.loads(_JsonFormatter().format(record))

    assert payload["level"] == "ERROR"
    assert payload["exc_type"] == "ValueError"
    assert payload["exc_message"] == "boom"


def test_get_json_logger_propagates_to_root() -> None:
    log = get_json_logger("contact_feed.tests.propagation")

    assert log.propagate is True
    assert log.name == "contact_feed.tests.propagation"
