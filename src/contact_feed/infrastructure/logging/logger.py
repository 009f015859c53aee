# Copyright (c)
# SPDX-License-Identifier: MIT
"""Structured JSON logging utilities.

This module exposes an idempotent root configurator, a per-module logger
factory and a small run-context helper so every log line emitted while
fetching one document can be correlated.

Features:
    * Stable keys: ``ts``, ``level``, ``logger``, ``message``.
    * Optional ``run_id`` from the record, the run context or the ``RUN_ID`` env var.
    * Merges an ``extra`` dict attached to the record.

Typical usage:
    configure_root_logging()
    log = get_json_logger(__name__)
"""

from __future__ import annotations

import json
import logging
import os
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

__all__ = [
    "configure_root_logging",
    "get_json_logger",
    "get_run_id",
    "set_run_context",
]

_RUN_ID_ENV_KEY = "RUN_ID"

_run_id_var: ContextVar[str | None] = ContextVar("contact_feed_run_id", default=None)


def set_run_context(*, run_id: str | None) -> None:
    """Bind (or clear, with ``None``) the run id for the current context."""
    _run_id_var.set(run_id)


def get_run_id() -> str | None:
    """Return the run id bound to the current context, if any."""
    return _run_id_var.get()


class _JsonFormatter(logging.Formatter):
    """JSON log formatter emitting stable keys and optional extras."""

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as a JSON object.

        Args:
            record: Logging record.

        Returns:
            str: JSON-encoded log line.
        """
        payload: dict[str, Any] = {
            "ts": datetime.now(tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        run_id: str | None = (
            getattr(record, "run_id", None) or get_run_id() or os.getenv(_RUN_ID_ENV_KEY)
        )
        if run_id:
            payload["run_id"] = run_id

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            if exc_type is not None:
                payload["exc_type"] = exc_type.__name__
            if exc_value is not None:
                payload["exc_message"] = str(exc_value)

        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)

        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)


def configure_root_logging(level: str | int | None = None) -> None:
    """Initialize the root logger with a JSON stream handler (idempotent).

    Args:
        level: Logging level or level name. If ``None``, use env ``LOG_LEVEL`` or ``INFO``.
    """
    root = logging.getLogger()

    env_level = os.getenv("LOG_LEVEL")
    resolved: int | str = (
        level if level is not None else (env_level.upper() if env_level else "INFO")
    )
    if isinstance(resolved, str):
        resolved = resolved.upper()
    root.setLevel(resolved)

    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(_JsonFormatter())
    root.addHandler(handler)


def get_json_logger(name: str) -> logging.Logger:
    """Return a module-specific logger backed by the JSON root handler.

    This does *not* configure the root logger; call
    :func:`configure_root_logging` once at startup.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.propagate = True
    return logger
