# Copyright (c)
# SPDX-License-Identifier: MIT
"""Contact feed metrics.

Purpose:
    Provide Prometheus metrics for contact document retrieval and decoding:
      * Fetch latency histogram by outcome.
      * HTTP status distribution and response size.
      * Retry and error counters by reason.
      * Decoded record and decode failure counters.

Design:
    - Getter functions lazily create and return singleton metric instances so
      importing this module never registers collectors twice.
"""

from __future__ import annotations

from typing import Any

from prometheus_client import Counter, Histogram

_fetch_latency_seconds: Any | None = None
_fetch_errors_total: Any | None = None
_http_status_total: Any | None = None
_response_bytes: Any | None = None
_retries_total: Any | None = None
_decoded_records_total: Any | None = None
_decode_failures_total: Any | None = None


def get_fetch_latency_seconds() -> Any:
    """Return (and lazily create) the document fetch latency histogram."""
    global _fetch_latency_seconds
    if _fetch_latency_seconds is None:
        _fetch_latency_seconds = Histogram(
            "contact_feed_fetch_latency_seconds",
            "Latency of contact document fetches in seconds.",
            ["source", "outcome"],
        )
    return _fetch_latency_seconds


def get_fetch_errors_total() -> Any:
    """Return (and lazily create) the fetch error counter."""
    global _fetch_errors_total
    if _fetch_errors_total is None:
        _fetch_errors_total = Counter(
            "contact_feed_fetch_errors_total",
            "Total number of contact document fetch errors.",
            ["source", "reason"],
        )
    return _fetch_errors_total


def get_http_status_total() -> Any:
    """Return (and lazily create) the HTTP status counter."""
    global _http_status_total
    if _http_status_total is None:
        _http_status_total = Counter(
            "contact_feed_http_status_total",
            "Contact feed HTTP responses by status code.",
            ["status"],
        )
    return _http_status_total


def get_response_bytes() -> Any:
    """Return (and lazily create) the response-bytes histogram."""
    global _response_bytes
    if _response_bytes is None:
        _response_bytes = Histogram(
            "contact_feed_response_bytes",
            "Size of contact feed HTTP responses in bytes.",
            buckets=(256, 1024, 4096, 16384, 65536, 262144, 1048576),
        )
    return _response_bytes


def get_retries_total() -> Any:
    """Return (and lazily create) the retry counter."""
    global _retries_total
    if _retries_total is None:
        _retries_total = Counter(
            "contact_feed_retries_total",
            "Total number of contact feed fetch retries.",
            ["reason"],
        )
    return _retries_total


def get_decoded_records_total() -> Any:
    """Return (and lazily create) the decoded-records counter."""
    global _decoded_records_total
    if _decoded_records_total is None:
        _decoded_records_total = Counter(
            "contact_feed_decoded_records_total",
            "Total number of contact records decoded successfully.",
            ["source"],
        )
    return _decoded_records_total


def get_decode_failures_total() -> Any:
    """Return (and lazily create) the decode failure counter."""
    global _decode_failures_total
    if _decode_failures_total is None:
        _decode_failures_total = Counter(
            "contact_feed_decode_failures_total",
            "Total number of contact documents rejected by the decoder.",
            ["source", "code"],
        )
    return _decode_failures_total
