# Copyright (c)
# SPDX-License-Identifier: MIT
"""Contact Feed Transport Client: resilient, instrumented, async.

This transport is framework-agnostic and provides:

* Async HTTP (httpx) with per-request timeout.
* Jittered exponential retries (bounded) for transient failures.
* Deterministic mapping of HTTP statuses to contact-feed domain errors.
* Prometheus metrics.

Notes:
    * The client returns the raw response body. Parsing and decoding are the
      gateway's job, so malformed documents are never retried.
    * Caller-facing exceptions are always contact-feed domain exceptions;
      httpx types never cross the boundary.
"""

from __future__ import annotations

import time
from contextlib import suppress
from typing import Final

import httpx

from contact_feed.domain.exceptions.contacts import ContactSourceError, ContactSourceNotFound
from contact_feed.infrastructure.external_apis.contact_feed.settings import ContactFeedSettings
from contact_feed.infrastructure.logging.logger import get_json_logger, get_run_id
from contact_feed.infrastructure.observability.metrics_contacts import (
    get_fetch_errors_total,
    get_fetch_latency_seconds,
    get_http_status_total,
    get_response_bytes,
    get_retries_total,
)
from contact_feed.infrastructure.resilience.retry import RetryPolicy, retry_async

_DEFAULT_BASE_BACKOFF: Final[float] = 0.25
_DEFAULT_MAX_BACKOFF: Final[float] = 2.5
_SOURCE_LABEL: Final[str] = "http"

log = get_json_logger(__name__)


class ContactFeedClient:
    """Resilient, instrumented transport client for JSON contact feeds."""

    def __init__(
        self,
        settings: ContactFeedSettings,
        *,
        http: httpx.AsyncClient | None = None,
        timeout_s: float | None = None,
        retry_policy: RetryPolicy | None = None,
    ) -> None:
        """Initialize the transport client.

        Args:
            settings: Client settings loaded from environment or passed explicitly.
            http: Optional shared ``httpx.AsyncClient``. If omitted, a client
                is created and owned by this instance.
            timeout_s: Optional per-request timeout override in seconds.
            retry_policy: Optional retry configuration for retryable failures.
        """
        self._settings = settings
        self._timeout = float(timeout_s if timeout_s is not None else settings.timeout_s)

        # Per-request headers; these override a shared client's defaults.
        self._headers: dict[str, str] = {
            "Accept": "application/json",
            "User-Agent": settings.user_agent,
        }
        self._owns_client = http is None
        self._client = http or httpx.AsyncClient(timeout=self._timeout)

        self._retry = retry_policy or RetryPolicy(
            total=settings.max_retries,
            base=_DEFAULT_BASE_BACKOFF,
            cap=_DEFAULT_MAX_BACKOFF,
            jitter=True,
        )

        self._latency = get_fetch_latency_seconds()
        self._errors = get_fetch_errors_total()
        self._status_total = get_http_status_total()
        self._resp_bytes = get_response_bytes()
        self._retries_total = get_retries_total()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance owns it."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> ContactFeedClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    async def fetch_document(self, url: str | None = None) -> bytes:
        """Fetch the raw contact document.

        Args:
            url: Document URL; defaults to ``settings.url``.

        Returns:
            bytes: Response body, undecoded.

        Raises:
            ContactSourceNotFound: On 404.
            ContactSourceError: On other 4xx/5xx, transport failures, or when
                no URL is configured.
        """
        target = url or self._settings.url
        if not target:
            raise ContactSourceError(
                "No contact feed URL configured.",
                details={"setting": "CONTACT_FEED_URL"},
            )

        headers = dict(self._headers)
        run_id = get_run_id()
        if run_id:
            headers["X-Request-ID"] = run_id

        async def _call() -> bytes:
            response = await self._perform_request(target, headers)
            return self._handle_response(response, target)

        start = time.perf_counter()
        error_reason: str | None = None
        try:
            body = await retry_async(_call, policy=self._retry, retry_on=self._is_retryable)
        except (ContactSourceNotFound, ContactSourceError) as exc:
            error_reason = type(exc).__name__
            log.error(
                "contact_feed.fetch.failed",
                extra={"extra": {"url": target, "reason": error_reason, **exc.details}},
            )
            raise
        finally:
            elapsed = time.perf_counter() - start
            with suppress(Exception):
                self._latency.labels(
                    source=_SOURCE_LABEL,
                    outcome="error" if error_reason else "success",
                ).observe(elapsed)
                if error_reason:
                    self._errors.labels(source=_SOURCE_LABEL, reason=error_reason).inc()

        log.info(
            "contact_feed.fetch.success",
            extra={"extra": {"url": target, "bytes": len(body)}},
        )
        return body

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _is_retryable(self, exc: Exception) -> bool:
        """Return True for transient source errors only (404 is final)."""
        if isinstance(exc, ContactSourceError) and exc.details.get("retryable", False):
            with suppress(Exception):
                self._retries_total.labels(reason=str(exc.details.get("status", "transport"))).inc()
            return True
        return False

    async def _perform_request(self, url: str, headers: dict[str, str]) -> httpx.Response:
        """Execute a single HTTP GET and map transport errors."""
        try:
            return await self._client.get(url, headers=headers, timeout=self._timeout)
        except httpx.TimeoutException as exc:
            raise ContactSourceError(
                "Contact feed request timed out.",
                details={"url": url, "error": str(exc), "retryable": True},
            ) from exc
        except httpx.RequestError as exc:
            raise ContactSourceError(
                "Contact feed transport failure.",
                details={"url": url, "error": str(exc), "retryable": True},
            ) from exc

    def _handle_response(self, response: httpx.Response, url: str) -> bytes:
        """Map an HTTP response into its body or a domain error."""
        status = response.status_code
        with suppress(Exception):
            self._status_total.labels(status=str(status)).inc()

        if status == 404:
            raise ContactSourceNotFound(
                "Contact feed document not found.",
                details={"url": url, "status": 404},
            )

        if status == 429:
            raise ContactSourceError(
                "Contact feed rate limited.",
                details={
                    "url": url,
                    "status": 429,
                    "retry_after_s": self._parse_retry_after(response.headers.get("Retry-After")),
                    "retryable": True,
                },
            )

        if 400 <= status < 500:
            raise ContactSourceError(
                "Contact feed rejected the request.",
                details={"url": url, "status": status, "retryable": False},
            )

        if status >= 500:
            raise ContactSourceError(
                "Contact feed upstream unavailable.",
                details={"url": url, "status": status, "retryable": True},
            )

        body = response.content
        with suppress(Exception):
            self._resp_bytes.observe(float(len(body)))
        return body

    @staticmethod
    def _parse_retry_after(val: str | None) -> float | None:
        """Parse HTTP Retry-After header (seconds form only)."""
        if not val:
            return None
        try:
            seconds = float(val)
        except (TypeError, ValueError):
            return None
        return max(0.0, seconds)
