# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Adapter Gateways: contact document source → domain contacts.

Purpose:
    Implement :class:`ContactSourceGateway` for the two supported sources:

    * ``HttpContactGateway``: the resilient contact feed HTTP client.
    * ``FileContactGateway``: a JSON document on the local filesystem.

    Both fetch raw bytes and hand them to the domain decoder; decode failures
    are logged and counted, then propagated unchanged.

Layer:
    adapters
"""

from __future__ import annotations

import asyncio
from contextlib import suppress
from pathlib import Path

from contact_feed.domain.entities.contact import Contact
from contact_feed.domain.exceptions.contacts import (
    ContactDecodeError,
    ContactSourceError,
    ContactSourceNotFound,
)
from contact_feed.domain.services.contact_decoder import parse_contacts
from contact_feed.infrastructure.external_apis.contact_feed.client import ContactFeedClient
from contact_feed.infrastructure.logging.logger import get_json_logger
from contact_feed.infrastructure.observability.metrics_contacts import (
    get_decode_failures_total,
    get_decoded_records_total,
)

log = get_json_logger(__name__)


def _decode(raw: bytes, *, source: str, label: str) -> list[Contact]:
    """Decode ``raw`` and record decode metrics for ``label``."""
    try:
        contacts = parse_contacts(raw)
    except ContactDecodeError as exc:
        log.warning(
            "contacts.decode.failed",
            extra={"extra": {"source": source, "code": exc.code, **exc.details}},
        )
        with suppress(Exception):
            get_decode_failures_total().labels(source=label, code=exc.code).inc()
        raise

    with suppress(Exception):
        get_decoded_records_total().labels(source=label).inc(len(contacts))
    log.info(
        "contacts.fetch.success",
        extra={"extra": {"source": source, "count": len(contacts)}},
    )
    return contacts


class HttpContactGateway:
    """HTTP-based contact source."""

    def __init__(self, client: ContactFeedClient, *, url: str | None = None) -> None:
        """Initialize the gateway.

        Args:
            client: Resilient contact feed HTTP client.
            url: Document URL; the client's configured URL is used when omitted.
        """
        self._client = client
        self._url = url

    @property
    def source(self) -> str:
        return self._url or "<configured feed url>"

    async def fetch_contacts(self) -> list[Contact]:
        """Fetch the feed document and decode it."""
        log.info("contacts.fetch.start", extra={"extra": {"source": self.source}})
        raw = await self._client.fetch_document(self._url)
        return _decode(raw, source=self.source, label="http")


class FileContactGateway:
    """Local-file contact source."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def source(self) -> str:
        return str(self._path)

    async def fetch_contacts(self) -> list[Contact]:
        """Read the document from disk and decode it.

        Raises:
            ContactSourceNotFound: If the file does not exist.
            ContactSourceError: If the file cannot be read.
        """
        log.info("contacts.fetch.start", extra={"extra": {"source": self.source}})
        raw = await asyncio.to_thread(self._read)
        return _decode(raw, source=self.source, label="file")

    def _read(self) -> bytes:
        try:
            return self._path.read_bytes()
        except FileNotFoundError as exc:
            raise ContactSourceNotFound(
                "Contact document not found.",
                details={"path": str(self._path)},
            ) from exc
        except OSError as exc:
            raise ContactSourceError(
                "Contact document could not be read.",
                details={"path": str(self._path), "error": str(exc)},
            ) from exc
