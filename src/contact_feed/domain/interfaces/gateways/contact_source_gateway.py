# Copyright (c)
# SPDX-License-Identifier: MIT
"""Contact Source Gateway Protocol.

Synopsis:
    Domain-level Protocol (PEP 544) that abstracts where a contact document
    comes from. Concrete implementations (HTTP feed, local file) live in the
    adapters layer and must satisfy this contract.

Layer:
    domain/interfaces/gateways
"""

from __future__ import annotations

from typing import Protocol

from contact_feed.domain.entities.contact import Contact


class ContactSourceGateway(Protocol):
    """Abstraction over contact document sources.

    Implementations are responsible for:
      * Retrieving the raw document bytes.
      * Decoding them into domain entities.
      * Raising domain exceptions (no httpx/OS types) on failures.
    """

    @property
    def source(self) -> str:
        """Human-readable location of the document (URL or path)."""
        ...

    async def fetch_contacts(self) -> list[Contact]:
        """Return every contact in the document, in document order.

        Raises:
            ContactSourceNotFound: The document does not exist.
            ContactSourceError: The document could not be retrieved.
            ContactDecodeError: The document could not be decoded.
        """
        ...
