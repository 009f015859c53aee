# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Contact feed domain exceptions.

Purpose:
    Provide the error taxonomy for decoding contact documents and for
    retrieving them from a source (HTTP feed or local file).

Layer:
    domain

Notes:
    - Decode errors carry the offending field name and the element's position
      in the top-level array so callers can point at the bad entry.
    - Transport code is responsible for translating httpx and OS errors into
      the source error types; those library types never cross the boundary.
"""

from __future__ import annotations

from typing import Any

from contact_feed.domain.exceptions.base import DomainError


class ContactFeedError(DomainError):
    """Base class for contact-feed errors."""

    code = "contact_feed_error"


class ContactDecodeError(ContactFeedError):
    """Base class for failures while turning a document into contacts.

    Args:
        message: Human-readable error message.
        field: Name of the offending field, if the error concerns one.
        index: Position of the offending element in the top-level array.
        details: Optional extra diagnostic payload.
    """

    code = "decode_error"

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        index: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        merged: dict[str, Any] = {"field": field, "index": index}
        merged.update(details or {})
        super().__init__(message, details=merged)
        self.field = field
        self.index = index


class MalformedDocument(ContactDecodeError):
    """Raised when the raw bytes are not valid JSON."""

    code = "malformed_document"


class UnexpectedShape(ContactDecodeError):
    """Raised when the top-level value is not an array or an element is not an object."""

    code = "unexpected_shape"


class MissingField(ContactDecodeError):
    """Raised when a required field is absent from an element."""

    code = "missing_field"


class TypeMismatch(ContactDecodeError):
    """Raised when a field is present with a JSON type the decoder does not accept."""

    code = "type_mismatch"

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        index: int | None = None,
        expected: str,
        actual: str,
    ) -> None:
        super().__init__(
            message,
            field=field,
            index=index,
            details={"expected": expected, "actual": actual},
        )
        self.expected = expected
        self.actual = actual


class ContactSourceError(ContactFeedError):
    """Raised when the contact document cannot be retrieved (transport, status, I/O)."""

    code = "source_error"


class ContactSourceNotFound(ContactFeedError):
    """Raised when the contact document does not exist at the requested location."""

    code = "source_not_found"
