# Copyright (c)
# SPDX-License-Identifier: MIT
"""Application DTOs for decoded contacts.

Synopsis:
    Strict (Pydantic v2) DTOs passed from the ``LoadContacts`` use case to
    presenters and the CLI's JSON output.

Layer:
    application/schemas/dto
"""

from __future__ import annotations

from pydantic import Field

from contact_feed.application.schemas.dto.base import BaseDTO
from contact_feed.domain.entities.contact import Contact


class ContactDTO(BaseDTO):
    """One decoded contact.

    Attributes:
        first_name: Given name.
        last_name: Family name.
        emails: Email addresses in feed order (possibly empty).
        phone: Phone number, if published.
    """

    first_name: str
    last_name: str
    emails: tuple[str, ...] = ()
    phone: str | None = None

    @classmethod
    def from_entity(cls, contact: Contact) -> ContactDTO:
        """Build a DTO from a domain :class:`Contact`."""
        return cls(
            first_name=contact.first_name,
            last_name=contact.last_name,
            emails=contact.emails,
            phone=contact.phone,
        )


class ContactListDTO(BaseDTO):
    """Ordered contacts decoded from one document."""

    source: str
    items: list[ContactDTO] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.items)
