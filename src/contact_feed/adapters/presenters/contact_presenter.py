# Copyright (c)
# SPDX-License-Identifier: MIT
"""Presenter: Contact DTOs → list and detail views.

Synopsis:
    Renders application-layer contact DTOs into the two views a contact
    browser needs: a list (one row per contact, name plus first email) and a
    detail view for a single contact. Missing emails and phone numbers are
    shown as placeholders.

Layer:
    adapters/presenters

Design:
    * No business logic and no I/O; the CLI decides where text goes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from contact_feed.application.schemas.dto.contacts import ContactDTO, ContactListDTO

NO_EMAIL_PLACEHOLDER: Final[str] = "No email"
NO_PHONE_PLACEHOLDER: Final[str] = "No phone"


@dataclass(frozen=True, slots=True)
class ContactRow:
    """One list-view row."""

    index: int
    title: str
    subtitle: str


@dataclass(frozen=True, slots=True)
class ContactDetail:
    """Detail view of a single contact."""

    name: str
    emails: tuple[str, ...]
    phone: str


def _display_name(dto: ContactDTO) -> str:
    return f"{dto.first_name} {dto.last_name}".strip()


class ContactPresenter:
    """Presenter for contact list/detail views."""

    def __init__(
        self,
        *,
        no_email: str = NO_EMAIL_PLACEHOLDER,
        no_phone: str = NO_PHONE_PLACEHOLDER,
    ) -> None:
        self._no_email = no_email
        self._no_phone = no_phone

    def present_list(self, dto: ContactListDTO) -> list[ContactRow]:
        """Build list rows in document order.

        Args:
            dto: Decoded contacts.

        Returns:
            list[ContactRow]: Title ``"First Last"``, subtitle the first email
            or the email placeholder.
        """
        return [
            ContactRow(
                index=idx,
                title=_display_name(item),
                subtitle=item.emails[0] if item.emails else self._no_email,
            )
            for idx, item in enumerate(dto.items)
        ]

    def present_detail(self, dto: ContactListDTO, index: int) -> ContactDetail:
        """Build the detail view for the contact at ``index``.

        Raises:
            IndexError: If ``index`` is outside ``dto.items``.
        """
        if not 0 <= index < len(dto.items):
            raise IndexError(f"contact index {index} out of range (0..{len(dto.items) - 1})")
        item = dto.items[index]
        return ContactDetail(
            name=_display_name(item),
            emails=item.emails or (self._no_email,),
            phone=item.phone if item.phone is not None else self._no_phone,
        )

    def render_list(self, dto: ContactListDTO) -> str:
        """Render the list view as terminal text (one line per contact)."""
        rows = self.present_list(dto)
        if not rows:
            return "No contacts."
        width = len(str(len(rows) - 1))
        return "\n".join(f"{r.index:>{width}}  {r.title}  <{r.subtitle}>" for r in rows)

    def render_detail(self, dto: ContactListDTO, index: int) -> str:
        """Render the detail view as terminal text."""
        detail = self.present_detail(dto, index)
        lines = [detail.name]
        lines.extend(f"  email: {email}" for email in detail.emails)
        lines.append(f"  phone: {detail.phone}")
        return "\n".join(lines)
