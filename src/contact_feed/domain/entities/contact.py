# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Contact Entity

Purpose:
    Immutable domain representation of one person entry from a contact feed
    (no I/O).

Layer: domain/entities
"""
from __future__ import annotations

from dataclasses import dataclass, field

from .base import BaseEntity


@dataclass(frozen=True, slots=True)
class Contact(BaseEntity):
    """Decoded contact record.

    Args:
        first_name: Given name as published by the feed.
        last_name: Family name as published by the feed.
        emails: Ordered email addresses; empty when the feed omits them.
        phone: Phone number, or ``None`` when the feed omits it.

    Raises:
        TypeError: If ``emails`` contains a non-string entry.
    """

    first_name: str
    last_name: str
    emails: tuple[str, ...] = field(default_factory=tuple)
    phone: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.emails, tuple):
            object.__setattr__(self, "emails", tuple(self.emails))
        if any(not isinstance(e, str) for e in self.emails):
            raise TypeError("emails must contain only strings")

    @property
    def full_name(self) -> str:
        """Return ``"first last"`` with surrounding whitespace removed."""
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def primary_email(self) -> str | None:
        """Return the first email address, if any."""
        return self.emails[0] if self.emails else None
