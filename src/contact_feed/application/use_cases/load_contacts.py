# Copyright (c)
# SPDX-License-Identifier: MIT
"""
Use Case: Load Contacts

Purpose:
    Retrieve and decode a contact document through a source gateway and
    return DTOs for presentation, preserving document order.

Layer: application/use_cases
"""

from __future__ import annotations

import uuid

from contact_feed.application.schemas.dto.contacts import ContactDTO, ContactListDTO
from contact_feed.domain.interfaces.gateways.contact_source_gateway import ContactSourceGateway
from contact_feed.infrastructure.logging.logger import get_run_id, set_run_context


class LoadContacts:
    """Use case to load every contact from one source.

    Args:
        gateway: Contact source gateway implementation.

    Raises:
        ContactSourceNotFound: If the document does not exist.
        ContactSourceError: If the document cannot be retrieved.
        ContactDecodeError: If the document cannot be decoded.
    """

    def __init__(self, gateway: ContactSourceGateway) -> None:
        self._gateway = gateway

    async def execute(self) -> ContactListDTO:
        """Load contacts, binding a run id for log correlation if none is set."""
        if get_run_id() is None:
            set_run_context(run_id=uuid.uuid4().hex)
        contacts = await self._gateway.fetch_contacts()
        return ContactListDTO(
            source=self._gateway.source,
            items=[ContactDTO.from_entity(c) for c in contacts],
        )
