# contacts/contact_api.py

from __future__ import annotations

import logging

from ..storage.errors import NotFoundError
from ..storage.faults import FaultPolicy, Latency
from ..storage.store import InMemoryStore
from .contact_models import Contact

logger = logging.getLogger(__name__)


class ContactApi:
    """Read-only contact endpoints of the simulated backend."""

    def __init__(self, store: InMemoryStore, faults: FaultPolicy | None = None) -> None:
        self._store = store
        self._faults = faults or FaultPolicy()

    async def get_all(self) -> list[Contact]:
        """All contacts, unfiltered and unsorted (shallow copy of the store list)."""
        await self._faults.simulate("fetch contacts", Latency.CONTACTS_GET_ALL)
        contacts = self._store.contacts_snapshot()
        logger.debug("contacts.get_all -> %d", len(contacts))
        return contacts

    async def get_by_id(self, contact_id: str) -> Contact:
        await self._faults.simulate("fetch contact", Latency.CONTACTS_GET_BY_ID)
        contact = self._store.find_contact(contact_id)
        if contact is None:
            logger.debug("contacts.get_by_id miss id=%r", contact_id)
            raise NotFoundError("Contact not found")
        return contact
