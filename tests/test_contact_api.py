# tests/test_contact_api.py

from __future__ import annotations

import random

import pytest

from contact_desk.contacts.contact_api import ContactApi
from contact_desk.storage.errors import DataApiError, NotFoundError, TransientApiError
from contact_desk.storage.faults import FaultPolicy
from contact_desk.storage.store import InMemoryStore

from .fakes import retry_async


@pytest.mark.asyncio
async def test_get_all_returns_shallow_copy(contact_api, store) -> None:
    contacts = await contact_api.get_all()
    assert len(contacts) == 60
    assert contacts[0].id == "contact-1"

    contacts.pop()
    assert store.count_contacts() == 60


@pytest.mark.asyncio
async def test_get_by_id(contact_api) -> None:
    contacts = await contact_api.get_all()
    assert await contact_api.get_by_id(contacts[5].id) == contacts[5]


@pytest.mark.asyncio
async def test_get_by_id_unknown_is_not_found(contact_api) -> None:
    with pytest.raises(NotFoundError, match="Contact not found"):
        await contact_api.get_by_id("invalid-id")
    with pytest.raises(NotFoundError):
        await contact_api.get_by_id("")


@pytest.mark.asyncio
async def test_get_by_id_unknown_under_failures_reports_either_error() -> None:
    store = InMemoryStore.seeded(5, random.Random(3))
    api = ContactApi(store, FaultPolicy(failure_rate=0.5, latency_scale=0.0, rng=random.Random(11)))

    messages = set()
    for _ in range(20):
        with pytest.raises(DataApiError) as exc:
            await api.get_by_id("invalid-id")
        messages.add(str(exc.value))

    assert messages <= {"Contact not found", "Failed to fetch contact. Please try again."}
    assert "Contact not found" in messages


@pytest.mark.asyncio
async def test_get_all_failure_message() -> None:
    api = ContactApi(InMemoryStore(), FaultPolicy(failure_rate=1.0, latency_scale=0.0))
    with pytest.raises(TransientApiError, match="Failed to fetch contacts. Please try again."):
        await api.get_all()


@pytest.mark.asyncio
async def test_get_all_with_retries_against_default_rate() -> None:
    store = InMemoryStore.seeded(20, random.Random(8))
    api = ContactApi(store, FaultPolicy(latency_scale=0.0, rng=random.Random(21)))
    contacts = await retry_async(api.get_all)
    assert len(contacts) == 20
