from __future__ import annotations

import pytest

from contact_desk.cli import bootstrap
from contact_desk.cli.bootstrap import create_initial_state
from contact_desk.storage.faults import FaultPolicy


def _refuse(*args, **kwargs):
    raise AssertionError("should not be built")


def test_injected_store_is_kept_and_faults_come_from_settings(settings, store, monkeypatch) -> None:
    monkeypatch.setattr(bootstrap, "build_store", _refuse)
    settings.failure_rate = 0.25

    state = create_initial_state(settings=settings, store=store)

    assert state.contact_api._store is store
    assert state.task_api._store is store
    assert state.task_api._faults is state.contact_api._faults
    assert state.task_api._faults.failure_rate == 0.25
    assert settings.data_dir.is_dir()


def test_injected_faults_are_kept_and_store_is_seeded(settings, monkeypatch) -> None:
    monkeypatch.setattr(bootstrap, "build_faults", _refuse)
    faults = FaultPolicy.disabled()

    state = create_initial_state(settings=settings, faults=faults)

    assert state.task_api._faults is faults
    assert state.contact_api._store.count_contacts() == settings.seed_contacts


@pytest.mark.asyncio
async def test_same_seed_builds_same_contacts(settings) -> None:
    a = create_initial_state(settings=settings)
    b = create_initial_state(settings=settings)
    first = await a.contact_api.get_all()
    second = await b.contact_api.get_all()
    assert [c.name for c in first] == [c.name for c in second]
    assert a.contact_api._store is not b.contact_api._store
