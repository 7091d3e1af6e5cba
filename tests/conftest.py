# tests/conftest.py

from __future__ import annotations

import random
from pathlib import Path
from types import SimpleNamespace

import pytest

from contact_desk.cli.bootstrap import create_initial_state
from contact_desk.contacts.contact_api import ContactApi
from contact_desk.core.state import AppState
from contact_desk.storage.faults import FaultPolicy
from contact_desk.storage.store import InMemoryStore
from contact_desk.tasks.task_api import TaskApi


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="contact-desk-test",
        data_dir=tmp_path / "data",
        page_size=10,
        search_debounce_ms=20,
        failure_rate=0.0,
        latency_scale=0.0,
        seed_contacts=60,
        random_seed=1234,
    )


@pytest.fixture()
def store() -> InMemoryStore:
    """Small seeded store; a fresh one per test so mutations never leak."""
    return InMemoryStore.seeded(60, random.Random(42))


@pytest.fixture()
def faults() -> FaultPolicy:
    return FaultPolicy.disabled()


@pytest.fixture()
def contact_api(store: InMemoryStore, faults: FaultPolicy) -> ContactApi:
    return ContactApi(store, faults)


@pytest.fixture()
def task_api(store: InMemoryStore, faults: FaultPolicy) -> TaskApi:
    return TaskApi(store, faults)


@pytest.fixture()
def state(settings: SimpleNamespace, store: InMemoryStore, faults: FaultPolicy) -> AppState:
    """
    AppState wired through the real composition root.

    NOTE: We keep the real APIs here (with faults disabled) because their
    behaviour is part of what the orchestration tests exercise.
    """
    return create_initial_state(settings=settings, store=store, faults=faults)
