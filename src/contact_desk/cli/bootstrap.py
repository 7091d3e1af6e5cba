# src/contact_desk/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- builds the one InMemoryStore and the FaultPolicy,
- wires ContactApi/TaskApi into AppState.
"""

from __future__ import annotations

import logging
import random

from ..config import get_settings
from ..contacts.contact_api import ContactApi
from ..core.actions import attach_search_debouncer
from ..core.state import AppState
from ..storage.faults import FaultPolicy
from ..storage.store import InMemoryStore
from ..tasks.task_api import TaskApi

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def _rngs(seed: int | None) -> tuple[random.Random, random.Random]:
    """Separate streams for seed data and fault rolls, both reproducible from one seed."""
    if seed is None:
        return random.Random(), random.Random()
    return random.Random(seed), random.Random(seed + 1)


def build_store(settings, rng: random.Random) -> InMemoryStore:
    return InMemoryStore.seeded(int(getattr(settings, "seed_contacts", 10000)), rng)


def build_faults(settings, rng: random.Random) -> FaultPolicy:
    return FaultPolicy.from_settings(settings, rng=rng)


def create_initial_state(*, settings=None, store: InMemoryStore | None = None,
                         faults: FaultPolicy | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the store) injectable makes the app easier to test and
    avoids hidden global state. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    data_rng, fault_rng = _rngs(getattr(settings, "random_seed", None))
    if store is None:
        store = build_store(settings, data_rng)
    if faults is None:
        faults = build_faults(settings, fault_rng)

    logger.info(
        "Backend simulation failure_rate=%.2f latency_scale=%.2f",
        faults.failure_rate,
        faults.latency_scale,
    )

    state = AppState(
        settings=settings,
        contact_api=ContactApi(store, faults),
        task_api=TaskApi(store, faults),
    )
    attach_search_debouncer(state)
    return state
