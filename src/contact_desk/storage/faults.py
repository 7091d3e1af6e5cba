# storage/faults.py

from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass, field

from .errors import TransientApiError

logger = logging.getLogger(__name__)

DEFAULT_FAILURE_RATE = 0.10


class Latency:
    """Nominal per-operation round-trip times, in milliseconds."""

    CONTACTS_GET_ALL = 300
    CONTACTS_GET_BY_ID = 150
    TASKS_GET_ALL = 200
    TASKS_GET_BY_CONTACT_ID = 100
    TASKS_MUTATE = 250


@dataclass(slots=True)
class FaultPolicy:
    """
    Latency + failure injection applied uniformly to every API call.

    - latency_scale multiplies the nominal latency (0 disables sleeping)
    - failure_rate is the independent per-call probability of a TransientApiError

    The failure roll happens after the sleep and before any lookup or validation,
    so an invalid id may surface either as "not found" or as the generic failure.
    """

    failure_rate: float = DEFAULT_FAILURE_RATE
    latency_scale: float = 1.0
    rng: random.Random = field(default_factory=random.Random)

    @classmethod
    def disabled(cls) -> FaultPolicy:
        return cls(failure_rate=0.0, latency_scale=0.0)

    @classmethod
    def from_settings(cls, settings, rng: random.Random | None = None) -> FaultPolicy:
        return cls(
            failure_rate=float(getattr(settings, "failure_rate", DEFAULT_FAILURE_RATE)),
            latency_scale=float(getattr(settings, "latency_scale", 1.0)),
            rng=rng or random.Random(),
        )

    def should_fail(self) -> bool:
        if self.failure_rate <= 0.0:
            return False
        return self.rng.random() < self.failure_rate

    async def simulate(self, action: str, latency_ms: int) -> None:
        delay = max(0.0, latency_ms * self.latency_scale / 1000.0)
        if delay > 0:
            await asyncio.sleep(delay)
        else:
            # Still yield once so callers observe the same suspension point.
            await asyncio.sleep(0)

        if self.should_fail():
            logger.info("Simulated failure: %s", action)
            raise TransientApiError(action)
