# tests/fakes.py

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from contact_desk.contacts.contact_models import Contact
from contact_desk.storage.errors import DataApiError, TransientApiError
from contact_desk.tasks.task_models import Task

T = TypeVar("T")


async def retry_async(fn: Callable[[], Awaitable[T]], max_retries: int = 8) -> T:
    """
    Bounded retry for calls against a backend with random failures.

    Only the injected transient failure is retried; not-found and validation
    errors propagate on the first attempt.
    """
    for attempt in range(max_retries):
        try:
            return await fn()
        except TransientApiError:
            if attempt == max_retries - 1:
                raise
            await asyncio.sleep(0)
    raise AssertionError("unreachable")


class FailingContactApi:
    """ContactSource that always fails with a fixed message."""

    def __init__(self, message: str = "Failed to fetch contacts. Please try again.") -> None:
        self.message = message
        self.calls = 0

    async def get_all(self) -> list[Contact]:
        self.calls += 1
        raise DataApiError(self.message)

    async def get_by_id(self, contact_id: str) -> Contact:
        self.calls += 1
        raise DataApiError(self.message)


class FailingTaskApi:
    """TaskSource whose every call fails; records what was attempted."""

    def __init__(self, message: str = "Failed to update task. Please try again.") -> None:
        self.message = message
        self.calls: list[tuple[str, Any]] = []

    async def get_all(self) -> list[Task]:
        self.calls.append(("get_all", None))
        raise DataApiError(self.message)

    async def get_by_contact_id(self, contact_id: str) -> list[Task]:
        self.calls.append(("get_by_contact_id", contact_id))
        raise DataApiError(self.message)

    async def create(self, **fields: Any) -> Task:
        self.calls.append(("create", fields))
        raise DataApiError(self.message)

    async def update(self, task_id: str, /, **changes: Any) -> Task:
        self.calls.append(("update", (task_id, changes)))
        raise DataApiError(self.message)

    async def delete(self, task_id: str) -> bool:
        self.calls.append(("delete", task_id))
        raise DataApiError(self.message)
