# src/contact_desk/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the page orchestration layer.

Actions depend on these Protocols instead of ContactApi/TaskApi directly,
so tests can swap in scripted fakes (e.g. an API that always fails).
"""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from ..contacts.contact_models import Contact
from ..tasks.task_models import Task

ConfirmFn = Callable[[str], bool | Awaitable[bool]]
# Asked before destructive actions; receives the prompt text.


class ContactSource(Protocol):
    async def get_all(self) -> list[Contact]: ...
    async def get_by_id(self, contact_id: str) -> Contact: ...


class TaskSource(Protocol):
    async def get_all(self) -> list[Task]: ...
    async def get_by_contact_id(self, contact_id: str) -> list[Task]: ...

    async def create(
        self,
        *,
        contact_id: str | None = None,
        title: str | None = None,
        description: str | None = None,
        completed: bool = False,
    ) -> Task: ...

    async def update(self, task_id: str, /, **changes: Any) -> Task: ...
    async def delete(self, task_id: str) -> bool: ...
