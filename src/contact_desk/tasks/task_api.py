# tasks/task_api.py

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any

from ..storage.errors import NotFoundError, TaskValidationError
from ..storage.faults import FaultPolicy, Latency
from ..storage.store import InMemoryStore
from .task_models import MUTABLE_TASK_FIELDS, TITLE_MAX_LENGTH, Task

logger = logging.getLogger(__name__)

TITLE_TOO_LONG = f"Task title must be {TITLE_MAX_LENGTH} characters or less"


def _clean_description(raw: str | None) -> str | None:
    """Trim; empty-after-trim collapses to None."""
    if raw is None:
        return None
    return str(raw).strip() or None


def _title_text(raw: Any) -> str:
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise TaskValidationError("Task title must be text")
    return raw.strip()


def _require_task_id(task_id: Any) -> str:
    if not task_id or not isinstance(task_id, str):
        raise TaskValidationError("Invalid task ID")
    return task_id


class TaskApi:
    """
    Task endpoints of the simulated backend.

    Every call first goes through the FaultPolicy (latency, then a random
    failure roll), then validates, then mutates. A failed call never leaves a
    partial write behind. No retries happen here; that is the caller's decision.
    """

    def __init__(self, store: InMemoryStore, faults: FaultPolicy | None = None) -> None:
        self._store = store
        self._faults = faults or FaultPolicy()

    async def get_all(self) -> list[Task]:
        await self._faults.simulate("fetch tasks", Latency.TASKS_GET_ALL)
        return self._store.tasks_snapshot()

    async def get_by_contact_id(self, contact_id: str) -> list[Task]:
        """Tasks owned by contact_id; an unknown contact simply yields []."""
        await self._faults.simulate("fetch tasks", Latency.TASKS_GET_BY_CONTACT_ID)
        return self._store.tasks_for_contact(contact_id)

    async def create(
        self,
        *,
        contact_id: str | None = None,
        title: str | None = None,
        description: str | None = None,
        completed: bool = False,
    ) -> Task:
        await self._faults.simulate("create task", Latency.TASKS_MUTATE)

        if not contact_id:
            raise TaskValidationError("Contact ID is required")
        clean_title = _title_text(title)
        if not clean_title:
            raise TaskValidationError("Task title is required")
        if len(clean_title) > TITLE_MAX_LENGTH:
            raise TaskValidationError(TITLE_TOO_LONG)

        now = datetime.now()
        task = Task(
            id=self._store.new_task_id(),
            contact_id=contact_id,
            title=clean_title,
            description=_clean_description(description),
            completed=bool(completed),
            created_at=now,
            updated_at=now,
        )
        self._store.append_task(task)
        logger.debug("Task created id=%s contact_id=%s", task.id, contact_id)
        return task

    async def update(self, task_id: str, /, **changes: Any) -> Task:
        """
        Partial update.

        - title (if given) is trimmed and must stay within 1..TITLE_MAX_LENGTH chars
        - description (if given) is trimmed; empty or None clears it
        - contact_id / completed overwrite directly
        - updated_at is always refreshed
        """
        await self._faults.simulate("update task", Latency.TASKS_MUTATE)

        task_id = _require_task_id(task_id)
        index = self._store.find_task_index(task_id)
        if index == -1:
            raise NotFoundError("Task not found")

        unknown = sorted(set(changes) - MUTABLE_TASK_FIELDS)
        if unknown:
            raise TaskValidationError(f"Unknown task field: {', '.join(unknown)}")

        fields: dict[str, Any] = {}

        if "title" in changes:
            clean_title = _title_text(changes["title"])
            if not clean_title:
                raise TaskValidationError("Task title cannot be empty")
            if len(clean_title) > TITLE_MAX_LENGTH:
                raise TaskValidationError(TITLE_TOO_LONG)
            fields["title"] = clean_title

        if "description" in changes:
            fields["description"] = _clean_description(changes["description"])

        if "completed" in changes:
            fields["completed"] = bool(changes["completed"])

        if "contact_id" in changes:
            fields["contact_id"] = changes["contact_id"]

        updated = replace(self._store.tasks[index], **fields, updated_at=datetime.now())
        self._store.replace_task(index, updated)
        logger.debug("Task updated id=%s fields=%s", task_id, sorted(fields))
        return updated

    async def delete(self, task_id: str) -> bool:
        await self._faults.simulate("delete task", Latency.TASKS_MUTATE)

        task_id = _require_task_id(task_id)
        index = self._store.find_task_index(task_id)
        if index == -1:
            raise NotFoundError("Task not found")

        self._store.remove_task(index)
        logger.debug("Task deleted id=%s", task_id)
        return True
