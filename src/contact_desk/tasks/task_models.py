# tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

TITLE_MAX_LENGTH = 200

# Fields a caller may change through TaskApi.update(); the rest are owned by the store.
MUTABLE_TASK_FIELDS = frozenset({"contact_id", "title", "description", "completed"})


@dataclass(slots=True)
class Task:
    id: str
    contact_id: str
    title: str
    completed: bool
    created_at: datetime
    updated_at: datetime
    description: str | None = None
