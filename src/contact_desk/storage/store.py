# storage/store.py

from __future__ import annotations

import logging
import random
import string
import time

from ..contacts.contact_models import Contact
from ..tasks.task_models import Task
from .seed import generate_contacts, generate_tasks

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.digits + string.ascii_lowercase


class InMemoryStore:
    """
    Sole owner of all contact and task state for the process lifetime.

    Constructed once by the composition root and handed to both APIs, so tests can
    build an isolated store per case instead of sharing module-level lists.

    Task.contact_id is never checked against the contact list: orphaned tasks are
    tolerated and simply never show up for any contact.
    """

    def __init__(
        self,
        contacts: list[Contact] | None = None,
        tasks: list[Task] | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self.contacts: list[Contact] = list(contacts or [])
        self.tasks: list[Task] = list(tasks or [])
        self._rng = rng or random.Random()
        logger.info(
            "InMemoryStore ready contacts=%s tasks=%s",
            len(self.contacts),
            len(self.tasks),
        )

    @classmethod
    def seeded(cls, contact_count: int = 10000, rng: random.Random | None = None) -> InMemoryStore:
        rng = rng or random.Random()
        contacts = generate_contacts(contact_count, rng)
        tasks = generate_tasks(contacts, rng)
        return cls(contacts, tasks, rng=rng)

    # ---- reads ----

    def contacts_snapshot(self) -> list[Contact]:
        return list(self.contacts)

    def tasks_snapshot(self) -> list[Task]:
        return list(self.tasks)

    def find_contact(self, contact_id: str) -> Contact | None:
        for contact in self.contacts:
            if contact.id == contact_id:
                return contact
        return None

    def find_task_index(self, task_id: str) -> int:
        """Position of the task in the store, or -1."""
        for i, task in enumerate(self.tasks):
            if task.id == task_id:
                return i
        return -1

    def tasks_for_contact(self, contact_id: str) -> list[Task]:
        return [t for t in self.tasks if t.contact_id == contact_id]

    # ---- writes ----

    def new_task_id(self) -> str:
        """task-<epoch ms>-<9 base36 chars>, redrawn until unused."""
        taken = {t.id for t in self.tasks}
        while True:
            suffix = "".join(self._rng.choice(_ID_ALPHABET) for _ in range(9))
            task_id = f"task-{int(time.time() * 1000)}-{suffix}"
            if task_id not in taken:
                return task_id

    def append_task(self, task: Task) -> None:
        self.tasks.append(task)

    def replace_task(self, index: int, task: Task) -> None:
        self.tasks[index] = task

    def remove_task(self, index: int) -> Task:
        return self.tasks.pop(index)

    def count_contacts(self) -> int:
        return len(self.contacts)

    def count_tasks(self) -> int:
        return len(self.tasks)
