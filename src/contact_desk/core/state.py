# src/contact_desk/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..contacts.contact_models import Contact, SortDirection, SortField
from ..tasks.task_models import Task
from .debounce import Debouncer
from .ports import ContactSource, TaskSource


@dataclass
class TaskFormState:
    visible: bool = False
    editing_task: Task | None = None
    title: str = ""
    description: str = ""

    @property
    def is_editing(self) -> bool:
        return self.editing_task is not None

    def reset(self) -> None:
        self.visible = False
        self.editing_task = None
        self.title = ""
        self.description = ""


@dataclass
class AppState:
    """
    Everything the contact/task screen holds between user actions.

    Views (current page, selected contact's tasks) are derived on demand in
    core.actions; nothing derived is cached here except current_page, which is
    written back after clamping.
    """

    settings: Any
    contact_api: ContactSource
    task_api: TaskSource

    contacts: list[Contact] = field(default_factory=list)
    tasks: list[Task] = field(default_factory=list)
    loading: bool = False
    error: str | None = None

    search_term: str = ""
    debounced_search_term: str = ""
    sort_by: SortField = SortField.NAME
    sort_direction: SortDirection = SortDirection.ASC
    current_page: int = 1

    selected_contact: Contact | None = None
    form: TaskFormState = field(default_factory=TaskFormState)
    submitting: bool = False

    # Wired by core.actions.attach_search_debouncer (needs the state itself).
    search_debouncer: Debouncer | None = None

    @property
    def page_size(self) -> int:
        return int(getattr(self.settings, "page_size", 10) or 10)
