# src/contact_desk/core/actions.py

"""
Page orchestration.

Each action reads/writes AppState and calls the APIs. API failures never escape:
the message lands in state.error for the UI to show, and the user decides
whether to retry.
"""

from __future__ import annotations

import asyncio
import inspect
import logging

from ..contacts.contact_models import Contact, ContactsFilter, SortDirection, SortField
from ..storage.errors import DataApiError
from ..tasks.task_api import TITLE_TOO_LONG
from ..tasks.task_models import TITLE_MAX_LENGTH, Task
from .debounce import Debouncer
from .ports import ConfirmFn
from .state import AppState
from .views import Page, derive_view

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Are you sure you want to delete this task?"


# ---- loading ----


async def fetch_contacts(state: AppState) -> None:
    state.loading = True
    state.error = None
    try:
        state.contacts = await state.contact_api.get_all()
        logger.info("Loaded %d contacts", len(state.contacts))
    except DataApiError as e:
        state.error = str(e)
        logger.info("Loading contacts failed: %s", e)
    finally:
        state.loading = False


async def fetch_tasks(state: AppState) -> None:
    """Task list refresh; a failure keeps the previous list and is only logged."""
    try:
        state.tasks = await state.task_api.get_all()
        logger.info("Loaded %d tasks", len(state.tasks))
    except DataApiError as e:
        logger.warning("Loading tasks failed: %s", e)


async def load_all(state: AppState) -> None:
    await asyncio.gather(fetch_contacts(state), fetch_tasks(state))


# ---- search / sort / pagination ----


def apply_search(state: AppState, term: str) -> None:
    state.debounced_search_term = term
    state.current_page = 1


def attach_search_debouncer(state: AppState) -> Debouncer:
    wait_ms = getattr(state.settings, "search_debounce_ms", 300)
    debouncer = Debouncer(lambda term: apply_search(state, term), wait_ms / 1000.0)
    state.search_debouncer = debouncer
    return debouncer


def set_search_term(state: AppState, term: str) -> None:
    """Record what the user typed; filtering follows once typing pauses."""
    state.search_term = term
    if state.search_debouncer is None:
        apply_search(state, term)
        return
    state.search_debouncer(term)


async def wait_for_search(state: AppState, poll_seconds: float = 0.01) -> None:
    debouncer = state.search_debouncer
    while debouncer is not None and debouncer.pending:
        await asyncio.sleep(poll_seconds)


def change_sort(state: AppState, field: SortField, direction: SortDirection) -> None:
    state.sort_by = field
    state.sort_direction = direction
    state.current_page = 1


def current_filter(state: AppState) -> ContactsFilter:
    return ContactsFilter(
        search=state.debounced_search_term,
        sort_by=state.sort_by,
        sort_direction=state.sort_direction,
        page=state.current_page,
        page_size=state.page_size,
    )


def current_page_view(state: AppState) -> Page[Contact]:
    """Derive the visible page; a page left out of range by filtering is clamped."""
    page = derive_view(state.contacts, current_filter(state))
    state.current_page = page.page
    return page


def go_to_page(state: AppState, page: int) -> int:
    state.current_page = int(page)
    return current_page_view(state).page


def next_page(state: AppState) -> int:
    return go_to_page(state, state.current_page + 1)


def previous_page(state: AppState) -> int:
    return go_to_page(state, max(1, state.current_page - 1))


# ---- selection / form ----


def select_contact(state: AppState, contact: Contact) -> None:
    state.selected_contact = contact
    state.form.reset()


def selected_contact_tasks(state: AppState) -> list[Task]:
    if state.selected_contact is None:
        return []
    contact_id = state.selected_contact.id
    return [t for t in state.tasks if t.contact_id == contact_id]


def open_task_form(state: AppState) -> None:
    state.form.reset()
    state.form.visible = True
    state.error = None


def open_edit_form(state: AppState, task: Task) -> None:
    state.form.visible = True
    state.form.editing_task = task
    state.form.title = task.title
    state.form.description = task.description or ""
    state.error = None


def close_form(state: AppState) -> None:
    state.form.reset()
    state.submitting = False
    state.error = None


def clear_error(state: AppState) -> None:
    state.error = None


def _checked_form_title(state: AppState) -> str | None:
    title = state.form.title.strip()
    if not title:
        state.error = "Task title is required"
        return None
    if len(title) > TITLE_MAX_LENGTH:
        state.error = TITLE_TOO_LONG
        return None
    return title


def _replace_task(state: AppState, updated: Task) -> None:
    state.tasks = [updated if t.id == updated.id else t for t in state.tasks]


async def submit_task_form(state: AppState) -> Task | None:
    """Create or update depending on whether the form is editing a task."""
    if state.form.is_editing:
        return await _submit_update(state)
    return await _submit_create(state)


async def _submit_create(state: AppState) -> Task | None:
    if state.selected_contact is None:
        state.error = "No contact selected"
        return None

    title = _checked_form_title(state)
    if title is None:
        return None

    state.submitting = True
    state.error = None
    try:
        task = await state.task_api.create(
            contact_id=state.selected_contact.id,
            title=title,
            description=state.form.description.strip() or None,
            completed=False,
        )
    except DataApiError as e:
        state.error = str(e)
        return None
    finally:
        state.submitting = False

    state.tasks = [*state.tasks, task]
    state.form.reset()
    logger.info("Task %s created for %s", task.id, task.contact_id)
    return task


async def _submit_update(state: AppState) -> Task | None:
    editing = state.form.editing_task
    if editing is None:
        state.error = "No task selected for editing"
        return None

    title = _checked_form_title(state)
    if title is None:
        return None

    state.submitting = True
    state.error = None
    try:
        updated = await state.task_api.update(
            editing.id,
            title=title,
            description=state.form.description.strip() or None,
        )
    except DataApiError as e:
        state.error = str(e)
        return None
    finally:
        state.submitting = False

    _replace_task(state, updated)
    state.form.reset()
    logger.info("Task %s updated", updated.id)
    return updated


# ---- task mutations ----


async def toggle_task(state: AppState, task: Task) -> Task | None:
    try:
        updated = await state.task_api.update(task.id, completed=not task.completed)
    except DataApiError as e:
        state.error = str(e)
        return None
    _replace_task(state, updated)
    return updated


async def _confirmed(confirm: ConfirmFn | None, prompt: str) -> bool:
    if confirm is None:
        return True
    answer = confirm(prompt)
    if inspect.isawaitable(answer):
        answer = await answer
    return bool(answer)


async def delete_task(state: AppState, task_id: str, confirm: ConfirmFn | None = None) -> bool:
    """Returns True only when the task was actually removed."""
    if not await _confirmed(confirm, DELETE_PROMPT):
        return False

    try:
        await state.task_api.delete(task_id)
    except DataApiError as e:
        state.error = str(e)
        return False

    state.tasks = [t for t in state.tasks if t.id != task_id]
    logger.info("Task %s deleted", task_id)
    return True


async def select_contact_by_id(state: AppState, contact_id: str) -> Contact | None:
    """Select a contact that may not be on the loaded list (asks the backend)."""
    for contact in state.contacts:
        if contact.id == contact_id:
            select_contact(state, contact)
            return contact

    try:
        contact = await state.contact_api.get_by_id(contact_id)
    except DataApiError as e:
        state.error = str(e)
        return None
    select_contact(state, contact)
    return contact
