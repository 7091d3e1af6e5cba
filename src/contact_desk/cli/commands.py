# src/contact_desk/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import cast

from rich.console import RenderableType

from ..connectors.render import render_contacts, render_status, render_tasks
from ..contacts.contact_models import SortDirection, SortField
from ..core import actions
from ..core.state import AppState
from ..tasks.task_models import Task

CommandEmitter = Callable[[RenderableType], None]
CommandHandler2 = Callable[[AppState, list[str]], Awaitable[RenderableType]]
CommandHandler3 = Callable[
    [AppState, list[str], CommandEmitter | None], Awaitable[RenderableType]
]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Slash-command registry used by the console connector (/help, /search, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    async def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> RenderableType | None:
        """
        Handle a string like "/command args".
        Returns something to print, or None if the line is not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return await h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return await h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _split_title_description(args: list[str]) -> tuple[str, str | None]:
    """
    '/add Call back | about the invoice' -> ("Call back", "about the invoice").

    Description is None when there is no "|" at all, "" when nothing follows it.
    """
    raw = " ".join(args)
    title, sep, description = raw.partition("|")
    return title.strip(), description.strip() if sep else None


def _task_by_row(state: AppState, raw: str) -> Task | None:
    tasks = actions.selected_contact_tasks(state)
    try:
        row = int(raw)
    except ValueError:
        # Also accept a task id.
        return next((t for t in tasks if t.id == raw), None)
    if 1 <= row <= len(tasks):
        return tasks[row - 1]
    return None


async def cmd_help(state: AppState, args: list[str]) -> RenderableType:
    return registry.build_help()


async def cmd_list(state: AppState, args: list[str]) -> RenderableType:
    return render_contacts(state)


async def cmd_search(state: AppState, args: list[str]) -> RenderableType:
    """
    /search <term>  -> filter by name, email or company
    /search         -> clear the filter
    """
    actions.set_search_term(state, " ".join(args))
    await actions.wait_for_search(state)
    return render_contacts(state)


async def cmd_clear_search(state: AppState, args: list[str]) -> RenderableType:
    actions.set_search_term(state, "")
    await actions.wait_for_search(state)
    return render_contacts(state)


async def cmd_sort(state: AppState, args: list[str]) -> RenderableType:
    """
    /sort <field>           -> toggle direction if already sorted by field, else asc
    /sort <field> asc|desc  -> explicit direction
    """
    usage = "Usage: /sort name|email|company|createdAt [asc|desc]"
    if not args:
        return usage

    field = SortField.parse(args[0])
    if field is None:
        return f"Unknown sort field: {args[0]}. {usage}"

    if len(args) > 1:
        try:
            direction = SortDirection(args[1].lower())
        except ValueError:
            return usage
    elif field == state.sort_by:
        direction = state.sort_direction.flipped()
    else:
        direction = SortDirection.ASC

    actions.change_sort(state, field, direction)
    return render_contacts(state)


async def cmd_next(state: AppState, args: list[str]) -> RenderableType:
    actions.next_page(state)
    return render_contacts(state)


async def cmd_prev(state: AppState, args: list[str]) -> RenderableType:
    actions.previous_page(state)
    return render_contacts(state)


async def cmd_page(state: AppState, args: list[str]) -> RenderableType:
    if not args:
        return "Usage: /page <n>"
    try:
        page = int(args[0])
    except ValueError:
        return "Usage: /page <n>"
    actions.go_to_page(state, page)
    return render_contacts(state)


async def cmd_select(state: AppState, args: list[str]) -> RenderableType:
    """
    /select <row>         -> row number on the current page
    /select <contact-id>  -> any contact, e.g. contact-42
    """
    if not args:
        return "Usage: /select <row|contact-id>"

    raw = args[0]
    if raw.isdigit():
        page = actions.current_page_view(state)
        row = int(raw)
        if not 1 <= row <= len(page.items):
            return f"No row {row} on this page."
        actions.select_contact(state, page.items[row - 1])
    else:
        contact = await actions.select_contact_by_id(state, raw)
        if contact is None:
            return ""

    return render_tasks(state)


async def cmd_tasks(state: AppState, args: list[str]) -> RenderableType:
    return render_tasks(state)


async def cmd_add(state: AppState, args: list[str]) -> RenderableType:
    """/add <title> [| description]"""
    if state.selected_contact is None:
        return "Select a contact first (/select <row>)."

    title, description = _split_title_description(args)
    actions.open_task_form(state)
    state.form.title = title
    state.form.description = description or ""

    task = await actions.submit_task_form(state)
    if task is None:
        return ""
    return render_tasks(state)


async def cmd_edit(state: AppState, args: list[str]) -> RenderableType:
    """/edit <n> <title> [| description]"""
    if len(args) < 2:
        return "Usage: /edit <n> <title> [| description]"

    task = _task_by_row(state, args[0])
    if task is None:
        return f"No task {args[0]} for the selected contact."

    title, description = _split_title_description(args[1:])
    actions.open_edit_form(state, task)
    state.form.title = title
    # Without "|" the pre-filled description is kept.
    if description is not None:
        state.form.description = description

    updated = await actions.submit_task_form(state)
    if updated is None:
        return ""
    return render_tasks(state)


async def cmd_toggle(state: AppState, args: list[str]) -> RenderableType:
    if not args:
        return "Usage: /toggle <n>"
    task = _task_by_row(state, args[0])
    if task is None:
        return f"No task {args[0]} for the selected contact."
    await actions.toggle_task(state, task)
    return render_tasks(state)


async def cmd_delete(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> RenderableType:
    """
    /delete <n>       -> asks for confirmation
    /delete <n> yes   -> deletes
    """
    if not args:
        return "Usage: /delete <n> [yes]"
    task = _task_by_row(state, args[0])
    if task is None:
        return f"No task {args[0]} for the selected contact."

    confirmed = len(args) > 1 and args[1].lower() in ("yes", "y")

    def confirm(prompt: str) -> bool:
        if not confirmed and emit is not None:
            emit(f"{prompt} Re-run with: /delete {args[0]} yes")
        return confirmed

    deleted = await actions.delete_task(state, task.id, confirm=confirm)
    if not deleted:
        return ""
    return render_tasks(state)


async def cmd_reload(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> RenderableType:
    if emit is not None:
        emit("[dim]Loading contacts...[/]")
    await actions.load_all(state)
    return render_contacts(state)


async def cmd_status(state: AppState, args: list[str]) -> RenderableType:
    return render_status(state)


async def cmd_dismiss(state: AppState, args: list[str]) -> RenderableType:
    actions.clear_error(state)
    return "Error dismissed."


async def cmd_cancel(state: AppState, args: list[str]) -> RenderableType:
    """Drop a task form left open by a failed /add or /edit."""
    if not state.form.visible:
        return "No task form open."
    actions.close_form(state)
    return "Task form closed."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the current page of contacts.", aliases=["ls"])
registry.register("search", cmd_search, help_text="Filter by name/email/company: /search <term>.")
registry.register("clear-search", cmd_clear_search, help_text="Remove the search filter.")
registry.register(
    "sort", cmd_sort, help_text="Sort contacts: /sort name|email|company|createdAt [asc|desc]."
)
registry.register("next", cmd_next, help_text="Next page.", aliases=["n"])
registry.register("prev", cmd_prev, help_text="Previous page.", aliases=["p"])
registry.register("page", cmd_page, help_text="Jump to a page: /page <n>.")
registry.register("select", cmd_select, help_text="Select a contact: /select <row|contact-id>.")
registry.register("tasks", cmd_tasks, help_text="Show tasks of the selected contact.")
registry.register("add", cmd_add, help_text="Add a task: /add <title> [| description].")
registry.register("edit", cmd_edit, help_text="Edit a task: /edit <n> <title> [| description].")
registry.register("toggle", cmd_toggle, help_text="Toggle a task's completed flag: /toggle <n>.")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <n> [yes].")
registry.register("reload", cmd_reload, help_text="Reload contacts and tasks.")
registry.register("status", cmd_status, help_text="Show current view and backend settings.")
registry.register("dismiss", cmd_dismiss, help_text="Dismiss the current error.")
registry.register("cancel", cmd_cancel, help_text="Close a task form left open by a failed submit.")
