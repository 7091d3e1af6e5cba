# src/contact_desk/connectors/render.py

"""rich renderables for the console UI (contacts page, task list, stats, errors)."""

from __future__ import annotations

from rich import box
from rich.console import Group, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..core import actions
from ..core.state import AppState
from ..core.text import format_date, highlight_text
from ..core.views import contact_task_stats

HIGHLIGHT_OPEN = "[black on yellow]"
HIGHLIGHT_CLOSE = "[/black on yellow]"


def _highlighted(value: str | None, term: str) -> Text:
    safe = escape(value or "")
    term = term.strip()
    # Terms with markup characters would corrupt the markup; show them plain.
    if not term or "[" in term or "]" in term or "\\" in term:
        return Text.from_markup(safe)
    return Text.from_markup(highlight_text(safe, term, HIGHLIGHT_OPEN, HIGHLIGHT_CLOSE))


def render_error(message: str) -> Panel:
    return Panel(
        Text(message),
        title="[bold red]Error[/]",
        subtitle="[dim]/dismiss[/]",
        border_style="red",
        box=box.ROUNDED,
    )


def render_contacts(state: AppState) -> RenderableType:
    if state.loading:
        return Text("Loading contacts...", style="dim")

    page = actions.current_page_view(state)
    term = state.debounced_search_term

    if not page.items:
        hint = (
            "Try adjusting your search terms"
            if term.strip()
            else "Get started by adding your first contact"
        )
        return Panel(f"[bold]No contacts found[/]\n[dim]{hint}[/]", box=box.ROUNDED)

    arrow = "↑" if state.sort_direction == "asc" else "↓"
    table = Table(
        box=box.ROUNDED,
        title=f"Contacts (sorted by {state.sort_by.value} {arrow})",
        title_justify="left",
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Email")
    table.add_column("Phone")
    table.add_column("Company")
    table.add_column("Created", style="dim")

    selected_id = state.selected_contact.id if state.selected_contact else None
    for row, c in enumerate(page.items, start=1):
        table.add_row(
            f"{'>' if c.id == selected_id else ' '}{row}",
            _highlighted(c.name, term),
            _highlighted(c.email, term),
            c.phone,
            _highlighted(c.company, term),
            format_date(c.created_at),
        )

    pager = Text(f"Page {page.page} / {page.total_pages}", style="bold blue")
    footer = Text.from_markup(
        f"Showing [bold]{len(page.items)}[/] of [bold]{page.total_items}[/] contacts"
        f"   [blue]●[/] {len(state.contacts)} Contacts"
        f"   [green]●[/] {len(state.tasks)} Tasks"
    )
    return Group(table, pager, footer)


def render_tasks(state: AppState) -> RenderableType:
    contact = state.selected_contact
    if contact is None:
        return Panel(
            "[bold]Select a contact[/]\n"
            "[dim]Choose a contact from the list to view and manage their tasks[/]",
            box=box.ROUNDED,
        )

    tasks = actions.selected_contact_tasks(state)
    total, completed = contact_task_stats(tasks)

    if not tasks:
        body: RenderableType = Text.from_markup(
            "[bold]No tasks yet[/]\n[dim]Use /add <title> to get started![/]"
        )
    else:
        table = Table(box=box.SIMPLE_HEAVY, show_edge=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Done", justify="center")
        table.add_column("Title", style="bold")
        table.add_column("Description")
        table.add_column("Updated", style="dim")
        for row, t in enumerate(tasks, start=1):
            table.add_row(
                str(row),
                "[green]✔[/]" if t.completed else "○",
                Text(t.title, style="strike dim" if t.completed else ""),
                escape(t.description or ""),
                format_date(t.updated_at),
            )
        body = table

    stats = Text.from_markup(
        f"Total Tasks: [bold]{total}[/]   Completed: [bold green]{completed}[/]"
    )
    return Panel(
        Group(body, stats),
        title=f"[bold]Tasks[/] · {escape(contact.name)}",
        box=box.ROUNDED,
    )


def render_status(state: AppState) -> Table:
    settings = state.settings
    table = Table(box=box.ROUNDED, show_header=False, padding=(0, 2))
    table.add_column("Key", style="dim")
    table.add_column("Value")
    table.add_row("Contacts loaded", str(len(state.contacts)))
    table.add_row("Tasks loaded", str(len(state.tasks)))
    table.add_row("Search", repr(state.debounced_search_term))
    table.add_row("Sort", f"{state.sort_by.value} {state.sort_direction.value}")
    table.add_row("Page", str(state.current_page))
    table.add_row("Page size", str(state.page_size))
    table.add_row("Failure rate", f"{getattr(settings, 'failure_rate', 0.0):.2f}")
    table.add_row("Latency scale", f"{getattr(settings, 'latency_scale', 1.0):.2f}")
    return table
