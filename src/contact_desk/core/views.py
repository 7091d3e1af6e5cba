# src/contact_desk/core/views.py

"""
Contact list view derivation: filter -> sort -> paginate.

Pure functions, recomputed from scratch whenever an input changes.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from ..contacts.contact_models import Contact, ContactsFilter, SortDirection, SortField
from ..tasks.task_models import Task

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10


@dataclass(slots=True, frozen=True)
class Page(Generic[T]):
    items: list[T]
    page: int
    total_pages: int
    total_items: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def filter_contacts(contacts: Iterable[Contact], search: str | None) -> list[Contact]:
    """
    Case-insensitive substring match on name, email or company.

    A blank search term (empty or whitespace) disables filtering.
    """
    needle = (search or "").strip().lower()
    if not needle:
        return list(contacts)

    out: list[Contact] = []
    for c in contacts:
        if (
            needle in c.name.lower()
            or needle in c.email.lower()
            or (c.company is not None and needle in c.company.lower())
        ):
            out.append(c)
    return out


def _sort_key(field: SortField):
    if field is SortField.CREATED_AT:
        return lambda c: c.created_at
    if field is SortField.COMPANY:
        return lambda c: (c.company or "").lower()
    if field is SortField.EMAIL:
        return lambda c: c.email.lower()
    return lambda c: c.name.lower()


def sort_contacts(
    contacts: Iterable[Contact],
    sort_by: SortField | str | None,
    direction: SortDirection | str = SortDirection.ASC,
) -> list[Contact]:
    """
    Stable sort by the selected field.

    Strings compare case-insensitively, createdAt by timestamp. An unknown field
    leaves the input order untouched.
    """
    items = list(contacts)
    field = sort_by if isinstance(sort_by, SortField) else SortField.parse(sort_by)
    if field is None:
        return items

    descending = SortDirection(direction) is SortDirection.DESC
    # sorted() keeps equal keys in input order for reverse=True too.
    return sorted(items, key=_sort_key(field), reverse=descending)


def total_pages_for(total_items: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    return max(1, math.ceil(total_items / max(1, page_size)))


def clamp_page(page: int, total_pages: int) -> int:
    return min(max(1, int(page)), max(1, total_pages))


def paginate(items: Sequence[T], page: int, page_size: int = DEFAULT_PAGE_SIZE) -> Page[T]:
    """1-based pagination; an out-of-range page is clamped to the nearest valid one."""
    size = max(1, page_size)
    total = len(items)
    pages = total_pages_for(total, size)
    current = clamp_page(page, pages)
    start = (current - 1) * size
    return Page(
        items=list(items[start : start + size]),
        page=current,
        total_pages=pages,
        total_items=total,
    )


def derive_view(contacts: Iterable[Contact], flt: ContactsFilter) -> Page[Contact]:
    filtered = filter_contacts(contacts, flt.search)
    ordered = sort_contacts(filtered, flt.sort_by, flt.sort_direction)
    return paginate(ordered, flt.page, flt.page_size)


def contact_task_stats(tasks: Iterable[Task]) -> tuple[int, int]:
    """(total, completed)"""
    total = 0
    completed = 0
    for t in tasks:
        total += 1
        if t.completed:
            completed += 1
    return total, completed
