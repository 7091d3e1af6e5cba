# tests/test_views.py

from __future__ import annotations

import random
from datetime import datetime, timedelta

from contact_desk.contacts.contact_models import Contact, ContactsFilter, SortDirection, SortField
from contact_desk.core.views import (
    contact_task_stats,
    derive_view,
    filter_contacts,
    paginate,
    sort_contacts,
)
from contact_desk.storage.seed import generate_contacts, generate_tasks


def _contact(cid: str, name: str, email: str = "", company: str | None = None, day: int = 0) -> Contact:
    return Contact(
        id=cid,
        name=name,
        email=email or f"{cid}@example.com",
        phone="+1-200-100-1000",
        company=company,
        created_at=datetime(2024, 1, 1) + timedelta(days=day),
    )


def test_filter_matches_name_email_company_case_insensitively() -> None:
    contacts = generate_contacts(300, random.Random(4))
    term = "TeCh"

    kept = filter_contacts(contacts, term)
    kept_ids = {c.id for c in kept}

    def hit(c: Contact) -> bool:
        needle = term.lower()
        return needle in c.name.lower() or needle in c.email.lower() or needle in (c.company or "").lower()

    assert kept
    assert all(hit(c) for c in kept)
    assert not any(hit(c) for c in contacts if c.id not in kept_ids)


def test_filter_blank_term_keeps_everything() -> None:
    contacts = [_contact("a", "Ann"), _contact("b", "Bob")]
    assert filter_contacts(contacts, "") == contacts
    assert filter_contacts(contacts, "   ") == contacts
    assert filter_contacts(contacts, None) == contacts


def test_filter_trims_term_and_ignores_missing_company() -> None:
    contacts = [_contact("a", "Ann", company=None), _contact("b", "Bob", company="Acme")]
    assert [c.id for c in filter_contacts(contacts, "  acme ")] == ["b"]
    assert filter_contacts(contacts, "none") == []


def test_sort_strings_case_insensitive() -> None:
    contacts = [_contact("1", "bob"), _contact("2", "Alice"), _contact("3", "carl")]
    assert [c.name for c in sort_contacts(contacts, SortField.NAME)] == ["Alice", "bob", "carl"]
    assert [c.name for c in sort_contacts(contacts, "name", "desc")] == ["carl", "bob", "Alice"]


def test_sort_company_treats_missing_as_empty() -> None:
    contacts = [_contact("1", "x", company="Beta"), _contact("2", "y"), _contact("3", "z", company="alpha")]
    assert [c.id for c in sort_contacts(contacts, SortField.COMPANY)] == ["2", "3", "1"]


def test_sort_created_at_by_timestamp() -> None:
    contacts = [_contact("1", "a", day=5), _contact("2", "b", day=1), _contact("3", "c", day=3)]
    assert [c.id for c in sort_contacts(contacts, SortField.CREATED_AT)] == ["2", "3", "1"]
    assert [c.id for c in sort_contacts(contacts, "createdAt", SortDirection.DESC)] == ["1", "3", "2"]


def test_reversing_direction_reverses_unique_keys() -> None:
    contacts = generate_contacts(120, random.Random(6))  # emails are unique
    asc = sort_contacts(contacts, SortField.EMAIL, SortDirection.ASC)
    desc = sort_contacts(contacts, SortField.EMAIL, SortDirection.DESC)
    assert desc == list(reversed(asc))


def test_sort_is_stable_for_equal_keys_in_both_directions() -> None:
    contacts = [_contact("first", "Sam"), _contact("other", "Zed"), _contact("second", "sam")]
    asc = [c.id for c in sort_contacts(contacts, SortField.NAME, SortDirection.ASC)]
    desc = [c.id for c in sort_contacts(contacts, SortField.NAME, SortDirection.DESC)]
    assert asc == ["first", "second", "other"]
    assert desc == ["other", "first", "second"]


def test_unknown_sort_field_preserves_order() -> None:
    contacts = [_contact("2", "b"), _contact("1", "a")]
    assert sort_contacts(contacts, "phone") == contacts
    assert sort_contacts(contacts, None) == contacts


def test_paginate_and_clamp() -> None:
    items = list(range(25))

    p3 = paginate(items, 3, 10)
    assert p3.items == [20, 21, 22, 23, 24]
    assert (p3.page, p3.total_pages, p3.total_items) == (3, 3, 25)
    assert p3.has_previous and not p3.has_next

    assert paginate(items, 9, 10).page == 3
    assert paginate(items, 0, 10).page == 1

    empty = paginate([], 4, 10)
    assert (empty.items, empty.page, empty.total_pages) == ([], 1, 1)


def test_derive_view_filters_sorts_and_pages() -> None:
    contacts = [_contact(str(i), f"Name {i:02d}", company="Acme" if i % 2 else "Other") for i in range(30)]
    flt = ContactsFilter(
        search="acme", sort_by=SortField.NAME, sort_direction=SortDirection.DESC, page=2, page_size=10
    )

    page = derive_view(contacts, flt)

    assert page.total_items == 15
    assert page.total_pages == 2
    assert [c.name for c in page.items] == ["Name 09", "Name 07", "Name 05", "Name 03", "Name 01"]


def test_contact_task_stats() -> None:
    contacts = generate_contacts(10, random.Random(1))
    tasks = generate_tasks(contacts, random.Random(1))
    total, completed = contact_task_stats(tasks)
    assert total == len(tasks)
    assert completed == sum(1 for t in tasks if t.completed)
