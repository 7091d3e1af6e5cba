# contacts/contact_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class SortField(StrEnum):
    """Fields the contact list can be ordered by (values match the wire names)."""

    NAME = "name"
    EMAIL = "email"
    COMPANY = "company"
    CREATED_AT = "createdAt"

    @classmethod
    def parse(cls, raw: str | None) -> SortField | None:
        if not raw:
            return None
        try:
            return cls(raw)
        except ValueError:
            pass
        # Accept snake_case / any casing from the console.
        folded = raw.strip().lower().replace("_", "")
        for member in cls:
            if member.value.lower() == folded:
                return member
        return None


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> SortDirection:
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


@dataclass(slots=True)
class Contact:
    id: str
    name: str
    email: str
    phone: str
    created_at: datetime
    company: str | None = None


@dataclass(slots=True)
class ContactsFilter:
    """Everything needed to derive one page of the contact list."""

    search: str = ""
    sort_by: SortField | str = SortField.NAME
    sort_direction: SortDirection = SortDirection.ASC
    page: int = 1
    page_size: int = 10
