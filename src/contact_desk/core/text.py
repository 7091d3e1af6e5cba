# src/contact_desk/core/text.py

from __future__ import annotations

import re
from datetime import date, datetime


def format_date(value: date | datetime) -> str:
    """en-US short form, e.g. "Jan 15, 2024"."""
    return f"{value:%b} {value.day}, {value.year}"


def highlight_text(
    text: str,
    term: str | None,
    open_tag: str = "<mark>",
    close_tag: str = "</mark>",
) -> str:
    """Wrap every case-insensitive occurrence of term; the term is matched literally."""
    if not term:
        return text
    pattern = re.compile(re.escape(term), re.IGNORECASE)
    return pattern.sub(lambda m: f"{open_tag}{m.group(0)}{close_tag}", text)
