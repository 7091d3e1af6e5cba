# storage/errors.py

"""
Errors raised by the simulated backend.

Callers only ever see a human-readable message (str(exc)); the subclasses exist
so code can narrow `except` clauses and log the three kinds differently.
"""

from __future__ import annotations


class DataApiError(Exception):
    """Base class for every failure surfaced by the contact/task APIs."""


class TransientApiError(DataApiError):
    """Randomly injected fault standing in for a network error. Safe to retry."""

    def __init__(self, action: str) -> None:
        super().__init__(f"Failed to {action}. Please try again.")
        self.action = action


class NotFoundError(DataApiError):
    """An id did not resolve to an entity."""


class TaskValidationError(DataApiError, ValueError):
    """Malformed input: empty/too-long title, missing contact id, bad task id."""
