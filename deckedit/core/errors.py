"""Exceptions raised by deck edits.

None of these are caught inside the package: any failure aborts the run.
"""

from __future__ import annotations


class DeckEditError(Exception):
    """Base class for edit failures."""


class SlideIndexError(DeckEditError, IndexError):
    """Raised when a slide index is not usable for the requested operation."""

    def __init__(self, argument: str, value: int, count: int, message: str | None = None):
        if message is None:
            message = f"{argument}={value} out of range for {count} slide(s)"
        super().__init__(message)
        self.argument = argument
        self.value = value
        self.count = count


class EmptyPresentationError(DeckEditError):
    """Raised when an operation needs slides but the deck has none."""
