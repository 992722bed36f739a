#!/usr/bin/env python3
"""
Error Types for the Expense Tracker

All failures raised by the record store and its collaborators derive from
ExpenseTrackerError so the CLI can report them with a single message.
"""

from pathlib import Path


class ExpenseTrackerError(Exception):
    """Base class for all expense tracker errors."""


class RecordsNotFoundError(ExpenseTrackerError, FileNotFoundError):
    """
    Raised when the records file does not exist.

    This is an expected condition on a fresh install: callers usually report
    "no records yet" and render an empty result instead of aborting.
    """

    def __init__(self, path: Path | str, message: str | None = None):
        self.path = Path(path)
        super().__init__(message or f"No records yet at {self.path}")


class ParseError(ExpenseTrackerError, ValueError):
    """
    Raised when a stored line cannot be decoded into an Expense.

    Attributes:
        line: The offending line, as read from the file
        reason: Short description of what was wrong with it

    The underlying exception, when there is one, is chained with
    "raise ... from" and available as __cause__.
    """

    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"Malformed record {line!r}: {reason}")


class ValidationError(ExpenseTrackerError, ValueError):
    """Raised when user input is rejected before any file I/O happens."""
