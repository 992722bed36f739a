"""
Expense Tracker - Personal Expense Recording

A small command-line tool that appends expenses to a pipe-separated text file
and lists, filters and totals them back out.

Packages:
- core: Expense model, errors, configuration, timestamps, paths
- storage: PSV record codec and the expense store
- cli: Command-line interface

Example Usage:
    from expense_tracker import Expense, ExpenseStore

    store = ExpenseStore(Path("expenses.psv"))
    store.append(Expense.create(12.5, "food", tags=["work"]))
    store.total()
"""

__version__ = "0.3.0"
__author__ = "Expense Tracker Contributors"

from .core.config import Environment, get_config
from .core.errors import ExpenseTrackerError, ParseError, RecordsNotFoundError, ValidationError
from .core.models import Expense, TagMatch
from .storage.datastore import ExpenseStore

__all__ = [
    # Configuration
    "Environment",
    # Models
    "Expense",
    # Errors
    "ExpenseTrackerError",
    # Storage
    "ExpenseStore",
    "ParseError",
    "RecordsNotFoundError",
    "TagMatch",
    "ValidationError",
    "get_config",
]
