#!/usr/bin/env python3
"""
Expense Store

Load, append and query expense records kept in a single PSV file.

Every read is a full linear scan of the file in append order; there are no
indexes. Writes only ever append, so file order is chronological order.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.errors import ParseError, RecordsNotFoundError
from ..core.models import Expense, TagMatch
from . import codec

logger = logging.getLogger(__name__)


class ExpenseStore:
    """
    DataStore for the expense records file.

    The records path is fixed at construction; callers decide it (usually
    from configuration) and pass it in.
    """

    def __init__(self, path: Path):
        """
        Initialize expense store.

        Args:
            path: Records file (need not exist yet)
        """
        self.path = Path(path)

    def exists(self) -> bool:
        """Check if the records file exists."""
        return self.path.is_file()

    def load(self) -> list[Expense]:
        """
        Load every record from the file.

        Returns:
            Expenses in file order

        Raises:
            RecordsNotFoundError: If the records file doesn't exist
            ParseError: On the first malformed line (including bytes that are
                not valid UTF-8); nothing is returned
        """
        try:
            content = self.path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise RecordsNotFoundError(self.path) from e
        except UnicodeDecodeError as e:
            raise ParseError(_line_around(e.object, e.start), f"not valid UTF-8 ({e.reason})") from e

        expenses = [codec.decode(line) for line in content.split("\n") if line.strip()]
        logger.debug(f"Loaded {len(expenses)} expenses from {self.path}")
        return expenses

    def append(self, expense: Expense) -> None:
        """
        Append one expense to the records file, creating it if needed.

        Args:
            expense: Expense to persist
        """
        record = codec.encode(expense)
        self.path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.path, "a", encoding="utf-8") as f:
            f.write(record)
            f.flush()

        logger.info(f"Recorded {expense.category} expense of {expense.amount} in {self.path}")

    def list(self) -> list[Expense]:
        """Load all expenses, in file order."""
        return self.load()

    def total(self) -> float:
        """
        Sum the amounts of all stored expenses.

        Returns:
            Sum of amounts; 0.0 when the file is empty or absent
        """
        try:
            expenses = self.load()
        except RecordsNotFoundError:
            logger.debug(f"No records file at {self.path}, total is 0")
            return 0.0

        total = 0.0
        for expense in expenses:
            total += expense.amount
        return total

    def filter(
        self,
        category: str | None = None,
        tags: list[str] | tuple[str, ...] | None = None,
        amount: float | None = None,
        tag_match: TagMatch = TagMatch.LAST,
    ) -> list[Expense]:
        """
        Load expenses and keep those matching every supplied filter.

        An omitted filter matches everything. Matching is exact:
        - category is compared as-is with the stored (lowercase) category
        - amount uses float equality, so values that went through rounding
          elsewhere may not compare equal
        - tags follow tag_match (see TagMatch); the default LAST only looks
          at the final query tag

        Args:
            category: Category to match
            tags: Tags to match
            amount: Amount to match
            tag_match: Tag matching semantics

        Returns:
            Matching expenses, in file order
        """
        matches = []
        for expense in self.load():
            if amount is not None and expense.amount != amount:
                continue
            if category is not None and expense.category != category:
                continue
            if tags is not None and not expense.matches_tags(tags, tag_match):
                continue
            matches.append(expense)

        logger.debug(f"Filter matched {len(matches)} expenses in {self.path}")
        return matches

    def item_count(self) -> int | None:
        """Get count of non-empty record lines, without decoding them."""
        if not self.exists():
            return None

        with open(self.path, "rb") as f:
            return sum(1 for line in f if line.strip())

    def summary_text(self) -> str:
        """Get human-readable summary."""
        count = self.item_count()
        if count is None:
            return f"No records yet at {self.path}"
        return f"Expense records: {count} entries in {self.path}"


def _line_around(data: bytes, offset: int) -> str:
    """Return the line of data containing offset, with undecodable bytes replaced."""
    start = data.rfind(b"\n", 0, offset) + 1
    end = data.find(b"\n", offset)
    if end == -1:
        end = len(data)
    return data[start:end].decode("utf-8", errors="replace")
