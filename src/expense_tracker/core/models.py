#!/usr/bin/env python3
"""
Core Data Models for the Expense Tracker

The Expense value type and the options that control how expenses are queried.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from numbers import Real

from .errors import ValidationError
from .timestamps import now_utc, truncate_to_millis

# Characters the record format cannot carry inside a field
FIELD_DELIMITER = "|"
TAG_DELIMITER = ","


class TagMatch(Enum):
    """
    How a tag filter is evaluated against an expense's tags.

    LAST reproduces the behavior of earlier releases, where only the final
    query tag decided the match. ANY matches when any query tag is present.
    """

    LAST = "last"
    ANY = "any"


@dataclass(frozen=True)
class Expense:
    """
    One recorded spending event.

    Instances are immutable. Build new entries with Expense.create(), which
    validates the input and stamps the current time; the codec builds
    instances directly when loading stored records.
    """

    amount: float
    category: str
    timestamp: datetime
    description: str | None = None
    tags: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def create(
        cls,
        amount: float,
        category: str,
        description: str | None = None,
        tags: list[str] | tuple[str, ...] | None = None,
        timestamp: datetime | None = None,
    ) -> "Expense":
        """
        Validate input and build a new expense.

        Category and tags are normalized to lowercase here, the same way they
        are written to disk.

        Args:
            amount: Positive, finite amount
            category: Non-empty category name
            description: Optional free text
            tags: Optional list of tags
            timestamp: Creation time; naive values are taken as UTC
                (default: now, UTC, millisecond precision)

        Returns:
            New Expense

        Raises:
            ValidationError: If any field is invalid
        """
        validate_amount(amount)
        validate_category(category)
        if description is not None:
            _validate_text("description", description)

        normalized_tags = tuple(tag.strip().lower() for tag in (tags or ()) if tag.strip())
        for tag in normalized_tags:
            _validate_text("tag", tag)
            if TAG_DELIMITER in tag:
                raise ValidationError(f"Tag may not contain '{TAG_DELIMITER}': {tag!r}")

        if timestamp is not None and timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)

        return cls(
            amount=float(amount),
            category=category.strip().lower(),
            description=description or None,
            tags=normalized_tags,
            timestamp=truncate_to_millis(timestamp) if timestamp else now_utc(),
        )

    @property
    def has_tags(self) -> bool:
        """Check whether the expense carries at least one tag."""
        return len(self.tags) > 0

    def matches_tags(self, query_tags: list[str] | tuple[str, ...], mode: TagMatch = TagMatch.LAST) -> bool:
        """
        Evaluate a tag filter against this expense.

        Args:
            query_tags: Tags supplied by the caller
            mode: Matching semantics (see TagMatch)

        Returns:
            True if the expense satisfies the tag filter
        """
        if not self.has_tags or not query_tags:
            return False

        if mode == TagMatch.ANY:
            return any(tag in self.tags for tag in query_tags)

        # Each iteration overwrites the previous result: only the last tag counts.
        matched = False
        for tag in query_tags:
            matched = tag in self.tags
        return matched


def validate_amount(amount: float) -> None:
    """Reject amounts that are not positive, finite numbers."""
    if isinstance(amount, bool) or not isinstance(amount, Real):
        raise ValidationError(f"Amount must be a number, got {amount!r}")
    if not math.isfinite(amount):
        raise ValidationError(f"Amount must be finite, got {amount!r}")
    if amount <= 0:
        raise ValidationError(f"Amount must be positive, got {amount!r}")


def validate_category(category: str) -> None:
    """Reject empty categories and ones the record format cannot store."""
    if not category or not category.strip():
        raise ValidationError("Category must not be empty")
    _validate_text("category", category)


def _validate_text(name: str, value: str) -> None:
    if FIELD_DELIMITER in value or "\n" in value or "\r" in value:
        raise ValidationError(f"{name.capitalize()} may not contain '{FIELD_DELIMITER}' or line breaks: {value!r}")
