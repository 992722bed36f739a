#!/usr/bin/env python3
"""
Record Codec

Converts one Expense to a single line of pipe-separated text and back:

    timestamp|category|amount|"description"|"tag1,tag2"

Format constraints:
- Fields are not escaped. A "|" anywhere, or a "," inside a tag, breaks the
  round trip; Expense.create() rejects such input before it reaches the file.
- The description and tag fields are decoded by dropping exactly one leading
  and one trailing character, whatever they are.

Changing either rule means a new FORMAT_VERSION.
"""

from ..core.errors import ParseError
from ..core.models import FIELD_DELIMITER, TAG_DELIMITER, Expense
from ..core.timestamps import format_timestamp, parse_timestamp

FORMAT_VERSION = 1
FIELD_COUNT = 5
QUOTE = '"'


def encode(expense: Expense) -> str:
    """
    Serialize an expense to one newline-terminated record line.

    Args:
        expense: Expense to serialize

    Returns:
        Record line ending in a single "\\n"
    """
    fields = [
        format_timestamp(expense.timestamp),
        expense.category.lower(),
        repr(float(expense.amount)),
        f"{QUOTE}{expense.description or ''}{QUOTE}",
        f"{QUOTE}{TAG_DELIMITER.join(expense.tags).lower()}{QUOTE}",
    ]
    return FIELD_DELIMITER.join(fields) + "\n"


def decode(line: str) -> Expense:
    """
    Parse one record line back into an Expense.

    Args:
        line: Record line, with or without its trailing newline

    Returns:
        Decoded Expense

    Raises:
        ParseError: On wrong field count, a bad amount or a bad timestamp
    """
    record = line.strip()
    fields = record.split(FIELD_DELIMITER)
    if len(fields) != FIELD_COUNT:
        raise ParseError(line, f"expected {FIELD_COUNT} fields, found {len(fields)}")

    timestamp_field, category, amount_field, description_field, tags_field = fields

    # float() also takes digit separators, which encode never writes
    if "_" in amount_field:
        raise ParseError(line, f"invalid amount {amount_field!r}")
    try:
        amount = float(amount_field.strip())
    except ValueError as e:
        raise ParseError(line, f"invalid amount {amount_field!r}") from e

    try:
        timestamp = parse_timestamp(timestamp_field)
    except ValueError as e:
        raise ParseError(line, f"invalid timestamp {timestamp_field!r}") from e

    description = _unquote(line, "description", description_field)
    tags_text = _unquote(line, "tags", tags_field).strip()
    tags = tuple(tags_text.split(TAG_DELIMITER)) if tags_text else ()

    return Expense(
        amount=amount,
        category=category,
        timestamp=timestamp,
        description=description or None,
        tags=tags,
    )


def _unquote(line: str, name: str, value: str) -> str:
    # Drops one character from each end without checking what they are
    if len(value) < 2:
        raise ParseError(line, f"{name} field {value!r} is not quoted")
    return value[1:-1]
