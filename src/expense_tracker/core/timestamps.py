#!/usr/bin/env python3
"""
Record Timestamp Handling

Every stored record starts with a timestamp in one fixed pattern:

    YYYY-MM-DD HH:MM:SS.mmm±HHMM    e.g. 2024-08-15 09:30:12.345+0000

Python's strftime has no millisecond directive, so formatting assembles the
pattern from parts. strptime alone is looser than the pattern (%f takes one to
six digits, %z takes "Z" and "+00:00"), so parsing checks the shape first.
"""

import re
from datetime import datetime, timezone

RECORD_TIME_FORMAT = "%Y-%m-%d %H:%M:%S.%f%z"
RECORD_TIME_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3}[+-]\d{4}", re.ASCII)


def now_utc() -> datetime:
    """Current UTC time, truncated to millisecond precision."""
    return truncate_to_millis(datetime.now(timezone.utc))


def truncate_to_millis(moment: datetime) -> datetime:
    """Drop sub-millisecond digits so a value survives a format/parse round trip."""
    return moment.replace(microsecond=(moment.microsecond // 1000) * 1000)


def format_timestamp(moment: datetime) -> str:
    """
    Format a datetime with the fixed record pattern.

    Naive datetimes are treated as UTC.

    Args:
        moment: Point in time to format

    Returns:
        Timestamp string like "2024-08-15 09:30:12.345+0000"
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)

    millis = moment.microsecond // 1000
    return f"{moment:%Y-%m-%d %H:%M:%S}.{millis:03d}{moment:%z}"


def parse_timestamp(text: str) -> datetime:
    """
    Parse a timestamp written by format_timestamp.

    Args:
        text: Timestamp string

    Returns:
        Timezone-aware datetime

    Raises:
        ValueError: If text does not match the record pattern
    """
    text = text.strip()
    if not RECORD_TIME_PATTERN.fullmatch(text):
        raise ValueError(f"timestamp {text!r} does not match YYYY-MM-DD HH:MM:SS.mmm±HHMM")
    return datetime.strptime(text, RECORD_TIME_FORMAT)
