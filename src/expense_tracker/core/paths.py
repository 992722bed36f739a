#!/usr/bin/env python3
"""
Records Path Resolution

Turns user-supplied paths into concrete file locations and bootstraps the
project directory that holds the default records file.
"""

import logging
from pathlib import Path

from .errors import RecordsNotFoundError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_PROJECT_DIR = "~/.expense-tracker"
DEFAULT_FILE_NAME = "expense_db.psv"


def construct_file_path(path: str | Path) -> Path:
    """
    Build a Path from user input, expanding a leading "~/".

    Args:
        path: Path text such as "records.psv", "./records.psv" or "~/records.psv"

    Returns:
        Path with the home directory substituted where requested
    """
    text = str(path)
    if text == "~" or text.startswith("~/"):
        return Path(text).expanduser()
    return Path(text)


def validate_file_path(path: Path | None) -> None:
    """
    Check that an explicitly given records path points at an existing file.

    None means "use the default location" and is always accepted.

    Raises:
        RecordsNotFoundError: If the path does not exist
        ValidationError: If the path exists but is not a regular file
    """
    if path is None:
        return
    if not path.exists():
        raise RecordsNotFoundError(path, f"File not found! {path}")
    if not path.is_file():
        raise ValidationError(f"Not a file: {path}")


def ensure_project_dir(project_dir: Path) -> Path:
    """Create the project directory (and parents) if it does not exist yet."""
    if not project_dir.exists():
        logger.info(f"Creating project directory {project_dir}")
        project_dir.mkdir(parents=True, exist_ok=True)
    return project_dir
