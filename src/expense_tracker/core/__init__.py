"""
Core Utilities Package

Shared data model, configuration and helpers used by the record store and CLI.

This package provides:
- The Expense value type and tag matching options
- Error types for missing files, malformed records and rejected input
- Configuration management for environment-specific settings
- Record timestamp formatting and records path resolution
"""

from .config import Config, Environment, get_config, reload_config
from .errors import ExpenseTrackerError, ParseError, RecordsNotFoundError, ValidationError
from .models import Expense, TagMatch, validate_amount, validate_category
from .paths import (
    DEFAULT_FILE_NAME,
    DEFAULT_PROJECT_DIR,
    construct_file_path,
    ensure_project_dir,
    validate_file_path,
)
from .timestamps import format_timestamp, parse_timestamp

__all__ = [
    # Configuration
    "Config",
    "DEFAULT_FILE_NAME",
    "DEFAULT_PROJECT_DIR",
    "Environment",
    # Data models
    "Expense",
    # Errors
    "ExpenseTrackerError",
    "ParseError",
    "RecordsNotFoundError",
    "TagMatch",
    "ValidationError",
    "construct_file_path",
    "ensure_project_dir",
    "format_timestamp",
    "get_config",
    "parse_timestamp",
    "reload_config",
    "validate_amount",
    "validate_category",
    "validate_file_path",
]
