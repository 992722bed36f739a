#!/usr/bin/env python3
"""
Configuration Management for the Expense Tracker

Handles environment-based configuration with sensible defaults and validation.
Supports multiple environments (development, test, production); the records
location is resolved here once and then passed explicitly to the store.
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from dotenv import load_dotenv

from .paths import DEFAULT_FILE_NAME, DEFAULT_PROJECT_DIR, construct_file_path

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class Config:
    """
    Main configuration class for the expense tracker.

    Loads configuration from environment variables with defaults and
    validation for each environment type.
    """

    environment: Environment

    # Where records live
    project_dir: Path
    records_file: Path | None = None

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("EXPENSES_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_expense_tracker"
            project_dir = Path(os.getenv("EXPENSES_PROJECT_DIR", str(default_test_dir)))
        else:
            project_dir = construct_file_path(os.getenv("EXPENSES_PROJECT_DIR", DEFAULT_PROJECT_DIR))

        records_env = os.getenv("EXPENSES_FILE")
        records_file = construct_file_path(records_env) if records_env else None

        default_level = "INFO" if env == Environment.DEVELOPMENT else "WARNING"

        return cls(
            environment=env,
            project_dir=project_dir,
            records_file=records_file,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", default_level).upper(),
        )

    @property
    def records_path(self) -> Path:
        """Records file to use when none is given on the command line."""
        return self.records_file or self.project_dir / DEFAULT_FILE_NAME

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if self.project_dir.exists() and not self.project_dir.is_dir():
            errors.append(f"project_dir is not a directory: {self.project_dir}")

        if self.records_file is not None and self.records_file.is_dir():
            errors.append(f"records_file is a directory: {self.records_file}")

        if self.log_level not in logging.getLevelNamesMapping():
            errors.append(f"Unknown log level: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)
        if self.debug:
            level = logging.DEBUG

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        # Validate configuration
        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        # Setup logging
        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()

