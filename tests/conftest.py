"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from datetime import datetime, timezone
from pathlib import Path

import pytest

import expense_tracker.core.config as config_module
from expense_tracker.core.models import Expense

MOCK_EXPENSES_PATH = Path(__file__).parent / "fixtures" / "resources" / "mock_expenses.psv"


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def records_file(temp_dir) -> Path:
    """Path to a records file that does not exist yet."""
    return temp_dir / "expenses.psv"


@pytest.fixture
def mock_expenses_path() -> Path:
    """Checked-in records file with amounts 100, 200 and 744."""
    return MOCK_EXPENSES_PATH


@pytest.fixture
def sample_expense() -> Expense:
    """Sample expense with every field populated."""
    return Expense.create(
        amount=12.5,
        category="Food",
        description="Lunch with team",
        tags=["Work", "urgent"],
        timestamp=datetime(2024, 8, 15, 9, 30, 12, 345000, tzinfo=timezone.utc),
    )


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables and reset cached configuration."""
    # Ensure tests never touch the real ~/.expense-tracker
    monkeypatch.setenv("EXPENSES_ENV", "test")
    monkeypatch.setenv("EXPENSES_PROJECT_DIR", str(tmp_path / "project"))
    monkeypatch.delenv("EXPENSES_FILE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)

    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "e2e: End-to-end tests that run the CLI in a subprocess")
    config.addinivalue_line("markers", "codec: Tests for the PSV record format")
