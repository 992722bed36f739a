#!/usr/bin/env python3
"""
E2E Tests for the Expense Tracker CLI

Runs the CLI in a subprocess against a temporary project directory, the way
it is used from a shell.
"""

import os
import subprocess
import sys
import tempfile
from pathlib import Path

import pytest


def run_cli(project_dir: Path, *args: str) -> subprocess.CompletedProcess:
    """Run the CLI module with an isolated environment."""
    env = os.environ.copy()
    env["EXPENSES_ENV"] = "test"
    env["EXPENSES_PROJECT_DIR"] = str(project_dir)
    env.pop("EXPENSES_FILE", None)

    return subprocess.run(
        [sys.executable, "-m", "expense_tracker.cli.main", *args],
        capture_output=True,
        text=True,
        timeout=30,
        env=env,
    )


@pytest.mark.e2e
class TestExpenseCLI:
    """E2E tests for expense-tracker commands."""

    def setup_method(self):
        """Set up a temporary project directory."""
        self.temp_dir = Path(tempfile.mkdtemp())
        self.project_dir = self.temp_dir / "project"

    def teardown_method(self):
        """Clean up temporary test environment."""
        import shutil

        if self.temp_dir.exists():
            shutil.rmtree(self.temp_dir)

    def test_add_then_total(self):
        """Test records added in one process are summed in another."""
        assert run_cli(self.project_dir, "add", "-a", "10", "-c", "food").returncode == 0
        assert run_cli(self.project_dir, "add", "-a", "20.5", "-c", "food").returncode == 0

        result = run_cli(self.project_dir, "total")

        assert result.returncode == 0
        assert "Total: 30.5" in result.stdout

    def test_list_fresh_project(self):
        """Test list on an empty project prints the header and a notice on stderr."""
        result = run_cli(self.project_dir, "list")

        assert result.returncode == 0
        assert result.stdout.startswith("Time")
        assert "No records yet" in result.stderr

    def test_invalid_amount_exits_non_zero(self):
        """Test a rejected amount exits non-zero with a message on stderr."""
        result = run_cli(self.project_dir, "add", "--amount=-3", "-c", "food")

        assert result.returncode != 0
        assert "Amount must be positive" in result.stderr
        assert result.stdout == ""

    def test_malformed_records_exit_non_zero(self):
        """Test a corrupt records file aborts the command with no table output."""
        self.project_dir.mkdir(parents=True)
        (self.project_dir / "expense_db.psv").write_text("only|three|fields\n", encoding="utf-8")

        result = run_cli(self.project_dir, "list")

        assert result.returncode == 1
        assert "Malformed record" in result.stderr
        assert result.stdout == ""
