#!/usr/bin/env python3
"""
Integration tests for CLI Main Entry Point

Tests end-to-end CLI command execution with real command invocation.
Focuses on meaningful workflows, not trivial code coverage.
"""

import pytest
from click.testing import CliRunner

from expense_tracker.cli.main import main
from expense_tracker.storage.datastore import ExpenseStore


@pytest.mark.integration
class TestCLIMainIntegration:
    """Test main CLI entry point with real command execution."""

    def setup_method(self):
        """Set up test environment."""
        self.runner = CliRunner()

    def test_help_command_lists_all_subcommands(self):
        """Test expense-tracker --help shows all registered subcommands."""
        result = self.runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Expense Tracker" in result.output

        for command in ["add", "list", "filter", "total", "version", "config"]:
            assert command in result.output

    def test_version_command_shows_version_info(self):
        """Test version displays version and author."""
        result = self.runner.invoke(main, ["version"])

        assert result.exit_code == 0
        assert "Expense Tracker v" in result.output
        assert "Author:" in result.output

    def test_config_command_shows_configuration(self, tmp_path):
        """Test config displays current configuration."""
        result = self.runner.invoke(main, ["config"])

        assert result.exit_code == 0
        assert "Current Configuration:" in result.output
        assert "Environment: test" in result.output
        assert f"Records File: {tmp_path / 'project' / 'expense_db.psv'}" in result.output
        assert "Log Level:" in result.output

    def test_project_dir_option_bootstraps_directory(self, temp_dir):
        """Test --project-dir creates the directory and uses its default file."""
        project_dir = temp_dir / "nested" / "tracker"
        result = self.runner.invoke(main, ["--project-dir", str(project_dir), "config"])

        assert result.exit_code == 0
        assert project_dir.is_dir()
        assert f"Project Directory: {project_dir}" in result.output
        assert f"Records File: {project_dir / 'expense_db.psv'}" in result.output

    def test_config_command_summarizes_records(self, tmp_path):
        """Test config reports the record count of the chosen records file."""
        records = tmp_path / "project" / "expense_db.psv"

        result = self.runner.invoke(main, ["config"])
        assert result.exit_code == 0
        assert f"No records yet at {records}" in result.output

        self.runner.invoke(main, ["add", "-a", "5", "-c", "food"])
        self.runner.invoke(main, ["add", "-a", "7", "-c", "food"])

        result = self.runner.invoke(main, ["config"])
        assert result.exit_code == 0
        assert f"Expense records: 2 entries in {records}" in result.output

    def test_records_file_env_used_without_path(self, monkeypatch, temp_dir):
        """Test EXPENSES_FILE picks the records file when --path is not given."""
        records = temp_dir / "elsewhere.psv"
        monkeypatch.setenv("EXPENSES_FILE", str(records))

        result = self.runner.invoke(main, ["config"])

        assert result.exit_code == 0
        assert f"Records File: {records}" in result.output

    def test_missing_path_is_rejected(self, temp_dir):
        """Test --path pointing at a missing file fails with one message."""
        result = self.runner.invoke(main, ["-p", str(temp_dir / "mock_expenses.psv"), "list"])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_directory_path_is_rejected(self, temp_dir):
        """Test --path pointing at a directory fails."""
        result = self.runner.invoke(main, ["-p", str(temp_dir), "list"])

        assert result.exit_code == 1
        assert "Not a file" in result.output

    def test_invalid_command_shows_error(self):
        """Test that invalid command shows helpful error."""
        result = self.runner.invoke(main, ["invalid-command"])

        assert result.exit_code != 0
        assert "Error" in result.output or "No such" in result.output

    def test_verbose_flag_reports_records_file(self):
        """Test --verbose prints environment and records file."""
        result = self.runner.invoke(main, ["--verbose", "total"])

        assert result.exit_code == 0
        assert "Environment:" in result.output
        assert "Records file:" in result.output

    def test_config_env_override_changes_environment(self):
        """Test --config-env flag overrides environment."""
        result = self.runner.invoke(main, ["--config-env", "production", "config"])

        assert result.exit_code == 0
        assert "Environment: production" in result.output

    def test_add_list_filter_total_workflow(self, tmp_path):
        """Test a full session against the default records file."""
        for args in (
            ["add", "-a", "100", "-c", "Food", "-t", "home"],
            ["add", "-a", "200", "-c", "travel", "-d", "Train", "-t", "work,urgent"],
            ["add", "-a", "744", "-c", "rent"],
        ):
            result = self.runner.invoke(main, args)
            assert result.exit_code == 0, result.output

        records = tmp_path / "project" / "expense_db.psv"
        assert [e.amount for e in ExpenseStore(records).load()] == [100.0, 200.0, 744.0]

        result = self.runner.invoke(main, ["total"])
        assert "Total: 1044" in result.output

        result = self.runner.invoke(main, ["filter", "-c", "food"])
        assert len(result.output.splitlines()) == 2

        result = self.runner.invoke(main, ["filter", "-t", "urgent"])
        assert "Train" in result.output

        result = self.runner.invoke(main, ["list"])
        assert len(result.output.splitlines()) == 4
