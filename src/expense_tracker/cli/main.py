#!/usr/bin/env python3
"""
Main CLI Entry Point for the Expense Tracker

Provides the command-line interface for recording and querying expenses.
"""

import logging
import os
from dataclasses import replace
from pathlib import Path

import click

from ..core.config import get_config
from ..core.errors import ExpenseTrackerError
from ..core.paths import construct_file_path, ensure_project_dir, validate_file_path
from ..storage.datastore import ExpenseStore


@click.group()
@click.option(
    "--path",
    "-p",
    "records_path",
    help="Records file to use (default: expense_db.psv in the project directory)",
)
@click.option("--project-dir", help="Directory holding the default records file")
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(
    ctx: click.Context,
    records_path: str | None,
    project_dir: str | None,
    config_env: str | None,
    verbose: bool,
    debug: bool,
) -> None:
    """
    Expense Tracker - record, list, filter and total your expenses.

    Expenses are appended to a pipe-separated text file, one per line.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)

    # Set environment if specified
    if config_env:
        os.environ["EXPENSES_ENV"] = config_env

    # Configure debug logging if requested
    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("expense_tracker").setLevel(logging.DEBUG)

    try:
        config = get_config()
    except ValueError as e:
        raise click.ClickException(str(e))

    if project_dir:
        config = replace(config, project_dir=construct_file_path(project_dir))

    explicit_path = construct_file_path(records_path) if records_path else None

    try:
        validate_file_path(explicit_path)
        ensure_project_dir(config.project_dir)
        path = explicit_path or config.records_path
    except (ExpenseTrackerError, OSError) as e:
        raise click.ClickException(str(e))

    # Store global options
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config
    ctx.obj["records_path"] = path

    if verbose:
        click.echo(f"Environment: {config.environment.value}", err=True)
        click.echo(f"Records file: {path}", err=True)

    if debug:
        click.echo("Debug logging enabled", err=True)


@main.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Show version information."""
    from expense_tracker import __author__, __version__

    click.echo(f"Expense Tracker v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]
    records_path: Path = ctx.obj["records_path"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Project Directory: {config_obj.project_dir}")
    click.echo(f"  Records File: {records_path}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")

    try:
        summary = ExpenseStore(records_path).summary_text()
    except OSError as e:
        raise click.ClickException(f"Could not read {records_path}: {e}")
    click.echo(f"  {summary}")


# Import expense commands
from .expenses import add, filter_expenses, list_expenses, total  # noqa: E402

main.add_command(add)
main.add_command(list_expenses)
main.add_command(filter_expenses)
main.add_command(total)


if __name__ == "__main__":
    main()
