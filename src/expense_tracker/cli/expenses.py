#!/usr/bin/env python3
"""
Expense CLI - add, list, filter and total commands.

Each command builds an ExpenseStore for the records file chosen by the main
group and reports errors as a single message on stderr.
"""

from collections.abc import Iterable

import click

from ..core.errors import ParseError, RecordsNotFoundError, ValidationError
from ..core.models import Expense, TagMatch
from ..core.timestamps import format_timestamp
from ..storage.datastore import ExpenseStore

TABLE_HEADER = ("Time", "Category", "Amount", "Description", "Tags")


def _store(ctx: click.Context) -> ExpenseStore:
    return ExpenseStore(ctx.obj["records_path"])


def format_amount(amount: float) -> str:
    """Format an amount without trailing zeros or exponent notation."""
    return f"{amount:.15g}"


def _split_tags(values: Iterable[str]) -> list[str]:
    """Accept both repeated --tag options and comma-separated values."""
    tags = []
    for value in values:
        tags.extend(part.strip() for part in value.split(",") if part.strip())
    return tags


def format_expense_table(expenses: list[Expense]) -> str:
    """
    Render expenses as a fixed-width table.

    Args:
        expenses: Expenses to render, in display order

    Returns:
        Table text with a header row and one row per expense
    """
    row_format = "{:<30}{:<20}{:<10}{:<50}{}"
    lines = [row_format.format(*TABLE_HEADER)]

    for expense in expenses:
        lines.append(
            row_format.format(
                format_timestamp(expense.timestamp),
                expense.category,
                format_amount(expense.amount),
                expense.description or "",
                ", ".join(expense.tags),
            )
        )

    return "\n".join(lines)


def _load_or_empty(ctx: click.Context, loader) -> list[Expense]:
    """Run a store query, treating a missing records file as no records."""
    try:
        return loader()
    except RecordsNotFoundError as e:
        click.echo(str(e), err=True)
        return []
    except ParseError as e:
        raise click.ClickException(str(e))
    except OSError as e:
        raise click.ClickException(f"Could not read {ctx.obj['records_path']}: {e}")


@click.command()
@click.option("--amount", "-a", type=float, required=True, help="Expense amount (must be positive)")
@click.option("--category", "-c", required=True, help="Expense category")
@click.option("--description", "-d", help="Description")
@click.option("--tag", "-t", "tags", multiple=True, help="Tag (repeat or comma-separate for several)")
@click.pass_context
def add(ctx: click.Context, amount: float, category: str, description: str | None, tags: tuple[str, ...]) -> None:
    """
    Record a new expense.

    Examples:
      expense-tracker add -a 12.50 -c food -d "Lunch" -t work
      expense-tracker add -a 40 -c transport -t car,fuel
    """
    try:
        expense = Expense.create(
            amount=amount,
            category=category,
            description=description,
            tags=_split_tags(tags),
        )
    except ValidationError as e:
        raise click.ClickException(str(e))

    store = _store(ctx)
    try:
        store.append(expense)
    except OSError as e:
        raise click.ClickException(f"Could not write to {store.path}: {e}")

    if ctx.obj.get("verbose", False):
        click.echo(f"Added {expense.category} expense of {format_amount(expense.amount)} to {store.path}")


@click.command("list")
@click.pass_context
def list_expenses(ctx: click.Context) -> None:
    """List all recorded expenses in the order they were added."""
    store = _store(ctx)
    expenses = _load_or_empty(ctx, store.list)
    click.echo(format_expense_table(expenses))


@click.command("filter")
@click.option("--amount", "-a", type=float, help="Exact amount to match")
@click.option("--category", "-c", help="Exact category to match")
@click.option("--tag", "-t", "tags", multiple=True, help="Tag to match (repeat or comma-separate for several)")
@click.option(
    "--tag-match",
    type=click.Choice([mode.value for mode in TagMatch]),
    default=TagMatch.LAST.value,
    show_default=True,
    help="'last': only the final tag decides (compatible); 'any': any tag matches",
)
@click.pass_context
def filter_expenses(
    ctx: click.Context,
    amount: float | None,
    category: str | None,
    tags: tuple[str, ...],
    tag_match: str,
) -> None:
    """
    List expenses matching all of the given filters.

    At least one of --amount, --category or --tag is required. Categories and
    tags are stored in lowercase and compared exactly.

    Examples:
      expense-tracker filter -c food
      expense-tracker filter -t work --tag-match any -t travel
    """
    if amount is None and category is None and not tags:
        raise click.UsageError("Provide at least one of --amount, --category or --tag")

    store = _store(ctx)
    expenses = _load_or_empty(
        ctx,
        lambda: store.filter(
            category=category,
            tags=_split_tags(tags) if tags else None,
            amount=amount,
            tag_match=TagMatch(tag_match),
        ),
    )
    click.echo(format_expense_table(expenses))


@click.command()
@click.pass_context
def total(ctx: click.Context) -> None:
    """Print the sum of all recorded expenses."""
    store = _store(ctx)
    if not store.exists():
        click.echo(f"No records yet at {store.path}", err=True)

    try:
        amount = store.total()
    except ParseError as e:
        raise click.ClickException(str(e))
    except OSError as e:
        raise click.ClickException(f"Could not read {store.path}: {e}")

    click.echo(f"Total: {format_amount(amount)}")
