"""CLI helpers for date and month options."""

from datetime import date

import click

from finsight.utils.date_parser import parse_date, parse_month


def resolve_as_of(ctx, as_of: str | None) -> date:
    """Resolve the --as-of option, defaulting to today."""
    if not as_of:
        return date.today()
    try:
        return parse_date(as_of)
    except ValueError as e:
        click.echo(f"Error: Invalid --as-of date: {e}", err=True)
        ctx.exit(1)


def resolve_month(ctx, month: str | None, default: date | None = None) -> tuple[int, int]:
    """Resolve a month option into (month, year).

    Without a value the month of ``default`` (or today) is used.
    """
    if not month:
        default = default or date.today()
        return default.month, default.year
    try:
        return parse_month(month)
    except ValueError as e:
        click.echo(f"Error: Invalid month: {e}", err=True)
        ctx.exit(1)
