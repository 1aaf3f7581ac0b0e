"""Spending report commands."""

import click
from finsight.cli.date_options import resolve_month
from finsight.domain.analytics import TransactionAnalyzer


@click.group()
def report_group():
    """Monthly income and spending reports."""
    pass


@report_group.command("monthly")
@click.option("--month", help="Month to report (YYYY-MM, default: current month)")
@click.pass_context
def monthly_report(ctx, month: str | None):
    """Show income, spending and spending per category for a month."""
    db = ctx.obj["db"]
    analyzer = TransactionAnalyzer()
    month_num, year = resolve_month(ctx, month)

    transactions = db.list_transactions()
    income = analyzer.monthly_income(transactions, month_num, year)
    spending = analyzer.monthly_spending(transactions, month_num, year)
    by_category = analyzer.spending_by_category(transactions, month_num, year)

    click.echo(f"\nReport for {year}-{month_num:02d}")
    click.echo("-" * 50)
    click.echo(f"{'Income':<30} ${income:>14,.2f}")
    click.echo(f"{'Spending':<30} ${spending:>14,.2f}")
    click.echo(f"{'Net':<30} ${income - spending:>14,.2f}")

    if not by_category:
        click.echo("\nNo spending in this month.")
        return

    click.echo("\nSpending by category:")
    for category, amount in sorted(by_category.items(), key=lambda item: item[1], reverse=True):
        click.echo(f"  {category:<28} ${amount:>14,.2f}")


@report_group.command("compare")
@click.argument("base_month")
@click.argument("month")
@click.pass_context
def compare_months(ctx, base_month: str, month: str):
    """Compare category spending of MONTH against BASE_MONTH.

    Categories without spending in BASE_MONTH are reported as +100%.

    Example:
        finsight report compare 2023-09 2023-10
    """
    db = ctx.obj["db"]
    analyzer = TransactionAnalyzer()
    month1, year1 = resolve_month(ctx, base_month)
    month2, year2 = resolve_month(ctx, month)

    changes = analyzer.compare_monthly_spending(
        db.list_transactions(), month1, year1, month2, year2
    )
    if not changes:
        click.echo("No spending in either month.")
        return

    click.echo(f"\nSpending change {year1}-{month1:02d} -> {year2}-{month2:02d}")
    click.echo("-" * 50)
    for category, change in changes.items():
        click.echo(f"  {category:<28} {change:+10.1f}%")


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(report_group, name="report")
