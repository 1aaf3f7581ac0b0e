"""Budget commands."""

from decimal import Decimal

import click
from finsight.cli.date_options import resolve_month
from finsight.cli.error_handling import handle_domain_error, parse_key_values
from finsight.domain.budget import EnvelopeStrategy, ZeroBasedStrategy
from finsight.domain.errors import DomainError
from finsight.utils.amount_parser import parse_amount


def _parse_amounts(ctx, pairs: tuple[str, ...], option: str) -> dict[str, Decimal]:
    amounts = {}
    for name, value in parse_key_values(ctx, pairs, option):
        try:
            amounts[name] = parse_amount(value)
        except ValueError as e:
            click.echo(f"Error: Invalid amount for {option} '{name}': {e}", err=True)
            ctx.exit(1)
    return amounts


def _print_amounts(title: str, amounts: dict[str, Decimal]) -> None:
    click.echo(f"\n{title}:")
    for name, amount in amounts.items():
        click.echo(f"  {name:<28} ${amount:>14,.2f}")


@click.group()
def budget_group():
    """Allocate income and evaluate spending with the active strategy."""
    pass


@budget_group.command("allocate")
@click.argument("income")
@click.pass_context
def allocate(ctx, income: str):
    """Show how INCOME is allocated by the active budget strategy.

    Example:
        finsight --strategy ZERO_BASED budget allocate 5000
    """
    strategy = ctx.obj["app"].budget_strategy
    try:
        amount = parse_amount(income)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    click.echo(f"Strategy: {strategy.name.value} ({strategy.description})")
    _print_amounts(f"Allocation of ${amount:,.2f}", strategy.allocate_funds(amount))


@budget_group.command("evaluate")
@click.option("--month", help="Month to evaluate (YYYY-MM, default: current month)")
@click.option(
    "--envelope",
    "envelopes",
    multiple=True,
    help="Envelope amount as NAME=AMOUNT (ENVELOPE strategy only)",
)
@click.option(
    "--allocation",
    "allocations",
    multiple=True,
    help="Category share as CATEGORY=FRACTION, e.g. Rent=0.35 (ZERO_BASED strategy only)",
)
@click.pass_context
def evaluate(ctx, month: str | None, envelopes: tuple[str, ...], allocations: tuple[str, ...]):
    """Evaluate a month of transactions against the budget.

    With the ENVELOPE strategy and no --envelope options, the month's income
    is split evenly across the default envelopes.

    Examples:
        finsight budget evaluate --month 2023-10
        finsight --strategy ENVELOPE budget evaluate --month 2023-10 --envelope Groceries=300
    """
    app = ctx.obj["app"]
    strategy = app.budget_strategy
    month_num, year = resolve_month(ctx, month)

    if envelopes and not isinstance(strategy, EnvelopeStrategy):
        click.echo("Error: --envelope requires the ENVELOPE strategy", err=True)
        ctx.exit(1)
    if allocations and not isinstance(strategy, ZeroBasedStrategy):
        click.echo("Error: --allocation requires the ZERO_BASED strategy", err=True)
        ctx.exit(1)

    try:
        if isinstance(strategy, EnvelopeStrategy):
            if envelopes:
                strategy.set_envelope_amounts(_parse_amounts(ctx, envelopes, "--envelope"))
            else:
                transactions = app.db.list_transactions()
                strategy.allocate_funds(
                    strategy.analyzer.monthly_income(transactions, month_num, year)
                )
        elif isinstance(strategy, ZeroBasedStrategy):
            for category, share in _parse_amounts(ctx, allocations, "--allocation").items():
                strategy.update_category_allocation(category, share)
        evaluation = app.evaluate_budget(month_num, year)
    except DomainError as e:
        handle_domain_error(ctx, e)

    details = evaluation.details
    click.echo(f"Strategy: {strategy.name.value}")
    click.echo(f"Month: {year}-{month_num:02d}")
    click.echo(f"Status: {evaluation.status}")
    if "income" in details:
        click.echo(f"Income: ${details['income']:,.2f}")

    _print_amounts("Budget", details["budget"])
    _print_amounts("Actual", details["actual"])

    overspent = details.get("overspent_categories") or details.get("overspent_envelopes")
    if overspent:
        click.echo(f"\nOverspent: {', '.join(overspent)}")
    if "remaining_amounts" in details:
        _print_amounts("Remaining", details["remaining_amounts"])


def register_commands(cli):
    """Register budget commands with main CLI."""
    cli.add_command(budget_group, name="budget")
