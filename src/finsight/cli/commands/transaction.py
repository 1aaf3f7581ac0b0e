"""Transaction management commands."""

import calendar
from datetime import date

import click
from finsight.cli.date_options import resolve_month
from finsight.cli.error_handling import handle_domain_error
from finsight.domain.categorizer import TransactionCategorizer
from finsight.domain.entities import Transaction
from finsight.domain.errors import DomainError
from finsight.domain.transaction import new_transaction_id
from finsight.utils.date_parser import parse_date
from finsight.utils.amount_parser import parse_amount


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@click.option("--month", help="Only show this month (YYYY-MM or e.g. 'last month')")
@click.option("--category", help="Only show this category")
@click.option("--account", help="Only show this account ID")
@click.pass_context
def list_transactions(ctx, month: str | None, category: str | None, account: str | None):
    """List transactions with optional filters."""
    db = ctx.obj["db"]

    start = end = None
    if month:
        month_num, year = resolve_month(ctx, month)
        start = date(year, month_num, 1)
        end = date(year, month_num, calendar.monthrange(year, month_num)[1])

    transactions = db.list_transactions(
        start_date=start, end_date=end, category=category, account_id=account
    )
    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo("-" * 100)
    click.echo(
        f"{'ID':<10} {'Date':<12} {'Amount':>12}  {'Account':<8} {'Category':<20} {'Description':<30}"
    )
    click.echo("-" * 100)
    for txn in transactions:
        amount_str = f"${txn.amount:,.2f}"
        click.echo(
            f"{txn.id:<10} {str(txn.date):<12} {amount_str:>12}  {txn.account_id:<8} "
            f"{txn.category:<20} {txn.description[:30]:<30}"
        )


@transaction_group.command("add")
@click.option("--description", required=True, help="Transaction description")
@click.option(
    "--amount", required=True, help="Amount, positive for income and negative for expenses"
)
@click.option(
    "--date",
    "date_str",
    default="today",
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--account", required=True, help="Account ID")
@click.option("--category", help="Category (auto-detected from the description if omitted)")
@click.option("--notes", help="Notes")
@click.pass_context
def add_transaction(
    ctx,
    description: str,
    amount: str,
    date_str: str,
    account: str,
    category: str | None,
    notes: str | None,
):
    """Add a transaction.

    Examples:
        finsight transaction add --description "Whole Foods" --amount -54.20 --account acc-1
        finsight transaction add --description "Paycheck" --amount 2500 --account acc-1 --category Income
    """
    app = ctx.obj["app"]

    try:
        txn_date = parse_date(date_str)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    if txn_amount == 0:
        click.echo("Error: Transaction amount cannot be zero", err=True)
        ctx.exit(1)

    if category is None:
        category = TransactionCategorizer().categorize(description)

    transaction = Transaction(
        id=new_transaction_id(),
        description=description,
        amount=txn_amount,
        date=txn_date,
        category=category,
        account_id=account,
        notes=notes,
    )
    try:
        app.add_transaction(transaction)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {transaction.id}")
    click.echo(f"  Date: {txn_date}")
    click.echo(f"  Amount: ${txn_amount:,.2f}")
    click.echo(f"  Category: {category}")


@transaction_group.command("delete")
@click.argument("transaction_id")
@click.pass_context
def delete_transaction(ctx, transaction_id: str):
    """Delete a transaction by ID."""
    app = ctx.obj["app"]
    try:
        app.delete_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
