"""Account commands."""

from decimal import Decimal

import click


@click.group()
def account_group():
    """View accounts."""
    pass


@account_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List all accounts with their balances."""
    db = ctx.obj["db"]

    accounts = db.list_accounts()
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 80)
    for acc in accounts:
        click.echo(
            f"{acc.id:8s} | {acc.name:22s} | {acc.type.value:12s} | "
            f"{acc.account_number:10s} | ${acc.balance:>12,.2f} | {acc.change_percent:+.1f}%"
        )
    click.echo("-" * 80)
    net_worth = sum((acc.balance for acc in accounts), Decimal("0"))
    click.echo(f"Net worth: ${net_worth:,.2f}")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
