"""Main CLI entry point."""

import logging

import click
from finsight.database.factories import create_database
from finsight.database.fixtures import seed_fixtures
from finsight.domain.app_state import AppState
from finsight.domain.errors import DomainError
from finsight.domain.financial_state import get_financial_state
from finsight.cli.error_handling import handle_domain_error

# Import and register all commands at module level
from finsight.cli.commands import (
    account,
    transaction,
    categorize,
    report,
    budget,
    goal,
    recommend,
)


@click.group()
@click.option(
    "--database-url",
    help="SQLAlchemy database URL (overrides FINSIGHT_DATABASE_URL; defaults to in-memory)",
    envvar="FINSIGHT_DATABASE_URL",
)
@click.option(
    "--strategy",
    default="FIFTY_THIRTY_TWENTY",
    show_default=True,
    envvar="FINSIGHT_BUDGET_STRATEGY",
    help="Budget strategy: FIFTY_THIRTY_TWENTY, ZERO_BASED or ENVELOPE",
)
@click.option(
    "--state",
    default="SAVING",
    show_default=True,
    envvar="FINSIGHT_FINANCIAL_STATE",
    help="Financial state: BUDGETING, SAVING, INVESTING or DEBT_REDUCTION",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, database_url: str | None, strategy: str, state: str, verbose: bool):
    """Finsight - personal finance dashboard.

    Evaluates budgets, tracks savings goals and derives recommendations from
    your accounts and transactions. Data is seeded with sample fixtures.
    """
    ctx.ensure_object(dict)

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    # Initialize state only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is None:
        return

    if "db" not in ctx.obj:
        db = create_database(database_url=database_url)
        db.connect()
        db.initialize_schema()
        seed_fixtures(db)
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)

    try:
        ctx.obj["app"] = AppState(
            ctx.obj["db"],
            budget_strategy=strategy,
            financial_state=get_financial_state(state),
        )
    except DomainError as e:
        handle_domain_error(ctx, e)


# Register all commands
account.register_commands(cli)
transaction.register_commands(cli)
categorize.register_commands(cli)
report.register_commands(cli)
budget.register_commands(cli)
goal.register_commands(cli)
recommend.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
