"""Categorize command."""

import click
from finsight.cli.error_handling import handle_domain_error, parse_key_values
from finsight.domain.categorizer import TransactionCategorizer
from finsight.domain.errors import DomainError


@click.command("categorize")
@click.argument("descriptions", nargs=-1, required=True)
@click.option(
    "--rule",
    "rules",
    multiple=True,
    help="Extra rule as CATEGORY=PATTERN, checked after the built-in categories",
)
@click.pass_context
def categorize(ctx, descriptions: tuple[str, ...], rules: tuple[str, ...]):
    """Suggest a category for each transaction description.

    Examples:
        finsight categorize "netflix subscription" "Shell gas station"
        finsight categorize "Gym membership" --rule "Health & Fitness=gym"
    """
    categorizer = TransactionCategorizer()
    try:
        for category, pattern in parse_key_values(ctx, rules, "--rule"):
            categorizer.add_rule(category, pattern)
    except DomainError as e:
        handle_domain_error(ctx, e)

    for description in descriptions:
        click.echo(f"{description}: {categorizer.categorize(description)}")


def register_commands(cli):
    """Register categorize command with main CLI."""
    cli.add_command(categorize)
