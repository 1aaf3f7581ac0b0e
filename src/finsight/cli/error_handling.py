"""CLI error handling helpers."""

import click

from finsight.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def parse_key_values(ctx: click.Context, pairs: tuple[str, ...], option: str) -> list[tuple[str, str]]:
    """Split repeated NAME=VALUE option values, exiting on malformed input."""
    result = []
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name.strip():
            click.echo(f"Error: {option} expects NAME=VALUE, got '{pair}'", err=True)
            ctx.exit(1)
        result.append((name.strip(), value.strip()))
    return result
