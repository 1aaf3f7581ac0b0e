"""Recommendation command."""

import click
from finsight.cli.date_options import resolve_as_of
from finsight.domain.entities import RecommendationType


@click.command("recommend")
@click.option(
    "--type",
    "recommendation_type",
    type=click.Choice([t.value for t in RecommendationType], case_sensitive=False),
    help="Only show recommendations of this type",
)
@click.option("--as-of", help="Day the income trend is measured up to (default: today)")
@click.option(
    "--include-saved",
    is_flag=True,
    help="Also show the stored curated recommendations",
)
@click.option("--steps/--no-steps", default=True, help="Show suggested steps")
@click.pass_context
def recommend(
    ctx,
    recommendation_type: str | None,
    as_of: str | None,
    include_saved: bool,
    steps: bool,
):
    """Show recommendations ordered for the current financial state.

    Examples:
        finsight recommend
        finsight --state INVESTING recommend --type investing
    """
    app = ctx.obj["app"]
    today = resolve_as_of(ctx, as_of)
    type_filter = RecommendationType(recommendation_type.lower()) if recommendation_type else None

    state = app.financial_state
    click.echo(state.greeting)
    click.echo("Priorities:")
    for priority in state.priorities:
        click.echo(f"  - {priority}")

    recommendations = app.recommendations(
        today=today, recommendation_type=type_filter, include_saved=include_saved
    )
    if not recommendations:
        click.echo("\nNo recommendations.")
        return

    click.echo(f"\n{len(recommendations)} recommendation(s):")
    for rec in recommendations:
        click.echo(f"\n[{rec.type.value}] {rec.title} (impact: ${rec.impact:,.2f})")
        click.echo(f"  {rec.description}")
        if steps:
            for step in rec.steps:
                click.echo(f"    * {step}")


def register_commands(cli):
    """Register recommend command with main CLI."""
    cli.add_command(recommend)
