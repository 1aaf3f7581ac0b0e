"""Financial goal commands."""

import dataclasses

import click
from finsight.cli.date_options import resolve_as_of
from finsight.cli.error_handling import handle_domain_error
from finsight.domain.errors import DomainError, ValidationError, amount_must_be_positive
from finsight.domain.goals import GoalFactory, GoalTracker
from finsight.utils.date_parser import parse_date
from finsight.utils.amount_parser import parse_amount

GOAL_KINDS = ("emergency", "vacation", "debt", "purchase", "custom")


@click.group()
def goal_group():
    """Manage savings goals."""
    pass


@goal_group.command("list")
@click.option("--as-of", help="Day to measure progress at (default: today)")
@click.pass_context
def list_goals(ctx, as_of: str | None):
    """List goals in priority order: off-track first, then by target date."""
    db = ctx.obj["db"]
    today = resolve_as_of(ctx, as_of)
    tracker = GoalTracker()

    goals = tracker.prioritize(db.list_goals(), today)
    if not goals:
        click.echo("No goals found.")
        return

    click.echo(f"\nGoals as of {today}:")
    click.echo("-" * 100)
    for goal in goals:
        status = tracker.goal_status(goal, today)
        track = "on track" if status.on_track else "behind"
        click.echo(
            f"{goal.id:10s} | {goal.name:22s} | ${goal.current_amount:>10,.2f} of "
            f"${goal.target_amount:>10,.2f} | {status.progress:5.1f}% | "
            f"due {goal.target_date} | {track:8s} | ${status.monthly_needed:,.2f}/month"
        )


@goal_group.command("add")
@click.option(
    "--kind",
    type=click.Choice(GOAL_KINDS, case_sensitive=False),
    default="custom",
    show_default=True,
    help="Kind of goal",
)
@click.option("--name", help="Goal name (not used for emergency funds)")
@click.option("--target", required=True, help="Target amount")
@click.option("--current", default="0", show_default=True, help="Amount already saved")
@click.option("--target-date", required=True, help="Date the target should be reached")
@click.option("--description", help="Description (vacation and custom goals)")
@click.option("--category", help="Category (custom goals)")
@click.pass_context
def add_goal(
    ctx,
    kind: str,
    name: str | None,
    target: str,
    current: str,
    target_date: str,
    description: str | None,
    category: str | None,
):
    """Create a goal.

    Examples:
        finsight goal add --kind emergency --target 10000 --target-date 2027-06-30
        finsight goal add --kind vacation --name Japan --target 5000 --target-date 2027-04-01
    """
    app = ctx.obj["app"]
    kind = kind.lower()

    if kind != "emergency" and not name:
        click.echo(f"Error: --name is required for {kind} goals", err=True)
        ctx.exit(1)

    try:
        target_amount = parse_amount(target)
        current_amount = parse_amount(current)
        goal_date = parse_date(target_date)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    factory = GoalFactory()
    try:
        if kind == "emergency":
            goal = factory.create_emergency_fund_goal(
                target_amount, current_amount, goal_date
            )
        elif kind == "vacation":
            goal = factory.create_vacation_goal(
                name, target_amount, current_amount, goal_date, description=description
            )
        elif kind == "debt":
            goal = factory.create_debt_payoff_goal(
                name, target_amount, current_amount, goal_date
            )
        elif kind == "purchase":
            goal = factory.create_purchase_goal(
                name, target_amount, current_amount, goal_date
            )
        else:
            goal = factory.create_custom_goal(
                name,
                target_amount,
                current_amount,
                goal_date,
                description=description,
                category=category,
            )
        app.add_goal(goal)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created goal {goal.id}: {goal.name}")
    click.echo(f"  Target: ${goal.target_amount:,.2f} by {goal.target_date}")
    click.echo(f"  Category: {goal.category}")


@goal_group.command("contribute")
@click.argument("goal_id")
@click.argument("amount")
@click.pass_context
def contribute(ctx, goal_id: str, amount: str):
    """Add AMOUNT to the saved amount of a goal."""
    app = ctx.obj["app"]
    try:
        contribution = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        if contribution <= 0:
            raise ValidationError(amount_must_be_positive("Contribution"))
        goal = app.get_goal(goal_id)
        goal = dataclasses.replace(
            goal, current_amount=goal.current_amount + contribution
        )
        app.update_goal(goal)
    except DomainError as e:
        handle_domain_error(ctx, e)

    progress = GoalTracker().calculate_progress(goal)
    click.echo(
        f"Goal {goal.id} now at ${goal.current_amount:,.2f} "
        f"of ${goal.target_amount:,.2f} ({progress:.1f}%)"
    )


@goal_group.command("delete")
@click.argument("goal_id")
@click.pass_context
def delete_goal(ctx, goal_id: str):
    """Delete a goal by ID."""
    app = ctx.obj["app"]
    try:
        app.delete_goal(goal_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted goal {goal_id}")


def register_commands(cli):
    """Register goal commands with main CLI."""
    cli.add_command(goal_group, name="goal")
