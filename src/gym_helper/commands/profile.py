"""Profile commands: achievements, leaderboard and onboarding."""

import click

from ..analytics import build_leaderboard, calculate_achievements
from ..services.session import finish_onboarding
from .base import CliContext, async_command, echo_info, echo_success, format_table


@click.command()
@click.pass_obj
@async_command
async def achievements(obj: CliContext):
    """Show workout counts and streaks for your workouts."""
    user = await obj.ensure_user()
    result = calculate_achievements(obj.store.get_user_workouts())

    click.echo(click.style(f"Achievements: {user.full_name}", bold=True))
    click.echo(f"Total workouts: {result.total_workouts}")
    click.echo(f"This month: {result.workouts_this_month}")
    click.echo(f"Current streak: {result.current_streak}")
    click.echo(f"Best streak: {result.best_streak}")


@click.command()
@click.option("--top", default=0, type=int, help="Only show the first N places")
@click.pass_obj
@async_command
async def leaderboard(obj: CliContext, top: int):
    """Weekly leaderboard of you and your friends."""
    user = await obj.ensure_user()
    entries = build_leaderboard(user, obj.store.friends, obj.store.workouts)
    if top > 0:
        entries = entries[:top]

    rows = [
        [str(e.position), e.name, e.gym or "-", str(e.workouts_this_week)]
        for e in entries
    ]
    click.echo(format_table(["#", "Name", "Gym", "This week"], rows))


@click.group()
def onboarding():
    """Inspect or change the first-run onboarding state."""
    pass


@onboarding.command("status")
@click.pass_obj
@async_command
async def status(obj: CliContext):
    """Show whether onboarding was completed."""
    if await obj.onboarding.is_onboarded():
        echo_success("Onboarding completed.")
    else:
        echo_info("Onboarding not completed yet.")


@onboarding.command("complete")
@click.pass_obj
@async_command
async def complete(obj: CliContext):
    """Mark onboarding as completed."""
    await obj.ensure_user()
    await finish_onboarding(obj.store, obj.onboarding)
    echo_success("Onboarding marked as completed.")


@onboarding.command("reset")
@click.pass_obj
@async_command
async def reset(obj: CliContext):
    """Forget onboarding so it is shown again."""
    await obj.onboarding.reset()
    echo_success("Onboarding reset.")
