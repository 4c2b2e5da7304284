"""Workout listing commands."""

import click

from .base import CliContext, echo_error, echo_info, format_table


@click.group()
def workouts():
    """Browse workouts."""
    pass


@workouts.command("list")
@click.option("--mine", is_flag=True, help="Only workouts you created")
@click.pass_obj
def list_workouts(obj: CliContext, mine: bool):
    """List workouts, most recent first."""
    items = obj.store.get_user_workouts() if mine else obj.store.workouts
    if not items:
        echo_info("No workouts yet.")
        return

    rows = []
    for w in sorted(items, key=lambda w: w.date, reverse=True):
        rows.append([
            w.id,
            w.date.isoformat(),
            w.time,
            w.title,
            w.gym or "-",
            w.origin.value,
            "yes" if w.completed else "no",
        ])
    click.echo(
        format_table(["ID", "Date", "Time", "Title", "Gym", "Origin", "Done"], rows)
    )


@workouts.command("show")
@click.argument("workout_id")
@click.pass_context
def show(ctx: click.Context, workout_id: str):
    """Show the exercises and sets of a workout."""
    obj: CliContext = ctx.obj
    workout = obj.store.get_workout(workout_id)
    if workout is None:
        echo_error(f"Workout {workout_id} not found.")
        ctx.exit(1)

    click.echo(click.style(workout.title, bold=True))
    click.echo(f"{workout.date.isoformat()} {workout.time} @ {workout.gym or '-'}")
    if workout.description:
        click.echo(workout.description)

    for workout_exercise in workout.exercises:
        exercise = obj.store.get_exercise(workout_exercise.exercise_id)
        # Dangling references are shown, not fatal
        name = exercise.name if exercise else f"Unknown exercise ({workout_exercise.exercise_id})"
        click.echo()
        click.echo(f"  {name}: {len(workout_exercise.sets)} sets")
        if workout_exercise.notes:
            click.echo(f"    {workout_exercise.notes}")

    if workout.participants:
        click.echo()
        click.echo("Participants:")
        for p in workout.participants:
            click.echo(f"  {p.user.full_name} ({p.status.value})")
