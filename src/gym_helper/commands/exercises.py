"""Exercise library commands."""

import json

import click

from ..analytics import calculate_exercise_stats, exercise_history
from .base import CliContext, echo_error, echo_info, format_table


@click.group()
def exercises():
    """Browse exercises and their statistics."""
    pass


@exercises.command("list")
@click.option("--search", "-s", default="", help="Filter by name")
@click.option("--muscle", "-m", default=None, help="Only exercises for this muscle group")
@click.pass_obj
def list_exercises(obj: CliContext, search: str, muscle: str | None):
    """List exercises in the library."""
    items = obj.store.search_exercises(search)
    if muscle:
        items = [e for e in items if muscle in e.muscle_groups]

    if not items:
        echo_info("No exercises found.")
        return

    rows = [
        [e.id, e.name, ", ".join(e.muscle_groups), ", ".join(e.equipment)]
        for e in items
    ]
    click.echo(format_table(["ID", "Name", "Muscles", "Equipment"], rows))


@exercises.command("stats")
@click.argument("exercise_id")
@click.option("--json", "as_json", is_flag=True, help="Print raw JSON")
@click.pass_context
def stats(ctx: click.Context, exercise_id: str, as_json: bool):
    """Show computed statistics for an exercise."""
    obj: CliContext = ctx.obj
    exercise = obj.store.get_exercise(exercise_id)
    if exercise is None:
        echo_error(f"Exercise {exercise_id} not found.")
        ctx.exit(1)

    result = calculate_exercise_stats(exercise, obj.store.workouts)
    if as_json:
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return

    click.echo(click.style(exercise.name, bold=True))
    click.echo(f"Sets per workout: {result.sets}")
    click.echo(f"Reps: {result.reps}")
    click.echo(f"Weight: {result.weight}")
    click.echo(f"Rest: {result.rest_time}")
    click.echo(f"Difficulty: {result.difficulty.value}")
    click.echo(f"Muscles: {', '.join(result.muscle_groups)}")


@exercises.command("show")
@click.argument("exercise_id")
@click.pass_context
def show(ctx: click.Context, exercise_id: str):
    """Show an exercise with its technique and workout history."""
    obj: CliContext = ctx.obj
    exercise = obj.store.get_exercise(exercise_id)
    if exercise is None:
        echo_error(f"Exercise {exercise_id} not found.")
        ctx.exit(1)

    ctx.invoke(stats, exercise_id=exercise_id, as_json=False)

    if exercise.description:
        click.echo()
        click.echo(exercise.description)

    if exercise.steps:
        click.echo()
        click.echo(click.style("Technique:", bold=True))
        for step in sorted(exercise.steps, key=lambda s: s.step_number):
            click.echo(f"  {step.step_number}. {step.description}")

    if exercise.recommendations:
        click.echo()
        click.echo(click.style("Tips:", bold=True))
        for rec in exercise.recommendations:
            click.echo(f"  - {rec.text}")

    click.echo()
    click.echo(click.style("History:", bold=True))
    groups = exercise_history(exercise_id, obj.store.workouts)
    if not groups:
        click.echo("  No workouts yet.")
    for group in groups:
        click.echo(f"  {group.workout_date.isoformat()}  {group.workout_title}")
        for numbered in group.sets:
            s = numbered.set
            parts = []
            if s.reps is not None:
                parts.append(f"{s.reps} reps")
            if s.weight is not None:
                parts.append(f"{s.weight} kg")
            if s.duration is not None:
                parts.append(f"{s.duration} s")
            if s.distance is not None:
                parts.append(f"{s.distance} m")
            click.echo(f"    Set {numbered.set_number}: {', '.join(parts) or '-'}")
