"""CLI entry point for gym-helper."""

import logging
from pathlib import Path

import click

from .commands import achievements, exercises, leaderboard, onboarding, serve, workouts
from .commands.base import CliContext
from .config import Settings
from .data import build_store


@click.group()
@click.version_option(version="0.1.0", prog_name="gym-helper")
@click.option(
    "--data",
    "data_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON snapshot to load instead of the demo data",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, data_path: Path | None, verbose: bool):
    """gym-helper: track workouts and see how hard your exercises are.

    Example usage:

        # Browse the exercise library
        gym-helper exercises list

        # Difficulty, rep and weight ranges for an exercise
        gym-helper exercises stats 1

        # Your workouts and streaks
        gym-helper workouts list --mine
        gym-helper achievements
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = Settings()
    ctx.obj = CliContext(settings=settings, store=build_store(settings, data_path))


# Register commands
main.add_command(exercises)
main.add_command(workouts)
main.add_command(achievements)
main.add_command(leaderboard)
main.add_command(onboarding)
main.add_command(serve)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
