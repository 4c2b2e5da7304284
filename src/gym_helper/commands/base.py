"""Shared CLI utilities."""

import asyncio
from dataclasses import dataclass
from functools import wraps

import click

from ..config import Settings
from ..db.repositories import OnboardingRepository
from ..services.session import bootstrap_current_user
from ..store import DomainStore


@dataclass
class CliContext:
    """Objects shared by every command through ``ctx.obj``."""

    settings: Settings
    store: DomainStore

    @property
    def onboarding(self) -> OnboardingRepository:
        return OnboardingRepository(self.settings.db_path)

    async def ensure_user(self):
        """Bootstrap the current user once per invocation."""
        if self.store.current_user is None:
            await bootstrap_current_user(self.store, None, self.onboarding, self.settings)
        return self.store.current_user


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = ["".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers))]
    lines.append("".join("-" * w + " " * padding for w in widths))
    for row in rows:
        lines.append(
            "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row))
        )

    return "\n".join(line.rstrip() for line in lines)
