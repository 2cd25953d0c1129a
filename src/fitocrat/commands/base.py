"""Shared CLI utilities."""

import asyncio
from functools import wraps
from pathlib import Path

import click

from ..db import ExerciseCatalog, ExerciseRepository, get_db_path


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def get_cli_db_path(ctx: click.Context) -> Path:
    """Database path chosen with --db / FITOCRAT_DB, or the default."""
    db_path = (ctx.obj or {}).get("db_path")
    return Path(db_path) if db_path else get_db_path()


def ensure_initialized(ctx: click.Context) -> Path:
    """Ensure the database is initialized and return its path."""
    db_path = get_cli_db_path(ctx)
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Exercise library not initialized. Run 'fitocrat init' first."
        )
        ctx.exit(1)
    return db_path


async def load_catalog(ctx: click.Context) -> ExerciseCatalog:
    """Load the exercise library for a command."""
    db_path = ensure_initialized(ctx)
    return await ExerciseRepository(db_path).load_catalog()


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message, err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message, err=True)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message, err=True)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = ["".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers)).rstrip()]
    lines.append("".join("-" * w + " " * padding for w in widths).rstrip())
    for row in rows:
        lines.append(
            "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)).rstrip()
        )

    return "\n".join(lines)
