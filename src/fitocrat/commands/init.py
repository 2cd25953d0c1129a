"""Initialize project command."""

from pathlib import Path

import click

from ..data.exercise_loader import get_exercises_json_path, seed_exercises_from_json
from ..db import init_db
from .base import async_command, echo_error, echo_info, echo_success, get_cli_db_path


@click.command()
@click.option(
    "--library",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Exercise library JSON to seed from (defaults to the bundled library)",
)
@click.pass_context
@async_command
async def init(ctx: click.Context, library: Path | None):
    """Initialize the fitocrat exercise database.

    This creates the SQLite database with the required schema and seeds it
    with the exercise library.
    """
    db_path = get_cli_db_path(ctx)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    echo_info(f"Initializing exercise library in {db_path}")

    await init_db(db_path)
    echo_success("Database initialized")

    json_path = library or get_exercises_json_path()
    count = await seed_exercises_from_json(db_path, json_path)
    if not count:
        echo_error(f"No exercises found in {json_path}")
        ctx.exit(1)
    echo_success(f"Exercise library populated ({count} exercises)")

    click.echo()
    click.echo("fitocrat is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  fitocrat gear                            # What your gear unlocks")
    click.echo('  fitocrat mission --gear "pull-up bar"    # Get a mission')
