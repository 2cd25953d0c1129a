"""CLI entry point for fitocrat."""

from pathlib import Path

import click

from .commands import exercises, gear, init, mission
from .utils.log import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="fitocrat")
@click.option(
    "--db",
    "db_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="FITOCRAT_DB",
    help="Exercise database path (env: FITOCRAT_DB)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, db_path: Path | None, verbose: bool):
    """fitocrat: random workout missions for the gear you have.

    Missions follow the standard eight-exercise template, or the six-exercise
    calisthenics template when asked for (or when your gear cannot cover the
    standard one).

    Example usage:

        # Create and seed the exercise database
        fitocrat init

        # See what each piece of gear unlocks
        fitocrat gear

        # Get a mission
        fitocrat mission -g "pull-up bar" -g sandbag
    """
    configure_logging("DEBUG" if verbose else None)
    ctx.ensure_object(dict)
    ctx.obj["db_path"] = db_path


# Register commands
main.add_command(init)
main.add_command(mission)
main.add_command(gear)
main.add_command(exercises)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
