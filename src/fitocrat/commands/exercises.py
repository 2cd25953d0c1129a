"""Exercise library listing command."""

import click

from ..models.exercises import Focus
from .base import async_command, echo_info, format_table, load_catalog


@click.command()
@click.option(
    "--focus",
    type=click.Choice([f.value for f in Focus]),
    help="Only show exercises with this focus",
)
@click.option(
    "--gear",
    "-g",
    multiple=True,
    help="Only show exercises doable with this gear (repeatable)",
)
@click.pass_context
@async_command
async def exercises(ctx: click.Context, focus: str | None, gear: tuple[str, ...]):
    """List exercises in the library."""
    catalog = await load_catalog(ctx)

    selected = [
        e
        for e in catalog.exercises
        if (focus is None or e.focus.value == focus) and (not gear or e.is_available_with(gear))
    ]

    if not selected:
        echo_info("No matching exercises.")
        return

    headers = ["Name", "Focus", "Gear"]
    rows = [[e.name, e.focus.value, ", ".join(e.gear) or "none"] for e in selected]

    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(selected)} exercise(s)")
