"""Mission generation command."""

import json
import random
from pathlib import Path

import click
import pyperclip

from ..errors import MissionUnbuildableError
from ..generators import build_mission, render
from .base import async_command, echo_error, echo_info, echo_success, load_catalog


@click.command()
@click.option(
    "--gear",
    "-g",
    multiple=True,
    help="Available gear (repeatable). Bodyweight is always included.",
)
@click.option(
    "--calisthenics",
    is_flag=True,
    help="Use the calisthenics template only (no fallback)",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["plain", "markdown", "markup", "html", "json"], case_sensitive=False),
    default="plain",
    help="Output format",
)
@click.option("--seed", type=int, help="Random seed for a reproducible mission")
@click.option(
    "--clipboard",
    "-c",
    is_flag=True,
    help="Copy to clipboard instead of printing",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write to file instead of stdout",
)
@click.pass_context
@async_command
async def mission(
    ctx: click.Context,
    gear: tuple[str, ...],
    calisthenics: bool,
    output_format: str,
    seed: int | None,
    clipboard: bool,
    output: Path | None,
):
    """Generate a random workout mission.

    Examples:

        # Bodyweight only
        fitocrat mission

        # With a pull-up bar and a sandbag
        fitocrat mission -g "pull-up bar" -g sandbag

        # Calisthenics routine as HTML
        fitocrat mission --calisthenics --format html
    """
    catalog = await load_catalog(ctx)

    try:
        built = build_mission(
            catalog, gear=gear, calisthenics=calisthenics, rng=random.Random(seed)
        )
    except MissionUnbuildableError as e:
        echo_error(str(e))
        ctx.exit(1)

    if built.fell_back:
        echo_info(
            "Not enough gear for a standard mission; here is a calisthenics mission instead."
        )

    if output_format.lower() == "json":
        content = json.dumps(built.to_dict(), indent=2) + "\n"
    else:
        content = render(built, output_format)

    if clipboard:
        try:
            pyperclip.copy(content)
        except pyperclip.PyperclipException as e:
            echo_error(f"Could not copy to clipboard: {e}")
            ctx.exit(1)
        echo_success("Copied to clipboard!")

    elif output:
        with open(output, "w") as f:
            f.write(content)
        echo_success(f"Mission written to {output}")

    else:
        click.echo(content, nl=False)
