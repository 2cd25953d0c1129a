"""Gear catalog command."""

import random

import click

from ..generators import probe_gear_catalog
from .base import async_command, echo_info, load_catalog


@click.command()
@click.option("--seed", type=int, help="Random seed for the trial missions")
@click.pass_context
@async_command
async def gear(ctx: click.Context, seed: int | None):
    """List every gear name in the exercise library.

    Gear that can complete a standard mission on its own (together with
    bodyweight) is marked. Each check is a single random attempt, so gear
    that only covers one side of the neck-or-grip slot can differ between runs.
    """
    catalog = await load_catalog(ctx)
    probes = probe_gear_catalog(catalog, rng=random.Random(seed))

    if not probes:
        echo_info("No gear found in the exercise library.")
        return

    for probe in probes:
        click.echo(str(probe))
