"""``histpeaks stats`` -- characterize a hand-picked range as a peak."""

from __future__ import annotations

import click

from histpeaks._console import console, fail
from histpeaks._io import load_histogram
from histpeaks._types import AreaBaseline
from histpeaks.commands.find import peaks_table
from histpeaks.metrics import peak_statistics


@click.command("stats")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.argument("lb", type=int)
@click.argument("ub", type=int)
@click.option(
    "--baseline",
    type=click.Choice([b.value for b in AreaBaseline]),
    default=AreaBaseline.LOWER_ENDPOINT.value,
    show_default=True,
    help="Area baseline: lower boundary sample or linear segment.",
)
def stats(path: str, lb: int, ub: int, baseline: str) -> None:
    """Height and area of the range [LB, UB] of the histogram at PATH."""
    try:
        histogram = load_histogram(path)
        info = peak_statistics(histogram, lb, ub, baseline=AreaBaseline(baseline))
    except ValueError as exc:
        fail(str(exc))

    console.print(peaks_table([info], title=f"{path} [{lb}, {ub}]"))
