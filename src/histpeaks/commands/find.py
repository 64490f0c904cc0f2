"""``histpeaks find`` -- detect peaks in a histogram file.

Loads a 1-D histogram, runs the monotony scan and prints one row per
accepted peak. Optionally writes the peaks as JSON for downstream tooling.
"""

from __future__ import annotations

import json

import click
from rich.table import Table

from histpeaks._console import console, fail
from histpeaks._constants import (
    DEFAULT_ABATE_ANGLE,
    DEFAULT_DX,
    DEFAULT_GROWTH_ANGLE,
    DEFAULT_HEIGHT_THRESHOLD,
    DEFAULT_SMOOTHNESS,
)
from histpeaks._io import load_histogram
from histpeaks._types import AreaBaseline, PeakInfo
from histpeaks.scan import find_peaks


def peaks_table(peaks: list[PeakInfo], title: str) -> Table:
    """Render *peaks* as a rich table."""
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("lower", justify="right")
    table.add_column("upper", justify="right")
    table.add_column("max at", justify="right")
    table.add_column("height", justify="right")
    table.add_column("area", justify="right")
    for i, p in enumerate(peaks):
        table.add_row(
            str(i),
            str(p.lower_bound),
            str(p.upper_bound),
            str(p.height_index),
            f"{p.peak_height:.4g}",
            f"{p.peak_area:.4g}",
        )
    return table


@click.command("find")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--dx", default=DEFAULT_DX, show_default=True, help="Interval width in samples.")
@click.option(
    "--smoothness",
    default=DEFAULT_SMOOTHNESS,
    show_default=True,
    help="Minimum separation between peak bounds, in units of dx.",
)
@click.option(
    "--growth-angle",
    default=DEFAULT_GROWTH_ANGLE,
    show_default=True,
    help="Slope angle (degrees) above which an interval grows.",
)
@click.option(
    "--abate-angle",
    default=DEFAULT_ABATE_ANGLE,
    show_default=True,
    help="Slope angle (degrees) below which an interval abates.",
)
@click.option(
    "--height-threshold",
    default=DEFAULT_HEIGHT_THRESHOLD,
    show_default=True,
    help="Discard peaks lower than this.",
)
@click.option(
    "--baseline",
    type=click.Choice([b.value for b in AreaBaseline]),
    default=AreaBaseline.LOWER_ENDPOINT.value,
    show_default=True,
    help="Area baseline: lower boundary sample or linear segment.",
)
@click.option(
    "--json-out",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the peaks to this JSON file.",
)
def find(
    path: str,
    dx: int,
    smoothness: int,
    growth_angle: float,
    abate_angle: float,
    height_threshold: float,
    baseline: str,
    json_out: str | None,
) -> None:
    """Detect peaks in the histogram stored at PATH."""
    try:
        histogram = load_histogram(path)
        peaks = find_peaks(
            histogram,
            dx,
            smoothness,
            growth_angle,
            abate_angle,
            height_threshold,
            baseline=AreaBaseline(baseline),
        )
    except ValueError as exc:
        fail(str(exc))

    console.print(f"{len(peaks)} peaks in {len(histogram)} bins", style="bold cyan")
    if peaks:
        console.print(peaks_table(peaks, title=path))

    if json_out is not None:
        json_data: dict[str, object] = {
            "source": path,
            "parameters": {
                "dx": dx,
                "smoothness": smoothness,
                "growth_angle": growth_angle,
                "abate_angle": abate_angle,
                "height_threshold": height_threshold,
                "baseline": baseline,
            },
            "peaks": [p.to_dict() for p in peaks],
        }
        with open(json_out, "w", encoding="utf-8") as f:
            json.dump(json_data, f, indent=2)
        console.print(f"  JSON: [blue]{json_out}[/blue]")
