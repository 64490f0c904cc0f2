"""Click CLI group entry point for histpeaks."""

from __future__ import annotations

import logging

import click

from histpeaks.commands.find import find
from histpeaks.commands.stats import stats

_LOG_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


@click.group()
@click.option("-v", "--verbose", count=True, help="Increase log verbosity (-v info, -vv debug).")
def main(verbose: int) -> None:
    """Peak detection in 1D histograms."""
    logging.basicConfig(
        level=_LOG_LEVELS[min(verbose, len(_LOG_LEVELS) - 1)],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


main.add_command(find)
main.add_command(stats)
