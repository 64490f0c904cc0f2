"""Peak detection in 1D histograms by piecewise-slope monotony analysis.

The histogram is split into consecutive intervals of ``dx`` samples that share
one boundary sample. Each interval is classified as growing, abating or
stable (see :mod:`histpeaks.monotony`). Wherever two adjacent intervals
disagree an extreme point (MIN or MAX) sits on their shared boundary.

A *shift* is recorded whenever the running extreme changes kind. Two
consecutive shifts anchored on MIN extremes enclose a peak; two anchored on
MAX extremes enclose a valley. Only peaks are reported.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from histpeaks._types import AreaBaseline, ExtremeType, Monotony, PeakInfo
from histpeaks.metrics import _area, _height, as_histogram
from histpeaks.monotony import classify_extreme, classify_monotony, slope_from_angle

logger = logging.getLogger(__name__)

# Index assigned to the extreme implied by the first interval's monotony.
_SEED_EXTREME_INDEX = 1


def _iter_shift_ranges(
    values: NDArray[np.float64],
    dx: int,
    smoothness: int,
    growth_threshold: float,
    abate_threshold: float,
    pair: ExtremeType,
) -> Iterator[tuple[int, int]]:
    """Yield ``(lb, ub)`` for consecutive shifts both anchored on *pair*.

    The caller guarantees ``dx >= 2`` and ``len(values) >= 2 * (dx - 1) + 1``.
    """
    n = len(values)
    offset = dx - 1

    # previous interval [a, b], current interval [b, c]
    b = offset
    c = b + offset

    ip_monotony = classify_monotony(values[0], values[b], dx, growth_threshold, abate_threshold)

    previous_extreme = ExtremeType.NONE
    previous_extreme_index = _SEED_EXTREME_INDEX
    if ip_monotony is Monotony.ABATE:
        previous_extreme = ExtremeType.MAX
    elif ip_monotony is Monotony.GROW:
        previous_extreme = ExtremeType.MIN

    shift_extreme = ExtremeType.NONE
    shift_extreme_index = 0
    n_shifts = 0

    while c < n:
        ic_monotony = classify_monotony(values[b], values[c], dx, growth_threshold, abate_threshold)

        if ip_monotony is not ic_monotony:
            current_extreme = classify_extreme(ip_monotony, ic_monotony)

            if current_extreme is not previous_extreme:
                n_shifts += 1
                if (
                    shift_extreme is not ExtremeType.NONE
                    and (b - shift_extreme_index) // dx >= smoothness
                    and shift_extreme is pair
                    and current_extreme is pair
                ):
                    yield shift_extreme_index, b

                shift_extreme = previous_extreme
                shift_extreme_index = previous_extreme_index

            previous_extreme = current_extreme
            previous_extreme_index = b

        b = c
        c += offset
        ip_monotony = ic_monotony

    logger.debug("Scan finished: %d shifts over %d samples", n_shifts, n)


def find_peaks(
    histogram: ArrayLike,
    dx: int,
    smoothness: int,
    growth_angle: float,
    abate_angle: float,
    height_threshold: float,
    *,
    baseline: AreaBaseline = AreaBaseline.LOWER_ENDPOINT,
) -> list[PeakInfo]:
    """Detect peaks in a histogram.

    The histogram is not normalized; scale it beforehand if the angles are
    meant to be comparable across histograms.

    Parameters
    ----------
    histogram:
        1-D sequence of bin values.
    dx:
        Interval width in samples. Adjacent intervals share one sample, so
        intervals start every ``dx - 1`` samples.
    smoothness:
        Minimum number of ``dx`` widths between the two shifts that bound a
        peak. Suppresses noise-induced micro-peaks.
    growth_angle:
        Angle (degrees) above which an interval counts as growing.
    abate_angle:
        Angle (degrees) below which an interval counts as abating.
    height_threshold:
        Discard peaks lower than this.
    baseline:
        Baseline convention for the peak area.

    Returns
    -------
    list[PeakInfo]
        Peaks ordered by ``lower_bound``. Empty when ``dx < 2`` or the
        histogram holds fewer than two intervals, whatever the other
        parameters; only then are they validated.
    """
    n = np.size(histogram)
    offset = dx - 1
    if dx < 2 or n < 2 * offset + 1:
        logger.debug("Histogram of %d samples too short for dx=%d", n, dx)
        return []

    if smoothness < 0:
        raise ValueError(f"smoothness must be non-negative, got {smoothness}")
    if height_threshold < 0:
        raise ValueError(f"height_threshold must be non-negative, got {height_threshold}")
    values = as_histogram(histogram)

    growth_threshold = slope_from_angle(growth_angle)
    abate_threshold = slope_from_angle(abate_angle)
    logger.debug(
        "Scanning %d samples: dx=%d smoothness=%d growth=%.4g abate=%.4g",
        len(values),
        dx,
        smoothness,
        growth_threshold,
        abate_threshold,
    )

    peaks: list[PeakInfo] = []
    ranges = _iter_shift_ranges(values, dx, smoothness, growth_threshold, abate_threshold, ExtremeType.MIN)
    for lb, ub in ranges:
        height, max_idx = _height(values, lb, ub)
        if height < height_threshold:
            logger.debug("Rejected peak [%d, %d]: height %.4g below threshold", lb, ub, height)
            continue
        peaks.append(
            PeakInfo(
                lower_bound=lb,
                upper_bound=ub,
                height_index=max_idx,
                peak_height=height,
                peak_area=_area(values, lb, ub, baseline),
            )
        )

    logger.debug("Found %d peaks", len(peaks))
    return peaks
