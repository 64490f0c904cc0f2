"""Height and area of a peak over an index range."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from histpeaks._errors import InvalidRangeError
from histpeaks._types import AreaBaseline, PeakInfo


def as_histogram(histogram: ArrayLike) -> NDArray[np.float64]:
    """Return *histogram* as a flat float64 array, rejecting NaN samples."""
    values = np.asarray(histogram, dtype=np.float64).ravel()
    if np.any(np.isnan(values)):
        raise ValueError("histogram contains NaN values; caller must handle missing bins before analysis")
    return values


def _check_range(values: NDArray[np.float64], lb: int, ub: int) -> None:
    n = len(values)
    if not 0 <= lb <= ub < n:
        raise InvalidRangeError(lb, ub, n)


# Kernels below take an already validated array and range; they only touch
# the samples in [lb, ub].


def _height(values: NDArray[np.float64], lb: int, ub: int) -> tuple[float, int]:
    base = min(values[lb], values[ub])
    window = values[lb : ub + 1]
    offset = int(np.argmax(window))
    return float(window[offset] - base), int(lb) + offset


def _area_lower(values: NDArray[np.float64], lb: int, ub: int) -> float:
    base = min(values[lb], values[ub])
    return float(np.sum(values[lb : ub + 1] - base))


def _area_linear(values: NDArray[np.float64], lb: int, ub: int) -> float:
    if lb == ub:
        return 0.0
    m = (values[ub] - values[lb]) / (ub - lb)
    n = values[ub] - m * ub
    idx = np.arange(lb, ub + 1, dtype=np.float64)
    return float(np.sum(values[lb : ub + 1] - (m * idx + n)))


def _area(values: NDArray[np.float64], lb: int, ub: int, baseline: AreaBaseline) -> float:
    if baseline is AreaBaseline.LINEAR:
        return _area_linear(values, lb, ub)
    return _area_lower(values, lb, ub)


def _validated(histogram: ArrayLike, lb: int, ub: int) -> NDArray[np.float64]:
    values = as_histogram(histogram)
    _check_range(values, lb, ub)
    return values


def peak_height(histogram: ArrayLike, lb: int, ub: int) -> tuple[float, int]:
    """Height of the peak in ``[lb, ub]`` above its lower boundary sample.

    Returns
    -------
    tuple[float, int]
        ``(height, max_index)``. Ties keep the earliest index.
    """
    return _height(_validated(histogram, lb, ub), lb, ub)


def peak_area_lower_endpoint(histogram: ArrayLike, lb: int, ub: int) -> float:
    """Area above the lower of the two boundary samples (A1)."""
    return _area_lower(_validated(histogram, lb, ub), lb, ub)


def peak_area_linear(histogram: ArrayLike, lb: int, ub: int) -> float:
    """Area above the segment joining ``(lb, h[lb])`` and ``(ub, h[ub])`` (A2).

    Samples below the segment subtract, so the result may be negative. A
    single-sample range has zero area.
    """
    return _area_linear(_validated(histogram, lb, ub), lb, ub)


def peak_area(
    histogram: ArrayLike,
    lb: int,
    ub: int,
    baseline: AreaBaseline = AreaBaseline.LOWER_ENDPOINT,
) -> float:
    """Area of the peak in ``[lb, ub]`` with the given baseline convention."""
    return _area(_validated(histogram, lb, ub), lb, ub, baseline)


def peak_statistics(
    histogram: ArrayLike,
    lb: int,
    ub: int,
    *,
    baseline: AreaBaseline = AreaBaseline.LOWER_ENDPOINT,
) -> PeakInfo:
    """Characterize an arbitrary range ``[lb, ub]`` as a peak.

    Independent of :func:`histpeaks.scan.find_peaks`; useful for inspecting a
    hand-picked region of the histogram.
    """
    values = _validated(histogram, lb, ub)
    height, max_idx = _height(values, lb, ub)
    return PeakInfo(
        lower_bound=int(lb),
        upper_bound=int(ub),
        height_index=max_idx,
        peak_height=height,
        peak_area=_area(values, lb, ub, baseline),
    )
