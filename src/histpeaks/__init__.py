"""histpeaks -- peak detection in 1D histograms by piecewise-slope monotony."""

__version__ = "0.1.0"

from histpeaks._constants import (
    DEFAULT_ABATE_ANGLE,
    DEFAULT_DX,
    DEFAULT_GROWTH_ANGLE,
    DEFAULT_HEIGHT_THRESHOLD,
    DEFAULT_SMOOTHNESS,
)
from histpeaks._errors import InvalidIntervalError, InvalidRangeError
from histpeaks._types import AreaBaseline, ExtremeType, Monotony, PeakInfo
from histpeaks.metrics import (
    peak_area,
    peak_area_linear,
    peak_area_lower_endpoint,
    peak_height,
    peak_statistics,
)
from histpeaks.monotony import classify_extreme, classify_monotony, slope_from_angle
from histpeaks.scan import find_peaks

__all__ = [
    "DEFAULT_ABATE_ANGLE",
    "DEFAULT_DX",
    "DEFAULT_GROWTH_ANGLE",
    "DEFAULT_HEIGHT_THRESHOLD",
    "DEFAULT_SMOOTHNESS",
    "AreaBaseline",
    "ExtremeType",
    "InvalidIntervalError",
    "InvalidRangeError",
    "Monotony",
    "PeakInfo",
    "classify_extreme",
    "classify_monotony",
    "find_peaks",
    "peak_area",
    "peak_area_linear",
    "peak_area_lower_endpoint",
    "peak_height",
    "peak_statistics",
    "slope_from_angle",
]
