"""Piecewise-slope monotony classification.

The histogram is walked in intervals of ``dx`` samples. The slope between the
two boundary samples of an interval is compared against thresholds derived
from a *growth angle* and an *abate angle* (in degrees) to decide whether the
histogram grows, abates, or stays stable over that interval. A change of
monotony between two adjacent intervals marks an extreme point.
"""

from __future__ import annotations

import math

from histpeaks._errors import InvalidIntervalError
from histpeaks._types import ExtremeType, Monotony

_MAX_TRANSITIONS = frozenset(
    {
        (Monotony.GROW, Monotony.STABLE),
        (Monotony.GROW, Monotony.ABATE),
        (Monotony.STABLE, Monotony.ABATE),
    }
)
_MIN_TRANSITIONS = frozenset(
    {
        (Monotony.ABATE, Monotony.STABLE),
        (Monotony.ABATE, Monotony.GROW),
        (Monotony.STABLE, Monotony.GROW),
    }
)


def slope_from_angle(angle: float) -> float:
    """Return ``tan(angle)`` for an angle given in degrees."""
    return math.tan(angle * math.pi / 180.0)


def classify_monotony(
    f_a: float,
    f_b: float,
    dx: int,
    growth_threshold: float,
    abate_threshold: float,
) -> Monotony:
    """Classify the trend between two samples ``dx`` apart.

    Parameters
    ----------
    f_a, f_b:
        Sample values at the start and end of the interval.
    dx:
        Interval width.
    growth_threshold:
        Minimum slope for the interval to count as growing.
    abate_threshold:
        Maximum slope for the interval to count as abating.

    Returns
    -------
    Monotony
        ``GROW`` if the slope reaches the growth threshold, otherwise
        ``ABATE`` if it reaches the abate threshold, otherwise ``STABLE``.
    """
    if dx <= 0:
        raise InvalidIntervalError(f"interval width must be positive, got dx={dx}")

    m = (f_b - f_a) / dx

    if m >= growth_threshold:
        return Monotony.GROW
    if m <= abate_threshold:
        return Monotony.ABATE
    return Monotony.STABLE


def classify_extreme(previous: Monotony, current: Monotony) -> ExtremeType:
    """Classify the extreme between two intervals from their monotonies.

    Going from growing (or stable) to abating (or stable) is a ``MAX``;
    going from abating (or stable) to growing (or stable) is a ``MIN``.
    Any other pair, including no change at all, is ``NONE``.
    """
    transition = (previous, current)
    if transition in _MAX_TRANSITIONS:
        return ExtremeType.MAX
    if transition in _MIN_TRANSITIONS:
        return ExtremeType.MIN
    return ExtremeType.NONE
