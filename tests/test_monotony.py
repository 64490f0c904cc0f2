"""Tests for histpeaks.monotony."""

from __future__ import annotations

import itertools
import math

import pytest

from histpeaks._errors import InvalidIntervalError
from histpeaks._types import ExtremeType, Monotony
from histpeaks.monotony import classify_extreme, classify_monotony, slope_from_angle

GROW, ABATE, STABLE = Monotony.GROW, Monotony.ABATE, Monotony.STABLE


# ---- slope_from_angle -----------------------------------------------------


@pytest.mark.parametrize(
    ("angle", "expected"),
    [(0.0, 0.0), (45.0, 1.0), (-45.0, -1.0), (60.0, math.sqrt(3.0))],
)
def test_slope_from_angle(angle: float, expected: float) -> None:
    """Angles in degrees map to their tangent."""
    assert slope_from_angle(angle) == pytest.approx(expected, abs=1e-12)


# ---- classify_monotony ----------------------------------------------------


def test_classify_grow_abate_stable() -> None:
    """Slope above, below and between the thresholds."""
    assert classify_monotony(0.0, 4.0, 2, 0.5, -0.5) is GROW
    assert classify_monotony(4.0, 0.0, 2, 0.5, -0.5) is ABATE
    assert classify_monotony(1.0, 1.5, 2, 0.5, -0.5) is STABLE


def test_classify_thresholds_inclusive() -> None:
    """A slope equal to a threshold satisfies it."""
    assert classify_monotony(0.0, 2.0, 2, 1.0, -1.0) is GROW
    assert classify_monotony(2.0, 0.0, 2, 1.0, -1.0) is ABATE


def test_classify_grow_wins_on_overlap() -> None:
    """With inverted thresholds GROW is checked first."""
    assert classify_monotony(0.0, 2.0, 2, 0.5, 2.0) is GROW
    assert classify_monotony(0.0, 0.2, 2, 0.5, 2.0) is ABATE


def test_classify_divides_by_dx() -> None:
    """The same rise is steep over a short interval and shallow over a long one."""
    assert classify_monotony(0.0, 3.0, 2, 1.0, -1.0) is GROW
    assert classify_monotony(0.0, 3.0, 6, 1.0, -1.0) is STABLE


@pytest.mark.parametrize("f_b", [-10.0, -1.0, 0.0, 0.3, 1.0, 10.0])
def test_classify_returns_single_monotony(f_b: float) -> None:
    """Every slope maps to exactly one monotony, the same one every time."""
    first = classify_monotony(0.0, f_b, 2, 0.2, -0.2)
    assert isinstance(first, Monotony)
    assert classify_monotony(0.0, f_b, 2, 0.2, -0.2) is first


@pytest.mark.parametrize("dx", [0, -2])
def test_classify_rejects_non_positive_dx(dx: int) -> None:
    """Interval width must be positive."""
    with pytest.raises(InvalidIntervalError):
        classify_monotony(0.0, 1.0, dx, 0.1, -0.1)


# ---- classify_extreme -----------------------------------------------------

_EXPECTED = {
    (GROW, STABLE): ExtremeType.MAX,
    (GROW, ABATE): ExtremeType.MAX,
    (STABLE, ABATE): ExtremeType.MAX,
    (ABATE, STABLE): ExtremeType.MIN,
    (ABATE, GROW): ExtremeType.MIN,
    (STABLE, GROW): ExtremeType.MIN,
}


@pytest.mark.parametrize(("previous", "current"), list(itertools.product(Monotony, repeat=2)))
def test_classify_extreme_table(previous: Monotony, current: Monotony) -> None:
    """All nine transitions; unchanged monotony is never an extreme."""
    expected = _EXPECTED.get((previous, current), ExtremeType.NONE)
    assert classify_extreme(previous, current) is expected
