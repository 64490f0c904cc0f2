"""Shared fixtures for histpeaks tests."""

from __future__ import annotations

import json
from pathlib import Path

import numpy as np
import numpy.typing as npt
import pytest

# Two triangular humps of height 3, the second closed by a trailing rise
TWO_HUMPS = [0, 1, 2, 3, 2, 1, 0, 1, 2, 3, 2, 1, 0, 1]


@pytest.fixture()
def two_humps() -> npt.NDArray[np.float64]:
    """Histogram with two complete peaks at dx=2."""
    return np.array(TWO_HUMPS, dtype=np.float64)


@pytest.fixture()
def noisy_histogram() -> npt.NDArray[np.float64]:
    """Reproducible non-negative histogram with many local extremes."""
    rng = np.random.default_rng(2017)
    x = np.arange(300, dtype=np.float64)
    smooth = 20.0 * np.exp(-0.5 * ((x - 90.0) / 15.0) ** 2) + 12.0 * np.exp(-0.5 * ((x - 210.0) / 25.0) ** 2)
    return smooth + rng.uniform(0.0, 3.0, size=x.size)


@pytest.fixture()
def histogram_file(tmp_path: Path) -> Path:
    """TWO_HUMPS written as a JSON list."""
    path = tmp_path / "histogram.json"
    path.write_text(json.dumps(TWO_HUMPS), encoding="utf-8")
    return path
