"""Tests for histpeaks._types."""

from __future__ import annotations

import dataclasses
import json

import pytest

from histpeaks._types import AreaBaseline, PeakInfo


def test_peak_info_frozen() -> None:
    """PeakInfo is immutable once produced."""
    info = PeakInfo(lower_bound=1, upper_bound=6, height_index=3, peak_height=3.0, peak_area=9.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        info.peak_height = 4.0  # type: ignore[misc]


def test_peak_info_to_dict_is_json_ready() -> None:
    """to_dict carries every field and serializes with json."""
    info = PeakInfo(lower_bound=1, upper_bound=6, height_index=3, peak_height=3.0, peak_area=9.0)
    data = info.to_dict()
    assert data == {
        "lower_bound": 1,
        "upper_bound": 6,
        "height_index": 3,
        "peak_height": 3.0,
        "peak_area": 9.0,
    }
    assert PeakInfo(**json.loads(json.dumps(data))) == info


def test_area_baseline_values() -> None:
    """Baselines are selectable by their string value."""
    assert AreaBaseline("lower") is AreaBaseline.LOWER_ENDPOINT
    assert AreaBaseline("linear") is AreaBaseline.LINEAR
