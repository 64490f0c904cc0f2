"""Shared data types for histpeaks."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum


class Monotony(Enum):
    """Trend of the histogram over one analysis interval."""

    GROW = "grow"
    ABATE = "abate"
    STABLE = "stable"


class ExtremeType(Enum):
    """Kind of point where the monotony changes."""

    MIN = "min"
    MAX = "max"
    NONE = "none"


class AreaBaseline(Enum):
    """Reference level subtracted from the samples of a peak range.

    ``LOWER_ENDPOINT`` (A1) uses the lower of the two boundary samples.
    ``LINEAR`` (A2) uses the segment joining both boundary samples.
    """

    LOWER_ENDPOINT = "lower"
    LINEAR = "linear"


@dataclass(frozen=True, slots=True)
class PeakInfo:
    """A peak characterized over the closed index range ``[lower_bound, upper_bound]``.

    Attributes
    ----------
    lower_bound : int
        Start index of the peak (a MIN extreme).
    upper_bound : int
        End index of the peak (the next paired MIN extreme).
    height_index : int
        Index of the maximum sample within the range.
    peak_height : float
        Maximum sample minus the lower of the two boundary samples.
    peak_area : float
        Sum of the samples above the selected baseline.
    """

    lower_bound: int
    upper_bound: int
    height_index: int
    peak_height: float
    peak_area: float

    @property
    def width(self) -> int:
        """Number of index steps spanned by the peak."""
        return self.upper_bound - self.lower_bound

    def to_dict(self) -> dict[str, int | float]:
        """Plain-dict view, suitable for ``json.dump``."""
        return asdict(self)
