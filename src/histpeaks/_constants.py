"""Default analysis parameters."""

from __future__ import annotations

# Interval width (samples); adjacent intervals share one boundary sample
DEFAULT_DX = 3

# Minimum separation between peak-bounding shifts, in units of dx
DEFAULT_SMOOTHNESS = 1

# Slope thresholds, as angles in degrees
DEFAULT_GROWTH_ANGLE = 1.0
DEFAULT_ABATE_ANGLE = -1.0

DEFAULT_HEIGHT_THRESHOLD = 0.0
