"""Histogram loading for the command-line interface."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import numpy as np
import numpy.typing as npt

logger = logging.getLogger(__name__)


def load_histogram(path: str | Path) -> npt.NDArray[np.float64]:
    """Read a 1-D histogram from disk.

    Supported formats:

    * ``.npy`` -- a numpy array, flattened.
    * ``.json`` -- a list of numbers, or an object with a ``"histogram"`` list.
    * anything else -- whitespace- or comma-separated text.

    Parameters
    ----------
    path : str | Path
        Histogram file.

    Returns
    -------
    npt.NDArray[np.float64]
        The histogram as a flat float64 array.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".npy":
        data = np.load(path, allow_pickle=False)
    elif suffix == ".json":
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
        if isinstance(payload, dict):
            if "histogram" not in payload:
                raise ValueError(f"{path}: JSON object has no 'histogram' key")
            payload = payload["histogram"]
        data = np.asarray(payload, dtype=np.float64)
    else:
        text = path.read_text(encoding="utf-8").replace(",", " ")
        data = np.asarray(text.split(), dtype=np.float64)

    histogram = np.asarray(data, dtype=np.float64).ravel()
    logger.info("Loaded %d bins from %s", len(histogram), path)
    return histogram
