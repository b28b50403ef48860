"""
Common data structures for resampling.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

# Seed used when the caller does not supply one
DEFAULT_SEED = 1001


@dataclass(frozen=True)
class Samples:
    """
    One resampled 2D dataset.

    x[i] and y[i] always come from the same source observation.
    """
    x: NDArray[np.floating[Any]]
    y: NDArray[np.floating[Any]]
    indices: NDArray[np.intp]

    def __len__(self) -> int:
        return len(self.indices)
