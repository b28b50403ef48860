"""
Common data structures for regression.

FitKind tags every solution so callers dispatch on `solution.kind`
instead of probing attributes. LinearParams, PolynomialParams and
BaggedParams are the payloads wrapped by Result[P].
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from pylsq.regression.solution import LinearSolution


class FitKind(Enum):
    """Which estimator produced a solution."""
    LINEAR = "linear"
    BAGGED = "bagged"
    POLYNOMIAL = "polynomial"


@dataclass(frozen=True)
class LinearParams:
    """
    Payload for a simple linear fit y = slope * x + intercept.

    chi2 is the residual sum of squares (unit weights). r_squared is the
    coefficient of determination. Degenerate fits have every field zero.
    """
    slope: float
    intercept: float
    slope_se: float
    intercept_se: float
    chi2: float
    r_squared: float
    n: int


@dataclass(frozen=True)
class PolynomialParams:
    """
    Payload for a polynomial fit.

    coefficients[i] multiplies x**i. Degenerate fits have no
    coefficients and zero rms.
    """
    coefficients: NDArray[np.floating[Any]]
    rms: float
    order: int
    n: int


@dataclass(frozen=True)
class BaggedParams:
    """
    Payload for a bagged (or sub-bagged) linear fit.

    slope and intercept are the arithmetic means over `fits`, which holds
    every per-set LinearSolution in resampling order.
    """
    slope: float
    intercept: float
    fits: tuple['LinearSolution', ...]
    replace: bool
    sample_size: int
    num_sets: int
