"""
Predictor and loss contract for externally trained polynomial models.

A gradient-trained model of the form a0 + a1*x + a2*x^2 + ... is
trained outside this package. It consumes the same per-sample predictor
and squared-residual loss that the closed-form estimators use, so
trained and least-squares coefficients can be compared directly.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.polynomial import polynomial as P
from numpy.typing import ArrayLike, NDArray


def polynomial_predictor(
    x: ArrayLike,
    coefficients: ArrayLike,
) -> float | NDArray[np.floating[Any]]:
    """
    Evaluate sum(coefficients[i] * x**i) by nested multiplication.

    Args:
        x: Scalar or array of evaluation points
        coefficients: Coefficients in increasing power order

    Returns:
        float for scalar x, array for array x. Zero when there are no
        coefficients.
    """
    x_arr = np.asarray(x, dtype=np.float64)
    c = np.asarray(coefficients, dtype=np.float64).ravel()

    if c.size == 0:
        value = np.zeros_like(x_arr)
    else:
        value = P.polyval(x_arr, c)

    if np.ndim(value) == 0:
        return float(value)
    return value


def squared_residual_loss(
    prediction: ArrayLike,
    actual: ArrayLike,
) -> float | NDArray[np.floating[Any]]:
    """Square of (actual - prediction), elementwise for arrays."""
    delta = np.asarray(actual, dtype=np.float64) - np.asarray(prediction, dtype=np.float64)
    loss = delta * delta
    if np.ndim(loss) == 0:
        return float(loss)
    return loss
