"""
Stateful polynomial estimator.

PolynomialEstimator remembers the coefficients of its last successful
fit so the curve can be evaluated repeatedly (e.g. while plotting)
without carrying the solution around.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylsq.regression.backends.cpu import PolynomialMethod
from pylsq.regression.model import polynomial_predictor
from pylsq.regression.solution import PolynomialSolution
from pylsq.regression.solvers import fit_polynomial


class PolynomialEstimator:
    """
    Polynomial least squares with a cached fit.

    Args:
        method: 'normal' (normal equations) or 'qr'

    Example:
        >>> est = PolynomialEstimator()
        >>> est.evaluate(2.0)
        0.0
        >>> sol = est.fit([0, 1, 2, 3, 4], [1, 4, 9, 16, 25], order=2)
        >>> round(est.evaluate(5.0), 9)
        36.0
    """

    def __init__(self, method: PolynomialMethod = 'normal'):
        self._method = method
        self._coefficients: NDArray[np.floating[Any]] = np.empty(0)
        self._order = 0

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Copy of the cached coefficients (empty before the first fit)."""
        return self._coefficients.copy()

    @property
    def order(self) -> int:
        """Order of the cached fit, 0 before the first fit."""
        return self._order

    @property
    def is_fitted(self) -> bool:
        return self._coefficients.size > 0

    def fit(self, x: ArrayLike, y: ArrayLike, order: int = 1) -> PolynomialSolution:
        """
        Fit and cache a polynomial; see fit_polynomial().

        A degenerate fit is returned as-is and leaves the cache holding
        the previous coefficients. SingularMatrixError propagates and
        also leaves the cache untouched.
        """
        solution = fit_polynomial(x, y, order, method=self._method)
        if not solution.is_degenerate:
            self._coefficients = solution.coefficients.copy()
            self._order = solution.order
        return solution

    def evaluate(self, x: ArrayLike) -> float | NDArray[np.floating[Any]]:
        """
        Evaluate the cached polynomial (Horner's method).

        Returns 0 (zeros for array input) before any successful fit.
        """
        return polynomial_predictor(x, self._coefficients)

    def reset(self) -> None:
        """Forget the cached fit."""
        self._coefficients = np.empty(0)
        self._order = 0
