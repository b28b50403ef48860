"""
Regression solution types.

User-facing wrappers around Result[P]. Every solution exposes `kind`
(a FitKind), `coefficients` in increasing power order, `predict()` and
an R-style `summary()`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylsq.core.result import Result
from pylsq.regression._common import BaggedParams, FitKind, LinearParams, PolynomialParams
from pylsq.regression.model import polynomial_predictor


@dataclass
class LinearSolution:
    """
    Simple linear regression results.

    A degenerate solution (too few points, mismatched or constant x) has
    every statistic zero and states the reason in `warnings`.
    """
    _result: Result[LinearParams]

    kind = FitKind.LINEAR

    @property
    def slope(self) -> float:
        return self._result.params.slope

    @property
    def intercept(self) -> float:
        return self._result.params.intercept

    @property
    def slope_se(self) -> float:
        """Standard error of the slope."""
        return self._result.params.slope_se

    @property
    def intercept_se(self) -> float:
        """Standard error of the intercept."""
        return self._result.params.intercept_se

    @property
    def chi2(self) -> float:
        """Residual sum of squares."""
        return self._result.params.chi2

    @property
    def r_squared(self) -> float:
        return self._result.params.r_squared

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """[intercept, slope]."""
        return np.array([self.intercept, self.slope])

    @property
    def is_degenerate(self) -> bool:
        return self._result.info.get('method') == 'degenerate'

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def predict(self, x: ArrayLike) -> float | NDArray[np.floating[Any]]:
        return polynomial_predictor(x, self.coefficients)

    def summary(self) -> str:
        """Generate R-style summary output."""
        lines = [
            "Simple Linear Regression",
            "=" * 60,
            f"Observations: {self.n}",
            f"R-squared: {self.r_squared:.6f}",
            f"Chi-squared: {self.chi2:.6g}",
            "",
            f"{'':<12} {'Estimate':>14} {'Std.Error':>12}",
            "-" * 60,
            f"{'(Intercept)':<12} {self.intercept:14.6f} {self.intercept_se:12.6f}",
            f"{'x':<12} {self.slope:14.6f} {self.slope_se:12.6f}",
            "-" * 60,
            f"Backend: {self.backend_name}",
        ]
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSolution(n={self.n}, slope={self.slope:.4f}, "
            f"intercept={self.intercept:.4f}, r_squared={self.r_squared:.4f})"
        )


@dataclass
class BaggedSolution:
    """
    Bagged or sub-bagged linear regression results.

    slope and intercept average the per-set fits, which are kept in
    `fits` for variance inspection.
    """
    _result: Result[BaggedParams]

    kind = FitKind.BAGGED

    @property
    def slope(self) -> float:
        return self._result.params.slope

    @property
    def intercept(self) -> float:
        return self._result.params.intercept

    @property
    def fits(self) -> tuple[LinearSolution, ...]:
        return self._result.params.fits

    @property
    def replace(self) -> bool:
        """True for bagging (with replacement), False for sub-bagging."""
        return self._result.params.replace

    @property
    def sample_size(self) -> int:
        return self._result.params.sample_size

    @property
    def num_sets(self) -> int:
        return self._result.params.num_sets

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """[intercept, slope]."""
        return np.array([self.intercept, self.slope])

    @property
    def slope_spread(self) -> float:
        """Sample standard deviation of the per-set slopes (0 for fewer than 2 sets)."""
        if len(self.fits) < 2:
            return 0.0
        return float(np.std([f.slope for f in self.fits], ddof=1))

    @property
    def intercept_spread(self) -> float:
        """Sample standard deviation of the per-set intercepts (0 for fewer than 2 sets)."""
        if len(self.fits) < 2:
            return 0.0
        return float(np.std([f.intercept for f in self.fits], ddof=1))

    @property
    def is_degenerate(self) -> bool:
        return self._result.info.get('method') == 'degenerate'

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def predict(self, x: ArrayLike) -> float | NDArray[np.floating[Any]]:
        return polynomial_predictor(x, self.coefficients)

    def summary(self) -> str:
        title = "BAGGED" if self.replace else "SUB-BAGGED"
        lines = [
            f"{title} LINEAR LEAST SQUARES",
            "=" * 60,
            f"Sets: {self.num_sets}    Sample size: {self.sample_size}",
            "",
            f"{'':<12} {'Average':>14} {'Spread':>12}",
            "-" * 60,
            f"{'(Intercept)':<12} {self.intercept:14.6f} {self.intercept_spread:12.6f}",
            f"{'x':<12} {self.slope:14.6f} {self.slope_spread:12.6f}",
            "-" * 60,
        ]
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"BaggedSolution(num_sets={self.num_sets}, replace={self.replace}, "
            f"slope={self.slope:.4f}, intercept={self.intercept:.4f})"
        )


@dataclass
class PolynomialSolution:
    """
    Polynomial least-squares results.

    A degenerate solution has no coefficients, zero rms and evaluates
    to 0 everywhere.
    """
    _result: Result[PolynomialParams]

    kind = FitKind.POLYNOMIAL

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """coefficients[i] multiplies x**i."""
        return self._result.params.coefficients

    @property
    def rms(self) -> float:
        """Root-mean-square residual over the fitted data."""
        return self._result.params.rms

    @property
    def order(self) -> int:
        return self._result.params.order

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def is_degenerate(self) -> bool:
        return self._result.info.get('method') == 'degenerate'

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def predict(self, x: ArrayLike) -> float | NDArray[np.floating[Any]]:
        return polynomial_predictor(x, self.coefficients)

    def summary(self) -> str:
        lines = [
            f"Polynomial Least Squares (order {self.order})",
            "=" * 60,
            f"Observations: {self.n}",
            f"RMS error: {self.rms:.6g}",
            f"Method: {self._result.info.get('method')}",
            "",
            "Coefficients:",
            "-" * 60,
        ]
        for i, coef in enumerate(self.coefficients):
            lines.append(f"  x^{i}: {coef:14.6f}")
        lines.append("-" * 60)
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"PolynomialSolution(order={self.order}, n={self.n}, rms={self.rms:.4g})"
