"""
Least-squares regression.

Simple linear regression with uncertainty statistics, polynomial least
squares, and bagged / sub-bagged linear fits.

Public API:
    fit_linear(x, y) -> LinearSolution
    fit_polynomial(x, y, order) -> PolynomialSolution
    PolynomialEstimator: polynomial fit with a cached curve
    bag_fit(x, y, num_sets) -> BaggedSolution
    subbag_fit(x, y, sample_size, num_sets) -> BaggedSolution
    rms_error(solution, x, y) -> float

Every solution carries `kind` (FitKind) for dispatch.

Example:
    >>> from pylsq.regression import fit_linear, bag_fit
    >>> line = fit_linear(x, y)
    >>> bagged = bag_fit(x, y, num_sets=6, seed=1001)
    >>> print(bagged.summary())
"""

from pylsq.regression._common import (
    BaggedParams, FitKind, LinearParams, PolynomialParams,
)
from pylsq.regression.design import FitDesign
from pylsq.regression.solution import BaggedSolution, LinearSolution, PolynomialSolution
from pylsq.regression.solvers import bag_fit, fit_linear, fit_polynomial, subbag_fit
from pylsq.regression.polynomial import PolynomialEstimator
from pylsq.regression.diagnostics import rms_error
from pylsq.regression.model import polynomial_predictor, squared_residual_loss

__all__ = [
    "fit_linear",
    "fit_polynomial",
    "bag_fit",
    "subbag_fit",
    "PolynomialEstimator",
    "rms_error",
    "polynomial_predictor",
    "squared_residual_loss",
    "FitKind",
    "FitDesign",
    "LinearSolution",
    "BaggedSolution",
    "PolynomialSolution",
    "LinearParams",
    "PolynomialParams",
    "BaggedParams",
]
