"""
Solver dispatch for regression.

Public entry points:
    fit_linear(x, y) -> LinearSolution
    fit_polynomial(x, y, order) -> PolynomialSolution
    bag_fit(x, y, num_sets) -> BaggedSolution
    subbag_fit(x, y, sample_size, num_sets) -> BaggedSolution

Malformed data never raises here. Each entry point validates through
FitDesign and, if validation fails, returns its degenerate solution
with the validator's message in `warnings`. Numerical failure of the
polynomial solve (SingularMatrixError) does propagate.
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from pylsq.core.exceptions import IllConditionedWarning, ValidationError
from pylsq.core.protocols import Backend
from pylsq.core.result import Result
from pylsq.core.compute.timing import Timer
from pylsq.core.compute.tolerances import MAX_RECOMMENDED_ORDER
from pylsq.core.validation import coerce_count, coerce_order, coerce_sample_size
from pylsq.regression._common import BaggedParams, LinearParams, PolynomialParams
from pylsq.regression.backends.cpu import (
    CPULinearBackend, CPUPolynomialBackend, PolynomialMethod,
)
from pylsq.regression.design import FitDesign
from pylsq.regression.solution import BaggedSolution, LinearSolution, PolynomialSolution
from pylsq.resampling import DEFAULT_SEED, Resampler

MIN_LINEAR_SAMPLES = 3


def _degenerate(params, reason: str, info: dict[str, Any] | None = None) -> Result:
    return Result(
        params=params,
        info={'method': 'degenerate', **(info or {})},
        timing=None,
        backend_name='none',
        warnings=(reason,),
    )


def _degenerate_linear(reason: str) -> LinearSolution:
    params = LinearParams(
        slope=0.0, intercept=0.0, slope_se=0.0, intercept_se=0.0,
        chi2=0.0, r_squared=0.0, n=0,
    )
    return LinearSolution(_result=_degenerate(params, reason))


def _get_backend(method: str) -> Backend[FitDesign, PolynomialParams]:
    if method in ('normal', 'qr'):
        return CPUPolynomialBackend(method)
    raise ValidationError(f"Unknown method: {method!r} (expected 'normal' or 'qr')")


def fit_linear(x: ArrayLike, y: ArrayLike) -> LinearSolution:
    """
    Fit y = slope * x + intercept by least squares.

    Args:
        x: x-coordinates, at least three
        y: y-coordinates, same length as x

    Returns:
        LinearSolution with slope, intercept, their standard errors,
        chi-squared and R². Fewer than three points, mismatched lengths,
        non-finite values or a constant x give the all-zero degenerate
        solution.

    Example:
        >>> sol = fit_linear([0, 1, 2, 3], [1, 3, 5, 7])
        >>> sol.slope, sol.intercept, sol.r_squared
        (2.0, 1.0, 1.0)
    """
    try:
        design = FitDesign.build(x, y, min_samples=MIN_LINEAR_SAMPLES, require_spread=True)
    except ValidationError as e:
        return _degenerate_linear(str(e))

    backend: Backend[FitDesign, LinearParams] = CPULinearBackend()
    return LinearSolution(_result=backend.solve(design))


def fit_polynomial(
    x: ArrayLike,
    y: ArrayLike,
    order: int = 1,
    *,
    method: PolynomialMethod = 'normal',
) -> PolynomialSolution:
    """
    Fit a polynomial of the given order by least squares.

    Args:
        x: x-coordinates
        y: y-coordinates, same length as x
        order: Polynomial order; floored, and NaN or values below 1
            give 1. Orders above 5 issue an IllConditionedWarning.
        method: 'normal' (normal equations, default) or 'qr'

    Returns:
        PolynomialSolution. Unless there are more than order + 1 points
        the solution is degenerate: no coefficients and zero rms.

    Raises:
        SingularMatrixError: If the fit has no unique solution, e.g.
            fewer distinct x values than coefficients
        ValidationError: If method is unknown
    """
    backend = _get_backend(method)
    order = coerce_order(order)

    try:
        design = FitDesign.build(x, y, min_samples=order + 2, order=order)
    except ValidationError as e:
        params = PolynomialParams(coefficients=np.empty(0), rms=0.0, order=order, n=0)
        return PolynomialSolution(_result=_degenerate(params, str(e), {'order': order}))

    if order > MAX_RECOMMENDED_ORDER:
        warnings.warn(
            f"polynomial order {order} exceeds {MAX_RECOMMENDED_ORDER}; "
            f"least-squares coefficients may lose precision",
            IllConditionedWarning,
            stacklevel=2,
        )

    return PolynomialSolution(_result=backend.solve(design))


def _bagged(
    x: ArrayLike,
    y: ArrayLike,
    replace: bool,
    sample_size: Any,
    num_sets: Any,
    seed: int,
    resampler: Resampler | None,
) -> BaggedSolution:
    try:
        design = FitDesign.build(x, y, min_samples=MIN_LINEAR_SAMPLES)
    except ValidationError as e:
        params = BaggedParams(
            slope=0.0, intercept=0.0, fits=(), replace=replace, sample_size=0, num_sets=0,
        )
        return BaggedSolution(_result=_degenerate(params, str(e)))

    n = design.n
    num_sets = coerce_count(num_sets, n)
    sample_size = n if replace else coerce_sample_size(sample_size, n)
    if resampler is None:
        resampler = Resampler(seed)

    timer = Timer()
    timer.start()

    with timer.section('resample'):
        if replace:
            bags = resampler.sample_2d_with_replacement(design.x, design.y, num_sets)
        else:
            bags = resampler.sample_2d_without_replacement(
                design.x, design.y, sample_size, num_sets
            )

    with timer.section('fit'):
        fits = tuple(fit_linear(bag.x, bag.y) for bag in bags)

    slope = sum(f.slope for f in fits) / num_sets
    intercept = sum(f.intercept for f in fits) / num_sets

    timer.stop()

    warnings_list: list[str] = []
    n_degenerate = sum(1 for f in fits if f.is_degenerate)
    if n_degenerate:
        warnings_list.append(
            f"{n_degenerate} of {num_sets} resampled sets gave a degenerate fit "
            f"and contribute zero slope and intercept to the average"
        )

    params = BaggedParams(
        slope=slope,
        intercept=intercept,
        fits=fits,
        replace=replace,
        sample_size=sample_size,
        num_sets=num_sets,
    )

    return BaggedSolution(_result=Result(
        params=params,
        info={
            'method': 'bagging' if replace else 'subbagging',
            'n': n,
            'seed': resampler.seed,
        },
        timing=timer.result(),
        backend_name='cpu_linear',
        warnings=tuple(warnings_list),
    ))


def bag_fit(
    x: ArrayLike,
    y: ArrayLike,
    num_sets: int | None = None,
    *,
    seed: int = DEFAULT_SEED,
    resampler: Resampler | None = None,
) -> BaggedSolution:
    """
    Linear least squares averaged over bootstrap samples.

    Args:
        x: x-coordinates, at least three
        y: y-coordinates, same length as x
        num_sets: Number of bags B; defaults to n when missing or < 1
        seed: Seed for a fresh Resampler (ignored if `resampler` is given)
        resampler: Resampler to draw from; its sequence is continued

    Returns:
        BaggedSolution with the mean slope and intercept of the B fits,
        and the fits themselves. Fewer than three points gives zero
        slope and intercept and no fits.
    """
    return _bagged(x, y, True, None, num_sets, seed, resampler)


def subbag_fit(
    x: ArrayLike,
    y: ArrayLike,
    sample_size: int | None = None,
    num_sets: int | None = None,
    *,
    seed: int = DEFAULT_SEED,
    resampler: Resampler | None = None,
) -> BaggedSolution:
    """
    Linear least squares averaged over sub-samples drawn without replacement.

    Args:
        x: x-coordinates, at least three
        y: y-coordinates, same length as x
        sample_size: Points per sub-sample m; defaults to n // 2 when
            missing, < 1 or > n
        num_sets: Number of sub-samples B; defaults to n when missing or < 1
        seed: Seed for a fresh Resampler (ignored if `resampler` is given)
        resampler: Resampler to draw from; its sequence is continued

    Returns:
        BaggedSolution, as for bag_fit(). Sub-samples smaller than three
        points give degenerate per-set fits (noted in `warnings`).
    """
    return _bagged(x, y, False, sample_size, num_sets, seed, resampler)
