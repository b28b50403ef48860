"""
CPU backends for least-squares fitting.

CPULinearBackend: closed-form simple linear regression with standard
errors, chi-squared and R².

CPUPolynomialBackend: polynomial least squares, either through the
normal equations (power sums, dense solve) or through QR of the
Vandermonde matrix.
"""

from __future__ import annotations

import math
from typing import Any, Literal

import numpy as np
from numpy.polynomial import polynomial as P
from scipy.linalg import hankel

from pylsq.core.result import Result
from pylsq.core.compute.timing import Timer
from pylsq.core.compute.linalg import condition_number, qr_solve, solve_dense
from pylsq.core.compute.tolerances import NORMAL_EQUATIONS_CONDITION_THRESHOLD
from pylsq.regression._common import LinearParams, PolynomialParams
from pylsq.regression.design import FitDesign

PolynomialMethod = Literal['normal', 'qr']


class CPULinearBackend:
    """
    Simple linear least squares, y = slope * x + intercept.

    Unit weights: the standard errors are scaled by the residual
    standard deviation sqrt(chi2 / (n - 2)).
    """

    @property
    def name(self) -> str:
        return 'cpu_linear'

    def solve(self, design: FitDesign) -> Result[LinearParams]:
        """
        Fit the line.

        Args:
            design: Validated design with n >= 3 and x spread

        Returns:
            Result containing LinearParams
        """
        timer = Timer()
        timer.start()

        x = design.x
        y = design.y
        n = design.n

        with timer.section('estimate'):
            sx = float(np.sum(x))
            sy = float(np.sum(y))
            t = x - sx / n
            st2 = float(t @ t)
            slope = float(t @ y) / st2
            intercept = (sy - sx * slope) / n

        with timer.section('statistics'):
            residuals = y - intercept - slope * x
            chi2 = float(residuals @ residuals)
            deviations = y - sy / n
            tss = float(deviations @ deviations)

            sigdat = math.sqrt(chi2 / (n - 2))
            slope_se = math.sqrt(1.0 / st2) * sigdat
            intercept_se = math.sqrt((1.0 + sx * sx / (n * st2)) / n) * sigdat

            if tss == 0.0:
                r_squared = 1.0 if chi2 == 0.0 else 0.0
            else:
                r_squared = 1.0 - chi2 / tss

        timer.stop()

        params = LinearParams(
            slope=slope,
            intercept=intercept,
            slope_se=slope_se,
            intercept_se=intercept_se,
            chi2=chi2,
            r_squared=r_squared,
            n=n,
        )

        return Result(
            params=params,
            info={'method': 'closed_form', 'n': n},
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )


def normal_equations(x: np.ndarray, y: np.ndarray, order: int) -> tuple[np.ndarray, np.ndarray]:
    """
    Assemble the normal equations for a polynomial of the given order.

    The matrix is symmetric (Hankel) with entry (i, j) = Σ x^(i+j); it is
    returned as a general dense matrix. The right-hand side is Σ x^i y.
    """
    m = order + 1
    powers = x[:, np.newaxis] ** np.arange(2 * order + 1)
    sums = powers.sum(axis=0)
    A = hankel(sums[:m], sums[order:])
    b = powers[:, :m].T @ y
    return A, b


class CPUPolynomialBackend:
    """
    Polynomial least squares.

    Args:
        method: 'normal' solves the normal equations with a dense LU
            solve; 'qr' solves the Vandermonde system by QR, which keeps
            the conditioning of X instead of squaring it.
    """

    def __init__(self, method: PolynomialMethod = 'normal'):
        self._method = method

    @property
    def name(self) -> str:
        return 'cpu_normal_equations' if self._method == 'normal' else 'cpu_qr'

    def solve(self, design: FitDesign) -> Result[PolynomialParams]:
        """
        Fit the polynomial.

        Args:
            design: Validated design with n > order + 1

        Returns:
            Result containing PolynomialParams

        Raises:
            SingularMatrixError: If the system has no unique solution
                (fewer distinct x values than coefficients)
        """
        timer = Timer()
        timer.start()

        x = design.x
        y = design.y
        n = design.n
        order = design.order
        warnings_list: list[str] = []
        info: dict[str, Any] = {'method': self._method, 'n': n, 'order': order}

        if self._method == 'normal':
            with timer.section('normal_equations'):
                A, b = normal_equations(x, y, order)
            with timer.section('solve'):
                coefficients = solve_dense(A, b, matrix_name='normal matrix')
            cond = condition_number(A)
            info['condition_number'] = cond
            if cond > NORMAL_EQUATIONS_CONDITION_THRESHOLD:
                warnings_list.append(
                    f"normal matrix is ill-conditioned (cond={cond:.3g}); "
                    f"coefficients may be inaccurate, consider method='qr'"
                )
        else:
            with timer.section('solve'):
                coefficients = qr_solve(np.vander(x, order + 1, increasing=True), y)

        with timer.section('residuals'):
            residuals = P.polyval(x, coefficients) - y
            rms = math.sqrt(float(residuals @ residuals) / n)

        timer.stop()

        params = PolynomialParams(
            coefficients=coefficients,
            rms=rms,
            order=order,
            n=n,
        )

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
