"""
Dense square linear system solver.

solve_dense() is the matrix solver collaborator of the polynomial
estimator: given an n x n coefficient matrix and a length-n right-hand
side it returns the solution vector, or raises SingularMatrixError when
the system is singular or numerically singular. It never returns a
coefficient vector that LAPACK itself flagged as unreliable.
"""

import warnings
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.linalg import LinAlgError, LinAlgWarning, solve

from pylsq.core.exceptions import SingularMatrixError
from pylsq.core.validation import (
    check_array, check_square, check_1d, check_finite, check_consistent_length,
)


def condition_number(A: NDArray[np.floating[Any]]) -> float:
    """2-norm condition number of A; inf for singular matrices."""
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.linalg.cond(A))


def solve_dense(
    A: ArrayLike,
    b: ArrayLike,
    *,
    matrix_name: str = 'A',
) -> NDArray[np.floating[Any]]:
    """
    Solve A x = b for a general dense square matrix (LU with partial pivoting).

    Args:
        A: Coefficient matrix (n x n)
        b: Right-hand side (n,)
        matrix_name: Name used in error messages

    Returns:
        Solution vector x (n,)

    Raises:
        ValidationError: If inputs are non-numeric or non-finite
        DimensionError: If A is not square or b does not match
        SingularMatrixError: If A is singular, or LAPACK reports a
            reciprocal condition number below machine precision
    """
    A_arr = check_array(A, matrix_name)
    b_arr = check_array(b, 'b')
    check_square(A_arr, matrix_name)
    check_1d(b_arr, 'b')
    check_consistent_length(A_arr, b_arr, names=(matrix_name, 'b'))
    check_finite(A_arr, matrix_name)
    check_finite(b_arr, 'b')

    n = A_arr.shape[0]

    # scipy reports near-singularity as a warning; here it is an error
    with warnings.catch_warnings():
        warnings.simplefilter('error', LinAlgWarning)
        try:
            return solve(A_arr, b_arr, assume_a='gen')
        except (LinAlgError, LinAlgWarning) as e:
            raise SingularMatrixError(
                f"{matrix_name} is singular or nearly singular ({e})",
                matrix_name=matrix_name,
                condition_number=condition_number(A_arr),
                rank=int(np.linalg.matrix_rank(A_arr)),
                expected_rank=n,
            ) from e
