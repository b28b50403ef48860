"""
Exception hierarchy for pylsq.

All exceptions inherit from PyLSQError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Note that the fitting, resampling and deviate entry points never raise
for malformed input; they return documented degenerate results instead.
These exceptions surface from the validators and the matrix solver.
"""


class PyLSQError(Exception):
    """Base exception for all pylsq errors."""
    pass


class ValidationError(PyLSQError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class NumericalError(PyLSQError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when a linear system has no unique solution, e.g. a polynomial
    normal-equations matrix built from too few distinct x values.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        rank: Numerical rank, if computed
        expected_rank: Expected rank (typically the number of unknowns)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank


class IllConditionedWarning(RuntimeWarning):
    """
    A computation succeeded but is likely to have lost precision.

    Issued for high-order polynomial fits through the normal equations,
    whose condition number grows roughly geometrically with the order.
    """
    pass
