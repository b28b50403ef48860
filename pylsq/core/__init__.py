"""
Core infrastructure for pylsq.

Shared abstractions used by the deviates, resampling and regression
subpackages.

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception and warning hierarchy
    validation: Strict validators and lenient coercers
    protocols: Backend protocol
    compute: Linear algebra, timing, tolerances
"""

from pylsq.core.protocols import Backend
from pylsq.core.result import Result
from pylsq.core.exceptions import (
    PyLSQError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    IllConditionedWarning,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyLSQError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    "IllConditionedWarning",
]
