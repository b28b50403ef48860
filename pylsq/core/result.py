"""
Generic result container for all pylsq computations.

The Result class provides a standardized envelope that all domain-specific
results use: linear, bagged and polynomial fits all carry their payload
in the same frozen wrapper, together with timing and any non-fatal
warnings (for example the reason a fit fell back to its degenerate result).

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, n, order, ...)
    - timing is optional (degenerate results are not timed)
    - Immutable (frozen=True) so a result can be shared between callers
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for fitting computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (slope, coefficients, ...)
        info: Structured metadata (method, sample count, order)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=LinearParams(slope=2.0, intercept=1.0, ...),
        ...     info={'method': 'closed_form', 'n': 4},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_linear'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
