"""
Tolerance tiers for numerical validation.

Defines precision expectations for the fitting paths:
- exact data through QR: machine precision
- statistical checks on deviates and bagged averages

Used by the test suite and by the polynomial estimator's conditioning
warning.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# QR least squares, well-conditioned design
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, orthogonal factorization',
)

# Sample moments of pseudo-random deviates and ensemble averages
STATISTICAL = ToleranceTier(
    rtol=5e-2,
    atol=5e-2,
    name='statistical',
    description='Sampling tolerance for Monte Carlo moment checks',
)

# Polynomial orders above this lose too much precision through X'X
MAX_RECOMMENDED_ORDER = 5

# Condition number of the normal matrix past which a fit is reported as
# ill-conditioned (about half of float64 precision remaining).
NORMAL_EQUATIONS_CONDITION_THRESHOLD = 1e8
