"""
Compute infrastructure: linear algebra kernels, timing, tolerances.
"""

from pylsq.core.compute.timing import Timer
from pylsq.core.compute.linalg import solve_dense, qr_solve

__all__ = [
    "Timer",
    "solve_dense",
    "qr_solve",
]
