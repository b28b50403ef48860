"""
Linear algebra kernels for pylsq.

All functions use NumPy/SciPy (LAPACK under the hood) and raise
SingularMatrixError instead of returning unreliable solutions.

Submodules:
    solve: dense square solver (LU), used for the normal equations
    qr: QR decomposition and QR least squares
"""

from pylsq.core.compute.linalg.qr import QRResult, qr_cpu, qr_solve
from pylsq.core.compute.linalg.solve import condition_number, solve_dense

__all__ = [
    "QRResult",
    "qr_cpu",
    "qr_solve",
    "condition_number",
    "solve_dense",
]
