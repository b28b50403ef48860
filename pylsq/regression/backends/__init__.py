"""
Regression backends.

Available backends:
    CPULinearBackend: closed-form simple linear regression
    CPUPolynomialBackend: polynomial least squares (normal equations or QR)
"""

from pylsq.regression.backends.cpu import CPULinearBackend, CPUPolynomialBackend

__all__ = [
    "CPULinearBackend",
    "CPUPolynomialBackend",
]
