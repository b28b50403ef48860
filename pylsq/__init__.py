"""
pylsq: least-squares fitting with bagging.

Submodules:
    regression: simple linear, polynomial and bagged least squares
    resampling: bootstrap and sub-sampling of 1D and 2D data
    deviates: seedable uniform, exponential, normal, gamma and logistic deviates
    core: results, exceptions, validation, linear algebra
"""

__version__ = "0.1.0"

from pylsq import deviates
from pylsq import resampling
from pylsq import regression

__all__ = [
    "__version__",
    "deviates",
    "resampling",
    "regression",
]
