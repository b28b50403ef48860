"""
Fit diagnostics dispatched on FitKind.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike

from pylsq.core.exceptions import ValidationError
from pylsq.regression._common import FitKind
from pylsq.regression.design import FitDesign
from pylsq.regression.solution import BaggedSolution, LinearSolution, PolynomialSolution

Solution = LinearSolution | BaggedSolution | PolynomialSolution


def rms_error(solution: Solution, x: ArrayLike, y: ArrayLike) -> float:
    """
    Root-mean-square error of a fit.

    Linear and bagged fits are evaluated against (x, y). Polynomial fits
    already carry the RMS over the data they were fitted to, which is
    returned as is.

    Returns:
        RMS error; 0.0 if (x, y) is empty or malformed.

    Raises:
        TypeError: If `solution` is not a pylsq regression solution
    """
    kind = getattr(solution, 'kind', None)

    if kind is FitKind.POLYNOMIAL:
        return solution.rms

    if kind in (FitKind.LINEAR, FitKind.BAGGED):
        try:
            design = FitDesign.build(x, y, min_samples=1)
        except ValidationError:
            return 0.0
        d = np.asarray(solution.predict(design.x)) - design.y
        return math.sqrt(float(d @ d) / design.n)

    raise TypeError(f"Not a regression solution: {type(solution).__name__}")
