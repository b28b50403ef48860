"""
Fit design.

FitDesign holds validated x/y data for one fit. Building it is the
single place where raw caller input is checked; estimators trust a
design once they have one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylsq.core.exceptions import ValidationError
from pylsq.core.validation import (
    check_array, check_1d, check_finite, check_consistent_length, check_min_samples,
)


@dataclass(frozen=True)
class FitDesign:
    """
    Validated sample set for a least-squares fit.

    Construction:
        FitDesign.build(x, y, min_samples=3)            # simple linear
        FitDesign.build(x, y, min_samples=4, order=2)   # quadratic
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    _order: int = 1

    @classmethod
    def build(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        min_samples: int,
        order: int = 1,
        require_spread: bool = False,
    ) -> FitDesign:
        """
        Validate x and y and build a design.

        Args:
            x: Independent variable, 1D
            y: Dependent variable, 1D, same length as x
            min_samples: Fewest observations the estimator accepts
            order: Polynomial order (1 for a line)
            require_spread: Reject x with a single distinct value

        Raises:
            ValidationError: On None, non-numeric, non-finite, too-short
                or constant-x input
            DimensionError: On non-1D or mismatched input
        """
        x_arr = check_array(x, 'x')
        y_arr = check_array(y, 'y')
        check_1d(x_arr, 'x')
        check_1d(y_arr, 'y')
        check_consistent_length(x_arr, y_arr, names=('x', 'y'))
        check_min_samples(x_arr, min_samples, 'x')
        check_finite(x_arr, 'x')
        check_finite(y_arr, 'y')
        if require_spread and np.ptp(x_arr) == 0:
            raise ValidationError("x: all values are equal, slope is undefined")

        return cls(_x=x_arr, _y=y_arr, _n=int(x_arr.shape[0]), _order=order)

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def order(self) -> int:
        return self._order
