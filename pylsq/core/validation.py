"""
Input validation utilities for pylsq.

Two families live here:

Validators (check_*) follow the "fail fast, fail loud" principle. They
raise immediately with clear error messages and are used wherever an
exception is the contract: design construction and the matrix solver.

Coercers (coerce_*) implement the lenient side of the library. Fitting,
resampling and deviate generation never raise on malformed scalar
parameters; a NaN, missing or out-of-range value is replaced by a
documented default.
"""

import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylsq.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Rejects None and inputs that result in object dtype (indicating mixed
    types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    if array is None:
        raise ValidationError(f"{name}: expected array-like, got None")

    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number) and result.dtype != bool:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 2D array is square.

    Raises:
        DimensionError: If the array is not 2D or rows != columns
    """
    check_2d(array, name)
    rows, cols = array.shape
    if rows != cols:
        raise DimensionError(f"{name}: expected square matrix, got shape {array.shape}")


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Raises:
        ValidationError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


# === Lenient coercion ===


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +inf (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def as_number(value: Any) -> float | None:
    """
    Interpret value as a finite float, or None.

    None, NaN, infinities and anything float() rejects map to None.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(result):
        return None
    return result


def coerce_count(value: Any, default: int) -> int:
    """
    Coerce a set count (number of bags, B).

    Missing, NaN or values below 1 give `default`; anything else is
    rounded half-up.
    """
    number = as_number(value)
    if number is None or number < 1:
        return default
    return round_half_up(number)


def coerce_sample_size(value: Any, n: int) -> int:
    """
    Coerce a without-replacement sample size m for a dataset of size n.

    Missing, NaN, m < 1 or m > n give n // 2; anything else is rounded
    half-up (and never exceeds n).
    """
    number = as_number(value)
    if number is None or number < 1 or number > n:
        return n // 2
    return min(round_half_up(number), n)


def coerce_order(value: Any) -> int:
    """
    Coerce a polynomial order.

    Missing, NaN or values below 1 give 1; anything else is floored.
    """
    number = as_number(value)
    if number is None or number < 1:
        return 1
    return int(math.floor(number))
