"""
Bootstrap (bagging) and sub-sampling (sub-bagging) of 1D and 2D data.

All index selection runs through a DeviateGenerator owned by a
Resampler. A Resampler continues its deviate sequence across calls, so
consecutive calls produce different sets while the whole run stays
reproducible from the seed. The module-level functions build a fresh
Resampler per call, which makes each call reproducible on its own.

Malformed input never raises: None, empty or mismatched data gives an
empty list, and bad counts fall back to their documented defaults.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylsq.core.exceptions import ValidationError
from pylsq.core.validation import (
    check_array, check_1d, coerce_count, coerce_sample_size, round_half_up,
)
from pylsq.deviates import DeviateGenerator, coerce_seed
from pylsq.resampling._common import DEFAULT_SEED, Samples

# Index mapping: u in (0, 1) spread over [-0.499, n - 1 + 0.499] then
# rounded, so every index gets an equal share of the unit interval.
_INDEX_PAD = 0.499


def _as_1d(data: ArrayLike | None) -> NDArray[np.floating[Any]] | None:
    """Convert to a non-empty 1D float array, or None when unusable."""
    try:
        arr = check_array(data, 'data')
        check_1d(arr, 'data')
    except ValidationError:
        return None
    if arr.shape[0] == 0:
        return None
    return arr


def _as_pair(
    x: ArrayLike | None,
    y: ArrayLike | None,
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]] | None:
    x_arr = _as_1d(x)
    y_arr = _as_1d(y)
    if x_arr is None or y_arr is None or x_arr.shape[0] != y_arr.shape[0]:
        return None
    return x_arr, y_arr


class Resampler:
    """
    Seeded generator of bagged and sub-bagged datasets.

    Args:
        seed: Seed for the owned DeviateGenerator, coerced as by
            coerce_seed(); `seed` reports the coerced value.

    Example:
        >>> resampler = Resampler(seed=7)
        >>> bags = resampler.sample_2d_with_replacement(x, y, num_sets=10)
        >>> len(bags), len(bags[0].x) == len(x)
        (10, True)
    """

    def __init__(self, seed: int = DEFAULT_SEED):
        self._deviates = DeviateGenerator()
        self.reseed(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def reseed(self, seed: int) -> None:
        """Restart the deviate sequence from `seed` (see coerce_seed())."""
        self._seed = coerce_seed(seed)
        self._deviates.uniform(self._seed, True)

    def _draw_index(self, n: int) -> int:
        u = self._deviates.uniform(self._seed, False)
        index = round_half_up(-_INDEX_PAD + u * (n - 1 + 2 * _INDEX_PAD))
        return min(max(index, 0), n - 1)

    def _indices_with_replacement(self, n: int, num_sets: int) -> list[NDArray[np.intp]]:
        return [
            np.array([self._draw_index(n) for _ in range(n)], dtype=np.intp)
            for _ in range(num_sets)
        ]

    def _indices_without_replacement(
        self, n: int, sample_size: int, num_sets: int
    ) -> list[NDArray[np.intp]]:
        output = []
        for _ in range(num_sets):
            chosen: list[int] = []
            seen: set[int] = set()
            while len(chosen) < sample_size:
                index = self._draw_index(n)
                if index not in seen:
                    seen.add(index)
                    chosen.append(index)
            output.append(np.array(chosen, dtype=np.intp))
        return output

    def sample_1d_with_replacement(
        self,
        data: ArrayLike,
        num_sets: int | None = None,
    ) -> list[NDArray[np.floating[Any]]]:
        """
        Bootstrap samples of a 1D dataset.

        Args:
            data: n observations
            num_sets: Number of sets B; defaults to n when missing or < 1

        Returns:
            B arrays of n values each, drawn with replacement (values may
            repeat). Empty list for empty or invalid data.
        """
        arr = _as_1d(data)
        if arr is None:
            return []
        n = arr.shape[0]
        num_sets = coerce_count(num_sets, n)
        return [arr[idx] for idx in self._indices_with_replacement(n, num_sets)]

    def sample_1d_without_replacement(
        self,
        data: ArrayLike,
        sample_size: int | None = None,
        num_sets: int | None = None,
    ) -> list[NDArray[np.floating[Any]]]:
        """
        Sub-samples of a 1D dataset.

        Args:
            data: n observations
            sample_size: Observations per set m; defaults to n // 2 when
                missing, < 1 or > n
            num_sets: Number of sets B; defaults to n when missing or < 1

        Returns:
            B arrays of m values, no source observation used twice in a
            set. Empty list for empty or invalid data.
        """
        arr = _as_1d(data)
        if arr is None:
            return []
        n = arr.shape[0]
        sample_size = coerce_sample_size(sample_size, n)
        num_sets = coerce_count(num_sets, n)
        return [
            arr[idx] for idx in self._indices_without_replacement(n, sample_size, num_sets)
        ]

    def sample_2d_with_replacement(
        self,
        x: ArrayLike,
        y: ArrayLike,
        num_sets: int | None = None,
    ) -> list[Samples]:
        """
        Bootstrap samples of paired (x, y) data.

        Returns:
            B Samples of n pairs each, drawn with replacement. Empty list
            for empty, invalid or mismatched x/y.
        """
        pair = _as_pair(x, y)
        if pair is None:
            return []
        x_arr, y_arr = pair
        n = x_arr.shape[0]
        num_sets = coerce_count(num_sets, n)
        return [
            Samples(x=x_arr[idx], y=y_arr[idx], indices=idx)
            for idx in self._indices_with_replacement(n, num_sets)
        ]

    def sample_2d_without_replacement(
        self,
        x: ArrayLike,
        y: ArrayLike,
        sample_size: int | None = None,
        num_sets: int | None = None,
    ) -> list[Samples]:
        """
        Sub-samples of paired (x, y) data.

        Returns:
            B Samples of m pairs each, no source pair used twice in a
            set. Empty list for empty, invalid or mismatched x/y.
        """
        pair = _as_pair(x, y)
        if pair is None:
            return []
        x_arr, y_arr = pair
        n = x_arr.shape[0]
        sample_size = coerce_sample_size(sample_size, n)
        num_sets = coerce_count(num_sets, n)
        return [
            Samples(x=x_arr[idx], y=y_arr[idx], indices=idx)
            for idx in self._indices_without_replacement(n, sample_size, num_sets)
        ]


def sample_1d_with_replacement(data, num_sets=None, *, seed=DEFAULT_SEED):
    """Bootstrap samples of 1D data from a fresh Resampler(seed)."""
    return Resampler(seed).sample_1d_with_replacement(data, num_sets)


def sample_1d_without_replacement(data, sample_size=None, num_sets=None, *, seed=DEFAULT_SEED):
    """Sub-samples of 1D data from a fresh Resampler(seed)."""
    return Resampler(seed).sample_1d_without_replacement(data, sample_size, num_sets)


def sample_2d_with_replacement(x, y, num_sets=None, *, seed=DEFAULT_SEED):
    """Bootstrap samples of (x, y) data from a fresh Resampler(seed)."""
    return Resampler(seed).sample_2d_with_replacement(x, y, num_sets)


def sample_2d_without_replacement(x, y, sample_size=None, num_sets=None, *, seed=DEFAULT_SEED):
    """Sub-samples of (x, y) data from a fresh Resampler(seed)."""
    return Resampler(seed).sample_2d_without_replacement(x, y, sample_size, num_sets)
