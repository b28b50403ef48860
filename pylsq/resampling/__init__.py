"""
Bagging and sub-bagging.

Draws bootstrap samples (with replacement, same size as the data) and
sub-samples (without replacement, smaller size) using the seeded
DeviateGenerator.

Usage:
    from pylsq.resampling import Resampler, sample_2d_with_replacement

    bags = sample_2d_with_replacement(x, y, num_sets=6, seed=1001)

    resampler = Resampler(seed=42)
    first = resampler.sample_2d_without_replacement(x, y, 20, 6)
    second = resampler.sample_2d_without_replacement(x, y, 20, 6)  # continues
"""

from pylsq.resampling._common import DEFAULT_SEED, Samples
from pylsq.resampling.sampler import (
    Resampler,
    sample_1d_with_replacement,
    sample_1d_without_replacement,
    sample_2d_with_replacement,
    sample_2d_without_replacement,
)

__all__ = [
    "DEFAULT_SEED",
    "Samples",
    "Resampler",
    "sample_1d_with_replacement",
    "sample_1d_without_replacement",
    "sample_2d_with_replacement",
    "sample_2d_without_replacement",
]
