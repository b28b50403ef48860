"""
Seedable deviate generator.

DeviateGenerator produces uniform deviates from the Park-Miller minimal
standard generator (multiplier 16807, modulus 2^31 - 1, Schrage's
decomposition so the product never overflows) with a Bays-Durham shuffle
table to break up short-range serial correlation. Exponential, normal,
gamma and logistic deviates are built on top of uniform().

Every method takes the sequence seed and a `reinitialize` flag. Pass
True on the first call of a sequence, then False to continue it:

    >>> gen = DeviateGenerator()
    >>> first = gen.uniform(1001, True)
    >>> second = gen.uniform(1001, False)

The generator never raises on bad parameters. NaN, infinite and
out-of-domain values are replaced by the defaults documented on each
method.
"""

from __future__ import annotations

import math
from typing import Any

from pylsq.core.validation import as_number

# Park-Miller / Schrage constants
IA = 16807
IM = 2147483647
AM = 1.0 / IM
IQ = 127773
IR = 2836

# Bays-Durham shuffle
NTAB = 32
NDIV = 1 + (IM - 1) // NTAB
WARMUP = 8

# Largest value uniform() returns
EPS = 1.2e-7
RNMX = 1.0 - EPS

# sqrt(3) / pi: scales the standard logistic to unit standard deviation
LOGISTIC_SCALE = 0.551328895421792050

GAMMA_RATE_FLOOR = 1e-4
GAMMA_DEFAULT_RATE = 0.5


def coerce_seed(seed: Any) -> int:
    """
    Map a seed onto the generator state range 1 .. IM - 1.

    NaN, non-numbers and values below 1 give 1. Other values are floored
    and reduced modulo IM; a multiple of IM would pin the state at zero,
    so it gives 1 as well.
    """
    number = as_number(seed)
    if number is None or number < 1:
        return 1
    return int(math.floor(number)) % IM or 1


def _coerce_location(mean: Any) -> float:
    number = as_number(mean)
    return 0.0 if number is None else number


def _coerce_scale(stddev: Any) -> float:
    number = as_number(stddev)
    if number is None or number <= 0.0:
        return 1.0
    return number


class DeviateGenerator:
    """
    Stateful pseudo-random deviate generator.

    State persists across calls within one sequence and is discarded when
    a method is called with reinitialize=True. Each instance is owned by
    a single caller; instances share nothing.

    Attributes cached per sequence:
        uniform: generator index, shuffle table, last shuffle output
        normal: mean, stddev, and the spare deviate of the last polar pair
        gamma: shape, rate, and whether the shape was shifted by one
        logistic: mean, stddev
    """

    def __init__(self):
        self._idum = 0
        self._iy = 0
        self._iv: list[int] = []

        self._normal_mean = 0.0
        self._normal_stddev = 1.0
        self._spare: float | None = None

        self._gamma_shape = 1.0
        self._gamma_rate = GAMMA_DEFAULT_RATE
        self._gamma_shifted = False

        self._logistic_mean = 0.0
        self._logistic_stddev = 1.0

    @property
    def seeded(self) -> bool:
        """True once the shuffle table has been filled."""
        return bool(self._iv)

    def _next_idum(self) -> int:
        # Schrage: IA * idum mod IM without overflowing 32 bits
        k = self._idum // IQ
        self._idum = IA * (self._idum - k * IQ) - IR * k
        if self._idum < 0:
            self._idum += IM
        return self._idum

    def _seed(self, seed: Any) -> None:
        self._idum = coerce_seed(seed)
        table = [0] * NTAB
        for j in range(NTAB + WARMUP - 1, -1, -1):
            value = self._next_idum()
            if j < NTAB:
                table[j] = value
        self._iv = table
        self._iy = table[0]

    def uniform(self, seed: Any, reinitialize: bool = True) -> float:
        """
        Return a uniform deviate in the open interval (0, 1).

        Args:
            seed: Sequence seed. Values below 1, NaN and non-numbers are
                treated as 1; fractional seeds are floored. Only read
                when the sequence is (re)initialized.
            reinitialize: True to discard all state and restart the
                sequence from `seed`; False to continue it. Continuing an
                instance that was never seeded seeds it from `seed`.

        Returns:
            Deviate strictly between 0 and 1 (at most 1 - 1.2e-7).
        """
        if reinitialize or not self._iv:
            self._seed(seed)

        value = self._next_idum()
        j = self._iy // NDIV
        self._iy = self._iv[j]
        self._iv[j] = value

        return min(AM * self._iy, RNMX)

    def exponential(self, seed: Any, reinitialize: bool = True) -> float:
        """
        Return an exponential deviate with unit mean.

        Computed as -ln(u) for the first nonzero uniform deviate.
        """
        u = self.uniform(seed, reinitialize)
        while u == 0.0:
            u = self.uniform(seed, False)
        return -math.log(u)

    def _polar_pair(self, seed: Any, reinitialize: bool) -> tuple[float, float]:
        # Box-Muller polar method: two independent unit normals
        rsq = 0.0
        v1 = v2 = 0.0
        while rsq >= 1.0 or rsq == 0.0:
            v1 = 2.0 * self.uniform(seed, reinitialize) - 1.0
            v2 = 2.0 * self.uniform(seed, False) - 1.0
            reinitialize = False
            rsq = v1 * v1 + v2 * v2
        fac = math.sqrt(-2.0 * math.log(rsq) / rsq)
        return v2 * fac, v1 * fac

    def normal(
        self,
        seed: Any,
        mean: Any = 0.0,
        stddev: Any = 1.0,
        reinitialize: bool = True,
    ) -> float:
        """
        Return a normal deviate.

        Deviates are produced in pairs. The first call of a pair draws a
        fresh polar pair, returns one half and caches the other; the
        next call returns the cached half without drawing. Interleaving
        other distributions between the two calls does not break the
        pairing, but reinitializing discards the cached half.

        Args:
            seed: Sequence seed (see uniform())
            mean: Desired mean; NaN or infinite values give 0. Read only
                when reinitialize is True.
            stddev: Desired standard deviation; NaN, infinite or
                non-positive values give 1. Read only when reinitialize
                is True.
            reinitialize: Restart the sequence from `seed`

        Returns:
            Normal deviate with the cached mean and standard deviation.
        """
        if reinitialize:
            self._normal_mean = _coerce_location(mean)
            self._normal_stddev = _coerce_scale(stddev)
            self._spare = None

        if self._spare is None:
            z, self._spare = self._polar_pair(seed, reinitialize)
        else:
            z, self._spare = self._spare, None

        return self._normal_mean + self._normal_stddev * z

    def gamma(
        self,
        seed: Any,
        alpha: Any = 1.0,
        beta: Any = 1.0,
        reinitialize: bool = True,
    ) -> float:
        """
        Return a gamma deviate with shape `alpha` and rate `beta`.

        Marsaglia-Tsang squeeze/accept method. Shapes below 1 are sampled
        as alpha + 1 and scaled by u^(1/alpha), which gives the exact
        Gamma(alpha) distribution. The sample mean is alpha / beta.

        Args:
            seed: Sequence seed (see uniform())
            alpha: Shape; NaN or non-positive values give 1
            beta: Rate (inverse scale); NaN or values below 1e-4 give 0.5
            reinitialize: Restart the sequence from `seed`; the shape and
                rate are only read when this is True

        Returns:
            Positive gamma deviate.
        """
        if reinitialize:
            shape = as_number(alpha)
            self._gamma_shape = 1.0 if shape is None or shape <= 0.0 else shape
            rate = as_number(beta)
            self._gamma_rate = GAMMA_DEFAULT_RATE if rate is None or rate < GAMMA_RATE_FLOOR else rate
            self._gamma_shifted = self._gamma_shape < 1.0

        shape = self._gamma_shape + 1.0 if self._gamma_shifted else self._gamma_shape
        d = shape - 1.0 / 3.0
        c = 1.0 / math.sqrt(9.0 * d)

        while True:
            v = 0.0
            while v <= 0.0:
                x, _ = self._polar_pair(seed, reinitialize)
                reinitialize = False
                v = 1.0 + c * x
            v = v * v * v
            u = self.uniform(seed, False)
            xsq = x * x
            if u < 1.0 - 0.0331 * xsq * xsq:
                break
            if math.log(u) < 0.5 * xsq + d * (1.0 - v + math.log(v)):
                break

        value = d * v / self._gamma_rate
        if self._gamma_shifted:
            value *= self.uniform(seed, False) ** (1.0 / self._gamma_shape)
        return value

    def logistic(
        self,
        seed: Any,
        mean: Any = 0.0,
        stddev: Any = 1.0,
        reinitialize: bool = True,
    ) -> float:
        """
        Return a logistic deviate by inverting the logistic CDF.

        Args:
            seed: Sequence seed (see uniform())
            mean: Desired mean; NaN or infinite values give 0. Read only
                when reinitialize is True.
            stddev: Desired standard deviation; NaN, infinite or
                non-positive values give 1. Read only when reinitialize
                is True.
            reinitialize: Restart the sequence from `seed`

        Returns:
            Logistic deviate with the cached mean and standard deviation.
        """
        if reinitialize:
            self._logistic_mean = _coerce_location(mean)
            self._logistic_stddev = _coerce_scale(stddev)

        v = self.uniform(seed, reinitialize)
        while v * (1.0 - v) == 0.0:
            v = self.uniform(seed, False)

        return self._logistic_mean + LOGISTIC_SCALE * self._logistic_stddev * math.log(v / (1.0 - v))
