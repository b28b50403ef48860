"""
Tests for DeviateGenerator.

Verifies sequence reproducibility, the (0, 1) range of uniform deviates,
parameter coercion, the normal pairing contract, and sample moments of
every derived distribution.
"""

import math

import numpy as np
import pytest

from pylsq.deviates import DeviateGenerator, coerce_seed
from pylsq.deviates.generator import IM, RNMX


def draw(method, n, *args):
    """First call reinitializes, the rest continue the sequence."""
    gen = DeviateGenerator()
    values = [method(gen)(*args, True)]
    values.extend(method(gen)(*args, False) for _ in range(n - 1))
    return np.array(values)


def uniform(gen):
    return gen.uniform


def exponential(gen):
    return gen.exponential


def normal(gen):
    return gen.normal


def gamma(gen):
    return gen.gamma


def logistic(gen):
    return gen.logistic


# ---------------------------------------------------------------------------
# Uniform
# ---------------------------------------------------------------------------

class TestUniform:

    def test_reproducible(self):
        a = draw(uniform, 1000, 7)
        b = draw(uniform, 1000, 7)
        np.testing.assert_array_equal(a, b)

    def test_open_unit_interval(self):
        u = draw(uniform, 5000, 12345)
        assert np.all(u > 0.0)
        assert np.all(u < 1.0)
        assert np.all(u <= RNMX)

    def test_reseed_restarts_sequence(self):
        gen = DeviateGenerator()
        first = [gen.uniform(99, True)] + [gen.uniform(99, False) for _ in range(20)]
        gen.uniform(5, True)
        gen.uniform(5, False)
        again = [gen.uniform(99, True)] + [gen.uniform(99, False) for _ in range(20)]
        assert first == again

    def test_continuation_ignores_seed(self):
        gen_a = DeviateGenerator()
        gen_b = DeviateGenerator()
        gen_a.uniform(3, True)
        gen_b.uniform(3, True)
        assert gen_a.uniform(3, False) == gen_b.uniform(999, False)

    def test_different_seeds_differ(self):
        assert not np.array_equal(draw(uniform, 50, 1), draw(uniform, 50, 2))

    @pytest.mark.parametrize("bad_seed", [0, -10, math.nan, None, "seed"])
    def test_bad_seed_coerced_to_one(self, bad_seed):
        assert DeviateGenerator().uniform(bad_seed, True) == DeviateGenerator().uniform(1, True)

    def test_fractional_seed_floored(self):
        assert DeviateGenerator().uniform(7.9, True) == DeviateGenerator().uniform(7, True)

    @pytest.mark.parametrize("seed, expected", [
        (IM, 1), (2 * IM, 1), (float(IM), 1), (IM + 5, 5), (IM - 1, IM - 1), (12.7, 12),
    ])
    def test_coerce_seed_reduces_modulo(self, seed, expected):
        assert coerce_seed(seed) == expected

    @pytest.mark.parametrize("seed", [IM, 2 * IM])
    def test_multiple_of_modulus_stays_in_range(self, seed):
        u = draw(uniform, 200, seed)
        assert np.all(u > 0.0)
        assert np.all(u < 1.0)
        assert len(np.unique(u)) > 1

    def test_seed_above_modulus_wraps(self):
        assert DeviateGenerator().uniform(IM + 5, True) == DeviateGenerator().uniform(5, True)

    def test_continue_unseeded_instance(self):
        """Continuing a never-seeded generator seeds it instead of failing."""
        gen = DeviateGenerator()
        assert not gen.seeded
        value = gen.uniform(5, False)
        assert gen.seeded
        assert value == DeviateGenerator().uniform(5, True)

    def test_mean(self):
        u = draw(uniform, 10_000, 2024)
        assert u.mean() == pytest.approx(0.5, abs=0.02)
        assert u.var() == pytest.approx(1.0 / 12.0, abs=0.01)


# ---------------------------------------------------------------------------
# Exponential
# ---------------------------------------------------------------------------

class TestExponential:

    def test_positive_unit_mean(self):
        e = draw(exponential, 10_000, 31)
        assert np.all(np.isfinite(e))
        assert np.all(e > 0.0)
        assert e.mean() == pytest.approx(1.0, abs=0.05)

    def test_is_minus_log_uniform(self):
        e = DeviateGenerator().exponential(8, True)
        u = DeviateGenerator().uniform(8, True)
        assert e == pytest.approx(-math.log(u))

    @pytest.mark.parametrize("seed", [IM, 2 * IM])
    def test_multiple_of_modulus_seed_returns(self, seed):
        e = draw(exponential, 50, seed)
        assert np.all(np.isfinite(e))
        assert np.all(e > 0.0)


# ---------------------------------------------------------------------------
# Normal
# ---------------------------------------------------------------------------

class TestNormal:

    def test_standard_moments(self):
        z = draw(normal, 10_000, 1001, 0.0, 1.0)
        assert np.all(np.isfinite(z))
        assert z.mean() == pytest.approx(0.0, abs=0.05)
        assert z.var() == pytest.approx(1.0, abs=0.1)

    def test_mean_and_stddev_applied(self):
        z = draw(normal, 10_000, 77, 10.0, 3.0)
        assert z.mean() == pytest.approx(10.0, abs=0.15)
        assert z.std() == pytest.approx(3.0, abs=0.15)

    def test_negative_mean_allowed(self):
        z = draw(normal, 5_000, 77, -4.0, 0.5)
        assert z.mean() == pytest.approx(-4.0, abs=0.05)

    def test_pair_is_one_polar_draw(self):
        """Two consecutive calls return both halves of a single polar pair."""
        gen = DeviateGenerator()
        first = gen.normal(11, 0.0, 1.0, True)
        second = gen.normal(11, 0.0, 1.0, False)

        ref = DeviateGenerator()
        reinit = True
        while True:
            v1 = 2.0 * ref.uniform(11, reinit) - 1.0
            v2 = 2.0 * ref.uniform(11, False) - 1.0
            reinit = False
            rsq = v1 * v1 + v2 * v2
            if 0.0 < rsq < 1.0:
                break
        fac = math.sqrt(-2.0 * math.log(rsq) / rsq)

        assert first == pytest.approx(v2 * fac)
        assert second == pytest.approx(v1 * fac)

    def test_spare_does_not_draw(self):
        """The cached half is returned without consuming uniform deviates."""
        gen = DeviateGenerator()
        gen.normal(5, 0.0, 1.0, True)
        state = list(gen._iv)
        gen.normal(5, 0.0, 1.0, False)
        assert gen._iv == state

    def test_reinitialize_discards_spare(self):
        gen = DeviateGenerator()
        a = gen.normal(5, 0.0, 1.0, True)
        b = gen.normal(5, 0.0, 1.0, True)
        assert a == b

    def test_parameters_fixed_for_sequence(self):
        """mean/stddev are read on reinitialize only."""
        gen_a = DeviateGenerator()
        gen_b = DeviateGenerator()
        gen_a.normal(5, 2.0, 1.0, True)
        gen_b.normal(5, 2.0, 1.0, True)
        assert gen_a.normal(5, 2.0, 1.0, False) == gen_b.normal(5, -50.0, 9.0, False)

    @pytest.mark.parametrize("mean, stddev", [
        (math.nan, math.nan), (math.inf, -1.0), (None, 0.0),
    ])
    def test_bad_parameters_coerced(self, mean, stddev):
        assert DeviateGenerator().normal(3, mean, stddev, True) == DeviateGenerator().normal(3, 0.0, 1.0, True)

    def test_scaling(self):
        z = DeviateGenerator().normal(21, 0.0, 1.0, True)
        scaled = DeviateGenerator().normal(21, 10.0, 2.0, True)
        assert scaled == pytest.approx(10.0 + 2.0 * z)


# ---------------------------------------------------------------------------
# Gamma
# ---------------------------------------------------------------------------

class TestGamma:

    @pytest.mark.parametrize("alpha, beta", [(2.0, 1.0), (3.0, 2.0), (9.0, 0.5)])
    def test_mean_and_variance(self, alpha, beta):
        g = draw(gamma, 20_000, 404, alpha, beta)
        assert np.all(np.isfinite(g))
        assert np.all(g > 0.0)
        assert g.mean() == pytest.approx(alpha / beta, rel=0.05)
        assert g.var() == pytest.approx(alpha / beta ** 2, rel=0.1)

    def test_shape_below_one(self):
        """Shapes < 1 keep the Gamma(alpha) mean after the shift-by-one boost."""
        g = draw(gamma, 20_000, 505, 0.5, 1.0)
        assert np.all(g > 0.0)
        assert g.mean() == pytest.approx(0.5, abs=0.03)
        assert g.var() == pytest.approx(0.5, abs=0.06)

    def test_bad_parameters_coerced(self):
        bad = DeviateGenerator().gamma(6, math.nan, 0.0, True)
        good = DeviateGenerator().gamma(6, 1.0, 0.5, True)
        assert bad == good

    def test_reproducible(self):
        np.testing.assert_array_equal(
            draw(gamma, 200, 17, 2.5, 1.0),
            draw(gamma, 200, 17, 2.5, 1.0),
        )


# ---------------------------------------------------------------------------
# Logistic
# ---------------------------------------------------------------------------

class TestLogistic:

    def test_moments(self):
        v = draw(logistic, 20_000, 909, 1.0, 2.0)
        assert np.all(np.isfinite(v))
        assert v.mean() == pytest.approx(1.0, abs=0.1)
        assert v.std() == pytest.approx(2.0, abs=0.1)

    def test_inverse_cdf(self):
        u = DeviateGenerator().uniform(13, True)
        v = DeviateGenerator().logistic(13, 0.0, 1.0, True)
        assert v == pytest.approx(math.sqrt(3.0) / math.pi * math.log(u / (1.0 - u)))

    def test_bad_parameters_coerced(self):
        assert DeviateGenerator().logistic(2, math.nan, -5.0, True) == DeviateGenerator().logistic(2, 0.0, 1.0, True)

    def test_multiple_of_modulus_seed_returns(self):
        v = draw(logistic, 50, IM, 0.0, 1.0)
        assert np.all(np.isfinite(v))
