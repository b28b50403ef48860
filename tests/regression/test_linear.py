"""
Tests for simple linear least squares.

Reference values come from numpy.polyfit and scipy.stats.linregress.
"""

import math

import numpy as np
import pytest
from scipy import stats

from pylsq.regression import FitKind, LinearSolution, fit_linear


class TestExactFit:

    def test_four_points_on_a_line(self):
        sol = fit_linear([0, 1, 2, 3], [1, 3, 5, 7])
        assert isinstance(sol, LinearSolution)
        assert sol.slope == pytest.approx(2.0, abs=1e-12)
        assert sol.intercept == pytest.approx(1.0, abs=1e-12)
        assert sol.chi2 == pytest.approx(0.0, abs=1e-20)
        assert sol.r_squared == pytest.approx(1.0)
        assert sol.slope_se == pytest.approx(0.0, abs=1e-10)
        assert sol.n == 4

    def test_exact_line_fixture(self, exact_line):
        x, y = exact_line
        sol = fit_linear(x, y)
        np.testing.assert_allclose(sol.coefficients, [1.0, 2.0], atol=1e-12)

    def test_constant_y(self):
        sol = fit_linear([0.0, 1.0, 2.0, 5.0], [3.0, 3.0, 3.0, 3.0])
        assert sol.slope == pytest.approx(0.0, abs=1e-15)
        assert sol.intercept == pytest.approx(3.0)
        assert sol.r_squared == 1.0
        assert not sol.is_degenerate


class TestAgainstReference:

    def test_matches_polyfit(self, noisy_line):
        x, y = noisy_line
        sol = fit_linear(x, y)
        slope, intercept = np.polyfit(x, y, 1)
        assert sol.slope == pytest.approx(slope, rel=1e-10)
        assert sol.intercept == pytest.approx(intercept, rel=1e-10)

    def test_matches_linregress(self, noisy_line):
        x, y = noisy_line
        sol = fit_linear(x, y)
        ref = stats.linregress(x, y)
        assert sol.slope_se == pytest.approx(ref.stderr, rel=1e-8)
        assert sol.intercept_se == pytest.approx(ref.intercept_stderr, rel=1e-8)
        assert sol.r_squared == pytest.approx(ref.rvalue ** 2, rel=1e-8)

    def test_chi2_is_residual_sum_of_squares(self, noisy_line):
        x, y = noisy_line
        sol = fit_linear(x, y)
        residuals = y - sol.intercept - sol.slope * x
        assert sol.chi2 == pytest.approx(float(residuals @ residuals), rel=1e-10)

    def test_recovers_truth(self, noisy_line):
        x, y = noisy_line
        sol = fit_linear(x, y)
        assert sol.slope == pytest.approx(2.0, abs=0.15)
        assert sol.intercept == pytest.approx(1.0, abs=0.6)
        assert 0.9 < sol.r_squared <= 1.0

    def test_idempotent(self, noisy_line):
        x, y = noisy_line
        first = fit_linear(x, y)
        second = fit_linear(x, y)
        assert first.slope == second.slope
        assert first.intercept == second.intercept
        assert first.chi2 == second.chi2

    def test_accepts_lists(self):
        sol = fit_linear([1, 2, 3, 4], [2.1, 3.9, 6.2, 7.8])
        assert sol.slope == pytest.approx(np.polyfit([1, 2, 3, 4], [2.1, 3.9, 6.2, 7.8], 1)[0])


class TestDegenerate:

    @pytest.mark.parametrize("x, y", [
        ([0.0, 1.0], [1.0, 3.0]),
        ([0.0, 1.0, 2.0], [1.0, 3.0]),
        ([], []),
        (None, [1.0, 2.0, 3.0]),
        ([0.0, 1.0, math.nan], [1.0, 2.0, 3.0]),
        ([2.0, 2.0, 2.0, 2.0], [1.0, 2.0, 3.0, 4.0]),
    ])
    def test_returns_zeros(self, x, y):
        sol = fit_linear(x, y)
        assert sol.is_degenerate
        assert (sol.slope, sol.intercept, sol.chi2, sol.r_squared) == (0.0, 0.0, 0.0, 0.0)
        assert (sol.slope_se, sol.intercept_se) == (0.0, 0.0)
        assert len(sol.warnings) == 1

    def test_constant_x_reason(self):
        sol = fit_linear([2.0, 2.0, 2.0], [1.0, 2.0, 3.0])
        assert "all values are equal" in sol.warnings[0]

    def test_degenerate_predicts_zero(self):
        assert fit_linear([1.0], [1.0]).predict(5.0) == 0.0


class TestSolutionInterface:

    def test_kind(self, exact_line):
        assert fit_linear(*exact_line).kind is FitKind.LINEAR

    def test_predict(self, exact_line):
        sol = fit_linear(*exact_line)
        assert sol.predict(20.0) == pytest.approx(41.0)
        np.testing.assert_allclose(sol.predict([0.0, 1.0]), [1.0, 3.0], atol=1e-12)

    def test_metadata(self, exact_line):
        sol = fit_linear(*exact_line)
        assert sol.backend_name == 'cpu_linear'
        assert sol.info['method'] == 'closed_form'
        assert sol.timing is not None
        assert sol.warnings == ()

    def test_summary(self, noisy_line):
        text = fit_linear(*noisy_line).summary()
        assert "Simple Linear Regression" in text
        assert "(Intercept)" in text
        assert "Observations: 30" in text

    def test_repr(self, exact_line):
        assert repr(fit_linear(*exact_line)).startswith("LinearSolution(n=10")
