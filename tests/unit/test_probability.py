"""
Tests for probability helpers

Checks:
1. Discrete distributions sum to 1 and match closed forms
2. Poisson switches to log space without losing accuracy
3. Continuous densities
4. Event probabilities
5. InvalidArgument for non-integer counts and out-of-range probabilities
"""

import math

import pytest

from fermat.core.math.exceptions import InvalidArgument
from fermat.core.math.probability import (
    MAX_FLOAT_FACTORIAL,
    binomial_probability,
    conditional_probability,
    exponential_probability,
    geometric_cdf,
    geometric_probability,
    joint_probability,
    normal_probability,
    poisson_probability,
    uniform_probability,
)


# =============================================================================
# DISCRETE DISTRIBUTIONS
# =============================================================================


class TestBinomialProbability:
    """Tests for binomial_probability"""

    def test_value(self):
        assert binomial_probability(2, 4, 0.5) == pytest.approx(0.375)

    def test_sums_to_one(self):
        total = sum(binomial_probability(k, 10, 0.3) for k in range(11))
        assert total == pytest.approx(1.0)

    def test_more_successes_than_trials(self):
        assert binomial_probability(5, 4, 0.5) == 0.0
        assert binomial_probability(5, 4, 1.0) == 0.0

    def test_certain_outcomes(self):
        assert binomial_probability(0, 5, 0.0) == 1.0
        assert binomial_probability(5, 5, 1.0) == 1.0

    def test_invalid(self):
        with pytest.raises(InvalidArgument):
            binomial_probability(-1, 4, 0.5)
        with pytest.raises(InvalidArgument):
            binomial_probability(1.5, 4, 0.5)
        with pytest.raises(InvalidArgument, match=r"\[0, 1\]"):
            binomial_probability(1, 4, 1.5)


class TestGeometric:
    """Tests for geometric_probability and geometric_cdf"""

    def test_values(self):
        assert geometric_probability(1, 0.2) == pytest.approx(0.2)
        assert geometric_probability(3, 0.5) == pytest.approx(0.125)

    def test_cdf(self):
        assert geometric_cdf(3, 0.5) == pytest.approx(0.875)
        assert geometric_cdf(0, 0.5) == 0.0

    def test_cdf_is_cumulative(self):
        for x in range(1, 15):
            partial = sum(geometric_probability(k, 0.3) for k in range(1, x + 1))
            assert geometric_cdf(x, 0.3) == pytest.approx(partial)

    def test_invalid(self):
        with pytest.raises(InvalidArgument, match=">= 1"):
            geometric_probability(0, 0.5)
        with pytest.raises(InvalidArgument):
            geometric_probability(2.5, 0.5)
        with pytest.raises(InvalidArgument):
            geometric_cdf(-1, 0.5)


class TestPoisson:
    """Tests for poisson_probability"""

    def test_values(self):
        assert poisson_probability(0, 2) == pytest.approx(math.exp(-2))
        assert poisson_probability(3, 2) == pytest.approx(math.exp(-2) * 8 / 6)

    def test_sums_to_one(self):
        total = sum(poisson_probability(k, 4.0) for k in range(60))
        assert total == pytest.approx(1.0)

    def test_log_space_is_continuous(self):
        """P(k) / P(k-1) == lam / k across the factorial cutoff"""
        lam = 2.0
        k = MAX_FLOAT_FACTORIAL + 1
        ratio = poisson_probability(k, lam) / poisson_probability(k - 1, lam)
        assert ratio == pytest.approx(lam / k, rel=1e-9)

    def test_large_rate_stays_finite(self):
        value = poisson_probability(150, 500.0)
        assert math.isfinite(value)
        assert 0 < value < 1e-70

    def test_zero_rate(self):
        assert poisson_probability(0, 0) == 1.0
        assert poisson_probability(2, 0) == 0.0

    def test_invalid(self):
        with pytest.raises(InvalidArgument):
            poisson_probability(1.5, 2)
        with pytest.raises(InvalidArgument):
            poisson_probability(1, -2)


# =============================================================================
# CONTINUOUS DENSITIES
# =============================================================================


class TestDensities:
    """Tests for normal, exponential and uniform densities"""

    def test_standard_normal(self):
        assert normal_probability(0) == pytest.approx(1 / math.sqrt(2 * math.pi))
        assert normal_probability(1.3) == pytest.approx(normal_probability(-1.3))

    def test_shifted_normal(self):
        assert normal_probability(5, mean=5, std_dev=2) == pytest.approx(
            1 / (2 * math.sqrt(2 * math.pi))
        )

    def test_normal_invalid_std_dev(self):
        with pytest.raises(InvalidArgument):
            normal_probability(0, std_dev=0)

    def test_exponential(self):
        assert exponential_probability(0, 2) == 2.0
        assert exponential_probability(1, 2) == pytest.approx(2 * math.exp(-2))
        assert exponential_probability(-1, 2) == 0.0
        with pytest.raises(InvalidArgument):
            exponential_probability(1, 0)

    def test_uniform(self):
        assert uniform_probability(0.5, 0, 2) == 0.5
        assert uniform_probability(2, 0, 2) == 0.5
        assert uniform_probability(3, 0, 2) == 0.0
        with pytest.raises(InvalidArgument):
            uniform_probability(1, 2, 2)


# =============================================================================
# EVENTS
# =============================================================================


class TestEvents:
    """Tests for joint and conditional probability"""

    def test_joint(self):
        assert joint_probability(0.5, 0.4) == pytest.approx(0.2)

    def test_conditional(self):
        assert conditional_probability(0.2, 0.4) == pytest.approx(0.5)

    def test_conditional_on_impossible_event(self):
        with pytest.raises(InvalidArgument, match="P\\(B\\) = 0"):
            conditional_probability(0.0, 0.0)

    def test_invalid_probabilities(self):
        with pytest.raises(InvalidArgument):
            joint_probability(1.5, 0.5)
        with pytest.raises(InvalidArgument):
            conditional_probability(0.5, "0.5")
