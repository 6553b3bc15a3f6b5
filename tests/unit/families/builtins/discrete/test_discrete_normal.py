"""
Tests for Discrete Normal Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import numpy as np
import pytest
from scipy.stats import norm

from pysatl_extradistr import NaNsProducedWarning, ddnorm, pdnorm, qdnorm, rdnorm

from ..base import PROBABILITY_GRID, BaseDistributionTest


class TestDiscreteNormalFamily(BaseDistributionTest):
    """Test suite for Discrete Normal distribution family."""

    def setup_method(self):
        self.x = np.arange(-6.0, 7.0)

    @pytest.mark.parametrize("mu, sigma", [(0.0, 1.0), (2.5, 2.0), (-1.0, 0.5)])
    def test_mass_is_normal_increment(self, mu, sigma):
        expected = norm.cdf(self.x + 1, mu, sigma) - norm.cdf(self.x, mu, sigma)
        self.assert_arrays_almost_equal(ddnorm(self.x, mu, sigma), expected)

    def test_mass_sums_to_one(self):
        support = np.arange(-60.0, 60.0)
        assert ddnorm(support, 1.0, 3.0).sum() == pytest.approx(1.0, abs=1e-12)

    def test_non_integer_has_no_mass(self):
        assert ddnorm(0.5)[0] == 0.0

    def test_far_right_mass_is_positive(self):
        assert ddnorm(30.0)[0] > 0.0

    def test_distribution_function(self):
        q = np.array([-2.0, -0.5, 0.0, 1.7])
        self.assert_arrays_almost_equal(pdnorm(q, 0.0, 1.0), norm.cdf(np.floor(q) + 1))
        self.assert_tails_complement(pdnorm(q), pdnorm(q, lower_tail=False))

    def test_quantile_is_smallest_covering_value(self):
        q = qdnorm(PROBABILITY_GRID, 0.3, 2.0)
        assert np.all(pdnorm(q, 0.3, 2.0) >= PROBABILITY_GRID - 1e-12)
        assert np.all(pdnorm(q - 1, 0.3, 2.0) < PROBABILITY_GRID)

    def test_invalid_sigma(self):
        with pytest.warns(NaNsProducedWarning, match="sigma > 0"):
            assert np.isnan(ddnorm(0.0, sigma=0.0)[0])

    def test_random_generation(self):
        draws = rdnorm(10_000, mu=5.0, sigma=2.0, rng=np.random.default_rng(12))
        np.testing.assert_array_equal(draws, np.floor(draws))
        assert draws.mean() == pytest.approx(4.5, abs=0.1)
