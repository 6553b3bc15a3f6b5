"""
Tests for Generalized Extreme Value Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import numpy as np
import pytest
from scipy.stats import genextreme, gumbel_r

from pysatl_extradistr import NaNsProducedWarning, dgev, pgev, qgev, rgev

from ..base import PROBABILITY_GRID, BaseDistributionTest


class TestGEVFamily(BaseDistributionTest):
    """Test suite for GEV distribution family."""

    def setup_method(self):
        self.x = np.array([-2.0, -0.5, 0.0, 0.5, 1.0, 3.0, 10.0])

    @pytest.mark.parametrize("xi", [-0.3, 0.0, 0.25, 1.0])
    def test_against_scipy(self, xi):
        # scipy's shape has the opposite sign
        dist = genextreme(c=-xi, loc=1.0, scale=2.0)
        self.assert_arrays_almost_equal(dgev(self.x, 1.0, 2.0, xi), dist.pdf(self.x))
        self.assert_arrays_almost_equal(pgev(self.x, 1.0, 2.0, xi), dist.cdf(self.x))
        self.assert_arrays_almost_equal(
            qgev(PROBABILITY_GRID, 1.0, 2.0, xi), dist.ppf(PROBABILITY_GRID), 1e-6
        )

    def test_zero_shape_is_gumbel(self):
        self.assert_arrays_almost_equal(dgev(self.x), gumbel_r.pdf(self.x))
        self.assert_arrays_almost_equal(pgev(self.x), gumbel_r.cdf(self.x))

    def test_bounded_support(self):
        # xi > 0: support starts at mu - sigma/xi = -1
        assert dgev(-2.0, 0.0, 1.0, 1.0)[0] == 0.0
        assert pgev(-2.0, 0.0, 1.0, 1.0)[0] == 0.0
        # xi < 0: support ends at mu - sigma/xi = 2
        assert dgev(3.0, 0.0, 1.0, -0.5)[0] == 0.0
        assert pgev(3.0, 0.0, 1.0, -0.5)[0] == 1.0

    def test_quantile_endpoints(self):
        assert qgev(1.0, 0.0, 1.0, -0.5)[0] == pytest.approx(2.0)
        assert qgev(0.0, 0.0, 1.0, 0.5)[0] == pytest.approx(-2.0)
        np.testing.assert_array_equal(qgev([0.0, 1.0]), [-np.inf, np.inf])

    def test_infinite_points(self):
        np.testing.assert_array_equal(pgev([-np.inf, np.inf]), [0.0, 1.0])
        np.testing.assert_array_equal(dgev([-np.inf, np.inf]), [0.0, 0.0])

    def test_log_forms(self):
        self.assert_log_consistent(dgev(self.x, xi=0.2), dgev(self.x, xi=0.2, log=True))
        self.assert_log_consistent(pgev(self.x, xi=0.2), pgev(self.x, xi=0.2, log_p=True))

    def test_tails(self):
        self.assert_tails_complement(pgev(self.x, xi=-0.2), pgev(self.x, xi=-0.2, lower_tail=False))

    def test_invalid_sigma(self):
        with pytest.warns(NaNsProducedWarning, match="sigma > 0"):
            result = qgev(0.5, sigma=[1.0, 0.0])

        assert np.isnan(result[1])

    def test_random_generation(self):
        draws = rgev(10_000, 0.0, 1.0, 0.2, rng=np.random.default_rng(11))
        assert np.all(draws > -5.0)
        assert np.median(draws) == pytest.approx(qgev(0.5, 0.0, 1.0, 0.2)[0], abs=0.05)
