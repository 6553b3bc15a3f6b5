"""
Tests for Laplace Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import numpy as np
import pytest
from scipy.stats import laplace

from pysatl_extradistr import NaNsProducedWarning, dlaplace, plaplace, qlaplace, rlaplace

from ..base import PROBABILITY_GRID, BaseDistributionTest


class TestLaplaceFamily(BaseDistributionTest):
    """Test suite for Laplace distribution family."""

    def setup_method(self):
        self.x = np.array([-10.0, -2.0, -0.5, 0.0, 0.5, 2.0, 10.0])

    @pytest.mark.parametrize("mu, sigma", [(0.0, 1.0), (1.0, 2.0), (-3.0, 0.25)])
    def test_against_scipy(self, mu, sigma):
        dist = laplace(loc=mu, scale=sigma)
        self.assert_arrays_almost_equal(dlaplace(self.x, mu, sigma), dist.pdf(self.x))
        self.assert_arrays_almost_equal(plaplace(self.x, mu, sigma), dist.cdf(self.x))
        self.assert_arrays_almost_equal(qlaplace(PROBABILITY_GRID, mu, sigma), dist.ppf(PROBABILITY_GRID))

    def test_symmetry(self):
        self.assert_arrays_almost_equal(plaplace(-self.x), plaplace(self.x, lower_tail=False))

    def test_log_forms(self):
        np.testing.assert_allclose(plaplace(self.x, log_p=True), laplace.logcdf(self.x), rtol=1e-12)
        np.testing.assert_allclose(
            plaplace(self.x, lower_tail=False, log_p=True), laplace.logsf(self.x), rtol=1e-12
        )

    def test_quantile_median(self):
        assert qlaplace(0.5, mu=4.0)[0] == pytest.approx(4.0)

    def test_invalid_sigma(self):
        with pytest.warns(NaNsProducedWarning):
            assert np.isnan(dlaplace(0.0, sigma=0.0)[0])

    def test_random_generation(self):
        draws = rlaplace(20_000, mu=1.0, sigma=2.0, rng=np.random.default_rng(4))
        assert draws.mean() == pytest.approx(1.0, abs=0.08)
        assert draws.var() == pytest.approx(8.0, rel=0.05)
