"""
Tests for Half-normal Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import numpy as np
import pytest
from scipy.stats import halfnorm

from pysatl_extradistr import NaNsProducedWarning, dhnorm, phnorm, qhnorm, rhnorm

from ..base import PROBABILITY_GRID, BaseDistributionTest


class TestHalfNormalFamily(BaseDistributionTest):
    """Test suite for Half-normal distribution family."""

    def setup_method(self):
        self.x = np.array([-1.0, 0.0, 0.3, 1.0, 2.5, 6.0])

    @pytest.mark.parametrize("sigma", [0.5, 1.0, 4.0])
    def test_against_scipy(self, sigma):
        dist = halfnorm(scale=sigma)
        self.assert_arrays_almost_equal(dhnorm(self.x, sigma), dist.pdf(self.x))
        self.assert_arrays_almost_equal(phnorm(self.x, sigma), dist.cdf(self.x))
        self.assert_arrays_almost_equal(qhnorm(PROBABILITY_GRID, sigma), dist.ppf(PROBABILITY_GRID), 1e-8)

    def test_far_upper_tail(self):
        upper = phnorm(30.0, lower_tail=False)
        np.testing.assert_allclose(upper, halfnorm.sf(30.0), rtol=1e-10)
        assert upper[0] > 0.0

    def test_log_forms(self):
        self.assert_log_consistent(dhnorm(self.x), dhnorm(self.x, log=True))

    def test_invalid_sigma(self):
        with pytest.warns(NaNsProducedWarning, match="sigma > 0"):
            assert np.isnan(dhnorm(1.0, sigma=-1.0)[0])

    def test_random_generation(self):
        draws = rhnorm(20_000, sigma=2.0, rng=np.random.default_rng(21))
        assert np.all(draws >= 0)
        assert draws.mean() == pytest.approx(2.0 * np.sqrt(2.0 / np.pi), rel=0.03)
