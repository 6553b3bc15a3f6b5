"""
Tests for Lomax Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import numpy as np
import pytest
from scipy.stats import lomax

from pysatl_extradistr import NaNsProducedWarning, dlomax, plomax, qlomax, rlomax

from ..base import PROBABILITY_GRID, BaseDistributionTest


class TestLomaxFamily(BaseDistributionTest):
    """Test suite for Lomax distribution family."""

    def setup_method(self):
        self.x = np.array([-1.0, 0.0, 0.5, 1.0, 5.0, 50.0])

    @pytest.mark.parametrize("lambda_, kappa", [(1.0, 1.0), (0.5, 3.0), (2.0, 0.7)])
    def test_against_scipy(self, lambda_, kappa):
        dist = lomax(c=kappa, scale=1.0 / lambda_)
        self.assert_arrays_almost_equal(dlomax(self.x, lambda_, kappa), dist.pdf(self.x))
        self.assert_arrays_almost_equal(plomax(self.x, lambda_, kappa), dist.cdf(self.x))
        np.testing.assert_allclose(
            qlomax(PROBABILITY_GRID, lambda_, kappa), dist.ppf(PROBABILITY_GRID), rtol=1e-10
        )

    def test_tails(self):
        self.assert_tails_complement(plomax(self.x, 1.0, 2.0), plomax(self.x, 1.0, 2.0, lower_tail=False))
        self.assert_log_consistent(dlomax(self.x, 1.0, 2.0), dlomax(self.x, 1.0, 2.0, log=True))

    def test_invalid_parameters(self):
        with pytest.warns(NaNsProducedWarning, match="kappa > 0"):
            assert np.isnan(plomax(1.0, lambda_=1.0, kappa=0.0)[0])

    def test_random_generation(self):
        draws = rlomax(5_000, 1.0, 3.0, rng=np.random.default_rng(13))
        assert np.all(draws >= 0)
        assert np.median(draws) == pytest.approx(qlomax(0.5, 1.0, 3.0)[0], rel=0.05)
