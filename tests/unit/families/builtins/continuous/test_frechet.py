"""
Tests for Frechet Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import numpy as np
import pytest
from scipy.stats import invweibull

from pysatl_extradistr import NaNsProducedWarning, dfrechet, pfrechet, qfrechet, rfrechet

from ..base import PROBABILITY_GRID, BaseDistributionTest


class TestFrechetFamily(BaseDistributionTest):
    """Test suite for Frechet distribution family."""

    def setup_method(self):
        self.x = np.array([-1.0, 0.5, 1.0, 2.0, 5.0, 20.0])

    @pytest.mark.parametrize("lambda_, mu, sigma", [(1.0, 0.0, 1.0), (2.5, -1.0, 2.0), (0.7, 0.5, 0.5)])
    def test_against_scipy(self, lambda_, mu, sigma):
        dist = invweibull(c=lambda_, loc=mu, scale=sigma)
        self.assert_arrays_almost_equal(dfrechet(self.x, lambda_, mu, sigma), dist.pdf(self.x))
        self.assert_arrays_almost_equal(pfrechet(self.x, lambda_, mu, sigma), dist.cdf(self.x))
        np.testing.assert_allclose(
            qfrechet(PROBABILITY_GRID, lambda_, mu, sigma), dist.ppf(PROBABILITY_GRID), rtol=1e-10
        )

    def test_below_location(self):
        assert dfrechet(-1.0)[0] == 0.0
        assert pfrechet(-1.0)[0] == 0.0
        assert pfrechet(-1.0, lower_tail=False)[0] == 1.0

    def test_log_forms(self):
        self.assert_log_consistent(dfrechet(self.x, 2.0), dfrechet(self.x, 2.0, log=True))
        self.assert_log_consistent(pfrechet(self.x, 2.0), pfrechet(self.x, 2.0, log_p=True))

    def test_invalid_parameters(self):
        with pytest.warns(NaNsProducedWarning) as record:
            result = dfrechet(1.0, lambda_=[1.0, -1.0], sigma=[1.0, 1.0, 0.0])

        assert len(record) == 1
        message = str(record[0].message)
        assert "lambda > 0" in message
        assert "sigma > 0" in message
        assert not np.isnan(result[0])
        assert np.all(np.isnan(result[1:]))

    def test_random_generation(self):
        draws = rfrechet(5_000, lambda_=2.0, mu=1.0, rng=np.random.default_rng(2))
        assert np.all(draws > 1.0)
