"""
Tests for Discrete Uniform Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import numpy as np
import pytest
from scipy.stats import randint

from pysatl_extradistr import NaNsProducedWarning, ddunif, pdunif, qdunif, rdunif

from ..base import PROBABILITY_GRID, BaseDistributionTest


class TestDiscreteUniformFamily(BaseDistributionTest):
    """Test suite for Discrete Uniform distribution family."""

    def setup_method(self):
        self.x = np.array([-3.0, 0.0, 1.0, 2.5, 4.0, 6.0, 9.0])

    @pytest.mark.parametrize("min_, max_", [(1, 6), (-2, 2), (4, 4)])
    def test_against_scipy(self, min_, max_):
        dist = randint(min_, max_ + 1)
        integers = np.floor(self.x)
        self.assert_arrays_almost_equal(ddunif(integers, min_, max_), dist.pmf(integers))
        self.assert_arrays_almost_equal(pdunif(self.x, min_, max_), dist.cdf(self.x))
        np.testing.assert_array_equal(qdunif(PROBABILITY_GRID, min_, max_), dist.ppf(PROBABILITY_GRID))

    def test_non_integer_has_no_mass(self):
        assert ddunif(2.5, 1, 6)[0] == 0.0

    def test_quantile_at_zero_is_minimum(self):
        assert qdunif(0.0, 1, 6)[0] == 1.0

    def test_invalid_limits(self):
        with pytest.warns(NaNsProducedWarning) as record:
            result = ddunif(1.0, min_=[1.0, 0.5, 5.0], max_=[6.0, 6.0, 1.0])

        message = str(record[0].message)
        assert "min and max are integers" in message
        assert "min <= max" in message
        assert not np.isnan(result[0])
        assert np.all(np.isnan(result[1:]))

    def test_random_generation(self):
        draws = rdunif(10_000, 1, 6, rng=np.random.default_rng(15))
        assert set(np.unique(draws)) == {1.0, 2.0, 3.0, 4.0, 5.0, 6.0}
