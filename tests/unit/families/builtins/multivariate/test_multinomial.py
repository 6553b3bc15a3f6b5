"""
Tests for Multinomial Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import numpy as np
import pytest
from scipy.stats import multinomial

from pysatl_extradistr import NaNsProducedWarning, dmnom, rmnom

from ..base import BaseDistributionTest


class TestMultinomialFamily(BaseDistributionTest):
    """Test suite for Multinomial distribution family."""

    def setup_method(self):
        self.prob = [0.2, 0.5, 0.3]
        self.counts = np.array([[1, 2, 1], [4, 0, 0], [0, 2, 2]])

    def test_against_scipy(self):
        expected = multinomial.pmf(self.counts, 4, self.prob)
        self.assert_arrays_almost_equal(dmnom(self.counts, 4, self.prob), expected)

    def test_log_mass(self):
        self.assert_log_consistent(dmnom(self.counts, 4, self.prob), dmnom(self.counts, 4, self.prob, log=True))

    def test_counts_off_support(self):
        # wrong total, negative and fractional counts
        counts = [[1, 2, 2], [5, -1, 0], [1.5, 1.5, 1]]
        np.testing.assert_array_equal(dmnom(counts, 4, self.prob), [0.0, 0.0, 0.0])

    def test_size_recycles(self):
        result = dmnom([[1, 1, 0], [2, 1, 0]], [2, 3], self.prob)
        expected = [multinomial.pmf([1, 1, 0], 2, self.prob), multinomial.pmf([2, 1, 0], 3, self.prob)]
        self.assert_arrays_almost_equal(result, expected)

    def test_column_mismatch(self):
        with pytest.raises(ValueError, match="Number of columns"):
            dmnom([1, 2, 1], 4, [0.5, 0.5])

    def test_invalid_size(self):
        with pytest.warns(NaNsProducedWarning, match="size is a non-negative integer"):
            result = dmnom([1, 1, 0], [2, 2.5], self.prob)

        assert not np.isnan(result[0])
        assert np.isnan(result[1])

    def test_probabilities_must_sum_to_one(self):
        with pytest.warns(NaNsProducedWarning, match="sum\\(prob\\) == 1"):
            assert np.isnan(dmnom([1, 1, 0], 2, [0.2, 0.2, 0.2])[0])

    def test_random_generation(self):
        draws = rmnom(5_000, 10, self.prob, rng=np.random.default_rng(43))
        assert draws.shape == (5_000, 3)
        np.testing.assert_array_equal(draws.sum(axis=1), np.full(5_000, 10.0))
        assert np.all(draws >= 0)
        np.testing.assert_allclose(draws.mean(axis=0), [2.0, 5.0, 3.0], atol=0.1)

    def test_random_with_recycled_size(self):
        draws = rmnom(4, [1, 100], self.prob, rng=np.random.default_rng(1))
        np.testing.assert_array_equal(draws.sum(axis=1), [1.0, 100.0, 1.0, 100.0])
