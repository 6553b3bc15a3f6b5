__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np

from pysatl_extradistr.stats import rng_bern, rng_sign, rng_unif


class TestDrawPrimitives:
    def test_uniforms_inside_open_interval(self, rng) -> None:
        u = rng_unif(rng, 10_000)
        assert u.shape == (10_000,)
        assert np.all((u > 0.0) & (u < 1.0))

    def test_bernoulli_extremes(self, rng) -> None:
        np.testing.assert_array_equal(rng_bern(rng, 0.0, 5), np.zeros(5))
        np.testing.assert_array_equal(rng_bern(rng, 1.0, 5), np.ones(5))

    def test_bernoulli_frequency(self, rng) -> None:
        draws = rng_bern(rng, np.full(20_000, 0.3), 20_000)
        assert abs(draws.mean() - 0.3) < 0.02

    def test_signs(self, rng) -> None:
        draws = rng_sign(rng, 20_000)
        assert set(np.unique(draws)) == {-1.0, 1.0}
        assert abs(draws.mean()) < 0.05

    def test_same_seed_same_draws(self) -> None:
        first = rng_unif(np.random.default_rng(11), 5)
        second = rng_unif(np.random.default_rng(11), 5)
        np.testing.assert_array_equal(first, second)
