__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_extradistr.distributions.computation import KernelSet
from pysatl_extradistr.distributions.sampling import (
    InverseTransformSampling,
    KernelSampling,
    default_sampling_strategy,
    resolve_rng,
    resolve_size,
)


def _pdf(parameters, x):
    return np.ones_like(x)


def _identity_ppf(parameters, p):
    return p


class TestResolveSize:
    @pytest.mark.parametrize(
        "n, expected",
        [
            (5, 5),
            (0, 0),
            ([7], 7),
            ([1.0, 2.0, 3.0], 3),
            (np.zeros(4), 4),
            ([], 0),
        ],
    )
    def test_sizes(self, n, expected) -> None:
        assert resolve_size(n) == expected

    @pytest.mark.parametrize("n", [-1, np.nan, np.inf])
    def test_invalid_sizes(self, n) -> None:
        with pytest.raises(ValueError, match="Invalid number of observations"):
            resolve_size(n)


class TestResolveRng:
    def test_generator_is_reused(self) -> None:
        generator = np.random.default_rng(1)
        assert resolve_rng(generator) is generator

    def test_seed_is_reproducible(self) -> None:
        assert resolve_rng(3).random() == resolve_rng(3).random()


class TestStrategies:
    def test_inverse_transform_draws_inside_unit_interval(self, rng) -> None:
        strategy = InverseTransformSampling(KernelSet(pdf=_pdf, ppf=_identity_ppf))
        draws = strategy.sample(None, 1000, rng)
        assert draws.shape == (1000,)
        assert np.all((draws > 0) & (draws < 1))

    def test_inverse_transform_requires_ppf(self) -> None:
        with pytest.raises(ValueError, match="requires a 'ppf' kernel"):
            InverseTransformSampling(KernelSet(pdf=_pdf))

    def test_kernel_sampling_delegates(self, rng) -> None:
        kernels = KernelSet(pdf=_pdf, rvs=lambda parameters, size, generator: np.full(size, 7.0))
        np.testing.assert_array_equal(KernelSampling(kernels).sample(None, 3, rng), [7.0, 7.0, 7.0])

    def test_default_strategy_selection(self) -> None:
        assert isinstance(
            default_sampling_strategy(KernelSet(pdf=_pdf, ppf=_identity_ppf)),
            InverseTransformSampling,
        )
        assert isinstance(
            default_sampling_strategy(
                KernelSet(pdf=_pdf, ppf=_identity_ppf, rvs=lambda p, s, g: np.zeros(s))
            ),
            KernelSampling,
        )
        assert default_sampling_strategy(KernelSet(pdf=_pdf)) is None

    def test_shared_generator_continues_stream(self) -> None:
        strategy = InverseTransformSampling(KernelSet(pdf=_pdf, ppf=_identity_ppf))
        generator = np.random.default_rng(5)
        first = strategy.sample(None, 3, generator)
        second = strategy.sample(None, 3, generator)
        assert not np.array_equal(first, second)

        replay = np.random.default_rng(5)
        np.testing.assert_array_equal(strategy.sample(None, 6, replay), np.concatenate([first, second]))
