"""
Tests for ParametricFamily

This module tests the vectorized evaluation engine on small hand-made
families: recycling, the NaN channel, tail and log transforms, and random
generation.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings

import numpy as np
import pytest

from pysatl_extradistr.distributions.computation import KernelSet
from pysatl_extradistr.distributions.evaluation import NaNsProducedWarning
from pysatl_extradistr.families.parametric_family import ParametricFamily
from pysatl_extradistr.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_extradistr.types import MultivariateContinuous, UnivariateContinuous


def make_exponential_family() -> ParametricFamily:
    def pdf(parameters, x):
        return np.where(x >= 0, parameters.rate * np.exp(-parameters.rate * x), 0.0)

    def cdf(parameters, x):
        return np.where(x >= 0, -np.expm1(-parameters.rate * x), 0.0)

    def ppf(parameters, p):
        return -np.log1p(-p) / parameters.rate

    family = ParametricFamily(
        name="TestExponential",
        distr_type=UnivariateContinuous,
        kernels=KernelSet(pdf=pdf, cdf=cdf, ppf=ppf),
    )

    @parametrization(family=family)
    class _Rate(Parametrization):
        rate: np.ndarray

        @constraint(description="rate > 0")
        def check_rate_positive(self):
            return self.rate > 0

    return family


def make_simplex_family() -> ParametricFamily:
    def pdf(parameters, x):
        return np.sum(x * parameters.weights, axis=1)

    family = ParametricFamily(
        name="TestSimplex",
        distr_type=MultivariateContinuous,
        kernels=KernelSet(pdf=pdf, rvs=lambda parameters, size, rng: parameters.weights.copy()),
    )

    @parametrization(family=family)
    class _Weights(Parametrization):
        weights: np.ndarray

        _matrix_parameters = frozenset({"weights"})

        @constraint(description="weights >= 0")
        def check_weights_non_negative(self):
            return np.all(self.weights >= 0, axis=1)

    return family


class TestRecyclingEngine:
    def setup_method(self):
        self.family = make_exponential_family()

    def test_length_three_and_one(self):
        x = np.array([0.5, 1.0, 2.0])
        result = self.family.density(x, rate=2.0)
        np.testing.assert_allclose(result, 2.0 * np.exp(-2.0 * x))

    def test_non_multiple_lengths(self):
        result = self.family.density([1.0, 1.0, 1.0], rate=[1.0, 2.0])
        np.testing.assert_allclose(result, [np.exp(-1.0), 2.0 * np.exp(-2.0), np.exp(-1.0)])

    def test_output_length_from_longest_parameter(self):
        assert self.family.density(1.0, rate=[1.0, 2.0, 3.0, 4.0]).shape == (4,)

    def test_empty_argument_gives_empty_result(self):
        assert self.family.density([], rate=[1.0, 2.0]).shape == (0,)
        assert self.family.cdf([1.0], rate=[]).shape == (0,)

    def test_inputs_are_not_modified(self):
        x = np.array([0.5, 1.0])
        self.family.cdf(x, lower_tail=False, log_p=True, rate=1.0)
        np.testing.assert_array_equal(x, [0.5, 1.0])

    def test_unknown_parameter(self):
        with pytest.raises(TypeError, match="unexpected parameters: scale"):
            self.family.density(1.0, rate=1.0, scale=2.0)

    def test_missing_parameter(self):
        with pytest.raises(TypeError, match="missing parameters: rate"):
            self.family.density(1.0)


class TestNaNChannel:
    def setup_method(self):
        self.family = make_exponential_family()

    def test_invalid_parameter_gives_nan_and_one_warning(self):
        with pytest.warns(NaNsProducedWarning, match="rate > 0") as record:
            result = self.family.density([1.0, 1.0, 1.0], rate=[1.0, -1.0, 0.0])

        assert len(record) == 1
        assert np.isnan(result[1]) and np.isnan(result[2])
        assert result[0] == pytest.approx(np.exp(-1.0))

    def test_evaluate_returns_mask_without_warning(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            evaluation = self.family.evaluate_density([1.0, 1.0], rate=[1.0, -1.0])

        np.testing.assert_array_equal(evaluation.invalid, [False, True])
        assert evaluation.nan_produced

    def test_missing_input_propagates_silently(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = self.family.cdf([np.nan, 1.0], rate=[1.0, np.nan])

        assert np.all(np.isnan(result))

    def test_quantile_outside_unit_interval(self):
        with pytest.warns(NaNsProducedWarning, match=r"p in \[0, 1\]"):
            result = self.family.quantile([-0.1, 0.5, 1.1], rate=1.0)

        assert np.isnan(result[0]) and np.isnan(result[2])
        assert result[1] == pytest.approx(np.log(2.0))

    def test_out_of_support_point_is_not_an_error(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert self.family.density(-1.0, rate=1.0)[0] == 0.0


class TestTransforms:
    def setup_method(self):
        self.family = make_exponential_family()

    def test_upper_tail(self):
        result = self.family.cdf(2.0, lower_tail=False, rate=1.0)
        assert result[0] == pytest.approx(np.exp(-2.0))

    def test_log_upper_tail(self):
        result = self.family.cdf(2.0, lower_tail=False, log_p=True, rate=1.0)
        assert result[0] == pytest.approx(-2.0)

    def test_quantile_upper_tail(self):
        lower = self.family.quantile(0.2, rate=1.0)
        upper = self.family.quantile(0.8, lower_tail=False, rate=1.0)
        np.testing.assert_allclose(lower, upper)

    def test_quantile_log_upper_tail(self):
        result = self.family.quantile(-2.0, lower_tail=False, log_p=True, rate=1.0)
        assert result[0] == pytest.approx(2.0)

    def test_log_density(self):
        result = self.family.density(1.5, log=True, rate=2.0)
        assert result[0] == pytest.approx(np.log(2.0) - 3.0)


class TestRandom:
    def setup_method(self):
        self.family = make_exponential_family()

    def test_length_of_n_vector(self, rng):
        assert self.family.random([9, 9, 9], rng=rng, rate=1.0).shape == (3,)

    def test_reproducible_with_seed(self):
        first = self.family.random(5, rng=42, rate=[1.0, 10.0])
        second = self.family.random(5, rng=42, rate=[1.0, 10.0])
        np.testing.assert_array_equal(first, second)

    def test_invalid_parameter_rows(self, rng):
        with pytest.warns(NaNsProducedWarning):
            draws = self.family.random(4, rng=rng, rate=[1.0, -1.0])

        assert np.isnan(draws[1]) and np.isnan(draws[3])
        assert np.all(draws[[0, 2]] > 0)

    def test_empty_parameter(self, rng):
        with pytest.warns(NaNsProducedWarning):
            draws = self.family.random(3, rng=rng, rate=[])

        assert draws.shape == (3,)
        assert np.all(np.isnan(draws))

    def test_zero_variates(self, rng):
        assert self.family.random(0, rng=rng, rate=1.0).shape == (0,)


class TestMatrixArguments:
    def setup_method(self):
        self.family = make_simplex_family()

    def test_rows_recycle(self):
        x = np.array([[1.0, 0.0], [0.0, 1.0], [1.0, 1.0]])
        result = self.family.density(x, weights=[0.25, 0.75])
        np.testing.assert_allclose(result, [0.25, 0.75, 1.0])

    def test_column_mismatch(self):
        with pytest.raises(ValueError, match="Number of columns in 'x'"):
            self.family.density([[1.0, 0.0, 0.0]], weights=[0.5, 0.5])

    def test_invalid_row(self):
        with pytest.warns(NaNsProducedWarning, match="weights >= 0"):
            result = self.family.density([1.0, 1.0], weights=[[0.5, 0.5], [-1.0, 2.0]])

        assert result[0] == pytest.approx(1.0)
        assert np.isnan(result[1])

    def test_random_matrix_shape(self, rng):
        draws = self.family.random(4, rng=rng, weights=[[0.5, 0.5], [0.1, 0.9]])
        assert draws.shape == (4, 2)
        np.testing.assert_allclose(draws[2], [0.5, 0.5])

    def test_cdf_not_defined(self):
        with pytest.raises(NotImplementedError):
            self.family.cdf([[0.5, 0.5]], weights=[0.5, 0.5])
