"""
Tests for parametrizations and constraints.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses

import numpy as np
import pytest

from pysatl_extradistr.distributions.computation import KernelSet
from pysatl_extradistr.families.parametric_family import ParametricFamily
from pysatl_extradistr.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_extradistr.types import UnivariateContinuous


def _family(name: str = "TestFamily") -> ParametricFamily:
    return ParametricFamily(
        name=name,
        distr_type=UnivariateContinuous,
        kernels=KernelSet(pdf=lambda parameters, x: np.ones_like(x)),
    )


class TestParametrizationDecorator:
    def setup_method(self):
        self.family = _family()

        @parametrization(family=self.family)
        class _LocationScale(Parametrization):
            mu: np.ndarray
            sigma: np.ndarray

            @constraint(description="sigma > 0")
            def check_sigma_positive(self):
                return self.sigma > 0

        self.cls = _LocationScale

    def test_class_becomes_frozen_dataclass(self):
        assert dataclasses.is_dataclass(self.cls)
        instance = self.cls(mu=np.zeros(1), sigma=np.ones(1))
        with pytest.raises(dataclasses.FrozenInstanceError):
            instance.mu = np.ones(1)

    def test_registered_on_family(self):
        assert self.family.parametrization is self.cls
        assert self.cls.__family__ is self.family
        assert self.family.parameter_names == ("mu", "sigma")

    def test_constraints_collected(self):
        assert [c.description for c in self.cls._constraints] == ["sigma > 0"]

    def test_valid_mask_and_violations(self):
        instance = self.cls(mu=np.zeros(3), sigma=np.array([1.0, -1.0, 2.0]))
        mask = instance.valid_mask(3)
        np.testing.assert_array_equal(mask, [True, False, True])
        assert instance.violations(~mask) == ("sigma > 0",)
        assert instance.violations(mask & False) == ()

    def test_take_selects_rows(self):
        instance = self.cls(mu=np.array([1.0, 2.0, 3.0]), sigma=np.ones(3))
        subset = instance.take(np.array([True, False, True]))
        np.testing.assert_array_equal(subset.mu, [1.0, 3.0])

    def test_second_parametrization_rejected(self):
        with pytest.raises(ValueError, match="already has a parametrization"):

            @parametrization(family=self.family)
            class _Other(Parametrization):
                theta: np.ndarray


class TestConstraintDecorator:
    def test_marks_function(self):
        @constraint(description="x > 0")
        def check(self):
            return True

        assert getattr(check, "__is_constraint") is True
        assert getattr(check, "__constraint_description") == "x > 0"

    def test_static_constraint_rejected(self):
        family = _family()

        with pytest.raises(TypeError, match="must be an instance method"):

            @parametrization(family=family)
            class _Bad(Parametrization):
                theta: np.ndarray

                @staticmethod
                @constraint(description="theta > 0")
                def check_theta():
                    return True

    def test_family_without_parametrization(self):
        with pytest.raises(ValueError, match="has no registered parametrization"):
            _ = _family().parametrization
