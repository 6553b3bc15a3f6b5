__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import norm

from pysatl_extradistr.stats import (
    SUM_TOLERANCE,
    Phi,
    factorial,
    inv_Phi,
    is_integer,
    lfactorial,
    phi,
    tol_equal,
)


class TestNormalHelpers:
    def test_phi_matches_scipy(self) -> None:
        x = np.linspace(-5.0, 5.0, 21)
        np.testing.assert_allclose(phi(x), norm.pdf(x), rtol=1e-12)

    def test_Phi_matches_scipy(self) -> None:
        x = np.linspace(-8.0, 8.0, 33)
        np.testing.assert_allclose(Phi(x), norm.cdf(x), rtol=1e-12)

    def test_inv_Phi_boundaries(self) -> None:
        np.testing.assert_array_equal(inv_Phi([0.0, 1.0]), [-np.inf, np.inf])
        assert np.isnan(inv_Phi(1.5))

    def test_inv_Phi_inverts_Phi(self) -> None:
        p = np.array([0.01, 0.3, 0.5, 0.9])
        np.testing.assert_allclose(Phi(inv_Phi(p)), p, rtol=1e-12)


class TestFactorials:
    @pytest.mark.parametrize("n", [0, 1, 5, 10])
    def test_factorial_of_integers(self, n) -> None:
        assert factorial(n) == pytest.approx(math.factorial(n))

    def test_lfactorial(self) -> None:
        assert lfactorial(20) == pytest.approx(math.lgamma(21.0))

    def test_negative_values_are_nan(self) -> None:
        assert np.isnan(factorial(-1.0))
        assert np.isnan(lfactorial(-0.5))


class TestTolerances:
    def test_tol_equal_absorbs_rounding(self) -> None:
        assert tol_equal(0.1 + 0.2 + 0.7, 1.0)
        assert not tol_equal(1.0 + 10 * SUM_TOLERANCE, 1.0)

    def test_is_integer(self) -> None:
        values = np.array([1.0, 2.0 + 1e-9, 2.5, np.inf, np.nan, -3.0])
        np.testing.assert_array_equal(is_integer(values), [True, True, False, False, False, True])
