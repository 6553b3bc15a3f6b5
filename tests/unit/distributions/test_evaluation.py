__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings

import numpy as np
import pytest

from pysatl_extradistr.distributions.evaluation import Evaluation, NaNsProducedWarning


class TestEvaluation:
    def test_clean_result_does_not_warn(self) -> None:
        evaluation = Evaluation(values=np.array([0.1, 0.2]), invalid=np.zeros(2, dtype=bool))

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            values = evaluation.unwrap()

        assert not evaluation.nan_produced
        np.testing.assert_array_equal(values, [0.1, 0.2])

    def test_invalid_elements_warn_once(self) -> None:
        evaluation = Evaluation(
            values=np.array([np.nan, 0.2, np.nan]),
            invalid=np.array([True, False, True]),
            operation="Rayleigh density",
            reasons=("sigma > 0",),
        )

        with pytest.warns(NaNsProducedWarning) as record:
            evaluation.unwrap()

        assert len(record) == 1
        message = str(record[0].message)
        assert "Rayleigh density" in message
        assert "2 of 3" in message
        assert "sigma > 0" in message

    def test_warning_is_runtime_warning(self) -> None:
        assert issubclass(NaNsProducedWarning, RuntimeWarning)

    def test_length(self) -> None:
        evaluation = Evaluation(values=np.zeros(4), invalid=np.zeros(4, dtype=bool))
        assert len(evaluation) == 4
