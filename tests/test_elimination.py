# Copyright (c) 2024 Thomas Klietsch. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for domain/elimination.py: Gauss-Jordan elimination."""
import numpy as np

from gaussjordan.domain.elimination import eliminate
from gaussjordan.domain.errors import SolveFailure
from gaussjordan.domain.real import Real
from gaussjordan.domain.results import SolveResult


class TestEliminate:
    def test_identity(self):
        result = eliminate([[1, 0], [0, 1]], [3, 5])
        assert isinstance(result, SolveResult)
        assert result.ok
        assert result.solution == (3, 5)

    def test_dense_2x2(self):
        # 2x + y = 3, x + 3y = 5
        result = eliminate([[2, 1], [1, 3]], [3, 5])
        assert abs(result[0] - Real("0.8")) < 1e-15
        assert abs(result[1] - Real("1.4")) < 1e-15

    def test_dense_3x3(self):
        cells = [[4, -2, 1], [3, 6, -4], [2, 1, 8]]
        result = eliminate(cells, [3, 3, 28])
        for got, expected in zip(result, (1, 2, 3)):
            assert abs(got - expected) < 1e-14

    def test_solution_is_real(self):
        result = eliminate([[2, 0], [0, 4]], [1, 1])
        assert all(isinstance(v, Real) for v in result.solution)

    def test_singular_matrix_fails(self):
        result = eliminate([[1, 1], [1, 1]], [2, 2])
        assert not result.ok
        assert result.failure is SolveFailure.NON_FINITE_SCALAR
        assert len(result) == 0

    def test_overflowing_result_fails(self):
        huge = np.finfo(Real).max
        result = eliminate([[0.5]], [huge])
        assert result.failure is SolveFailure.NON_FINITE_RESULT
        assert result.solution == ()

    def test_non_square_rejected(self):
        result = eliminate([[1, 0], [0, 1], [1, 1]], [1, 2, 3])
        assert result.failure is SolveFailure.DIMENSION_MISMATCH

    def test_equal_length_mismatch(self):
        result = eliminate([[1, 0], [0, 1]], [1, 2, 3])
        assert result.failure is SolveFailure.DIMENSION_MISMATCH

    def test_inputs_not_mutated(self):
        cells = np.array([[2, 1], [1, 3]], dtype=Real)
        equal = np.array([3, 5], dtype=Real)
        eliminate(cells, equal)
        assert np.array_equal(cells, [[2, 1], [1, 3]])
        assert np.array_equal(equal, [3, 5])
