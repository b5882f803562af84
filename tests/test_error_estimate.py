# Copyright (c) 2024 Thomas Klietsch. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for domain/error_estimate.py: residual-based fit quality."""
import math

from gaussjordan.domain.error_estimate import (
    ResidualReport,
    error_estimate,
    residual_report,
)
from gaussjordan.domain.errors import SolveFailure
from gaussjordan.domain.matrix import Matrix
from gaussjordan.domain.real import Real
from gaussjordan.domain.solver import solve


class TestErrorEstimate:
    def test_exact_solution_is_zero(self):
        m = Matrix.from_rows([[1, 0], [0, 1]])
        assert error_estimate(m, [3, 5], [3, 5]) == 0

    def test_sums_absolute_residuals(self):
        m = Matrix.from_rows([[1, 0], [0, 1], [1, 1]])
        # predicted (1, 1, 2) against (2, 0, 2): |-1| + |1| + 0
        assert error_estimate(m, [2, 0, 2], [1, 1]) == 2

    def test_is_real(self):
        m = Matrix.from_rows([[1]])
        assert isinstance(error_estimate(m, [1], [1]), Real)

    def test_invalid_matrix_is_nan(self):
        assert math.isnan(error_estimate(Matrix(1, 2), [1], [1, 2]))

    def test_equal_length_mismatch_is_nan(self):
        m = Matrix.from_rows([[1, 0], [0, 1]])
        assert math.isnan(error_estimate(m, [1, 2, 3], [1, 2]))

    def test_solution_length_mismatch_is_nan(self):
        m = Matrix.from_rows([[1, 0], [0, 1]])
        assert math.isnan(error_estimate(m, [1, 2], [1]))

    def test_failed_solve_gives_nan(self):
        m = Matrix.from_rows([[1, 0], [1, 0]])
        x = solve(m, [1, 1])
        assert x == []
        assert math.isnan(error_estimate(m, [1, 1], x))


class TestResidualReport:
    def test_report_fields(self):
        m = Matrix.from_rows([[1, 0], [0, 1]])
        report = residual_report(m, [3, 5], [3, 4])
        assert isinstance(report, ResidualReport)
        assert report.ok
        assert report.residuals == (0, -1)
        assert report.total_absolute == 1
        assert report.worst_row == 1

    def test_covers_every_original_row(self):
        m = Matrix.from_rows([[1, 0], [0, 1], [1, 1], [2, 0]])
        report = residual_report(m, [1, 1, 2, 5], [1, 1])
        assert len(report.residuals) == 4
        assert report.worst_row == 3
        assert report.total_absolute == 3

    def test_failure_reason(self):
        m = Matrix.from_rows([[1, 0], [0, 1]])
        report = residual_report(m, [1, 2], [1])
        assert not report.ok
        assert report.failure is SolveFailure.DIMENSION_MISMATCH
        assert report.worst_row == -1

    def test_non_finite_solution(self):
        m = Matrix.from_rows([[1, 0], [0, 1]])
        report = residual_report(m, [1, 2], [1, math.nan])
        assert report.failure is SolveFailure.NON_FINITE_INPUT
        assert math.isnan(report.total_absolute)
