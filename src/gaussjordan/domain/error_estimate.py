# Copyright (c) 2024 Thomas Klietsch. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Residual-based fit quality of a candidate solution.

The total absolute residual sum_i |sum_j a[i,j] * x[j] - equal[i]| is taken
over every original equation, including rows an overdetermined solve left
out. It is zero for an exact solution of a consistent system.
"""
from dataclasses import dataclass

import numpy as np

from gaussjordan.domain.errors import SolveFailure
from gaussjordan.domain.matrix import Matrix
from gaussjordan.domain.real import NAN, Real, as_real_vector


@dataclass(frozen=True)
class ResidualReport:
    """Per-equation residuals of a candidate solution."""
    total_absolute: Real
    residuals: tuple = ()        # predicted - equal, one per original row
    worst_row: int = -1          # row with the largest |residual|, -1 on failure
    failure: SolveFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def _failed(reason: SolveFailure) -> ResidualReport:
    return ResidualReport(total_absolute=NAN, failure=reason)


def residual_report(matrix: Matrix, equal, solution) -> ResidualReport:
    """Residuals of `solution` against every row of matrix @ x = equal."""
    if not matrix.is_valid():
        return _failed(SolveFailure.INVALID_MATRIX)

    n_rows, n_columns = matrix.dimensions()
    b = as_real_vector(equal)
    x = as_real_vector(solution)
    if b is None or x is None:
        return _failed(SolveFailure.DIMENSION_MISMATCH)
    if b.shape[0] != n_rows or x.shape[0] != n_columns:
        return _failed(SolveFailure.DIMENSION_MISMATCH)
    if not (np.all(np.isfinite(b)) and np.all(np.isfinite(x))):
        return _failed(SolveFailure.NON_FINITE_INPUT)

    residuals = matrix.to_array() @ x - b
    magnitudes = np.abs(residuals)
    return ResidualReport(
        total_absolute=Real(magnitudes.sum()),
        residuals=tuple(residuals),
        worst_row=int(np.argmax(magnitudes)),
    )


def error_estimate(matrix: Matrix, equal, solution) -> Real:
    """Total absolute residual, or NaN if the inputs do not fit together."""
    return residual_report(matrix, equal, solution).total_absolute
