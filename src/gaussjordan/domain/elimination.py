# Copyright (c) 2024 Thomas Klietsch. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Gauss-Jordan elimination of a square system.

For each column c, every other row r has row(c) * a[r,c]/a[c,c] subtracted
from it, leaving a diagonal matrix. The solution is then equal[i]/a[i,i].

No row swaps are made here; the caller supplies rows whose diagonal is
usable. A pivot can still vanish during elimination (singular or badly
conditioned input), which shows up as a non-finite scalar.
"""
import numpy as np

from gaussjordan.domain.errors import SolveFailure
from gaussjordan.domain.real import Real
from gaussjordan.domain.results import SolveResult


def eliminate(cells, equal) -> SolveResult:
    """Solve the square system cells @ x = equal.

    Inputs are copied, never mutated. Returns a failed SolveResult with no
    partial solution on any non-finite intermediate value.
    """
    a = np.array(cells, dtype=Real)
    b = np.array(equal, dtype=Real)
    if a.ndim != 2 or b.ndim != 1:
        return SolveResult.failed(SolveFailure.DIMENSION_MISMATCH)
    n = a.shape[0]
    if n == 0 or a.shape[1] != n or b.shape[0] != n:
        return SolveResult.failed(SolveFailure.DIMENSION_MISMATCH)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for column in range(n):
            for row in range(n):
                if row == column:
                    continue
                scalar = a[row, column] / a[column, column]
                if not np.isfinite(scalar):
                    return SolveResult.failed(SolveFailure.NON_FINITE_SCALAR)
                a[row, :] -= a[column, :] * scalar
                b[row] -= b[column] * scalar

        # Rescale diagonal to 1
        result = b / np.diagonal(a)

    if not np.all(np.isfinite(result)):
        return SolveResult.failed(SolveFailure.NON_FINITE_RESULT)
    return SolveResult(solution=tuple(result))
