# Copyright (c) 2024 Thomas Klietsch. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Solve square or overdetermined linear systems by Gauss-Jordan elimination.

Pipeline: validate -> select pivot rows (only if the natural diagonal is
degenerate) -> eliminate -> normalize. When the natural diagonal is usable
the leading `columns` rows are solved and any further rows are left for
the error estimate to judge.

Failures never raise: solve() returns an empty list and solve_system()
returns a SolveResult whose `failure` names the reason.
"""
import logging
from dataclasses import dataclass, replace

import numpy as np

from gaussjordan.domain.elimination import eliminate
from gaussjordan.domain.errors import SolveFailure
from gaussjordan.domain.matrix import Matrix
from gaussjordan.domain.pivot import (
    DEFAULT_MAX_PIVOT_ATTEMPTS,
    leading_rows,
    reduce_system,
    select_pivot_rows,
)
from gaussjordan.domain.real import MAGNITUDE_ZERO, as_real_vector
from gaussjordan.domain.results import SolveResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LinearSystem:
    """A matrix paired with its right-hand side, as read from a file."""
    matrix: Matrix
    equal: tuple
    epsilon: float | None = None


def solve_system(
    matrix: Matrix,
    equal,
    epsilon=MAGNITUDE_ZERO,
    max_pivot_attempts: int = DEFAULT_MAX_PIVOT_ATTEMPTS,
) -> SolveResult:
    """Solve matrix @ x = equal.

    Args:
        matrix: Square or overdetermined Matrix. Not mutated.
        equal: Right-hand side, one value per matrix row.
        epsilon: Magnitude below which an entry cannot serve as a pivot.
        max_pivot_attempts: Budget for the pivot row search.

    Returns:
        SolveResult with one value per matrix column, or an empty result
        carrying the failure reason.
    """
    if not matrix.is_valid():
        logger.debug("Rejected invalid %r", matrix)
        return SolveResult.failed(SolveFailure.INVALID_MATRIX)

    n_rows, _ = matrix.dimensions()
    b = as_real_vector(equal)
    if b is None or b.shape[0] != n_rows:
        logger.debug("Right-hand side does not match %d rows", n_rows)
        return SolveResult.failed(SolveFailure.DIMENSION_MISMATCH)
    if not np.all(np.isfinite(b)):
        logger.debug("Right-hand side contains non-finite values")
        return SolveResult.failed(SolveFailure.NON_FINITE_INPUT)

    # Elimination divides by the diagonal, so it must be non-zero
    if matrix.is_diagonal_nonzero(epsilon):
        selection = leading_rows(matrix)
    else:
        selection = select_pivot_rows(matrix, epsilon, max_pivot_attempts)
        if not selection.ok:
            logger.debug("Pivot selection failed: %s", selection.failure.value)
            return SolveResult.failed(selection.failure)

    square, square_equal = reduce_system(matrix, b, selection.rows)
    result = eliminate(square.to_array(), square_equal)
    if not result.ok:
        logger.debug("Elimination failed: %s", result.failure.value)
        return result
    return replace(result, pivot_rows=selection.rows)


def solve(
    matrix: Matrix,
    equal,
    epsilon=MAGNITUDE_ZERO,
    max_pivot_attempts: int = DEFAULT_MAX_PIVOT_ATTEMPTS,
) -> list:
    """Solution of matrix @ x = equal as a list; empty on any failure."""
    return list(solve_system(matrix, equal, epsilon, max_pivot_attempts).solution)
