# Copyright (c) 2024 Thomas Klietsch. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Row selection for matrices whose natural diagonal is unusable.

Picks one distinct source row per column such that the column's entry in
that row is at least epsilon in magnitude, then rebuilds a square system
from those rows. Row c of the reduced system is drawn from column c's
candidates, so the reduced diagonal is nonzero by construction.

The search is a depth-first backtrack over the per-column candidate lists
(column 0 first, candidates in ascending row order). It is deterministic
and costs at most prod(len(candidates[c])) attempts, capped by
max_attempts. It finds a usable assignment, not the best-conditioned one.
"""
import logging
from dataclasses import dataclass

import numpy as np

from gaussjordan.domain.errors import SolveFailure
from gaussjordan.domain.matrix import Matrix
from gaussjordan.domain.real import MAGNITUDE_ZERO, Real

logger = logging.getLogger(__name__)

DEFAULT_MAX_PIVOT_ATTEMPTS = 100_000


@dataclass(frozen=True)
class PivotSelection:
    """Chosen source rows, one per column of the reduced system."""
    rows: tuple
    attempts: int = 0
    failure: SolveFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def candidate_rows(matrix: Matrix, epsilon=MAGNITUDE_ZERO) -> tuple[tuple[int, ...], ...]:
    """For each column, the rows whose entry has magnitude >= epsilon."""
    cells = np.abs(matrix.to_array())
    return tuple(
        tuple(int(r) for r in np.flatnonzero(cells[:, c] >= epsilon))
        for c in range(matrix.columns)
    )


def leading_rows(matrix: Matrix) -> PivotSelection:
    """Natural selection: the first `columns` rows, in order."""
    return PivotSelection(rows=tuple(range(matrix.columns)))


def select_pivot_rows(
    matrix: Matrix,
    epsilon=MAGNITUDE_ZERO,
    max_attempts: int = DEFAULT_MAX_PIVOT_ATTEMPTS,
) -> PivotSelection:
    """Assign a distinct usable row to every column.

    Fails with NO_USABLE_PIVOT if some column has no candidate at all,
    NO_DISTINCT_ASSIGNMENT if the candidates cannot be made distinct, and
    PIVOT_SEARCH_EXHAUSTED if more than max_attempts candidates were tried.
    """
    if not matrix.is_valid():
        return PivotSelection(rows=(), failure=SolveFailure.INVALID_MATRIX)

    candidates = candidate_rows(matrix, epsilon)
    for column, options in enumerate(candidates):
        if not options:
            logger.debug("Column %d has no entry with magnitude >= %s", column, epsilon)
            return PivotSelection(rows=(), failure=SolveFailure.NO_USABLE_PIVOT)

    n_columns = len(candidates)
    cursor = [0] * n_columns
    assignment: list[int] = []
    used: set[int] = set()
    attempts = 0
    column = 0

    while column < n_columns:
        options = candidates[column]
        placed = False
        while cursor[column] < len(options):
            row = options[cursor[column]]
            cursor[column] += 1
            attempts += 1
            if attempts > max_attempts:
                logger.warning(
                    "Pivot search gave up after %d attempts on a %dx%d matrix",
                    max_attempts, matrix.rows, matrix.columns,
                )
                return PivotSelection(
                    rows=(), attempts=max_attempts,
                    failure=SolveFailure.PIVOT_SEARCH_EXHAUSTED,
                )
            if row not in used:
                assignment.append(row)
                used.add(row)
                placed = True
                break

        if placed:
            column += 1
            continue

        # Column exhausted: rewind it and retry the previous column
        cursor[column] = 0
        column -= 1
        if column < 0:
            logger.debug("No distinct pivot rows exist after %d attempts", attempts)
            return PivotSelection(
                rows=(), attempts=attempts,
                failure=SolveFailure.NO_DISTINCT_ASSIGNMENT,
            )
        used.discard(assignment.pop())

    logger.debug("Pivot rows %s selected after %d attempts", assignment, attempts)
    return PivotSelection(rows=tuple(assignment), attempts=attempts)


def reduce_system(matrix: Matrix, equal, rows) -> tuple[Matrix, tuple]:
    """Square system built from the given source rows.

    Reduced row c is the full content of original row rows[c], and reduced
    equal[c] is equal[rows[c]].
    """
    n = len(rows)
    reduced = Matrix(n, n)
    cells = matrix.to_array()
    for target, source in enumerate(rows):
        reduced.set_row(target, cells[source, :n])
    reduced_equal = tuple(Real(equal[source]) for source in rows)
    return reduced, reduced_equal
