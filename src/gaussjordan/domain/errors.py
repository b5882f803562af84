# Copyright (c) 2024 Thomas Klietsch. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Failure reasons and exceptions for the solver domain."""
from enum import Enum


class SolveFailure(Enum):
    """Why a solve, pivot search or error estimate produced no result."""
    INVALID_MATRIX = "invalid_matrix"                  # rows < columns or a zero dimension
    DIMENSION_MISMATCH = "dimension_mismatch"          # equal/solution length does not fit
    NON_FINITE_INPUT = "non_finite_input"              # NaN or inf in equal/solution
    NO_USABLE_PIVOT = "no_usable_pivot"                # a column is all below epsilon
    NO_DISTINCT_ASSIGNMENT = "no_distinct_assignment"  # pivot rows cannot be made distinct
    PIVOT_SEARCH_EXHAUSTED = "pivot_search_exhausted"  # attempt budget spent
    NON_FINITE_SCALAR = "non_finite_scalar"            # elimination divided by a vanished pivot
    NON_FINITE_RESULT = "non_finite_result"            # normalization overflowed


class MatrixIndexError(IndexError):
    """Raised by strict matrix accessors on an out-of-range cell."""

    def __init__(self, row: int, column: int, dimensions: tuple[int, int]):
        self.row = row
        self.column = column
        self.dimensions = dimensions
        super().__init__(
            f"Cell ({row}, {column}) is outside a "
            f"{dimensions[0]}x{dimensions[1]} matrix"
        )
