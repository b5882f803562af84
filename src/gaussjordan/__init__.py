# Copyright (c) 2024 Thomas Klietsch. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
gaussjordan

Dense linear-equation solver using Gauss-Jordan elimination for square and
overdetermined systems, with a row-selection search for degenerate
diagonals and a residual-based error estimate over all equations.
"""

from gaussjordan.domain.real import (
    Real,
    NAN,
    NUMERIC_EPSILON,
    MAGNITUDE_ZERO,
    MAX_DIGITS,
    real_to_string,
)
from gaussjordan.domain.errors import (
    SolveFailure,
    MatrixIndexError,
)
from gaussjordan.domain.matrix import Matrix
from gaussjordan.domain.pivot import (
    DEFAULT_MAX_PIVOT_ATTEMPTS,
    PivotSelection,
    candidate_rows,
    select_pivot_rows,
    reduce_system,
)
from gaussjordan.domain.elimination import eliminate
from gaussjordan.domain.results import SolveResult
from gaussjordan.domain.solver import (
    LinearSystem,
    solve,
    solve_system,
)
from gaussjordan.domain.error_estimate import (
    ResidualReport,
    error_estimate,
    residual_report,
)

__version__ = "0.3.0"

__all__ = [
    "Real",
    "NAN",
    "NUMERIC_EPSILON",
    "MAGNITUDE_ZERO",
    "MAX_DIGITS",
    "real_to_string",
    "SolveFailure",
    "MatrixIndexError",
    "Matrix",
    "DEFAULT_MAX_PIVOT_ATTEMPTS",
    "PivotSelection",
    "candidate_rows",
    "select_pivot_rows",
    "reduce_system",
    "eliminate",
    "SolveResult",
    "LinearSystem",
    "solve",
    "solve_system",
    "ResidualReport",
    "error_estimate",
    "residual_report",
]
