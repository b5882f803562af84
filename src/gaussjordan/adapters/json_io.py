# Copyright (c) 2024 Thomas Klietsch. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON linear system file I/O adapter.

System file:
    {"matrix": [[1, 0], [0, 1]], "equal": [3, 5], "epsilon": 1e-7}

"epsilon" is optional. Result files carry the solution both as JSON
numbers and as full-precision strings, since JSON numbers are binary64.
"""
import json
import math
from typing import Any

from gaussjordan.domain.error_estimate import ResidualReport
from gaussjordan.domain.matrix import Matrix
from gaussjordan.domain.real import real_to_string
from gaussjordan.domain.results import SolveResult
from gaussjordan.domain.solver import LinearSystem
from gaussjordan.ports import ResultWriter, SystemReader


def _finite_or_none(value) -> float | None:
    value = float(value)
    return value if math.isfinite(value) else None


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class JsonSystemReader(SystemReader):
    """Reads a linear system from a JSON file."""

    def read_system(self, path: str) -> LinearSystem:
        with open(path, encoding='utf-8') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {path}: {e}") from e
        return self.parse_system(data)

    def parse_system(self, data: dict[str, Any]) -> LinearSystem:
        if not isinstance(data, dict):
            raise ValueError("System file must hold a JSON object")
        rows = data.get('matrix')
        equal = data.get('equal')
        if not isinstance(rows, list) or not rows:
            raise ValueError("'matrix' must be a non-empty list of rows")
        if not isinstance(equal, list):
            raise ValueError("'equal' must be a list of numbers")
        if any(not isinstance(row, list) or not all(map(_is_number, row)) for row in rows):
            raise ValueError("Every 'matrix' row must be a list of numbers")
        if not all(_is_number(v) and math.isfinite(v) for v in equal):
            raise ValueError("'equal' must hold finite numbers only")

        n_columns = len(rows[0])
        if len(rows) < n_columns:
            raise ValueError(
                f"Matrix has {len(rows)} rows and {n_columns} columns; "
                f"only square or overdetermined systems are supported"
            )
        matrix = Matrix(len(rows), n_columns)
        for index, row in enumerate(rows):
            if not matrix.set_row(index, row):
                raise ValueError(
                    f"Row {index} must hold {n_columns} finite numbers, got {row!r}"
                )
        if len(equal) != len(rows):
            raise ValueError(
                f"'equal' has {len(equal)} values for {len(rows)} matrix rows"
            )

        epsilon = data.get('epsilon')
        if epsilon is not None:
            if not _is_number(epsilon) or not math.isfinite(epsilon) or epsilon < 0:
                raise ValueError(f"'epsilon' must be a non-negative number, got {epsilon!r}")
            epsilon = float(epsilon)
        return LinearSystem(matrix=matrix, equal=tuple(equal), epsilon=epsilon)


class JsonResultWriter(ResultWriter):
    """Writes a solve outcome to a JSON file."""

    def result_to_dict(self, result: SolveResult, report: ResidualReport) -> dict[str, Any]:
        return {
            'solution': [float(v) for v in result.solution],
            'solution_text': [real_to_string(v, 0).strip() for v in result.solution],
            'failure': result.failure.value if result.failure else None,
            'pivot_rows': list(result.pivot_rows),
            'error_estimate': _finite_or_none(report.total_absolute),
            'residuals': [float(r) for r in report.residuals],
        }

    def write_result(self, result: SolveResult, report: ResidualReport, path: str) -> None:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.result_to_dict(result, report), f, indent=2)
