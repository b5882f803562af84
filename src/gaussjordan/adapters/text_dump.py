# Copyright (c) 2024 Thomas Klietsch. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Plain-text dump of matrices and solve outcomes.

Every Real goes through real_to_string with a fixed digit count, so the
output is stable enough for golden-file comparisons. decimals=0 dumps full
precision.
"""
from gaussjordan.domain.error_estimate import ResidualReport
from gaussjordan.domain.matrix import Matrix
from gaussjordan.domain.real import real_to_string
from gaussjordan.domain.results import SolveResult
from gaussjordan.ports import ResultWriter


def format_matrix(matrix: Matrix, decimals: int = 8) -> str:
    """Header line "<rows>x<columns> matrix" followed by one line per row."""
    lines = [f"{matrix.rows}x{matrix.columns} matrix"]
    for i in range(matrix.rows):
        lines.append(" ".join(real_to_string(v, decimals) for v in matrix.row(i)))
    return "\n".join(lines) + "\n"


def format_solution(result: SolveResult, decimals: int = 8) -> str:
    """One "x[i] = value" line per unknown, or the failure reason."""
    if not result.ok:
        return f"no solution ({result.failure.value})\n"
    return "".join(
        f"x[{i}] ={real_to_string(v, decimals)}\n"
        for i, v in enumerate(result.solution)
    )


def format_report(report: ResidualReport, decimals: int = 8) -> str:
    """Error estimate line followed by per-row residuals."""
    lines = [f"error estimate ={real_to_string(report.total_absolute, decimals)}"]
    for i, r in enumerate(report.residuals):
        marker = " *" if i == report.worst_row else ""
        lines.append(f"  row {i}:{real_to_string(r, decimals)}{marker}")
    return "\n".join(lines) + "\n"


class TextResultWriter(ResultWriter):
    """Writes a solve outcome as fixed-precision text."""

    def __init__(self, decimals: int = 8):
        self._decimals = decimals

    def render(self, result: SolveResult, report: ResidualReport) -> str:
        return (
            format_solution(result, self._decimals)
            + format_report(report, self._decimals)
        )

    def write_result(self, result: SolveResult, report: ResidualReport, path: str) -> None:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(self.render(result, report))
