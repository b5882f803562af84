# Copyright (c) 2024 Thomas Klietsch. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for linear system file I/O.

Adapters implement these to handle different file formats.
"""
from typing import Protocol, runtime_checkable

from gaussjordan.domain.error_estimate import ResidualReport
from gaussjordan.domain.results import SolveResult
from gaussjordan.domain.solver import LinearSystem


@runtime_checkable
class SystemReader(Protocol):
    """Port for reading a linear system."""

    def read_system(self, path: str) -> LinearSystem:
        """Read and parse a system file."""
        ...


@runtime_checkable
class ResultWriter(Protocol):
    """Port for writing a solve outcome."""

    def write_result(
        self,
        result: SolveResult,
        report: ResidualReport,
        path: str,
    ) -> None:
        """Write the solution and its residual report to a file."""
        ...
