# Copyright (c) 2024 Thomas Klietsch. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Solve result that keeps the "empty means failure" surface."""
from dataclasses import dataclass

from gaussjordan.domain.errors import SolveFailure


@dataclass(frozen=True)
class SolveResult:
    """Outcome of a solve.

    Iterates, indexes and measures like the solution tuple, so an empty
    (falsy) result is a failed one. `failure` names the reason.
    `pivot_rows` lists which original row fed each row of the square
    system that was eliminated.
    """
    solution: tuple = ()
    failure: SolveFailure | None = None
    pivot_rows: tuple = ()

    @classmethod
    def failed(cls, reason: SolveFailure) -> "SolveResult":
        return cls(solution=(), failure=reason, pivot_rows=())

    @property
    def ok(self) -> bool:
        return self.failure is None

    def __len__(self) -> int:
        return len(self.solution)

    def __iter__(self):
        return iter(self.solution)

    def __getitem__(self, index):
        return self.solution[index]
