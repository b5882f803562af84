# Copyright (c) 2024 Thomas Klietsch. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Public API contract: top-level exports and the sentinel surface."""
import math

import gaussjordan
from gaussjordan import Matrix, error_estimate, solve


class TestExports:
    def test_all_names_resolve(self):
        for name in gaussjordan.__all__:
            assert hasattr(gaussjordan, name), f"Missing export: {name}"

    def test_version(self):
        assert isinstance(gaussjordan.__version__, str)


class TestSentinelSurface:
    def test_solve_then_estimate(self):
        m = Matrix(2, 2)
        m.set_row(0, [0, 1])
        m.set_row(1, [1, 0])
        x = solve(m, [7, 2])
        assert x == [2, 7]
        assert error_estimate(m, [7, 2], x) == 0

    def test_failure_chain_is_empty_then_nan(self):
        m = Matrix(2, 3)
        x = solve(m, [1, 2])
        assert x == []
        assert math.isnan(error_estimate(m, [1, 2], x))
