#!/usr/bin/env python3
"""Kronrod-style extension of a Gauss-Lobatto rule via the error estimate.

Poses the overdetermined 5x4 moment system for weights A..D of the nodes
{0 (centre), 1/5, t, 1} and searches the free node t for the smallest
residual over all five moment equations.

Usage:
    python examples/kronrod_extension.py [plot_data.txt]
"""
import sys

import numpy as np

from gaussjordan import (
    NUMERIC_EPSILON,
    Matrix,
    Real,
    error_estimate,
    real_to_string,
    solve,
)


def moment_column(t: Real) -> list:
    return [2 * t ** k for k in range(5)]


def build_matrix(node: Real) -> Matrix:
    matrix = Matrix(5, 4)
    matrix.set_column(0, [2, 2, 2, 2, 2])
    matrix.set_column(1, moment_column(Real(1) / Real(5)))
    matrix.set_column(2, moment_column(node))
    matrix.set_column(3, [1, 0, 0, 0, 0])
    return matrix


EQUAL = [Real(2) / Real(2 * k + 1) for k in range(5)]


def residual_at(node: Real) -> Real:
    matrix = build_matrix(node)
    return error_estimate(matrix, EQUAL, solve(matrix, EQUAL))


def bracket_search(start: Real, end: Real, max_loops: int = 100) -> Real:
    """Shrink a 7-point stencil around the best node until it stops moving."""
    x = (start + end) / 2
    span = abs(end - x)
    for loop in range(1, max_loops):
        h = span * Real(4) ** -loop
        errors = [(residual_at(x + h * i), i) for i in range(-3, 4)]
        errors = [pair for pair in errors if np.isfinite(pair[0])]
        if not errors:
            break
        min_error, index = min(errors, key=lambda pair: pair[0])
        x += index * h
        if min_error < NUMERIC_EPSILON or h < NUMERIC_EPSILON * 2:
            break
    return x


def main():
    if len(sys.argv) > 1:
        with open(sys.argv[1], 'w', encoding='utf-8') as f:
            for i in range(500):
                t = Real("0.002") * i
                y = residual_at(t)
                if np.isfinite(y):
                    f.write(f"{real_to_string(t, 10)} {real_to_string(y, 10)}\n")
        print(f"Wrote residual samples to {sys.argv[1]}")

    x = bracket_search(Real(1) / Real(5), Real(1))
    result = solve(build_matrix(x), EQUAL)
    print(f"x ={real_to_string(x, 20)}")
    for name, value in zip("ABCD", result):
        print(f"{name} ={real_to_string(value, 20)}")


if __name__ == "__main__":
    main()
