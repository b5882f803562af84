# Copyright (c) 2024 Thomas Klietsch. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for solving linear systems.

Usage:
    # Solve and print the solution with its error estimate
    gaussjordan -i system.json

    # Write JSON and text results, with a custom zero threshold
    gaussjordan -i system.json -o result.json --text result.txt --epsilon 1e-12

    # Full-precision output and solver debug logging
    gaussjordan -i system.json --decimals 0 --verbose
"""
import argparse
import logging
import sys

from gaussjordan.adapters.json_io import JsonResultWriter, JsonSystemReader
from gaussjordan.adapters.text_dump import TextResultWriter, format_matrix
from gaussjordan.domain.error_estimate import ResidualReport, residual_report
from gaussjordan.domain.pivot import DEFAULT_MAX_PIVOT_ATTEMPTS
from gaussjordan.domain.real import MAGNITUDE_ZERO
from gaussjordan.domain.results import SolveResult
from gaussjordan.domain.solver import LinearSystem, solve_system


def run(
    input_path: str,
    epsilon: float | None = None,
    max_pivot_attempts: int = DEFAULT_MAX_PIVOT_ATTEMPTS,
) -> tuple[LinearSystem, SolveResult, ResidualReport]:
    """
    Read a system file, solve it and estimate the error of the solution.

    An explicit epsilon overrides the one stored in the file.

    Returns:
        (system, result, report) for the solved system.
    """
    system = JsonSystemReader().read_system(input_path)
    if epsilon is None:
        epsilon = system.epsilon if system.epsilon is not None else MAGNITUDE_ZERO

    result = solve_system(
        system.matrix, system.equal,
        epsilon=epsilon, max_pivot_attempts=max_pivot_attempts,
    )
    report = residual_report(system.matrix, system.equal, result.solution)
    return system, result, report


def main():
    parser = argparse.ArgumentParser(
        description="Solve square or overdetermined linear systems by Gauss-Jordan elimination"
    )
    parser.add_argument(
        '--input', '-i', required=True,
        help="Path to system JSON ({\"matrix\": [[...]], \"equal\": [...]})"
    )
    parser.add_argument(
        '--output', '-o',
        help="Write the result as JSON to this path"
    )
    parser.add_argument(
        '--text',
        help="Write the result as fixed-precision text to this path"
    )
    parser.add_argument(
        '--epsilon', type=float, default=None,
        help="Magnitude below which an entry counts as zero (default: float32 epsilon)"
    )
    parser.add_argument(
        '--max-pivot-attempts', type=int, default=DEFAULT_MAX_PIVOT_ATTEMPTS,
        help=f"Budget for the pivot row search (default: {DEFAULT_MAX_PIVOT_ATTEMPTS})"
    )
    parser.add_argument(
        '--decimals', type=int, default=8,
        help="Significant digits in printed values, 0 for full precision (default: 8)"
    )
    parser.add_argument(
        '--show-matrix', action='store_true', default=False,
        help="Print the input matrix before the solution"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Log solver decisions to stderr"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )
    if args.decimals < 0:
        parser.error("--decimals must be zero or positive")
    if args.epsilon is not None and args.epsilon < 0:
        parser.error("--epsilon must be zero or positive")

    try:
        system, result, report = run(
            input_path=args.input,
            epsilon=args.epsilon,
            max_pivot_attempts=args.max_pivot_attempts,
        )
    except FileNotFoundError:
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: Cannot read input file {args.input}: {e.strerror or e}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.show_matrix:
        print(format_matrix(system.matrix, args.decimals), end="")

    text_writer = TextResultWriter(decimals=args.decimals)
    print(text_writer.render(result, report), end="")

    if args.output:
        JsonResultWriter().write_result(result, report, args.output)
        print(f"Wrote {args.output}")
    if args.text:
        text_writer.write_result(result, report, args.text)
        print(f"Wrote {args.text}")

    if not result.ok:
        print(f"Error: System could not be solved ({result.failure.value})", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
