# Copyright (c) 2024 Thomas Klietsch. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Extended-precision scalar type and numeric constants.

Real is numpy.longdouble: 80-bit extended precision on x86 Linux,
plain binary64 on platforms without an extended type.
"""
import numpy as np

Real = np.longdouble

# Quiet NaN, returned instead of raising
NAN = Real(np.nan)

# Smallest value such that 1 + epsilon != 1
NUMERIC_EPSILON = Real(np.finfo(Real).eps)

# Magnitude below which a number is considered zero
MAGNITUDE_ZERO = Real(np.finfo(np.float32).eps)

# Significant decimal digits Real can carry (digits10 + 1)
MAX_DIGITS = int(np.finfo(Real).precision) + 1


def is_finite(value) -> bool:
    """True if value, or every element of an array value, is finite."""
    return bool(np.all(np.isfinite(value)))


def as_real_vector(values) -> np.ndarray | None:
    """Convert a flat sequence of numbers to a 1-D Real array.

    Returns None when values is not a flat numeric sequence.
    """
    try:
        array = np.array(values, dtype=Real)
    except (TypeError, ValueError):
        return None
    if array.ndim != 1:
        return None
    return array


def real_to_string(value, decimals: int = 8) -> str:
    """Render a Real with `decimals` significant digits.

    With a digit count this follows printf "%g": scientific notation when
    the rounded exponent is below -4 or not below the digit count, fixed
    notation otherwise, trailing zeros removed. decimals=0 renders all
    available digits (the shortest string that round-trips the value) in
    whichever of fixed or scientific notation is shorter, fixed on a tie.
    Non-negative values get a leading space so columns line up with
    negative ones.
    """
    value = Real(value)
    if not np.isfinite(value):
        text = "nan" if np.isnan(value) else ("inf" if value > 0 else "-inf")
        return text if text.startswith("-") else " " + text

    if decimals == 0:
        positional = np.format_float_positional(value, unique=True, trim="-")
        scientific = np.format_float_scientific(
            value, unique=True, trim="-", exp_digits=2)
        text = scientific if len(scientific) < len(positional) else positional
    else:
        precision = min(decimals, MAX_DIGITS)
        scientific = np.format_float_scientific(
            value,
            precision=precision - 1,
            unique=False,
            trim="-",
            exp_digits=2,
        )
        # Exponent of the value after rounding to `precision` digits
        exponent = int(scientific.split("e")[1])
        if value != 0 and (exponent < -4 or exponent >= precision):
            text = scientific
        else:
            text = np.format_float_positional(
                value,
                precision=precision,
                unique=False,
                fractional=False,
                trim="-",
            )

    if not text.startswith("-"):
        text = " " + text
    return text
