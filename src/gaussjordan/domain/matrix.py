# Copyright (c) 2024 Thomas Klietsch. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Dense, fixed-dimension matrix of Real values.

Only square or overdetermined shapes (rows >= columns) are valid. A request
for an underdetermined shape yields an empty 0x0 matrix instead of raising.

Reads and writes come in two flavours:

- read/write (and matrix[row, column]) never raise. Out-of-range reads
  return NaN, out-of-range or non-finite writes are discarded.
- at/assign raise MatrixIndexError on out-of-range cells.

Whole-row and whole-column replacement is all-or-nothing: the data must
have the right length and contain only finite values, otherwise the matrix
is left untouched.
"""
import numpy as np

from gaussjordan.domain.errors import MatrixIndexError
from gaussjordan.domain.real import MAGNITUDE_ZERO, NAN, Real, as_real_vector, is_finite


class Matrix:
    """Dense row-major matrix with bounds-checked cell access."""

    __slots__ = ("_cells",)

    def __init__(self, rows: int = 0, columns: int = 0):
        if rows < columns or rows < 0 or columns < 0:
            rows, columns = 0, 0
        self._cells = np.zeros((rows, columns), dtype=Real)

    @classmethod
    def from_rows(cls, rows) -> "Matrix":
        """Build a matrix from a sequence of equal-length rows.

        Rows that fail set_row (wrong length, non-finite values) stay zero.
        """
        rows = list(rows)
        n_columns = len(rows[0]) if rows else 0
        matrix = cls(len(rows), n_columns)
        for index, data in enumerate(rows):
            matrix.set_row(index, data)
        return matrix

    @property
    def rows(self) -> int:
        return self._cells.shape[0]

    @property
    def columns(self) -> int:
        return self._cells.shape[1]

    def dimensions(self) -> tuple[int, int]:
        """Return (rows, columns)."""
        return self.rows, self.columns

    def _in_bounds(self, row, column) -> bool:
        if not isinstance(row, (int, np.integer)) or isinstance(row, bool):
            return False
        if not isinstance(column, (int, np.integer)) or isinstance(column, bool):
            return False
        return 0 <= row < self.rows and 0 <= column < self.columns

    def read(self, row: int, column: int) -> Real:
        """Value at (row, column), or NaN when out of range."""
        if not self._in_bounds(row, column):
            return NAN
        return self._cells[row, column]

    def write(self, row: int, column: int, value) -> bool:
        """Store value at (row, column) if possible.

        Out-of-range cells and non-finite values are discarded silently;
        the return value tells whether the write landed.
        """
        if not self._in_bounds(row, column):
            return False
        try:
            value = Real(value)
        except (TypeError, ValueError):
            return False
        if not is_finite(value):
            return False
        self._cells[row, column] = value
        return True

    def at(self, row: int, column: int) -> Real:
        """Value at (row, column); raises MatrixIndexError when out of range."""
        if not self._in_bounds(row, column):
            raise MatrixIndexError(row, column, self.dimensions())
        return self._cells[row, column]

    def assign(self, row: int, column: int, value) -> None:
        """Store value at (row, column), raising on bad index or value."""
        if not self._in_bounds(row, column):
            raise MatrixIndexError(row, column, self.dimensions())
        value = Real(value)
        if not is_finite(value):
            raise ValueError(f"Cell ({row}, {column}) cannot hold non-finite value {value}")
        self._cells[row, column] = value

    def __getitem__(self, key) -> Real:
        row, column = key
        return self.read(row, column)

    def __setitem__(self, key, value) -> None:
        row, column = key
        self.write(row, column, value)

    def set_row(self, index: int, data) -> bool:
        """Replace row `index` with data; False leaves the matrix unchanged."""
        if not self.columns or not self._in_bounds(index, 0):
            return False
        values = as_real_vector(data)
        if values is None or values.shape[0] != self.columns:
            return False
        if not is_finite(values):
            return False
        self._cells[index, :] = values
        return True

    def set_column(self, index: int, data) -> bool:
        """Replace column `index` with data; False leaves the matrix unchanged."""
        if not self.rows or not self._in_bounds(0, index):
            return False
        values = as_real_vector(data)
        if values is None or values.shape[0] != self.rows:
            return False
        if not is_finite(values):
            return False
        self._cells[:, index] = values
        return True

    def row(self, index: int) -> tuple:
        """Copy of row `index`, empty when out of range."""
        if not self._in_bounds(index, 0):
            return ()
        return tuple(self._cells[index, :])

    def column(self, index: int) -> tuple:
        """Copy of column `index`, empty when out of range."""
        if not self._in_bounds(0, index):
            return ()
        return tuple(self._cells[:, index])

    def is_valid(self) -> bool:
        """True for a non-empty square or overdetermined matrix."""
        return self.rows > 0 and self.columns > 0 and self.rows >= self.columns

    def is_diagonal_nonzero(self, epsilon=MAGNITUDE_ZERO) -> bool:
        """True if every leading diagonal cell has magnitude >= epsilon.

        Only the leading columns x columns block is inspected; rows beyond
        it in an overdetermined matrix are ignored.
        """
        if not self.is_valid():
            return False
        n = self.columns
        diagonal = np.abs(np.diagonal(self._cells[:n, :n]))
        return bool(np.all(diagonal >= epsilon))

    def to_array(self) -> np.ndarray:
        """Copy of the cells as a (rows, columns) Real array."""
        return self._cells.copy()

    def copy(self) -> "Matrix":
        clone = Matrix()
        clone._cells = self._cells.copy()
        return clone

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._cells.shape == other._cells.shape and bool(
            np.array_equal(self._cells, other._cells)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix({self.rows}x{self.columns})"
