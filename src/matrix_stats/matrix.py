"""
Matrix Generator: Deterministic Synthetic Matrix

Builds an m x n integer matrix whose cells hold their own row-major
linear index:

    cell(i, j) = i * n + j

    m=3, n=4 →   0,  1,  2,  3
                 4,  5,  6,  7
                 8,  9, 10, 11

The matrix is an immutable value: built once on the driver, shipped to
workers read-only, never mutated.
"""

from collections.abc import Iterable
from typing import NamedTuple

from src.matrix_stats.errors import IndexOutOfRangeError, InvalidDimensionError

Row = tuple[int, ...]


def _is_integer(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_dimension(name: str, value: int) -> None:
    if not _is_integer(value) or value <= 0:
        raise InvalidDimensionError(f"{name} must be a positive integer, got {value!r}")


def _check_index(name: str, value: int, limit: int) -> None:
    if not _is_integer(value) or not 0 <= value < limit:
        raise IndexOutOfRangeError(f"{name} index {value!r} not in [0, {limit})")


class _MatrixFields(NamedTuple):
    rows: int
    cols: int
    cells: tuple[Row, ...]


class Matrix(_MatrixFields):
    """
    An immutable rows x cols integer matrix with cells[i][j] == i * cols + j.

    Construction validates the dimensions and the cell contents, so every
    Matrix value satisfies the invariant. generate_matrix() is the usual
    way to build one.
    """

    __slots__ = ()

    def __new__(cls, rows: int, cols: int, cells: Iterable[Iterable[int]]):
        _check_dimension("rows", rows)
        _check_dimension("cols", cols)

        cells = tuple(tuple(row) for row in cells)
        expected = tuple(tuple(range(i * cols, i * cols + cols)) for i in range(rows))
        if cells != expected:
            raise InvalidDimensionError(
                f"cells do not form a {rows} x {cols} matrix with cell(i, j) == i * {cols} + j"
            )
        return super().__new__(cls, rows, cols, cells)

    def row(self, i: int) -> Row:
        """Return row i (zero-based)."""
        _check_index("row", i, self.rows)
        return self.cells[i]

    def cell(self, i: int, j: int) -> int:
        """Return the value at row i, column j (both zero-based)."""
        _check_index("column", j, self.cols)
        return self.row(i)[j]


def generate_matrix(m: int, n: int) -> Matrix:
    """
    Generate an m x n matrix where cell (i, j) == i * n + j.

    Args:
        m: Number of rows (positive)
        n: Number of columns (positive)

    Returns:
        The generated Matrix

    Raises:
        InvalidDimensionError: if m or n is not a positive integer
    """
    _check_dimension("rows", m)
    _check_dimension("cols", n)

    cells = tuple(tuple(range(i * n, i * n + n)) for i in range(m))
    return Matrix(rows=m, cols=n, cells=cells)


def format_matrix(matrix: Matrix) -> str:
    """
    Render the matrix for human inspection.

    Every cell is right-aligned to the width of the largest value
    (rows * cols - 1); columns are joined with ", " and rows with newlines.
    """
    width = len(str(matrix.rows * matrix.cols - 1))
    return "\n".join(
        ", ".join(str(value).rjust(width) for value in row) for row in matrix.cells
    )
