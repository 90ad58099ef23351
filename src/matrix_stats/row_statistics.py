"""
Row Statistics: per-row sum, average and root-sum-of-squares

Each function takes a single row and returns a small immutable result.
No shared state, so they are safe to ship to any number of workers.

Note on "stddev": the value reported as stddev is sqrt(Σ x²), the
root-sum-of-squares of the row. It does not subtract the mean or divide
by n, so it is NOT the statistical standard deviation. The name is kept
to match the exercise it comes from.
"""

import math
from collections.abc import Sequence
from typing import NamedTuple

from src.matrix_stats.errors import EmptyRowError


class RowResult(NamedTuple):
    """Sum and floor-divided average of one row."""

    sum: int
    average: int


class RowSpread(NamedTuple):
    """RowResult extended with sum of squares and its square root."""

    sum: int
    average: int
    sum_of_squares: int
    stddev: float


def _require_values(row: Sequence[int]) -> None:
    if len(row) == 0:
        raise EmptyRowError("cannot compute statistics for an empty row")


def stats_for_row(row: Sequence[int]) -> RowResult:
    """
    Compute the sum and average of a row.

    The average uses floor division so it stays an integer:
    [0..9] → sum=45, average=4 (not 4.5).

    Args:
        row: The row values

    Returns:
        RowResult(sum, average)

    Raises:
        EmptyRowError: if the row has no elements
    """
    _require_values(row)
    total = sum(row)
    return RowResult(sum=total, average=total // len(row))


def spread_for_row(row: Sequence[int]) -> RowSpread:
    """
    Compute sum, average, sum of squares and root-sum-of-squares of a row.

    sum_of_squares is converted to float before the square root.
    """
    base = stats_for_row(row)
    sum_of_squares = sum(value * value for value in row)
    return RowSpread(
        sum=base.sum,
        average=base.average,
        sum_of_squares=sum_of_squares,
        stddev=math.sqrt(float(sum_of_squares)),
    )
