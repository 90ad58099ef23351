"""
Distribution Boundary: handing rows to a parallel map

The core only exposes two pure functions to the execution engine:

    row_provider(matrix, i)  one-based row index → row values
    reduce_row(row)          row values → RowResult

Everything else (partitioning the index range, scheduling, retrying failed
tasks, collecting results) belongs to the engine. The engine is abstracted
as a ParallelMap: any callable (func, indices) → list of results ordered
by submission.

    indices 1..m ──parallelize──► [1, 2] [3, 4] [5]     (partitions)
                  ──map─────────► row_provider → reduce_row
                  ──collect─────► [r1, r2, r3, r4, r5]  (driver)
"""

from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

from pyspark import SparkContext

from src.matrix_stats.matrix import Matrix, Row
from src.matrix_stats.row_statistics import RowResult, stats_for_row

T = TypeVar("T")

ParallelMap = Callable[[Callable[[int], T], Sequence[int]], list[T]]


# ---------------------------------------------------------------------------
# Entry points handed to the engine
# ---------------------------------------------------------------------------


def row_provider(matrix: Matrix, i: int) -> Row:
    """Return row i using the driver's one-based convention (1..rows)."""
    return matrix.row(i - 1)


def reduce_row(row: Sequence[int]) -> RowResult:
    """Reduce one row to its RowResult."""
    return stats_for_row(row)


def row_indices(matrix: Matrix) -> range:
    """One-based row indices 1..rows, the range the engine distributes."""
    return range(1, matrix.rows + 1)


# ---------------------------------------------------------------------------
# Parallel map implementations
# ---------------------------------------------------------------------------


def serial_map(func: Callable[[int], T], indices: Sequence[int]) -> list[T]:
    """Run func over indices in the current process, in order."""
    return list(map(func, indices))


def spark_map(sc: SparkContext, num_slices: int | None = None) -> ParallelMap:
    """
    Build a ParallelMap backed by Spark's parallelize → map → collect.

    Args:
        sc: Active SparkContext
        num_slices: Partition count hint (None lets Spark decide)

    Returns:
        A callable (func, indices) → list, ordered like indices
    """

    def _map(func: Callable[[int], T], indices: Sequence[int]) -> list[T]:
        return sc.parallelize(indices, num_slices).map(func).collect()

    return _map


# ---------------------------------------------------------------------------
# Driver-side orchestration
# ---------------------------------------------------------------------------


def compute_row_statistics(
    matrix: Matrix,
    parallel_map: ParallelMap = serial_map,
    reducer: Callable[[Sequence[int]], T] = reduce_row,
) -> list[T]:
    """
    Compute reducer(row) for every row of the matrix through a parallel map.

    The matrix travels inside the task closure, so each task only reads
    its own row of an immutable value.
    """

    def task(i: int) -> T:
        return reducer(row_provider(matrix, i))

    return parallel_map(task, row_indices(matrix))


def compute_row_statistics_on_spark(
    sc: SparkContext,
    matrix: Matrix,
    reducer: Callable[[Sequence[int]], T] = reduce_row,
    num_slices: int | None = None,
) -> list[T]:
    """
    Spark variant of compute_row_statistics using a broadcast matrix.

    The matrix is broadcast once to every executor instead of being
    serialized with each task; workers then look up their row locally.
    """
    broadcasted = sc.broadcast(matrix)

    def task(i: int) -> T:
        return reducer(row_provider(broadcasted.value, i))

    return sc.parallelize(row_indices(matrix), num_slices).map(task).collect()


def partition_layout(
    sc: SparkContext,
    matrix: Matrix,
    num_slices: int | None = None,
) -> list[list[int]]:
    """Show which one-based row indices end up in each partition."""
    return sc.parallelize(row_indices(matrix), num_slices).glom().collect()


def matrix_total(results: Iterable[RowResult]) -> int:
    """Grand total of the collected row sums, reduced on the driver."""
    return sum(result.sum for result in results)
