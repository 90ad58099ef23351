"""
Tests for src/matrix_stats/distribution.py.

The serial tests run without Spark; the Spark tests use the session
fixture from conftest.py.
"""

import pytest

from src.matrix_stats.distribution import (
    compute_row_statistics,
    compute_row_statistics_on_spark,
    matrix_total,
    partition_layout,
    reduce_row,
    row_indices,
    row_provider,
    serial_map,
    spark_map,
)
from src.matrix_stats.errors import IndexOutOfRangeError
from src.matrix_stats.matrix import Matrix, generate_matrix
from src.matrix_stats.row_statistics import RowSpread, spread_for_row

REFERENCE_RESULTS = [(45, 4), (145, 14), (245, 24), (345, 34), (445, 44)]


class TestEntryPoints:
    """Tests for row_provider() and reduce_row()."""

    def test_row_provider_is_one_based(self, reference_matrix: Matrix) -> None:
        """Verify index 1 maps to the first row."""
        assert row_provider(reference_matrix, 1) == tuple(range(10))
        assert row_provider(reference_matrix, 5) == tuple(range(40, 50))

    @pytest.mark.parametrize("i", [0, 6, -1])
    def test_row_provider_out_of_range(self, reference_matrix: Matrix, i: int) -> None:
        """Verify indices outside 1..rows raise IndexOutOfRangeError."""
        with pytest.raises(IndexOutOfRangeError):
            row_provider(reference_matrix, i)

    def test_reduce_row(self) -> None:
        """Verify reduce_row matches the reference first row."""
        assert reduce_row(tuple(range(10))) == (45, 4)

    def test_row_indices(self, reference_matrix: Matrix) -> None:
        """Verify the distributed range is 1..rows."""
        assert list(row_indices(reference_matrix)) == [1, 2, 3, 4, 5]


class TestSerialDistribution:
    """Tests for compute_row_statistics() with the in-process map."""

    def test_reference_scenario(self, reference_matrix: Matrix) -> None:
        """Verify the 5 x 10 scenario yields the reference results."""
        assert compute_row_statistics(reference_matrix) == REFERENCE_RESULTS

    def test_custom_reducer(self) -> None:
        """Verify any reducer can be plugged in."""
        results = compute_row_statistics(generate_matrix(2, 3), reducer=len)

        assert results == [3, 3]

    def test_custom_parallel_map_receives_one_based_range(self) -> None:
        """Verify the parallel map is handed indices 1..rows."""
        seen: list[int] = []

        def recording_map(func, indices):
            seen.extend(indices)
            return serial_map(func, indices)

        compute_row_statistics(generate_matrix(3, 2), recording_map)

        assert seen == [1, 2, 3]

    def test_matrix_total(self, reference_matrix: Matrix) -> None:
        """Verify the grand total equals the sum of 0..rows*cols-1."""
        results = compute_row_statistics(reference_matrix)

        assert matrix_total(results) == sum(range(50)) == 1225


class TestSparkDistribution:
    """Tests for the Spark-backed parallel map."""

    def test_reference_scenario(self, sc, reference_matrix: Matrix) -> None:
        """Verify parallelize/map/collect reproduces the reference results."""
        results = compute_row_statistics(reference_matrix, spark_map(sc))

        assert results == REFERENCE_RESULTS

    @pytest.mark.parametrize("num_slices", [1, 2, 5])
    def test_result_order_independent_of_partitions(
        self, sc, reference_matrix: Matrix, num_slices: int
    ) -> None:
        """Verify results come back in row order for any partition count."""
        results = compute_row_statistics(reference_matrix, spark_map(sc, num_slices))

        assert results == REFERENCE_RESULTS

    def test_matches_serial_run(self, sc) -> None:
        """Verify Spark and serial maps agree on a larger matrix."""
        matrix = generate_matrix(40, 7)

        assert compute_row_statistics(matrix, spark_map(sc, 4)) == compute_row_statistics(matrix)

    def test_broadcast_variant(self, sc, reference_matrix: Matrix) -> None:
        """Verify the broadcast variant gives the same results."""
        results = compute_row_statistics_on_spark(sc, reference_matrix, num_slices=2)

        assert results == REFERENCE_RESULTS

    def test_broadcast_variant_with_spread(self, sc, reference_matrix: Matrix) -> None:
        """Verify RowSpread results survive the trip back to the driver."""
        results = compute_row_statistics_on_spark(sc, reference_matrix, reducer=spread_for_row)

        assert all(isinstance(result, RowSpread) for result in results)
        assert results[0].sum_of_squares == 285
        assert results[0].stddev == pytest.approx(285 ** 0.5)

    def test_partition_layout_covers_all_rows(self, sc, reference_matrix: Matrix) -> None:
        """Verify each row index lands in exactly one partition."""
        layout = partition_layout(sc, reference_matrix, 2)

        assert len(layout) == 2
        assert [i for part in layout for i in part] == [1, 2, 3, 4, 5]

    def test_task_error_surfaces_on_driver(self, sc, reference_matrix: Matrix) -> None:
        """Verify an error raised inside a task fails the whole job."""

        def failing_reducer(row):
            raise ValueError("boom")

        with pytest.raises(Exception, match="boom"):
            compute_row_statistics(reference_matrix, spark_map(sc), reducer=failing_reducer)
