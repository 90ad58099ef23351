"""
Explicit Parallelism: Row Sum of Squares ("standard deviation")

Extends the row sums job: each worker also computes Σ x² for its row
and the square root of it. The matrix is broadcast to the executors
once instead of travelling inside every task.

The reported "stddev" is the root-sum-of-squares sqrt(Σ x²), not the
statistical standard deviation. For row [0..9]: sqrt(285) ≈ 16.88.
"""

import sys

from src.common.job_config import parse_job_args
from src.common.output_writer import write_matrix_report
from src.common.spark_session import create_spark_session
from src.matrix_stats.distribution import compute_row_statistics_on_spark
from src.matrix_stats.matrix import generate_matrix
from src.matrix_stats.row_statistics import RowSpread, spread_for_row


def print_results(results: list[RowSpread]) -> None:
    print("\n--- Row spread ---")
    for i, result in enumerate(results, start=1):
        print(
            f"  Row {i}: sum={result.sum}, average={result.average}, "
            f"sum_of_squares={result.sum_of_squares}, stddev={result.stddev:.2f}"
        )


def main() -> None:
    """Main entry point computing per-row root-sum-of-squares with Spark."""
    config = parse_job_args(sys.argv[1:])
    matrix = generate_matrix(config.rows, config.cols)

    spark = create_spark_session(__file__, default_parallelism=config.num_slices)
    sc = spark.sparkContext

    print("=== Explicit Parallelism: Row Sum of Squares ===\n")
    print(f"Matrix: {matrix.rows} x {matrix.cols}")

    results = compute_row_statistics_on_spark(
        sc, matrix, reducer=spread_for_row, num_slices=config.num_slices
    )
    print_results(results)

    path = write_matrix_report(matrix, results, f"{config.output_path}_stddev")
    print(f"\nReport written to: {path}")

    spark.stop()


if __name__ == "__main__":
    main()
