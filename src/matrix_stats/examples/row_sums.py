"""
Explicit Parallelism: Row Sums and Averages

Generates a small deterministic matrix on the driver, hands the row
indices to Spark and collects one (sum, average) pair per row.

Algorithm:
    1. Driver builds the m x n matrix (cell = i * n + j)
    2. parallelize() splits the row indices 1..m across partitions
    3. map() runs row_provider → reduce_row for each index on a worker
    4. collect() brings the ordered results back to the driver

Expected with the defaults (5 x 10):
    [(45, 4), (145, 14), (245, 24), (345, 34), (445, 44)]
"""

import sys

from src.common.job_config import parse_job_args
from src.common.output_writer import write_matrix_report
from src.common.spark_session import create_spark_session
from src.matrix_stats.distribution import compute_row_statistics, matrix_total, spark_map
from src.matrix_stats.matrix import format_matrix, generate_matrix
from src.matrix_stats.row_statistics import RowResult


def print_results(results: list[RowResult]) -> None:
    """Print one line per row plus the grand total."""
    print("\n--- Row statistics ---")
    for i, result in enumerate(results, start=1):
        print(f"  Row {i}: sum={result.sum}, average={result.average}")
    print(f"\n  Matrix total: {matrix_total(results)}")


def main() -> None:
    """Main entry point computing per-row sums and averages with Spark."""
    config = parse_job_args(sys.argv[1:])
    matrix = generate_matrix(config.rows, config.cols)

    spark = create_spark_session(__file__, default_parallelism=config.num_slices)
    sc = spark.sparkContext

    print("=== Explicit Parallelism: Row Sums and Averages ===\n")
    print(f"Matrix ({matrix.rows} x {matrix.cols}):")
    print(format_matrix(matrix))

    results = compute_row_statistics(matrix, spark_map(sc, config.num_slices))
    print_results(results)

    path = write_matrix_report(matrix, results, config.output_path)
    print(f"\nReport written to: {path}")

    spark.stop()


if __name__ == "__main__":
    main()
