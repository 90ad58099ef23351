"""
Explicit Parallelism: How Row Indices Are Partitioned

Shows which rows each partition receives for a few partition counts,
and that collect() returns results in submission order no matter how
the indices were split.
"""

import sys

from src.common.job_config import parse_job_args
from src.common.spark_session import create_spark_session
from src.matrix_stats.distribution import (
    compute_row_statistics,
    partition_layout,
    serial_map,
    spark_map,
)
from src.matrix_stats.matrix import generate_matrix

PARTITION_COUNTS = [1, 2, 3]


def main() -> None:
    """Print the partition layout of the row indices and compare results."""
    config = parse_job_args(sys.argv[1:])
    matrix = generate_matrix(config.rows, config.cols)

    spark = create_spark_session(__file__)
    sc = spark.sparkContext

    print("=== Explicit Parallelism: Row Index Partitioning ===\n")
    print(f"Rows: 1..{matrix.rows}")

    expected = compute_row_statistics(matrix, serial_map)

    for n_parts in PARTITION_COUNTS:
        layout = partition_layout(sc, matrix, n_parts)
        results = compute_row_statistics(matrix, spark_map(sc, n_parts))
        print(f"\n{n_parts} partition(s):")
        for i, rows in enumerate(layout):
            print(f"  Partition {i}: rows {rows}")
        print(f"  Same as serial run: {results == expected}")

    spark.stop()


if __name__ == "__main__":
    main()
