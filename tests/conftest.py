"""
Pytest configuration and shared fixtures for the matrix statistics tests.
"""

import os
from pathlib import Path

import pytest
from pyspark.sql import SparkSession

from src.matrix_stats.matrix import Matrix, generate_matrix


@pytest.fixture(scope="session")
def spark() -> SparkSession:
    """
    Create a SparkSession for testing.

    Session scope: only one SparkContext can live per JVM, and starting
    it is by far the slowest part of the suite.
    """
    # Python workers import src.* by name, so they need the project root too
    project_root = str(Path(__file__).parent.parent)
    pythonpath = os.environ.get("PYTHONPATH")
    os.environ["PYTHONPATH"] = os.pathsep.join(filter(None, [project_root, pythonpath]))

    spark = (
        SparkSession.builder
        .appName("pytest-matrix-stats")
        .master("local[2]")  # Two worker threads, enough to exercise partitioning
        .config("spark.sql.shuffle.partitions", "2")
        .config("spark.ui.enabled", "false")
        .config("spark.driver.memory", "1g")
        .getOrCreate()
    )

    spark.sparkContext.setLogLevel("WARN")

    yield spark

    spark.stop()


@pytest.fixture(scope="session")
def sc(spark: SparkSession):
    """SparkContext from the SparkSession fixture, for RDD-based tests."""
    return spark.sparkContext


@pytest.fixture
def reference_matrix() -> Matrix:
    """The 5 x 10 matrix used by the reference scenario."""
    return generate_matrix(5, 10)
