"""
Shared SparkSession factory for the matrix statistics jobs.

Every job gets its session from here so they share one set of local
defaults. Logging is configured via conf/log4j2.properties:
- INFO and above goes to .logs/spark.log
- Only ERROR reaches the console, so the job's own output stays readable
"""

import os
from pathlib import Path

from pyspark import SparkContext
from pyspark.sql import SparkSession

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

LOG4J2_CONFIG = PROJECT_ROOT / "conf" / "log4j2.properties"
LOGS_DIR = PROJECT_ROOT / ".logs"

# App names look like: ExplicitParallelism-RowSums
APP_NAME_PREFIX = "ExplicitParallelism"


def _job_name(script_id: str | None) -> str | None:
    """
    Turn a script identifier into a TitleCase job name.

    A file path (__file__) is reduced to its stem and converted from
    snake_case, so ".../row_sums.py" becomes "RowSums". Anything else is
    returned unchanged.
    """
    if script_id is None:
        return None
    if "/" in script_id or script_id.endswith(".py"):
        return "".join(word.capitalize() for word in Path(script_id).stem.split("_"))
    return script_id


def build_app_name(script_name: str | None = None) -> str:
    """Build the full application name, e.g. "ExplicitParallelism-RowSums"."""
    job_name = _job_name(script_name)
    if job_name:
        return f"{APP_NAME_PREFIX}-{job_name}"
    return APP_NAME_PREFIX


def build_session_config(default_parallelism: int | None = None) -> dict[str, str]:
    """
    Spark settings applied to every job session.

    default_parallelism becomes spark.default.parallelism, the partition
    count parallelize() uses when the job does not pass one.
    """
    config = {
        "spark.sql.shuffle.partitions": "4",
        "spark.driver.memory": "2g",
        "spark.ui.showConsoleProgress": "false",
    }

    if LOG4J2_CONFIG.exists():
        config["spark.driver.extraJavaOptions"] = f"-Dlog4j.configurationFile=file:{LOG4J2_CONFIG}"

    if default_parallelism is not None:
        config["spark.default.parallelism"] = str(default_parallelism)

    return config


def create_spark_session(
    script_name: str | None = None,
    master: str = "local[*]",
    default_parallelism: int | None = None,
) -> SparkSession:
    """
    Create (or reuse) a SparkSession with the project's local defaults.

    Args:
        script_name: __file__ of the calling job, or a direct name
        master: Spark master URL (default: local[*], one worker thread per core)
        default_parallelism: Partition count parallelize() uses when none is
            given (spark.default.parallelism); None keeps Spark's default

    Returns:
        Configured SparkSession instance

    Example:
        spark = create_spark_session(__file__)
    """
    LOGS_DIR.mkdir(exist_ok=True)

    # log4j2 resolves its relative file appender path against the cwd
    original_cwd = os.getcwd()
    os.chdir(PROJECT_ROOT)

    try:
        builder = SparkSession.builder.appName(build_app_name(script_name)).master(master)

        for key, value in build_session_config(default_parallelism).items():
            builder = builder.config(key, value)

        spark = builder.getOrCreate()

        spark.sparkContext.setLogLevel("ERROR")

        return spark
    finally:
        os.chdir(original_cwd)


def get_spark_context(
    script_name: str | None = None,
    default_parallelism: int | None = None,
) -> SparkContext:
    """Get the SparkContext behind a session, for RDD-based jobs."""
    return create_spark_session(script_name, default_parallelism=default_parallelism).sparkContext
