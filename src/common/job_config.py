"""
Job configuration for the matrix statistics examples.

Jobs take optional positional arguments, in this order:

    rows cols output_path num_slices

Missing arguments fall back to the defaults below.
"""

from collections.abc import Sequence
from typing import NamedTuple

DEFAULT_ROWS = 5
DEFAULT_COLS = 10
DEFAULT_OUTPUT_PATH = "output/matrix"


class JobConfig(NamedTuple):
    """Parameters shared by every matrix statistics job."""

    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS
    output_path: str = DEFAULT_OUTPUT_PATH
    num_slices: int | None = None


def parse_job_args(argv: Sequence[str]) -> JobConfig:
    """
    Build a JobConfig from command-line arguments.

    Args:
        argv: Arguments after the script name (i.e. sys.argv[1:])

    Returns:
        JobConfig with defaults for any argument not given

    Raises:
        ValueError: if rows, cols or num_slices is not an integer, or if
            num_slices is not positive
    """
    rows = int(argv[0]) if len(argv) >= 1 else DEFAULT_ROWS
    cols = int(argv[1]) if len(argv) >= 2 else DEFAULT_COLS
    output_path = argv[2] if len(argv) >= 3 else DEFAULT_OUTPUT_PATH
    num_slices = int(argv[3]) if len(argv) >= 4 else None
    if num_slices is not None and num_slices <= 0:
        raise ValueError(f"num_slices must be a positive integer, got {num_slices}")
    return JobConfig(rows=rows, cols=cols, output_path=output_path, num_slices=num_slices)
