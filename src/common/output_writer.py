"""
Text output for the matrix statistics jobs.

The report is free-form and meant for people: the formatted matrix,
a blank line, then one line per row with its statistics.
"""

from collections.abc import Sequence
from pathlib import Path
from src.matrix_stats.matrix import Matrix, format_matrix
from src.matrix_stats.row_statistics import RowResult, RowSpread

Result = RowResult | RowSpread

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent.parent


def resolve_output_path(output_path: str | Path) -> Path:
    """Resolve a path relative to the project root unless it is absolute."""
    path = Path(output_path)
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return path


def format_result_line(index: int, result: Result) -> str:
    """
    Format one row's result as "row <i>: field=value ...".

    Works for RowResult and RowSpread; floats are
    shown with two decimals.
    """
    fields = []
    for name, value in result._asdict().items():
        shown = f"{value:.2f}" if isinstance(value, float) else str(value)
        fields.append(f"{name}={shown}")
    return f"row {index}: " + " ".join(fields)


def write_matrix_report(
    matrix: Matrix,
    results: Sequence[Result],
    output_path: str | Path,
) -> Path:
    """
    Write the matrix and its per-row results to a text file.

    Parent directories are created and an existing file is overwritten.
    Result lines use the one-based row numbering of the driver.

    Returns:
        The resolved path that was written
    """
    path = resolve_output_path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    lines = [format_matrix(matrix), ""]
    lines.extend(format_result_line(i, result) for i, result in enumerate(results, start=1))

    with path.open("w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")

    return path
