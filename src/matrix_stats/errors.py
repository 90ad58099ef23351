"""
Error kinds raised by the matrix statistics core.

Each error subclasses the matching builtin so callers can catch either
the specific kind or the generic ValueError / IndexError.
"""


class MatrixStatsError(Exception):
    """Base class for all matrix statistics errors."""


class InvalidDimensionError(MatrixStatsError, ValueError):
    """Matrix rows or cols is not a positive integer."""


class IndexOutOfRangeError(MatrixStatsError, IndexError):
    """Row or cell accessor called with an out-of-bounds index."""


class EmptyRowError(MatrixStatsError, ValueError):
    """Row statistics requested for a row with no elements."""
