"""Shared typing constructs for polypath.

This package defines the point aliases, grammar constants, and the single
domain error used across the codebase. It contains no parsing logic.
"""

from polypath.types.base import (
    CLOSEPATH,
    COORDINATE_LIMIT,
    INVALID_PATH_MSG,
    LINETO,
    MAX_COORDINATE_DIGITS,
    MIN_POINTS,
    MOVETO,
    InvalidPathError,
    Point,
    PointSequence,
    invalid_path,
)

__all__ = [
    # Type aliases and constants
    "Point",
    "PointSequence",
    "MIN_POINTS",
    "MAX_COORDINATE_DIGITS",
    "COORDINATE_LIMIT",
    "INVALID_PATH_MSG",
    "MOVETO",
    "LINETO",
    "CLOSEPATH",
    # Errors
    "InvalidPathError",
    "invalid_path",
]
