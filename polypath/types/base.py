"""Base type aliases, constants, and the domain error for path handling."""

from __future__ import annotations

from typing import Any, NoReturn, Sequence, Tuple

#: A single 2D point with integer coordinates.
Point = Tuple[int, int]

#: Ordered, connected sequence of points (at least ``MIN_POINTS`` long).
PointSequence = Sequence[Point]

#: Fewest points that still describe a connected path (one segment).
MIN_POINTS = 2

#: Most decimal digits a coordinate may carry. Kept below the smallest int/str
#: conversion limit CPython can be configured with (640 digits).
MAX_COORDINATE_DIGITS = 600

#: Coordinates must be strictly smaller than this in absolute value.
COORDINATE_LIMIT = 10**MAX_COORDINATE_DIGITS

#: Message carried by every ``InvalidPathError``.
INVALID_PATH_MSG = "Invalid path."

MOVETO = "M"
LINETO = "L"
CLOSEPATH = "Z"


class InvalidPathError(ValueError):
    """Raised when a value is neither a valid path string nor a point sequence.

    Attributes:
        value: The rejected input, kept for diagnostics.
    """

    def __init__(self, value: Any = None, message: str = INVALID_PATH_MSG) -> None:
        super().__init__(message)
        self.value = value


def invalid_path(value: Any) -> NoReturn:
    """Raise ``InvalidPathError`` for ``value``.

    Args:
        value: The rejected input.

    Raises:
        InvalidPathError: Always.
    """
    raise InvalidPathError(value)
