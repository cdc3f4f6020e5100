"""Conversion between path strings and point sequences.

``path_string_to_points`` resolves relative lineto pairs and closepath into
plain absolute points. ``points_to_path_string`` renders the canonical form:
absolute coordinates, one explicit command letter per point, and a trailing
``Z`` when the last point repeats the first. Round-tripping through text keeps
the geometry but not the original spelling.
"""

from __future__ import annotations

from typing import Any, List

from polypath.dsl.grammar import (
    PAIR_REGEX,
    PATH_SLICE_REGEX,
    is_coordinate,
    is_path_string,
    is_point_array,
)
from polypath.logging import get_logger
from polypath.types.base import (
    CLOSEPATH,
    LINETO,
    MIN_POINTS,
    MOVETO,
    Point,
    PointSequence,
    invalid_path,
)

__all__ = [
    "is_closed",
    "normalize_points",
    "path_string_to_points",
    "points_to_path_string",
]

logger = get_logger(__name__)


def path_string_to_points(path_string: str) -> List[Point]:
    """Convert a valid path string into its absolute point sequence.

    Relative lineto pairs are offset from the previously resolved point, so
    consecutive relative pairs chain. A closepath appends a copy of the
    moveto point.

    Args:
        path_string: String accepted by ``is_path_string``.

    Returns:
        List of ``(x, y)`` integer tuples.

    Raises:
        InvalidPathError: If ``path_string`` is not a valid path string, or
            relative pairs accumulate past ``COORDINATE_LIMIT``.

    Examples:
        >>> path_string_to_points("M100 100l100 200")
        [(100, 100), (200, 300)]
        >>> path_string_to_points("M100 100L100 200Z")
        [(100, 100), (100, 200), (100, 100)]
    """
    if not is_path_string(path_string):
        invalid_path(path_string)

    parts = PATH_SLICE_REGEX.fullmatch(path_string)
    # The grammar check above guarantees the slice regex matches
    assert parts is not None

    moveto = PAIR_REGEX.search(parts.group("moveto"))
    assert moveto is not None
    opener: Point = (int(moveto.group("x")), int(moveto.group("y")))
    points: List[Point] = [opener]

    relative = False
    for pair in PAIR_REGEX.finditer(parts.group("lineto")):
        cmd = pair.group("cmd")
        if cmd is not None:
            relative = cmd.islower()
        x = int(pair.group("x"))
        y = int(pair.group("y"))
        if relative:
            prev_x, prev_y = points[-1]
            x += prev_x
            y += prev_y
            if not (is_coordinate(x) and is_coordinate(y)):
                invalid_path(path_string)
        points.append((x, y))

    if parts.group("close") is not None:
        points.append(opener)

    logger.debug(
        "Parsed path string into %d points (closed=%s)",
        len(points),
        parts.group("close") is not None,
    )
    return points


def points_to_path_string(points: PointSequence) -> str:
    """Render a valid point sequence as a canonical path string.

    Args:
        points: Sequence accepted by ``is_point_array``.

    Returns:
        String of the form ``M<x> <y>( L<x> <y>)*( Z)?``.

    Raises:
        InvalidPathError: If ``points`` is not a valid point sequence.

    Examples:
        >>> points_to_path_string([[100, 100], [100, 200], [100, 100]])
        'M100 100 L100 200 Z'
    """
    resolved = normalize_points(points)

    closed = is_closed(resolved)
    if closed:
        resolved = resolved[:-1]

    tokens = [
        f"{MOVETO if index == 0 else LINETO}{x} {y}"
        for index, (x, y) in enumerate(resolved)
    ]
    if closed:
        tokens.append(CLOSEPATH)
    return " ".join(tokens)


def is_closed(points: PointSequence) -> bool:
    """Return True if the sequence ends on its starting point.

    A two-point sequence whose points coincide is not treated as closed: it
    has no segment left to close once the duplicate is dropped, and
    ``M<x> <y> Z`` is not a valid path string.
    """
    return len(points) > MIN_POINTS and tuple(points[0]) == tuple(points[-1])


def normalize_points(points: Any) -> List[Point]:
    """Validate ``points`` and return a fresh list of ``(int, int)`` tuples.

    Integer-valued floats such as ``100.0`` are accepted and converted.

    Raises:
        InvalidPathError: If ``points`` is not a valid point sequence.
    """
    if not is_point_array(points):
        invalid_path(points)
    return [(int(point[0]), int(point[1])) for point in points]
