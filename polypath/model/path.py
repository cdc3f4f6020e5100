"""Connected 2D path of integer points.

``Path`` owns an immutable tuple of ``(x, y)`` points and the canonical path
string derived from them. It is built from either a path string or a point
sequence, behaves as a read-only sequence of points, and every derived path
(``clone``, ``filter``, ``map``, ``slice``) goes back through the constructor,
so an operation that yields fewer than two points or a malformed point raises
``InvalidPathError`` instead of returning a degenerate path.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import (
    Any,
    Callable,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    Union,
    overload,
)

from polypath.dsl.convert import (
    is_closed,
    normalize_points,
    path_string_to_points,
    points_to_path_string,
)
from polypath.dsl.grammar import is_path_string, is_point_array
from polypath.logging import get_logger
from polypath.types.base import InvalidPathError, Point, invalid_path

__all__ = ["Path"]

logger = get_logger(__name__)

PathInput = Union[str, Iterable[Any]]


class Path(Sequence):
    """Validated, connected sequence of integer points.

    Attributes:
        points: The points as a tuple of ``(x, y)`` integer tuples.
        closed: Whether the path ends on its starting point.

    Examples:
        >>> box = Path([[100, 100], [100, 200], [200, 200], [200, 100], [100, 100]])
        >>> str(box)
        'M100 100 L100 200 L200 200 L200 100 Z'
        >>> str(box.slice(1, -1))
        'M100 200 L200 200 L200 100'
        >>> len(Path("m0 0 l10 0 0 10 z"))
        4
    """

    def __init__(self, path: PathInput) -> None:
        """Build a path from a path string or a point sequence.

        Args:
            path: A string accepted by ``is_path_string`` or a sequence
                accepted by ``is_point_array`` (another ``Path`` included).

        Raises:
            InvalidPathError: If ``path`` is neither.
        """
        self._points: Tuple[Point, ...] = ()
        self._path: str = ""

        if is_path_string(path):
            self._set_path(path)  # type: ignore[arg-type]
        elif is_point_array(path):
            self._set_points(path)
        else:
            invalid_path(path)

    def _set_path(self, path_string: str) -> None:
        points = path_string_to_points(path_string)
        self._points = tuple(points)
        self._path = points_to_path_string(points)

    def _set_points(self, points: Any) -> None:
        resolved = normalize_points(points)
        self._points = tuple(resolved)
        self._path = points_to_path_string(resolved)

    @property
    def points(self) -> Tuple[Point, ...]:
        """Return the points as a tuple of ``(x, y)`` integer tuples."""
        return self._points

    @property
    def closed(self) -> bool:
        """Return True if the path ends on its starting point.

        A two-point path whose points coincide is open; see ``is_closed``.
        """
        return is_closed(self._points)

    @property
    def start(self) -> Point:
        """Return the first point of the path."""
        return self._points[0]

    @property
    def end(self) -> Point:
        """Return the last point of the path."""
        return self._points[-1]

    def clone(self) -> Path:
        """Return a new path with the same points and string."""
        return self.slice()

    def filter(self, predicate: Optional[Callable[[Point], Any]]) -> Path:
        """Return a new path made of the points for which ``predicate`` is true.

        Behaves like the built-in ``filter``; ``None`` keeps truthy points.

        Raises:
            InvalidPathError: If fewer than two points survive.
        """
        return self._derive("filter", list(filter(predicate, self._points)))

    def map(self, transform: Callable[[Point], Any]) -> Path:
        """Return a new path made of ``transform`` applied to every point.

        Raises:
            InvalidPathError: If any produced value is not a valid point.
        """
        return self._derive("map", list(map(transform, self._points)))

    def slice(self, start: Optional[int] = None, end: Optional[int] = None) -> Path:
        """Return a new path over ``points[start:end]``.

        Negative indices count from the end and ``end`` is exclusive.

        Raises:
            InvalidPathError: If the range holds fewer than two points.
        """
        return self._derive("slice", list(self._points[start:end]))

    def to_string(self) -> str:
        """Return the canonical path string, e.g. ``'M0 0 L10 0 Z'``."""
        return self._path

    def _derive(self, operation: str, points: List[Any]) -> Path:
        """Build a new path of the same type, logging rejected results."""
        try:
            return type(self)(points)
        except InvalidPathError:
            logger.debug(
                "Path.%s produced an invalid point sequence (%d items)",
                operation,
                len(points),
            )
            raise

    @overload
    def __getitem__(self, idx: int) -> Point: ...

    @overload
    def __getitem__(self, idx: slice) -> Path: ...

    def __getitem__(self, idx: Union[int, slice]) -> Union[Point, Path]:
        """Return the point at ``idx``, or a new ``Path`` for a slice.

        Raises:
            InvalidPathError: If a slice holds fewer than two points.
        """
        if isinstance(idx, slice):
            return self._derive("slice", list(self._points[idx]))
        return self._points[idx]

    def __len__(self) -> int:
        """Return the number of points in the path.

        Returns:
            The length of ``points``, closing duplicate included.
        """
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        """Iterate over the points in order.

        Yields:
            Each ``(x, y)`` point from ``points``.
        """
        return iter(self._points)

    def __eq__(self, other: Any) -> bool:
        """Compare paths by their points.

        Returns:
            True if both paths hold the same points. Returns NotImplemented if
            ``other`` is not a Path.
        """
        if not isinstance(other, Path):
            return NotImplemented
        return self._points == other._points

    def __hash__(self) -> int:
        """Compute a hash from the point tuple.

        Returns:
            The hash value of this Path.
        """
        return hash(self._points)

    def __str__(self) -> str:
        """Return the cached canonical path string, same as ``to_string``."""
        return self._path

    def __repr__(self) -> str:
        """Return a debug-friendly representation built from the path string."""
        return f"Path({self._path!r})"
