"""polypath: connected integer 2D paths.

polypath parses a restricted SVG path-data subset (moveto, lineto,
closepath with integer coordinates) into point sequences, renders point
sequences back to canonical path strings, and provides `Path`, a read-only
sequence of points whose derived paths are always re-validated.

Primary API:
    Path - Validated point sequence built from a path string or points
    is_path_string(), is_point_array() - Input recognizers
    path_string_to_points(), points_to_path_string() - Converters
    InvalidPathError - Raised for any invalid path input or result

Example:
    from polypath import Path

    box = Path("M100 100 l0 100 100 0 0 -100 z")
    str(box)                                  # 'M100 100 L100 200 L200 200 L200 100 Z'
    str(box.map(lambda pt: (pt[1], pt[0])))   # 'M100 100 L200 100 L200 200 L100 200 Z'
"""

from __future__ import annotations

from polypath import cli, logging
from polypath._version import __version__
from polypath.dsl.convert import path_string_to_points, points_to_path_string
from polypath.dsl.grammar import is_path_string, is_point_array
from polypath.dsl.loader import load_paths_yaml
from polypath.model.path import Path
from polypath.types.base import INVALID_PATH_MSG, InvalidPathError, Point

__all__ = [
    # Version
    "__version__",
    # Model
    "Path",
    "Point",
    # Grammar and conversion
    "is_path_string",
    "is_point_array",
    "path_string_to_points",
    "points_to_path_string",
    "load_paths_yaml",
    # Errors
    "InvalidPathError",
    "INVALID_PATH_MSG",
    # Utilities
    "cli",
    "logging",
]
