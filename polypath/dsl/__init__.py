"""Path description mini-language.

Grammar recognizers live in `polypath.dsl.grammar`, text/point conversion in
`polypath.dsl.convert`, and YAML path documents are read with
`polypath.dsl.loader.load_paths_yaml`.
"""

from polypath.dsl.convert import (
    is_closed,
    normalize_points,
    path_string_to_points,
    points_to_path_string,
)
from polypath.dsl.grammar import is_path_string, is_point, is_point_array

__all__ = [
    "is_path_string",
    "is_point",
    "is_point_array",
    "is_closed",
    "normalize_points",
    "path_string_to_points",
    "points_to_path_string",
]
