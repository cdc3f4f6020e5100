"""YAML loader for named path documents.

A path document is a mapping with a single ``paths`` section::

    paths:
      box: "M100 100 L100 200 L200 200 L200 100 Z"
      zigzag: [[0, 0], [10, 10], [20, 0]]

Each entry is either a path string or a list of ``[x, y]`` points and is
turned into a validated ``Path``.
"""

from __future__ import annotations

from typing import Any, Dict

import yaml

from polypath.logging import get_logger
from polypath.model.path import Path
from polypath.types.base import InvalidPathError
from polypath.utils.yaml_utils import normalize_yaml_dict_keys

__all__ = ["load_paths_yaml"]

logger = get_logger(__name__)

_ALLOWED_TOP_LEVEL_KEYS = {"paths"}


def load_paths_yaml(yaml_str: str) -> Dict[str, Path]:
    """Parse a path document and build one ``Path`` per entry.

    Args:
        yaml_str: YAML text.

    Returns:
        Mapping of entry name to ``Path``, in document order. An empty
        document yields an empty mapping.

    Raises:
        ValueError: If the document is not shaped as described above.
        InvalidPathError: If an entry is not a valid path string or point
            list; the message names the entry.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    extra = set(map(str, data.keys())) - _ALLOWED_TOP_LEVEL_KEYS
    if extra:
        raise ValueError(
            f"Unrecognized top-level key(s): {sorted(extra)}. "
            f"Allowed keys are {sorted(_ALLOWED_TOP_LEVEL_KEYS)}"
        )

    section = data.get("paths")
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError("'paths' must be a mapping of name to path")

    paths: Dict[str, Path] = {}
    for name, entry in normalize_yaml_dict_keys(section).items():
        paths[name] = _build_entry(name, entry)

    logger.debug("Loaded %d paths from YAML document", len(paths))
    return paths


def _build_entry(name: str, entry: Any) -> Path:
    """Build a ``Path`` for one document entry, naming it on failure."""
    if not isinstance(entry, (str, list)):
        raise ValueError(
            f"Path '{name}' must be a path string or a list of points, "
            f"got {type(entry).__name__}"
        )
    try:
        return Path(entry)
    except InvalidPathError as exc:
        raise InvalidPathError(entry, f"Invalid path '{name}': {entry!r}") from exc
