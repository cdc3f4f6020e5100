"""Path model package.

Defines `Path`, the validated point-sequence value type built from either a
path string or a list of points.
"""

from polypath.model.path import Path

__all__ = ["Path"]
