"""Recognizers for the restricted path mini-language and point sequences.

The accepted path language is the connected subset of SVG path data made of a
single moveto, one or more lineto commands, and an optional trailing
closepath. Only integer coordinates are allowed:

- Moveto: ``M`` or ``m`` followed by one ``x y`` pair.
- Lineto: ``L`` or ``l`` followed by one or more ``x y`` pairs; pairs after
  the first reuse the command letter (implicit repeat).
- Closepath: ``Z`` or ``z``, only as the very last command.

Coordinates are limited to ``MAX_COORDINATE_DIGITS`` decimal digits so that
every accepted value converts between int and str under any interpreter
int/str conversion limit.

Horizontal/vertical lineto (``H``/``V``), curves, arcs, and decimal values are
rejected outright.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from numbers import Integral, Real
from typing import Any

from polypath.types.base import COORDINATE_LIMIT, MAX_COORDINATE_DIGITS, MIN_POINTS

__all__ = [
    "PATH_STRING_REGEX",
    "PATH_SLICE_REGEX",
    "PAIR_REGEX",
    "is_coordinate",
    "is_point",
    "is_path_string",
    "is_point_array",
]

_INT = rf"[+-]?[0-9]{{1,{MAX_COORDINATE_DIGITS}}}"
_PAIR = rf"{_INT}[ ]+{_INT}"
_MOVETO = rf"[Mm][ ]*{_PAIR}"
_LINETO = rf"[ ]*[Ll][ ]*{_PAIR}(?:[ ]+{_PAIR})*"
_CLOSEPATH = r"[ ]*[Zz]"

#: Full-string recognizer for a valid path string.
PATH_STRING_REGEX = re.compile(rf"[ ]*{_MOVETO}(?:{_LINETO})+(?:{_CLOSEPATH})?[ ]*")

#: Splits a valid path string into (moveto, lineto clause, closepath) groups.
PATH_SLICE_REGEX = re.compile(
    rf"[ ]*(?P<moveto>{_MOVETO})(?P<lineto>.*?)(?P<close>{_CLOSEPATH})?[ ]*"
)

#: One coordinate pair inside a lineto clause, with its optional command letter.
PAIR_REGEX = re.compile(rf"[ ]*(?:(?P<cmd>[Ll])[ ]*)?(?P<x>{_INT})[ ]+(?P<y>{_INT})")


def is_path_string(value: Any) -> bool:
    """Return True if ``value`` is a string in the restricted path grammar.

    Examples:
        >>> is_path_string("m100 100l0 100")
        True
        >>> is_path_string("m100 100 L100 200 Z")
        True
        >>> is_path_string("m100 100")
        False
        >>> is_path_string("M100 100 L100.5 200")
        False
    """
    if not isinstance(value, str):
        return False
    return PATH_STRING_REGEX.fullmatch(value) is not None


def is_coordinate(value: Any) -> bool:
    """Return True if ``value`` is an integer-valued real within range.

    ``bool`` is rejected even though it subclasses ``int``. The magnitude must
    stay below ``COORDINATE_LIMIT``, which also rules out NaN and infinities.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    # NaN fails this comparison too
    if not abs(value) < COORDINATE_LIMIT:
        return False
    if isinstance(value, Integral):
        return True
    return value == int(value)


def is_point(value: Any) -> bool:
    """Return True if ``value`` is a 2-element sequence of valid coordinates."""
    if not _is_sequence(value) or len(value) != 2:
        return False
    return is_coordinate(value[0]) and is_coordinate(value[1])


def is_point_array(value: Any) -> bool:
    """Return True if ``value`` is a valid point sequence.

    A valid point sequence holds at least ``MIN_POINTS`` points, each of which
    passes ``is_point``. This is the single check every ``Path`` payload goes
    through, whether it comes from a caller or from a transformation.

    Examples:
        >>> is_point_array([[100, 100], [100, 200]])
        True
        >>> is_point_array([[100, 100]])
        False
        >>> is_point_array([[100, 100], [100, float("nan")]])
        False
    """
    if not _is_sequence(value) or len(value) < MIN_POINTS:
        return False
    return all(is_point(point) for point in value)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )
