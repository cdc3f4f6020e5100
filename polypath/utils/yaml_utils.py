"""Utilities for handling YAML parsing quirks."""

from typing import Any, Dict, TypeVar

V = TypeVar("V")


def normalize_yaml_dict_keys(data: Dict[Any, V]) -> Dict[str, V]:
    """Return ``data`` with every key converted to a string.

    YAML 1.1 turns keys such as ``yes``, ``no``, ``on`` and ``off`` into Python
    booleans and bare numbers into ints. Path names must stay strings, so
    ``True``/``False`` become ``"True"``/``"False"`` and ``7`` becomes ``"7"``.

    Examples:
        >>> normalize_yaml_dict_keys({True: "M0 0 L1 1", 7: "M0 0 L2 2"})
        {'True': 'M0 0 L1 1', '7': 'M0 0 L2 2'}
    """
    return {str(key): value for key, value in data.items()}
