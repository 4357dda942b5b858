"""Helpers for YAML parsing quirks."""

from typing import Any, Dict, TypeVar

V = TypeVar("V")


def normalize_yaml_dict_keys(data: Dict[Any, V]) -> Dict[str, V]:
    """Return a copy of ``data`` with every key converted to a string.

    YAML 1.1 turns keys such as ``yes``, ``no``, ``on`` and ``off`` into Python
    booleans and bare numbers into ints. Node names are identifiers, so they
    are mapped back to predictable strings: booleans become ``"True"`` or
    ``"False"`` and other scalars use ``str()``.

    Examples:
        >>> normalize_yaml_dict_keys({True: 1, 7: 2, "a": 3})
        {'True': 1, '7': 2, 'a': 3}
    """
    return {str(key): value for key, value in data.items()}
