"""Utilities for handling YAML parsing quirks."""

from typing import Any, Dict, TypeVar

V = TypeVar("V")


def normalize_yaml_dict_keys(data: Dict[Any, V]) -> Dict[str, V]:
    """Normalize dictionary keys from YAML parsing to consistent string keys.

    YAML 1.1 boolean keys (e.g., true, false, yes, no, on, off) become Python
    True/False, and bare numbers become ints. Convert every key to a string
    so lookups by name behave predictably.

    Args:
        data: Dictionary that may contain non-string keys from YAML parsing.

    Returns:
        Dictionary with all keys converted to strings.

    Examples:
        >>> normalize_yaml_dict_keys({True: "a", 1: "b", "trim_len": 3})
        {'True': 'a', '1': 'b', 'trim_len': 3}
    """
    return {str(key): value for key, value in data.items()}
