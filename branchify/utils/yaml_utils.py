"""Utilities for handling YAML parsing quirks."""

from typing import Any, Dict, TypeVar

V = TypeVar("V")


def normalize_yaml_dict_keys(data: Dict[Any, V]) -> Dict[str, V]:
    """Return ``data`` with every key converted to a string.

    YAML 1.1 reads unquoted keys such as ``on``, ``yes`` or ``true`` as
    booleans and bare numbers as ints. Manager ids and file paths are always
    strings, so such keys are stringified (``True`` -> ``"True"``, ``1`` ->
    ``"1"``). Insertion order is kept.

    Examples:
        >>> normalize_yaml_dict_keys({True: [], "pyenv": []})
        {'True': [], 'pyenv': []}
    """
    return {str(key): value for key, value in data.items()}
