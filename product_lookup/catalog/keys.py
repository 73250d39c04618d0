"""
Canonical keys for criteria mappings.

Keys are sorted by code point and joined as ``key:value`` pairs separated by
``|``, so insertion order never affects the result. Values are not escaped:
a value containing ``:`` or ``|`` can collide with another mapping. Catalog
criterion values are expected to be simple tokens.
"""

from typing import Mapping


PAIR_SEPARATOR = ":"
KEY_SEPARATOR = "|"


def canonical_key(criteria: Mapping[str, str]) -> str:
    """
    Build the canonical key for a criteria mapping.

    Example:
        >>> canonical_key({"vendor": "fortigate", "cpu": "4-cpu"})
        'cpu:4-cpu|vendor:fortigate'
        >>> canonical_key({})
        ''
    """
    return KEY_SEPARATOR.join(
        f"{key}{PAIR_SEPARATOR}{criteria[key]}" for key in sorted(criteria)
    )
