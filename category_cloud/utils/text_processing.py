"""Text processing utilities for Category Cloud."""

from typing import Any, FrozenSet, Optional
import re

# Leading optional sign followed by digits, the way wiki hosts cast attributes
_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')


def normalize_name(name: str) -> str:
    """Normalize a category name to the identifier form used by data sources.

    Args:
        name: Raw category name, e.g. ``" Foo Bar "``

    Returns:
        Trimmed name with internal spaces replaced by underscores (``"Foo_Bar"``)
    """
    return name.strip().replace(" ", "_")


def display_name(name: str) -> str:
    """Convert a normalized category name back to its human-readable form."""
    return name.replace("_", " ")


def parse_name_list(value: Optional[str], delimiter: str = ",") -> FrozenSet[str]:
    """Parse a delimited list attribute into a set of normalized names.

    Args:
        value: Raw attribute value such as ``"Foo Bar, Baz"``
        delimiter: Item separator

    Returns:
        Set of normalized names; empty items are dropped
    """
    if not value:
        return frozenset()

    names = set()
    for item in str(value).split(delimiter):
        name = normalize_name(item)
        if name:
            names.add(name)
    return frozenset(names)


def parse_int(value: Any, default: int) -> int:
    """Parse an integer attribute permissively.

    Whitespace is ignored and the leading run of digits is used, so ``"12px"``
    parses as 12. Missing or non-numeric values return ``default``.

    Args:
        value: Raw attribute value (usually a string, possibly None)
        default: Value to use when nothing numeric can be read

    Returns:
        Parsed integer or the default
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value

    match = _LEADING_INT.match(str(value))
    if not match:
        return default
    return int(match.group(1))
