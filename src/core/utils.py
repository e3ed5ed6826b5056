"""
Core Utility Functions.

String coercion helpers shared by the classifier-output boundary and the
wardrobe record codec.
"""

from typing import Any, Iterable, Optional, Set


def normalize_token(value: Any) -> Optional[str]:
    """
    Coerce a loosely-typed value into a lookup token.

    Strips whitespace and case-folds. ``None``, empty strings and
    whitespace-only strings give ``None``.

    Examples:
        >>> normalize_token("  Shoes ")
        'shoes'
        >>> normalize_token("") is None
        True
        >>> normalize_token(None) is None
        True
    """
    if value is None:
        return None
    token = str(value).strip().casefold()
    return token or None


def normalize_string_set(items: Iterable[Any]) -> Set[str]:
    """
    Normalize an iterable of values to a set of case-folded, stripped strings.

    Args:
        items: Values (may contain None, empty strings, non-strings)

    Returns:
        Set of normalized strings
    """
    result = set()
    for item in items:
        token = normalize_token(item)
        if token:
            result.add(token)
    return result

