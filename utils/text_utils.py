"""
Text helpers shared by the collection stores.

Names and item texts are matched on a derived comparison key; the stored
text itself is never rewritten for matching.
"""

from typing import Any


def normalize_key(text: str) -> str:
    """Comparison key for case-insensitive, whitespace-tolerant matching"""
    return text.strip().lower()


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def pluralize(count: int, singular: str, plural: str = None) -> str:
    """Format a count with the right noun form, e.g. '1 entry' / '3 entries'"""
    if count == 1:
        return f"{count} {singular}"
    return f"{count} {plural or singular + 's'}"
