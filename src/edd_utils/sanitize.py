"""
Sanitizing and escaping helpers shared by the option and search helpers.

Labels produced by this package are rendered verbatim inside HTML by the
dropdown widgets that consume them, so every label passes through
``esc_html`` and every value through ``esc_attr`` or ``absint``.
"""

import html
import re
from typing import Any, Dict, List, Mapping


_NON_DIGITS = re.compile(r'[^0-9]')
_WHITESPACE = re.compile(r'\s+')
_TAGS = re.compile(r'<[^>]*>')


def esc_html(text: Any) -> str:
    """Escape text for safe output inside an HTML element."""
    if text is None:
        return ''
    return html.escape(str(text), quote=True)


def esc_attr(text: Any) -> str:
    """Escape text for safe output inside an HTML attribute."""
    return esc_html(text)


def decode_entities(text: Any) -> str:
    """Decode HTML entities (``&amp;`` -> ``&``) before re-escaping."""
    if text is None:
        return ''
    return html.unescape(str(text))


def absint(value: Any) -> int:
    """
    Convert a value to a non-negative integer.

    Non-digit characters are stripped; values with no digits become 0.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return abs(value)
    if isinstance(value, float):
        return abs(int(value))

    digits = _NON_DIGITS.sub('', str(value if value is not None else ''))
    return int(digits) if digits else 0


def sanitize_search(search: Any) -> str:
    """
    Normalize a raw search-box string.

    Strips tags, collapses runs of whitespace, trims, and escapes ``<``,
    ``>`` and ``&``. Quotes are kept because the term parser relies on them
    for exact-phrase matching.
    """
    if search is None:
        return ''

    text = _TAGS.sub('', str(search))
    text = _WHITESPACE.sub(' ', text).strip()
    return html.escape(text, quote=False)


def esc_like(text: str) -> str:
    """Escape LIKE wildcards so the text matches literally."""
    return text.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')


def record_value(record: Any, key: str, default: Any = None) -> Any:
    """Read ``key`` from a host record that is either a mapping or an object."""
    if isinstance(record, Mapping):
        return record.get(key, default)
    return getattr(record, key, default)


def sort_by_column(rows: List[Dict[str, Any]], column: str) -> List[Dict[str, Any]]:
    """Return rows sorted (case-insensitively, stable) by one column."""
    return sorted(rows, key=lambda row: str(row.get(column, '')).lower())
