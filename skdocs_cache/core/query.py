"""
skdocs_cache/core/query.py
Substring search over the cached document.

The upstream shape is trusted only as far as { "results": [ {...}, ... ] }.
Anything else (missing key, wrong types, non-dict items) simply doesn't match.
"""

from typing import Any, Optional, TypedDict

from skdocs_cache.core.config import SEARCH_FIELDS


class SearchOutcome(TypedDict):
    results: list
    count: int


def results_of(doc: Any) -> list:
    """The top-level `results` array, or [] when absent or not a list."""
    if not isinstance(doc, dict):
        return []
    results = doc.get("results")
    return results if isinstance(results, list) else []


def _str_field(item: Any, key: str) -> Optional[str]:
    if not isinstance(item, dict):
        return None
    value = item.get(key)
    return value if isinstance(value, str) else None


def matches(item: Any, q_lower: str) -> bool:
    """True if any searchable field contains the (already lower-cased) query."""
    for key in SEARCH_FIELDS:
        text = _str_field(item, key)
        if text is not None and q_lower in text.lower():
            return True
    return False


def search(doc: Any, query: str) -> SearchOutcome:
    q = query.lower()
    found = [item for item in results_of(doc) if matches(item, q)]
    return {"results": found, "count": len(found)}
