"""
Scoring, filtering and sorting of catalog records.

Everything here is pure: functions take the records loaded by
``store.load_catalog`` and return new lists without touching the
records themselves.
"""

from __future__ import annotations

import math
from typing import Any, List, Optional, Sequence, Union

from .schemas import CatalogItem, SearchRequest


def _field(item: Any, key: str) -> Any:
    """Return ``item[key]`` for mapping records, ``None`` otherwise."""
    if isinstance(item, dict):
        return item.get(key)
    return None


def _norm(s: Any) -> str:
    """Lowercase strings; anything else (missing, numbers...) becomes ``""``."""
    return s.lower() if isinstance(s, str) else ""


def _terms(q: str) -> List[str]:
    return [t for t in q.lower().split() if t]


def score_item(item: CatalogItem, q: str) -> int:
    """Count the query terms that occur in the item's text fields.

    The haystack is ``title``, ``name`` and ``description`` joined by a
    space. Each term occurrence is counted, so a query repeating a word
    scores that word more than once.
    """
    if not q:
        return 0
    hay = " ".join(_norm(_field(item, k)) for k in ("title", "name", "description"))
    return sum(1 for t in _terms(q) if t in hay)


def _price_key(item: CatalogItem) -> Union[int, float]:
    price = _field(item, "price")
    # bool is an int subclass but not a price
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        return math.inf
    if isinstance(price, float) and math.isnan(price):
        return math.inf
    # ints of any size compare with math.inf, float() would overflow
    return price


def _title_key(item: CatalogItem) -> str:
    return _norm(_field(item, "title") or _field(item, "name"))


def filter_items(
    items: Sequence[CatalogItem],
    q: str = "",
    category: Optional[str] = None,
) -> List[CatalogItem]:
    """Keep items matching the category (exactly, ignoring case) and the query.

    A blank query applies no text filter; otherwise an item needs a
    positive score.
    """
    nq = q if q.strip() else ""
    ncat = _norm(category)
    out = []
    for item in items:
        if category and _norm(_field(item, "category")) != ncat:
            continue
        if nq and score_item(item, nq) <= 0:
            continue
        out.append(item)
    return out


def sort_items(
    items: Sequence[CatalogItem],
    sort_by: str = "relevance",
    order: str = "asc",
    q: str = "",
) -> List[CatalogItem]:
    """Return a new list ordered by price, title or relevance score.

    Items without a numeric price count as infinitely expensive. The
    sort is stable in both directions: equal keys keep catalog order.
    """
    if sort_by == "price":
        key = _price_key
    elif sort_by == "title":
        key = _title_key
    else:
        nq = q if q.strip() else ""

        def key(item: CatalogItem) -> int:
            return score_item(item, nq)

    return sorted(items, key=key, reverse=(order == "desc"))


def search_items(items: Sequence[CatalogItem], request: SearchRequest) -> List[CatalogItem]:
    """Run the full pipeline: filter, sort, then keep the first ``limit`` items."""
    matched = filter_items(items, q=request.q, category=request.category)
    ordered = sort_items(matched, sort_by=request.sort_by, order=request.order, q=request.q)
    return ordered[: request.limit]


def summarize(items: Sequence[CatalogItem]) -> str:
    return f"Found {len(items)} item(s)."
