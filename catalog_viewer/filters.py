"""Pure filtering over an already-fetched product list.

Every call starts again from the full list, so the result depends only on
the two arguments and never on a previous result.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .types import FilterState, Product


def reset_filters() -> FilterState:
    return FilterState()


def distinct_values(products: Iterable[Product], field: str) -> List[str]:
    """Unique values of ``field`` in first-seen order."""
    seen = set()
    result: List[str] = []
    for p in products:
        value = getattr(p, field)
        if value in seen:
            continue
        seen.add(value)
        result.append(value)
    return result


def _matches_text(product: Product, needle: str) -> bool:
    return (
        needle in product.name.lower()
        or needle in product.brand.lower()
        or needle in product.category.lower()
    )


def filter_products(products: Sequence[Product], state: FilterState) -> List[Product]:
    result = list(products)
    if state.brand:
        result = [p for p in result if p.brand == state.brand]
    if state.category:
        result = [p for p in result if p.category == state.category]
    if state.text_query.strip():
        needle = state.text_query.lower()
        result = [p for p in result if _matches_text(p, needle)]
    return result
