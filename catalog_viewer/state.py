"""View-owned state for the catalog screen.

``CatalogView`` holds the full product list, the brand and category choices
derived from it, the current filters and the visible subset. The visible
subset is recomputed from scratch after every mutation, so it always equals
``filter_products(view.products, view.filters)``.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Callable, List, Tuple, Union

from .excel_writer import EXPORT_FILENAME, export_to_excel_buffer, write_products_to_excel
from .filters import distinct_values, filter_products, reset_filters
from .logging_config import get_logger
from .types import FilterState, LoadError, Product


STATUS_LOADING = "loading"
STATUS_NO_MATCHES = "no_matches"
STATUS_READY = "ready"

logger = get_logger("state")

Loader = Callable[[], List[Product]]


class CatalogView:
    def __init__(self) -> None:
        self._products: Tuple[Product, ...] = ()
        self._brands: Tuple[str, ...] = ()
        self._categories: Tuple[str, ...] = ()
        self._filters = reset_filters()
        self._visible: Tuple[Product, ...] = ()

    @property
    def products(self) -> Tuple[Product, ...]:
        return self._products

    @property
    def brands(self) -> Tuple[str, ...]:
        return self._brands

    @property
    def categories(self) -> Tuple[str, ...]:
        return self._categories

    @property
    def filters(self) -> FilterState:
        return self._filters

    @property
    def visible(self) -> Tuple[Product, ...]:
        return self._visible

    @property
    def status(self) -> str:
        if not self._products:
            return STATUS_LOADING
        if not self._visible:
            return STATUS_NO_MATCHES
        return STATUS_READY

    def load(self, loader: Loader) -> bool:
        """Run ``loader`` once and adopt its result.

        A LoadError is logged and leaves the view untouched; the caller sees
        ``False`` and the screen keeps its loading state.
        """
        try:
            products = loader()
        except LoadError as exc:
            logger.error("Error fetching: %s", exc.message)
            return False

        self._products = tuple(products)
        self._brands = tuple(distinct_values(self._products, "brand"))
        self._categories = tuple(distinct_values(self._products, "category"))
        self._recompute()
        return True

    def set_text_query(self, text_query: str) -> None:
        self._set_filters(self._filters.with_text_query(text_query))

    def set_brand(self, brand: str) -> None:
        self._set_filters(self._filters.with_brand(brand))

    def set_category(self, category: str) -> None:
        self._set_filters(self._filters.with_category(category))

    def reset(self) -> None:
        self._set_filters(reset_filters())

    def export(self, out_path: Union[str, Path] = EXPORT_FILENAME) -> Path:
        return write_products_to_excel(self._visible, out_path=out_path)

    def export_buffer(self) -> io.BytesIO:
        return export_to_excel_buffer(self._visible)

    def _set_filters(self, filters: FilterState) -> None:
        self._filters = filters
        self._recompute()

    def _recompute(self) -> None:
        self._visible = tuple(filter_products(self._products, self._filters))
