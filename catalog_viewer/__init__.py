"""
Product catalog viewer package.

Exports:
- Product, FilterState: record and filter value types
- filter_products / reset_filters: pure filtering over a loaded catalog
- CatalogView: view-owned state container used by the dashboard
- write_products_to_excel: spreadsheet export of a product list
"""

from .types import FilterState, LoadError, Product
from .filters import filter_products, reset_filters
from .excel_writer import write_products_to_excel
from .state import CatalogView

__all__ = [
    "CatalogView",
    "FilterState",
    "LoadError",
    "Product",
    "filter_products",
    "reset_filters",
    "write_products_to_excel",
]
