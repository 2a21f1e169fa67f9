from __future__ import annotations

import io
from pathlib import Path
from typing import Iterable, Union

from openpyxl import Workbook

from .logging_config import get_logger
from .types import PRODUCT_FIELDS, Product


EXPORT_FILENAME = "Filtered_Products.xlsx"
SHEET_NAME = "Products"
XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

logger = get_logger("excel_writer")


def build_workbook(products: Iterable[Product]) -> Workbook:
    """
    One header row followed by one row per product, in input order.
    """
    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_NAME

    for col_idx, title in enumerate(PRODUCT_FIELDS, start=1):
        ws.cell(row=1, column=col_idx).value = title

    for row_idx, p in enumerate(products, start=2):
        for col_idx, value in enumerate(p.to_row(), start=1):
            ws.cell(row=row_idx, column=col_idx).value = value
    return wb


def write_products_to_excel(
    products: Iterable[Product],
    out_path: Union[str, Path] = EXPORT_FILENAME,
) -> Path:
    products = list(products)
    path = Path(out_path)
    # Same name every time; an earlier export is overwritten.
    build_workbook(products).save(path)
    logger.info("Exported %d products to %s", len(products), path)
    return path


def export_to_excel_buffer(products: Iterable[Product]) -> io.BytesIO:
    """In-memory variant used for the browser download button."""
    products = list(products)
    buffer = io.BytesIO()
    build_workbook(products).save(buffer)
    buffer.seek(0)
    logger.info("Prepared spreadsheet with %d products", len(products))
    return buffer
