from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, Mapping, Tuple


PRODUCT_FIELDS = ("id", "name", "category", "brand", "price")
TEXT_FIELDS = ("name", "category", "brand")


class LoadError(Exception):
    """Raised when the product store cannot be read."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    category: str
    brand: str
    price: float

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Product":
        for name in TEXT_FIELDS:
            if not isinstance(record[name], str):
                raise TypeError(f"{name} must be text, got {record[name]!r}")
        price = float(record["price"])
        if not math.isfinite(price) or price < 0:
            raise ValueError(f"invalid price {record['price']!r} for product {record.get('id')!r}")
        return cls(
            id=int(record["id"]),
            name=record["name"],
            category=record["category"],
            brand=record["brand"],
            price=price,
        )

    def to_row(self) -> Tuple[Any, ...]:
        return tuple(getattr(self, name) for name in PRODUCT_FIELDS)


@dataclass(frozen=True)
class FilterState:
    text_query: str = ""
    brand: str = ""
    category: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.text_query.strip() and not self.brand and not self.category

    def with_text_query(self, text_query: str) -> "FilterState":
        return replace(self, text_query=text_query or "")

    def with_brand(self, brand: str) -> "FilterState":
        return replace(self, brand=brand or "")

    def with_category(self, category: str) -> "FilterState":
        return replace(self, category=category or "")
