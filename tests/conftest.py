"""Pytest configuration and fixtures for catalog viewer tests."""

import pytest
import requests

from catalog_viewer.config import Settings
from catalog_viewer.types import Product


SAMPLE_ROWS = [
    {"id": 1, "name": "Widget A", "category": "Tools", "brand": "Acme", "price": 9.99},
    {"id": 2, "name": "Gadget B", "category": "Electronics", "brand": "Zeta", "price": 19.5},
]

CATALOG_ROWS = SAMPLE_ROWS + [
    {"id": 3, "name": "Hammer Pro", "category": "Tools", "brand": "Zeta", "price": 24.0},
    {"id": 4, "name": "Smart Plug", "category": "Electronics", "brand": "Acme", "price": 12.25},
    {"id": 5, "name": "acme sticker", "category": "Merch", "brand": "acme", "price": 0},
    {"id": 6, "name": "Toolbox", "category": "Storage", "brand": "Bolt", "price": 35.5},
]


class FakeResponse:
    def __init__(self, payload=None, status_code=200, reason="OK", invalid_json=False):
        self._payload = payload
        self.status_code = status_code
        self.reason = reason
        self._invalid_json = invalid_json

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class FakeSession:
    """Records calls to ``get`` and replays a canned response or exception."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def settings():
    return Settings(
        store_url="https://example.supabase.co",
        api_key="anon-key",
        table="products",
        request_timeout=None,
        lang="en",
        log_level="INFO",
    )


@pytest.fixture
def sample_products():
    """The two-product catalog used in the walkthrough scenario."""
    return [Product.from_record(r) for r in SAMPLE_ROWS]


@pytest.fixture
def catalog():
    return [Product.from_record(r) for r in CATALOG_ROWS]


@pytest.fixture
def ok_session():
    return FakeSession(FakeResponse(payload=[dict(r) for r in CATALOG_ROWS]))


@pytest.fixture
def failing_session():
    return FakeSession(error=requests.ConnectionError("connection refused"))
