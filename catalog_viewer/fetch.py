from __future__ import annotations

from typing import Any, List, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import Settings
from .logging_config import get_logger
from .types import LoadError, Product


DEFAULT_USER_AGENT = "catalog-viewer/1.0 (+python-requests)"

logger = get_logger("fetch")


def create_session(
    api_key: str,
    user_agent: Optional[str] = None,
    total_retries: int = 0,
) -> requests.Session:
    session = requests.Session()
    session.headers.update(
        {
            "User-Agent": user_agent or DEFAULT_USER_AGENT,
            "Accept": "application/json",
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
        }
    )

    retry = Retry(
        total=total_retries,
        allowed_methods=("GET", "HEAD"),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


def _error_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        for key in ("message", "error", "hint"):
            if body.get(key):
                return str(body[key])
    return f"HTTP {response.status_code}: {response.reason or 'request failed'}"


def load_products(
    settings: Settings,
    session: Optional[requests.Session] = None,
) -> List[Product]:
    """
    Read every row of the products table in a single request.
    Rows are returned in store order, untouched apart from type conversion.
    Raises LoadError on any transport, store or decoding failure.
    """
    if not settings.is_configured:
        raise LoadError("store URL or API key is not configured")

    sess = session or create_session(settings.api_key)
    try:
        response = sess.get(
            settings.products_endpoint,
            params={"select": "*"},
            timeout=settings.request_timeout,
        )
    except requests.RequestException as exc:
        raise LoadError(str(exc)) from exc

    if not response.ok:
        raise LoadError(_error_message(response))

    try:
        rows: Any = response.json()
    except ValueError as exc:
        raise LoadError(f"invalid JSON from store: {exc}") from exc
    if not isinstance(rows, list):
        raise LoadError("store response is not a list of rows")

    products: List[Product] = []
    for row in rows:
        try:
            products.append(Product.from_record(row))
        except (KeyError, TypeError, ValueError) as exc:
            raise LoadError(f"malformed product row {row!r}: {exc}") from exc

    logger.info("Loaded %d products from %s", len(products), settings.table)
    return products
