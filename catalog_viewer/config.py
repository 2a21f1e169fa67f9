"""Runtime settings for the catalog viewer.

Values come from the process environment, optionally seeded from a ``.env``
file in the working directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


DEFAULT_TABLE = "products"
DEFAULT_LANG = "en"


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from None


@dataclass
class Settings:
    """Connection and presentation settings."""

    store_url: str = field(default_factory=lambda: os.getenv("SUPABASE_URL", "").rstrip("/"))
    api_key: str = field(default_factory=lambda: os.getenv("SUPABASE_ANON_KEY", ""))
    table: str = field(default_factory=lambda: os.getenv("CATALOG_TABLE", DEFAULT_TABLE))
    request_timeout: Optional[float] = field(
        default_factory=lambda: _optional_float("CATALOG_REQUEST_TIMEOUT")
    )
    lang: str = field(default_factory=lambda: os.getenv("CATALOG_LANG", DEFAULT_LANG))
    log_level: str = field(default_factory=lambda: os.getenv("CATALOG_LOG_LEVEL", "INFO"))

    @property
    def is_configured(self) -> bool:
        return bool(self.store_url and self.api_key)

    @property
    def products_endpoint(self) -> str:
        return f"{self.store_url}/rest/v1/{self.table}"


def get_settings() -> Settings:
    return Settings()
