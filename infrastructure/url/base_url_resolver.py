# infrastructure/url/base_url_resolver.py
from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit


@dataclass(frozen=True)
class BaseUrlResolver:
    """Prefix relative request paths with base_url. Absolute URLs pass through."""
    base_url: str = ""

    def resolve_url(self, url: str) -> str:
        if urlsplit(url).scheme in ("http", "https") or not self.base_url:
            return url
        return f"{self.base_url.rstrip('/')}/{url.lstrip('/')}"
