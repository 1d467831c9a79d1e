from __future__ import annotations

import pytest

from infrastructure.url.base_url_resolver import BaseUrlResolver


@pytest.mark.parametrize(
    "base_url, url, expected",
    [
        ("http://api.test", "users", "http://api.test/users"),
        ("http://api.test/", "/users", "http://api.test/users"),
        ("http://api.test/v1", "users/1", "http://api.test/v1/users/1"),
        ("http://api.test", "https://other.test/x", "https://other.test/x"),
        ("", "users", "users"),
    ],
)
def test_resolve_url(base_url, url, expected) -> None:
    assert BaseUrlResolver(base_url).resolve_url(url) == expected
