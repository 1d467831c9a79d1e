# tests/application/services/test_redactor.py
import pytest

from application.services.redactor import MASK, is_sensitive, mask_dict, mask_form, mask_value


@pytest.mark.parametrize(
    "key",
    ["password", "passwd", "pass", "authorization", "Proxy-Authorization", "cookie", "Set-Cookie", "PASSWORD"],
)
def test_sensitive_keys_are_masked(key):
    assert is_sensitive(key)
    assert mask_value(key, "secret") == MASK


@pytest.mark.parametrize("key, value", [("username", "john"), ("Accept", "application/json"), ("count", 42)])
def test_regular_keys_are_kept(key, value):
    assert mask_value(key, value) == value


def test_none_is_not_masked():
    assert mask_value("password", None) is None


def test_repeated_header_values_are_masked_one_by_one():
    assert mask_value("Cookie", ["a=1", "b=2"]) == [MASK, MASK]


def test_mask_dict():
    headers = {"Authorization": "Basic dXNlcjpwYXNz", "Accept": ["application/json", "text/plain"]}

    assert mask_dict(headers) == {"Authorization": MASK, "Accept": ["application/json", "text/plain"]}
    assert headers["Authorization"] == "Basic dXNlcjpwYXNz"


def test_mask_form():
    assert mask_form([("user", "bob"), ("password", "x"), ("user", "alice")]) == [
        ("user", "bob"),
        ("password", MASK),
        ("user", "alice"),
    ]
    assert mask_form(None) is None
