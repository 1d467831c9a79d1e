# application/services/redactor.py
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

MASK = "********"

SENSITIVE_KEYS = frozenset(
    {"password", "passwd", "pass", "authorization", "proxy-authorization", "cookie", "set-cookie"}
)


def is_sensitive(key: str) -> bool:
    return key.lower() in SENSITIVE_KEYS


def mask_value(key: str, value: Any) -> Any:
    if value is None or not is_sensitive(key):
        return value
    # repeated headers arrive as a list of values
    if isinstance(value, list):
        return [MASK] * len(value)
    return MASK


def mask_dict(d: Dict[str, Any]) -> Dict[str, Any]:
    return {k: mask_value(k, v) for k, v in d.items()}


def mask_form(form: Optional[List[Tuple[str, str]]]) -> Optional[List[Tuple[str, Any]]]:
    if form is None:
        return None
    return [(k, mask_value(k, v)) for k, v in form]
