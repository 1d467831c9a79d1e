# domain/matching/describe.py
from __future__ import annotations

from typing import Any


def describe(value: Any) -> str:
    """
    Short printable form of a pattern or value for failure messages.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list):
        return f"Array({len(value)})"
    if isinstance(value, dict):
        return f"Object({len(value)})"
    if callable(value):
        return f"callable {getattr(value, '__name__', type(value).__name__)}"
    return str(value)
