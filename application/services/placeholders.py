# application/services/placeholders.py
from __future__ import annotations

from typing import Dict, Optional


class PlaceholderRegistry:
    """
    Plain find-and-replace of registered tokens in URLs, request bodies and
    expected response text. Replacement runs in registration order.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)

    def replace(self, text: str) -> str:
        for key, value in self._values.items():
            text = text.replace(key, str(value))
        return text
