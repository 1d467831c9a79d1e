# domain/request.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Union

HeaderValue = Union[str, List[str]]


@dataclass(frozen=True)
class RequestData:
    method: str = "method-not-set"
    url: str = "url-not-set"


@dataclass
class HeaderBag:
    """
    Headers sent with every request of a scenario.
    Adding a name twice keeps both values as a list.
    """
    values: Dict[str, HeaderValue] = field(default_factory=dict)

    def add(self, name: str, value: str) -> None:
        current = self.values.get(name)
        if current is None:
            self.values[name] = value
        elif isinstance(current, list):
            current.append(value)
        else:
            self.values[name] = [current, value]

    def remove(self, name: str) -> None:
        self.values.pop(name, None)

    def snapshot(self) -> Dict[str, HeaderValue]:
        return {k: list(v) if isinstance(v, list) else v for k, v in self.values.items()}
