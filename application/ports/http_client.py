# application/ports/http_client.py
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from domain.request import HeaderValue


@dataclass(frozen=True)
class RequestOptions:
    headers: Dict[str, HeaderValue] = field(default_factory=dict)
    body: Optional[str] = None
    form: Optional[List[Tuple[str, str]]] = None


@dataclass(frozen=True)
class HttpResponse:
    status: int
    url: str
    text: str
    headers: Dict[str, str]
    encoding: Optional[str] = None
    content: Optional[bytes] = None

    def header_values(self, name: str) -> List[str]:
        """Values of a header, looked up case-insensitively."""
        wanted = name.lower()
        out: List[str] = []
        for k, v in (self.headers or {}).items():
            if k.lower() == wanted:
                out.append(v)
        return out


class TransportError(Exception):
    """
    Raised by a transport when a request could not complete normally.
    response is set when the server answered (e.g. an HTTP error status).
    """

    def __init__(self, message: str, response: Optional[HttpResponse] = None):
        super().__init__(message)
        self.response = response


class HttpClientPort(ABC):
    @abstractmethod
    def send(self, method: str, url: str, options: RequestOptions) -> HttpResponse:
        ...
