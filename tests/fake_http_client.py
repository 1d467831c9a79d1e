# tests/fake_http_client.py
"""
HTTP client double that returns queued responses and records every call.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Union

from application.ports.http_client import HttpClientPort, HttpResponse, RequestOptions, TransportError


@dataclass(frozen=True)
class SentRequest:
    method: str
    url: str
    options: RequestOptions


def json_response(text: str, status: int = 200, content_type: str = "application/json") -> HttpResponse:
    return HttpResponse(
        status=status,
        url="http://test/",
        text=text,
        headers={"Content-Type": content_type},
        content=text.encode("utf-8"),
    )


class FakeHttpClient(HttpClientPort):
    def __init__(self, responses: Optional[List[Union[HttpResponse, TransportError]]] = None):
        self._responses = list(responses or [])
        self.sent: List[SentRequest] = []

    def queue(self, response: Union[HttpResponse, TransportError]) -> None:
        self._responses.append(response)

    def send(self, method: str, url: str, options: RequestOptions) -> HttpResponse:
        self.sent.append(SentRequest(method=method, url=url, options=options))
        if not self._responses:
            return json_response("{}")
        item = self._responses.pop(0)
        if isinstance(item, TransportError):
            raise item
        return item

    @property
    def last(self) -> SentRequest:
        return self.sent[-1]
