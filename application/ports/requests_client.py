# application/ports/requests_client.py
from __future__ import annotations

from typing import Dict, Optional

import requests

from application.ports.http_client import (
    HeaderValue,
    HttpClientPort,
    HttpResponse,
    RequestOptions,
    TransportError,
)
from infrastructure.url.base_url_resolver import BaseUrlResolver


def _flatten_headers(headers: Dict[str, HeaderValue]) -> Dict[str, str]:
    # requests only takes str values; repeated headers are folded per RFC 9110
    out: Dict[str, str] = {}
    for k, v in headers.items():
        out[k] = ", ".join(v) if isinstance(v, list) else v
    return out


def _to_response(resp: requests.Response) -> HttpResponse:
    return HttpResponse(
        status=resp.status_code,
        url=str(resp.url),
        text=resp.text,
        headers=dict(resp.headers),
        encoding=resp.encoding,
        content=resp.content,
    )


class RequestsSessionHttpClient(HttpClientPort):
    def __init__(
        self,
        base_url: str = "",
        base_headers: Optional[Dict[str, str]] = None,
        timeout_sec: int = 20,
        raise_for_status: bool = False,
    ):
        self._session = requests.Session()
        self._resolver = BaseUrlResolver(base_url)
        self._base_headers = base_headers or {}
        self._timeout = timeout_sec
        self._raise_for_status = raise_for_status

    def send(self, method: str, url: str, options: RequestOptions) -> HttpResponse:
        merged = dict(self._base_headers)
        merged.update(_flatten_headers(options.headers or {}))

        try:
            resp = self._session.request(
                method=method.upper(),
                url=self._resolver.resolve_url(url),
                headers=merged,
                data=options.form if options.form is not None else options.body,
                timeout=self._timeout,
            )
            if self._raise_for_status:
                resp.raise_for_status()
        except requests.HTTPError as e:
            raise TransportError(str(e), response=_to_response(e.response)) from e
        except requests.RequestException as e:
            raise TransportError(str(e)) from e

        return _to_response(resp)
