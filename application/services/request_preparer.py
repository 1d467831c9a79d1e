# application/services/request_preparer.py
from __future__ import annotations

import json
from typing import Dict, List, Tuple
from urllib.parse import parse_qsl

from application.ports.http_client import RequestOptions
from application.services.placeholders import PlaceholderRegistry
from domain.request import HeaderValue


class RequestPreparer:
    """
    Builds URL and RequestOptions for the request variants of WebApiContext.
    Placeholders are replaced in URLs, bodies and table values.
    """

    def __init__(self, placeholders: PlaceholderRegistry):
        self._placeholders = placeholders

    def prepare_url(self, url: str) -> str:
        return self._placeholders.replace(url).lstrip("/")

    def plain(self, headers: Dict[str, HeaderValue]) -> RequestOptions:
        return RequestOptions(headers=headers)

    def with_values(self, headers: Dict[str, HeaderValue], rows: Dict[str, str]) -> RequestOptions:
        fields = {k: self._placeholders.replace(v) for k, v in rows.items()}
        return RequestOptions(headers=headers, body=json.dumps(fields))

    def with_body(self, headers: Dict[str, HeaderValue], body: str) -> RequestOptions:
        return RequestOptions(headers=headers, body=self._placeholders.replace(body.strip()))

    def with_form_data(self, headers: Dict[str, HeaderValue], body: str) -> RequestOptions:
        # one "name=value" pair per line
        text = self._placeholders.replace(body.strip())
        query = "&".join(text.splitlines())
        form: List[Tuple[str, str]] = parse_qsl(query, keep_blank_values=True)
        return RequestOptions(headers=headers, form=form)
