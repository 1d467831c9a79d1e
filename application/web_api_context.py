# application/web_api_context.py
from __future__ import annotations

import base64
from typing import Dict, Optional

from application.errors import ApiContextError, AssertionFailedError
from application.ports.http_client import HttpClientPort, HttpResponse, RequestOptions, TransportError
from application.ports.logger import LoggerPort
from application.services.placeholders import PlaceholderRegistry
from application.services.redactor import mask_dict, mask_form
from application.services.request_preparer import RequestPreparer
from application.services.response_assertions import ResponseAssertions
from domain.request import HeaderBag, HeaderValue, RequestData


class WebApiContext:
    """
    State of one scenario: headers, placeholders, the last request and
    its response. Step definitions call into this object.
    """

    authorization_prefix = "Basic"

    def __init__(
        self,
        client: Optional[HttpClientPort] = None,
        logger: Optional[LoggerPort] = None,
        assertions: Optional[ResponseAssertions] = None,
    ):
        self._client = client
        self._logger = logger
        self._assertions = assertions or ResponseAssertions()
        self._headers = HeaderBag()
        self._placeholders = PlaceholderRegistry()
        self._preparer = RequestPreparer(self._placeholders)
        self._authorization: Optional[str] = None
        self._request_data = RequestData()
        self._response: Optional[HttpResponse] = None

    # --- collaborators

    def set_client(self, client: HttpClientPort) -> None:
        self._client = client

    def set_logger(self, logger: LoggerPort) -> None:
        self._logger = logger

    def _get_client(self) -> HttpClientPort:
        if self._client is None:
            raise ApiContextError("Client has not been set in WebApiContext")
        return self._client

    # --- headers / auth

    @property
    def authorization(self) -> Optional[str]:
        return self._authorization

    def set_authorization(self, authorization: Optional[str] = None) -> None:
        self._authorization = authorization

    def authenticate_as(self, username: str, password: str) -> None:
        self.remove_header("Authorization")
        self._authorization = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
        self.add_header("Authorization", f"{self.authorization_prefix} {self._authorization}")

    def set_header(self, name: str, value: str) -> None:
        self.add_header(name, value)

    def add_header(self, name: str, value: str) -> None:
        self._headers.add(name, value)

    def remove_header(self, name: str) -> None:
        self._headers.remove(name)

    def get_headers(self) -> Dict[str, HeaderValue]:
        return self._headers.snapshot()

    # --- placeholders

    def set_placeholder(self, key: str, value: str) -> None:
        self._placeholders.set(key, value)

    def remove_placeholder(self, key: str) -> None:
        self._placeholders.remove(key)

    def replace_placeholders(self, text: str) -> str:
        return self._placeholders.replace(text)

    # --- requests

    def send_request(self, method: str, url: str) -> HttpResponse:
        return self._send(method, self._preparer.prepare_url(url), self._preparer.plain(self.get_headers()))

    def send_request_with_values(self, method: str, url: str, rows: Dict[str, str]) -> HttpResponse:
        options = self._preparer.with_values(self.get_headers(), rows)
        return self._send(method, self._preparer.prepare_url(url), options)

    def send_request_with_body(self, method: str, url: str, body: str) -> HttpResponse:
        options = self._preparer.with_body(self.get_headers(), body)
        return self._send(method, self._preparer.prepare_url(url), options)

    def send_request_with_form_data(self, method: str, url: str, body: str) -> HttpResponse:
        options = self._preparer.with_form_data(self.get_headers(), body)
        return self._send(method, self._preparer.prepare_url(url), options)

    def _send(self, method: str, url: str, options: RequestOptions) -> HttpResponse:
        method = method.upper()
        self._request_data = RequestData(method=method, url=url)
        client = self._get_client()

        self._log(
            "debug",
            "http.request",
            method=method,
            url=url,
            headers=mask_dict(options.headers),
            form=mask_form(options.form),
        )
        try:
            self._response = client.send(method, url, options)
        except TransportError as e:
            if e.response is None:
                self._log("error", "http.transport_failed", method=method, url=url, error=str(e))
                raise
            self._response = e.response

        self._log(
            "info",
            "http.response",
            method=method,
            url=url,
            status=self._response.status,
            text_head=self._response.text[:200],
        )
        return self._response

    def get_response(self) -> HttpResponse:
        if self._response is None:
            raise ApiContextError("You must first make a request to check a response.")
        return self._response

    @property
    def request_data(self) -> RequestData:
        return self._request_data

    # --- response assertions

    def assert_response_code(self, code: int | str) -> None:
        expected = int(code)
        actual = int(self.get_response().status)
        if actual != expected:
            raise AssertionFailedError(f"Response code is {actual}, expected {expected}.")

    def assert_response_contains(self, text: str) -> None:
        self._assertions.assert_contains_text(text, self.get_response().text)

    def assert_response_not_contains(self, text: str) -> None:
        self._assertions.assert_not_contains_text(text, self.get_response().text)

    def assert_response_contains_json(self, expected_text: str) -> None:
        self._assertions.assert_contains_json(self.replace_placeholders(expected_text), self.get_response().text)

    def assert_response_contains_json_matching(self, pattern_text: str) -> None:
        self._assertions.assert_contains_json_matching(
            self.replace_placeholders(pattern_text), self.get_response().text
        )

    def assert_response_contains_json_with_key_matching(self, key: str, pattern_text: str) -> None:
        self._assertions.assert_key_matches(key, self.replace_placeholders(pattern_text), self.get_response().text)

    def assert_response_is_json(self) -> None:
        content_type = self.get_response().header_values("Content-Type")
        first = content_type[0] if content_type else None
        if first != "application/json":
            raise AssertionFailedError(f"Content-Type is \"{first}\", expected \"application/json\".")

    def print_response(self) -> str:
        response = self.get_response()
        out = (
            f"{self._request_data.method} {self._request_data.url} => {response.status}:\n"
            f"{response.text}"
        )
        print(out)
        return out

    def _log(self, level: str, event: str, **fields) -> None:
        if self._logger is not None:
            getattr(self._logger, level)(event, **fields)
