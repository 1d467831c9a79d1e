# application/steps/web_api_steps.py
"""
behave step definitions bound to WebApiContext.

Import this module from a file in your features/steps directory to
register the steps, and wire the hooks from infrastructure.bdd.environment
into features/environment.py so that every scenario gets a context.web_api.
"""
from __future__ import annotations

from typing import Dict

from behave import given, then, use_step_matcher, when

from application.errors import ApiContextError
from application.web_api_context import WebApiContext

use_step_matcher("re")


def _api(context) -> WebApiContext:
    api = getattr(context, "web_api", None)
    if api is None:
        raise ApiContextError("context.web_api is not set; add the web api hooks to features/environment.py")
    return api


def _text(context) -> str:
    if context.text is None:
        raise ApiContextError("This step needs a doc string")
    return context.text


def _table_values(context) -> Dict[str, str]:
    # every row is a name/value pair, the heading row included
    if context.table is None:
        raise ApiContextError("This step needs a table")
    rows = [context.table.headings] + [row.cells for row in context.table.rows]
    values: Dict[str, str] = {}
    for cells in rows:
        if len(cells) != 2:
            raise ApiContextError(f"Table rows must have 2 cells, got {list(cells)}")
        values[cells[0]] = cells[1]
    return values


@given(r'I am authenticating as "([^"]*)" with "([^"]*)" password')
def step_authenticating_as(context, username: str, password: str) -> None:
    _api(context).authenticate_as(username, password)


@given(r'I set header "([^"]*)" with value "([^"]*)"')
def step_set_header(context, name: str, value: str) -> None:
    _api(context).set_header(name, value)


@when(r'(?:I )?send a ([A-Z]+) request to "([^"]+)" with values:')
def step_send_request_with_values(context, method: str, url: str) -> None:
    _api(context).send_request_with_values(method, url, _table_values(context))


@when(r'(?:I )?send a ([A-Z]+) request to "([^"]+)" with body:')
def step_send_request_with_body(context, method: str, url: str) -> None:
    _api(context).send_request_with_body(method, url, _text(context))


@when(r'(?:I )?send a ([A-Z]+) request to "([^"]+)" with form data:')
def step_send_request_with_form_data(context, method: str, url: str) -> None:
    _api(context).send_request_with_form_data(method, url, _text(context))


# the re matcher accepts a prefix match, so the plain request comes after its variants
@when(r'(?:I )?send a ([A-Z]+) request to "([^"]+)"')
def step_send_request(context, method: str, url: str) -> None:
    _api(context).send_request(method, url)


@then(r"(?:the )?response code should be (\d+)")
def step_response_code(context, code: str) -> None:
    _api(context).assert_response_code(code)


@then(r'(?:the )?response should contain "([^"]*)"')
def step_response_contains(context, text: str) -> None:
    _api(context).assert_response_contains(text)


@then(r'(?:the )?response should not contain "([^"]*)"')
def step_response_not_contains(context, text: str) -> None:
    _api(context).assert_response_not_contains(text)


@then(r"(?:the )?response should contain json:")
def step_response_contains_json(context) -> None:
    _api(context).assert_response_contains_json(_text(context))


@then(r"(?:the )?response should contain json matching:")
def step_response_contains_json_matching(context) -> None:
    _api(context).assert_response_contains_json_matching(_text(context))


@then(r'(?:the )?response should contain json with key "([^"]*)" matching:')
def step_response_contains_json_with_key_matching(context, key: str) -> None:
    _api(context).assert_response_contains_json_with_key_matching(key, _text(context))


@then(r"the response should be json")
def step_response_is_json(context) -> None:
    _api(context).assert_response_is_json()


@then(r"print response")
def step_print_response(context) -> None:
    _api(context).print_response()


# leave the default matcher for step modules imported after this one
use_step_matcher("parse")
