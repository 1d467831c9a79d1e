# application/services/response_assertions.py
from __future__ import annotations

import json
import re
from typing import Any, Dict, Optional

from application.errors import AssertionFailedError, MalformedExpectedJsonError, MissingKeyError
from domain.matching import MatchResult, PatternMatcher, build_pattern_matcher


_INDEX_RE = re.compile(r"[0-9]+")


def _entries(value: Any) -> Optional[Dict[Any, Any]]:
    if isinstance(value, dict):
        return value
    if isinstance(value, list):
        return dict(enumerate(value))
    return None


def _lookup_key(actual: Any, key: str) -> Any:
    if isinstance(actual, dict) and key in actual:
        return actual[key]
    if isinstance(actual, list) and _INDEX_RE.fullmatch(key) and int(key) < len(actual):
        return actual[int(key)]
    raise MissingKeyError(key)


class ResponseAssertions:
    """
    Assertions over a response body text.

    A failed expectation raises AssertionFailedError (or MissingKeyError).
    Broken expected text raises MalformedExpectedJsonError, and a pattern no
    matcher understands raises UnsupportedPatternError, so authoring mistakes
    are not mistaken for failing responses.
    """

    def __init__(self, matcher: Optional[PatternMatcher] = None):
        self._matcher = matcher or build_pattern_matcher()

    # --- parsing

    def parse_expected(self, text: str) -> Any:
        try:
            expected = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedExpectedJsonError(text) from e
        if expected is None:
            raise MalformedExpectedJsonError(text)
        return expected

    def parse_actual(self, body: str) -> Any:
        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            raise AssertionFailedError(f"Response body is not valid JSON:\n{body}") from e

    def parse_pattern(self, text: str) -> Any:
        """JSON when the text is JSON, otherwise the bare token (e.g. @uuid@)."""
        stripped = text.strip()
        try:
            return json.loads(stripped)
        except json.JSONDecodeError:
            return stripped

    # --- equality

    def assert_subset(self, expected: Any, actual: Any) -> None:
        expected_entries = _entries(expected)
        if expected_entries is None:
            if expected != actual:
                raise AssertionFailedError(
                    f"Response {json.dumps(actual)} is not equal to {json.dumps(expected)}."
                )
            return

        actual_entries = _entries(actual)
        if actual_entries is None:
            raise AssertionFailedError(f"Response {json.dumps(actual)} is not an object or array.")

        # every expected key present also means actual has at least as many entries
        for key, needle in expected_entries.items():
            if key not in actual_entries:
                raise MissingKeyError(key)
            if actual_entries[key] != needle:
                raise AssertionFailedError(
                    f"Value of \"{key}\" is {json.dumps(actual_entries[key])}, "
                    f"expected {json.dumps(needle)}."
                )

    def assert_contains_json(self, expected_text: str, body: str) -> None:
        expected = self.parse_expected(expected_text)
        self.assert_subset(expected, self.parse_actual(body))

    # --- patterns

    def match(self, pattern: Any, actual: Any) -> MatchResult:
        return self._matcher.match(actual, pattern)

    def assert_matches_pattern(self, pattern: Any, actual: Any) -> None:
        result = self.match(pattern, actual)
        if not result.ok:
            raise AssertionFailedError(result.error)

    def assert_contains_json_matching(self, pattern_text: str, body: str) -> None:
        pattern = self.parse_expected(pattern_text)
        self.assert_matches_pattern(pattern, self.parse_actual(body))

    def assert_key_matches(self, key: str, pattern_text: str, body: str) -> None:
        value = _lookup_key(self.parse_actual(body), key)
        self.assert_matches_pattern(self.parse_pattern(pattern_text), value)

    # --- text

    def assert_contains_text(self, text: str, body: str) -> None:
        if re.search(re.escape(text), body, re.IGNORECASE) is None:
            raise AssertionFailedError(f"Response does not contain \"{text}\".")

    def assert_not_contains_text(self, text: str, body: str) -> None:
        # case-sensitive, unlike assert_contains_text
        if re.search(re.escape(text), body) is not None:
            raise AssertionFailedError(f"Response contains \"{text}\".")
