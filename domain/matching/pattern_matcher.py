# domain/matching/pattern_matcher.py
from __future__ import annotations

from typing import Any

from domain.matching.describe import describe
from domain.matching.matchers import ChainMatcher
from domain.matching.result import MatchResult


class PatternMatcher:
    """
    Matches a decoded JSON value against a pattern of the same shape.

    - dict: every pattern key must exist in the value (extra keys are fine)
    - list: same length, compared element by element
    - anything else: handed to the scalar chain

    Failure messages are prefixed with a JSON path such as $.items[0].id.
    """

    def __init__(self, chain: ChainMatcher):
        self._chain = chain

    def match(self, value: Any, pattern: Any) -> MatchResult:
        return self._match(value, pattern, "$")

    def _match(self, value: Any, pattern: Any, path: str) -> MatchResult:
        if isinstance(pattern, dict):
            return self._match_object(value, pattern, path)
        if isinstance(pattern, list):
            return self._match_array(value, pattern, path)

        result = self._chain.match(value, pattern)
        if result.ok:
            return result
        return MatchResult.failure(f"Value at path {path}: {result.error}")

    def _match_object(self, value: Any, pattern: dict, path: str) -> MatchResult:
        if not isinstance(value, dict):
            return MatchResult.failure(
                f"Value at path {path}: \"{describe(value)}\" is not an object "
                f"matching \"{describe(pattern)}\"."
            )
        for key, sub_pattern in pattern.items():
            sub_path = f"{path}.{key}"
            if key not in value:
                return MatchResult.failure(f"There is no element under path {sub_path} in value.")
            result = self._match(value[key], sub_pattern, sub_path)
            if not result.ok:
                return result
        return MatchResult.success()

    def _match_array(self, value: Any, pattern: list, path: str) -> MatchResult:
        if not isinstance(value, list):
            return MatchResult.failure(
                f"Value at path {path}: \"{describe(value)}\" is not an array "
                f"matching \"{describe(pattern)}\"."
            )
        if len(value) != len(pattern):
            return MatchResult.failure(
                f"Array at path {path} has {len(value)} elements, pattern expects {len(pattern)}."
            )
        for i, (item, sub_pattern) in enumerate(zip(value, pattern)):
            result = self._match(item, sub_pattern, f"{path}[{i}]")
            if not result.ok:
                return result
        return MatchResult.success()
