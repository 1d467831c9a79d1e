# domain/matching/matchers.py
from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional, Tuple

from domain.matching.describe import describe
from domain.matching.errors import PatternSyntaxError, UnsupportedPatternError
from domain.matching.expression import ExpressionError, ExpressionEvaluator
from domain.matching.pattern import PatternParser, looks_like_token
from domain.matching.result import MatchResult


class Matcher(ABC):
    @abstractmethod
    def can_match(self, pattern: Any) -> bool: ...

    @abstractmethod
    def match(self, value: Any, pattern: Any) -> MatchResult: ...


class UUIDMatcher(Matcher):
    UUID_PATTERN = "@uuid@"
    PATTERN_REGEX = r"^[a-f0-9]{8}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{12}$"

    _regex = re.compile(PATTERN_REGEX)

    def can_match(self, pattern: Any) -> bool:
        return isinstance(pattern, str) and pattern == self.UUID_PATTERN

    def match(self, value: Any, pattern: Any) -> MatchResult:
        # fullmatch: "$" alone would accept a trailing newline
        if isinstance(value, str) and self._regex.fullmatch(value):
            return MatchResult.success()
        return MatchResult.failure(f"\"{describe(value)}\" does not match \"{self.PATTERN_REGEX}\".")


class CallbackMatcher(Matcher):
    def can_match(self, pattern: Any) -> bool:
        return callable(pattern)

    def match(self, value: Any, pattern: Any) -> MatchResult:
        if pattern(value):
            return MatchResult.success()
        return MatchResult.failure(f"\"{describe(value)}\" is not accepted by {describe(pattern)}.")


class ExpressionMatcher(Matcher):
    _expr_re = re.compile(r"^expr\((?P<source>.*)\)$", re.S)

    def __init__(self, evaluator: Optional[ExpressionEvaluator] = None):
        self._evaluator = evaluator or ExpressionEvaluator()

    def can_match(self, pattern: Any) -> bool:
        return isinstance(pattern, str) and self._expr_re.match(pattern) is not None

    def match(self, value: Any, pattern: Any) -> MatchResult:
        source = self._expr_re.match(pattern).group("source")
        try:
            ok = self._evaluator.evaluate(source, value)
        except ExpressionError as e:
            return MatchResult.failure(f"\"{describe(value)}\" can't be checked by \"{pattern}\": {e}")
        if ok:
            return MatchResult.success()
        return MatchResult.failure(f"\"{describe(value)}\" does not match \"{pattern}\" expression.")


class NullMatcher(Matcher):
    def can_match(self, pattern: Any) -> bool:
        return pattern is None or pattern == "@null@"

    def match(self, value: Any, pattern: Any) -> MatchResult:
        if value is None:
            return MatchResult.success()
        return MatchResult.failure(f"\"{describe(value)}\" does not match null.")


class BooleanMatcher(Matcher):
    def can_match(self, pattern: Any) -> bool:
        return isinstance(pattern, str) and pattern == "@boolean@"

    def match(self, value: Any, pattern: Any) -> MatchResult:
        if isinstance(value, bool):
            return MatchResult.success()
        return MatchResult.failure(f"\"{describe(value)}\" is not a valid boolean.")


class NumberMatcher(Matcher):
    def can_match(self, pattern: Any) -> bool:
        return isinstance(pattern, str) and pattern == "@number@"

    def match(self, value: Any, pattern: Any) -> MatchResult:
        if _is_numeric(value):
            return MatchResult.success()
        return MatchResult.failure(f"\"{describe(value)}\" is not a valid number.")


# decimal or exponent notation only: no nan, inf, "0x1A" or "1_000"
_NUMERIC_RE = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*", re.ASCII)


def _is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    if isinstance(value, str):
        return _NUMERIC_RE.fullmatch(value) is not None
    return False


class TypedMatcher(Matcher):
    """
    Base for "@type@" tokens that accept an expander suffix.
    A pattern the parser rejects (unknown expander, bad arguments) is not claimed.
    """

    TYPE: str = ""

    def __init__(self, parser: PatternParser):
        self._parser = parser

    def can_match(self, pattern: Any) -> bool:
        if not isinstance(pattern, str):
            return False
        try:
            return self._parser.parse(pattern).type == self.TYPE
        except PatternSyntaxError:
            return False

    def match(self, value: Any, pattern: Any) -> MatchResult:
        if not self._accepts(value):
            return MatchResult.failure(f"\"{describe(value)}\" is not a valid {self.TYPE}.")
        return self._parser.parse(pattern).match_expander(value)

    @abstractmethod
    def _accepts(self, value: Any) -> bool: ...


class StringMatcher(TypedMatcher):
    TYPE = "string"

    def _accepts(self, value: Any) -> bool:
        return isinstance(value, str)


class IntegerMatcher(TypedMatcher):
    TYPE = "integer"

    def _accepts(self, value: Any) -> bool:
        return isinstance(value, int) and not isinstance(value, bool)


class DoubleMatcher(TypedMatcher):
    TYPE = "double"

    def _accepts(self, value: Any) -> bool:
        return isinstance(value, float)


class ArrayMatcher(TypedMatcher):
    TYPE = "array"

    def _accepts(self, value: Any) -> bool:
        return isinstance(value, list)


class ScalarMatcher(Matcher):
    """Literal comparison; token-shaped strings are left to the typed matchers."""

    def can_match(self, pattern: Any) -> bool:
        return isinstance(pattern, (str, int, float)) and not looks_like_token(pattern)

    def match(self, value: Any, pattern: Any) -> MatchResult:
        if type(value) is type(pattern) and value == pattern:
            return MatchResult.success()
        return MatchResult.failure(f"\"{describe(value)}\" does not match \"{describe(pattern)}\".")


class WildcardMatcher(Matcher):
    def can_match(self, pattern: Any) -> bool:
        return isinstance(pattern, str) and pattern in ("@*@", "@wildcard@")

    def match(self, value: Any, pattern: Any) -> MatchResult:
        return MatchResult.success()


class ChainMatcher(Matcher):
    """
    Delegates to the first matcher that claims the pattern.
    Registration order decides, e.g. UUIDMatcher must come before StringMatcher.
    """

    def __init__(self, matchers: Iterable[Matcher]):
        self._matchers: Tuple[Matcher, ...] = tuple(matchers)

    @property
    def matchers(self) -> Tuple[Matcher, ...]:
        return self._matchers

    def find(self, pattern: Any) -> Optional[Matcher]:
        for m in self._matchers:
            if m.can_match(pattern):
                return m
        return None

    def can_match(self, pattern: Any) -> bool:
        return self.find(pattern) is not None

    def match(self, value: Any, pattern: Any) -> MatchResult:
        matcher = self.find(pattern)
        if matcher is None:
            raise UnsupportedPatternError(pattern)
        return matcher.match(value, pattern)
