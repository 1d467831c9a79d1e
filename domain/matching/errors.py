# domain/matching/errors.py
from __future__ import annotations

from typing import Any


class MatchingError(Exception):
    pass


class UnsupportedPatternError(MatchingError):
    def __init__(self, pattern: Any):
        self.pattern = pattern
        super().__init__(f"unsupported pattern: {pattern!r}")


class PatternSyntaxError(MatchingError):
    pass


class UnknownExpanderError(PatternSyntaxError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown expander: {name}")
