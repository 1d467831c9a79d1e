# domain/matching/__init__.py
from domain.matching.errors import (
    MatchingError,
    PatternSyntaxError,
    UnknownExpanderError,
    UnsupportedPatternError,
)
from domain.matching.expanders import Expander, ExpanderRegistry, default_expanders
from domain.matching.factory import build_pattern_matcher, build_scalar_chain
from domain.matching.matchers import ChainMatcher, Matcher, UUIDMatcher
from domain.matching.pattern_matcher import PatternMatcher
from domain.matching.result import MatchResult

__all__ = [
    "MatchingError",
    "PatternSyntaxError",
    "UnknownExpanderError",
    "UnsupportedPatternError",
    "Expander",
    "ExpanderRegistry",
    "default_expanders",
    "build_pattern_matcher",
    "build_scalar_chain",
    "ChainMatcher",
    "Matcher",
    "UUIDMatcher",
    "PatternMatcher",
    "MatchResult",
]
