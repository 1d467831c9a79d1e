# domain/matching/factory.py
from __future__ import annotations

from typing import Optional

from domain.matching.expanders import ExpanderRegistry, default_expanders
from domain.matching.matchers import (
    ArrayMatcher,
    BooleanMatcher,
    CallbackMatcher,
    ChainMatcher,
    DoubleMatcher,
    ExpressionMatcher,
    IntegerMatcher,
    NullMatcher,
    NumberMatcher,
    ScalarMatcher,
    StringMatcher,
    UUIDMatcher,
    WildcardMatcher,
)
from domain.matching.pattern import PatternParser
from domain.matching.pattern_matcher import PatternMatcher


def build_scalar_chain(expanders: Optional[ExpanderRegistry] = None) -> ChainMatcher:
    parser = PatternParser(expanders or default_expanders())
    return ChainMatcher([
        UUIDMatcher(),
        CallbackMatcher(),
        ExpressionMatcher(),
        NullMatcher(),
        StringMatcher(parser),
        IntegerMatcher(parser),
        BooleanMatcher(),
        DoubleMatcher(parser),
        NumberMatcher(),
        ArrayMatcher(parser),
        ScalarMatcher(),
        WildcardMatcher(),
    ])


def build_pattern_matcher(expanders: Optional[ExpanderRegistry] = None) -> PatternMatcher:
    return PatternMatcher(build_scalar_chain(expanders))
