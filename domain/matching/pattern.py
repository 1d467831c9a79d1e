# domain/matching/pattern.py
from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Optional

from domain.matching.errors import PatternSyntaxError
from domain.matching.expanders import Expander, ExpanderRegistry
from domain.matching.result import MatchResult

_TOKEN_RE = re.compile(r"^@(?P<type>[A-Za-z]+|\*)@(?P<rest>.*)$", re.S)
_EXPANDER_RE = re.compile(r"^\.(?P<name>[A-Za-z_][A-Za-z0-9_]*)\((?P<args>.*)\)$", re.S)


def looks_like_token(pattern: Any) -> bool:
    """True for strings shaped like "@type@" or "@type@.expander(...)"."""
    if not isinstance(pattern, str):
        return False
    m = _TOKEN_RE.match(pattern)
    if m is None:
        return False
    rest = m.group("rest")
    return rest == "" or rest.startswith(".")


@dataclass(frozen=True)
class TypePattern:
    type: str
    expander: Optional[Expander] = None

    def match_expander(self, value: Any) -> MatchResult:
        if self.expander is None:
            return MatchResult.success()
        return self.expander.match(value)


class PatternParser:
    """
    Parses "@type@" tokens with at most one ".name(args)" suffix.
    Arguments are JSON literals separated by commas, e.g.
    @string@.startsWith("ab") or @string@.length(5).
    """

    def __init__(self, expanders: ExpanderRegistry):
        self._expanders = expanders

    def parse(self, pattern: str) -> TypePattern:
        m = _TOKEN_RE.match(pattern)
        if m is None:
            raise PatternSyntaxError(f"not a type pattern: {pattern}")

        rest = m.group("rest")
        if rest == "":
            return TypePattern(type=m.group("type"))

        em = _EXPANDER_RE.match(rest)
        if em is None:
            raise PatternSyntaxError(f"invalid expander syntax: {pattern}")

        args = self._parse_args(em.group("args"), pattern)
        expander = self._expanders.create(em.group("name"), args)
        return TypePattern(type=m.group("type"), expander=expander)

    def _parse_args(self, raw: str, pattern: str) -> list:
        if raw.strip() == "":
            return []
        try:
            args = json.loads(f"[{raw}]")
        except json.JSONDecodeError as e:
            raise PatternSyntaxError(f"invalid expander arguments in {pattern}: {e.msg}") from e
        return args
