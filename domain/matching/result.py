# domain/matching/result.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MatchResult:
    ok: bool
    error: Optional[str] = None

    @classmethod
    def success(cls) -> "MatchResult":
        return _SUCCESS

    @classmethod
    def failure(cls, error: str) -> "MatchResult":
        return cls(ok=False, error=error)

    def __bool__(self) -> bool:
        return self.ok


_SUCCESS = MatchResult(ok=True)
