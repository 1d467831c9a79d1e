# domain/matching/expanders.py
"""
Expanders refine a typed token with one extra constraint:

    @string@.length(3)
    @array@.minLength(1)
    @integer@.greaterThan(10)

Each expander is built from the parsed call arguments and checks the
actual value on its own; the typed matcher has already verified the type.
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Type

from domain.matching.describe import describe
from domain.matching.errors import PatternSyntaxError, UnknownExpanderError
from domain.matching.result import MatchResult


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class Expander(ABC):
    NAME: str = ""

    def __init__(self, *args: Any):
        self._validate(list(args))

    @abstractmethod
    def _validate(self, args: List[Any]) -> None: ...

    @abstractmethod
    def match(self, value: Any) -> MatchResult: ...

    def _require(self, args: List[Any], count: int) -> None:
        if len(args) != count:
            raise PatternSyntaxError(
                f"{self.NAME} expects {count} argument(s), got {len(args)}"
            )


class _LengthExpander(Expander):
    def _validate(self, args: List[Any]) -> None:
        self._require(args, 1)
        bound = args[0]
        if not isinstance(bound, int) or isinstance(bound, bool) or bound < 0:
            raise PatternSyntaxError(
                f"{self.NAME} expects a non-negative integer, got {bound!r}"
            )
        self.bound = bound

    def match(self, value: Any) -> MatchResult:
        if not isinstance(value, (str, list, dict)):
            return MatchResult.failure(
                f"{self.NAME} expander can't match \"{describe(value)}\" "
                f"because it is neither a string nor an array."
            )
        size = len(value)
        if self._accepts(size):
            return MatchResult.success()
        return MatchResult.failure(
            f"Length of \"{describe(value)}\" is {size}, "
            f"{self._violation()} {self.NAME}({self.bound})."
        )

    @abstractmethod
    def _accepts(self, size: int) -> bool: ...

    @abstractmethod
    def _violation(self) -> str: ...


class Length(_LengthExpander):
    NAME = "length"

    def _accepts(self, size: int) -> bool:
        return size == self.bound

    def _violation(self) -> str:
        return "not equal to"


class MinLength(_LengthExpander):
    NAME = "minLength"

    def _accepts(self, size: int) -> bool:
        return size >= self.bound

    def _violation(self) -> str:
        return "lower than"


class MaxLength(_LengthExpander):
    NAME = "maxLength"

    def _accepts(self, size: int) -> bool:
        return size <= self.bound

    def _violation(self) -> str:
        return "greater than"


class _StringArgExpander(Expander):
    def _validate(self, args: List[Any]) -> None:
        self._require(args, 1)
        if not isinstance(args[0], str):
            raise PatternSyntaxError(f"{self.NAME} expects a string, got {args[0]!r}")
        self.needle = args[0]

    def match(self, value: Any) -> MatchResult:
        if not isinstance(value, str):
            return MatchResult.failure(
                f"{self.NAME} expander can't match \"{describe(value)}\" because it is not a string."
            )
        if self._accepts(value):
            return MatchResult.success()
        return MatchResult.failure(
            f"\"{value}\" does not satisfy {self.NAME}(\"{self.needle}\")."
        )

    @abstractmethod
    def _accepts(self, value: str) -> bool: ...


class StartsWith(_StringArgExpander):
    NAME = "startsWith"

    def _accepts(self, value: str) -> bool:
        return value.startswith(self.needle)


class EndsWith(_StringArgExpander):
    NAME = "endsWith"

    def _accepts(self, value: str) -> bool:
        return value.endswith(self.needle)


class Contains(_StringArgExpander):
    NAME = "contains"

    def _accepts(self, value: str) -> bool:
        return self.needle in value


class MatchRegex(_StringArgExpander):
    NAME = "matchRegex"

    def _validate(self, args: List[Any]) -> None:
        super()._validate(args)
        try:
            self._regex = re.compile(self.needle)
        except re.error as e:
            raise PatternSyntaxError(f"matchRegex has an invalid regex: {e}") from e

    def _accepts(self, value: str) -> bool:
        return self._regex.search(value) is not None


class NotEmpty(Expander):
    NAME = "notEmpty"

    def _validate(self, args: List[Any]) -> None:
        self._require(args, 0)

    def match(self, value: Any) -> MatchResult:
        if value is None or value == "" or value == [] or value == {}:
            return MatchResult.failure(f"\"{describe(value)}\" is empty.")
        return MatchResult.success()


class _BoundExpander(Expander):
    def _validate(self, args: List[Any]) -> None:
        self._require(args, 1)
        if not _is_number(args[0]):
            raise PatternSyntaxError(f"{self.NAME} expects a number, got {args[0]!r}")
        self.bound = args[0]

    def match(self, value: Any) -> MatchResult:
        if not _is_number(value):
            return MatchResult.failure(
                f"{self.NAME} expander can't match \"{describe(value)}\" because it is not a number."
            )
        if self._accepts(value):
            return MatchResult.success()
        return MatchResult.failure(f"\"{value}\" does not satisfy {self.NAME}({self.bound}).")

    @abstractmethod
    def _accepts(self, value: float) -> bool: ...


class GreaterThan(_BoundExpander):
    NAME = "greaterThan"

    def _accepts(self, value: float) -> bool:
        return value > self.bound


class LowerThan(_BoundExpander):
    NAME = "lowerThan"

    def _accepts(self, value: float) -> bool:
        return value < self.bound


class ExpanderRegistry:
    def __init__(self, definitions: Dict[str, Type[Expander]]):
        self._definitions = dict(definitions)

    def create(self, name: str, args: List[Any]) -> Expander:
        cls = self._definitions.get(name)
        if cls is None:
            raise UnknownExpanderError(name)
        return cls(*args)


def default_expanders() -> ExpanderRegistry:
    return ExpanderRegistry({
        cls.NAME: cls
        for cls in (
            Length,
            MinLength,
            MaxLength,
            StartsWith,
            EndsWith,
            Contains,
            MatchRegex,
            NotEmpty,
            GreaterThan,
            LowerThan,
        )
    })
