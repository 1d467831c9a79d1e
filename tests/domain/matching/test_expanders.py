from __future__ import annotations

import pytest

from domain.matching.errors import PatternSyntaxError, UnknownExpanderError
from domain.matching.expanders import Length, MaxLength, MinLength, default_expanders
from domain.matching.factory import build_scalar_chain
from domain.matching.pattern import PatternParser


class TestLength:
    def test_exact_length_passes(self):
        assert Length(3).match("bob").ok is True

    @pytest.mark.parametrize("value", ["bo", "bobb"])
    def test_off_by_one_fails(self, value):
        result = Length(3).match(value)
        assert result.ok is False
        assert "length(3)" in result.error
        assert f"is {len(value)}" in result.error

    def test_counts_list_elements(self):
        assert Length(2).match([1, 2]).ok is True
        assert Length(2).match([1]).ok is False

    def test_non_sized_value_fails(self):
        result = Length(1).match(5)
        assert result.ok is False
        assert "neither a string nor an array" in result.error


class TestMinLength:
    def test_bounds(self):
        expander = MinLength(3)
        assert expander.match("abc").ok is True
        assert expander.match("ab").ok is False
        assert expander.match("abcd").ok is True

    def test_failure_names_bound_and_length(self):
        result = MinLength(3).match("ab")
        assert "minLength(3)" in result.error
        assert "is 2" in result.error


class TestMaxLength:
    def test_bounds(self):
        expander = MaxLength(10)
        assert expander.match("a" * 10).ok is True
        assert expander.match("a" * 11).ok is False
        assert expander.match("a" * 9).ok is True

    def test_failure_names_bound_and_length(self):
        result = MaxLength(2).match([1, 2, 3])
        assert "maxLength(2)" in result.error
        assert "is 3" in result.error


@pytest.mark.parametrize("args", [(), (1, 2), ("3",), (-1,), (True,), (1.5,)])
def test_length_rejects_bad_arguments(args) -> None:
    with pytest.raises(PatternSyntaxError):
        Length(*args)


class TestPatternParser:
    def setup_method(self):
        self.parser = PatternParser(default_expanders())

    def test_plain_token(self):
        parsed = self.parser.parse("@string@")
        assert parsed.type == "string"
        assert parsed.expander is None

    def test_token_with_expander(self):
        parsed = self.parser.parse("@string@.length(5)")
        assert parsed.type == "string"
        assert isinstance(parsed.expander, Length)
        assert parsed.expander.bound == 5

    def test_string_argument(self):
        parsed = self.parser.parse('@string@.startsWith("ab")')
        assert parsed.match_expander("abc").ok is True
        assert parsed.match_expander("cab").ok is False

    def test_unknown_expander(self):
        with pytest.raises(UnknownExpanderError):
            self.parser.parse("@string@.shorterThan(3)")

    def test_two_expanders_are_rejected(self):
        with pytest.raises(PatternSyntaxError):
            self.parser.parse("@string@.minLength(1).maxLength(3)")

    def test_garbage_after_token(self):
        with pytest.raises(PatternSyntaxError):
            self.parser.parse("@string@length(3)")


class TestSupplementedExpanders:
    def setup_method(self):
        self.chain = build_scalar_chain()

    @pytest.mark.parametrize(
        "pattern,value,ok",
        [
            ('@string@.endsWith(".com")', "example.com", True),
            ('@string@.endsWith(".com")', "example.org", False),
            ('@string@.contains("amp")', "example", True),
            ('@string@.contains("zz")', "example", False),
            ('@string@.matchRegex("^[0-9]+$")', "12345", True),
            ('@string@.matchRegex("^[0-9]+$")', "12a45", False),
            ("@string@.notEmpty()", "x", True),
            ("@string@.notEmpty()", "", False),
            ("@array@.notEmpty()", [], False),
            ("@integer@.greaterThan(10)", 11, True),
            ("@integer@.greaterThan(10)", 10, False),
            ("@double@.lowerThan(1.5)", 1.25, True),
            ("@double@.lowerThan(1.5)", 2.0, False),
        ],
    )
    def test_expanders_through_chain(self, pattern, value, ok):
        assert self.chain.match(value, pattern).ok is ok
