from __future__ import annotations

import pytest

from domain.matching.matchers import UUIDMatcher


VALID = "3fa85f64-5717-4562-b3fc-2c963f66afa6"


@pytest.mark.parametrize("pattern", ["@uuid@"])
def test_can_match_exact_token(pattern) -> None:
    assert UUIDMatcher().can_match(pattern) is True


@pytest.mark.parametrize(
    "pattern",
    ["@uuid@ ", " @uuid@", "@UUID@", "@string@", "@uuid@.length(36)", "uuid", None, 1, ["@uuid@"]],
)
def test_can_match_rejects_anything_else(pattern) -> None:
    assert UUIDMatcher().can_match(pattern) is False


@pytest.mark.parametrize(
    "value",
    [VALID, "00000000-0000-0000-0000-000000000000", "abcdefab-cdef-abcd-efab-cdefabcdefab"],
)
def test_match_accepts_lowercase_uuid(value) -> None:
    assert UUIDMatcher().match(value, "@uuid@").ok is True


@pytest.mark.parametrize(
    "value",
    [
        VALID.upper(),
        "3FA85F64-5717-4562-b3fc-2c963f66afa6",
        "3fa85f6-5717-4562-b3fc-2c963f66afa6",
        "3fa85f644-5717-4562-b3fc-2c963f66afa6",
        "3fa85f64571745629b3fc2c963f66afa6",
        "3fa85f64-5717-4562-b3fc-2c963f66afa",
        "3fa85f64-5717-4562-b3fc-2c963f66afag",
        VALID + "\n",
        "not-a-uuid",
        "",
        None,
        123,
    ],
)
def test_match_rejects_non_canonical_values(value) -> None:
    assert UUIDMatcher().match(value, "@uuid@").ok is False


def test_failure_names_value_and_pattern() -> None:
    result = UUIDMatcher().match("not-a-uuid", "@uuid@")

    assert result.ok is False
    assert "not-a-uuid" in result.error
    assert UUIDMatcher.PATTERN_REGEX in result.error
