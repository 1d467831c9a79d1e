from __future__ import annotations

import pytest

from domain.matching.expression import ExpressionError, ExpressionEvaluator


@pytest.fixture
def evaluator() -> ExpressionEvaluator:
    return ExpressionEvaluator()


@pytest.mark.parametrize(
    "source,value,expected",
    [
        ("value > 5", 6, True),
        ("value == 'bob'", "bob", True),
        ("len(value) == 3", [1, 2, 3], True),
        ("value in ['a', 'b']", "c", False),
        ("not value", "", True),
        ("value['id'] > 0", {"id": 3}, True),
        ("1 < value <= 3", 3, True),
        ("value % 2 == 0 or value == 1", 1, True),
        ("value == null", None, True),
    ],
)
def test_evaluates(evaluator, source, value, expected) -> None:
    assert bool(evaluator.evaluate(source, value)) is expected


@pytest.mark.parametrize(
    "source",
    [
        "__import__('os')",
        "value.__class__",
        "open('x')",
        "[x for x in value]",
        "lambda: 1",
        "other > 1",
        "len(value, key=1)",
        "value >",
    ],
)
def test_rejects_unsupported_syntax(evaluator, source) -> None:
    with pytest.raises(ExpressionError):
        evaluator.evaluate(source, [1])
