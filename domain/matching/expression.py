# domain/matching/expression.py
"""
Evaluator for expr(...) patterns, e.g. expr(value > 5 and value < 10).

Only a small, side-effect free subset of Python expressions is accepted.
The actual value is bound to the name ``value``.
"""
from __future__ import annotations

import ast
import operator
from typing import Any, Callable, Dict


class ExpressionError(Exception):
    pass


_FUNCTIONS: Dict[str, Callable[..., Any]] = {
    "len": len,
    "abs": abs,
    "min": min,
    "max": max,
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
}

_BIN_OPS = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.truediv,
    ast.FloorDiv: operator.floordiv,
    ast.Mod: operator.mod,
}

_UNARY_OPS = {
    ast.Not: operator.not_,
    ast.USub: operator.neg,
    ast.UAdd: operator.pos,
}

_COMPARE_OPS = {
    ast.Eq: operator.eq,
    ast.NotEq: operator.ne,
    ast.Lt: operator.lt,
    ast.LtE: operator.le,
    ast.Gt: operator.gt,
    ast.GtE: operator.ge,
    ast.In: lambda a, b: a in b,
    ast.NotIn: lambda a, b: a not in b,
    ast.Is: operator.is_,
    ast.IsNot: operator.is_not,
}


class ExpressionEvaluator:
    def evaluate(self, source: str, value: Any) -> Any:
        try:
            tree = ast.parse(source.strip(), mode="eval")
        except SyntaxError as e:
            raise ExpressionError(f"invalid expression: {source}") from e
        try:
            return self._eval(tree.body, value)
        except ExpressionError:
            raise
        except Exception as e:
            raise ExpressionError(f"{type(e).__name__}: {e}") from e

    def _eval(self, node: ast.AST, value: Any) -> Any:
        if isinstance(node, ast.Constant):
            return node.value

        if isinstance(node, ast.Name):
            if node.id == "value":
                return value
            if node.id in ("true", "false", "null"):
                return {"true": True, "false": False, "null": None}[node.id]
            raise ExpressionError(f"unknown name: {node.id}")

        if isinstance(node, (ast.List, ast.Tuple)):
            return [self._eval(e, value) for e in node.elts]

        if isinstance(node, ast.BoolOp):
            if isinstance(node.op, ast.And):
                result: Any = True
                for e in node.values:
                    result = self._eval(e, value)
                    if not result:
                        return result
                return result
            result = False
            for e in node.values:
                result = self._eval(e, value)
                if result:
                    return result
            return result

        if isinstance(node, ast.UnaryOp) and type(node.op) in _UNARY_OPS:
            return _UNARY_OPS[type(node.op)](self._eval(node.operand, value))

        if isinstance(node, ast.BinOp) and type(node.op) in _BIN_OPS:
            return _BIN_OPS[type(node.op)](self._eval(node.left, value), self._eval(node.right, value))

        if isinstance(node, ast.Compare):
            left = self._eval(node.left, value)
            for op, comparator in zip(node.ops, node.comparators):
                fn = _COMPARE_OPS.get(type(op))
                if fn is None:
                    raise ExpressionError(f"unsupported operator: {type(op).__name__}")
                right = self._eval(comparator, value)
                if not fn(left, right):
                    return False
                left = right
            return True

        if isinstance(node, ast.Subscript):
            return self._eval(node.value, value)[self._eval(node.slice, value)]

        if isinstance(node, ast.Call):
            if not isinstance(node.func, ast.Name) or node.func.id not in _FUNCTIONS:
                raise ExpressionError(f"unsupported call: {ast.dump(node.func)}")
            if node.keywords:
                raise ExpressionError("keyword arguments are not supported")
            args = [self._eval(a, value) for a in node.args]
            return _FUNCTIONS[node.func.id](*args)

        raise ExpressionError(f"unsupported syntax: {type(node).__name__}")
