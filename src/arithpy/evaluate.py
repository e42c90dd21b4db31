from __future__ import annotations

from .ast import Node
from .errors import EvaluationError
from .grammar import (
    Add,
    Divide,
    FactorValue,
    Multiply,
    Number,
    Parenthesized,
    Subtract,
    TermValue,
)
from .spans import Span


def evaluate(node: Node[object]) -> float:
    """Fold a parsed tree into its numeric value."""
    return _eval(node.value, node.span)


def _eval(v: object, span: Span) -> float:
    if isinstance(v, Number):
        return v.value
    if isinstance(v, FactorValue):
        return v.number.value
    if isinstance(v, TermValue):
        return _eval(v.factor, span)
    if isinstance(v, Parenthesized):
        return evaluate(v.term)
    if isinstance(v, Multiply):
        return evaluate(v.left) * evaluate(v.right)
    if isinstance(v, Divide):
        dividend = evaluate(v.left)
        divisor = evaluate(v.right)
        if divisor == 0:
            raise EvaluationError(span=v.right.span, message="division by zero")
        return dividend / divisor
    if isinstance(v, Add):
        return evaluate(v.left) + evaluate(v.right)
    if isinstance(v, Subtract):
        return evaluate(v.left) - evaluate(v.right)
    raise TypeError(f"cannot evaluate {type(v).__name__}")
