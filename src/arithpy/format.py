from __future__ import annotations

from decimal import Decimal

from . import grammar as G
from .ast import Node


_OPERATORS: dict[type, str] = {
    G.Multiply: "*",
    G.Divide: "/",
    G.Add: "+",
    G.Subtract: "-",
}


def format_expr(node: Node[object]) -> str:
    """Render a tree back to canonical source text.

    Parentheses appear exactly where the source had them; spans are not
    preserved.
    """
    return _format(node.value)


def _format(v: object) -> str:
    if isinstance(v, G.Number):
        return _format_number(v.value)
    if isinstance(v, G.FactorValue):
        return _format_number(v.number.value)
    if isinstance(v, G.TermValue):
        return _format(v.factor)
    if isinstance(v, G.Parenthesized):
        return f"({format_expr(v.term)})"
    op = _OPERATORS.get(type(v))
    if op is not None:
        return f"{format_expr(v.left)} {op} {format_expr(v.right)}"
    raise TypeError(f"cannot format {type(v).__name__}")


def _format_number(x: float) -> str:
    # Positional notation only: the number grammar has no exponent syntax.
    return format(Decimal(repr(x)), "f")
