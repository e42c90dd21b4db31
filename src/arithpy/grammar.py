"""Arithmetic grammar.

    Term    := Factor (("+" | "-") Factor)*
    Factor  := Operand (("*" | "/") Operand)*
    Operand := "(" Term ")" | Number
    Number  := "-"? digit* ("." digit*)?     (at least one digit)

Both operator levels are left-associative.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .ast import Node
from .errors import ParseError, ParseErrorKind
from .matchers import NUMERIC, ExactChar
from .parser import Parser
from .spans import Span


OPEN_PAREN = ExactChar("(")
CLOSE_PAREN = ExactChar(")")


@dataclass(frozen=True, slots=True)
class Number:
    value: float

    @classmethod
    def parse(cls, parser: Parser) -> Node[Number]:
        lexer = parser.lexer
        negate = lexer.peek_char() == "-"
        if negate:
            lexer.eat("-")

        chars: list[str] = []
        while True:
            ch = lexer.peek_char()
            # Digits must be adjacent; skipped whitespace ends the literal.
            if ch is None or lexer.position != lexer.span_end:
                break
            if ch == ".":
                if "." in chars:
                    raise parser.err(ParseErrorKind.EXTRA_DOT_IN_NUMBER_LITERAL)
                chars.append(lexer.eat("."))
                continue
            if not NUMERIC.is_match(ch):
                break
            chars.append(lexer.advance(NUMERIC))

        if not any(c != "." for c in chars):
            raise parser.err(ParseErrorKind.EMPTY_NUMBER_LITERAL, hint="expected a number")

        value = float("".join(chars))
        if math.isinf(value):
            raise parser.err(
                ParseErrorKind.NUMBER_LITERAL_OUT_OF_RANGE,
                hint="literals must fit in a double-precision float",
            )
        return Node(cls(-value if negate else value), lexer.span())


class Factor:
    __slots__ = ()

    @classmethod
    def parse(cls, parser: Parser) -> Node[Factor]:
        left = parser.parse(Operand)
        while True:
            op = parser.lexer.peek_char()
            if op not in ("*", "/"):
                return left
            parser.lexer.eat(op)
            right = parser.parse(Operand)
            variant = Multiply if op == "*" else Divide
            left = Node(variant(left, right), parser.lexer.span())


@dataclass(frozen=True, slots=True)
class FactorValue(Factor):
    number: Number


@dataclass(frozen=True, slots=True)
class Parenthesized(Factor):
    term: Node[Term]


@dataclass(frozen=True, slots=True)
class Multiply(Factor):
    left: Node[Factor]
    right: Node[Factor]


@dataclass(frozen=True, slots=True)
class Divide(Factor):
    left: Node[Factor]
    right: Node[Factor]


class Operand:
    """A single operand of ``*``/``/``: a number or a parenthesized term."""

    __slots__ = ()

    @classmethod
    def parse(cls, parser: Parser) -> Node[Factor]:
        lexer = parser.lexer
        if lexer.peek_char() != "(":
            return parser.parse(Number).wrap(FactorValue)

        lexer.eat("(")
        inner = lexer.eat_until(CLOSE_PAREN, nested=OPEN_PAREN)
        lexer.eat(")")
        term = parser.parse_with_lexer(Term, inner)
        if not inner.at_end():
            raise ParseError(
                span=Span.at(inner.position),
                kind=ParseErrorKind.TRAILING_DATA,
                hint="expected ')'",
            )
        return Node(Parenthesized(term), lexer.span())


class Term:
    __slots__ = ()

    @classmethod
    def parse(cls, parser: Parser) -> Node[Term]:
        left = parser.parse(Factor).wrap(TermValue)
        while True:
            op = parser.lexer.peek_char()
            if op not in ("+", "-"):
                return left
            parser.lexer.eat(op)
            right = parser.parse(Factor).wrap(TermValue)
            variant = Add if op == "+" else Subtract
            left = Node(variant(left, right), parser.lexer.span())


@dataclass(frozen=True, slots=True)
class TermValue(Term):
    factor: Factor


@dataclass(frozen=True, slots=True)
class Add(Term):
    left: Node[Term]
    right: Node[Term]


@dataclass(frozen=True, slots=True)
class Subtract(Term):
    left: Node[Term]
    right: Node[Term]
