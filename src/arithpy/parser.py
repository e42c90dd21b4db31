from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, TypeVar

from .errors import LexerError, ParseError, ParseErrorKind
from .lexer import Lexer

if TYPE_CHECKING:
    from .ast import Node


log = logging.getLogger(__name__)

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class Parseable(Protocol[T_co]):
    """A grammar rule: consumes from ``parser.lexer`` and returns a node, or raises."""

    @classmethod
    def parse(cls, parser: Parser) -> Node[T_co]: ...


def _rule_name(rule: object) -> str:
    return getattr(rule, "__name__", type(rule).__name__)


@dataclass(slots=True)
class Parser:
    """Recursive-descent driver owning the active lexer.

    Every rule invocation goes through :meth:`parse`, which makes it
    all-or-nothing: on failure the lexer is restored to where it was before
    the rule started.
    """

    lexer: Lexer

    @classmethod
    def for_source(cls, src: str, *, skip_whitespace: bool = True) -> Parser:
        return cls(lexer=Lexer.for_source(src, skip_whitespace=skip_whitespace))

    def parse(self, rule: type[Parseable[T]]) -> Node[T]:
        snapshot = self.lexer.copy()
        outer_start = self.lexer.mark_span()
        try:
            node = rule.parse(self)
        except LexerError as e:
            self._restore(rule, snapshot)
            raise ParseError.from_lexer(e) from e
        except ParseError:
            self._restore(rule, snapshot)
            raise
        self.lexer.resume_span(outer_start)
        return node

    def parse_with_lexer(self, rule: type[Parseable[T]], lexer: Lexer) -> Node[T]:
        current = self.lexer
        self.lexer = lexer
        log.debug("parsing %s with sub-lexer at %s", _rule_name(rule), lexer.position)
        try:
            return self.parse(rule)
        finally:
            self.lexer = current

    def err(self, kind: ParseErrorKind, hint: str | None = None) -> ParseError:
        return ParseError(span=self.lexer.span(), kind=kind, hint=hint)

    def _restore(self, rule: object, snapshot: Lexer) -> None:
        log.debug(
            "%s failed at %s, backtracking to %s",
            _rule_name(rule),
            self.lexer.position,
            snapshot.position,
        )
        self.lexer = snapshot
