from __future__ import annotations

from dataclasses import dataclass, replace

from .errors import EndOfInput, IncorrectChar, LexerError
from .matchers import ANY, CharMatcher, ExactChar
from .source import CharSource
from .spans import Position, Span


@dataclass(frozen=True, slots=True)
class Bound:
    """End-of-region predicate for a bounded lexer.

    With an ``opener``, closers are only terminal at nesting depth 0.
    """

    closer: CharMatcher
    opener: CharMatcher | None = None
    depth: int = 0

    def stops_at(self, ch: str) -> bool:
        return self.depth == 0 and self.closer.is_match(ch)

    def after(self, ch: str) -> Bound:
        if self.opener is None:
            return self
        if self.opener.is_match(ch):
            return replace(self, depth=self.depth + 1)
        if self.depth and self.closer.is_match(ch):
            return replace(self, depth=self.depth - 1)
        return self


@dataclass(slots=True)
class Lexer:
    """One-character lookahead cursor over a :class:`CharSource`.

    ``char`` is ``None`` once the source is exhausted; ``position`` is then the
    end-of-input position.
    """

    source: CharSource
    position: Position
    char: str | None
    span_start: Position
    span_end: Position
    bound: Bound | None = None

    @classmethod
    def for_source(cls, src: str, *, skip_whitespace: bool = True) -> Lexer:
        source = CharSource(text=src, skip_whitespace=skip_whitespace)
        pos, ch = source.next()
        return cls(source=source, position=pos, char=ch, span_start=pos, span_end=pos)

    def copy(self) -> Lexer:
        return replace(self, source=self.source.copy())

    def peek(self) -> tuple[Position, str]:
        if self.char is None:
            raise EndOfInput(self.position)
        return self.position, self.char

    def peek_char(self) -> str | None:
        return self.char

    def at_end(self) -> bool:
        if self.char is None:
            return True
        return self.bound is not None and self.bound.stops_at(self.char)

    def advance(self, matcher: CharMatcher = ANY) -> str:
        pos, ch = self.peek()
        if self.bound is not None and self.bound.stops_at(ch):
            raise EndOfInput(pos)
        if not matcher.is_match(ch):
            raise IncorrectChar(pos, got=ch, expected=matcher.describe(ch))
        if self.bound is not None:
            self.bound = self.bound.after(ch)
        self.span_end = pos.advance(ch)
        self.position, self.char = self.source.next()
        return ch

    def eat(self, ch: str) -> str:
        return self.advance(ExactChar(ch))

    def eat_until(self, matcher: CharMatcher, *, nested: CharMatcher | None = None) -> Lexer:
        """Split off the region up to the first ``matcher`` character.

        Returns a lexer bounded by ``matcher`` starting at the current
        position. ``self`` is moved onto the boundary character, which is
        left unconsumed.
        """
        bound = Bound(closer=matcher, opener=nested)
        region = replace(self.copy(), bound=bound)

        outer = self.bound
        self.bound = bound
        try:
            while True:
                try:
                    self.advance(ANY)
                except LexerError as e:
                    if e.is_eof():
                        break
                    raise
        finally:
            self.bound = outer
        return region

    def span(self) -> Span:
        return Span(start=self.span_start, end=self.span_end)

    def mark_span(self) -> Position:
        """Start a fresh span at the lookahead; returns the previous start."""
        prev = self.span_start
        self.span_start = self.position
        self.span_end = self.position
        return prev

    def resume_span(self, start: Position) -> None:
        self.span_start = start
