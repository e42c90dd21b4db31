from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .spans import Position, Span


@dataclass(slots=True)
class LexerError(Exception):
    position: Position

    def is_eof(self) -> bool:
        return False


@dataclass(slots=True)
class EndOfInput(LexerError):
    def is_eof(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"unexpected end of input at {self.position}"


@dataclass(slots=True)
class IncorrectChar(LexerError):
    got: str
    expected: str

    def __str__(self) -> str:
        return f"incorrect char {self.got!r} at {self.position}: {self.expected}"


class ParseErrorKind(str, Enum):
    LEXER = "lexer"
    EMPTY_NUMBER_LITERAL = "given empty number literal"
    EXTRA_DOT_IN_NUMBER_LITERAL = "extra dot in number literal"
    NUMBER_LITERAL_OUT_OF_RANGE = "number literal out of range"
    TRAILING_DATA = "trailing data after expression"


@dataclass(slots=True)
class ParseError(Exception):
    span: Span
    kind: ParseErrorKind
    cause: LexerError | None = None
    hint: str | None = None

    @classmethod
    def from_lexer(cls, err: LexerError) -> ParseError:
        return cls(span=Span.at(err.position), kind=ParseErrorKind.LEXER, cause=err)

    @property
    def message(self) -> str:
        if self.cause is not None:
            return f"{self.kind.value}: {self.cause}"
        return self.kind.value

    def __str__(self) -> str:
        base = f"{self.message} @ {self.span}"
        if self.hint:
            return f"{base}\nhint: {self.hint}"
        return base


@dataclass(slots=True)
class EvaluationError(Exception):
    span: Span
    message: str

    def __str__(self) -> str:
        return f"{self.message} @ {self.span}"
