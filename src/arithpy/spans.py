from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """A concrete source position.

    All three counters are 0-based. ``offset`` indexes into the source text.
    """

    offset: int
    line: int
    column: int

    def advance(self, ch: str) -> Position:
        if ch == "\n":
            return Position(offset=self.offset + 1, line=self.line + 1, column=0)
        return Position(offset=self.offset + 1, line=self.line, column=self.column + 1)

    def __str__(self) -> str:
        return f"{{{self.line}, {self.column}}}"


START = Position(offset=0, line=0, column=0)


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open span [start, end) of consumed source text."""

    start: Position
    end: Position

    @classmethod
    def at(cls, pos: Position) -> Span:
        return cls(start=pos, end=pos)

    def slice(self, text: str) -> str:
        return text[self.start.offset : self.end.offset]

    def format(self) -> str:
        return f"Span({self.start} to {self.end})"

    def __str__(self) -> str:
        return self.format()
