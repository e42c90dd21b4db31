from __future__ import annotations

from dataclasses import dataclass, replace

from .spans import START, Position


@dataclass(slots=True)
class CharSource:
    """Position-tagged characters drawn from an in-memory string.

    Copies are independent cursors over the same text.
    """

    text: str
    i: int = 0
    pos: Position = START
    skip_whitespace: bool = True

    def next(self) -> tuple[Position, str | None]:
        """Draw the next character, or ``None`` at end of input."""
        if self.skip_whitespace:
            while self.i < len(self.text) and self.text[self.i].isspace():
                self._step()
        if self.i >= len(self.text):
            return self.pos, None
        at = self.pos
        ch = self._step()
        return at, ch

    def copy(self) -> CharSource:
        return replace(self)

    def _step(self) -> str:
        ch = self.text[self.i]
        self.i += 1
        self.pos = self.pos.advance(ch)
        return ch
