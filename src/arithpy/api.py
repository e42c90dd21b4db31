from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from .ast import Node
from .errors import EvaluationError, ParseError, ParseErrorKind
from .evaluate import evaluate
from .grammar import Term
from .parser import Parser
from .spans import Span


log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LineResult:
    lineno: int  # 1-based
    source: str
    value: float | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_source(src: str, *, skip_whitespace: bool = True) -> Node[Term]:
    """Parse a whole expression; unconsumed input is an error."""
    parser = Parser.for_source(src, skip_whitespace=skip_whitespace)
    node = parser.parse(Term)
    if not parser.lexer.at_end():
        raise ParseError(
            span=Span.at(parser.lexer.position),
            kind=ParseErrorKind.TRAILING_DATA,
            hint="expected an operator or end of input",
        )
    return node


def evaluate_source(src: str, *, skip_whitespace: bool = True) -> float:
    return evaluate(parse_source(src, skip_whitespace=skip_whitespace))


def iter_sources(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    """Yield (1-based line number, text) for each non-blank line."""
    for lineno, raw in enumerate(lines, start=1):
        src = raw.rstrip("\r\n")
        if src.strip():
            yield lineno, src


def iter_lines(lines: Iterable[str], *, skip_whitespace: bool = True) -> Iterator[LineResult]:
    """Evaluate each non-blank line independently, yielding as it goes."""
    for lineno, src in iter_sources(lines):
        try:
            value = evaluate_source(src, skip_whitespace=skip_whitespace)
        except (ParseError, EvaluationError) as e:
            log.debug("line %d: %r failed: %s", lineno, src, e)
            yield LineResult(lineno=lineno, source=src, error=str(e))
            continue
        log.debug("line %d: %r -> %r", lineno, src, value)
        yield LineResult(lineno=lineno, source=src, value=value)


def evaluate_lines(lines: Iterable[str], *, skip_whitespace: bool = True) -> list[LineResult]:
    return list(iter_lines(lines, skip_whitespace=skip_whitespace))


def read_lines(path: str | Path) -> list[str]:
    p = Path(path).expanduser().resolve()
    # Lines end at "\n" only, so line numbers agree with editors.
    return p.read_text(encoding="utf-8").split("\n")


def evaluate_file(path: str | Path, *, skip_whitespace: bool = True) -> list[LineResult]:
    return evaluate_lines(read_lines(path), skip_whitespace=skip_whitespace)
