from __future__ import annotations

from .api import LineResult, evaluate_file, evaluate_lines, evaluate_source, parse_source
from .errors import EvaluationError, ParseError, ParseErrorKind
from .evaluate import evaluate
from .format import format_expr

__all__ = [
    "EvaluationError",
    "LineResult",
    "ParseError",
    "ParseErrorKind",
    "evaluate",
    "evaluate_file",
    "evaluate_lines",
    "evaluate_source",
    "format_expr",
    "parse_source",
]
