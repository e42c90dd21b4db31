from __future__ import annotations

from .corpus import generate_corpus_file, generate_expressions

__all__ = ["generate_corpus_file", "generate_expressions"]
