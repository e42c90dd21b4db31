"""Single-character predicates used to filter consumption and to bound regions."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Protocol


class CharMatcher(Protocol):
    def is_match(self, ch: str) -> bool: ...

    def describe(self, got: str) -> str: ...


@dataclass(frozen=True, slots=True)
class AnyChar:
    def is_match(self, ch: str) -> bool:
        return True

    def describe(self, got: str) -> str:
        return "expected any character"


@dataclass(frozen=True, slots=True)
class NumericChar:
    def is_match(self, ch: str) -> bool:
        # ASCII only: str.isdigit() also accepts superscripts float() rejects.
        return ch in string.digits

    def describe(self, got: str) -> str:
        return f"expected a numeric digit, got {got!r}"


@dataclass(frozen=True, slots=True)
class ExactChar:
    expected: str

    def is_match(self, ch: str) -> bool:
        return ch == self.expected

    def describe(self, got: str) -> str:
        return f"expected {self.expected!r}, got {got!r}"


ANY = AnyChar()
NUMERIC = NumericChar()
