from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from .spans import Span


T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Node(Generic[T]):
    """A grammar value tagged with the span of source text it was built from."""

    value: T
    span: Span

    def wrap(self, f: Callable[[T], U]) -> Node[U]:
        return Node(value=f(self.value), span=self.span)
