"""Literal expression values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ExprKind(Enum):
    """Kinds of literal expression."""

    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    NIL = auto()


@dataclass(frozen=True)
class Expr:
    """A literal expression holding its text form."""

    kind: ExprKind
    value: str = ""

    def print_token_value(self) -> str:
        """The value as printed after parsing; nil prints as ``nil``."""
        if self.kind is ExprKind.NIL:
            return "nil"
        return self.value

    def __str__(self) -> str:
        if self.kind is ExprKind.NIL:
            return ""
        return self.value