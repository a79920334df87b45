"""Character classes, keywords and number formatting for the scanner."""

from __future__ import annotations

from types import MappingProxyType

from loxlex.token import TokenType

_DIGITS = frozenset("0123456789")
_NUMBER_CHARS = _DIGITS | {"."}
_ALPHA_NUMERIC = (
    _DIGITS
    | frozenset("abcdefghijklmnopqrstuvwxyz")
    | frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
    | {"_"}
)

KEYWORDS = MappingProxyType(
    {
        "and": TokenType.AND,
        "class": TokenType.CLASS,
        "else": TokenType.ELSE,
        "false": TokenType.FALSE,
        "for": TokenType.FOR,
        "fun": TokenType.FUN,
        "if": TokenType.IF,
        "nil": TokenType.NIL,
        "or": TokenType.OR,
        "print": TokenType.PRINT,
        "return": TokenType.RETURN,
        "super": TokenType.SUPER,
        "this": TokenType.THIS,
        "true": TokenType.TRUE,
        "var": TokenType.VAR,
        "while": TokenType.WHILE,
    }
)


def is_digit(c: str) -> bool:
    """True for an ASCII digit or a dot, the characters of a number."""
    return c in _NUMBER_CHARS


def is_alpha_numeric(c: str) -> bool:
    """True for an ASCII letter, digit or underscore."""
    return c in _ALPHA_NUMERIC


def keyword_type(word: str) -> TokenType:
    """The keyword's token type, or IDENTIFIER if the word is not a keyword."""
    return KEYWORDS.get(word, TokenType.IDENTIFIER)


def format_decimal(s: str) -> str:
    """Normalise number text: always one decimal point, no trailing zeros."""
    if "." not in s:
        return f"{s}.0"
    trimmed = s.rstrip("0")
    if trimmed.endswith("."):
        return f"{trimmed}0"
    return trimmed