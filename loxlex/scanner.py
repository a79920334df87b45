"""Turn Lox source text into tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from loxlex.errors import TokenizeError
from loxlex.lexemes import format_decimal, keyword_type
from loxlex.token import Token, TokenType

_NUMBER = re.compile(r"[0-9][0-9.]*")
_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

_SINGLE = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

_WITH_EQUAL = {
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

SOURCE_ERROR_EXIT = 65
UNREADABLE_EXIT = 255


@dataclass
class ScanResult:
    """Tokens scanned from a source, ending in EOF, and any error reports."""

    tokens: List[Token] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def had_error(self) -> bool:
        return bool(self.errors)


def scan(source: str) -> ScanResult:
    """Scan source text, collecting tokens and error reports."""
    result = ScanResult()
    tokens, errors = result.tokens, result.errors
    line = 1
    pos = 0
    end = len(source)

    while pos < end:
        c = source[pos]
        if c in _SINGLE:
            tokens.append(Token(_SINGLE[c], c))
            pos += 1
        elif c in _WITH_EQUAL:
            single, double = _WITH_EQUAL[c]
            if source.startswith("=", pos + 1):
                tokens.append(Token(double, c + "="))
                pos += 2
            else:
                tokens.append(Token(single, c))
                pos += 1
        elif c == "/":
            if source.startswith("/", pos + 1):
                newline = source.find("\n", pos)
                if newline == -1:
                    pos = end
                else:
                    line += 1
                    pos = newline + 1
            else:
                tokens.append(Token(TokenType.SLASH, c))
                pos += 1
        elif c in (" ", "\t"):
            pos += 1
        elif c == "\n":
            line += 1
            pos += 1
        elif c == '"':
            close = source.find('"', pos + 1)
            if close == -1:
                errors.append(f"[line {line}] Error: Unterminated string.")
                pos = end
            else:
                body = source[pos + 1 : close]
                tokens.append(Token(TokenType.STRING, f'"{body}"', body))
                pos = close + 1
        elif match := _NUMBER.match(source, pos):
            text = match.group()
            tokens.append(Token(TokenType.NUMBER, text, format_decimal(text)))
            pos = match.end()
        elif match := _IDENTIFIER.match(source, pos):
            word = match.group()
            tokens.append(Token(keyword_type(word), word))
            pos = match.end()
        else:
            errors.append(f"[line {line}] Error: Unexpected character: {c}")
            pos += 1

    tokens.append(Token(TokenType.EOF, ""))
    return result


def tokenize(filename: Union[str, Path]) -> List[Token]:
    """Scan a file and return its tokens.

    Raises TokenizeError with exit code 255 if the file cannot be read, and
    with exit code 65, carrying the tokens and error reports, if the source
    holds lexical errors.
    """
    try:
        source = Path(filename).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TokenizeError(UNREADABLE_EXIT) from exc

    result = scan(source)
    if result.had_error:
        raise TokenizeError(SOURCE_ERROR_EXIT, result.tokens, result.errors)
    return result.tokens