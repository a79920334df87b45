"""Errors raised while turning Lox source into tokens."""

from __future__ import annotations

from typing import Any, Iterable


class TokenizeError(Exception):
    """Scanning failed; ``exit_code`` is the status the command ends with.

    When the source was read but held lexical errors, ``tokens`` holds the
    tokens that were still produced and ``messages`` the error reports.
    """

    def __init__(
        self,
        exit_code: int,
        tokens: Iterable[Any] = (),
        messages: Iterable[str] = (),
    ) -> None:
        self.exit_code = exit_code
        self.tokens = tuple(tokens)
        self.messages = tuple(messages)
        super().__init__(exit_code)

    def __str__(self) -> str:
        return f"Error: {self.exit_code}"