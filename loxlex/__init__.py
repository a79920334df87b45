"""Tokenizer for the Lox language."""

__version__ = "0.1.0"
__all__ = ["cli", "errors", "expr", "lexemes", "scanner", "token"]