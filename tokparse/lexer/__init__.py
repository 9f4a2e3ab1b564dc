"""Lexer."""

from tokparse.lexer.tokenizer import (
    DIGIT,
    LETTER,
    NEWLINE,
    WHITESPACE,
    Matcher,
    Tokenizer,
    TokenRule,
    dump_tokens,
)
from tokparse.lexer.tokens import END_OF_INPUT, Token, TokenType

__all__ = [
    "DIGIT",
    "END_OF_INPUT",
    "LETTER",
    "NEWLINE",
    "WHITESPACE",
    "Matcher",
    "Token",
    "TokenRule",
    "TokenType",
    "Tokenizer",
    "dump_tokens",
]
