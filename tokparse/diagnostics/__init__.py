"""Diagnostics."""

from tokparse.diagnostics.codes import (
    LEXER_NO_MATCHING_RULE,
    PARSER_TOKEN_MISMATCH,
    PARSER_UNEXPECTED_TRAILING_INPUT,
    DiagnosticSpec,
)
from tokparse.diagnostics.diagnostic import Diagnostic, Severity
from tokparse.diagnostics.errors import ParserError, TokenizationError

__all__ = [
    "LEXER_NO_MATCHING_RULE",
    "PARSER_TOKEN_MISMATCH",
    "PARSER_UNEXPECTED_TRAILING_INPUT",
    "Diagnostic",
    "DiagnosticSpec",
    "ParserError",
    "Severity",
    "TokenizationError",
]
