"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_NO_MATCHING_RULE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_NO_MATCHING_RULE",
    message="No token type matched for character",
    hint="Register a token type whose matcher accepts this character.",
    severity="error",
    category="lexer",
)

PARSER_TOKEN_MISMATCH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_TOKEN_MISMATCH",
    message="Unexpected token type",
    hint="Check the token types the grammar expects at this point.",
    severity="error",
    category="parser",
)

PARSER_UNEXPECTED_TRAILING_INPUT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_TRAILING_INPUT",
    message="Expected end of input",
    hint="The grammar matched a prefix of the input; extend it to cover the remaining tokens.",
    severity="error",
    category="parser",
)

SPECS_BY_CODE: Final[dict[str, DiagnosticSpec]] = {
    spec.code: spec
    for spec in (
        LEXER_NO_MATCHING_RULE,
        PARSER_TOKEN_MISMATCH,
        PARSER_UNEXPECTED_TRAILING_INPUT,
    )
}
