"""Exceptions raised at the tokenizer and runner boundaries."""

from tokparse.diagnostics.codes import LEXER_NO_MATCHING_RULE, PARSER_TOKEN_MISMATCH
from tokparse.diagnostics.diagnostic import Diagnostic
from tokparse.text import ErrorPosition


class ParserError(Exception):
    """
    Raised by the runner when a parser returns a failure.

    Everywhere below the runner a failure is a plain return value; this is
    the one place it becomes an exception.
    """

    def __init__(
        self,
        message: str,
        position: ErrorPosition,
        code: str = PARSER_TOKEN_MISMATCH.code,
    ) -> None:
        super().__init__(f"Parser Error [{position.line}:{position.column}]: {message}")
        self.message = message
        self.position = position
        self.code = code

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    @property
    def absolute_position(self) -> int:
        return self.position.position

    def to_diagnostic(self) -> Diagnostic:
        return Diagnostic.from_code(self.code, self.position, self.message)


class TokenizationError(Exception):
    """Raised when a character matches none of the tokenizer's rules."""

    def __init__(self, character: str, line: int, column: int, index: int) -> None:
        super().__init__(
            f"{LEXER_NO_MATCHING_RULE.message}: {character!r} [{line}:{column}]"
        )
        self.character = character
        self.line = line
        self.column = column
        self.index = index
        self.code = LEXER_NO_MATCHING_RULE.code

    def to_diagnostic(self) -> Diagnostic:
        return Diagnostic.from_spec(
            LEXER_NO_MATCHING_RULE,
            ErrorPosition(self.line, self.column, self.index),
            message=str(self),
        )
