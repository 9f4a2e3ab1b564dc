"""Single-token matchers."""

from tokparse.diagnostics import PARSER_TOKEN_MISMATCH, PARSER_UNEXPECTED_TRAILING_INPUT
from tokparse.lexer import END_OF_INPUT, Token, TokenType
from tokparse.parser.outcome import Failure, ParseOutcome, Parser, Success
from tokparse.parser.token_source import TokenCursor


def _describe(token: Token | None) -> str:
    return "end of input" if token is None else token.type


def _require_types(name: str, types: tuple[TokenType, ...]) -> None:
    if not types:
        raise ValueError(f"{name}() needs at least one token type")


def any_of(*types: TokenType) -> Parser[Token]:
    """Consume one token whose type is in `types`."""
    _require_types("any_of", types)
    expected = ", ".join(types)

    def parse_any_of(cursor: TokenCursor) -> ParseOutcome[Token]:
        token = cursor.peek()
        if token is None or token.type not in types:
            return Failure(
                f"Expected token of type {expected}, but got {_describe(token)}",
                cursor.get_position_for_error(),
                PARSER_TOKEN_MISMATCH.code,
            )
        cursor.consume()
        return Success(token)

    return parse_any_of


def any_except(*types: TokenType) -> Parser[Token]:
    """Consume one token whose type is not in `types`. Fails at end of input."""
    _require_types("any_except", types)
    excluded = ", ".join(types)

    def parse_any_except(cursor: TokenCursor) -> ParseOutcome[Token]:
        token = cursor.peek()
        if token is None or token.type in types:
            return Failure(
                f"Expected any token not of type {excluded}, but got {_describe(token)}",
                cursor.get_position_for_error(),
                PARSER_TOKEN_MISMATCH.code,
            )
        cursor.consume()
        return Success(token)

    return parse_any_except


def end_of_input() -> Parser[None]:
    """Succeed with None at the end of the tokens or on an END_OF_INPUT token."""

    def parse_end_of_input(cursor: TokenCursor) -> ParseOutcome[None]:
        token = cursor.peek()
        if token is None:
            return Success(None)
        if token.type == END_OF_INPUT:
            cursor.consume()
            return Success(None)
        return Failure(
            f"Expected end of input, but got token of type {token.type}",
            cursor.get_position_for_error(),
            PARSER_UNEXPECTED_TRAILING_INPUT.code,
        )

    return parse_end_of_input
