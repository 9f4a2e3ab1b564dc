"""Run a parser and turn a failure into a raised ParserError."""

import logging
from typing import TypeVar

from tokparse.diagnostics import ParserError
from tokparse.lexer import Tokenizer
from tokparse.parser.outcome import Failure, Parser
from tokparse.parser.token_source import TokenCursor

logger = logging.getLogger(__name__)

T = TypeVar("T")


def run(parser: Parser[T], cursor: TokenCursor) -> T:
    """Run `parser` once and return its value.

    Raises ParserError carrying the failure's message and position.
    """
    logger.debug("running parser on %d tokens from index %d", len(cursor.tokens), cursor.position)
    outcome = parser(cursor)
    if isinstance(outcome, Failure):
        logger.debug("parse failed at %s: %s", outcome.position, outcome.message)
        raise ParserError(outcome.message, outcome.position, outcome.code)
    return outcome.value


def run_on_string(parser: Parser[T], text: str, tokenizer: Tokenizer) -> T:
    """Tokenize `text` and run `parser` over the tokens.

    Raises TokenizationError before parsing if a character matches no rule.
    """
    return run(parser, TokenCursor(tokenizer.tokenize(text)))
