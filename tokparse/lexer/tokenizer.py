"""Rule-ordered, single-character tokenizer."""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Final, TypeAlias

from tokparse.diagnostics import TokenizationError
from tokparse.lexer.tokens import Token, TokenType
from tokparse.text import SourcePosition

logger = logging.getLogger(__name__)

Matcher: TypeAlias = str | re.Pattern[str]

LETTER: Final[re.Pattern[str]] = re.compile(r"[a-zA-Z]")
DIGIT: Final[re.Pattern[str]] = re.compile(r"[0-9]")
WHITESPACE: Final[re.Pattern[str]] = re.compile(r"\s")
NEWLINE: Final[re.Pattern[str]] = re.compile(r"\n")


@dataclass(frozen=True, slots=True)
class TokenRule:
    """Map characters accepted by `matcher` to tokens of `type`."""

    matcher: Matcher
    type: TokenType

    def __post_init__(self):
        if not self.type:
            raise ValueError("Token type cannot be empty")
        if isinstance(self.matcher, str):
            if len(self.matcher) != 1:
                raise ValueError(f"Literal matcher must be a single character, got {self.matcher!r}")
        elif not isinstance(self.matcher, re.Pattern):
            raise TypeError(f"Matcher must be a str or compiled pattern, got {type(self.matcher).__name__}")

    def matches(self, char: str) -> bool:
        if isinstance(self.matcher, str):
            return char == self.matcher
        return self.matcher.search(char) is not None


@dataclass(frozen=True, slots=True)
class Tokenizer:
    """
    Ordered tokenizer configuration.

    Rules are tried in registration order and the first match wins, so
    overlapping rules (e.g. "letter" before "hex_digit") must be registered
    most-specific first. Instances are immutable; `with_token_type` and
    `with_newline_type` return new tokenizers.
    """

    rules: tuple[TokenRule, ...] = ()
    newline_type: TokenType | None = None

    def __post_init__(self):
        built = tuple(rule if isinstance(rule, TokenRule) else TokenRule(*rule) for rule in self.rules)
        object.__setattr__(self, "rules", built)

    @staticmethod
    def from_rules(
        rules: Iterable[TokenRule | tuple[Matcher, TokenType]],
        newline_type: TokenType | None = None,
    ) -> "Tokenizer":
        return Tokenizer(rules=tuple(rules), newline_type=newline_type)

    def with_token_type(self, matcher: Matcher, type: TokenType) -> "Tokenizer":
        return replace(self, rules=(*self.rules, TokenRule(matcher, type)))

    def with_newline_type(self, type: TokenType) -> "Tokenizer":
        return replace(self, newline_type=type)

    def match(self, char: str) -> TokenType | None:
        for rule in self.rules:
            if rule.matches(char):
                return rule.type
        return None

    def tokenize(self, text: str) -> tuple[Token, ...]:
        """Turn every character of `text` into a token.

        Raises TokenizationError on the first character no rule accepts; no
        partial token sequence is returned.
        """
        tokens: list[Token] = []
        line = 1
        column = 1

        for index, char in enumerate(text):
            token_type = self.match(char)
            if token_type is None:
                raise TokenizationError(char, line, column, index)

            tokens.append(Token(token_type, char, SourcePosition(line, column)))

            if self.newline_type is not None and token_type == self.newline_type:
                line += 1
                column = 1
            else:
                column += 1

        logger.debug("tokenized %d characters into %d tokens", len(text), len(tokens))
        return tuple(tokens)


def dump_tokens(tokens: Iterable[Token]) -> None:
    """Print token list with index, type, position and value for debugging."""
    for i, tok in enumerate(tokens):
        print(f"{i:03d} {tok.type:<18} at={tok.position} value={tok.value!r}")
