"""Lexer tokens."""

from dataclasses import dataclass
from typing import Final, TypeAlias

from tokparse.text import SourcePosition

TokenType: TypeAlias = str
"""Open tag naming a token's type. Any string the tokenizer is configured with."""

END_OF_INPUT: Final[TokenType] = "end_of_input"
"""Reserved type. The tokenizer never emits it; `end_of_input()` accepts it."""


@dataclass(frozen=True, slots=True)
class Token:
    """A single typed, positioned character produced by the tokenizer."""

    type: TokenType
    value: str
    position: SourcePosition
