"""Parser infrastructure (outcomes + token cursor + combinators + runner)."""

from tokparse.parser.combinators import (
    and_,
    attempt,
    combine,
    flatten,
    label,
    many,
    map_,
    optional,
    or_,
)
from tokparse.parser.outcome import Failure, ParseOutcome, Parser, Success
from tokparse.parser.primitives import any_except, any_of, end_of_input
from tokparse.parser.runner import run, run_on_string
from tokparse.parser.token_source import Speculation, TokenCursor

__all__ = [
    "Failure",
    "ParseOutcome",
    "Parser",
    "Speculation",
    "Success",
    "TokenCursor",
    "and_",
    "any_except",
    "any_of",
    "attempt",
    "combine",
    "end_of_input",
    "flatten",
    "label",
    "many",
    "map_",
    "optional",
    "or_",
    "run",
    "run_on_string",
]
