"""
Combinators: functions that build a parser out of other parsers.

Every combinator returns a plain function of a TokenCursor. Failures are
returned, never raised. Combinators that speculate (`attempt`, `or_`,
`many`, `optional`) hold their stored position through
`TokenCursor.speculation()`, so the backtrack stack stays balanced even if
an inner parser raises.

Parsers call each other directly, so grammar nesting depth is bounded by
Python's recursion limit.
"""

from collections.abc import Callable
from typing import Any, TypeVar

from tokparse.parser.outcome import Failure, ParseOutcome, Parser, Success
from tokparse.parser.token_source import TokenCursor

T = TypeVar("T")
U = TypeVar("U")


def and_(*parsers: Parser[Any]) -> Parser[list[Any]]:
    """Run `parsers` in order and collect their values.

    The first failure is returned as-is. Tokens consumed by earlier parsers
    stay consumed; wrap in `attempt` to rewind.
    """

    def parse_and(cursor: TokenCursor) -> ParseOutcome[list[Any]]:
        values: list[Any] = []
        for parser in parsers:
            outcome = parser(cursor)
            if isinstance(outcome, Failure):
                return outcome
            values.append(outcome.value)
        return Success(values)

    return parse_and


def attempt(parser: Parser[T]) -> Parser[T]:
    """Run `parser`, rewinding the cursor if it fails. The outcome is unchanged."""

    def parse_attempt(cursor: TokenCursor) -> ParseOutcome[T]:
        with cursor.speculation() as slot:
            outcome = parser(cursor)
            if isinstance(outcome, Success):
                slot.commit()
            else:
                slot.rewind()
        return outcome

    return parse_attempt


def or_(*parsers: Parser[T]) -> Parser[T]:
    """Return the first alternative that succeeds.

    Each alternative is attempted from the same position. When all fail,
    the failure that got furthest into the tokens is returned; on a tie the
    earliest alternative's failure is kept.
    """
    if not parsers:
        raise ValueError("or_() needs at least one alternative")
    alternatives = tuple(attempt(parser) for parser in parsers)

    def parse_or(cursor: TokenCursor) -> ParseOutcome[T]:
        first, *rest = alternatives
        deepest = first(cursor)
        if isinstance(deepest, Success):
            return deepest
        for alternative in rest:
            outcome = alternative(cursor)
            if isinstance(outcome, Success):
                return outcome
            if outcome.position.is_deeper_than(deepest.position):
                deepest = outcome
        return deepest

    return parse_or


def many(parser: Parser[T]) -> Parser[list[T]]:
    """Apply `parser` repeatedly, one or more times.

    The loop stops at the first failure or at the first success that did
    not consume a token; either way the cursor is rewound to the end of the
    last progressing match. If nothing matched and `parser` failed, that
    failure is returned. Use `optional(many(p))` for zero or more.
    """

    def parse_many(cursor: TokenCursor) -> ParseOutcome[list[T]]:
        values: list[T] = []
        while True:
            with cursor.speculation() as slot:
                outcome = parser(cursor)
                if isinstance(outcome, Failure):
                    slot.rewind()
                    if not values:
                        return outcome
                    break
                if not slot.has_progressed():
                    slot.rewind()
                    break
                slot.commit()
            values.append(outcome.value)
        return Success(values)

    return parse_many


def optional(parser: Parser[T], backtrack: bool = True) -> Parser[T | None]:
    """Run `parser`, turning a failure into `Success(None)`.

    With `backtrack=False` a failing parser may leave the cursor past the
    tokens it consumed before failing.
    """
    wrapped = attempt(parser) if backtrack else parser

    def parse_optional(cursor: TokenCursor) -> ParseOutcome[T | None]:
        outcome = wrapped(cursor)
        if isinstance(outcome, Success):
            return outcome
        return Success(None)

    return parse_optional


def label(text: str, parser: Parser[T]) -> Parser[T]:
    """Prefix failure messages from `parser` with `"<text>: "`."""

    def parse_label(cursor: TokenCursor) -> ParseOutcome[T]:
        outcome = parser(cursor)
        if isinstance(outcome, Failure):
            return outcome.with_label(text)
        return outcome

    return parse_label


def map_(parser: Parser[T], fn: Callable[[T], U]) -> Parser[U]:
    """Transform the value of a successful parse. `fn` sees the value only."""

    def parse_map(cursor: TokenCursor) -> ParseOutcome[U]:
        outcome = parser(cursor)
        if isinstance(outcome, Success):
            return Success(fn(outcome.value))
        return outcome

    return parse_map


def combine(fn: Callable[..., U], *parsers: Parser[Any]) -> Parser[U]:
    """Sequence `parsers` like `and_`, then call `fn` with their values as arguments."""
    return map_(and_(*parsers), lambda values: fn(*values))


def flatten(items: list[Any]) -> list[Any]:
    """Flatten the nested lists built by `and_` and `many` into one list."""
    result: list[Any] = []
    for item in items:
        if isinstance(item, list):
            result.extend(flatten(item))
        else:
            result.append(item)
    return result
