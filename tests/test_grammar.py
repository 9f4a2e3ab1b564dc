"""A small arithmetic grammar built on the combinators."""

import pytest

from tokparse.diagnostics import ParserError
from tokparse.parser import (
    TokenCursor,
    and_,
    any_except,
    any_of,
    combine,
    end_of_input,
    flatten,
    label,
    many,
    map_,
    optional,
    or_,
    run_on_string,
)
from tests._shared_cases import TOKENIZER, values

spaces = optional(many(any_of("whitespace", "newline")))


def lexeme(parser):
    return combine(lambda _before, value: value, spaces, parser)


name = label(
    "name",
    combine(
        lambda first, rest: first.value + "".join(values(rest or [])),
        any_of("letter"),
        optional(many(any_of("letter", "digit", "minus", "underscore"))),
    ),
)
number = label("number", map_(many(any_of("digit")), lambda digits: int("".join(values(digits)))))


def expression(cursor: TokenCursor):
    return expression_parser(cursor)


atom = lexeme(
    or_(
        number,
        name,
        combine(lambda _open, value, _close: value, any_of("lparen"), expression, lexeme(any_of("rparen"))),
    )
)
expression_parser = combine(
    lambda first, rest: [first, *flatten(rest or [])],
    atom,
    optional(many(and_(lexeme(any_of("plus")), atom))),
)
program = combine(lambda value, _spaces, _end: value, label("expr", expression), spaces, end_of_input())


def evaluate(terms, env):
    total = 0
    for term in terms:
        if isinstance(term, list):
            total += evaluate(term, env)
        elif isinstance(term, int):
            total += term
        elif isinstance(term, str):
            total += env[term]
    return total


def test_name_allows_digits_and_dashes_after_first_letter() -> None:
    assert run_on_string(name, "foo-bar_2", TOKENIZER) == "foo-bar_2"


def test_expression_with_parentheses_and_newlines() -> None:
    terms = run_on_string(program, "1 + (x +\n 20) + y2", TOKENIZER)

    plus_free = [t for t in flatten(terms) if not hasattr(t, "type")]
    assert evaluate(plus_free, {"x": 3, "y2": 100}) == 124


def test_label_prefixes_error_from_first_alternative_on_tie() -> None:
    with pytest.raises(ParserError) as excinfo:
        run_on_string(program, "+", TOKENIZER)

    error = excinfo.value
    assert error.message == "expr: number: Expected token of type digit, but got plus"
    assert (error.line, error.column, error.absolute_position) == (1, 1, 0)


def test_error_reports_deepest_alternative() -> None:
    with pytest.raises(ParserError) as excinfo:
        run_on_string(atom, "(2 + )", TOKENIZER)

    error = excinfo.value
    assert error.message == "Expected token of type rparen, but got plus"
    assert (error.line, error.column, error.absolute_position) == (1, 4, 3)


def test_optional_tail_hides_inner_error_behind_trailing_input() -> None:
    with pytest.raises(ParserError) as excinfo:
        run_on_string(program, "1 + (2 + )", TOKENIZER)

    assert excinfo.value.message == "Expected end of input, but got token of type plus"
    assert excinfo.value.absolute_position == 2


def test_trailing_garbage_is_rejected() -> None:
    with pytest.raises(ParserError) as excinfo:
        run_on_string(program, "1 2", TOKENIZER)

    assert excinfo.value.message == "Expected end of input, but got token of type digit"
    assert excinfo.value.absolute_position == 2


def test_any_except_skips_until_delimiter() -> None:
    body = map_(many(any_except("rparen")), values)
    group = combine(lambda _open, inner, _close: "".join(inner), any_of("lparen"), body, any_of("rparen"))

    assert run_on_string(group, "(a b+1)", TOKENIZER) == "a b+1"
