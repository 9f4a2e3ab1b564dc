import pytest

from tokparse.diagnostics import PARSER_UNEXPECTED_TRAILING_INPUT, ParserError, TokenizationError
from tokparse.lexer import DIGIT, LETTER, Tokenizer
from tokparse.parser import and_, any_of, end_of_input, label, many, map_, run, run_on_string
from tests._shared_cases import TOKENIZER, cursor_for, values

LETTERS_THEN_DIGITS = Tokenizer().with_token_type(LETTER, "letter").with_token_type(DIGIT, "digit")


def test_run_returns_value() -> None:
    cursor = cursor_for("ab")

    result = run(many(any_of("letter")), cursor)

    assert values(result) == ["a", "b"]
    assert cursor.backtrack_depth == 0


def test_run_on_string_letters_then_digits() -> None:
    parser = and_(many(any_of("letter")), many(any_of("digit")))

    result = run_on_string(parser, "ab12", LETTERS_THEN_DIGITS)

    assert [values(group) for group in result] == [["a", "b"], ["1", "2"]]


def test_run_on_string_end_of_input_on_empty_text() -> None:
    assert run_on_string(end_of_input(), "", LETTERS_THEN_DIGITS) is None


def test_run_raises_parser_error_with_position() -> None:
    parser = label("number", many(any_of("digit")))

    with pytest.raises(ParserError) as excinfo:
        run_on_string(parser, "ab\nc", TOKENIZER)

    error = excinfo.value
    assert error.message == "number: Expected token of type digit, but got letter"
    assert (error.line, error.column, error.absolute_position) == (1, 1, 0)
    assert str(error) == "Parser Error [1:1]: number: Expected token of type digit, but got letter"


def test_run_reports_trailing_input_code() -> None:
    parser = and_(any_of("letter"), end_of_input())

    with pytest.raises(ParserError) as excinfo:
        run_on_string(parser, "a\nb", TOKENIZER)

    error = excinfo.value
    assert error.code == PARSER_UNEXPECTED_TRAILING_INPUT.code
    assert (error.line, error.column, error.absolute_position) == (1, 2, 1)
    diagnostic = error.to_diagnostic()
    assert diagnostic.code == error.code
    assert diagnostic.position == error.position
    assert diagnostic.hint == PARSER_UNEXPECTED_TRAILING_INPUT.hint


def test_run_on_string_tokenization_failure_raises_before_parsing() -> None:
    calls = []

    def spy(cursor):
        calls.append(cursor)
        return end_of_input()(cursor)

    with pytest.raises(TokenizationError):
        run_on_string(spy, "a?", LETTERS_THEN_DIGITS)

    assert calls == []


def test_run_returns_falsy_success_values() -> None:
    assert run(map_(any_of("letter"), lambda _tok: []), cursor_for("a")) == []
