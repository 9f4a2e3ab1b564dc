"""
Parser combinators over a typed token stream.

Build a tokenizer, compose parsers, run them:

```
tokenizer = Tokenizer().with_token_type(LETTER, "letter").with_token_type(DIGIT, "digit")
word = map_(many(any_of("letter")), lambda tokens: "".join(t.value for t in tokens))
run_on_string(and_(word, end_of_input()), "abc", tokenizer)   # ["abc", None]
```
"""

from tokparse.diagnostics import Diagnostic, ParserError, TokenizationError
from tokparse.lexer import (
    DIGIT,
    END_OF_INPUT,
    LETTER,
    NEWLINE,
    WHITESPACE,
    Token,
    Tokenizer,
    TokenRule,
    TokenType,
)
from tokparse.parser import (
    Failure,
    ParseOutcome,
    Parser,
    Success,
    TokenCursor,
    and_,
    any_except,
    any_of,
    attempt,
    combine,
    end_of_input,
    flatten,
    label,
    many,
    map_,
    optional,
    or_,
    run,
    run_on_string,
)
from tokparse.text import ErrorPosition, SourcePosition

__all__ = [
    "DIGIT",
    "END_OF_INPUT",
    "LETTER",
    "NEWLINE",
    "WHITESPACE",
    "Diagnostic",
    "ErrorPosition",
    "Failure",
    "ParseOutcome",
    "Parser",
    "ParserError",
    "SourcePosition",
    "Success",
    "Token",
    "TokenCursor",
    "TokenRule",
    "TokenType",
    "TokenizationError",
    "Tokenizer",
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
