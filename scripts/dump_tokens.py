#!/usr/bin/env python
import sys
from pathlib import Path

from tokparse.lexer import DIGIT, LETTER, NEWLINE, WHITESPACE, Tokenizer, dump_tokens

DEFAULT_TOKENIZER = (
    Tokenizer()
    .with_token_type(NEWLINE, "newline")
    .with_token_type(WHITESPACE, "whitespace")
    .with_token_type(LETTER, "letter")
    .with_token_type(DIGIT, "digit")
    .with_newline_type("newline")
)


def main() -> None:
    if len(sys.argv) != 2:
        print(f"usage: {sys.argv[0]} <file>", file=sys.stderr)
        raise SystemExit(2)

    input_path = Path(sys.argv[1]).expanduser()
    text = input_path.read_text(encoding="utf-8")

    tokenizer = DEFAULT_TOKENIZER
    for char in sorted(set(text)):
        if tokenizer.match(char) is None:
            tokenizer = tokenizer.with_token_type(char, "symbol")

    tokens = tokenizer.tokenize(text)
    dump_tokens(tokens)
    print(f"{len(tokens)} tokens from {input_path}")


if __name__ == "__main__":
    main()
