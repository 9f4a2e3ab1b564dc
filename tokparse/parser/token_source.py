"""Token cursor with an explicit backtrack stack."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from tokparse.lexer import Token, TokenType
from tokparse.text import START, ErrorPosition


class TokenCursor:
    """
    Forward-only cursor over a token sequence.

    Speculative parses save the current index with `store_position()` and
    must resolve it with exactly one `clear_position()` (keep progress) or
    `restore_position()` (rewind). `speculation()` does the pairing for you.
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens: tuple[Token, ...] = tuple(tokens)
        self._position = 0
        self._backtrack_stack: list[int] = []

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self._tokens

    @property
    def position(self) -> int:
        return self._position

    @property
    def at_end(self) -> bool:
        return self._position >= len(self._tokens)

    @property
    def backtrack_depth(self) -> int:
        return len(self._backtrack_stack)

    def peek(self) -> Token | None:
        if self.at_end:
            return None
        return self._tokens[self._position]

    def consume(self) -> Token | None:
        token = self.peek()
        if token is not None:
            self._position += 1
        return token

    def consume_if(self, *types: TokenType) -> Token | None:
        token = self.peek()
        if token is not None and token.type in types:
            return self.consume()
        return None

    def store_position(self) -> None:
        self._backtrack_stack.append(self._position)

    def clear_position(self) -> None:
        if not self._backtrack_stack:
            raise RuntimeError("clear_position() called with no stored position")
        self._backtrack_stack.pop()

    def restore_position(self) -> None:
        if not self._backtrack_stack:
            raise RuntimeError("restore_position() called with no stored position")
        self._position = self._backtrack_stack.pop()

    @contextmanager
    def speculation(self) -> Iterator[Speculation]:
        """Store the position for the duration of the block.

        The block resolves the slot with `commit()` or `rewind()`. If it
        does neither, including when it raises, the position is restored.
        """
        self.store_position()
        slot = Speculation(self, self._position)
        try:
            yield slot
        finally:
            if not slot.resolved:
                slot.rewind()

    def peek_remainder(self) -> str:
        return "".join(token.value for token in self._tokens[self._position :])

    def get_position_for_error(self) -> ErrorPosition:
        token = self.peek()
        if token is None and self._tokens:
            token = self._tokens[-1]
        source = token.position if token is not None else START
        return ErrorPosition.at(source, self._position)


@dataclass(slots=True)
class Speculation:
    """One stored position on a cursor's backtrack stack, resolved exactly once."""

    cursor: TokenCursor
    start: int
    resolved: bool = False

    def commit(self) -> None:
        self._resolve()
        self.cursor.clear_position()

    def rewind(self) -> None:
        self._resolve()
        self.cursor.restore_position()

    def has_progressed(self) -> bool:
        return self.cursor.position > self.start

    def _resolve(self) -> None:
        if self.resolved:
            raise RuntimeError("Speculation already resolved")
        self.resolved = True
