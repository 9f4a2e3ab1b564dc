"""Parse outcomes: an explicit success/failure sum type."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, Literal, TypeAlias, TypeVar

from tokparse.diagnostics import PARSER_TOKEN_MISMATCH, Diagnostic
from tokparse.parser.token_source import TokenCursor
from tokparse.text import ErrorPosition

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """A successful parse carrying `value`. Any value, including None, is a success."""

    value: T

    def is_success(self) -> Literal[True]:
        return True

    def is_failure(self) -> Literal[False]:
        return False


@dataclass(frozen=True, slots=True)
class Failure:
    """A failed parse: why, where, and which diagnostic code it belongs to."""

    message: str
    position: ErrorPosition
    code: str = PARSER_TOKEN_MISMATCH.code

    def is_success(self) -> Literal[False]:
        return False

    def is_failure(self) -> Literal[True]:
        return True

    def with_label(self, text: str) -> Failure:
        return Failure(f"{text}: {self.message}", self.position, self.code)

    def to_diagnostic(self) -> Diagnostic:
        return Diagnostic.from_code(self.code, self.position, self.message)


ParseOutcome: TypeAlias = Success[T] | Failure
Parser: TypeAlias = Callable[[TokenCursor], ParseOutcome[T]]
