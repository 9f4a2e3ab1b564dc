from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True, order=True)
class SourcePosition:
    """1-based line/column location of a character in the source text."""

    line: int
    column: int

    def __post_init__(self):
        if self.line < 1 or self.column < 1:
            raise ValueError("SourcePosition line and column are 1-based")

    def as_tuple(self) -> tuple[int, int]:
        """Get the position as a (line, column) tuple."""
        return (self.line, self.column)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


START: Final[SourcePosition] = SourcePosition(1, 1)
"""Position of the first character of any input."""


@dataclass(frozen=True, slots=True)
class ErrorPosition:
    """
    Where a parse failed.

    `line`/`column` locate the offending token in the source text.
    `position` is the absolute token index, used to compare how far two
    failed parses progressed.
    """

    line: int
    column: int
    position: int

    def __post_init__(self):
        if self.position < 0:
            raise ValueError("ErrorPosition token index cannot be negative")

    @staticmethod
    def at(source: SourcePosition, position: int) -> "ErrorPosition":
        """Create an ErrorPosition from a source location and a token index."""
        return ErrorPosition(source.line, source.column, position)

    @property
    def source_position(self) -> SourcePosition:
        return SourcePosition(self.line, self.column)

    def is_deeper_than(self, other: "ErrorPosition") -> bool:
        return self.position > other.position

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"
