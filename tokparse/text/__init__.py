"""Source and error positions."""

from tokparse.text.position import START, ErrorPosition, SourcePosition

__all__ = [
    "START",
    "ErrorPosition",
    "SourcePosition",
]
