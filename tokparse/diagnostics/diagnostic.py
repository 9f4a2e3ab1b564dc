"""Diagnostics core types."""

from dataclasses import dataclass

from tokparse.diagnostics.codes import SPECS_BY_CODE, DiagnosticSpec, Severity
from tokparse.text import ErrorPosition


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic built from a failed parse or tokenization."""

    code: str
    message: str
    position: ErrorPosition
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(spec: DiagnosticSpec, position: ErrorPosition, message: str | None = None) -> "Diagnostic":
        return Diagnostic(
            code=spec.code,
            message=spec.message if message is None else message,
            position=position,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )

    @staticmethod
    def from_code(code: str, position: ErrorPosition, message: str) -> "Diagnostic":
        """Build a diagnostic from a registered code, keeping the spec's hint and category."""
        spec = SPECS_BY_CODE.get(code)
        if spec is None:
            return Diagnostic(code=code, message=message, position=position)
        return Diagnostic.from_spec(spec, position, message=message)
