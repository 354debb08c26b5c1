"""
letlang exceptions and diagnostics.

Error code ranges:
- E4xx: Evaluation (runtime) errors

Every failure is raised as an EvaluationError carrying a Diagnostic; the
interpreter boundary records the diagnostic and writes it out before the
error reaches the caller.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


class ErrorKind(Enum):
    """Causes of an evaluation failure, keyed by diagnostic code."""
    TYPE_MISMATCH = "E401"
    UNSUPPORTED_OPERATOR = "E402"
    DIVISION_BY_ZERO = "E403"
    UNBOUND_IDENTIFIER = "E404"
    DEPTH_EXCEEDED = "E405"
    NUMERIC_OVERFLOW = "E406"

    @property
    def code(self) -> str:
        return self.value


@dataclass
class Diagnostic:
    """A single diagnostic message."""
    kind: ErrorKind
    message: str                    # Human-readable message
    line: Optional[int] = None      # Source line of the failing node
    hints: List[str] = field(default_factory=list)

    @property
    def code(self) -> str:
        return self.kind.code

    def format(self) -> str:
        """Format the diagnostic for display."""
        loc = f"line {self.line}" if self.line else "<unknown>"
        parts = [f"{loc}: error[{self.code}]: {self.message}"]
        for hint in self.hints:
            parts.append(f"    = hint: {hint}")
        return "\n".join(parts)

    def to_json(self) -> dict:
        """Convert to JSON-serializable dict for tooling integration."""
        return {
            "code": self.code,
            "kind": self.kind.name.lower(),
            "message": self.message,
            "line": self.line,
            "hints": list(self.hints),
        }


class LetlangError(Exception):
    """Base exception for letlang errors."""

    def __init__(self, diagnostic: Diagnostic):
        self.diagnostic = diagnostic
        super().__init__(diagnostic.message)

    def __str__(self) -> str:
        return self.diagnostic.format()


class EvaluationError(LetlangError):
    """Error during evaluation of a syntax tree (E4xx)."""

    @property
    def kind(self) -> ErrorKind:
        return self.diagnostic.kind


def _describe(value: Any) -> str:
    """Describe an operand as 'value (type)' for messages."""
    type_name = getattr(getattr(value, "type", None), "name", type(value).__name__)
    return f"{value} ({type_name})"


def _op_name(op: Any) -> str:
    return getattr(op, "name", str(op))


# --- Evaluation error codes ---

def error_type_mismatch(op: Any, operands: List[Any], line: int = None,
                        expected: str = None) -> EvaluationError:
    """E401: Operand types not accepted by the operator."""
    found = ", ".join(_describe(v) for v in operands)
    diag = Diagnostic(
        kind=ErrorKind.TYPE_MISMATCH,
        message=f"type mismatch for {_op_name(op)}: {found}",
        line=line,
    )
    if expected:
        diag.hints.append(f"{_op_name(op)} expects {expected}")
    return EvaluationError(diag)


def error_unsupported_operator(op: Any, context: str, line: int = None) -> EvaluationError:
    """E402: Operator not valid for this node or these operand types."""
    diag = Diagnostic(
        kind=ErrorKind.UNSUPPORTED_OPERATOR,
        message=f"unsupported {context} operation: {_op_name(op)}",
        line=line,
    )
    return EvaluationError(diag)


def error_division_by_zero(op: Any, dividend: Any, line: int = None) -> EvaluationError:
    """E403: Division or modulo by zero."""
    diag = Diagnostic(
        kind=ErrorKind.DIVISION_BY_ZERO,
        message=f"division by zero in {_op_name(op)} (dividend {dividend})",
        line=line,
    )
    return EvaluationError(diag)


def error_unbound_identifier(name: str, line: int = None) -> EvaluationError:
    """E404: Identifier has no binding in scope."""
    diag = Diagnostic(
        kind=ErrorKind.UNBOUND_IDENTIFIER,
        message=f"unbound identifier '{name}'",
        line=line,
    )
    return EvaluationError(diag)


def error_depth_exceeded(max_depth: int, line: int = None) -> EvaluationError:
    """E405: Tree nested deeper than the interpreter allows."""
    diag = Diagnostic(
        kind=ErrorKind.DEPTH_EXCEEDED,
        message=f"evaluation depth exceeded {max_depth}",
        line=line,
        hints=["raise max_depth or split the expression"],
    )
    return EvaluationError(diag)


def error_numeric_overflow(op: Any, operands: List[Any], line: int = None) -> EvaluationError:
    """E406: Integer too large to widen to a real."""
    found = ", ".join(_describe(v) for v in operands)
    diag = Diagnostic(
        kind=ErrorKind.NUMERIC_OVERFLOW,
        message=f"integer too large to widen to real in {_op_name(op)}: {found}",
        line=line,
        hints=["reals hold magnitudes up to about 1.8e308"],
    )
    return EvaluationError(diag)


class DiagnosticCollector:
    """Collects diagnostics reported during evaluation."""

    def __init__(self):
        self.diagnostics: List[Diagnostic] = []

    def add(self, diagnostic: Diagnostic) -> None:
        """Add a diagnostic."""
        self.diagnostics.append(diagnostic)

    def add_error(self, error: LetlangError) -> None:
        """Add an error exception as a diagnostic."""
        self.add(error.diagnostic)

    @property
    def error_count(self) -> int:
        return len(self.diagnostics)

    @property
    def has_errors(self) -> bool:
        return len(self.diagnostics) > 0

    def clear(self) -> None:
        self.diagnostics.clear()

    def format_all(self) -> str:
        """Format all diagnostics for display."""
        parts = [d.format() for d in self.diagnostics]
        if parts:
            parts.append(f"{self.error_count} error(s)")
        return "\n\n".join(parts)

    def to_json(self) -> dict:
        """Convert all diagnostics to JSON format."""
        return {
            "diagnostics": [d.to_json() for d in self.diagnostics],
            "error_count": self.error_count,
        }
