"""
Script errors and diagnostics.

Error code ranges:
- E0xx: Lexer errors
- E1xx: Parser errors
- E4xx: Runtime errors
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List
from .tokens import SourceLocation


class ErrorSeverity(Enum):
    """Severity levels for diagnostics."""
    ERROR = "error"


@dataclass
class Diagnostic:
    """A single diagnostic message."""
    code: str                       # E001, E101, etc.
    message: str                    # Human-readable message
    severity: ErrorSeverity = ErrorSeverity.ERROR
    location: Optional[SourceLocation] = None
    source_line: Optional[str] = None   # The actual line of source code
    hints: List[str] = field(default_factory=list)

    def format(self, show_source: bool = True) -> str:
        """Format the diagnostic for display."""
        parts = []

        # Header: location: severity[code]: message
        header = f"{self.severity.value}[{self.code}]: {self.message}"
        if self.location is not None:
            header = f"{self.location}: {header}"
        parts.append(header)

        # Source line with caret
        if show_source and self.location is not None and self.source_line is not None:
            parts.append("  |")
            line_num = str(self.location.line)
            parts.append(f"{line_num:>3} | {self.source_line}")
            parts.append(f"    | {' ' * (self.location.column - 1)}^")

        for hint in self.hints:
            parts.append(f"    = hint: {hint}")

        return "\n".join(parts)

    def to_json(self) -> dict:
        """Convert to JSON-serializable dict for tooling integration."""
        data = {
            "code": self.code,
            "message": self.message,
            "severity": self.severity.value,
            "hints": self.hints,
        }
        if self.location is not None:
            data["location"] = {
                "line": self.location.line,
                "column": self.location.column,
                "offset": self.location.offset,
            }
        return data


class ScriptError(Exception):
    """Base exception for every error a script can raise.

    A ``try`` statement recovers from any ScriptError and nothing else.
    """

    def __init__(self, diagnostic: Diagnostic):
        self.diagnostic = diagnostic
        super().__init__(diagnostic.message)

    @property
    def code(self) -> str:
        return self.diagnostic.code

    def __str__(self) -> str:
        return self.diagnostic.format()


class LexError(ScriptError):
    """Error during lexical analysis (E0xx)."""
    pass


class ParseError(ScriptError):
    """Error during parsing (E1xx)."""
    pass


class EvalError(ScriptError):
    """Error during evaluation (E4xx)."""
    pass


# --- Lexer error codes ---

def error_unexpected_character(char: str, location: SourceLocation,
                               source_line: str = None) -> LexError:
    """E001: Unexpected character."""
    diag = Diagnostic(
        code="E001",
        message=f"unexpected character {char!r}",
        location=location,
        source_line=source_line,
    )
    return LexError(diag)


def error_unterminated_string(location: SourceLocation, source_line: str = None) -> LexError:
    """E002: Unterminated string literal."""
    diag = Diagnostic(
        code="E002",
        message="unterminated string literal",
        location=location,
        source_line=source_line,
        hints=['string literals must be closed with a matching "'],
    )
    return LexError(diag)


def error_number_too_large(location: SourceLocation, source_line: str = None) -> LexError:
    """E003: Integer literal has more digits than the host can convert."""
    diag = Diagnostic(
        code="E003",
        message="number literal too large",
        location=location,
        source_line=source_line,
    )
    return LexError(diag)


# --- Parser error codes ---

def error_unexpected_token(expected: str, found: str, location: SourceLocation = None,
                           source_line: str = None) -> ParseError:
    """E101: Unexpected token."""
    diag = Diagnostic(
        code="E101",
        message=f"expected {expected}, found {found}",
        location=location,
        source_line=source_line,
    )
    return ParseError(diag)


def error_unexpected_eof(expected: str) -> ParseError:
    """E102: Unexpected end of input."""
    diag = Diagnostic(
        code="E102",
        message=f"unexpected end of input, expected {expected}",
    )
    return ParseError(diag)


def error_expected_expression(found: str, location: SourceLocation = None,
                              source_line: str = None) -> ParseError:
    """E103: No expression can start with this token."""
    diag = Diagnostic(
        code="E103",
        message=f"expected expression, found {found}",
        location=location,
        source_line=source_line,
    )
    return ParseError(diag)


# --- Runtime error codes ---

def error_undefined_variable(name: str) -> EvalError:
    """E401: Undefined variable."""
    return EvalError(Diagnostic(code="E401", message=f"undefined variable '{name}'"))


def error_undefined_function(name: str) -> EvalError:
    """E402: Undefined function."""
    return EvalError(Diagnostic(code="E402", message=f"undefined function '{name}'"))


def error_not_callable(name: str) -> EvalError:
    """E403: Name bound to a value was called."""
    return EvalError(Diagnostic(code="E403", message=f"'{name}' is not a function"))


def error_function_as_value(name: str) -> EvalError:
    """E403: Function name used where a value is expected."""
    diag = Diagnostic(
        code="E403",
        message=f"'{name}' is a function, not a value",
        hints=[f"call it as {name}(...)"],
    )
    return EvalError(diag)


def error_type_mismatch(operator: str, *operand_types: str) -> EvalError:
    """E404: Operator applied to unsupported operand types."""
    found = ", ".join(operand_types)
    diag = Diagnostic(
        code="E404",
        message=f"unsupported operand type(s) for '{operator}': {found}",
    )
    return EvalError(diag)


def error_unknown_operator(operator: str) -> EvalError:
    """E405: Unknown operator."""
    return EvalError(Diagnostic(code="E405", message=f"unknown operator {operator}"))


def error_unknown_node(kind: str) -> EvalError:
    """E406: Node kind the evaluator does not handle."""
    return EvalError(Diagnostic(code="E406", message=f"unknown node type: {kind}"))


def error_division_by_zero() -> EvalError:
    """E407: Division by zero."""
    return EvalError(Diagnostic(code="E407", message="division by zero"))


def error_recursion_depth(name: str) -> EvalError:
    """E408: Call nesting exceeded the host recursion limit."""
    diag = Diagnostic(
        code="E408",
        message=f"maximum recursion depth exceeded in call to '{name}'",
    )
    return EvalError(diag)


def error_numeric_overflow(operator: str) -> EvalError:
    """E409: Number too large for the operation."""
    return EvalError(Diagnostic(code="E409", message=f"numeric overflow in {operator}"))
