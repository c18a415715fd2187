"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Reference errors (placeholder names, missing parameters)
        2000-2999: Format errors (plural sub-format validation)
    """

    # Reference errors (1000-1999)
    EMPTY_PARAMETER_NAME = 1001
    PARAMETER_NOT_PROVIDED = 1002

    # Format errors (2000-2999)
    PLURAL_KEYS_MISSING = 2001
    PLURAL_VALUE_NOT_INTEGER = 2002


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Character offsets of a placeholder inside its template.

    Attributes:
        start: Offset of the opening brace (0-indexed)
        end: Offset just past the closing brace (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries everything needed to
    explain a failed format call to a human or a tool.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location of the offending placeholder (None when unknown)
        hint: Suggestion for fixing the error
        argument_name: Parameter name involved in the error
        received_type: Type name of the offending value
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    argument_name: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[PARAMETER_NOT_PROVIDED]: "min" parameter's value is missing.
              = argument: min
              = help: Pass 'min' in the parameters mapping

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
