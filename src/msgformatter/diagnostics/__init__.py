"""Diagnostic system for formatter errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    EmptyParameterNameError,
    MessageFormatError,
    MissingParameterError,
    MissingPluralKeysError,
    PluralValueError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "EmptyParameterNameError",
    "ErrorTemplate",
    "MessageFormatError",
    "MissingParameterError",
    "MissingPluralKeysError",
    "OutputFormat",
    "PluralValueError",
    "SourceSpan",
]
