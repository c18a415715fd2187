"""Formatter exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information while
keeping ``str(error)`` equal to the plain human-readable message.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class MessageFormatError(ValueError):
    """Base exception for all template formatting errors.

    Raised synchronously from ``format``; the first failure aborts the
    whole call and no partial output is produced.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MessageFormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)

    def format_error(self) -> str:
        """Return Rust-style diagnostic output, or the plain message."""
        if self.diagnostic is None:
            return str(self)
        return self.diagnostic.format_error()


class EmptyParameterNameError(MessageFormatError):
    """Placeholder name is empty after trimming, e.g. ``{}`` or ``{ }``.

    Raised regardless of the parameters supplied.
    """


class MissingParameterError(MessageFormatError):
    """Placeholder references a name absent from the parameters.

    Attributes:
        parameter_name: The missing parameter name
    """

    def __init__(self, message: str | Diagnostic, *, parameter_name: str = "") -> None:
        super().__init__(message)
        self.parameter_name = parameter_name


class MissingPluralKeysError(MessageFormatError):
    """Plural body lacks the ``one`` and/or ``other`` category.

    Attributes:
        missing_keys: Missing categories in reporting order
    """

    def __init__(
        self, message: str | Diagnostic, *, missing_keys: tuple[str, ...] = ()
    ) -> None:
        super().__init__(message)
        self.missing_keys = missing_keys


class PluralValueError(MessageFormatError):
    """Plural operand cannot be coerced to an integer.

    Attributes:
        value: The offending parameter value
    """

    def __init__(self, message: str | Diagnostic, *, value: object = None) -> None:
        super().__init__(message)
        self.value = value
