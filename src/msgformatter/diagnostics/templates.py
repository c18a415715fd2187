"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Raise sites pass the returned Diagnostic to the exception class, which
    keeps every message testable and documented in one place.
    """

    @staticmethod
    def empty_parameter_name(span: SourceSpan | None = None) -> Diagnostic:
        """Placeholder name is empty after trimming.

        Args:
            span: Location of the offending placeholder

        Returns:
            Diagnostic for EMPTY_PARAMETER_NAME
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_PARAMETER_NAME,
            message="Parameter's name can not be empty.",
            span=span,
            hint="Write the parameter name between the braces, e.g. {name}",
        )

    @staticmethod
    def parameter_not_provided(name: str, span: SourceSpan | None = None) -> Diagnostic:
        """Referenced parameter has no entry in the parameters mapping.

        Args:
            name: The parameter name as written in the template (trimmed)
            span: Location of the offending placeholder

        Returns:
            Diagnostic for PARAMETER_NOT_PROVIDED
        """
        msg = f'"{name}" parameter\'s value is missing.'
        return Diagnostic(
            code=DiagnosticCode.PARAMETER_NOT_PROVIDED,
            message=msg,
            span=span,
            hint=f"Pass '{name}' in the parameters mapping",
            argument_name=name,
        )

    @staticmethod
    def plural_keys_missing(
        missing: tuple[str, ...], name: str | None = None, span: SourceSpan | None = None
    ) -> Diagnostic:
        """Plural body lacks one or more required categories.

        Args:
            missing: Missing category keys, in reporting order
            name: Parameter name of the plural placeholder
            span: Location of the offending placeholder

        Returns:
            Diagnostic for PLURAL_KEYS_MISSING
        """
        quoted = ", ".join(f'"{key}"' for key in missing)
        if len(missing) == 1:
            msg = f"Missing plural key {quoted}."
        else:
            msg = f"Missing plural keys: {quoted}."
        return Diagnostic(
            code=DiagnosticCode.PLURAL_KEYS_MISSING,
            message=msg,
            span=span,
            hint="Declare both categories, e.g. {n, plural, one{item} other{items}}",
            argument_name=name,
        )

    @staticmethod
    def plural_value_not_integer(
        value: object, name: str | None = None, span: SourceSpan | None = None
    ) -> Diagnostic:
        """Plural operand cannot be coerced to an integer.

        Args:
            value: The offending parameter value
            name: Parameter name of the plural placeholder
            span: Location of the offending placeholder

        Returns:
            Diagnostic for PLURAL_VALUE_NOT_INTEGER
        """
        return Diagnostic(
            code=DiagnosticCode.PLURAL_VALUE_NOT_INTEGER,
            message="Only integer numbers are supported with plural format.",
            span=span,
            hint="Pass an int or a string of digits",
            argument_name=name,
            received_type=type(value).__name__,
        )
