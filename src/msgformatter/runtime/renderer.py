"""Placeholder renderer - converts one parsed placeholder to text.

Validates the placeholder name, looks the parameter up and dispatches on the
format type. Python 3.13+. Zero external dependencies.

Dispatch:
    untyped  - stringify scalars; non-scalar values keep the placeholder text
    number   - plain text conversion
    plural   - one/other category selection (runtime.plural_rules)
    unknown  - stringify, including non-scalar values
"""

import logging
from collections.abc import Mapping
from enum import Enum

from msgformatter.constants import FORMAT_TYPE_NUMBER, FORMAT_TYPE_PLURAL
from msgformatter.diagnostics import (
    EmptyParameterNameError,
    ErrorTemplate,
    MissingParameterError,
)
from msgformatter.syntax import PlaceholderExpression, parse_plural_body

from .plural_rules import resolve_plural
from .value_types import ParameterValue, ValueKind, classify_value, stringify

__all__ = ["FormatType", "render_placeholder"]

logger = logging.getLogger(__name__)


class FormatType(Enum):
    """Recognized placeholder format types.

    UNKNOWN is the explicit default arm for any unrecognized type name.
    """

    UNTYPED = "untyped"
    NUMBER = FORMAT_TYPE_NUMBER
    PLURAL = FORMAT_TYPE_PLURAL
    UNKNOWN = "unknown"

    @classmethod
    def from_name(cls, name: str | None) -> "FormatType":
        """Map a trimmed type name to a FormatType.

        Both an absent and an empty type mean UNTYPED.

        Example:
            >>> FormatType.from_name("plural")
            <FormatType.PLURAL: 'plural'>
            >>> FormatType.from_name("date")
            <FormatType.UNKNOWN: 'unknown'>
        """
        match name:
            case None | "":
                return cls.UNTYPED
            case "number":
                return cls.NUMBER
            case "plural":
                return cls.PLURAL
            case _:
                return cls.UNKNOWN


def render_placeholder(
    expression: PlaceholderExpression, parameters: Mapping[str, ParameterValue]
) -> str:
    """Render one placeholder.

    Args:
        expression: Parsed placeholder
        parameters: Caller-supplied parameter values

    Returns:
        Substitution text

    Raises:
        EmptyParameterNameError: Name is empty after trimming
        MissingParameterError: Name is not a key of ``parameters``
        PluralValueError: Plural operand is not an integer
        MissingPluralKeysError: Plural body lacks ``one`` and/or ``other``
    """
    name = expression.name
    if not name:
        raise EmptyParameterNameError(ErrorTemplate.empty_parameter_name(expression.span))
    if name not in parameters:
        raise MissingParameterError(
            ErrorTemplate.parameter_not_provided(name, expression.span),
            parameter_name=name,
        )

    value = parameters[name]
    match FormatType.from_name(expression.format_type):
        case FormatType.UNTYPED:
            if classify_value(value) is ValueKind.NON_SCALAR:
                logger.debug(
                    "Parameter '%s' is %s; leaving placeholder untouched",
                    name,
                    type(value).__name__,
                )
                return expression.source
            return stringify(value)
        case FormatType.NUMBER:
            return stringify(value)
        case FormatType.PLURAL:
            return resolve_plural(
                value,
                parse_plural_body(expression.body),
                name=name,
                span=expression.span,
            )
        case FormatType.UNKNOWN:
            logger.warning(
                "Unsupported format type '%s' for parameter '%s'; using plain text",
                expression.format_type,
                name,
            )
            return stringify(value)
