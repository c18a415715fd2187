"""Plural sub-format resolution.

Selects the text of a ``{n, plural, one{...} other{...}}`` placeholder.
The rule is deliberately simple and locale-independent: exactly 1 selects
``one``, every other integer selects ``other``. Extra categories such as
``many`` may be declared but are never selected.

Python 3.13+. Zero external dependencies.
"""

from decimal import Decimal

from msgformatter.constants import PLURAL_ONE, PLURAL_OTHER, REQUIRED_PLURAL_CATEGORIES
from msgformatter.diagnostics import (
    ErrorTemplate,
    MissingPluralKeysError,
    PluralValueError,
    SourceSpan,
)
from msgformatter.syntax import PluralBody

__all__ = [
    "coerce_plural_operand",
    "require_plural_categories",
    "resolve_plural",
    "select_plural_category",
]


def _parse_integer_text(text: str) -> int | None:
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    return int(text)


def _is_integral(value: float | Decimal) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite() and value == value.to_integral_value()
    return value.is_integer()


def coerce_plural_operand(
    value: object, *, name: str | None = None, span: SourceSpan | None = None
) -> int:
    """Coerce a plural parameter value to an integer.

    Accepts ints (not bools), floats and Decimals without a fractional part,
    and strings of ASCII digits with an optional leading sign.

    Raises:
        PluralValueError: For any other value

    Example:
        >>> coerce_plural_operand("1")
        1
        >>> coerce_plural_operand(2.0)
        2
    """
    match value:
        case bool():
            pass
        case int():
            return value
        case float() | Decimal():
            if _is_integral(value):
                return int(value)
        case str():
            parsed = _parse_integer_text(value)
            if parsed is not None:
                return parsed
    raise PluralValueError(
        ErrorTemplate.plural_value_not_integer(value, name, span), value=value
    )


def require_plural_categories(
    body: PluralBody, *, name: str | None = None, span: SourceSpan | None = None
) -> None:
    """Check that ``one`` and ``other`` are declared.

    Raises:
        MissingPluralKeysError: Naming the missing keys in ``one, other`` order
    """
    missing = tuple(key for key in REQUIRED_PLURAL_CATEGORIES if key not in body)
    if missing:
        raise MissingPluralKeysError(
            ErrorTemplate.plural_keys_missing(missing, name, span), missing_keys=missing
        )


def select_plural_category(n: int) -> str:
    """Select the plural category for an integer.

    Example:
        >>> select_plural_category(1)
        'one'
        >>> select_plural_category(0)
        'other'
    """
    return PLURAL_ONE if n == 1 else PLURAL_OTHER


def resolve_plural(
    value: object,
    body: PluralBody,
    *,
    name: str | None = None,
    span: SourceSpan | None = None,
) -> str:
    """Return the category text selected by ``value``.

    The operand is validated before the categories, so a non-integer value
    is reported even when the body is also incomplete.
    """
    n = coerce_plural_operand(value, name=name, span=span)
    require_plural_categories(body, name=name, span=span)
    return body[select_plural_category(n)]
