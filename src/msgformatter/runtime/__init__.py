"""Runtime formatting package.

Renders tokenized templates: value classification, placeholder dispatch and
plural selection.

Python 3.13+.
"""

from .formatter import MessageFormatter, SimpleMessageFormatter, format_message
from .plural_rules import (
    coerce_plural_operand,
    require_plural_categories,
    resolve_plural,
    select_plural_category,
)
from .renderer import FormatType, render_placeholder
from .value_types import ParameterValue, ValueKind, classify_value, stringify

__all__ = [
    "FormatType",
    "MessageFormatter",
    "ParameterValue",
    "SimpleMessageFormatter",
    "ValueKind",
    "classify_value",
    "coerce_plural_operand",
    "format_message",
    "render_placeholder",
    "require_plural_categories",
    "resolve_plural",
    "select_plural_category",
    "stringify",
]
