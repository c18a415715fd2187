"""Hypothesis strategies for msgformatter property-based testing.

Usage:
    from tests.strategies import literal_text, plural_bodies
"""

from .templates import (
    category_text,
    literal_text,
    non_scalar_values,
    parameter_names,
    plural_bodies,
    plural_operands,
    scalar_values,
)

__all__ = [
    "category_text",
    "literal_text",
    "non_scalar_values",
    "parameter_names",
    "plural_bodies",
    "plural_operands",
    "scalar_values",
]
