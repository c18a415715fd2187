"""Core value types for the formatter runtime.

Defines the parameter value union and the closed classification the
renderer branches on:
    - ParameterValue: Union of all accepted parameter value types
    - ValueKind: Closed set of value kinds (scalar kinds plus NON_SCALAR)
    - classify_value: Map a value to its ValueKind
    - stringify: Plain text conversion used for substitution

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal
from enum import StrEnum
from typing import TypeAlias

__all__ = [
    "ParameterValue",
    "ValueKind",
    "classify_value",
    "stringify",
]

# Sequence and Mapping values are accepted but never interpolated by an
# untyped placeholder; see ValueKind.NON_SCALAR.
ParameterValue: TypeAlias = (
    str
    | int
    | float
    | bool
    | Decimal
    | None
    | Sequence["ParameterValue"]
    | Mapping[str, "ParameterValue"]
)


class ValueKind(StrEnum):
    """Kinds of parameter values.

    NON_SCALAR covers every composite or unrecognized object (lists, dicts,
    sets, arbitrary instances).
    """

    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    TEXT = "text"
    NON_SCALAR = "non_scalar"


def classify_value(value: object) -> ValueKind:
    """Classify a parameter value.

    Example:
        >>> classify_value(True)
        <ValueKind.BOOLEAN: 'boolean'>
        >>> classify_value(["a"])
        <ValueKind.NON_SCALAR: 'non_scalar'>
    """
    # bool before int: bool is a subclass of int
    match value:
        case None:
            return ValueKind.NULL
        case bool():
            return ValueKind.BOOLEAN
        case int():
            return ValueKind.INTEGER
        case float() | Decimal():
            return ValueKind.FLOAT
        case str():
            return ValueKind.TEXT
        case _:
            return ValueKind.NON_SCALAR


def stringify(value: object) -> str:
    """Convert a value to substitution text.

    - None: empty string
    - bool: "true"/"false"
    - int/float/Decimal: ``str()`` form, no locale separators
    - str: returned as-is
    - anything else: ``str()`` form
    """
    match classify_value(value):
        case ValueKind.NULL:
            return ""
        case ValueKind.BOOLEAN:
            return "true" if value else "false"
        case ValueKind.TEXT:
            return value  # type: ignore[return-value]
        case ValueKind.INTEGER | ValueKind.FLOAT | ValueKind.NON_SCALAR:
            return str(value)
