"""Shared constants for msgformatter.

Grammar delimiters and plural category names used by both the syntax and
runtime packages. Placing them here avoids circular imports and provides a
single source of truth.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Delimiters
    "PLACEHOLDER_OPEN",
    "PLACEHOLDER_CLOSE",
    "ARGUMENT_SEPARATOR",
    # Format types
    "FORMAT_TYPE_NUMBER",
    "FORMAT_TYPE_PLURAL",
    # Plural categories
    "PLURAL_ONE",
    "PLURAL_OTHER",
    "REQUIRED_PLURAL_CATEGORIES",
]

# ============================================================================
# DELIMITERS
# ============================================================================

PLACEHOLDER_OPEN: str = "{"
PLACEHOLDER_CLOSE: str = "}"

# Separates name, type and body inside a placeholder. Only commas at depth 0
# of the placeholder content split; commas inside a plural body do not.
ARGUMENT_SEPARATOR: str = ","

# ============================================================================
# FORMAT TYPES
# ============================================================================

FORMAT_TYPE_NUMBER: str = "number"
FORMAT_TYPE_PLURAL: str = "plural"

# ============================================================================
# PLURAL CATEGORIES
# ============================================================================

PLURAL_ONE: str = "one"
PLURAL_OTHER: str = "other"

# Order matters: missing keys are reported in this order.
REQUIRED_PLURAL_CATEGORIES: tuple[str, ...] = (PLURAL_ONE, PLURAL_OTHER)
