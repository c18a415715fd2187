"""Template syntax node definitions.

A template decomposes into an ordered tuple of segments: literal text and
placeholders. Placeholders are further parsed into PlaceholderExpression
records by ``msgformatter.syntax.expression``.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from msgformatter.diagnostics import SourceSpan

if TYPE_CHECKING:
    from typing import TypeIs

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Segments
    "TextSegment",
    "PlaceholderSegment",
    # Expressions
    "PlaceholderExpression",
    # Type aliases
    "Segment",
    "PluralBody",
]


@dataclass(frozen=True, slots=True)
class TextSegment:
    """Literal text copied to the output unchanged."""

    text: str

    @staticmethod
    def guard(segment: object) -> TypeIs["TextSegment"]:
        """Type guard for TextSegment."""
        return isinstance(segment, TextSegment)


@dataclass(frozen=True, slots=True)
class PlaceholderSegment:
    """Substitutable ``{...}`` region.

    Attributes:
        raw: Content between the outermost matching braces (braces stripped)
        span: Offsets of the full ``{...}`` text in the template

    Example:
        Template: "Hi {name}!"
        PlaceholderSegment(raw="name", span=SourceSpan(start=3, end=9))
    """

    raw: str
    span: SourceSpan | None = None

    @property
    def source(self) -> str:
        """Original placeholder text, braces included."""
        return f"{{{self.raw}}}"

    @staticmethod
    def guard(segment: object) -> TypeIs["PlaceholderSegment"]:
        """Type guard for PlaceholderSegment."""
        return isinstance(segment, PlaceholderSegment)


@dataclass(frozen=True, slots=True)
class PlaceholderExpression:
    """Parsed placeholder content: ``name[, type[, body]]``.

    Attributes:
        name: Parameter name, trimmed (may be empty; rejected at render time)
        format_type: Format type, trimmed (None when absent)
        body: Format-specific remainder (None when absent); used by plural only
        source: Original placeholder text, braces included
        span: Offsets of the placeholder in the template
    """

    name: str
    format_type: str | None = None
    body: str | None = None
    source: str = ""
    span: SourceSpan | None = None


Segment: TypeAlias = TextSegment | PlaceholderSegment

# Category key -> literal text. A lookup table; declaration order is irrelevant.
PluralBody: TypeAlias = Mapping[str, str]
