"""Template introspection for parameter and format extraction.

Read-only analysis of templates: which parameters a template references,
with which format types, and which plural categories each plural
placeholder declares. Nothing is validated or rendered; templates that
would fail to format can still be introspected.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from msgformatter.constants import FORMAT_TYPE_PLURAL
from msgformatter.diagnostics import SourceSpan
from msgformatter.syntax import PlaceholderSegment, parse_placeholder, parse_plural_body, tokenize

__all__ = [
    "PlaceholderInfo",
    "TemplateIntrospection",
    "extract_parameters",
    "introspect_template",
]


@dataclass(frozen=True, slots=True)
class PlaceholderInfo:
    """Immutable metadata about one placeholder.

    Attributes:
        name: Trimmed parameter name (may be empty)
        format_type: Trimmed format type, or None
        plural_categories: Declared categories (plural placeholders only)
        span: Location of the placeholder in the template
    """

    name: str
    format_type: str | None
    plural_categories: frozenset[str]
    span: SourceSpan | None


@dataclass(frozen=True, slots=True)
class TemplateIntrospection:
    """Complete introspection result for a template."""

    placeholders: tuple[PlaceholderInfo, ...]

    @property
    def parameter_names(self) -> frozenset[str]:
        """Non-empty parameter names referenced by the template."""
        return frozenset(p.name for p in self.placeholders if p.name)

    @property
    def has_plurals(self) -> bool:
        """True if any placeholder uses the plural format."""
        return any(p.format_type == FORMAT_TYPE_PLURAL for p in self.placeholders)

    def requires_parameter(self, name: str) -> bool:
        """Check whether formatting needs a value for ``name``."""
        return name in self.parameter_names


def introspect_template(template: str) -> TemplateIntrospection:
    """Describe every placeholder of ``template`` in order.

    Example:
        >>> info = introspect_template("{n} {n, plural, one{x} other{y}}")
        >>> sorted(info.parameter_names)
        ['n']
        >>> info.has_plurals
        True
    """
    placeholders: list[PlaceholderInfo] = []
    for segment in tokenize(template):
        if not PlaceholderSegment.guard(segment):
            continue
        expression = parse_placeholder(segment.raw, segment.span)
        categories: frozenset[str] = frozenset()
        if expression.format_type == FORMAT_TYPE_PLURAL:
            categories = frozenset(parse_plural_body(expression.body))
        placeholders.append(
            PlaceholderInfo(
                name=expression.name,
                format_type=expression.format_type,
                plural_categories=categories,
                span=expression.span,
            )
        )
    return TemplateIntrospection(placeholders=tuple(placeholders))


def extract_parameters(template: str) -> frozenset[str]:
    """Return the parameter names a template references.

    Example:
        >>> sorted(extract_parameters("Hi {name}, you have {n, number} items"))
        ['n', 'name']
    """
    return introspect_template(template).parameter_names
