"""Placeholder expression parsing.

Turns the raw content of a placeholder into a PlaceholderExpression and
parses plural bodies into a category lookup table.

Splitting uses explicit depth counters: a comma inside a category body
such as ``one{a, b}`` never splits the expression.

Python 3.13+. Zero external dependencies.
"""

from types import MappingProxyType

from msgformatter.constants import (
    ARGUMENT_SEPARATOR,
    PLACEHOLDER_CLOSE,
    PLACEHOLDER_OPEN,
)
from msgformatter.diagnostics import SourceSpan

from .ast import PlaceholderExpression, PluralBody
from .cursor import Cursor
from .tokenizer import skip_braced

__all__ = ["parse_placeholder", "parse_plural_body", "split_arguments"]


def split_arguments(raw: str) -> list[str]:
    """Split placeholder content on commas at brace depth 0.

    Pieces are returned untrimmed.

    Example:
        >>> split_arguments("n, plural, one{a, b} other{c}")
        ['n', ' plural', ' one{a, b} other{c}']
    """
    pieces: list[str] = []
    depth = 0
    start = 0
    for index, char in enumerate(raw):
        if char == PLACEHOLDER_OPEN:
            depth += 1
        elif char == PLACEHOLDER_CLOSE:
            if depth > 0:
                depth -= 1
        elif char == ARGUMENT_SEPARATOR and depth == 0:
            pieces.append(raw[start:index])
            start = index + 1
    pieces.append(raw[start:])
    return pieces


def parse_placeholder(raw: str, span: SourceSpan | None = None) -> PlaceholderExpression:
    """Parse placeholder content into name, type and body.

    Args:
        raw: Content between the placeholder braces
        span: Location of the placeholder in its template

    Returns:
        PlaceholderExpression. The name may be empty; the renderer rejects it.
    """
    pieces = split_arguments(raw)
    name = pieces[0].strip()
    format_type = pieces[1].strip() if len(pieces) > 1 else None
    body = ARGUMENT_SEPARATOR.join(pieces[2:]) if len(pieces) > 2 else None  # noqa: PLR2004
    return PlaceholderExpression(
        name=name,
        format_type=format_type,
        body=body,
        source=f"{PLACEHOLDER_OPEN}{raw}{PLACEHOLDER_CLOSE}",
        span=span,
    )


def _is_key_boundary(char: str) -> bool:
    return char.isspace() or char in (PLACEHOLDER_OPEN, PLACEHOLDER_CLOSE)


def parse_plural_body(body: str | None) -> PluralBody:
    """Parse ``key{text} key{text} ...`` into a read-only mapping.

    A key is a run of characters that are neither whitespace nor braces and
    must be immediately followed by its ``{...}`` text. Keys without text
    and stray characters are ignored. Category text is opaque: it is not
    parsed for placeholders. A repeated key keeps its last text.

    Example:
        >>> dict(parse_plural_body(" one{item} other{items}"))
        {'one': 'item', 'other': 'items'}
    """
    categories: dict[str, str] = {}
    if not body:
        return MappingProxyType(categories)

    cursor = Cursor(body, 0)
    while not cursor.is_eof:
        cursor = cursor.skip_whitespace()
        if cursor.is_eof:
            break

        if cursor.current == PLACEHOLDER_CLOSE:
            cursor = cursor.advance()
            continue

        if cursor.current == PLACEHOLDER_OPEN:
            # Text without a key
            end = skip_braced(cursor)
            if end is None:
                break
            cursor = end
            continue

        key_start = cursor
        while not cursor.is_eof and not _is_key_boundary(cursor.current):
            cursor = cursor.advance()
        key = key_start.slice_to(cursor.pos)

        if cursor.is_eof or cursor.current != PLACEHOLDER_OPEN:
            continue

        end = skip_braced(cursor)
        if end is None:
            break
        categories[key] = cursor.advance().slice_to(end.pos - 1)
        cursor = end

    return MappingProxyType(categories)
