"""Template tokenizer.

Splits a template into literal text and placeholder segments. Brace matching
is depth-aware so that plural bodies like ``{n, plural, one{a} other{b}}``
stay inside a single placeholder.

Python 3.13+. Zero external dependencies.
"""

from msgformatter.constants import PLACEHOLDER_CLOSE, PLACEHOLDER_OPEN
from msgformatter.diagnostics import SourceSpan

from .ast import PlaceholderSegment, Segment, TextSegment
from .cursor import Cursor

__all__ = ["skip_braced", "tokenize"]


def skip_braced(cursor: Cursor) -> Cursor | None:
    """Advance past a brace group starting at ``cursor``.

    Args:
        cursor: Cursor positioned on an opening brace

    Returns:
        Cursor just past the matching closing brace, or None if the input
        ends before the group is closed.

    Example:
        >>> skip_braced(Cursor("{a{b}c}d", 0)).pos
        7
        >>> skip_braced(Cursor("{a{b}", 0)) is None
        True
    """
    depth = 0
    while not cursor.is_eof:
        char = cursor.current
        cursor = cursor.advance()
        if char == PLACEHOLDER_OPEN:
            depth += 1
        elif char == PLACEHOLDER_CLOSE:
            depth -= 1
            if depth == 0:
                return cursor
    return None


def _match_braces(template: str) -> dict[int, int]:
    """Map the offset of every matched ``{`` to the offset of its ``}``.

    Single pass with a stack of open offsets; its length is the current
    depth. Unmatched braces of either kind are absent from the result.
    """
    matches: dict[int, int] = {}
    open_offsets: list[int] = []
    for index, char in enumerate(template):
        if char == PLACEHOLDER_OPEN:
            open_offsets.append(index)
        elif char == PLACEHOLDER_CLOSE and open_offsets:
            matches[open_offsets.pop()] = index
    return matches


def tokenize(template: str) -> tuple[Segment, ...]:
    """Split a template into ordered segments.

    Literal text accumulates until a placeholder opens or input ends, so no
    two text segments are ever adjacent and empty text is never emitted.
    A ``}`` outside any placeholder is literal, and so is a ``{`` that is
    never closed; balanced placeholders after it are still recognized.

    Args:
        template: Template source

    Returns:
        Tuple of TextSegment and PlaceholderSegment in template order

    Example:
        >>> tokenize("Hi {name}!")
        (TextSegment(text='Hi '), PlaceholderSegment(raw='name', ...), TextSegment(text='!'))
        >>> tokenize("{a {b}")
        (TextSegment(text='{a '), PlaceholderSegment(raw='b', ...))
    """
    matches = _match_braces(template)
    segments: list[Segment] = []
    text_start = 0
    cursor = Cursor(template, 0)

    while not cursor.is_eof:
        if cursor.pos not in matches:
            cursor = cursor.advance()
            continue

        # Jumping past the match keeps nested groups inside this placeholder
        end = Cursor(template, matches[cursor.pos] + 1)

        if cursor.pos > text_start:
            segments.append(TextSegment(template[text_start : cursor.pos]))
        segments.append(
            PlaceholderSegment(
                raw=template[cursor.pos + 1 : end.pos - 1],
                span=SourceSpan(start=cursor.pos, end=end.pos),
            )
        )
        text_start = end.pos
        cursor = end

    if text_start < len(template):
        segments.append(TextSegment(template[text_start:]))

    return tuple(segments)
