"""Message formatter - renders a template against named parameters.

Python 3.13+. Zero external dependencies.

Thread Safety:
    SimpleMessageFormatter holds no state; every call builds its own
    segments and expressions, so one instance may be shared freely.
"""

import logging
from collections.abc import Mapping
from typing import Protocol

from msgformatter.diagnostics import MessageFormatError
from msgformatter.syntax import PlaceholderSegment, TextSegment, parse_placeholder, tokenize

from .renderer import render_placeholder
from .value_types import ParameterValue

__all__ = ["MessageFormatter", "SimpleMessageFormatter", "format_message"]

logger = logging.getLogger(__name__)


class MessageFormatter(Protocol):
    """Anything that renders a template against named parameters."""

    def format(self, template: str, parameters: Mapping[str, ParameterValue]) -> str:
        """Render ``template``."""
        ...


class SimpleMessageFormatter:
    """Minimal message formatter.

    Supports ``{name}``, ``{name, number}`` and
    ``{name, plural, one{...} other{...}}`` placeholders.

    Example:
        >>> SimpleMessageFormatter().format("Test number: {number}", {"number": 5})
        'Test number: 5'
        >>> SimpleMessageFormatter().format(
        ...     "{min, plural, one{character} other{characters}}", {"min": 2}
        ... )
        'characters'
    """

    __slots__ = ()

    def format(self, template: str, parameters: Mapping[str, ParameterValue]) -> str:
        """Render ``template`` with ``parameters``.

        Fail-fast: the first invalid placeholder aborts the call.

        Args:
            template: Template source
            parameters: Parameter values by name

        Returns:
            Fully substituted string

        Raises:
            MessageFormatError: On the first invalid placeholder
        """
        segments = tokenize(template)
        logger.debug("Formatting template with %d segment(s)", len(segments))

        parts: list[str] = []
        try:
            for segment in segments:
                match segment:
                    case TextSegment(text=text):
                        parts.append(text)
                    case PlaceholderSegment(raw=raw, span=span):
                        expression = parse_placeholder(raw, span)
                        parts.append(render_placeholder(expression, parameters))
        except MessageFormatError as e:
            logger.debug("Formatting failed: %s", e)
            raise

        return "".join(parts)


_DEFAULT_FORMATTER = SimpleMessageFormatter()


def format_message(
    template: str, parameters: Mapping[str, ParameterValue] | None = None
) -> str:
    """Render ``template`` with a shared SimpleMessageFormatter.

    ``None`` parameters mean an empty mapping.
    """
    return _DEFAULT_FORMATTER.format(template, parameters or {})
