"""Template syntax package.

Provides the tokenizer, placeholder expression parser and syntax node types.
Separate from runtime to enable tooling (linters, introspection).

Python 3.13+.
"""

from .ast import PlaceholderExpression, PlaceholderSegment, PluralBody, Segment, TextSegment
from .cursor import Cursor
from .expression import parse_placeholder, parse_plural_body, split_arguments
from .tokenizer import skip_braced, tokenize

__all__ = [
    "Cursor",
    "PlaceholderExpression",
    "PlaceholderSegment",
    "PluralBody",
    "Segment",
    "TextSegment",
    "parse_placeholder",
    "parse_plural_body",
    "skip_braced",
    "split_arguments",
    "tokenize",
]
