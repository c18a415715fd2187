"""msgformatter - minimal message formatting with number and plural placeholders.

Renders templates such as ``"{n, plural, one{file} other{files}} deleted"``
against a mapping of named parameters.

Public API:
    format_message - Render a template with the shared formatter
    SimpleMessageFormatter - Formatter class
    MessageFormatter - Protocol for formatter implementations
    parse_template - Split a template into text and placeholder segments
    ParameterValue - Type alias for accepted parameter values

Exceptions:
    MessageFormatError - Base exception class (a ValueError)
    EmptyParameterNameError - Placeholder without a name
    MissingParameterError - Referenced parameter not supplied
    MissingPluralKeysError - Plural body lacks one/other
    PluralValueError - Plural operand is not an integer

Submodules:
    msgformatter.syntax - Tokenizer, expression parser and node types
    msgformatter.runtime - Renderer and plural resolution
    msgformatter.diagnostics - Error types and diagnostic formatting
    msgformatter.introspection - Parameter extraction
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    EmptyParameterNameError,
    MessageFormatError,
    MissingParameterError,
    MissingPluralKeysError,
    PluralValueError,
)
from .runtime import MessageFormatter, ParameterValue, SimpleMessageFormatter, format_message
from .syntax import tokenize as parse_template

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("msgformatter")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "EmptyParameterNameError",
    "MessageFormatError",
    "MessageFormatter",
    "MissingParameterError",
    "MissingPluralKeysError",
    "ParameterValue",
    "PluralValueError",
    "SimpleMessageFormatter",
    "__version__",
    "format_message",
    "parse_template",
]
