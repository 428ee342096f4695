"""Conversion of free text to identifier naming conventions.

Every conversion runs the same pipeline, parameterized by the target style:
validate the input, sanitize it, split it into words and render the words.
The first failure propagates unchanged; nothing is returned partially.
"""

from typing import Dict, NamedTuple, Optional

from .errors import CaseConversionError
from .renderer import render
from .sanitizer import sanitize
from .styles import Style
from .tokenizer import tokenize
from .utils import debug_enabled, debug_print, preview
from .validator import UNDEFINED, validate


class ConversionResult(NamedTuple):
    """Outcome of one conversion: exactly one of ``text``/``error`` is set."""

    style: Style
    text: Optional[str] = None
    error: Optional[CaseConversionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_code(self) -> Optional[str]:
        return self.error.code if self.error is not None else None


def convert(value=UNDEFINED, style=Style.SNAKE) -> str:
    """Convert ``value`` to ``style``.

    Args:
        value: Text to convert
        style: A Style or any name accepted by Style.from_name

    Returns:
        The converted identifier

    Raises:
        CaseConversionError: one of NullInputError, UndefinedInputError,
            TypeMismatchError, EmptyInputError, NoValidCharactersError
        ValueError: unknown style name

    Examples:
        >>> convert('hello world! test', 'camel')
        'helloWorldTest'
        >>> convert('HelloWorld', Style.DOT)
        'hello.world'
    """
    style = Style.from_name(style)
    if debug_enabled:
        debug_print(f"Converting {preview(value)} to {style}")  # pragma: no mutate

    try:
        text = validate(value)
        sanitized = sanitize(text, style)
        if debug_enabled:
            debug_print(f"Sanitized for {style}: {preview(sanitized)}")  # pragma: no mutate
        words = tokenize(sanitized, style)
    except CaseConversionError as e:
        debug_print(f"Conversion to {style} failed: {e.code}")  # pragma: no mutate
        raise

    debug_print(f"Tokenized into {len(words)} word(s): {words}")  # pragma: no mutate
    return render(words, style)


def convert_to_snake(value=UNDEFINED) -> str:
    """Convert text to snake_case.

    Only whitespace is normalized: runs become a single underscore and the
    result is lowercased. Punctuation and existing underscores are kept.

    Examples:
        >>> convert_to_snake('this is an example')
        'this_is_an_example'
    """
    return convert(value, Style.SNAKE)


def convert_to_camel(value=UNDEFINED) -> str:
    """Convert text to camelCase.

    Examples:
        >>> convert_to_camel('hello world')
        'helloWorld'
        >>> convert_to_camel('hello__world')
        'helloWorld'
    """
    return convert(value, Style.CAMEL)


def convert_to_dot(value=UNDEFINED) -> str:
    """Convert text to dot.case.

    Examples:
        >>> convert_to_dot('HelloWorld')
        'hello.world'
    """
    return convert(value, Style.DOT)


def convert_to_kebab(value=UNDEFINED) -> str:
    """Convert text to kebab-case.

    Examples:
        >>> convert_to_kebab('HTTPSConnection')
        'https-connection'
        >>> convert_to_kebab('user_full name!')
        'user-full-name'
    """
    return convert(value, Style.KEBAB)


def try_convert(value=UNDEFINED, style=Style.SNAKE) -> ConversionResult:
    """Like convert, but report conversion failures as a value instead of raising.

    Only the CaseConversionError family is captured; an unknown style name
    still raises ValueError.
    """
    style = Style.from_name(style)
    try:
        return ConversionResult(style, text=convert(value, style))
    except CaseConversionError as e:
        return ConversionResult(style, error=e)


def convert_all(value=UNDEFINED) -> Dict[Style, ConversionResult]:
    """Convert ``value`` to every style, in Style declaration order."""
    return {style: try_convert(value, style) for style in Style}
