"""Per-style removal of characters that can never be part of a word."""

from .styles import Style
from .tokenizer import KEBAB_TRANSITIONS, CharClass, classify_char, scan_words


def sanitize(text: str, style) -> str:
    """Strip characters outside the alphabet of ``style``.

    The depth of normalization differs per style:

    - snake: leading/trailing whitespace only; punctuation, underscores and
      casing are left alone.
    - camel, dot: drop everything except ASCII letters, digits, underscores,
      whitespace, hyphens (and dots for dot) before any word splitting, so
      punctuation never acts as a boundary.
    - kebab: boundaries are detected on the raw text first and marked with
      hyphens, then everything but letters, digits and hyphens is dropped.
      Hyphen runs collapse and leading/trailing hyphens are trimmed.

    Examples:
        >>> sanitize('hello world! test', Style.CAMEL)
        'hello world test'
        >>> sanitize('user_full name!', Style.KEBAB)
        'user-full-name'
        >>> sanitize('  Mixed Case!  ', Style.SNAKE)
        'Mixed Case!'
    """
    style = Style.from_name(style)

    if style is Style.SNAKE:
        return text.strip()

    if style is Style.KEBAB:
        return style.join_char.join(scan_words(text, style.separators, KEBAB_TRANSITIONS))

    return "".join(
        char for char in text if classify_char(char, style.separators) is not CharClass.OTHER
    )
