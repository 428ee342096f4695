"""Join a word sequence into the canonical string of a style."""

from typing import List

from .errors import NoValidCharactersError
from .styles import Style


def render(words: List[str], style) -> str:
    """Render ``words`` in ``style``.

    Examples:
        >>> render(['user', 'FULL', 'name'], Style.CAMEL)
        'userFullName'
        >>> render(['HTTPS', 'Connection'], Style.KEBAB)
        'https-connection'
    """
    style = Style.from_name(style)

    if not words:
        raise NoValidCharactersError()

    if style is Style.CAMEL:
        return words[0].lower() + "".join(word.capitalize() for word in words[1:])

    return style.join_char.join(word.lower() for word in words)
