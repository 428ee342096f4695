"""Word boundary detection.

Text is split with one left-to-right scan: every character is classified
(lowercase, uppercase, digit, separator, other) and each transition between
the previous character's class and the current one decides whether a new
word starts. No dictionaries or locale data are involved; only ASCII
letters and digits ever form words.
"""

from enum import Enum
from typing import FrozenSet, List, Optional, Tuple

from .errors import NoValidCharactersError
from .styles import Style

ASCII_LOWER = frozenset("abcdefghijklmnopqrstuvwxyz")
ASCII_UPPER = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
ASCII_DIGITS = frozenset("0123456789")


class CharClass(Enum):
    LOWER = "lower"
    UPPER = "upper"
    DIGIT = "digit"
    SEPARATOR = "separator"
    OTHER = "other"


Transition = Tuple[CharClass, CharClass]

# "helloWorld" -> hello|World, "version2Update" -> version2|Update
CASE_TRANSITIONS: FrozenSet[Transition] = frozenset(
    {
        (CharClass.LOWER, CharClass.UPPER),
        (CharClass.DIGIT, CharClass.UPPER),
    }
)

# dot.case only splits "helloWorld" style humps: "HelloWorld" -> Hello|World
DOT_TRANSITIONS: FrozenSet[Transition] = frozenset({(CharClass.LOWER, CharClass.UPPER)})

# kebab-case additionally separates letters from digits: "html5" -> html|5
KEBAB_TRANSITIONS: FrozenSet[Transition] = CASE_TRANSITIONS | frozenset(
    {
        (CharClass.LOWER, CharClass.DIGIT),
        (CharClass.UPPER, CharClass.DIGIT),
        (CharClass.DIGIT, CharClass.LOWER),
    }
)


def classify_char(char: str, separators: FrozenSet[str] = frozenset()) -> CharClass:
    """Classify a single character; whitespace always counts as a separator."""
    if char in ASCII_LOWER:
        return CharClass.LOWER
    if char in ASCII_UPPER:
        return CharClass.UPPER
    if char in ASCII_DIGITS:
        return CharClass.DIGIT
    if char.isspace() or char in separators:
        return CharClass.SEPARATOR
    return CharClass.OTHER


def _starts_word(
    previous: Optional[CharClass],
    current: CharClass,
    following: Optional[CharClass],
    transitions: FrozenSet[Transition],
    split_acronyms: bool,
) -> bool:
    if (previous, current) in transitions:
        return True
    if not split_acronyms:
        return False

    # Last capital of an acronym run begins the next word:
    # "HTTPSConnection" -> HTTPS|Connection
    return (
        previous is CharClass.UPPER
        and current is CharClass.UPPER
        and following is CharClass.LOWER
    )


def scan_words(
    text: str,
    separators: FrozenSet[str] = frozenset(),
    transitions: FrozenSet[Transition] = frozenset(),
    split_acronyms: bool = True,
) -> List[str]:
    """Split ``text`` into words in order of appearance.

    Separator runs collapse into a single boundary. Characters classified as
    OTHER are dropped, but they still sit between their neighbours, so they
    neither create a boundary nor let a transition across them count.

    Args:
        text: Text to scan
        separators: Characters besides whitespace that end a word
        transitions: (previous, current) class pairs that start a new word
        split_acronyms: End an uppercase run before a capitalized word

    Returns:
        List of non-empty words

    Examples:
        >>> scan_words('userFullName', transitions=CASE_TRANSITIONS)
        ['user', 'Full', 'Name']
        >>> scan_words('HTTPSConnection')
        ['HTTPS', 'Connection']
        >>> scan_words('user_full  name', separators=frozenset('_'))
        ['user', 'full', 'name']
    """
    words: List[str] = []
    current: List[str] = []
    previous: Optional[CharClass] = None

    for index, char in enumerate(text):
        char_class = classify_char(char, separators)

        if char_class is CharClass.SEPARATOR:
            _flush(words, current)
        elif char_class is not CharClass.OTHER:
            following = None
            if index + 1 < len(text):
                following = classify_char(text[index + 1], separators)
            if current and _starts_word(
                previous, char_class, following, transitions, split_acronyms
            ):
                _flush(words, current)
            current.append(char)

        previous = char_class

    _flush(words, current)
    return words


def _flush(words: List[str], current: List[str]) -> None:
    if current:
        words.append("".join(current))
        current.clear()


def tokenize(text: str, style) -> List[str]:
    """Split sanitized text into the words of ``style``.

    snake only splits on whitespace runs and never fails; a degenerate input
    yields a single empty word. kebab expects the output of ``sanitize``, in
    which every boundary is already a hyphen, and only splits on separators.

    Raises:
        NoValidCharactersError: no words remain (camel, dot, kebab)
    """
    style = Style.from_name(style)

    if style is Style.SNAKE:
        return text.split() or [""]

    if style is Style.KEBAB:
        # no boundary detection: "a!B" sanitizes to "aB" and must stay one word
        words = scan_words(text, style.separators, split_acronyms=False)
    elif style is Style.DOT:
        words = scan_words(text, style.separators, DOT_TRANSITIONS, split_acronyms=False)
    else:
        words = scan_words(text, style.separators, CASE_TRANSITIONS)

    if not words:
        raise NoValidCharactersError()
    return words
