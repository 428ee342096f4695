"""Naming conventions the converters can render to."""

from enum import Enum
from typing import Dict, FrozenSet, List

# Extra spellings accepted by Style.from_name, compared case-insensitively
# after normalizing "-", "." and " " to "_".
STYLE_ALIASES: Dict[str, str] = {
    "snake_case": "snake",
    "lower_snake": "snake",
    "underscore": "snake",
    "camel_case": "camel",
    "camelcase": "camel",
    "lower_camel": "camel",
    "dot_case": "dot",
    "dotted": "dot",
    "kebab_case": "kebab",
    "dash": "kebab",
    "dash_case": "kebab",
    "hyphen": "kebab",
}


class Style(str, Enum):
    """One of the four supported identifier conventions."""

    SNAKE = "snake"
    CAMEL = "camel"
    DOT = "dot"
    KEBAB = "kebab"

    def __str__(self):
        return self.value

    @property
    def join_char(self) -> str:
        return _JOIN_CHARS[self]

    @property
    def separators(self) -> FrozenSet[str]:
        """Characters besides whitespace that end a word for this style."""
        return _SEPARATORS[self]

    @classmethod
    def names(cls) -> List[str]:
        return [style.value for style in cls]

    @classmethod
    def from_name(cls, name) -> "Style":
        """Resolve a style from its canonical name or a common spelling.

        Examples:
            >>> Style.from_name('camelCase')
            <Style.CAMEL: 'camel'>
            >>> Style.from_name('kebab-case')
            <Style.KEBAB: 'kebab'>
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise ValueError(f"Style name must be a string, received {type(name).__name__}")

        key = name.strip().lower()
        for char in "-. ":
            key = key.replace(char, "_")

        key = STYLE_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            valid = ", ".join(cls.names())
            raise ValueError(f"Unknown style '{name}'. Valid styles: {valid}") from None


_JOIN_CHARS = {
    Style.SNAKE: "_",
    Style.CAMEL: "",
    Style.DOT: ".",
    Style.KEBAB: "-",
}

_SEPARATORS = {
    Style.SNAKE: frozenset(),
    Style.CAMEL: frozenset("_-"),
    # dot.case output stays splittable by its own join character
    Style.DOT: frozenset("_-."),
    Style.KEBAB: frozenset("_-"),
}
