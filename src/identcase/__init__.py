"""
identcase - convert free text to identifier naming conventions.

This package provides snake_case, camelCase, dot.case and kebab-case
conversion with strict input validation, plus a small command-line front end.
"""

from .case_utils import (
    ConversionResult,
    convert,
    convert_all,
    convert_to_camel,
    convert_to_dot,
    convert_to_kebab,
    convert_to_snake,
    try_convert,
)
from .errors import (
    CaseConversionError,
    EmptyInputError,
    NoValidCharactersError,
    NullInputError,
    TypeMismatchError,
    UndefinedInputError,
)
from .styles import Style
from .utils import debug_enabled, debug_print
from .validator import UNDEFINED

__version__ = "1.0.0"
__all__ = [
    "CaseConversionError",
    "ConversionResult",
    "EmptyInputError",
    "NoValidCharactersError",
    "NullInputError",
    "Style",
    "TypeMismatchError",
    "UNDEFINED",
    "UndefinedInputError",
    "convert",
    "convert_all",
    "convert_to_camel",
    "convert_to_dot",
    "convert_to_kebab",
    "convert_to_snake",
    "debug_enabled",
    "debug_print",
    "try_convert",
]
