"""Input validation run before any conversion work."""

from .errors import EmptyInputError, NullInputError, TypeMismatchError, UndefinedInputError


class _Undefined:
    """Marker for an argument the caller never supplied."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "UNDEFINED"


UNDEFINED = _Undefined()


def validate(value=UNDEFINED) -> str:
    """Return ``value`` unchanged if it is convertible text, otherwise raise.

    Raises:
        NullInputError: value is None
        UndefinedInputError: value was not supplied
        TypeMismatchError: value is not a str
        EmptyInputError: value is empty or whitespace only
    """
    if value is None:
        raise NullInputError()

    if value is UNDEFINED:
        raise UndefinedInputError()

    if not isinstance(value, str):
        raise TypeMismatchError(type(value).__name__)

    if not value.strip():
        raise EmptyInputError()

    return value
