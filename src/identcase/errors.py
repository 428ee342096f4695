"""Input validation failures raised by the case converters."""


class CaseConversionError(ValueError):
    """Base class for every failure a conversion can raise.

    ``code`` is a stable identifier callers can switch on without parsing
    the message.
    """

    code = "CaseConversionError"
    default_message = "Input could not be converted"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NullInputError(CaseConversionError):
    code = "NullInput"
    default_message = "Input cannot be null"


class UndefinedInputError(CaseConversionError):
    code = "UndefinedInput"
    default_message = "Input cannot be undefined"


class TypeMismatchError(CaseConversionError, TypeError):
    """Raised when the input is not a ``str``; ``received`` names its type."""

    code = "TypeMismatch"

    def __init__(self, received: str):
        self.received = received
        super().__init__(f"Input must be a string, received {received}")


class EmptyInputError(CaseConversionError):
    code = "EmptyInput"
    default_message = "Input cannot be an empty or whitespace-only string"


class NoValidCharactersError(CaseConversionError):
    code = "NoValidCharacters"
    default_message = "Input contains no valid characters to convert"
