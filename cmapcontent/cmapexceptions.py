__all__ = [
    "CMapException",
    "CMapSyntaxError",
    "UnexpectedEndOfInput",
    "InvalidDictionaryKey",
    "UnexpectedCloseBracket",
    "UnexpectedGreaterGreater",
    "CMapTypeError",
    "CMapValueError",
]


class CMapException(Exception):
    """Base class for CMap content-related exceptions."""


class CMapSyntaxError(CMapException):
    """Raised when the content stream is not well formed."""


class UnexpectedEndOfInput(CMapSyntaxError, EOFError):
    """Raised when the content ends inside a dictionary or array."""


class InvalidDictionaryKey(CMapSyntaxError):
    """Raised when a dictionary key is not a name."""

    def __init__(self, message: str, token: str = "") -> None:
        super().__init__(message)
        self.token = token


class UnexpectedCloseBracket(CMapSyntaxError):
    """Raised when a stray ``]`` is found where a value was expected."""


class UnexpectedGreaterGreater(CMapSyntaxError):
    """Raised when a stray ``>>`` is found where a value was expected."""


class CMapTypeError(CMapException, TypeError):
    pass


class CMapValueError(CMapException, ValueError):
    pass
