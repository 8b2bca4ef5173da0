"""Structured exception classes for media type handling."""

import json
from typing import Any, Dict, Optional


class MediaTypeError(Exception):
    """Base exception for all media type errors.

    This exception serves as the parent class for every error raised
    by the package, providing a consistent interface for error
    handling and reporting.

    :param message: Human-readable error message
    :param code: Optional error code for programmatic handling
    :param details: Optional dictionary containing additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize the exception with message, code, and details."""
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def __reduce__(self):
        return (self.__class__, (self.message, self.code, self.details))

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format.

        :return: Dictionary containing error code, message, and details
        """
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def to_json(self) -> str:
        """Convert exception to JSON string.

        :return: JSON-encoded string representation of the exception
        """
        return json.dumps(self.to_dict())


class InvalidArgumentError(MediaTypeError, ValueError):
    """Raised when an argument is present but unusable.

    Signals a programming error, such as a blank parameter name or an
    out of range error index. Callers are not expected to recover.

    :param message: Description of the invalid argument
    :param argument: Optional name of the offending argument
    """

    def __init__(self, message: str, argument: Optional[str] = None):
        """Initialize invalid argument error with message and argument name."""
        details = {}
        if argument:
            details["argument"] = argument
        super().__init__(message=message, code="INVALID_ARGUMENT", details=details)
        self.argument = argument

    def __reduce__(self):
        return (self.__class__, (self.message, self.argument))


class NullArgumentError(MediaTypeError, TypeError):
    """Raised when a required argument is ``None``.

    :param argument: Name of the missing argument
    """

    def __init__(self, argument: str):
        """Initialize null argument error for the named argument."""
        super().__init__(
            message=f"{argument} cannot be None",
            code="NULL_ARGUMENT",
            details={"argument": argument},
        )
        self.argument = argument

    def __reduce__(self):
        return (self.__class__, (self.argument,))


class MediaTypeSyntaxError(MediaTypeError, ValueError):
    """Raised when a string cannot be parsed as a media type.

    Carries the full input string, the reason it was rejected and,
    when known, the position of the offending character.

    :param input: The input string being parsed
    :param reason: A string explaining why the input could not be parsed
    :param index: Position of the parse error, or -1 if not known
    :raises NullArgumentError: If input or reason is None
    :raises InvalidArgumentError: If index is below -1 or past the end of input
    """

    def __init__(self, input: str, reason: str, index: int = -1):
        """Initialize syntax error with input, reason and optional index."""
        if input is None:
            raise NullArgumentError("input")
        if reason is None:
            raise NullArgumentError("reason")
        if index < -1:
            raise InvalidArgumentError(
                "Index value cannot be less than -1", argument="index"
            )
        if index > len(input):
            raise InvalidArgumentError(
                "Index value cannot exceed the length of the input string",
                argument="index",
            )

        super().__init__(
            message=reason,
            code="SYNTAX_ERROR",
            details={"input": input, "index": index},
        )
        self.input = input
        self.reason = reason
        self.index = index

    def __reduce__(self):
        return (self.__class__, (self.input, self.reason, self.index))

    def __str__(self) -> str:
        if self.index > -1:
            return f"{self.reason} at index {self.index}: {self.input}"
        return f"{self.reason}: {self.input}"


__all__ = [
    "MediaTypeError",
    "InvalidArgumentError",
    "NullArgumentError",
    "MediaTypeSyntaxError",
]
