"""
Exception types raised by transaction validation.

Every failure is an "invalid argument" at heart, so all of them share
InvalidArgumentError as a base. Callers that only care whether a record
was rejected can catch the base class; callers that need the reason can
catch the specific subclass.
"""

from typing import Optional


class InvalidArgumentError(ValueError):
    """
    Base error for a record that cannot be validated or saved.

    Attributes:
        message: Human-readable reason
        cause: The underlying exception, if this error wraps one
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class FieldsNotPopulatedError(InvalidArgumentError):
    """Raised when the mandatory identifier bits are not populated."""

    def __init__(self, message: str = "fields not correctly populated"):
        super().__init__(message)


class ValidationFailedError(InvalidArgumentError):
    """Raised by the save step when auxiliary validation is required."""

    def __init__(self, message: str = "validation failed"):
        super().__init__(message)


class ProcessingError(InvalidArgumentError):
    """Raised when anything fails while checking or saving a record."""

    def __init__(
        self,
        message: str = "processing error",
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, cause=cause)
