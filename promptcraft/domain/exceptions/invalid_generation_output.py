"""
InvalidGenerationOutputError - The backend answered, but not with a usable project.

Two flavours:
- MalformedOutputError: the text is not JSON at all
- UnexpectedShapeError: valid JSON, but not an object
"""

from promptcraft.domain.result import ErrorKind


class InvalidGenerationOutputError(Exception):
    """Base class for rejected generation output."""

    kind = ErrorKind.MALFORMED_OUTPUT

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MalformedOutputError(InvalidGenerationOutputError):
    kind = ErrorKind.MALFORMED_OUTPUT


class UnexpectedShapeError(InvalidGenerationOutputError):
    kind = ErrorKind.UNEXPECTED_SHAPE
