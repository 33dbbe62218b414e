"""
EntityNotFoundError - Raised when a requested entity does not exist.
"""

from promptcraft.domain.result import ErrorKind


class EntityNotFoundError(Exception):
    """Exception raised when a requested entity is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str = "The requested entity was not found."):
        super().__init__(message)
