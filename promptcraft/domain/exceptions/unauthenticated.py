"""
UnauthenticatedError - Raised when an operation needs a signed-in user and there is none.
"""

from promptcraft.domain.result import ErrorKind


class UnauthenticatedError(Exception):
    """Raised when no user context is available"""

    kind = ErrorKind.UNAUTHENTICATED

    def __init__(self, message: str = "User not authenticated"):
        super().__init__(message)
