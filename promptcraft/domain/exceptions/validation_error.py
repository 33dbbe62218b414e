"""
DomainValidationError - Raised when a business rule is violated.
"""

from promptcraft.domain.result import ErrorKind


class DomainValidationError(Exception):
    """Exception raised for domain validation errors."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
