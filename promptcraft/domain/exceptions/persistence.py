"""
PersistenceError - A durable-store operation failed.
"""

from promptcraft.domain.result import ErrorKind


class PersistenceError(Exception):
    kind = ErrorKind.PERSISTENCE

    def __init__(self, message: str = "Durable store operation failed"):
        super().__init__(message)
        self.message = message
