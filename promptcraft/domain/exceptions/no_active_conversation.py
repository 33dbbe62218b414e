"""
NoActiveConversationError - Raised when an operation requires a selected conversation.
"""

from promptcraft.domain.result import ErrorKind


class NoActiveConversationError(Exception):
    kind = ErrorKind.NO_ACTIVE_CONVERSATION

    def __init__(self, message: str = "No conversation selected"):
        super().__init__(message)
