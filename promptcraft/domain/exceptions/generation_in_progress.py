"""
GenerationInProgressError - A prompt is already being generated for this conversation.
"""

from promptcraft.domain.result import ErrorKind


class GenerationInProgressError(Exception):
    kind = ErrorKind.GENERATION_IN_PROGRESS

    def __init__(self, message: str = "A generation is already running"):
        super().__init__(message)
