"""
GenerationBackendError - Transport failure or non-2xx answer from the generation backend.

The backend's error payload is kept verbatim in `payload` so callers can show
or log exactly what the backend said.
"""

from typing import Optional

from promptcraft.domain.result import ErrorKind


class GenerationBackendError(Exception):
    """Raised when the generation backend call fails."""

    kind = ErrorKind.GENERATION_BACKEND

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        payload: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload
