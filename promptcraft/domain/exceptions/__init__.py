"""
DOMAIN EXCEPTIONS - Failures scoped to a single operation

Every exception carries an ErrorKind so a store-boundary Err can be turned
back into the matching exception with error_from().
"""

from promptcraft.domain.result import Err, ErrorKind
from promptcraft.domain.exceptions.unauthenticated import UnauthenticatedError
from promptcraft.domain.exceptions.no_active_conversation import (
    NoActiveConversationError,
)
from promptcraft.domain.exceptions.generation_backend import GenerationBackendError
from promptcraft.domain.exceptions.invalid_generation_output import (
    InvalidGenerationOutputError,
    MalformedOutputError,
    UnexpectedShapeError,
)
from promptcraft.domain.exceptions.persistence import PersistenceError
from promptcraft.domain.exceptions.entity_not_found import EntityNotFoundError
from promptcraft.domain.exceptions.validation_error import DomainValidationError
from promptcraft.domain.exceptions.generation_in_progress import (
    GenerationInProgressError,
)

_BY_KIND = {
    ErrorKind.UNAUTHENTICATED: UnauthenticatedError,
    ErrorKind.NO_ACTIVE_CONVERSATION: NoActiveConversationError,
    ErrorKind.GENERATION_BACKEND: GenerationBackendError,
    ErrorKind.MALFORMED_OUTPUT: MalformedOutputError,
    ErrorKind.UNEXPECTED_SHAPE: UnexpectedShapeError,
    ErrorKind.PERSISTENCE: PersistenceError,
    ErrorKind.NOT_FOUND: EntityNotFoundError,
    ErrorKind.VALIDATION: DomainValidationError,
    ErrorKind.GENERATION_IN_PROGRESS: GenerationInProgressError,
}


def error_from(err: Err) -> Exception:
    """Build the exception matching an Err so write paths can raise it."""
    return _BY_KIND[err.kind](err.detail)


__all__ = [
    "UnauthenticatedError",
    "NoActiveConversationError",
    "GenerationBackendError",
    "InvalidGenerationOutputError",
    "MalformedOutputError",
    "UnexpectedShapeError",
    "PersistenceError",
    "EntityNotFoundError",
    "DomainValidationError",
    "GenerationInProgressError",
    "error_from",
]
