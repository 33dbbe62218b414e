"""
Result - tagged outcome of a store-boundary call.

    Ok(value)          the call succeeded
    Err(kind, detail)  the call failed; kind is an ErrorKind

Callers branch with isinstance() instead of matching error strings:

    result = await store_call("list conversations", repo.get_by_user(user_id))
    if isinstance(result, Err):
        ...
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    NO_ACTIVE_CONVERSATION = "no_active_conversation"
    GENERATION_BACKEND = "generation_backend"
    MALFORMED_OUTPUT = "malformed_output"
    UNEXPECTED_SHAPE = "unexpected_shape"
    PERSISTENCE = "persistence"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    GENERATION_IN_PROGRESS = "generation_in_progress"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    detail: str


Result = Union[Ok[T], Err]
