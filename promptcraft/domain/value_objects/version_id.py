"""
VersionId Value Object - UUID wrapper for project version identity.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class VersionId:
    value: str

    def __post_init__(self):
        if not self.value:
            raise ValueError("Version ID cannot be empty")
        UUID(self.value)

    def __str__(self) -> str:
        return self.value
