"""
Generation Backend Port - text generation from a prompt.
Implementations: promptcraft/infrastructure/generation/

generate() returns the raw, unvalidated text. Any transport or backend
failure must be raised as GenerationBackendError.
"""

from abc import ABC, abstractmethod


class GenerationBackend(ABC):
    @abstractmethod
    async def generate(self, prompt: str) -> str: ...
