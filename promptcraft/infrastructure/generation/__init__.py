"""
Generation backends - adapters for the GenerationBackend port.

- OpenAIGenerationBackend: calls an OpenAI-compatible chat endpoint directly
- HttpGenerationBackend: posts the prompt to a hosted generate function
"""

from promptcraft.infrastructure.generation.http_generation_backend import (
    HttpGenerationBackend,
)
from promptcraft.infrastructure.generation.openai_generation_backend import (
    OpenAIGenerationBackend,
)

__all__ = [
    "HttpGenerationBackend",
    "OpenAIGenerationBackend",
]
