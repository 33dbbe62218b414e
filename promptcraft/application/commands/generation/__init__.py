"""Generation commands."""

from .generate_project import GenerateProjectCommand, GenerateProjectHandler

__all__ = [
    "GenerateProjectCommand",
    "GenerateProjectHandler",
]
