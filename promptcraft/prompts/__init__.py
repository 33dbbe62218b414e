"""
Centralized prompt management for project generation.
"""

from promptcraft.prompts.generation import GenerationPrompts

__all__ = [
    "GenerationPrompts",
]
