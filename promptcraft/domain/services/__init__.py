"""
DOMAIN SERVICES - Pure functions, no I/O

- project_parser:   untrusted backend text → GeneratedProject
- message_merge:    identity-deduplicated, ordered message merge
- preview_composer: GeneratedProject → sandboxed HTML document
"""

from promptcraft.domain.services.project_parser import (
    parse_generated_project,
    strip_code_fence,
)
from promptcraft.domain.services.message_merge import merge_messages
from promptcraft.domain.services.preview_composer import (
    PREVIEW_SANDBOX,
    compose_preview,
)

__all__ = [
    "parse_generated_project",
    "strip_code_fence",
    "merge_messages",
    "PREVIEW_SANDBOX",
    "compose_preview",
]
