"""
GeneratedProject - validated output of one generation call.

Never partially valid: parse_generated_project() either returns a whole
GeneratedProject or raises.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class GeneratedFile:
    name: str
    content: str
    language: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "content": self.content}
        if self.language:
            data["language"] = self.language
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GeneratedFile":
        return cls(
            name=data["name"],
            content=data["content"],
            language=data.get("language"),
        )


@dataclass(frozen=True)
class GeneratedProject:
    summary: str = ""
    files: tuple[GeneratedFile, ...] = field(default_factory=tuple)
