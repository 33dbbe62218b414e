"""
Generation output parser.

The backend is asked for JSON of the shape

    {"summary": str, "files": [{"name": str, "language"?: str, "content": str}]}

but models wrap it in code fences, drop fields, or return garbage. The hard
line is drawn only at "not JSON" and "not an object"; everything else is
normalized:

- summary: kept if it is a string, otherwise ""
- files:   entries without a string name AND a string content are dropped
- language: kept only when it is a non-empty string

An empty file list is a valid project.
"""

import json
import re
from typing import Any

from promptcraft.domain.entities.generated_project import GeneratedFile, GeneratedProject
from promptcraft.domain.exceptions import MalformedOutputError, UnexpectedShapeError

_LEADING_FENCE = re.compile(r"^```[\w+-]*[ \t]*\n?")
_TRAILING_FENCE = re.compile(r"\n?```\s*$")


def strip_code_fence(raw: str) -> str:
    """Remove one leading ```lang marker and one trailing ``` marker, if present."""
    text = raw.strip()
    text = _LEADING_FENCE.sub("", text, count=1)
    text = _TRAILING_FENCE.sub("", text, count=1)
    return text.strip()


def _normalize_file(entry: Any) -> GeneratedFile | None:
    if not isinstance(entry, dict):
        return None
    name = entry.get("name")
    content = entry.get("content")
    if not isinstance(name, str) or not isinstance(content, str):
        return None

    language = entry.get("language")
    return GeneratedFile(
        name=name,
        content=content,
        language=language if isinstance(language, str) and language else None,
    )


def parse_generated_project(raw: str) -> GeneratedProject:
    """
    Parse raw backend text into a GeneratedProject.

    Raises:
        MalformedOutputError: text is not valid JSON
        UnexpectedShapeError: JSON value is not an object
    """
    text = strip_code_fence(raw)

    try:
        parsed = json.loads(text)
    except ValueError as e:
        raise MalformedOutputError(
            f"Failed to parse generation output as JSON: {e}"
        ) from e

    if not isinstance(parsed, dict):
        raise UnexpectedShapeError(
            f"Generation output is not a JSON object (got {type(parsed).__name__})"
        )

    summary = parsed.get("summary")
    files = parsed.get("files")

    normalized = []
    if isinstance(files, list):
        for entry in files:
            generated_file = _normalize_file(entry)
            if generated_file is not None:
                normalized.append(generated_file)

    return GeneratedProject(
        summary=summary if isinstance(summary, str) else "",
        files=tuple(normalized),
    )
