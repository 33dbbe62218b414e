"""
Preview composer - one HTML document from a generated project's files.

Layout:
    <head>  every .css file as a <style> block
    <body>  the first .html file, then every script file as <script type="module">

Files of the same kind keep the order they have in the project. The result
is untrusted model output: render it in an iframe with PREVIEW_SANDBOX and
never with same-origin privileges.
"""

import re
from typing import Optional

from promptcraft.domain.entities.generated_project import GeneratedFile, GeneratedProject

PREVIEW_SANDBOX = "allow-scripts"

HTML_EXTENSIONS = (".html", ".htm")
CSS_EXTENSIONS = (".css",)
SCRIPT_EXTENSIONS = (".js", ".mjs", ".ts")

_DOCUMENT = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width, initial-scale=1" />
{styles}
</head>
<body>
{body}
{scripts}
</body>
</html>"""


def _has_extension(file: GeneratedFile, extensions: tuple[str, ...]) -> bool:
    return file.name.lower().endswith(extensions)


def _escape_closing_tag(content: str, tag: str) -> str:
    # "</script" in any letter case inside a script block would end it early
    return re.sub(r"</(" + tag + r")", r"<\\/\1", content, flags=re.IGNORECASE)


def compose_preview(project: GeneratedProject) -> Optional[str]:
    """Return the preview document, or None when the project has no HTML entry point."""
    html_file = next(
        (f for f in project.files if _has_extension(f, HTML_EXTENSIONS)), None
    )
    if html_file is None:
        return None

    styles = "\n".join(
        f"<style>{_escape_closing_tag(f.content, 'style')}</style>"
        for f in project.files
        if _has_extension(f, CSS_EXTENSIONS)
    )
    scripts = "\n".join(
        f'<script type="module">{_escape_closing_tag(f.content, "script")}</script>'
        for f in project.files
        if _has_extension(f, SCRIPT_EXTENSIONS)
    )

    return _DOCUMENT.format(styles=styles, body=html_file.content, scripts=scripts)
