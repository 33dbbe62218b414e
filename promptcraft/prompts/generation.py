"""
Project generation prompts.
"""


class GenerationPrompts:
    """Prompts for turning a project description into {summary, files}."""

    PROJECT_SYSTEM = """You are a senior full-stack engineer. Given a user's project description, respond with JSON only.
The JSON must follow this exact TypeScript interface:
{
  "summary": string;
  "files": Array<{ "name": string; "language"?: string; "content": string }>;
}

Guidelines:
- summary: concise explanation of the generated project and how to run it.
- files: produce all essential files needed to run the project. Include HTML/CSS/JS or React files as appropriate.
- Use double quotes in JSON. No Markdown fences or extra commentary. Return valid JSON only."""

    @staticmethod
    def build_messages(prompt: str) -> list[dict]:
        return [
            {"role": "system", "content": GenerationPrompts.PROJECT_SYSTEM},
            {"role": "user", "content": prompt},
        ]
