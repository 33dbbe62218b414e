"""
OpenAI-compatible generation backend (DeepSeek by default).

Sends the project system prompt plus the user's prompt through
services.llm_client.chat_completion and returns the raw completion text.
"""

import logging
from typing import Optional

from openai import APIStatusError, OpenAIError

from promptcraft.config.settings import Config
from promptcraft.domain.exceptions import GenerationBackendError
from promptcraft.domain.ports.generation_backend import GenerationBackend
from promptcraft.prompts import GenerationPrompts
from promptcraft.services.llm_client import CircuitOpenError, chat_completion

logger = logging.getLogger(__name__)


class OpenAIGenerationBackend(GenerationBackend):
    def __init__(
        self,
        client,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ):
        """
        Args:
            client: AsyncOpenAI client instance
            model/temperature/max_tokens: default to the GENERATION_* settings
        """
        self._client = client
        self._model = model or Config.GENERATION_MODEL
        self._temperature = (
            Config.GENERATION_TEMPERATURE if temperature is None else temperature
        )
        self._max_tokens = max_tokens or Config.GENERATION_MAX_TOKENS

    async def generate(self, prompt: str) -> str:
        prompt = prompt.strip()
        if not prompt:
            raise GenerationBackendError("Missing prompt", status_code=400)

        try:
            response = await chat_completion(
                client=self._client,
                messages=GenerationPrompts.build_messages(prompt),
                model=self._model,
                temperature=self._temperature,
                max_tokens=self._max_tokens,
            )
        except APIStatusError as e:
            raise GenerationBackendError(
                f"Generation provider returned HTTP {e.status_code}",
                status_code=e.status_code,
                payload=e.response.text,
            ) from e
        except (OpenAIError, CircuitOpenError) as e:
            raise GenerationBackendError(
                f"Generation provider unavailable: {type(e).__name__}: {e}"
            ) from e

        content = response.choices[0].message.content if response.choices else None
        if not isinstance(content, str) or not content.strip():
            raise GenerationBackendError(
                "Generation provider did not return any content"
            )

        logger.debug(f"[OpenAIBackend] {len(content)} chars from {self._model}")
        return content
