"""
HTTP generation backend.

POSTs {"prompt": "..."} to a hosted generate function and returns the
response body as-is; parsing and normalization happen in the domain.

Error mapping:
- transport failure (connect, timeout, ...) -> GenerationBackendError(no status)
- non-2xx answer -> GenerationBackendError(status_code, payload=body unchanged)
"""

import logging
from typing import Optional

import httpx

from promptcraft.application.dto.project import GenerationRequestDTO
from promptcraft.domain.exceptions import GenerationBackendError
from promptcraft.domain.ports.generation_backend import GenerationBackend

logger = logging.getLogger(__name__)


class HttpGenerationBackend(GenerationBackend):
    def __init__(
        self,
        endpoint_url: str,
        client: httpx.AsyncClient,
        api_key: Optional[str] = None,
    ):
        self._endpoint_url = endpoint_url
        self._client = client
        self._api_key = api_key

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    async def generate(self, prompt: str) -> str:
        prompt = prompt.strip()
        if not prompt:
            raise GenerationBackendError("Missing prompt", status_code=400)

        body = GenerationRequestDTO(prompt=prompt).model_dump()
        try:
            response = await self._client.post(
                self._endpoint_url, json=body, headers=self._headers()
            )
        except httpx.HTTPError as e:
            raise GenerationBackendError(
                f"Generation request failed: {type(e).__name__}: {e}"
            ) from e

        if not response.is_success:
            raise GenerationBackendError(
                f"Generation backend returned HTTP {response.status_code}",
                status_code=response.status_code,
                payload=response.text,
            )

        logger.debug(f"[HttpBackend] {len(response.text)} bytes from {self._endpoint_url}")
        return response.text
