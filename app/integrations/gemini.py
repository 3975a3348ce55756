"""Gemini REST client for JSON-mode text generation.

Calls ``models/{model}:generateContent`` once per request, with a timeout
and no retries.  Every failure mode (transport error, timeout, non-2xx,
malformed body, missing candidate text) surfaces as ``UpstreamError``.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx
from loguru import logger

from app.coach.ports import Generation
from app.core.errors import ConfigurationError, UpstreamError

_MIME_TYPES = {
    "json": "application/json",
    "text": "text/plain",
}


class GeminiClient:
    """Async text generator backed by the Gemini API."""

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-1.5-flash",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: float = 20.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Gemini API key. An empty key is only reported when a
                call is attempted, so deterministic paths keep working.
            model: Model name used in the request path.
            base_url: API root, without trailing slash.
            timeout: Total request timeout in seconds.
            transport: Optional httpx transport (tests).
        """
        self.api_key = (api_key or "").strip()
        self.model_name = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model_name}:generateContent"

    async def generate(self, prompt: str, temperature: float, response_format: str = "json") -> Generation:
        if not self.api_key:
            raise ConfigurationError("GEMINI_API_KEY is missing")

        body = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "response_mime_type": _MIME_TYPES.get(response_format, "application/json"),
                "temperature": temperature,
            },
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    self.endpoint,
                    json=body,
                    headers={"x-goog-api-key": self.api_key},
                )
        except httpx.TimeoutException as e:
            raise UpstreamError(f"Gemini request timed out after {self.timeout}s") from e
        except httpx.RequestError as e:
            raise UpstreamError(f"Gemini request failed: {e}") from e

        if response.is_error:
            logger.error(f"Gemini API error {response.status_code}: {response.text[:200]}")
            raise UpstreamError(f"Gemini API error: {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError("Gemini returned a non-JSON body") from e

        text = _extract_text(data)
        if not text:
            raise UpstreamError("AI returned no content.")

        usage = data.get("usageMetadata") or {}
        return Generation(
            text=text,
            tokens_used=int(usage.get("totalTokenCount") or 0),
            model=data.get("modelVersion") or self.model_name,
        )


def _extract_text(data: Any) -> Optional[str]:
    """Pull ``candidates[0].content.parts[0].text`` out of a response body."""
    try:
        return data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
