"""Gemini text-generation backend — Google generateContent API."""

from __future__ import annotations

import logging

import httpx

from transparentgov.backends.base import (
    ConfigurationError,
    MalformedResponseError,
    RemoteError,
    TransportError,
)
from transparentgov.config import settings

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = (
    "Error: API key is missing. Please add TRANSPARENTGOV_GEMINI_API_KEY "
    "to your environment or to a .env file in the project root."
)
MISSING_ENDPOINT_MESSAGE = (
    "Error: Gemini endpoint is not configured. Please set "
    "TRANSPARENTGOV_GEMINI_BASE_URL to the generativelanguage API base URL."
)
MALFORMED_MESSAGE = (
    "Could not generate a valid response from the AI. "
    "The response structure was unexpected."
)

_UNSET = object()


class GeminiBackend:
    """Single-turn text generation using a Gemini model."""

    name: str = "Gemini"

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        base_url: str | None = None,
        timeout: float | None | object = _UNSET,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else settings.gemini_api_key
        self.model = model or settings.gemini_model
        self.base_url = (base_url if base_url is not None else settings.gemini_base_url).rstrip("/")
        self.timeout = settings.request_timeout if timeout is _UNSET else timeout
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def generate(self, prompt: str) -> str:
        """Generate text for ``prompt`` with exactly one HTTP request.

        Raises a ``GenerationError`` subclass on any failure.  The returned
        text is neither trimmed nor sanitized.
        """
        if not prompt:
            raise ValueError("prompt must be a non-empty string")
        if not self.api_key:
            raise ConfigurationError(MISSING_KEY_MESSAGE)
        if not self.base_url:
            raise ConfigurationError(MISSING_ENDPOINT_MESSAGE)

        payload = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.api_key,
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(self.endpoint, headers=headers, json=payload)
        except httpx.TransportError as exc:
            logger.error("Gemini request failed: %s", exc)
            raise TransportError(
                f"An error occurred while contacting the AI service: {exc}"
            ) from exc

        if not response.is_success:
            detail = self._error_detail(response)
            logger.warning("Gemini returned %d: %s", response.status_code, detail)
            message = f"API call failed with status: {response.status_code}."
            if detail:
                message = f"{message} {detail}"
            raise RemoteError(message, response.status_code)

        text = self._extract_text(response)
        logger.info("Gemini generated %d chars", len(text))
        return text

    def _error_detail(self, response: httpx.Response) -> str:
        """Pull the endpoint's own error message out of a failure body."""
        try:
            body = response.json()
        except ValueError:
            return ""
        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            return str(body["error"].get("message", ""))
        return ""

    def _extract_text(self, response: httpx.Response) -> str:
        try:
            data = response.json()
            text = data["candidates"][0]["content"]["parts"][0]["text"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            logger.warning("Unexpected Gemini response structure: %s", exc)
            raise MalformedResponseError(MALFORMED_MESSAGE) from exc
        if not isinstance(text, str):
            raise MalformedResponseError(MALFORMED_MESSAGE)
        return text
