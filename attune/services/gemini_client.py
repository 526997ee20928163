"""Thin Gemini client wrapper for multimodal text generation."""

from __future__ import annotations

import logging
import time
from typing import Any, Optional

import httpx

from attune.config.settings import settings
from attune.services.response_contract import GenerateContentResponse, ResponseContractError
from attune.telemetry import record_upstream_call

logger = logging.getLogger(__name__)


class GeminiError(RuntimeError):
    """Raised when a Gemini invocation fails or returns an unusable body."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        reason: str | None = None,
        details: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.details = details


class GeminiClient:
    """Invoke the Gemini ``generateContent`` endpoint."""

    def __init__(
        self,
        *,
        api_key: str | None = None,
        model: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if api_key is None and settings.gemini.api_key is not None:
            api_key = settings.gemini.api_key.get_secret_value()
        self._api_key = api_key or ""
        self._model = model or settings.gemini.model
        self._base_url = (base_url or settings.gemini.base_url).rstrip("/")
        self._timeout = timeout or settings.gemini.timeout_seconds
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self._base_url}/models/{self._model}:generateContent"

    async def generate(
        self,
        prompt: str,
        *,
        image_base64: str | None = None,
        image_mime_type: str = "image/jpeg",
        temperature: float,
        max_output_tokens: int,
    ) -> str:
        """Send one prompt (plus optional inline image) and return the generated text."""

        parts: list[dict[str, Any]] = [{"text": prompt}]
        if image_base64:
            parts.append(
                {
                    "inline_data": {
                        "mime_type": image_mime_type,
                        "data": image_base64,
                    }
                }
            )

        request_body = {
            "contents": [{"parts": parts}],
            "generationConfig": {
                "temperature": temperature,
                "maxOutputTokens": max_output_tokens,
            },
        }

        started = time.perf_counter()
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    self.endpoint,
                    params={"key": self._api_key},
                    json=request_body,
                )
        except httpx.HTTPError as exc:
            record_upstream_call("gemini", success=False)
            logger.warning("Gemini request failed: %r", exc)
            raise GeminiError(str(exc) or exc.__class__.__name__) from exc

        elapsed = time.perf_counter() - started
        response_text = response.text
        if not response.is_success:
            record_upstream_call("gemini", success=False, duration_seconds=elapsed)
            logger.warning(
                "Gemini returned %s %s", response.status_code, response.reason_phrase
            )
            raise GeminiError(
                f"Gemini API error: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
                reason=response.reason_phrase,
                details=response_text,
            )

        try:
            text = GenerateContentResponse.parse_text(response_text)
        except ResponseContractError as exc:
            record_upstream_call("gemini", success=False, duration_seconds=elapsed)
            raise GeminiError(
                "Invalid response from Gemini API",
                details=response_text,
            ) from exc

        record_upstream_call("gemini", success=True, duration_seconds=elapsed)
        return text


def get_gemini_client() -> GeminiClient:
    """Return the default Gemini client instance."""

    return _DEFAULT_CLIENT


_DEFAULT_CLIENT = GeminiClient()


__all__ = ["GeminiClient", "GeminiError", "get_gemini_client"]
