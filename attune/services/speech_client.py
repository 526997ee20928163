"""ElevenLabs text-to-speech client."""

from __future__ import annotations

import logging
import time
from typing import Optional

import httpx

from attune.config.settings import settings
from attune.telemetry import record_upstream_call

logger = logging.getLogger(__name__)

AUDIO_MEDIA_TYPE = "audio/mpeg"

VOICE_SETTINGS = {
    "stability": 0.6,
    "similarity_boost": 0.75,
    "style": 0.0,
    "use_speaker_boost": True,
}


class SpeechSynthesisError(RuntimeError):
    """Raised when ElevenLabs fails to synthesise audio."""

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


class SpeechClient:
    """Generate MP3 speech with ElevenLabs using fixed voice settings."""

    def __init__(
        self,
        *,
        api_key: str | None = None,
        model_id: str | None = None,
        default_voice_id: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if api_key is None and settings.elevenlabs.api_key is not None:
            api_key = settings.elevenlabs.api_key.get_secret_value()
        self._api_key = api_key or ""
        self._model_id = model_id or settings.elevenlabs.model_id
        self._default_voice_id = default_voice_id or settings.elevenlabs.default_voice_id
        self._base_url = (base_url or settings.elevenlabs.base_url).rstrip("/")
        self._timeout = timeout or settings.elevenlabs.timeout_seconds
        self._transport = transport

    @property
    def default_voice_id(self) -> str:
        return self._default_voice_id

    async def synthesize(self, text: str, *, voice_id: str | None = None) -> bytes:
        """Convert text to speech and return the raw MP3 bytes."""

        voice = voice_id or self._default_voice_id
        started = time.perf_counter()
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    f"{self._base_url}/text-to-speech/{voice}",
                    headers={"xi-api-key": self._api_key},
                    json={
                        "text": text,
                        "model_id": self._model_id,
                        "voice_settings": VOICE_SETTINGS,
                    },
                )
        except httpx.HTTPError as exc:
            record_upstream_call("elevenlabs", success=False)
            logger.warning("ElevenLabs request failed for voice '%s': %r", voice, exc)
            raise SpeechSynthesisError(str(exc) or exc.__class__.__name__) from exc

        elapsed = time.perf_counter() - started
        if not response.is_success:
            record_upstream_call("elevenlabs", success=False, duration_seconds=elapsed)
            logger.warning(
                "ElevenLabs returned %s %s for voice '%s'",
                response.status_code,
                response.reason_phrase,
                voice,
            )
            raise SpeechSynthesisError(
                f"ElevenLabs API error: {response.reason_phrase}",
                status_code=response.status_code,
                reason=response.reason_phrase,
                details=response.text,
            )

        record_upstream_call("elevenlabs", success=True, duration_seconds=elapsed)
        return response.content


def get_speech_client() -> SpeechClient:
    """Return the default speech client instance."""

    return _DEFAULT_CLIENT


_DEFAULT_CLIENT = SpeechClient()


__all__ = [
    "AUDIO_MEDIA_TYPE",
    "SpeechClient",
    "SpeechSynthesisError",
    "get_speech_client",
]
