"""Service layer helpers for external integrations."""

from .gemini_client import GeminiClient, GeminiError, get_gemini_client
from .response_contract import GenerateContentResponse, ResponseContractError
from .speech_client import (
    AUDIO_MEDIA_TYPE,
    SpeechClient,
    SpeechSynthesisError,
    get_speech_client,
)

__all__ = [
    "AUDIO_MEDIA_TYPE",
    "GeminiClient",
    "GeminiError",
    "get_gemini_client",
    "GenerateContentResponse",
    "ResponseContractError",
    "SpeechClient",
    "SpeechSynthesisError",
    "get_speech_client",
]
