"""Schemas for text-to-speech requests."""

from __future__ import annotations

from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .biometrics import Number


class TextToSpeechRequest(BaseModel):
    text: Optional[str] = None
    voice: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class TextToSpeechItem(TextToSpeechRequest):
    timestamp: Optional[Number] = None


class SpeechAudioResult(BaseModel):
    audio: str
    timestamp: Number
    contentType: str


class SpeechFailure(BaseModel):
    error: str
    details: Optional[str] = None
    timestamp: Number


class SpeechBatchResponse(BaseModel):
    results: list[Union[SpeechAudioResult, SpeechFailure]]
    totalProcessed: int


# Batch entries that are not text objects are kept as-is and answered in place.
SpeechBatchEntry = Annotated[
    Union[TextToSpeechItem, Any],
    Field(union_mode="left_to_right"),
]

# Batch shape is tried before the single-request shape.
TextToSpeechPayload = TypeAdapter(
    Annotated[
        Union[list[SpeechBatchEntry], TextToSpeechRequest],
        Field(union_mode="left_to_right"),
    ]
)
