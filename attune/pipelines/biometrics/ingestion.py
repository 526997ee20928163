"""Request body parsing for the biometrics endpoints."""

from __future__ import annotations

import json
from typing import Any, Final, Union

from fastapi import HTTPException, Request, status
from pydantic import TypeAdapter, ValidationError

from attune.views import (
    BiometricSample,
    TextToSpeechPayload,
    TextToSpeechRequest,
)

INVALID_METRICS_DETAIL: Final[str] = "Invalid format: expected array of metrics"
INVALID_SPEECH_DETAIL: Final[str] = (
    "Invalid format: expected a text object or an array of text objects"
)

_SAMPLES_ADAPTER = TypeAdapter(list[BiometricSample])


async def read_json_body(request: Request) -> Any:
    """Decode the request body as JSON, rejecting malformed payloads."""

    raw_body = await request.body()
    try:
        return json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Request body must be valid JSON",
        ) from exc


def parse_analysis_samples(payload: Any) -> list[BiometricSample]:
    """Require a non-empty array of sample objects."""

    if not isinstance(payload, list) or not payload:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=INVALID_METRICS_DETAIL,
        )
    return _validate_samples(payload)


def parse_summary_samples(payload: Any) -> list[BiometricSample]:
    """Return the samples to summarise; empty when there is nothing to do."""

    if not isinstance(payload, list) or not payload:
        return []
    return _validate_samples(payload)


def parse_speech_payload(
    payload: Any,
) -> Union[list[Any], TextToSpeechRequest]:
    """Parse the batch shape first, falling back to a single request.

    Batch entries that are not text objects come back unchanged so the
    synthesis stage can answer them in place.
    """

    try:
        return TextToSpeechPayload.validate_python(payload)
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=INVALID_SPEECH_DETAIL,
        ) from exc


def _validate_samples(payload: list[Any]) -> list[BiometricSample]:
    try:
        return _SAMPLES_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=INVALID_METRICS_DETAIL,
        ) from exc


__all__ = [
    "INVALID_METRICS_DETAIL",
    "INVALID_SPEECH_DETAIL",
    "parse_analysis_samples",
    "parse_speech_payload",
    "parse_summary_samples",
    "read_json_body",
]
