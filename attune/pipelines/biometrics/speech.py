"""Speech synthesis stage of the biometrics pipeline."""

from __future__ import annotations

import logging
from typing import Any, Union

from fastapi import HTTPException, status

from attune.services import AUDIO_MEDIA_TYPE, SpeechClient, SpeechSynthesisError
from attune.telemetry import record_batch_item
from attune.utils import encode_base64
from attune.views import (
    SpeechAudioResult,
    SpeechBatchResponse,
    SpeechFailure,
    TextToSpeechItem,
    TextToSpeechRequest,
)

logger = logging.getLogger("attune.pipelines.biometrics")

TEXT_REQUIRED_DETAIL = "Text is required"


async def synthesize_single(client: SpeechClient, request: TextToSpeechRequest) -> bytes:
    """Synthesise one text; any upstream failure fails the whole request."""

    if not request.text:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=TEXT_REQUIRED_DETAIL,
        )

    try:
        return await client.synthesize(request.text, voice_id=request.voice)
    except SpeechSynthesisError as exc:
        logger.error("Single TTS request failed: %s", exc)
        detail = f"{exc} - {exc.details}" if exc.status_code is not None else str(exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
        ) from exc


def _item_timestamp(item: Any) -> Union[int, float]:
    if isinstance(item, TextToSpeechItem):
        return item.timestamp or 0
    return 0


async def synthesize_item(
    client: SpeechClient,
    item: Any,
) -> Union[SpeechAudioResult, SpeechFailure]:
    timestamp = _item_timestamp(item)
    if not isinstance(item, TextToSpeechItem) or not item.text:
        return SpeechFailure(error=TEXT_REQUIRED_DETAIL, timestamp=timestamp)

    try:
        audio_bytes = await client.synthesize(item.text, voice_id=item.voice)
    except SpeechSynthesisError as exc:
        logger.warning("TTS failed for timestamp %s: %s", timestamp, exc)
        return SpeechFailure(error=str(exc), details=exc.details, timestamp=timestamp)

    return SpeechAudioResult(
        audio=encode_base64(audio_bytes),
        timestamp=timestamp,
        contentType=AUDIO_MEDIA_TYPE,
    )


async def synthesize_batch(
    client: SpeechClient,
    items: list[Any],
) -> SpeechBatchResponse:
    """Synthesise every item in order; each failure stays in its slot."""

    if not items:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No texts provided",
        )

    logger.info("Processing %s TTS requests...", len(items))
    results: list[Union[SpeechAudioResult, SpeechFailure]] = []
    for index, item in enumerate(items, start=1):
        logger.info(
            "Processing TTS %s/%s for timestamp %s", index, len(items), _item_timestamp(item)
        )
        result = await synthesize_item(client, item)
        record_batch_item("tts", success=isinstance(result, SpeechAudioResult))
        results.append(result)

    return SpeechBatchResponse(results=results, totalProcessed=len(items))


__all__ = [
    "TEXT_REQUIRED_DETAIL",
    "synthesize_batch",
    "synthesize_item",
    "synthesize_single",
]
