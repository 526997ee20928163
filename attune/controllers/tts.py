"""Text-to-speech controller backed by ElevenLabs."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response

from attune.controllers.dependencies import SpeechDep
from attune.pipelines.biometrics import (
    parse_speech_payload,
    read_json_body,
    synthesize_batch,
    synthesize_single,
)
from attune.services import AUDIO_MEDIA_TYPE
from attune.views import ErrorResponse, SpeechBatchResponse

router = APIRouter(tags=["tts"])


@router.post(
    "/tts",
    response_class=Response,
    responses={
        200: {
            "content": {AUDIO_MEDIA_TYPE: {}},
            "model": SpeechBatchResponse,
            "description": "MP3 audio for one text, or base64 audio entries for an array.",
        },
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def text_to_speech(request: Request, speech: SpeechDep) -> Response:
    """Return MP3 bytes for one text, or base64 audio entries for an array of texts."""

    payload = parse_speech_payload(await read_json_body(request))
    if isinstance(payload, list):
        batch = await synthesize_batch(speech, payload)
        return JSONResponse(content=batch.model_dump(exclude_none=True))

    audio_bytes = await synthesize_single(speech, payload)
    return Response(content=audio_bytes, media_type=AUDIO_MEDIA_TYPE)
