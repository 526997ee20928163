"""Emotion analysis endpoint.

`POST /analyze` takes an ordered array of biometric samples (optionally with
a webcam frame each) and returns one result per sample, in input order. A
failed upstream call turns into an error entry for that sample only.
"""

from typing import Annotated

from fastapi import APIRouter, Query, Request

from attune.controllers.dependencies import GeminiDep
from attune.pipelines.biometrics import (
    SUGGESTIONS_MODE,
    analyze_samples,
    parse_analysis_samples,
    read_json_body,
)
from attune.views import AnalysisBatchResponse, ErrorResponse

router = APIRouter(tags=["analysis"])

ContentModeQuery = Annotated[str, Query(alias="contentMode")]


@router.post(
    "/analyze",
    response_model=AnalysisBatchResponse,
    responses={400: {"model": ErrorResponse}},
)
async def analyze_metrics(
    request: Request,
    gemini: GeminiDep,
    content_mode: ContentModeQuery = SUGGESTIONS_MODE,
) -> AnalysisBatchResponse:
    """Classify the emotion behind each sample and add a short observation or suggestion."""

    samples = parse_analysis_samples(await read_json_body(request))
    return await analyze_samples(gemini, samples, content_mode)
