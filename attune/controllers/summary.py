"""Session summary endpoint."""

from fastapi import APIRouter, Request

from attune.controllers.dependencies import GeminiDep
from attune.pipelines.biometrics import parse_summary_samples, read_json_body, summarize_session
from attune.views import ErrorResponse, SessionSummaryResponse

router = APIRouter(tags=["summary"])


@router.post(
    "/summary",
    response_model=SessionSummaryResponse,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
)
async def summarize(request: Request, gemini: GeminiDep) -> SessionSummaryResponse:
    samples = parse_summary_samples(await read_json_body(request))
    return await summarize_session(gemini, samples)
