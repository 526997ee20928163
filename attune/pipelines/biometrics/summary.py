"""Whole-session summary stage of the biometrics pipeline."""

from __future__ import annotations

import logging
from typing import Final

from fastapi import HTTPException, status

from attune.services import GeminiClient, GeminiError
from attune.views import BiometricSample, SessionStatistics, SessionSummaryResponse

from .prompts import build_summary_prompt, format_event_line, to_fixed
from .types import PulseStatistics

logger = logging.getLogger("attune.pipelines.biometrics")

EMPTY_SESSION_SUMMARY: Final[str] = "No data was collected during this session."
SUMMARY_TEMPERATURE: Final[float] = 0.8
SUMMARY_MAX_OUTPUT_TOKENS: Final[int] = 300


async def summarize_session(
    client: GeminiClient,
    samples: list[BiometricSample],
) -> SessionSummaryResponse:
    """Build one narrative summary plus pulse statistics for the session."""

    if not samples:
        return SessionSummaryResponse(summary=EMPTY_SESSION_SUMMARY)

    events = "\n".join(
        format_event_line(sample.pulse, sample.breath, sample.time) for sample in samples
    )
    statistics = PulseStatistics.from_samples(samples)
    duration = samples[-1].time or 0

    prompt = build_summary_prompt(
        events,
        count=len(samples),
        duration=duration,
        statistics=statistics,
    )

    logger.info("Summarising session with %s data points over %ss", len(samples), duration)
    try:
        summary = await client.generate(
            prompt,
            temperature=SUMMARY_TEMPERATURE,
            max_output_tokens=SUMMARY_MAX_OUTPUT_TOKENS,
        )
    except GeminiError as exc:
        logger.error("Session summary failed: %s", exc)
        if exc.status_code is not None:
            detail = f"Gemini API error: {exc.reason} - {exc.details}"
        else:
            detail = str(exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
        ) from exc

    return SessionSummaryResponse(
        summary=summary,
        eventCount=len(samples),
        duration=duration,
        statistics=SessionStatistics(
            avgHeartRate=to_fixed(statistics.average, 1),
            maxHeartRate=statistics.maximum,
            minHeartRate=statistics.minimum,
        ),
    )


__all__ = ["EMPTY_SESSION_SUMMARY", "summarize_session"]
