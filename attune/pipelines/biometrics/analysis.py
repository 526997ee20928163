"""Per-sample emotion analysis stage of the biometrics pipeline."""

from __future__ import annotations

import logging
from typing import Final, Union

from attune.services import GeminiClient, GeminiError
from attune.telemetry import record_batch_item
from attune.utils import strip_data_url_prefix
from attune.views import (
    AnalysisBatchResponse,
    AnalysisFailure,
    AnalysisSuccess,
    BiometricSample,
    SampleMetrics,
)

from .expression import extract_expression
from .prompts import build_vision_prompt
from .types import SampleReading

logger = logging.getLogger("attune.pipelines.biometrics")

ANALYSIS_TEMPERATURE: Final[float] = 0.7
ANALYSIS_MAX_OUTPUT_TOKENS: Final[int] = 100


def split_analysis_text(full_text: str) -> str:
    """Drop the leading ``Emotion.`` cue and keep the rest of the text."""

    _, separator, rest = full_text.partition(".")
    if not separator:
        return full_text
    return rest.strip()


async def analyze_reading(
    client: GeminiClient,
    reading: SampleReading,
    content_mode: str,
) -> Union[AnalysisSuccess, AnalysisFailure]:
    """Ask the model about one reading; failures become an error entry."""

    metrics = SampleMetrics(heartRate=reading.heart_rate, breathRate=reading.breath_rate)
    prompt = build_vision_prompt(reading.heart_rate, reading.breath_rate, content_mode)
    # A bare data-URL prefix leaves no image data, so no inline part is sent.
    image = strip_data_url_prefix(reading.image_base64) if reading.image_base64 else None

    try:
        raw_text = await client.generate(
            prompt,
            image_base64=image,
            temperature=ANALYSIS_TEMPERATURE,
            max_output_tokens=ANALYSIS_MAX_OUTPUT_TOKENS,
        )
    except GeminiError as exc:
        logger.warning(
            "Analysis failed at timestamp=%s: %s details=%s",
            reading.timestamp,
            exc,
            exc.details,
        )
        return AnalysisFailure(error=str(exc), timestamp=reading.timestamp, metrics=metrics)

    full_text = raw_text.strip()
    return AnalysisSuccess(
        analysis=split_analysis_text(full_text),
        expression=extract_expression(full_text),
        timestamp=reading.timestamp,
        metrics=metrics,
    )


async def analyze_samples(
    client: GeminiClient,
    samples: list[BiometricSample],
    content_mode: str,
) -> AnalysisBatchResponse:
    """Analyse every sample in order, one upstream call at a time."""

    logger.info("Processing %s metric sets...", len(samples))
    results: list[Union[AnalysisSuccess, AnalysisFailure]] = []
    for index, sample in enumerate(samples, start=1):
        reading = SampleReading.from_sample(sample)
        logger.info(
            "Processing metric %s/%s - HR: %s, BR: %s, Time: %s",
            index,
            len(samples),
            reading.heart_rate,
            reading.breath_rate,
            reading.timestamp,
        )
        result = await analyze_reading(client, reading, content_mode)
        record_batch_item("analyze", success=isinstance(result, AnalysisSuccess))
        results.append(result)

    return AnalysisBatchResponse(results=results, totalProcessed=len(samples))


__all__ = ["analyze_reading", "analyze_samples", "split_analysis_text"]
