"""Biometrics pipeline package.

Modules follow the order in which the endpoints use them:

1. `ingestion` - decode and validate request bodies.
2. `prompts` - assemble the Gemini prompts.
3. `analysis` - per-sample emotion analysis (`/analyze`).
4. `expression` - lexical emotion label extraction.
5. `speech` - single and batch synthesis (`/tts`).
6. `summary` - whole-session narrative and statistics (`/summary`).
"""

from .analysis import analyze_reading, analyze_samples, split_analysis_text
from .expression import DEFAULT_EXPRESSION, EMOTION_VOCABULARY, extract_expression
from .ingestion import (
    parse_analysis_samples,
    parse_speech_payload,
    parse_summary_samples,
    read_json_body,
)
from .prompts import FACTS_MODE, SUGGESTIONS_MODE, build_summary_prompt, build_vision_prompt
from .speech import synthesize_batch, synthesize_item, synthesize_single
from .summary import EMPTY_SESSION_SUMMARY, summarize_session
from .types import PulseStatistics, SampleReading

__all__ = [
    "DEFAULT_EXPRESSION",
    "EMOTION_VOCABULARY",
    "EMPTY_SESSION_SUMMARY",
    "FACTS_MODE",
    "SUGGESTIONS_MODE",
    "PulseStatistics",
    "SampleReading",
    "analyze_reading",
    "analyze_samples",
    "build_summary_prompt",
    "build_vision_prompt",
    "extract_expression",
    "parse_analysis_samples",
    "parse_speech_payload",
    "parse_summary_samples",
    "read_json_body",
    "split_analysis_text",
    "summarize_session",
    "synthesize_batch",
    "synthesize_item",
    "synthesize_single",
]
