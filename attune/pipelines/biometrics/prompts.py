"""Prompt templates for the emotion analysis and session summary calls."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Final

from attune.views.biometrics import Number

from .expression import EMOTION_VOCABULARY
from .types import PulseStatistics

FACTS_MODE: Final[str] = "facts"
SUGGESTIONS_MODE: Final[str] = "suggestions"

_EMOTION_LIST = ", ".join(EMOTION_VOCABULARY)

_FACTS_TEMPLATE = """You are an emotion analysis assistant for neurodivergent individuals.
Analyze the person's facial expression in the image along with these biometric readings: {metrics}.

CRITICAL INSTRUCTIONS:
1. Start with ONLY ONE emotion word from this list: {emotions}
2. After the emotion word, add a period, then write ONE very short sentence (max 10 words) with a factual observation

Format: [Emotion]. [Short observation.]

Example: "Anxious. Heart rate elevated, showing signs of stress."
Example: "Calm. Steady breathing indicates relaxation."
Example: "Surprised. Eyes wide, slight elevation in metrics."

Keep it extremely concise."""

_SUGGESTIONS_TEMPLATE = """You are an empathy coach for neurodivergent individuals.
Analyze the person's facial expression in the image along with these biometric readings: {metrics}.

CRITICAL INSTRUCTIONS:
1. Start with ONLY ONE emotion word from this list: {emotions}
2. After the emotion word, add a period, then write ONE very short actionable suggestion (max 10 words)

Format: [Emotion]. [Short suggestion.]

Example: "Anxious. Slow down and check in with them."
Example: "Happy. Continue current approach, they're comfortable."
Example: "Confused. Clarify or rephrase your last statement."

Keep it extremely concise."""

_SUMMARY_TEMPLATE = """You are a compassionate conversation analyst helping neurodivergent individuals.
A person just completed a conversation where their biometric data was tracked. Here are the readings:

{events}

Statistics:
- Session duration: {count} data points collected over {duration} seconds
- Average heart rate: {average} bpm
- Heart rate range: {minimum}-{maximum} bpm

Provide a supportive 3-4 sentence summary that includes:
1. Overall patterns observed during the conversation (e.g., stable, fluctuating, trending up/down)
2. Any notable moments where metrics changed significantly
3. One constructive suggestion for navigating similar conversations in the future

Be kind, encouraging, and practical."""

NOT_AVAILABLE: Final[str] = "N/A"


def format_number(value: Number) -> str:
    """Render a reading without a trailing ``.0`` for whole floats."""

    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_fixed(value: Number, places: int) -> str:
    """Render ``value`` with ``places`` decimals, rounding exact ties away from zero."""

    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def build_vision_prompt(heart_rate: Number, breath_rate: Number, content_mode: str) -> str:
    """Return the per-sample prompt for the selected content mode."""

    metrics = (
        f"Heart rate: {format_number(heart_rate)} bpm, "
        f"Breathing rate: {format_number(breath_rate)} breaths/min"
    )
    template = _FACTS_TEMPLATE if content_mode == FACTS_MODE else _SUGGESTIONS_TEMPLATE
    return template.format(metrics=metrics, emotions=_EMOTION_LIST)


def format_event_line(pulse: Number | None, breath: Number | None, time: Number | None) -> str:
    hr = format_number(pulse) if pulse else NOT_AVAILABLE
    br = format_number(breath) if breath else NOT_AVAILABLE
    when = to_fixed(time, 2) if time is not None else NOT_AVAILABLE
    return f"Time {when}s: HR {hr}bpm, BR {br}/min"


def build_summary_prompt(
    events: str,
    *,
    count: int,
    duration: Number,
    statistics: PulseStatistics,
) -> str:
    """Return the whole-session summary prompt."""

    return _SUMMARY_TEMPLATE.format(
        events=events,
        count=count,
        duration=to_fixed(duration, 0),
        average=to_fixed(statistics.average, 1),
        minimum=format_number(statistics.minimum),
        maximum=format_number(statistics.maximum),
    )


__all__ = [
    "FACTS_MODE",
    "NOT_AVAILABLE",
    "SUGGESTIONS_MODE",
    "build_summary_prompt",
    "build_vision_prompt",
    "format_event_line",
    "format_number",
    "to_fixed",
]
