"""Lexical emotion label extraction from free-form model output."""

from __future__ import annotations

import re
from typing import Final

EMOTION_VOCABULARY: Final[tuple[str, ...]] = (
    "happy",
    "sad",
    "angry",
    "anxious",
    "worried",
    "confused",
    "neutral",
    "calm",
    "stressed",
    "surprised",
    "fearful",
    "disgusted",
    "content",
    "frustrated",
    "concerned",
    "excited",
)

DEFAULT_EXPRESSION: Final[str] = "neutral"

_TOKEN_SEPARATORS = re.compile(r"[.,\s]")


def _first_match(text: str) -> str | None:
    for emotion in EMOTION_VOCABULARY:
        if emotion in text:
            return emotion
    return None


def extract_expression(text: str) -> str:
    """Pick an emotion label for ``text``.

    Tries, in order: the first token as an exact vocabulary word, any
    vocabulary word inside the first sentence, any vocabulary word anywhere.
    Falls back to ``neutral``. Matching is by substring, so a word such as
    "discontent" yields "content".
    """

    lowered = text.lower().strip()

    first_token = _TOKEN_SEPARATORS.split(lowered, maxsplit=1)[0]
    if first_token in EMOTION_VOCABULARY:
        return first_token

    first_sentence = lowered.split(".", 1)[0]
    match = _first_match(first_sentence) or _first_match(lowered)
    return match or DEFAULT_EXPRESSION


__all__ = ["DEFAULT_EXPRESSION", "EMOTION_VOCABULARY", "extract_expression"]
