"""Unit tests for the lexical expression extractor and prompt helpers."""

from __future__ import annotations

import pytest

from attune.pipelines.biometrics import (
    EMOTION_VOCABULARY,
    build_vision_prompt,
    extract_expression,
    split_analysis_text,
)
from attune.pipelines.biometrics.prompts import format_event_line, format_number, to_fixed
from attune.utils import encode_base64, strip_data_url_prefix


@pytest.mark.parametrize("emotion", EMOTION_VOCABULARY)
def test_leading_vocabulary_word_wins(emotion):
    assert extract_expression(f"{emotion.capitalize()}. Something else entirely.") == emotion


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("HAPPY, smiling widely", "happy"),
        ("I think they look worried. Ask gently.", "worried"),
        ("They seem fine. But anxious underneath.", "anxious"),
        ("Discontented look on their face.", "content"),
        ("Nothing to report here.", "neutral"),
        ("", "neutral"),
    ],
)
def test_fallback_strategies(text, expected):
    assert extract_expression(text) == expected


def test_first_sentence_is_scanned_before_the_rest():
    assert extract_expression("Looks calm. Later excited.") == "calm"


def test_split_analysis_text_drops_the_emotion_cue():
    assert split_analysis_text("Anxious. Slow down. Then pause.") == "Slow down. Then pause."
    assert split_analysis_text("No period here") == "No period here"


def test_vision_prompt_lists_vocabulary_and_metrics():
    prompt = build_vision_prompt(72.0, 14.5, "suggestions")

    assert "Heart rate: 72 bpm, Breathing rate: 14.5 breaths/min" in prompt
    assert ", ".join(EMOTION_VOCABULARY) in prompt
    assert "actionable suggestion" in prompt


def test_unknown_content_mode_falls_back_to_suggestions():
    assert build_vision_prompt(70, 12, "anything") == build_vision_prompt(70, 12, "suggestions")
    assert build_vision_prompt(70, 12, "facts") != build_vision_prompt(70, 12, "suggestions")


def test_event_line_formatting():
    assert format_event_line(72, 14, 1.5) == "Time 1.50s: HR 72bpm, BR 14/min"
    assert format_event_line(None, 0, None) == "Time N/As: HR N/Abpm, BR N/A/min"
    assert format_number(80.25) == "80.25"


@pytest.mark.parametrize(
    ("value", "places", "expected"),
    [(80.25, 1, "80.3"), (30.5, 0, "31"), (0.125, 2, "0.13"), (21, 2, "21.00"), (36, 1, "36.0")],
)
def test_to_fixed_rounds_ties_up(value, places, expected):
    assert to_fixed(value, places) == expected


def test_encoding_helpers():
    assert strip_data_url_prefix("data:image/jpeg;base64,QUJD") == "QUJD"
    assert strip_data_url_prefix("QUJD") == "QUJD"
    assert encode_base64(b"ABC") == "QUJD"
