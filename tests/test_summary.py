"""Tests for the /summary endpoint."""

from __future__ import annotations

import json

import httpx

from conftest import gemini_text_response

SUMMARY_TEXT = "Your heart rate stayed steady. Try pausing before replying next time."


def test_empty_session_returns_placeholder_without_upstream_call(client, use_gemini):
    captured = use_gemini(lambda request: gemini_text_response(SUMMARY_TEXT))

    for body in ([], {"Pulse": 80}):
        response = client.post("/summary", json=body)
        assert response.status_code == 200
        assert response.json() == {"summary": "No data was collected during this session."}

    assert captured == []


def test_summary_statistics(client, use_gemini):
    use_gemini(lambda request: gemini_text_response(SUMMARY_TEXT))
    samples = [
        {"Pulse": 60, "Breath": 12, "Time": 0},
        {"Pulse": 80, "Breath": 14, "Time": 10.5},
        {"Pulse": 100, "Breath": 18, "Time": 21},
    ]

    response = client.post("/summary", json=samples)

    assert response.status_code == 200
    assert response.json() == {
        "summary": SUMMARY_TEXT,
        "eventCount": 3,
        "duration": 21,
        "statistics": {
            "avgHeartRate": "80.0",
            "maxHeartRate": 100,
            "minHeartRate": 60,
        },
    }


def test_prompt_embeds_readings_and_statistics(client, use_gemini):
    captured = use_gemini(lambda request: gemini_text_response(SUMMARY_TEXT))

    client.post(
        "/summary",
        json=[
            {"Pulse": 72, "Breath": 14, "Time": 1.5},
            {"Breath": 16, "Time": 30.4},
        ],
    )

    body = json.loads(captured[0].content)
    prompt = body["contents"][0]["parts"][0]["text"]
    assert "Time 1.50s: HR 72bpm, BR 14/min" in prompt
    assert "Time 30.40s: HR N/Abpm, BR 16/min" in prompt
    assert "2 data points collected over 30 seconds" in prompt
    assert "Average heart rate: 36.0 bpm" in prompt
    assert "Heart rate range: 0-72 bpm" in prompt
    assert body["generationConfig"] == {"temperature": 0.8, "maxOutputTokens": 300}


def test_missing_pulse_counts_as_zero(client, use_gemini):
    use_gemini(lambda request: gemini_text_response(SUMMARY_TEXT))

    response = client.post("/summary", json=[{"Pulse": 90, "Time": 1}, {"Breath": 12, "Time": 2}])

    assert response.json()["statistics"] == {
        "avgHeartRate": "45.0",
        "maxHeartRate": 90,
        "minHeartRate": 0,
    }


def test_upstream_failure_fails_the_request(client, use_gemini):
    use_gemini(lambda request: httpx.Response(503, text="model overloaded"))

    response = client.post("/summary", json=[{"Pulse": 70, "Time": 1}])

    assert response.status_code == 500
    assert response.json() == {
        "error": "Gemini API error: Service Unavailable - model overloaded"
    }


def test_invalid_upstream_body_fails_the_request(client, use_gemini):
    use_gemini(lambda request: httpx.Response(200, json={"promptFeedback": {}}))

    response = client.post("/summary", json=[{"Pulse": 70, "Time": 1}])

    assert response.status_code == 500
    assert response.json() == {"error": "Invalid response from Gemini API"}


def test_half_way_values_round_up(client, use_gemini):
    captured = use_gemini(lambda request: gemini_text_response(SUMMARY_TEXT))
    samples = [
        {"Pulse": 80, "Breath": 12, "Time": 0.125},
        {"Pulse": 80, "Breath": 12, "Time": 10},
        {"Pulse": 80, "Breath": 12, "Time": 20},
        {"Pulse": 81, "Breath": 12, "Time": 30.5},
    ]

    response = client.post("/summary", json=samples)

    assert response.json()["statistics"]["avgHeartRate"] == "80.3"
    prompt = json.loads(captured[0].content)["contents"][0]["parts"][0]["text"]
    assert "Time 0.13s: HR 80bpm, BR 12/min" in prompt
    assert "4 data points collected over 31 seconds" in prompt
    assert "Average heart rate: 80.3 bpm" in prompt
