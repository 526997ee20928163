"""Tests for the /tts endpoint in single and batch mode."""

from __future__ import annotations

import base64
import json

import httpx

FAKE_MP3 = b"ID3fake-mp3-bytes"


def _audio_ok(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, content=FAKE_MP3, headers={"Content-Type": "audio/mpeg"})


def test_single_request_returns_raw_audio(client, use_speech):
    captured = use_speech(_audio_ok)

    response = client.post("/tts", json={"text": "Take a slow breath."})

    assert response.status_code == 200
    assert response.headers["content-type"] == "audio/mpeg"
    assert response.content == FAKE_MP3

    request = captured[0]
    assert request.url.path == "/v1/text-to-speech/pNInz6obpgDQGcFmaJgB"
    assert request.headers["xi-api-key"] == "test-elevenlabs-key"
    assert json.loads(request.content) == {
        "text": "Take a slow breath.",
        "model_id": "eleven_turbo_v2_5",
        "voice_settings": {
            "stability": 0.6,
            "similarity_boost": 0.75,
            "style": 0.0,
            "use_speaker_boost": True,
        },
    }


def test_single_request_uses_requested_voice(client, use_speech):
    captured = use_speech(_audio_ok)

    client.post("/tts", json={"text": "Hello", "voice": "voice-123"})

    assert captured[0].url.path == "/v1/text-to-speech/voice-123"


def test_single_request_without_text_is_rejected(client, use_speech):
    captured = use_speech(_audio_ok)

    for body in ({}, {"text": ""}, {"voice": "abc"}):
        response = client.post("/tts", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Text is required"}

    assert captured == []


def test_single_request_upstream_failure_is_request_level(client, use_speech):
    use_speech(lambda request: httpx.Response(401, text='{"detail":"invalid api key"}'))

    response = client.post("/tts", json={"text": "Hello"})

    assert response.status_code == 500
    assert response.json() == {
        "error": 'ElevenLabs API error: Unauthorized - {"detail":"invalid api key"}'
    }


def test_batch_marks_missing_text_in_place(client, use_speech):
    captured = use_speech(_audio_ok)
    items = [
        {"text": "First", "timestamp": 1},
        {"text": "", "timestamp": 2},
        {"text": "Third", "timestamp": 3, "voice": "other-voice"},
    ]

    response = client.post("/tts", json=items)

    assert response.status_code == 200
    payload = response.json()
    assert payload["totalProcessed"] == 3
    first, second, third = payload["results"]
    assert second == {"error": "Text is required", "timestamp": 2}
    for result, timestamp in ((first, 1), (third, 3)):
        assert result["timestamp"] == timestamp
        assert result["contentType"] == "audio/mpeg"
        assert base64.b64decode(result["audio"]) == FAKE_MP3
    assert len(captured) == 2
    assert captured[1].url.path == "/v1/text-to-speech/other-voice"


def test_batch_isolates_upstream_failures(client, use_speech):
    def handler(request: httpx.Request) -> httpx.Response:
        if json.loads(request.content)["text"] == "bad":
            return httpx.Response(429, text="quota exceeded")
        return _audio_ok(request)

    use_speech(handler)

    response = client.post("/tts", json=[{"text": "bad"}, {"text": "good", "timestamp": 5}])

    first, second = response.json()["results"]
    assert first == {
        "error": "ElevenLabs API error: Too Many Requests",
        "details": "quota exceeded",
        "timestamp": 0,
    }
    assert second["timestamp"] == 5
    assert "audio" in second


def test_batch_transport_failure_is_an_item_error(client, use_speech):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    use_speech(handler)

    response = client.post("/tts", json=[{"text": "Hello", "timestamp": 9}])

    assert response.json()["results"] == [{"error": "timed out", "timestamp": 9}]


def test_empty_batch_is_rejected(client, use_speech):
    captured = use_speech(_audio_ok)

    response = client.post("/tts", json=[])

    assert response.status_code == 400
    assert response.json() == {"error": "No texts provided"}
    assert captured == []


def test_body_that_is_neither_object_nor_array_is_rejected(client, use_speech):
    use_speech(_audio_ok)

    response = client.post("/tts", json="just a string")

    assert response.status_code == 400


def test_batch_entry_that_is_not_an_object_is_answered_in_place(client, use_speech):
    captured = use_speech(_audio_ok)

    response = client.post("/tts", json=["hi", {"text": "Hello", "timestamp": 4}, 7])

    assert response.status_code == 200
    payload = response.json()
    assert payload["totalProcessed"] == 3
    first, second, third = payload["results"]
    assert first == {"error": "Text is required", "timestamp": 0}
    assert third == {"error": "Text is required", "timestamp": 0}
    assert second["timestamp"] == 4
    assert base64.b64decode(second["audio"]) == FAKE_MP3
    assert len(captured) == 1
