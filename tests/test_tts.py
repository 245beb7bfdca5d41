"""
Text-to-speech proxy endpoint.
"""

from clinicvoice.adapters.external.tts_service_elevenlabs import ElevenLabsTTSService
from clinicvoice.api.deps import get_tts_service
from clinicvoice.app import app
from clinicvoice.core.config import ElevenLabsSettings
from clinicvoice.core.exceptions import TTSServiceError


def test_tts_returns_audio(client, tts_service):
    response = client.post("/tts", json={"text": "  Good morning, Doctor.  "})
    assert response.status_code == 200
    assert response.headers["content-type"] == "audio/mpeg"
    assert response.headers["cache-control"] == "no-store"
    assert response.content == b"ID3fake-mp3-bytes"
    assert tts_service.calls == ["Good morning, Doctor."]


def test_tts_rejects_blank_text(client, tts_service):
    response = client.post("/tts", json={"text": "   "})
    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_INPUT"
    assert tts_service.calls == []


def test_tts_without_api_key(client):
    app.dependency_overrides[get_tts_service] = lambda: ElevenLabsTTSService(ElevenLabsSettings(api_key=""))
    response = client.post("/tts", json={"text": "Hello"})
    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "SERVICE_NOT_CONFIGURED"
    assert body["message"] == "TTS API key not configured"


def test_tts_provider_failure(client, tts_service):
    tts_service.error = TTSServiceError("Upstream returned 401", {"status": 401})
    response = client.post("/tts", json={"text": "Hello"})
    assert response.status_code == 502
    assert response.json()["message"] == "TTS generation failed"
