"""
Shared fixtures: a fresh clinic store per test and fake external services.
"""

from typing import List, Optional, Tuple

import pytest
from fastapi.testclient import TestClient

from clinicvoice.api.deps import (
    get_clinic_store,
    get_email_service,
    get_tts_service,
    get_voice_agent_service,
)
from clinicvoice.app import app
from clinicvoice.application.ports.services.email_service import EmailService
from clinicvoice.application.ports.services.tts_service import TTSService
from clinicvoice.application.ports.services.voice_agent_service import VoiceAgentService


class FakeTTSService(TTSService):
    def __init__(self, audio: bytes = b"ID3fake-mp3-bytes", error: Optional[Exception] = None):
        self.audio = audio
        self.error = error
        self.calls: List[str] = []

    async def synthesize(self, text: str) -> bytes:
        self.calls.append(text)
        if self.error:
            raise self.error
        return self.audio


class FakeVoiceAgentService(VoiceAgentService):
    def __init__(self, signed_url: str = "wss://voice.example.test/session?token=abc", error: Optional[Exception] = None):
        self.signed_url = signed_url
        self.error = error
        self.calls = 0

    @property
    def agent_id(self) -> str:
        return "agent_test"

    async def get_signed_url(self) -> str:
        self.calls += 1
        if self.error:
            raise self.error
        return self.signed_url


class FakeEmailService(EmailService):
    def __init__(self, error: Optional[Exception] = None):
        self.error = error
        self.sent: List[Tuple[str, str, str]] = []

    async def send_email(self, to: str, subject: str, body: str, reply_to: Optional[str] = None) -> str:
        if self.error:
            raise self.error
        self.sent.append((to, subject, body))
        return f"email_{len(self.sent)}"


@pytest.fixture
def store():
    """The process-wide store, reloaded from seed data for each test."""
    clinic_store = get_clinic_store()
    clinic_store.reset()
    yield clinic_store
    clinic_store.reset()


@pytest.fixture
def tts_service():
    return FakeTTSService()


@pytest.fixture
def voice_agent():
    return FakeVoiceAgentService()


@pytest.fixture
def email_service():
    return FakeEmailService()


@pytest.fixture
def client(store, tts_service, voice_agent, email_service):
    """Create a test client for the FastAPI app with external services faked."""
    app.dependency_overrides[get_tts_service] = lambda: tts_service
    app.dependency_overrides[get_voice_agent_service] = lambda: voice_agent
    app.dependency_overrides[get_email_service] = lambda: email_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
