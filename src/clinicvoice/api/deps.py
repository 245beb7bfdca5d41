"""FastAPI dependency providers."""

from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import Depends

from ..adapters.db.memory.repositories import (
    MemoryAlertRepository,
    MemoryAppointmentRepository,
    MemoryFollowUpRepository,
    MemoryNoteRepository,
    MemoryPatientRepository,
)
from ..adapters.db.memory.store import ClinicStore
from ..adapters.external.email_service_resend import ResendEmailService
from ..adapters.external.tts_service_elevenlabs import ElevenLabsTTSService
from ..adapters.external.voice_agent_elevenlabs import ElevenLabsVoiceAgentService
from ..application.ports.repositories.alert_repo import AlertRepository
from ..application.ports.repositories.appointment_repo import AppointmentRepository
from ..application.ports.repositories.followup_repo import FollowUpRepository
from ..application.ports.repositories.note_repo import NoteRepository
from ..application.ports.repositories.patient_repo import PatientRepository
from ..application.ports.repositories.summary_cache import SummaryCache
from ..application.ports.services.email_service import EmailService
from ..application.ports.services.tts_service import TTSService
from ..application.ports.services.voice_agent_service import VoiceAgentService
from ..core.config import Settings, get_settings


@lru_cache()
def get_clinic_store() -> ClinicStore:
    """Single in-memory store per process, seeded on first use."""
    settings = get_settings()
    seed_dir = Path(settings.store.seed_dir) if settings.store.seed_dir else None
    return ClinicStore(
        seed_dir=seed_dir,
        summary_cache_ttl_seconds=settings.store.summary_cache_ttl_seconds,
    )


def get_patient_repository() -> PatientRepository:
    return MemoryPatientRepository(get_clinic_store())


def get_note_repository() -> NoteRepository:
    return MemoryNoteRepository(get_clinic_store())


def get_appointment_repository() -> AppointmentRepository:
    return MemoryAppointmentRepository(get_clinic_store())


def get_alert_repository() -> AlertRepository:
    return MemoryAlertRepository(get_clinic_store())


def get_followup_repository() -> FollowUpRepository:
    return MemoryFollowUpRepository(get_clinic_store())


def get_summary_cache() -> SummaryCache:
    return get_clinic_store().summary_cache


@lru_cache()
def get_tts_service() -> TTSService:
    """Get text-to-speech service instance."""
    return ElevenLabsTTSService()


@lru_cache()
def get_voice_agent_service() -> VoiceAgentService:
    return ElevenLabsVoiceAgentService()


@lru_cache()
def get_email_service() -> EmailService:
    return ResendEmailService()


PatientRepositoryDep = Annotated[PatientRepository, Depends(get_patient_repository)]
NoteRepositoryDep = Annotated[NoteRepository, Depends(get_note_repository)]
AppointmentRepositoryDep = Annotated[AppointmentRepository, Depends(get_appointment_repository)]
AlertRepositoryDep = Annotated[AlertRepository, Depends(get_alert_repository)]
FollowUpRepositoryDep = Annotated[FollowUpRepository, Depends(get_followup_repository)]
SummaryCacheDep = Annotated[SummaryCache, Depends(get_summary_cache)]
TTSServiceDep = Annotated[TTSService, Depends(get_tts_service)]
VoiceAgentServiceDep = Annotated[VoiceAgentService, Depends(get_voice_agent_service)]
EmailServiceDep = Annotated[EmailService, Depends(get_email_service)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
