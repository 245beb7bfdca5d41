"""Summarize History use case with the per-patient summary cache."""

import logging

from ...core.utils.datetime_utils import iso_timestamp
from ...domain.errors import PatientNotFoundError
from ..dto.clinic_dto import SummaryResponse
from ..ports.repositories.appointment_repo import AppointmentRepository
from ..ports.repositories.note_repo import NoteRepository
from ..ports.repositories.patient_repo import PatientRepository
from ..ports.repositories.summary_cache import SummaryCache
from ..services.patient_summary import build_patient_summary

logger = logging.getLogger(__name__)


class SummarizeHistoryUseCase:
    """Serve a cached summary when one is live; otherwise build and cache it."""

    def __init__(
        self,
        patient_repository: PatientRepository,
        note_repository: NoteRepository,
        appointment_repository: AppointmentRepository,
        summary_cache: SummaryCache,
    ):
        self._patient_repository = patient_repository
        self._note_repository = note_repository
        self._appointment_repository = appointment_repository
        self._summary_cache = summary_cache

    async def execute(self, patient_id: str) -> SummaryResponse:
        patient = await self._patient_repository.find_by_id(patient_id)
        if not patient:
            raise PatientNotFoundError(patient_id)

        entry = self._summary_cache.get(patient_id)
        cached = entry is not None
        if entry is None:
            notes = await self._note_repository.find_by_patient(patient_id)
            appointments = await self._appointment_repository.find_by_patient(patient_id)
            entry = self._summary_cache.put(build_patient_summary(patient, notes, appointments))
            logger.info(f"Generated summary for patient={patient_id} visits={entry.summary.total_visits}")
        else:
            logger.debug(f"Summary cache hit for patient={patient_id}")

        summary = entry.summary
        return SummaryResponse(
            patient_name=summary.patient_name,
            summary_text=summary.summary_text,
            key_concerns=list(summary.key_concerns),
            last_visit_date=summary.last_visit_date,
            total_visits=summary.total_visits,
            generated_at=iso_timestamp(entry.generated_at),
            cached=cached,
        )
