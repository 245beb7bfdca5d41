"""Save Note use case: store a dictated SOAP note for today's visit."""

import logging
from datetime import date
from typing import Optional

from ...core.utils.datetime_utils import iso_timestamp, today_str
from ...domain.entities.note import ClinicalNote, SOAPNote
from ...domain.errors import InvalidNoteError, PatientNotFoundError
from ...domain.value_objects.entity_id import new_note_id
from ..dto.clinic_dto import SaveNoteRequest, SaveNoteResponse
from ..ports.repositories.note_repo import NoteRepository
from ..ports.repositories.patient_repo import PatientRepository
from ..ports.repositories.summary_cache import SummaryCache

logger = logging.getLogger(__name__)


class SaveNoteUseCase:
    """Use case for saving a SOAP note and dropping the patient's stale summary."""

    def __init__(
        self,
        patient_repository: PatientRepository,
        note_repository: NoteRepository,
        summary_cache: SummaryCache,
    ):
        self._patient_repository = patient_repository
        self._note_repository = note_repository
        self._summary_cache = summary_cache

    async def execute(self, request: SaveNoteRequest, today: Optional[date] = None) -> SaveNoteResponse:
        missing = [
            name
            for name in ("patient_id", "subjective", "assessment")
            if not (getattr(request, name) or "").strip()
        ]
        if missing:
            raise InvalidNoteError(missing)

        patient = await self._patient_repository.find_by_id(request.patient_id)
        if not patient:
            raise PatientNotFoundError(request.patient_id)

        soap = SOAPNote(
            subjective=request.subjective.strip(),
            objective=(request.objective or "").strip(),
            assessment=request.assessment.strip(),
            plan=(request.plan or "").strip(),
        )
        note = ClinicalNote(
            id=new_note_id(),
            patient_id=patient.id,
            date=today_str(today),
            mode=request.mode,
            soap=soap,
            created_at=iso_timestamp(),
        )
        await self._note_repository.save(note)
        self._summary_cache.invalidate(patient.id)
        logger.info(f"Saved note {note.id} for patient={patient.id} mode={note.mode.value}")

        return SaveNoteResponse(
            note_id=note.id,
            soap=soap,
            message=f"SOAP note saved for {patient.name}",
        )
