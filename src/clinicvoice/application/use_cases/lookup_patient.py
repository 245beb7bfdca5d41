"""Lookup Patient use case used by the voice agent to resolve a spoken name."""

import logging
from typing import Optional

from ..dto.clinic_dto import PatientLookupResult
from ..ports.repositories.alert_repo import AlertRepository
from ..ports.repositories.note_repo import NoteRepository
from ..ports.repositories.patient_repo import PatientRepository

logger = logging.getLogger(__name__)


class LookupPatientUseCase:
    """Resolve a name to one patient: substring match first, then any-word match."""

    def __init__(
        self,
        patient_repository: PatientRepository,
        note_repository: NoteRepository,
        alert_repository: AlertRepository,
    ):
        self._patient_repository = patient_repository
        self._note_repository = note_repository
        self._alert_repository = alert_repository

    async def execute(self, name: Optional[str]) -> PatientLookupResult:
        patients = await self._patient_repository.find_all()
        query = (name or "").strip()
        if not query:
            return PatientLookupResult(found=False, available_patients=patients)

        matches = [p for p in patients if p.matches_name(query)]
        if not matches:
            matches = [p for p in patients if p.matches_any_word(query)]

        if not matches:
            logger.info(f"No patient matched lookup query '{query}'")
            return PatientLookupResult(
                found=False,
                message=(
                    f'No patient found matching "{query}". '
                    f"Available patients: {', '.join(p.name for p in patients)}"
                ),
                available_patients=patients,
            )

        match = matches[0]
        notes = await self._note_repository.find_by_patient(match.id)
        alerts = await self._alert_repository.find_by_patient(match.id)
        return PatientLookupResult(
            found=True,
            patient=match,
            total_notes=len(notes),
            last_visit=notes[0].date if notes else None,
            active_alerts=len(alerts),
        )
