"""List Patients use case: the roster with visit and alert rollups."""

from typing import List

from ..dto.clinic_dto import AlertCounts, PatientRosterEntry
from ..ports.repositories.alert_repo import AlertRepository
from ..ports.repositories.note_repo import NoteRepository
from ..ports.repositories.patient_repo import PatientRepository


class ListPatientsUseCase:
    """Use case for the patient roster screen."""

    def __init__(
        self,
        patient_repository: PatientRepository,
        note_repository: NoteRepository,
        alert_repository: AlertRepository,
    ):
        self._patient_repository = patient_repository
        self._note_repository = note_repository
        self._alert_repository = alert_repository

    async def execute(self) -> List[PatientRosterEntry]:
        roster = []
        for patient in await self._patient_repository.find_all():
            notes = await self._note_repository.find_by_patient(patient.id)
            alerts = await self._alert_repository.find_by_patient(patient.id)
            roster.append(
                PatientRosterEntry(
                    patient=patient,
                    last_visit=notes[0].date if notes else None,
                    total_notes=len(notes),
                    alert_counts=AlertCounts.from_alerts(alerts),
                )
            )
        return roster
