"""Get Patient History use case."""

from ...domain.errors import PatientNotFoundError
from ..dto.clinic_dto import PatientHistory
from ..ports.repositories.appointment_repo import AppointmentRepository
from ..ports.repositories.note_repo import NoteRepository
from ..ports.repositories.patient_repo import PatientRepository


class GetPatientHistoryUseCase:
    def __init__(
        self,
        patient_repository: PatientRepository,
        note_repository: NoteRepository,
        appointment_repository: AppointmentRepository,
    ):
        self._patient_repository = patient_repository
        self._note_repository = note_repository
        self._appointment_repository = appointment_repository

    async def execute(self, patient_id: str) -> PatientHistory:
        patient = await self._patient_repository.find_by_id(patient_id)
        if not patient:
            raise PatientNotFoundError(patient_id)

        notes = await self._note_repository.find_by_patient(patient_id)
        return PatientHistory(
            patient=patient,
            notes=notes,
            appointments=await self._appointment_repository.find_by_patient(patient_id),
            total_visits=len(notes),
            last_visit=notes[0].date if notes else None,
        )
