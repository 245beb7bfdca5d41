"""Get Patient Detail use case."""

from ...domain.errors import PatientNotFoundError
from ..dto.clinic_dto import PatientDetail
from ..ports.repositories.alert_repo import AlertRepository
from ..ports.repositories.appointment_repo import AppointmentRepository
from ..ports.repositories.note_repo import NoteRepository
from ..ports.repositories.patient_repo import PatientRepository


class GetPatientDetailUseCase:
    """Use case for the patient detail page: notes, appointments and alerts."""

    def __init__(
        self,
        patient_repository: PatientRepository,
        note_repository: NoteRepository,
        appointment_repository: AppointmentRepository,
        alert_repository: AlertRepository,
    ):
        self._patient_repository = patient_repository
        self._note_repository = note_repository
        self._appointment_repository = appointment_repository
        self._alert_repository = alert_repository

    async def execute(self, patient_id: str) -> PatientDetail:
        patient = await self._patient_repository.find_by_id(patient_id)
        if not patient:
            raise PatientNotFoundError(patient_id)

        return PatientDetail(
            patient=patient,
            notes=await self._note_repository.find_by_patient(patient_id),
            appointments=await self._appointment_repository.find_by_patient(patient_id),
            alerts=await self._alert_repository.find_by_patient(patient_id),
        )
