"""
In-memory implementation of AppointmentRepository.
"""

from typing import List, Optional

from clinicvoice.application.ports.repositories.appointment_repo import AppointmentRepository
from clinicvoice.domain.entities.appointment import Appointment

from ..store import ClinicStore


class MemoryAppointmentRepository(AppointmentRepository):
    """Calendar backed by the shared ClinicStore."""

    def __init__(self, store: ClinicStore):
        self._store = store

    async def save(self, appointment: Appointment) -> Appointment:
        for index, existing in enumerate(self._store.appointments):
            if existing.id == appointment.id:
                self._store.appointments[index] = appointment
                return appointment
        self._store.appointments.append(appointment)
        return appointment

    async def find_all(self) -> List[Appointment]:
        return list(self._store.appointments)

    async def find_by_id(self, appointment_id: str) -> Optional[Appointment]:
        return next((a for a in self._store.appointments if a.id == appointment_id), None)

    async def find_by_patient(self, patient_id: str) -> List[Appointment]:
        return [a for a in self._store.appointments if a.patient_id == patient_id]

    async def find_by_date(self, date: str) -> List[Appointment]:
        return [a for a in self._store.appointments if a.date == date]
