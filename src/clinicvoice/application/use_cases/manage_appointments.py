"""Appointment calendar use cases: filtered listing and status changes."""

import logging
from typing import List, Optional

from ...core.utils.datetime_utils import parse_clock_time, parse_date
from ...domain.entities.appointment import Appointment
from ...domain.enums.clinical import AppointmentStatus
from ...domain.errors import AppointmentNotFoundError, SlotUnavailableError
from ..ports.repositories.appointment_repo import AppointmentRepository
from ..ports.repositories.summary_cache import SummaryCache
from ..services.scheduling import check_slot

logger = logging.getLogger(__name__)


class ListAppointmentsUseCase:
    def __init__(self, appointment_repository: AppointmentRepository):
        self._appointment_repository = appointment_repository

    async def execute(
        self,
        date: Optional[str] = None,
        patient_id: Optional[str] = None,
        status: Optional[AppointmentStatus] = None,
    ) -> List[Appointment]:
        appointments = await self._appointment_repository.find_all()
        if date:
            appointments = [a for a in appointments if a.date == date]
        if patient_id:
            appointments = [a for a in appointments if a.patient_id == patient_id]
        if status:
            appointments = [a for a in appointments if a.status == status]
        return appointments


class UpdateAppointmentStatusUseCase:
    """Mark an appointment completed, cancelled or no-show (or back to scheduled)."""

    def __init__(self, appointment_repository: AppointmentRepository, summary_cache: SummaryCache):
        self._appointment_repository = appointment_repository
        self._summary_cache = summary_cache

    async def execute(self, appointment_id: str, status: AppointmentStatus) -> Appointment:
        appointment = await self._appointment_repository.find_by_id(appointment_id)
        if not appointment:
            raise AppointmentNotFoundError(appointment_id)

        previous = appointment.status
        if status == AppointmentStatus.SCHEDULED and previous != AppointmentStatus.SCHEDULED:
            await self._ensure_slot_free(appointment)
        appointment.status = status
        await self._appointment_repository.save(appointment)
        # Upcoming appointments are part of the summary text
        self._summary_cache.invalidate(appointment.patient_id)
        logger.info(f"Appointment {appointment_id} status {previous.value} -> {status.value}")
        return appointment

    async def _ensure_slot_free(self, appointment: Appointment) -> None:
        """Reinstating an appointment must not double-book its slot."""
        day = parse_date(appointment.date)
        slot = parse_clock_time(appointment.time)
        if day is None or slot is None:
            return
        others = [
            a for a in await self._appointment_repository.find_by_date(day.isoformat())
            if a.id != appointment.id
        ]
        availability = check_slot(day, slot, others)
        if not availability.available:
            raise SlotUnavailableError(
                appointment.date, appointment.time, availability.reason or "", availability.alternatives
            )
