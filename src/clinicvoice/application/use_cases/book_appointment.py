"""Book Appointment use case."""

import logging

from ...core.utils.datetime_utils import iso_timestamp, parse_clock_time, parse_date
from ...domain.entities.appointment import Appointment
from ...domain.enums.clinical import AppointmentStatus
from ...domain.errors import InvalidScheduleRequestError, SlotUnavailableError
from ...domain.value_objects.entity_id import new_appointment_id
from ..dto.clinic_dto import BookAppointmentRequest, BookAppointmentResponse
from ..ports.repositories.appointment_repo import AppointmentRepository
from ..ports.repositories.patient_repo import PatientRepository
from ..ports.repositories.summary_cache import SummaryCache
from ..services.scheduling import check_slot

logger = logging.getLogger(__name__)


class BookAppointmentUseCase:
    """Put a new scheduled appointment on the calendar once the slot checks out.

    The patient does not have to be on the roster; the name falls back to the
    roster entry and then to "Unknown".
    """

    def __init__(
        self,
        patient_repository: PatientRepository,
        appointment_repository: AppointmentRepository,
        summary_cache: SummaryCache,
    ):
        self._patient_repository = patient_repository
        self._appointment_repository = appointment_repository
        self._summary_cache = summary_cache

    async def execute(self, request: BookAppointmentRequest) -> BookAppointmentResponse:
        day = parse_date(request.date)
        if day is None:
            raise InvalidScheduleRequestError("date", request.date)
        slot = parse_clock_time(request.time)
        if slot is None:
            raise InvalidScheduleRequestError("time", request.time)

        existing = await self._appointment_repository.find_by_date(day.isoformat())
        availability = check_slot(day, slot, existing)
        if not availability.available:
            raise SlotUnavailableError(
                request.date, request.time, availability.reason or "", availability.alternatives
            )

        patient = await self._patient_repository.find_by_id(request.patient_id)
        name = request.patient_name or (patient.name if patient else None) or "Unknown"
        language = request.language or (patient.language if patient else "")

        appointment = Appointment(
            id=new_appointment_id(),
            patient_id=request.patient_id,
            patient_name=name,
            date=day.isoformat(),
            time=request.time,
            type=request.type,
            reason=request.reason,
            status=AppointmentStatus.SCHEDULED,
            language=language,
            created_at=iso_timestamp(),
        )
        await self._appointment_repository.save(appointment)
        self._summary_cache.invalidate(request.patient_id)
        logger.info(f"Booked {appointment.id} for patient={request.patient_id} on {request.date} {request.time}")

        return BookAppointmentResponse(
            appointment=appointment,
            message=f"Appointment scheduled for {name} on {request.date} at {request.time}",
        )
