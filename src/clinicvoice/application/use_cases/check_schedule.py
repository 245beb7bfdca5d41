"""Check Schedule use case: is a date and time bookable?"""

import logging

from ...core.utils.datetime_utils import parse_clock_time, parse_date
from ...domain.errors import InvalidScheduleRequestError
from ..dto.clinic_dto import ScheduleCheckRequest, ScheduleCheckResponse
from ..ports.repositories.appointment_repo import AppointmentRepository
from ..services.scheduling import check_slot

logger = logging.getLogger(__name__)


class CheckScheduleUseCase:
    def __init__(self, appointment_repository: AppointmentRepository):
        self._appointment_repository = appointment_repository

    async def execute(self, request: ScheduleCheckRequest) -> ScheduleCheckResponse:
        day = parse_date(request.date or "")
        if day is None:
            raise InvalidScheduleRequestError("date", request.date)
        slot = parse_clock_time(request.time or "")
        if slot is None:
            raise InvalidScheduleRequestError("time", request.time)

        appointments = await self._appointment_repository.find_by_date(day.isoformat())
        result = check_slot(day, slot, appointments)
        if result.available:
            message = f"The slot on {request.date} at {request.time} is available."
        else:
            message = f"The slot on {request.date} at {request.time} is not available: {result.reason}."
            if result.alternatives:
                message += f" Nearby open slots: {', '.join(result.alternatives)}."
        logger.debug(f"Schedule check {request.date} {request.time}: available={result.available}")

        return ScheduleCheckResponse(
            available=result.available,
            date=request.date,
            time=request.time,
            message=message,
            reason=result.reason,
            alternatives=result.alternatives,
        )
