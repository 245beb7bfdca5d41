"""
Appointment calendar endpoints and the voice agent's scheduling tools.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Query, Request

from ...application.dto.clinic_dto import BookAppointmentRequest as BookAppointmentCommand
from ...application.dto.clinic_dto import ScheduleCheckRequest
from ...application.use_cases.book_appointment import BookAppointmentUseCase
from ...application.use_cases.check_schedule import CheckScheduleUseCase
from ...application.use_cases.manage_appointments import (
    ListAppointmentsUseCase,
    UpdateAppointmentStatusUseCase,
)
from ...domain.enums.clinical import AppointmentStatus
from ...domain.errors import AppointmentNotFoundError as DomainAppointmentNotFoundError
from ...domain.errors import InvalidScheduleRequestError, SlotUnavailableError
from ..deps import AppointmentRepositoryDep, PatientRepositoryDep, SummaryCacheDep
from ..errors import AppointmentNotFoundError, BadRequestError, ConflictError
from ..schemas.common import ApiResponse
from ..schemas.scheduling import (
    AppointmentOut,
    BookAppointmentOut,
    BookAppointmentRequest,
    CheckScheduleRequest,
    ScheduleCheckOut,
    UpdateAppointmentStatusRequest,
)
from ..utils.responses import ok

router = APIRouter(tags=["appointments"])
logger = logging.getLogger("clinicvoice")


@router.get("/appointments", response_model=ApiResponse[List[AppointmentOut]])
async def list_appointments(
    request: Request,
    appointment_repo: AppointmentRepositoryDep,
    date: Optional[str] = Query(None, description="Only this day (YYYY-MM-DD)"),
    patient_id: Optional[str] = Query(None, description="Only this patient"),
    status: Optional[AppointmentStatus] = Query(None, description="Only this status"),
):
    use_case = ListAppointmentsUseCase(appointment_repo)
    appointments = await use_case.execute(date=date, patient_id=patient_id, status=status)
    data = [AppointmentOut.model_validate(a) for a in appointments]
    return ok(request, data=data, message=f"{len(data)} appointments")


@router.patch("/appointments/{appointment_id}", response_model=ApiResponse[AppointmentOut])
async def update_appointment_status(
    appointment_id: str,
    payload: UpdateAppointmentStatusRequest,
    request: Request,
    appointment_repo: AppointmentRepositoryDep,
    summary_cache: SummaryCacheDep,
):
    """Mark an appointment completed, cancelled, no-show or scheduled again (409 if its slot was rebooked)."""
    use_case = UpdateAppointmentStatusUseCase(appointment_repo, summary_cache)
    try:
        appointment = await use_case.execute(appointment_id, payload.status)
    except DomainAppointmentNotFoundError:
        raise AppointmentNotFoundError(appointment_id)
    except SlotUnavailableError as e:
        raise ConflictError(e.message, e.details, code=e.error_code)
    return ok(request, data=AppointmentOut.model_validate(appointment), message="Updated")


@router.post("/agent/check-schedule", response_model=ApiResponse[ScheduleCheckOut])
async def check_schedule(
    payload: CheckScheduleRequest,
    request: Request,
    appointment_repo: AppointmentRepositoryDep,
):
    """
    Check whether a slot can be booked.

    Unavailable slots come back with the reason and up to three nearby
    free slots on the same day.
    """
    use_case = CheckScheduleUseCase(appointment_repo)
    try:
        result = await use_case.execute(ScheduleCheckRequest(date=payload.date, time=payload.time))
    except InvalidScheduleRequestError as e:
        raise BadRequestError(e.message, e.details)
    return ok(request, data=ScheduleCheckOut.model_validate(result), message=result.message)


@router.post("/agent/book-appointment", response_model=ApiResponse[BookAppointmentOut])
async def book_appointment(
    payload: BookAppointmentRequest,
    request: Request,
    patient_repo: PatientRepositoryDep,
    appointment_repo: AppointmentRepositoryDep,
    summary_cache: SummaryCacheDep,
):
    use_case = BookAppointmentUseCase(patient_repo, appointment_repo, summary_cache)
    command = BookAppointmentCommand(
        patient_id=payload.patient_id,
        date=payload.date,
        time=payload.time,
        reason=payload.reason,
        type=payload.type,
        patient_name=payload.patient_name,
        language=payload.language,
    )
    try:
        result = await use_case.execute(command)
    except InvalidScheduleRequestError as e:
        raise BadRequestError(e.message, e.details)
    except SlotUnavailableError as e:
        raise ConflictError(e.message, e.details, code=e.error_code)

    appointment = result.appointment
    data = BookAppointmentOut(
        appointment_id=appointment.id,
        patient_name=appointment.patient_name,
        date=appointment.date,
        time=appointment.time,
        type=appointment.type,
        reason=appointment.reason,
        message=result.message,
        appointment=AppointmentOut.model_validate(appointment),
    )
    return ok(request, data=data, message=result.message)
