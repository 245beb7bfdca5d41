"""
Pattern alert and follow-up endpoints.
"""

import logging

from fastapi import APIRouter, Request

from ...application.dto.clinic_dto import SendFollowUpRequest as SendFollowUpCommand
from ...application.dto.clinic_dto import UpdateFollowUpRequest as UpdateFollowUpCommand
from ...application.use_cases.check_patterns import CheckPatternsUseCase
from ...application.use_cases.followups import GetFollowUpsUseCase, UpdateFollowUpUseCase
from ...application.use_cases.send_followup import SendFollowUpUseCase
from ...core.exceptions import EmailDeliveryError
from ...domain.errors import FollowUpNotFoundError as DomainFollowUpNotFoundError
from ...domain.errors import InvalidScheduleRequestError, NoDeliveryChannelError
from ...domain.errors import PatientNotFoundError as DomainPatientNotFoundError
from ..deps import (
    AlertRepositoryDep,
    EmailServiceDep,
    FollowUpRepositoryDep,
    PatientRepositoryDep,
    SettingsDep,
)
from ..errors import BadRequestError, DownstreamError, FollowUpNotFoundError, PatientNotFoundError
from ..schemas.common import ApiResponse
from ..schemas.followups import (
    ChannelDeliveryOut,
    FollowUpItemOut,
    FollowUpQueueOut,
    SendFollowUpOut,
    SendFollowUpRequest,
    UpdateFollowUpRequest,
)
from ..schemas.medical import CheckPatternsRequest, PatternCheckOut
from ..utils.responses import ok

router = APIRouter(tags=["followups"])
logger = logging.getLogger("clinicvoice")


@router.post("/agent/check-patterns", response_model=ApiResponse[PatternCheckOut])
async def check_patterns(
    payload: CheckPatternsRequest,
    request: Request,
    alert_repo: AlertRepositoryDep,
):
    """Pattern alerts for one patient, or for everyone when no patient (or "all") is given."""
    result = await CheckPatternsUseCase(alert_repo).execute(payload.patient_id)
    return ok(request, data=PatternCheckOut.model_validate(result), message="OK")


@router.post("/agent/get-followups", response_model=ApiResponse[FollowUpQueueOut])
async def get_followups(request: Request, followup_repo: FollowUpRepositoryDep):
    """Follow-up queue, overdue first and then by urgency."""
    queue = await GetFollowUpsUseCase(followup_repo).execute()
    return ok(request, data=FollowUpQueueOut.model_validate(queue), message="OK")


@router.patch("/followups/{patient_id}", response_model=ApiResponse[FollowUpItemOut])
async def update_followup(
    patient_id: str,
    payload: UpdateFollowUpRequest,
    request: Request,
    followup_repo: FollowUpRepositoryDep,
):
    """Mark a follow-up completed or move its due date."""
    command = UpdateFollowUpCommand(patient_id=patient_id, status=payload.status, due_date=payload.due_date)
    try:
        item = await UpdateFollowUpUseCase(followup_repo).execute(command)
    except DomainFollowUpNotFoundError:
        raise FollowUpNotFoundError(patient_id)
    except InvalidScheduleRequestError as e:
        raise BadRequestError(e.message, e.details)
    return ok(request, data=FollowUpItemOut.model_validate(item), message="Updated")


@router.post("/agent/send-followup", response_model=ApiResponse[SendFollowUpOut])
async def send_followup(
    payload: SendFollowUpRequest,
    request: Request,
    patient_repo: PatientRepositoryDep,
    followup_repo: FollowUpRepositoryDep,
    email_service: EmailServiceDep,
    settings: SettingsDep,
):
    """
    Send a follow-up message to a patient.

    Email goes out through the email API when requested and the patient has
    an address on file. SMS is queued for the front desk.
    """
    use_case = SendFollowUpUseCase(
        patient_repo, followup_repo, email_service, clinic_name=settings.email.clinic_name
    )
    command = SendFollowUpCommand(
        patient_id=payload.patient_id,
        message_type=payload.message_type,
        message=payload.message,
        send_email=payload.send_email,
        send_sms=payload.send_sms,
    )
    try:
        result = await use_case.execute(command)
    except DomainPatientNotFoundError:
        raise PatientNotFoundError(payload.patient_id)
    except NoDeliveryChannelError as e:
        raise BadRequestError(e.message, e.details)
    except EmailDeliveryError as e:
        logger.error(f"Follow-up email failed for patient={payload.patient_id}: {e.message}")
        raise DownstreamError("Failed to deliver follow-up email")

    record = result.record
    data = SendFollowUpOut(
        message_id=record.id,
        patient_name=record.patient_name,
        message_type=record.message_type,
        channels=result.channels,
        deliveries=[ChannelDeliveryOut.model_validate(d) for d in record.deliveries],
        subject=record.subject,
        body=record.body,
        sent_at=record.sent_at,
    )
    return ok(request, data=data, message=f"Follow-up sent to {record.patient_name}")
