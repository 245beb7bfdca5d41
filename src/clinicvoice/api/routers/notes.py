"""
SOAP note and summary endpoints called by the voice agent.
"""

import logging

from fastapi import APIRouter, Request, status

from ...application.dto.clinic_dto import SaveNoteRequest as SaveNoteCommand
from ...application.use_cases.save_note import SaveNoteUseCase
from ...application.use_cases.summarize_history import SummarizeHistoryUseCase
from ...domain.errors import InvalidNoteError
from ...domain.errors import PatientNotFoundError as DomainPatientNotFoundError
from ..deps import AppointmentRepositoryDep, NoteRepositoryDep, PatientRepositoryDep, SummaryCacheDep
from ..errors import BadRequestError, PatientNotFoundError
from ..schemas.common import ApiResponse
from ..schemas.medical import SaveNoteOut, SaveNoteRequest, SummaryOut
from ..schemas.patient import PatientIdRequest
from ..utils.responses import ok

router = APIRouter(prefix="/agent", tags=["notes"])
logger = logging.getLogger("clinicvoice")


@router.post(
    "/save-note",
    response_model=ApiResponse[SaveNoteOut],
    status_code=status.HTTP_200_OK,
)
async def save_note(
    payload: SaveNoteRequest,
    request: Request,
    patient_repo: PatientRepositoryDep,
    note_repo: NoteRepositoryDep,
    summary_cache: SummaryCacheDep,
):
    """Save a SOAP note dated today for the patient."""
    use_case = SaveNoteUseCase(patient_repo, note_repo, summary_cache)
    command = SaveNoteCommand(
        patient_id=payload.patient_id,
        subjective=payload.subjective,
        objective=payload.objective or "",
        assessment=payload.assessment,
        plan=payload.plan or "",
        mode=payload.mode,
    )
    try:
        result = await use_case.execute(command)
    except InvalidNoteError as e:
        raise BadRequestError(e.message, e.details)
    except DomainPatientNotFoundError:
        raise PatientNotFoundError(payload.patient_id)
    return ok(request, data=SaveNoteOut.model_validate(result), message=result.message)


@router.post("/summarize-history", response_model=ApiResponse[SummaryOut])
async def summarize_history(
    payload: PatientIdRequest,
    request: Request,
    patient_repo: PatientRepositoryDep,
    note_repo: NoteRepositoryDep,
    appointment_repo: AppointmentRepositoryDep,
    summary_cache: SummaryCacheDep,
):
    """
    Verbal-handoff summary of a patient.

    Served from the per-patient cache while it is fresh; ``cached`` tells
    the caller which path was taken.
    """
    use_case = SummarizeHistoryUseCase(patient_repo, note_repo, appointment_repo, summary_cache)
    try:
        summary = await use_case.execute(payload.patient_id)
    except DomainPatientNotFoundError:
        raise PatientNotFoundError(payload.patient_id)
    return ok(request, data=SummaryOut.model_validate(summary), message="OK")
