"""
Patient roster endpoints and the voice agent's patient lookup tools.
"""

import logging
from dataclasses import asdict
from typing import List, Union

from fastapi import APIRouter, Request

from ...application.use_cases.get_patient_detail import GetPatientDetailUseCase
from ...application.use_cases.get_patient_history import GetPatientHistoryUseCase
from ...application.use_cases.list_patients import ListPatientsUseCase
from ...application.use_cases.lookup_patient import LookupPatientUseCase
from ...domain.entities.patient import Patient
from ...domain.errors import PatientNotFoundError as DomainPatientNotFoundError
from ..deps import AlertRepositoryDep, AppointmentRepositoryDep, NoteRepositoryDep, PatientRepositoryDep
from ..errors import PatientNotFoundError
from ..schemas.common import ApiResponse
from ..schemas.patient import (
    LookupPatientRequest,
    PatientBriefOut,
    PatientDetailOut,
    PatientHistoryOut,
    PatientIdRequest,
    PatientListOut,
    PatientMatchOut,
    PatientNoMatchOut,
    PatientRosterOut,
)
from ..utils.responses import ok

router = APIRouter(tags=["patients"])
logger = logging.getLogger("clinicvoice")


def _brief(patient: Patient, with_conditions: bool = False) -> PatientBriefOut:
    return PatientBriefOut(
        patient_id=patient.id,
        name=patient.name,
        age=patient.age,
        gender=patient.gender,
        conditions=list(patient.chronic_conditions) if with_conditions else None,
    )


@router.get("/patients", response_model=ApiResponse[List[PatientRosterOut]])
async def list_patients(
    request: Request,
    patient_repo: PatientRepositoryDep,
    note_repo: NoteRepositoryDep,
    alert_repo: AlertRepositoryDep,
):
    """Roster with last visit date, note count and alert counts per patient."""
    use_case = ListPatientsUseCase(patient_repo, note_repo, alert_repo)
    roster = await use_case.execute()
    data = [
        PatientRosterOut.model_validate(
            {
                **entry.patient.to_dict(),
                "last_visit": entry.last_visit,
                "total_notes": entry.total_notes,
                "alert_counts": asdict(entry.alert_counts),
            }
        )
        for entry in roster
    ]
    return ok(request, data=data, message=f"{len(data)} patients")


@router.get("/patients/{patient_id}", response_model=ApiResponse[PatientDetailOut])
async def get_patient(
    patient_id: str,
    request: Request,
    patient_repo: PatientRepositoryDep,
    note_repo: NoteRepositoryDep,
    appointment_repo: AppointmentRepositoryDep,
    alert_repo: AlertRepositoryDep,
):
    """Patient with notes (newest first), appointments and pattern alerts."""
    use_case = GetPatientDetailUseCase(patient_repo, note_repo, appointment_repo, alert_repo)
    try:
        detail = await use_case.execute(patient_id)
    except DomainPatientNotFoundError:
        raise PatientNotFoundError(patient_id)
    return ok(request, data=PatientDetailOut.model_validate(detail), message="OK")


@router.post(
    "/agent/lookup-patient",
    response_model=ApiResponse[Union[PatientMatchOut, PatientNoMatchOut, PatientListOut]],
)
async def lookup_patient(
    payload: LookupPatientRequest,
    request: Request,
    patient_repo: PatientRepositoryDep,
    note_repo: NoteRepositoryDep,
    alert_repo: AlertRepositoryDep,
):
    """
    Resolve a spoken name to a patient.

    Without a name the whole roster is returned. A name is matched as a
    case-insensitive substring, then word by word; with no match the
    available patients are listed so the agent can ask again.
    """
    use_case = LookupPatientUseCase(patient_repo, note_repo, alert_repo)
    result = await use_case.execute(payload.name)

    if payload.name is None:
        patients = [_brief(p, with_conditions=True) for p in result.available_patients]
        return ok(request, data=PatientListOut(patients=patients, total=len(patients)), message="OK")

    if not result.found:
        return ok(
            request,
            data=PatientNoMatchOut(
                message=result.message,
                available_patients=[_brief(p) for p in result.available_patients],
            ),
            message="No match",
        )

    patient = result.patient
    data = PatientMatchOut(
        patient_id=patient.id,
        name=patient.name,
        age=patient.age,
        gender=patient.gender,
        blood_group=patient.blood_group,
        allergies=list(patient.allergies),
        chronic_conditions=list(patient.chronic_conditions),
        current_medications=[asdict(m) for m in patient.current_medications],
        total_notes=result.total_notes,
        last_visit=result.last_visit,
        active_alerts=result.active_alerts,
    )
    return ok(request, data=data, message="OK")


@router.post("/agent/get-patient-history", response_model=ApiResponse[PatientHistoryOut])
async def get_patient_history(
    payload: PatientIdRequest,
    request: Request,
    patient_repo: PatientRepositoryDep,
    note_repo: NoteRepositoryDep,
    appointment_repo: AppointmentRepositoryDep,
):
    use_case = GetPatientHistoryUseCase(patient_repo, note_repo, appointment_repo)
    try:
        history = await use_case.execute(payload.patient_id)
    except DomainPatientNotFoundError:
        raise PatientNotFoundError(payload.patient_id)
    return ok(request, data=PatientHistoryOut.model_validate(history), message="OK")
