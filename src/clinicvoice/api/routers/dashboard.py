"""
Dashboard counters and appointment analytics.
"""

from fastapi import APIRouter, Query, Request

from ...application.services.analytics import Granularity
from ...application.use_cases.dashboard_stats import GetAnalyticsUseCase, GetDashboardStatsUseCase
from ..deps import AppointmentRepositoryDep, PatientRepositoryDep
from ..schemas.common import ApiResponse
from ..schemas.scheduling import AnalyticsOut, DashboardStatsOut
from ..utils.responses import ok

router = APIRouter(tags=["dashboard"])


@router.get("/stats", response_model=ApiResponse[DashboardStatsOut])
async def get_stats(
    request: Request,
    patient_repo: PatientRepositoryDep,
    appointment_repo: AppointmentRepositoryDep,
):
    stats = await GetDashboardStatsUseCase(patient_repo, appointment_repo).execute()
    return ok(request, data=DashboardStatsOut.model_validate(stats), message="OK")


@router.get("/analytics", response_model=ApiResponse[AnalyticsOut])
async def get_analytics(
    request: Request,
    patient_repo: PatientRepositoryDep,
    appointment_repo: AppointmentRepositoryDep,
    granularity: Granularity = Query(Granularity.DAY, description="Volume bucket size"),
):
    """Volume by period, type, language and hour, plus completion and no-show rates."""
    report = await GetAnalyticsUseCase(patient_repo, appointment_repo).execute(granularity)
    return ok(request, data=AnalyticsOut.model_validate(report.to_dict()), message="OK")
