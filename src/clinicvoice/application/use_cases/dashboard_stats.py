"""Dashboard counters and the analytics report."""

from datetime import date
from typing import Optional

from ...core.utils.datetime_utils import parse_date, week_bounds
from ..dto.clinic_dto import DashboardStats
from ..ports.repositories.appointment_repo import AppointmentRepository
from ..ports.repositories.patient_repo import PatientRepository
from ..services.analytics import AnalyticsReport, Granularity, build_report


class GetDashboardStatsUseCase:
    """Appointments today, appointments this Monday-to-Sunday week, roster size."""

    def __init__(self, patient_repository: PatientRepository, appointment_repository: AppointmentRepository):
        self._patient_repository = patient_repository
        self._appointment_repository = appointment_repository

    async def execute(self, today: Optional[date] = None) -> DashboardStats:
        today = today or date.today()
        monday, sunday = week_bounds(today)
        appointments = await self._appointment_repository.find_all()

        today_count = 0
        week_count = 0
        for appointment in appointments:
            day = parse_date(appointment.date)
            if day is None:
                continue
            if day == today:
                today_count += 1
            if monday <= day <= sunday:
                week_count += 1

        return DashboardStats(
            todayCount=today_count,
            weekCount=week_count,
            patientCount=await self._patient_repository.count(),
        )


class GetAnalyticsUseCase:
    def __init__(self, patient_repository: PatientRepository, appointment_repository: AppointmentRepository):
        self._patient_repository = patient_repository
        self._appointment_repository = appointment_repository

    async def execute(self, granularity: Granularity = Granularity.DAY) -> AnalyticsReport:
        appointments = await self._appointment_repository.find_all()
        return build_report(appointments, await self._patient_repository.count(), granularity)
