"""Check Patterns use case: pattern alerts for one patient or the whole clinic."""

from typing import Optional

from ...domain.enums.clinical import AlertSeverity
from ..dto.clinic_dto import PatternCheckResponse
from ..ports.repositories.alert_repo import AlertRepository

ALL_PATIENTS = "all"


class CheckPatternsUseCase:
    def __init__(self, alert_repository: AlertRepository):
        self._alert_repository = alert_repository

    async def execute(self, patient_id: Optional[str] = None) -> PatternCheckResponse:
        if patient_id and patient_id != ALL_PATIENTS:
            alerts = await self._alert_repository.find_by_patient(patient_id)
        else:
            alerts = await self._alert_repository.find_all()

        return PatternCheckResponse(
            alerts=alerts,
            total=len(alerts),
            critical=sum(1 for a in alerts if a.severity == AlertSeverity.CRITICAL),
            warnings=sum(1 for a in alerts if a.severity == AlertSeverity.WARNING),
            info=sum(1 for a in alerts if a.severity == AlertSeverity.INFO),
        )
