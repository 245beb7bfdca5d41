"""
In-memory implementation of AlertRepository.
"""

from typing import List

from clinicvoice.application.ports.repositories.alert_repo import AlertRepository
from clinicvoice.domain.entities.alert import PatternAlert

from ..store import ClinicStore


class MemoryAlertRepository(AlertRepository):
    def __init__(self, store: ClinicStore):
        self._store = store

    async def find_all(self) -> List[PatternAlert]:
        return list(self._store.alerts)

    async def find_by_patient(self, patient_id: str) -> List[PatternAlert]:
        return [a for a in self._store.alerts if a.patient_id == patient_id]
