"""
In-memory implementation of PatientRepository.
"""

from typing import List, Optional

from clinicvoice.application.ports.repositories.patient_repo import PatientRepository
from clinicvoice.domain.entities.patient import Patient

from ..store import ClinicStore


class MemoryPatientRepository(PatientRepository):
    """Patient roster backed by the shared ClinicStore."""

    def __init__(self, store: ClinicStore):
        self._store = store

    async def find_all(self) -> List[Patient]:
        return list(self._store.patients)

    async def find_by_id(self, patient_id: str) -> Optional[Patient]:
        return next((p for p in self._store.patients if p.id == patient_id), None)

    async def count(self) -> int:
        return len(self._store.patients)
