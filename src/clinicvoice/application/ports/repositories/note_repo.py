"""
Clinical note repository interface.
"""

from abc import ABC, abstractmethod
from typing import List

from ....domain.entities.note import ClinicalNote


class NoteRepository(ABC):
    """Abstract repository for clinical notes."""

    @abstractmethod
    async def save(self, note: ClinicalNote) -> ClinicalNote:
        """Append a note."""
        pass

    @abstractmethod
    async def find_all(self) -> List[ClinicalNote]:
        pass

    @abstractmethod
    async def find_by_patient(self, patient_id: str) -> List[ClinicalNote]:
        """Notes for one patient, newest visit date first."""
        pass
