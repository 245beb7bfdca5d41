"""
Patient repository interface for data access abstraction.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ....domain.entities.patient import Patient


class PatientRepository(ABC):
    """Abstract repository for patient data access."""

    @abstractmethod
    async def find_all(self) -> List[Patient]:
        """Return the full roster in insertion order."""
        pass

    @abstractmethod
    async def find_by_id(self, patient_id: str) -> Optional[Patient]:
        """Find a patient by ID."""
        pass

    @abstractmethod
    async def count(self) -> int:
        pass
